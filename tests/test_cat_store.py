import dataclasses

import pytest

from core.cat_store import SEED_CATS, CatDataset, load_seed_dataset
from core.models import Cat


def _cat(cat_id: int, **overrides) -> Cat:
    fields = dict(id=cat_id, name=f"Cat {cat_id}", age=1, breed="Mixed",
                  color="Grey", is_indoor=True, favorite_toy="String")
    fields.update(overrides)
    return Cat(**fields)


def test_seed_dataset_has_four_cats_in_insertion_order():
    dataset = load_seed_dataset()

    assert [cat.id for cat in dataset.all()] == [1, 2, 3, 4]
    assert [cat.name for cat in dataset.all()] == ["Mike", "Shiro", "Kuro", "Chatora"]
    assert len(dataset) == 4


def test_all_returns_an_immutable_view():
    dataset = load_seed_dataset()
    view = dataset.all()

    assert isinstance(view, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        view[0].name = "Changed"
    assert dataset.all()[0].name == "Mike"


def test_iteration_matches_all():
    dataset = load_seed_dataset()
    assert list(dataset) == list(dataset.all())


def test_empty_dataset_is_allowed():
    dataset = CatDataset()
    assert dataset.all() == ()
    assert len(dataset) == 0


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError, match="Duplicate cat id 1"):
        CatDataset([_cat(1), _cat(1)])


@pytest.mark.parametrize(
    "bad_cat, message",
    [
        (_cat(0), "positive"),
        (_cat(-3), "positive"),
        (_cat(5, name=""), "empty name"),
        (_cat(6, age=-1), "negative age"),
    ],
)
def test_invalid_records_are_rejected(bad_cat, message):
    with pytest.raises(ValueError, match=message):
        CatDataset([bad_cat])


def test_seed_dataset_holds_the_seed_table():
    assert load_seed_dataset().all() == SEED_CATS
