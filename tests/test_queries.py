import pytest

from core import queries
from core.cat_store import CatDataset


@pytest.mark.parametrize("cat_id", [1, 2, 3, 4])
def test_get_by_id_returns_exactly_that_cat(dataset, cat_id):
    cat = queries.get_by_id(dataset, cat_id)

    assert cat is not None
    assert cat.id == cat_id
    assert [c for c in dataset.all() if c.id == cat_id] == [cat]


def test_get_by_id_unknown_returns_none(dataset):
    assert queries.get_by_id(dataset, 999) is None


def test_list_all_is_ordered_and_idempotent(dataset):
    first = queries.list_all(dataset)
    second = queries.list_all(dataset)

    assert [cat.id for cat in first] == [1, 2, 3, 4]
    assert first == second


def test_list_all_result_is_a_copy(dataset):
    result = queries.list_all(dataset)
    result.clear()
    assert len(queries.list_all(dataset)) == 4


def test_list_all_on_empty_dataset():
    assert queries.list_all(CatDataset()) == []


def test_search_by_breed_ignores_case(dataset):
    lower = queries.search_by_breed(dataset, "persian")
    title = queries.search_by_breed(dataset, "Persian")
    upper = queries.search_by_breed(dataset, "PERSIAN")

    assert lower == title == upper
    assert [cat.name for cat in lower] == ["Shiro"]


def test_search_by_breed_matches_substrings(dataset):
    assert [cat.id for cat in queries.search_by_breed(dataset, "tabby")] == [4]
    assert [cat.id for cat in queries.search_by_breed(dataset, "ca")] == [1, 3]


def test_search_by_breed_no_match_is_empty(dataset):
    assert queries.search_by_breed(dataset, "zzz") == []


def test_search_by_breed_empty_query_matches_everything(dataset):
    assert queries.search_by_breed(dataset, "") == queries.list_all(dataset)


def test_get_indoor_returns_indoor_cats_in_order(dataset):
    indoor = queries.get_indoor(dataset)

    assert [cat.id for cat in indoor] == [1, 2, 4]
    assert all(cat.is_indoor for cat in indoor)


def test_get_indoor_with_no_indoor_cats(outdoor_only_dataset):
    assert queries.get_indoor(outdoor_only_dataset) == []
