# =============================================================================
# core/cat_store.py  —  The Cat Dataset (seed data + read-only accessor)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the authoritative set of cats.  The set is built once, at process
#   startup, from the compiled-in seed table below and then only ever read.
#
# WHY A CLASS AND NOT A MODULE-LEVEL LIST?
#   The router and the tests each get their own CatDataset instance.  A test
#   can build an empty or custom dataset without monkeypatching globals, and
#   swapping the seed table for a real backing store later only changes
#   this module.  The query layer only ever calls `all()`.
#
# IMMUTABILITY:
#   Records are frozen dataclasses and `all()` hands out a tuple.  Nothing a
#   caller does with the return value can change what the next caller sees.
# =============================================================================

from collections.abc import Iterable, Iterator

from core.models import Cat


# -----------------------------------------------------------------------------
# Seed data
# -----------------------------------------------------------------------------
# Insertion order matters: list_all_cats and get_indoor_cats return records
# in exactly this order.
# -----------------------------------------------------------------------------
SEED_CATS: tuple[Cat, ...] = (
    Cat(
        id=1,
        name="Mike",
        age=3,
        breed="Calico",
        color="Calico",
        is_indoor=True,
        favorite_toy="Mouse toy",
    ),
    Cat(
        id=2,
        name="Shiro",
        age=5,
        breed="Persian",
        color="White",
        is_indoor=True,
        favorite_toy="Yarn ball",
    ),
    Cat(
        id=3,
        name="Kuro",
        age=2,
        breed="Black cat",
        color="Black",
        is_indoor=False,               # The only outdoor cat
        favorite_toy="Butterfly",
    ),
    Cat(
        id=4,
        name="Chatora",
        age=7,
        breed="Orange tabby",
        color="Orange tabby",
        is_indoor=True,
        favorite_toy="Catnip",
    ),
)


class CatDataset:
    """An immutable, ordered collection of cats.

    Construction validates the record invariants (unique positive ids,
    non-empty names, non-negative ages) and raises ValueError if any is
    broken.  After that the dataset never changes.
    """

    def __init__(self, cats: Iterable[Cat] = ()) -> None:
        records = tuple(cats)
        seen_ids: set[int] = set()
        for cat in records:
            if cat.id <= 0:
                raise ValueError(f"Cat id must be positive, got {cat.id}")
            if cat.id in seen_ids:
                raise ValueError(f"Duplicate cat id {cat.id}")
            if not cat.name:
                raise ValueError(f"Cat {cat.id} has an empty name")
            if cat.age < 0:
                raise ValueError(f"Cat {cat.id} has a negative age")
            seen_ids.add(cat.id)
        self._cats = records

    def all(self) -> tuple[Cat, ...]:
        """Return every cat in insertion order."""
        return self._cats

    def __len__(self) -> int:
        return len(self._cats)

    def __iter__(self) -> Iterator[Cat]:
        return iter(self._cats)

    def __repr__(self) -> str:
        return f"CatDataset({len(self._cats)} cats)"


def load_seed_dataset() -> CatDataset:
    """Build the dataset the server runs with."""
    return CatDataset(SEED_CATS)
