# =============================================================================
# core/queries.py  —  The Query Engine (four read-only queries)
# =============================================================================
#
# Every function here is PURE: it reads the dataset and returns a value.
# No logging, no MCP, no argument checking.  By the time a query runs, the
# tool router has already made sure the arguments have the right types.
#
# EMPTY RESULTS ARE NOT ERRORS:
#   The list-returning queries return [] when nothing matches.  Only
#   get_by_id has a distinct "not found" outcome (None), because its caller
#   expects at most one cat and must tell "no such id" apart from a match.
# =============================================================================

from core.cat_store import CatDataset
from core.models import Cat


def list_all(dataset: CatDataset) -> list[Cat]:
    """Return every cat, in insertion order."""
    return list(dataset.all())


def get_by_id(dataset: CatDataset, cat_id: int) -> Cat | None:
    """Return the cat with this id, or None if there is none."""
    for cat in dataset.all():
        if cat.id == cat_id:
            return cat
    return None


def search_by_breed(dataset: CatDataset, breed: str) -> list[Cat]:
    """Return cats whose breed contains `breed`, ignoring case.

    The match is a case-insensitive substring test, so "persian",
    "Persian" and "ers" all find the Persian.  An empty query matches
    every cat.
    """
    needle = breed.casefold()
    return [cat for cat in dataset.all() if needle in cat.breed.casefold()]


def get_indoor(dataset: CatDataset) -> list[Cat]:
    """Return the indoor cats, in insertion order."""
    return [cat for cat in dataset.all() if cat.is_indoor]
