# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# There is exactly one noun in this system: a Cat.  Everything the server
# returns is either one Cat, a list of Cats, or an error.
#
# WHY A FROZEN DATACLASS?
#   - __init__, __repr__ and __eq__ come for free.
#   - frozen=True makes every record immutable once the dataset is built.
#     No query, tool or test can accidentally edit a cat in place.
#   - dataclasses.asdict() turns a Cat into the exact JSON shape that goes
#     over MCP, so the record representation never drifts from the model.
# =============================================================================

from dataclasses import dataclass


# -----------------------------------------------------------------------------
# Cat — one record in the cat database
# -----------------------------------------------------------------------------
# Only `id`, `breed` and `is_indoor` are queryable.  `color` and
# `favorite_toy` are descriptive and only ever come back in responses.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Cat:
    """A single cat record, as stored and as returned to clients."""

    id: int                            # Positive, unique, never reassigned
    name: str                          # Non-empty display name
    age: int                           # Years, non-negative
    breed: str                         # "Persian" — target of breed search
    color: str                         # "White"
    is_indoor: bool                    # Filter for get_indoor_cats
    favorite_toy: str                  # "Yarn ball"
