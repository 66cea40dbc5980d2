"""Colour and size policy for the rendered grids."""
from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from numberstacks.config import BASE_CELL_SIZE
from numberstacks.model.analyzer import is_prime


# ------------------------------------------------------------------------------
# Colours
# ------------------------------------------------------------------------------
class KnownPrime(IntEnum):
    """The small primes that carry their own colour."""
    TWO = 2
    THREE = 3
    FIVE = 5
    SEVEN = 7
    ELEVEN = 11
    THIRTEEN = 13
    SEVENTEEN = 17
    NINETEEN = 19


PRIME_COLOURS: Mapping[KnownPrime, str] = MappingProxyType({
    KnownPrime.TWO: "#10B981",        # emerald
    KnownPrime.THREE: "#FBBF24",      # amber
    KnownPrime.FIVE: "#8B5CF6",       # violet
    KnownPrime.SEVEN: "#0EA5E9",      # sky
    KnownPrime.ELEVEN: "#EF4444",     # red
    KnownPrime.THIRTEEN: "#22D3EE",   # cyan
    KnownPrime.SEVENTEEN: "#EC4899",  # pink
    KnownPrime.NINETEEN: "#84CC16",   # lime
})

DEFAULT_PRIME_COLOUR = "#6366F1"  # indigo
COMPOSITE_COLOUR = "#9CA3AF"  # neutral grey


def colour_for_prime(p: int) -> str:
    """
    Colour assigned to the prime `p`, or the default prime colour if `p` has none.

    Only meaningful for primes; callers check `is_prime` first. Any other input
    simply gets the default colour.
    """
    try:
        return PRIME_COLOURS[KnownPrime(p)]
    except ValueError:
        return DEFAULT_PRIME_COLOUR


def grid_colour(columns: int) -> str:
    """Fill colour of a grid: the prime colour for a prime column count, neutral otherwise."""
    if is_prime(columns):
        return colour_for_prime(columns)
    return COMPOSITE_COLOUR


# ------------------------------------------------------------------------------
# Sizes
# ------------------------------------------------------------------------------
# (largest column count in band, scale of the base size); the last band is open
CELL_SIZE_BANDS: tuple[tuple[int, float], ...] = (
    (8, 1.0),
    (12, 0.75),
    (20, 0.55),
)
WIDE_GRID_SCALE = 0.4


def cell_size(column_count: int, base: float = BASE_CELL_SIZE) -> float:
    """
    Side length of a unit square for a grid with `column_count` columns.

    Wider grids get smaller squares so the total width stays bounded.
    The result never increases with the column count.
    """
    for upper, scale in CELL_SIZE_BANDS:
        if column_count <= upper:
            return base * scale
    return base * WIDE_GRID_SCALE
