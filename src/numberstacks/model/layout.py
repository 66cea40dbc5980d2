"""
Layout Renderer
===============
Turns a number into the list of blocks the preview draws.

Why is this file needed?
------------------------
1. Purity: `render()` is a plain function of the number. It can be tested
   without a running Qt application.
2. Single branch: prime numbers give one chip + single-row grid, composite
   numbers give one labelled grid per factor pair.

Classes:
    GridDescriptor: One rectangle of unit squares.
    FactorLabel: The "columns × rows" caption of a composite block.
    PrimeMarker: The chip shown for a prime number.
    StackBlock: A grid together with its caption.
    Layout: Everything rendered for one number.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from numbers import Integral
from typing import Optional, TYPE_CHECKING

import numpy as np

from numberstacks.config import SCROLL_HINT_COLUMNS
from numberstacks.model.analyzer import factor_pairs, is_prime
from numberstacks.model.palette import cell_size, colour_for_prime, grid_colour

if TYPE_CHECKING:
    import numpy.typing as npt


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
class LayoutMode(StrEnum):
    PRIME = "prime"
    COMPOSITE = "composite"


@dataclass(frozen=True)
class GridDescriptor:
    """A `columns` x `rows` rectangle of unit squares of side `cell_size`."""
    columns: int
    rows: int
    cell_size: float
    fill_colour: str

    @property
    def scrollable(self) -> bool:
        """Presentation hint: wide grids may need horizontal scrolling."""
        return self.columns >= SCROLL_HINT_COLUMNS

    @property
    def width(self) -> float:
        return self.columns * self.cell_size

    @property
    def height(self) -> float:
        return self.rows * self.cell_size

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    def cell_rects(self) -> npt.NDArray[np.float64]:
        """
        Rectangles of all unit squares, row by row.

        Returns:
            (columns * rows, 4) array of (x, y, w, h) with the origin at the
            top-left corner of the grid.
        """
        cols, rows = np.meshgrid(np.arange(self.columns), np.arange(self.rows))
        rects = np.empty((self.cell_count, 4), dtype=np.float64)
        rects[:, 0] = cols.ravel() * self.cell_size
        rects[:, 1] = rows.ravel() * self.cell_size
        rects[:, 2:] = self.cell_size
        return rects


@dataclass(frozen=True)
class LabelSide:
    """One operand of a factor label. `colour` is set only for primes."""
    value: int
    is_prime: bool
    colour: Optional[str] = None

    @classmethod
    def for_value(cls, value: int) -> LabelSide:
        if is_prime(value):
            return cls(value=value, is_prime=True, colour=colour_for_prime(value))
        return cls(value=value, is_prime=False)


@dataclass(frozen=True)
class FactorLabel:
    left: LabelSide
    right: LabelSide

    @property
    def text(self) -> str:
        return f"{self.left.value} × {self.right.value}"


@dataclass(frozen=True)
class PrimeMarker:
    value: int
    colour: str


@dataclass(frozen=True)
class StackBlock:
    """A grid with its caption: a factor label (composite) or a prime marker (prime)."""
    grid: GridDescriptor
    label: Optional[FactorLabel] = None
    marker: Optional[PrimeMarker] = None


@dataclass(frozen=True)
class Layout:
    number: int
    mode: LayoutMode
    blocks: tuple[StackBlock, ...]

    @property
    def grids(self) -> list[GridDescriptor]:
        return [block.grid for block in self.blocks]

    @property
    def pairs(self) -> list[tuple[int, int]]:
        return [(g.columns, g.rows) for g in self.grids]


# ------------------------------------------------------------------------------
# Rendering
# ------------------------------------------------------------------------------
def validate_number(number: object) -> int:
    """
    Check that `number` can be rendered.

    Raises:
        ValueError: If `number` is not an integer or is smaller than 2.
    """
    if isinstance(number, bool) or not isinstance(number, Integral):
        raise ValueError(f"Expected an integer, got {number!r}.")
    if number < 2:
        raise ValueError(f"Number must be at least 2, got {number}.")
    return int(number)


def render(number: int) -> Layout:
    """Build the full layout for `number` from scratch."""
    n = validate_number(number)

    if is_prime(n):
        colour = colour_for_prime(n)
        block = StackBlock(
            grid=GridDescriptor(columns=n, rows=1, cell_size=cell_size(n), fill_colour=colour),
            marker=PrimeMarker(value=n, colour=colour),
        )
        return Layout(number=n, mode=LayoutMode.PRIME, blocks=(block,))

    blocks = tuple(
        StackBlock(
            grid=GridDescriptor(
                columns=columns,
                rows=rows,
                cell_size=cell_size(columns),
                fill_colour=grid_colour(columns),
            ),
            label=FactorLabel(left=LabelSide.for_value(columns), right=LabelSide.for_value(rows)),
        )
        for columns, rows in factor_pairs(n)
    )
    return Layout(number=n, mode=LayoutMode.COMPOSITE, blocks=blocks)
