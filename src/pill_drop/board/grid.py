from __future__ import annotations

from typing import Iterable, Iterator, Tuple

import numpy as np

from .cells import (
    EMPTY_CELL,
    Cell,
    Color,
    Content,
    Coordinate,
    Link,
    linked_coordinate,
    opposite_link,
)
from .errors import (
    InvalidDimensionsError,
    InvalidLinkageError,
    InvalidPlacementError,
    OccupiedCellError,
    OutOfBoundsError,
    WrongContentTypeError,
)


class PlayField:
    """Fixed-size grid of cells for the pill puzzle.

    Each cell is stored across three parallel int8 arrays (content, color,
    link) indexed as ``[row, col]``. Row 0 is the top of the field and
    ``height - 1`` is the floor.
    """

    def __init__(self, width: int, height: int) -> None:
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(f"play field must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self.content = np.zeros((height, width), dtype=np.int8)
        self.color = np.zeros((height, width), dtype=np.int8)
        self.link = np.zeros((height, width), dtype=np.int8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        return self._height, self._width

    def bottom_row_index(self) -> int:
        return self._height - 1

    def reset(self) -> None:
        self.content.fill(0)
        self.color.fill(0)
        self.link.fill(0)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def _check_inside(self, row: int, col: int) -> None:
        if not self.is_inside(row, col):
            raise OutOfBoundsError(row, col)

    def _check_inside_and_empty(self, row: int, col: int) -> None:
        self._check_inside(row, col)
        if self.content[row, col] != Content.EMPTY:
            raise OccupiedCellError(row, col)

    def get(self, row: int, col: int) -> Cell:
        self._check_inside(row, col)
        return Cell(
            Content(int(self.content[row, col])),
            Color(int(self.color[row, col])),
            Link(int(self.link[row, col])),
        )

    def _put(self, row: int, col: int, cell: Cell) -> None:
        # Raw write: bounds only, no link integrity check.
        self._check_inside(row, col)
        self.content[row, col] = int(cell.content)
        self.color[row, col] = int(cell.color)
        self.link[row, col] = int(cell.link)

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        for row, col in cells:
            if not self.is_inside(row, col):
                return False
            if self.content[row, col] != Content.EMPTY:
                return False
        return True

    def place_single(self, row: int, col: int, cell: Cell) -> None:
        """Write an unlinked cell (virus or single pill half) into an empty cell."""
        if cell.is_linked:
            raise InvalidPlacementError(
                f"cannot place a linked cell at ({row}, {col}) on its own; use place_linked_pair"
            )
        self._check_inside_and_empty(row, col)
        self._put(row, col, cell)

    def place_linked_pair(self, row: int, col: int, cell: Cell, partner: Cell) -> None:
        """Place both halves of a pill, or nothing at all.

        `cell` goes to (row, col) and `partner` to the neighbour that
        `cell.link` points at.
        """
        if not cell.is_linked:
            raise InvalidLinkageError(f"cell for ({row}, {col}) is unlinked")
        if cell.content != Content.PILL or partner.content != Content.PILL:
            raise WrongContentTypeError("both halves of a linked pair must be pill halves")
        if partner.link != opposite_link(cell.link):
            raise InvalidLinkageError(
                f"partner link {partner.link.name} does not point back at {cell.link.name}"
            )

        self._check_inside_and_empty(row, col)
        partner_row, partner_col = linked_coordinate(row, col, cell.link)
        self._check_inside_and_empty(partner_row, partner_col)

        self._put(row, col, cell)
        self._put(partner_row, partner_col, partner)

    def clear(self, row: int, col: int) -> None:
        """Empty a cell, demoting its partner (if any) to a single half."""
        cell = self.get(row, col)
        if cell.is_linked:
            partner_row, partner_col = linked_coordinate(row, col, cell.link)
            self._check_inside(partner_row, partner_col)
            self.link[partner_row, partner_col] = Link.UNLINKED
        self._put(row, col, EMPTY_CELL)

    def count_content(self, kind: Content) -> int:
        return int(np.count_nonzero(self.content == int(kind)))

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for row in range(self._height):
            for col in range(self._width):
                yield row, col, self.get(row, col)

    def copy(self) -> "PlayField":
        new_field = PlayField(self._width, self._height)
        new_field.content = self.content.copy()
        new_field.color = self.color.copy()
        new_field.link = self.link.copy()
        return new_field
