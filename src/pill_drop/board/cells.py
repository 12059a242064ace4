from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .errors import InvalidColorError, InvalidLinkageError


Coordinate = Tuple[int, int]


class Content(IntEnum):
    EMPTY = 0
    VIRUS = 1
    PILL = 2  # one half of a pill, linked or single


class Color(IntEnum):
    UNCOLORED = 0
    RED = 1
    BLUE = 2
    YELLOW = 3


class Link(IntEnum):
    """Direction from a pill half toward its partner."""

    UNLINKED = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


_OPPOSITE = {
    Link.UNLINKED: Link.UNLINKED,
    Link.UP: Link.DOWN,
    Link.DOWN: Link.UP,
    Link.LEFT: Link.RIGHT,
    Link.RIGHT: Link.LEFT,
}

_OFFSETS = {
    Link.UP: (-1, 0),
    Link.DOWN: (1, 0),
    Link.LEFT: (0, -1),
    Link.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Cell:
    content: Content = Content.EMPTY
    color: Color = Color.UNCOLORED
    link: Link = Link.UNLINKED

    def __post_init__(self) -> None:
        # Uncolored exactly when empty; only pill halves carry a link.
        if self.is_empty != (self.color == Color.UNCOLORED):
            raise InvalidColorError(
                f"{Content(self.content).name} cell cannot have color {Color(self.color).name}"
            )
        if self.is_linked and self.content != Content.PILL:
            raise InvalidLinkageError(f"{Content(self.content).name} cell cannot be linked")

    @property
    def is_empty(self) -> bool:
        return self.content == Content.EMPTY

    @property
    def is_linked(self) -> bool:
        return self.link != Link.UNLINKED


EMPTY_CELL = Cell()


def opposite_link(link: Link) -> Link:
    return _OPPOSITE[Link(link)]


def linked_coordinate(row: int, col: int, link: Link) -> Coordinate:
    """Return the coordinate one step from (row, col) toward `link`.

    The result may lie outside the play field; callers check bounds.
    """
    if link == Link.UNLINKED:
        raise InvalidLinkageError(f"cell ({row}, {col}) is unlinked and has no partner coordinate")
    dr, dc = _OFFSETS[Link(link)]
    return row + dr, col + dc


def _require_color(color: Color, what: str) -> None:
    if color == Color.UNCOLORED:
        raise InvalidColorError(f"{what} must have a color")


def make_virus(color: Color) -> Cell:
    _require_color(color, "virus")
    return Cell(Content.VIRUS, Color(color), Link.UNLINKED)


def make_pill(color: Color) -> Cell:
    """Single, unlinked pill half."""
    _require_color(color, "pill")
    return Cell(Content.PILL, Color(color), Link.UNLINKED)


def make_linked_pill(link: Link, color: Color, partner_color: Color) -> Tuple[Cell, Cell]:
    """Build both halves of a two-cell pill.

    The first cell points toward its partner with `link`; the partner points
    back with the opposite direction.
    """
    if link == Link.UNLINKED:
        raise InvalidLinkageError("linked pill cannot have an unlinked direction")
    _require_color(color, "pill")
    _require_color(partner_color, "pill")
    return (
        Cell(Content.PILL, Color(color), Link(link)),
        Cell(Content.PILL, Color(partner_color), opposite_link(link)),
    )
