from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from pill_drop.board import Cell, Color, Coordinate, Link, linked_coordinate, make_linked_pill


# Clockwise order of the direction from the first half to the second.
_CLOCKWISE = (Link.RIGHT, Link.DOWN, Link.LEFT, Link.UP)


@dataclass(frozen=True)
class Pill:
    first: Color
    second: Color
    link: Link = Link.RIGHT  # direction from first half to second half

    def rotated(self, delta: int) -> "Pill":
        index = _CLOCKWISE.index(self.link)
        return Pill(self.first, self.second, _CLOCKWISE[(index + delta) % 4])

    def cells_at(self, row: int, col: int) -> List[Coordinate]:
        return [(row, col), linked_coordinate(row, col, self.link)]

    def halves(self) -> Tuple[Cell, Cell]:
        return make_linked_pill(self.link, self.first, self.second)
