from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Deque, List, Sequence, Tuple

import numpy as np

from .cells import Color, Content, Coordinate, Link, linked_coordinate
from .grid import PlayField


MIN_STREAK = 4


class IterationAction(IntEnum):
    NO_ACTION = 0
    CLEAR = 1
    FALL = 2


@dataclass
class ActionPlan:
    """Per-cell actions for the next board iteration plus the board-wide action."""

    actions: np.ndarray
    dominant: IterationAction = IterationAction.NO_ACTION

    @property
    def shape(self) -> Tuple[int, int]:
        return self.actions.shape

    def at(self, row: int, col: int) -> IterationAction:
        return IterationAction(int(self.actions[row, col]))

    def marked(self, action: IterationAction) -> List[Coordinate]:
        rows, cols = np.nonzero(self.actions == int(action))
        return [(int(r), int(c)) for r, c in zip(rows, cols)]


def docked_field(field: PlayField) -> np.ndarray:
    """Return a bool array marking every cell that rests on something.

    Viruses and occupied floor cells are docked. Support then spreads to the
    cell directly above a docked cell and across pill links in either
    direction.
    """
    docked = np.zeros(field.shape, dtype=bool)
    bottom = field.bottom_row_index()

    queue: Deque[Coordinate] = deque()
    for row in range(field.height):
        for col in range(field.width):
            content = field.content[row, col]
            if content == Content.VIRUS:
                queue.append((row, col))
            elif row == bottom and content != Content.EMPTY:
                queue.append((row, col))

    while queue:
        row, col = queue.popleft()
        if not field.is_inside(row, col):
            continue
        if docked[row, col]:
            continue
        if field.content[row, col] == Content.EMPTY:
            continue

        docked[row, col] = True
        queue.append((row - 1, col))

        link = int(field.link[row, col])
        if link != Link.UNLINKED:
            queue.append(linked_coordinate(row, col, Link(link)))

    return docked


def find_streaks(colors: Sequence[int]) -> List[Tuple[int, int]]:
    """Return (start, length) of each colored run of at least MIN_STREAK cells."""
    streaks: List[Tuple[int, int]] = []
    streak_color = Color.UNCOLORED
    streak_length = 0

    def flush(end: int) -> None:
        if streak_length >= MIN_STREAK and streak_color != Color.UNCOLORED:
            streaks.append((end - streak_length, streak_length))

    for index, value in enumerate(colors):
        value = int(value)
        if value == streak_color:
            streak_length += 1
        else:
            flush(index)
            streak_color = value
            streak_length = 1
    # Runs touching the far edge never see a color change.
    flush(len(colors))
    return streaks


def evaluate(field: PlayField) -> ActionPlan:
    """Decide what the next iteration of `field` does, without mutating it.

    Falling takes priority: if any pill half is undocked, only FALL marks are
    returned. Otherwise every cell in a row or column streak of four or more
    same-colored cells is marked CLEAR, viruses included.
    """
    plan = ActionPlan(np.zeros(field.shape, dtype=np.int8))

    falling = (field.content == Content.PILL) & ~docked_field(field)
    if falling.any():
        plan.actions[falling] = IterationAction.FALL
        plan.dominant = IterationAction.FALL
        return plan

    for row in range(field.height):
        for start, length in find_streaks(field.color[row, :]):
            plan.actions[row, start:start + length] = IterationAction.CLEAR
            plan.dominant = IterationAction.CLEAR

    for col in range(field.width):
        for start, length in find_streaks(field.color[:, col]):
            plan.actions[start:start + length, col] = IterationAction.CLEAR
            plan.dominant = IterationAction.CLEAR

    return plan
