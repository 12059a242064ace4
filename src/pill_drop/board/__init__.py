"""Board rules for the pill puzzle.

Exports the grid model and the iteration machinery:
- PlayField: grid of cells with checked placement and clearing
- Cell, Content, Color, Link: cell vocabulary and maker functions
- evaluate / ActionPlan / IterationAction: what the next iteration does
- step / settle: apply one iteration, or iterate until quiescent
"""

from .cells import (
    EMPTY_CELL,
    Cell,
    Color,
    Content,
    Coordinate,
    Link,
    linked_coordinate,
    make_linked_pill,
    make_pill,
    make_virus,
    opposite_link,
)
from .errors import (
    BoardError,
    InvalidColorError,
    InvalidDimensionsError,
    InvalidLinkageError,
    InvalidPlacementError,
    OccupiedCellError,
    OutOfBoundsError,
    PlanMismatchError,
    WrongContentTypeError,
)
from .grid import PlayField
from .evaluator import MIN_STREAK, ActionPlan, IterationAction, docked_field, evaluate, find_streaks
from .transition import SettleResult, apply_plan, settle, step

__all__ = [
    "EMPTY_CELL",
    "Cell",
    "Color",
    "Content",
    "Coordinate",
    "Link",
    "linked_coordinate",
    "make_linked_pill",
    "make_pill",
    "make_virus",
    "opposite_link",
    "BoardError",
    "InvalidColorError",
    "InvalidDimensionsError",
    "InvalidLinkageError",
    "InvalidPlacementError",
    "OccupiedCellError",
    "OutOfBoundsError",
    "PlanMismatchError",
    "WrongContentTypeError",
    "PlayField",
    "MIN_STREAK",
    "ActionPlan",
    "IterationAction",
    "docked_field",
    "evaluate",
    "find_streaks",
    "SettleResult",
    "apply_plan",
    "settle",
    "step",
]
