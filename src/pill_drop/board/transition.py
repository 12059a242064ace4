from __future__ import annotations

import logging
from dataclasses import dataclass

from .cells import EMPTY_CELL, Content
from .errors import BoardError, PlanMismatchError
from .evaluator import ActionPlan, IterationAction, evaluate
from .grid import PlayField


logger = logging.getLogger(__name__)


@dataclass
class SettleResult:
    falls: int = 0
    clears: int = 0
    cells_cleared: int = 0
    viruses_cleared: int = 0

    @property
    def steps(self) -> int:
        return self.falls + self.clears

    def record(self, field: PlayField, plan: ActionPlan) -> None:
        """Count `plan` before it is applied to `field`."""
        if plan.dominant == IterationAction.CLEAR:
            for row, col in plan.marked(IterationAction.CLEAR):
                self.cells_cleared += 1
                if field.content[row, col] == Content.VIRUS:
                    self.viruses_cleared += 1
            self.clears += 1
        elif plan.dominant == IterationAction.FALL:
            self.falls += 1


def apply_plan(field: PlayField, plan: ActionPlan) -> IterationAction:
    """Apply one evaluated iteration to `field` and return the action taken.

    A BoardError raised here means the plan and the field disagree, which
    never happens in normal play; callers should treat it as fatal.
    """
    if plan.shape != field.shape:
        raise PlanMismatchError(f"plan shape {plan.shape} does not match field shape {field.shape}")

    if plan.dominant == IterationAction.NO_ACTION:
        logger.debug("no action needed for iteration")
        return IterationAction.NO_ACTION

    try:
        if plan.dominant == IterationAction.CLEAR:
            targets = plan.marked(IterationAction.CLEAR)
            logger.debug("clearing %d cells", len(targets))
            for row, col in targets:
                field.clear(row, col)
            return IterationAction.CLEAR

        targets = plan.marked(IterationAction.FALL)
        logger.debug("dropping %d cells", len(targets))
        # Bottom to top so a lower cell moves before the one above lands on it.
        for row in range(field.bottom_row_index() - 1, -1, -1):
            for col in range(field.width):
                if plan.actions[row, col] == IterationAction.FALL:
                    field._put(row + 1, col, field.get(row, col))
                    field._put(row, col, EMPTY_CELL)
        return IterationAction.FALL
    except BoardError:
        logger.error("board iteration failed while applying %s", plan.dominant.name)
        raise


def step(field: PlayField) -> IterationAction:
    """Advance `field` by exactly one clear or one-row fall."""
    return apply_plan(field, evaluate(field))


def settle(field: PlayField) -> SettleResult:
    """Step `field` until it is quiescent and summarise what happened."""
    result = SettleResult()
    while True:
        plan = evaluate(field)
        if plan.dominant == IterationAction.NO_ACTION:
            return result
        result.record(field, plan)
        apply_plan(field, plan)
