from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from pill_drop.board import (
    Color,
    Content,
    IterationAction,
    PlayField,
    SettleResult,
    apply_plan,
    evaluate,
    make_virus,
)

from .pills import Pill


logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    SOFT_DROP = 4
    HARD_DROP = 5
    NONE = 6


@dataclass(frozen=True)
class VirusPlacement:
    row: int
    col: int
    color: Color


@dataclass
class GameConfig:
    width: int = 8
    height: int = 16
    spawn_row: int = 0
    spawn_col: int = 3
    random_seed: Optional[int] = None
    colors: Tuple[Color, ...] = (Color.RED, Color.BLUE, Color.YELLOW)
    viruses: Tuple[VirusPlacement, ...] = ()


class PillDropGame:
    """Drops pills onto a PlayField and resolves the board after each lock.

    After a pill locks the game is *resolving*: every tick applies one board
    iteration until the field is quiescent, then the win condition is checked
    and the next pill spawns.
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.random_seed)
        self.field = PlayField(self.config.width, self.config.height)
        self.current_pill: Optional[Pill] = None
        self.current_row = 0
        self.current_col = 0
        self.resolving = False
        self.game_over = False
        self.won = False
        self.pills_locked = 0
        self.board_stats = SettleResult()
        self.reset()

    @property
    def done(self) -> bool:
        return self.game_over or self.won

    def reset(self) -> None:
        self.field.reset()
        for virus in self.config.viruses:
            self.field.place_single(virus.row, virus.col, make_virus(virus.color))
        self.resolving = False
        self.game_over = False
        self.won = False
        self.pills_locked = 0
        self.board_stats = SettleResult()
        self._spawn_pill()

    def _random_pill(self) -> Pill:
        return Pill(self.rng.choice(self.config.colors), self.rng.choice(self.config.colors))

    def _spawn_pill(self) -> None:
        self.current_pill = self._random_pill()
        self.current_row = self.config.spawn_row
        self.current_col = self.config.spawn_col
        # Spawn collision is the loss condition
        if not self.field.can_place(self.current_pill.cells_at(self.current_row, self.current_col)):
            logger.info("spawn point blocked, game over after %d pills", self.pills_locked)
            self.current_pill = None
            self.game_over = True
            return
        logger.debug("spawned %s at (%d, %d)", self.current_pill, self.current_row, self.current_col)

    def _move(self, d_row: int, d_col: int) -> bool:
        if self.current_pill is None:
            return False
        new_row = self.current_row + d_row
        new_col = self.current_col + d_col
        if self.field.can_place(self.current_pill.cells_at(new_row, new_col)):
            self.current_row = new_row
            self.current_col = new_col
            return True
        return False

    def _rotate(self, delta: int) -> None:
        if self.current_pill is None:
            return
        rotated = self.current_pill.rotated(delta)
        if self.field.can_place(rotated.cells_at(self.current_row, self.current_col)):
            self.current_pill = rotated

    def _lock_pill(self) -> None:
        assert self.current_pill is not None
        cell, partner = self.current_pill.halves()
        self.field.place_linked_pair(self.current_row, self.current_col, cell, partner)
        logger.debug("locked %s at (%d, %d)", self.current_pill, self.current_row, self.current_col)
        self.pills_locked += 1
        self.current_pill = None
        self.resolving = True

    def _soft_drop(self) -> None:
        if not self._move(1, 0):
            self._lock_pill()

    def hard_drop(self) -> None:
        if self.current_pill is None:
            return
        while self._move(1, 0):
            pass
        self._lock_pill()

    def _resolve_once(self) -> None:
        plan = evaluate(self.field)
        self.board_stats.record(self.field, plan)
        if apply_plan(self.field, plan) != IterationAction.NO_ACTION:
            return

        self.resolving = False
        # A field set up without viruses has no win condition
        if self.config.viruses and self.field.count_content(Content.VIRUS) == 0:
            logger.info("all viruses cleared after %d pills", self.pills_locked)
            self.won = True
            return
        self._spawn_pill()

    def tick(self) -> None:
        """Advance the game by one gravity step."""
        if self.done:
            return
        if self.resolving:
            self._resolve_once()
        else:
            self._soft_drop()

    def resolve(self) -> None:
        while self.resolving and not self.done:
            self._resolve_once()

    def step(self, action: Action) -> Tuple[PlayField, bool, dict]:
        if self.done:
            return self.get_state(), True, self._info()

        if self.resolving:
            # Input is ignored while the board settles.
            self.tick()
        elif action == Action.LEFT:
            self._move(0, -1)
        elif action == Action.RIGHT:
            self._move(0, 1)
        elif action == Action.ROTATE_CW:
            self._rotate(1)
        elif action == Action.ROTATE_CCW:
            self._rotate(-1)
        elif action == Action.SOFT_DROP:
            self._soft_drop()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.NONE:
            pass

        return self.get_state(), self.done, self._info()

    def _info(self) -> dict:
        return {
            "pills_locked": self.pills_locked,
            "viruses_cleared": self.board_stats.viruses_cleared,
            "cells_cleared": self.board_stats.cells_cleared,
            "viruses_remaining": self.field.count_content(Content.VIRUS),
            "won": self.won,
        }

    def get_state(self) -> PlayField:
        # Overlay the active pill on a copy of the field
        state = self.field.copy()
        if self.current_pill is not None and not self.done:
            cell, partner = self.current_pill.halves()
            state.place_linked_pair(self.current_row, self.current_col, cell, partner)
        return state
