"""
Tests for the docked search, streak scan and board evaluation.
"""

import numpy as np
import pytest

from pill_drop.board import (
    Color,
    IterationAction,
    Link,
    PlayField,
    docked_field,
    evaluate,
    find_streaks,
    make_linked_pill,
    make_pill,
    make_virus,
)


B = int(Color.BLUE)
R = int(Color.RED)


class TestFindStreaks:
    @pytest.mark.parametrize(
        "colors, expected",
        [
            ([B, B, B, B], [(0, 4)]),
            ([0, 0, 0, 0, 0], []),
            ([B, B, B], []),
            ([R, B, B, B, B, 0, B], [(1, 4)]),
            ([B, B, B, B, B, R, R, R, R], [(0, 5), (5, 4)]),
            ([B, B, 0, B, B], []),
            ([0, 0, R, R, R, R], [(2, 4)]),
        ],
    )
    def test_streaks(self, colors: list, expected: list) -> None:
        assert find_streaks(colors) == expected

    def test_accepts_numpy_rows(self) -> None:
        assert find_streaks(np.array([0, B, B, B, B], dtype=np.int8)) == [(1, 4)]


class TestDockedField:
    def test_empty_field_has_nothing_docked(self, field: PlayField) -> None:
        assert not docked_field(field).any()

    def test_floor_and_virus_are_docked(self, field: PlayField) -> None:
        field.place_single(15, 0, make_pill(Color.RED))
        field.place_single(3, 5, make_virus(Color.BLUE))
        field.place_single(7, 7, make_pill(Color.RED))
        docked = docked_field(field)
        assert docked[15, 0]
        assert docked[3, 5]
        assert not docked[7, 7]

    def test_support_spreads_upward(self, field: PlayField) -> None:
        for row in (13, 14, 15):
            field.place_single(row, 2, make_pill(Color.RED))
        field.place_single(11, 2, make_pill(Color.RED))
        docked = docked_field(field)
        assert docked[13, 2] and docked[14, 2] and docked[15, 2]
        assert not docked[11, 2]

    def test_support_spreads_across_links(self, field: PlayField) -> None:
        """A horizontal pair resting on one half docks both halves and what sits above."""
        field.place_single(15, 1, make_pill(Color.RED))
        cell, partner = make_linked_pill(Link.RIGHT, Color.BLUE, Color.YELLOW)
        field.place_linked_pair(14, 0, cell, partner)
        field.place_single(13, 0, make_pill(Color.RED))
        docked = docked_field(field)
        assert docked[14, 1]
        assert docked[14, 0]
        assert docked[13, 0]


class TestEvaluate:
    def test_empty_field_is_quiescent(self, field: PlayField) -> None:
        plan = evaluate(field)
        assert plan.dominant == IterationAction.NO_ACTION
        assert not plan.actions.any()
        assert plan.shape == field.shape

    def test_horizontal_clear(self, field: PlayField) -> None:
        """Four blue singles on the floor are cleared together."""
        for col in range(4):
            field.place_single(15, col, make_pill(Color.BLUE))
        plan = evaluate(field)
        assert plan.dominant == IterationAction.CLEAR
        assert plan.marked(IterationAction.CLEAR) == [(15, 0), (15, 1), (15, 2), (15, 3)]

    def test_three_in_a_row_is_not_cleared(self, field: PlayField) -> None:
        for row in (13, 14, 15):
            field.place_single(row, 0, make_pill(Color.BLUE))
        plan = evaluate(field)
        assert plan.dominant == IterationAction.NO_ACTION

    def test_floating_single_falls(self, field: PlayField) -> None:
        field.place_single(14, 0, make_pill(Color.BLUE))
        plan = evaluate(field)
        assert plan.dominant == IterationAction.FALL
        assert plan.marked(IterationAction.FALL) == [(14, 0)]

    def test_floating_linked_pair_falls_as_unit(self, field: PlayField) -> None:
        cell, partner = make_linked_pill(Link.UP, Color.RED, Color.BLUE)
        field.place_linked_pair(14, 0, cell, partner)
        plan = evaluate(field)
        assert plan.dominant == IterationAction.FALL
        assert plan.marked(IterationAction.FALL) == [(13, 0), (14, 0)]

    def test_resting_mixed_stack_is_quiescent(self, field: PlayField) -> None:
        cell, partner = make_linked_pill(Link.UP, Color.RED, Color.BLUE)
        field.place_linked_pair(15, 0, cell, partner)
        cell, partner = make_linked_pill(Link.RIGHT, Color.YELLOW, Color.RED)
        field.place_linked_pair(13, 0, cell, partner)
        assert evaluate(field).dominant == IterationAction.NO_ACTION

    def test_vertical_clear_through_linked_pairs(self, field: PlayField) -> None:
        cell, partner = make_linked_pill(Link.RIGHT, Color.RED, Color.BLUE)
        field.place_linked_pair(15, 0, cell, partner)
        cell, partner = make_linked_pill(Link.UP, Color.BLUE, Color.BLUE)
        field.place_linked_pair(14, 1, cell, partner)
        field.place_single(12, 1, make_pill(Color.BLUE))
        plan = evaluate(field)
        assert plan.dominant == IterationAction.CLEAR
        assert plan.marked(IterationAction.CLEAR) == [(12, 1), (13, 1), (14, 1), (15, 1)]

    def test_virus_joins_a_clear(self, field: PlayField) -> None:
        """Viruses match on color alone and are cleared with the pills."""
        virus = make_virus(Color.BLUE)
        field.place_single(0, 3, virus)
        field.place_single(15, 3, virus)
        cell, partner = make_linked_pill(Link.LEFT, Color.BLUE, Color.BLUE)
        field.place_linked_pair(14, 3, cell, partner)
        assert evaluate(field).dominant == IterationAction.NO_ACTION

        cell, partner = make_linked_pill(Link.UP, Color.BLUE, Color.BLUE)
        field.place_linked_pair(13, 3, cell, partner)
        plan = evaluate(field)
        assert plan.dominant == IterationAction.CLEAR
        assert plan.at(15, 3) == IterationAction.CLEAR
        assert plan.at(0, 3) == IterationAction.NO_ACTION
        assert plan.at(14, 2) == IterationAction.NO_ACTION

    def test_row_and_column_streaks_overlap(self, field: PlayField) -> None:
        for col in range(4):
            field.place_single(15, col, make_pill(Color.YELLOW))
        for row in (12, 13, 14):
            field.place_single(row, 0, make_pill(Color.YELLOW))
        plan = evaluate(field)
        cleared = plan.marked(IterationAction.CLEAR)
        assert len(cleared) == 7
        assert (12, 0) in cleared and (15, 3) in cleared

    def test_streak_at_far_edge(self, field: PlayField) -> None:
        for col in range(4, 8):
            field.place_single(15, col, make_pill(Color.RED))
        plan = evaluate(field)
        assert plan.marked(IterationAction.CLEAR) == [(15, 4), (15, 5), (15, 6), (15, 7)]

    def test_fall_takes_priority_over_clear(self, field: PlayField) -> None:
        for col in range(4):
            field.place_single(15, col, make_pill(Color.BLUE))
        field.place_single(8, 7, make_pill(Color.RED))
        plan = evaluate(field)
        assert plan.dominant == IterationAction.FALL
        assert plan.marked(IterationAction.FALL) == [(8, 7)]
        assert plan.marked(IterationAction.CLEAR) == []

    def test_virus_never_falls(self, field: PlayField) -> None:
        field.place_single(2, 2, make_virus(Color.RED))
        plan = evaluate(field)
        assert plan.dominant == IterationAction.NO_ACTION

    def test_evaluate_does_not_mutate(self, field: PlayField) -> None:
        field.place_single(10, 0, make_pill(Color.BLUE))
        before = field.copy()
        evaluate(field)
        assert np.array_equal(field.content, before.content)
        assert np.array_equal(field.link, before.link)
