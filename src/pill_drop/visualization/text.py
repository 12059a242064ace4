from __future__ import annotations

from pill_drop.board import ActionPlan, Cell, Color, Content, IterationAction, Link, PlayField


_CONTENT_CHARS = {Content.EMPTY: ".", Content.VIRUS: "V", Content.PILL: "P"}
_COLOR_CHARS = {Color.UNCOLORED: ".", Color.RED: "R", Color.BLUE: "B", Color.YELLOW: "Y"}
_LINK_CHARS = {Link.UNLINKED: ".", Link.UP: "^", Link.DOWN: "v", Link.LEFT: "<", Link.RIGHT: ">"}
_ACTION_CHARS = {IterationAction.NO_ACTION: ".", IterationAction.CLEAR: "C", IterationAction.FALL: "F"}


def format_cell(cell: Cell) -> str:
    """Three characters: content, color, link direction."""
    return _CONTENT_CHARS[cell.content] + _COLOR_CHARS[cell.color] + _LINK_CHARS[cell.link]


def format_board(field: PlayField) -> str:
    rows = []
    for row in range(field.height):
        rows.append(" ".join(format_cell(field.get(row, col)) for col in range(field.width)))
    return "\n".join(rows)


def format_plan(plan: ActionPlan) -> str:
    height, width = plan.shape
    return "\n".join(
        "".join(_ACTION_CHARS[plan.at(row, col)] for col in range(width)) for row in range(height)
    )


def print_board(field: PlayField) -> None:
    print(format_board(field))
    print()


def print_plan(plan: ActionPlan) -> None:
    print(format_plan(plan))
    print()
