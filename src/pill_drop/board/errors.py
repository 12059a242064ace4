from __future__ import annotations


class BoardError(Exception):
    """Base class for every error raised by the board layer."""


class OutOfBoundsError(BoardError, IndexError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"coordinate ({row}, {col}) is outside the play field")
        self.row = row
        self.col = col


class OccupiedCellError(BoardError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"cell ({row}, {col}) is not empty")
        self.row = row
        self.col = col


class InvalidPlacementError(BoardError, ValueError):
    pass


class WrongContentTypeError(BoardError, ValueError):
    pass


class InvalidLinkageError(BoardError, ValueError):
    pass


class InvalidColorError(BoardError, ValueError):
    pass


class InvalidDimensionsError(BoardError, ValueError):
    pass


class PlanMismatchError(BoardError):
    """An action plan was applied to a field it was not computed from."""
