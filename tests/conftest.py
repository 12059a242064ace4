import pytest

from pill_drop.board import PlayField


@pytest.fixture
def field() -> PlayField:
    """Standard 8 wide, 16 tall empty play field."""
    return PlayField(8, 16)
