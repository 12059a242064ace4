"""Game module for the pill puzzle.

Exports the game session and supporting classes:
- Pill: the falling two-half piece with rotation
- GameConfig / VirusPlacement: field size, spawn point and virus layout
- PillDropGame: spawn, input, locking and board resolution
"""

from .pills import Pill
from .core import Action, GameConfig, PillDropGame, VirusPlacement

__all__ = [
    "Pill",
    "Action",
    "GameConfig",
    "PillDropGame",
    "VirusPlacement",
]
