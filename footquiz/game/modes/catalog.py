from __future__ import annotations

from enum import Enum


class GameMode(str, Enum):
    CHAMPION = "champion"
    MILLIONS = "millions"
    SURVIVAL = "survival"
    AUCTIONS = "auctions"
    WHO_AM_I = "whoami"
    MERCATO = "mercato"
    ODD_ONE_OUT = "oddoneout"
    MISSING_PIECE = "missingpiece"
    HIGHER_LOWER = "higherlower"


ALL_GAME_MODES: tuple[GameMode, ...] = tuple(GameMode)
