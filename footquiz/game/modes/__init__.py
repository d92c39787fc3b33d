from footquiz.game.modes.catalog import ALL_GAME_MODES, GameMode
from footquiz.game.modes.rules import parse_game_mode, survival_tier_for_round

__all__ = [
    "ALL_GAME_MODES",
    "GameMode",
    "parse_game_mode",
    "survival_tier_for_round",
]
