from __future__ import annotations

from footquiz.game.errors import UnknownGameModeError
from footquiz.game.modes.catalog import GameMode

SURVIVAL_ROUNDS_PER_TIER = 5
SURVIVAL_MAX_TIER = 5


def parse_game_mode(value: GameMode | str) -> GameMode:
    if isinstance(value, GameMode):
        return value
    try:
        return GameMode(str(value).strip().lower())
    except ValueError as exc:
        raise UnknownGameModeError(f"unknown game mode: {value!r}") from exc


def survival_tier_for_round(
    round_number: int,
    *,
    rounds_per_tier: int = SURVIVAL_ROUNDS_PER_TIER,
    max_tier: int = SURVIVAL_MAX_TIER,
) -> int:
    if rounds_per_tier < 1:
        raise ValueError("rounds_per_tier must be positive")
    tier = (max(1, round_number) - 1) // rounds_per_tier + 1
    return min(max_tier, tier)
