from __future__ import annotations

from collections.abc import Iterator

import pytest

from footquiz.core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "QUIZ_DEFAULT_DIFFICULTY",
        "QUIZ_RANDOM_SEED",
        "QUIZ_CHAMPION_THEME_COUNT",
        "QUIZ_SURVIVAL_ROUNDS_PER_TIER",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.quiz_default_difficulty == 5
    assert settings.quiz_random_seed is None
    assert settings.quiz_champion_theme_count == 4
    assert settings.quiz_survival_rounds_per_tier == 5


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUIZ_DEFAULT_DIFFICULTY", "8")
    monkeypatch.setenv("QUIZ_RANDOM_SEED", "1234")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("APP_ENV", "staging")

    settings = get_settings()

    assert settings.quiz_default_difficulty == 8
    assert settings.quiz_random_seed == 1234
    assert settings.log_level == "DEBUG"
    assert settings.app_env == "staging"
    assert get_settings() is settings
