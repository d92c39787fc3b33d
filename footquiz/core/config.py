from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: Literal["json", "console"] = Field(default="json", alias="LOG_FORMAT")

    quiz_default_difficulty: int = Field(default=5, alias="QUIZ_DEFAULT_DIFFICULTY")
    quiz_random_seed: int | None = Field(default=None, alias="QUIZ_RANDOM_SEED")
    quiz_champion_theme_count: int = Field(default=4, ge=1, alias="QUIZ_CHAMPION_THEME_COUNT")
    quiz_champion_questions_per_theme: int = Field(
        default=5,
        ge=1,
        alias="QUIZ_CHAMPION_QUESTIONS_PER_THEME",
    )
    quiz_survival_rounds_per_tier: int = Field(
        default=5,
        ge=1,
        alias="QUIZ_SURVIVAL_ROUNDS_PER_TIER",
    )
    quiz_survival_max_tier: int = Field(default=5, ge=1, alias="QUIZ_SURVIVAL_MAX_TIER")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
