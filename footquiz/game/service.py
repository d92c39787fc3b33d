from __future__ import annotations

import random
from typing import Any, Mapping, Sequence

import structlog

from footquiz.core.config import Settings, get_settings
from footquiz.game.answers.normalizer import normalize
from footquiz.game.answers.validator import AnswerValidator
from footquiz.game.errors import GameDataNotLoadedError
from footquiz.game.modes.catalog import ALL_GAME_MODES, GameMode
from footquiz.game.modes.rules import (
    SURVIVAL_MAX_TIER,
    SURVIVAL_ROUNDS_PER_TIER,
    parse_game_mode,
    survival_tier_for_round,
)
from footquiz.game.questions.pool import ItemPredicate, QuestionPool
from footquiz.game.questions.records import build_dataset
from footquiz.game.questions.types import (
    AuctionItem,
    ChampionQuestion,
    ChampionTheme,
    GameDataset,
    HigherLowerQuestion,
    MercatoQuestion,
    MillionsQuestion,
    MissingPieceQuestion,
    OddOneOutQuestion,
    QuizItem,
    SurvivalQuestion,
    WhoAmIQuestion,
)

logger = structlog.get_logger("footquiz.game.service")

DEFAULT_CHAMPION_THEME_COUNT = 4
DEFAULT_CHAMPION_QUESTIONS_PER_THEME = 5


def _dataset_items(dataset: GameDataset, mode: GameMode) -> tuple[Any, ...]:
    if mode is GameMode.CHAMPION:
        return dataset.champion_questions
    if mode is GameMode.MILLIONS:
        return dataset.millions_questions
    if mode is GameMode.SURVIVAL:
        return dataset.survival_questions
    if mode is GameMode.AUCTIONS:
        return dataset.auction_items
    if mode is GameMode.WHO_AM_I:
        return dataset.who_am_i_questions
    if mode is GameMode.MERCATO:
        return dataset.mercato_questions
    if mode is GameMode.ODD_ONE_OUT:
        return dataset.odd_one_out_questions
    if mode is GameMode.MISSING_PIECE:
        return dataset.missing_piece_questions
    return dataset.higher_lower_questions


class GameDataService:
    """Single entry point for screens: per-mode question pools plus answer validation.

    Pools are filled once by ``load`` (or ``load_records``). Any pool access
    before that raises ``GameDataNotLoadedError`` so that a missing load is never
    mistaken for an exhausted pool, which ``draw_next`` reports as ``None``.
    """

    def __init__(
        self,
        *,
        validator: AnswerValidator | None = None,
        rng: random.Random | None = None,
        champion_theme_count: int = DEFAULT_CHAMPION_THEME_COUNT,
        champion_questions_per_theme: int = DEFAULT_CHAMPION_QUESTIONS_PER_THEME,
        survival_rounds_per_tier: int = SURVIVAL_ROUNDS_PER_TIER,
        survival_max_tier: int = SURVIVAL_MAX_TIER,
    ) -> None:
        self.validator = validator if validator is not None else AnswerValidator()
        self._rng = rng if rng is not None else random.Random()
        self.champion_theme_count = champion_theme_count
        self.champion_questions_per_theme = champion_questions_per_theme
        self.survival_rounds_per_tier = survival_rounds_per_tier
        self.survival_max_tier = survival_max_tier
        self._pools: dict[GameMode, QuestionPool[Any]] | None = None
        self._champion_themes: tuple[ChampionTheme, ...] = ()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> GameDataService:
        settings = settings if settings is not None else get_settings()
        return cls(
            validator=AnswerValidator(default_difficulty=settings.quiz_default_difficulty),
            rng=random.Random(settings.quiz_random_seed),
            champion_theme_count=settings.quiz_champion_theme_count,
            champion_questions_per_theme=settings.quiz_champion_questions_per_theme,
            survival_rounds_per_tier=settings.quiz_survival_rounds_per_tier,
            survival_max_tier=settings.quiz_survival_max_tier,
        )

    @property
    def is_loaded(self) -> bool:
        return self._pools is not None

    def load(self, dataset: GameDataset) -> None:
        pools: dict[GameMode, QuestionPool[Any]] = {}
        for mode in ALL_GAME_MODES:
            pools[mode] = QuestionPool(
                mode,
                _dataset_items(dataset, mode),
                rng=random.Random(self._rng.getrandbits(64)),
            )
        self._pools = pools
        self._champion_themes = dataset.champion_themes
        logger.info(
            "game_data_loaded",
            champion_themes=len(dataset.champion_themes),
            **{f"{mode.value}_size": pool.size for mode, pool in pools.items()},
        )

    def load_records(self, raw_by_mode: Mapping[GameMode | str, Sequence[Mapping[str, Any]]]) -> None:
        parsed = {parse_game_mode(mode): records for mode, records in raw_by_mode.items()}
        self.load(build_dataset(parsed))

    def _loaded_pools(self) -> dict[GameMode, QuestionPool[Any]]:
        if self._pools is None:
            raise GameDataNotLoadedError("game data is not loaded")
        return self._pools

    def _pool(self, mode: GameMode | str) -> QuestionPool[Any]:
        return self._loaded_pools()[parse_game_mode(mode)]

    def draw_next(self, mode: GameMode | str, predicate: ItemPredicate | None = None) -> Any | None:
        return self._pool(mode).draw(predicate)

    def reset_mode(self, mode: GameMode | str) -> None:
        self._pool(mode).reset()

    def reset_all(self) -> None:
        for pool in self._loaded_pools().values():
            pool.reset()

    def remaining_count(self, mode: GameMode | str, predicate: ItemPredicate | None = None) -> int:
        return self._pool(mode).remaining_count(predicate)

    def pool_size(self, mode: GameMode | str) -> int:
        return self._pool(mode).size

    def validate(self, user_answer: str, correct_answer: str, difficulty: int | None = None) -> bool:
        return self.validator.validate(user_answer, correct_answer, difficulty)

    def validate_against_list(self, user_answer: str, candidates: Sequence[str]) -> int:
        return self.validator.validate_against_list(user_answer, candidates)

    def check_item_answer(
        self,
        item: QuizItem,
        user_answer: str,
        difficulty: int | None = None,
    ) -> bool:
        answers = item.canonical_answers
        if len(answers) == 1:
            return self.validate(user_answer, answers[0], difficulty)
        return self.validate_against_list(user_answer, answers) >= 0

    def champion_themes(self, count: int | None = None) -> list[ChampionTheme]:
        count = self.champion_theme_count if count is None else count
        pool = self._pool(GameMode.CHAMPION)
        themed_ids = {question.theme_id for question in pool.items}
        themes = [theme for theme in self._champion_themes if theme.id in themed_ids]
        return self._rng.sample(themes, min(count, len(themes)))

    def champion_questions_for_theme(
        self,
        theme_id: str,
        count: int | None = None,
    ) -> list[ChampionQuestion]:
        count = self.champion_questions_per_theme if count is None else count
        pool = self._pool(GameMode.CHAMPION)
        questions: list[ChampionQuestion] = []
        while len(questions) < count:
            question = pool.draw(lambda item: item.theme_id == theme_id)
            if question is None:
                break
            questions.append(question)
        return questions

    def search_champion_themes(self, query: str) -> list[ChampionTheme]:
        self._loaded_pools()
        needle = normalize(query)
        if not needle:
            return list(self._champion_themes)
        return [
            theme
            for theme in self._champion_themes
            if needle in normalize(theme.title) or needle in normalize(theme.category)
        ]

    def draw_millions_question(self, difficulty: int) -> MillionsQuestion | None:
        return self.draw_next(GameMode.MILLIONS, lambda item: item.difficulty == difficulty)

    def draw_survival_question(self, round_number: int) -> SurvivalQuestion | None:
        tier = survival_tier_for_round(
            round_number,
            rounds_per_tier=self.survival_rounds_per_tier,
            max_tier=self.survival_max_tier,
        )
        question = self.draw_next(GameMode.SURVIVAL, lambda item: item.difficulty == tier)
        if question is None:
            question = self.draw_next(GameMode.SURVIVAL)
            if question is not None:
                logger.info(
                    "survival_tier_fallback",
                    round_number=round_number,
                    tier=tier,
                    served_difficulty=question.difficulty,
                )
        return question

    def draw_auction_item(self) -> AuctionItem | None:
        return self.draw_next(GameMode.AUCTIONS)

    def draw_who_am_i_question(self) -> WhoAmIQuestion | None:
        return self.draw_next(GameMode.WHO_AM_I)

    def draw_mercato_question(self) -> MercatoQuestion | None:
        return self.draw_next(GameMode.MERCATO)

    def draw_odd_one_out_question(self) -> OddOneOutQuestion | None:
        return self.draw_next(GameMode.ODD_ONE_OUT)

    def draw_missing_piece_question(self) -> MissingPieceQuestion | None:
        return self.draw_next(GameMode.MISSING_PIECE)

    def draw_higher_lower_question(self) -> HigherLowerQuestion | None:
        return self.draw_next(GameMode.HIGHER_LOWER)
