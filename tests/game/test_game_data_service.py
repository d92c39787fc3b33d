from __future__ import annotations

import random

import pytest

from footquiz.core.config import Settings
from footquiz.game.errors import GameDataNotLoadedError, UnknownGameModeError
from footquiz.game.modes.catalog import ALL_GAME_MODES, GameMode
from footquiz.game.service import GameDataService
from tests.game.question_fixtures import _dataset


@pytest.fixture
def service() -> GameDataService:
    loaded = GameDataService(rng=random.Random(11))
    loaded.load(_dataset())
    return loaded


def test_pool_access_before_load_fails_fast() -> None:
    service = GameDataService()

    assert service.is_loaded is False
    with pytest.raises(GameDataNotLoadedError):
        service.draw_next(GameMode.SURVIVAL)
    with pytest.raises(GameDataNotLoadedError):
        service.remaining_count(GameMode.SURVIVAL)
    with pytest.raises(GameDataNotLoadedError):
        service.reset_mode(GameMode.SURVIVAL)
    with pytest.raises(GameDataNotLoadedError):
        service.reset_all()
    with pytest.raises(GameDataNotLoadedError):
        service.champion_themes()


def test_validation_does_not_need_loaded_data() -> None:
    service = GameDataService()

    assert service.validate("mbappe", "Kylian Mbappé") is True
    assert service.validate_against_list("zidane", ["Zinédine Zidane", "Thierry Henry"]) == 0


def test_unknown_mode_is_rejected(service: GameDataService) -> None:
    with pytest.raises(UnknownGameModeError):
        service.draw_next("penalty_shootout")


def test_mode_accepts_plain_strings(service: GameDataService) -> None:
    assert service.pool_size("survival") == 10
    assert service.pool_size(" SURVIVAL ") == 10


def test_remaining_count_tracks_draws_and_reset(service: GameDataService) -> None:
    size = service.pool_size(GameMode.SURVIVAL)

    for drawn in range(1, 4):
        assert service.draw_next(GameMode.SURVIVAL) is not None
        assert service.remaining_count(GameMode.SURVIVAL) == size - drawn

    service.reset_mode(GameMode.SURVIVAL)

    assert service.remaining_count(GameMode.SURVIVAL) == size


def test_draw_next_exhausts_and_returns_none(service: GameDataService) -> None:
    size = service.pool_size(GameMode.CHAMPION)

    drawn_ids = {service.draw_next(GameMode.CHAMPION).id for _ in range(size)}

    assert len(drawn_ids) == size
    assert service.draw_next(GameMode.CHAMPION) is None
    assert service.remaining_count(GameMode.CHAMPION) == 0


def test_modes_are_independent(service: GameDataService) -> None:
    service.draw_next(GameMode.SURVIVAL)
    service.draw_next(GameMode.SURVIVAL)

    assert service.remaining_count(GameMode.MILLIONS) == service.pool_size(GameMode.MILLIONS)
    assert service.draw_auction_item() is not None
    assert service.draw_auction_item() is None
    assert service.remaining_count(GameMode.SURVIVAL) == 8


def test_reset_all_restores_every_pool(service: GameDataService) -> None:
    for mode in ALL_GAME_MODES:
        service.draw_next(mode)

    service.reset_all()

    for mode in ALL_GAME_MODES:
        assert service.remaining_count(mode) == service.pool_size(mode)


def test_draw_millions_question_filters_by_difficulty(service: GameDataService) -> None:
    first = service.draw_millions_question(1)
    second = service.draw_millions_question(1)

    assert {first.difficulty, second.difficulty} == {1}
    assert first != second
    assert service.draw_millions_question(1) is None
    assert service.draw_millions_question(15).answer == "OM"
    assert service.draw_millions_question(7) is None


@pytest.mark.parametrize(
    ("round_number", "expected_difficulty"),
    [(3, 1), (7, 2), (12, 3), (18, 4), (23, 5)],
)
def test_draw_survival_question_follows_round_tier(
    service: GameDataService,
    round_number: int,
    expected_difficulty: int,
) -> None:
    question = service.draw_survival_question(round_number)

    assert question is not None
    assert question.difficulty == expected_difficulty


def test_draw_survival_question_falls_back_when_tier_is_exhausted(service: GameDataService) -> None:
    service.draw_survival_question(1)
    service.draw_survival_question(1)

    fallback = service.draw_survival_question(1)

    assert fallback is not None
    assert fallback.difficulty != 1
    assert service.remaining_count(GameMode.SURVIVAL) == 7


def test_single_item_draws_per_mode(service: GameDataService) -> None:
    assert service.draw_who_am_i_question().target == "Zinédine Zidane"
    assert service.draw_mercato_question().answer == "Thierry Henry"
    assert service.draw_odd_one_out_question().answer == "Messi"
    assert service.draw_missing_piece_question().piece_type == "Podium"
    assert service.draw_higher_lower_question().correct_answer == "Plus"
    assert service.draw_who_am_i_question() is None


def test_champion_themes_returns_random_subset(service: GameDataService) -> None:
    themes = service.champion_themes()

    assert len(themes) == 4
    assert len({theme.id for theme in themes}) == 4
    assert len(service.champion_themes(count=20)) == 7


def test_champion_questions_for_theme_draws_without_replacement(service: GameDataService) -> None:
    first = service.champion_questions_for_theme("t1")
    second = service.champion_questions_for_theme("t1")

    assert len(first) == 5
    assert len(second) == 2
    assert all(question.theme_id == "t1" for question in first + second)
    assert len({question.id for question in first + second}) == 7
    assert service.champion_questions_for_theme("t1") == []


@pytest.mark.parametrize(
    ("query", "expected_ids"),
    [
        ("real madrid", {"real"}),
        ("CLUBS", {"real"}),
        ("légendes", {"t1", "t2", "t3", "t4", "t5", "t6"}),
        ("xyzabc123", set()),
    ],
)
def test_search_champion_themes(
    service: GameDataService,
    query: str,
    expected_ids: set[str],
) -> None:
    assert {theme.id for theme in service.search_champion_themes(query)} == expected_ids


def test_search_champion_themes_with_blank_query_returns_all(service: GameDataService) -> None:
    assert len(service.search_champion_themes("  ")) == 7


def test_check_item_answer_uses_canonical_answers(service: GameDataService) -> None:
    auction = service.draw_auction_item()
    who_am_i = service.draw_who_am_i_question()

    assert service.check_item_answer(auction, "giroud") is True
    assert service.check_item_answer(auction, "Pogba") is False
    assert service.check_item_answer(who_am_i, "zidane") is True


def test_load_records_adapts_raw_data() -> None:
    service = GameDataService(rng=random.Random(3))
    service.load_records(
        {
            "survival": [
                {"id": 1, "question": "Q1 ?", "options": ["A", "B"], "answer": "A", "difficulty": 1},
                {"id": 2, "question": "Q2 ?", "options": ["A", "B"], "answer": "B", "difficulty": 2},
            ],
            GameMode.HIGHER_LOWER: [
                {
                    "id": "h1",
                    "label": "Buts",
                    "reference": {"name": "Henry", "value": 51},
                    "target": {"name": "Giroud", "value": 57},
                    "correct_answer": "?",
                }
            ],
        }
    )

    assert service.pool_size(GameMode.SURVIVAL) == 2
    assert service.pool_size(GameMode.MILLIONS) == 0
    assert service.draw_higher_lower_question().correct_answer == "Plus"


def test_load_records_rejects_unknown_mode() -> None:
    with pytest.raises(UnknownGameModeError):
        GameDataService().load_records({"penalty_shootout": []})


def test_from_settings_applies_configuration() -> None:
    settings = Settings(
        QUIZ_DEFAULT_DIFFICULTY=10,
        QUIZ_RANDOM_SEED=5,
        QUIZ_CHAMPION_THEME_COUNT=2,
        QUIZ_CHAMPION_QUESTIONS_PER_THEME=3,
    )

    service = GameDataService.from_settings(settings)
    service.load(_dataset())

    assert service.validator.default_difficulty == 10
    assert len(service.champion_themes()) == 2
    assert len(service.champion_questions_for_theme("t2")) == 3
    assert service.validate("xx" + "cdefghijklmnopqrst", "abcdefghijklmnopqrst") is False
