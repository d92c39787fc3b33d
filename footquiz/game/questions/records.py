from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from footquiz.game.errors import InvalidQuestionRecordError
from footquiz.game.modes.catalog import GameMode
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
    StatLine,
    SurvivalQuestion,
    WhoAmIQuestion,
)

HIGHER = "Plus"
LOWER = "Moins"


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ChampionQuestionRecord(_Record):
    id: str | int
    question: str
    answer: str
    options: list[str] = Field(default_factory=list)
    points: int = 1
    explanation: str = ""


class ChampionThemeRecord(_Record):
    id: str
    title: str
    category: str = ""
    questions: list[ChampionQuestionRecord] = Field(default_factory=list)


class MillionsQuestionRecord(_Record):
    question: str
    options: list[str]
    answer: str
    difficulty: int = Field(ge=1)


class SurvivalQuestionRecord(_Record):
    id: int
    question: str
    options: list[str]
    answer: str
    difficulty: int = Field(ge=1)


class AuctionItemRecord(_Record):
    id: str
    theme: str
    description: str = ""
    total_count: int = Field(ge=0)
    answers: list[str] = Field(min_length=1)


class WhoAmIQuestionRecord(_Record):
    id: str
    target: str
    clues: list[str]
    difficulty: int = 1


class MercatoQuestionRecord(_Record):
    id: str
    clubs: list[str]
    answer: str
    options: list[str] = Field(default_factory=list)
    difficulty: int = 1


class OddOneOutQuestionRecord(_Record):
    id: str
    options: list[str]
    answer: str
    common_link: str = ""
    reason: str = ""
    difficulty: int = 1


class MissingPieceQuestionRecord(_Record):
    id: int
    type: str
    context: str
    options: list[str]
    answer: str
    difficulty: int = 1


class StatLineRecord(_Record):
    name: str
    value: float


class HigherLowerQuestionRecord(_Record):
    id: str
    label: str
    reference: StatLineRecord
    target: StatLineRecord
    correct_answer: str = HIGHER
    difficulty: int = 1

    @field_validator("correct_answer", mode="before")
    @classmethod
    def _coerce_direction(cls, value: Any) -> str:
        if value in (HIGHER, LOWER):
            return value
        return HIGHER


R = TypeVar("R", bound=_Record)


def _parse_records(
    mode: GameMode,
    raw_records: Sequence[Mapping[str, Any]],
    record_model: type[R],
) -> list[R]:
    parsed: list[R] = []
    for index, raw in enumerate(raw_records):
        try:
            parsed.append(record_model.model_validate(raw))
        except ValidationError as exc:
            raise InvalidQuestionRecordError(
                f"{mode.value}: record #{index} is invalid ({exc.error_count()} errors)"
            ) from exc
    return parsed


def to_champion_data(
    raw_themes: Sequence[Mapping[str, Any]],
) -> tuple[tuple[ChampionTheme, ...], tuple[ChampionQuestion, ...]]:
    themes: list[ChampionTheme] = []
    questions: list[ChampionQuestion] = []
    for record in _parse_records(GameMode.CHAMPION, raw_themes, ChampionThemeRecord):
        if not record.questions:
            continue
        themes.append(ChampionTheme(id=record.id, title=record.title, category=record.category))
        for question in record.questions:
            questions.append(
                ChampionQuestion(
                    id=f"{record.id}_q{question.id}",
                    theme_id=record.id,
                    question=question.question,
                    answer=question.answer,
                    options=tuple(question.options),
                    point_value=question.points,
                    explanation=question.explanation,
                )
            )
    return tuple(themes), tuple(questions)


def to_millions_questions(raw: Sequence[Mapping[str, Any]]) -> tuple[MillionsQuestion, ...]:
    return tuple(
        MillionsQuestion(
            question=record.question,
            options=tuple(record.options),
            answer=record.answer,
            difficulty=record.difficulty,
        )
        for record in _parse_records(GameMode.MILLIONS, raw, MillionsQuestionRecord)
    )


def to_survival_questions(raw: Sequence[Mapping[str, Any]]) -> tuple[SurvivalQuestion, ...]:
    return tuple(
        SurvivalQuestion(
            id=record.id,
            question=record.question,
            options=tuple(record.options),
            answer=record.answer,
            difficulty=record.difficulty,
        )
        for record in _parse_records(GameMode.SURVIVAL, raw, SurvivalQuestionRecord)
    )


def to_auction_items(raw: Sequence[Mapping[str, Any]]) -> tuple[AuctionItem, ...]:
    return tuple(
        AuctionItem(
            id=record.id,
            theme=record.theme,
            description=record.description,
            total_count=record.total_count,
            answers=tuple(record.answers),
        )
        for record in _parse_records(GameMode.AUCTIONS, raw, AuctionItemRecord)
    )


def to_who_am_i_questions(raw: Sequence[Mapping[str, Any]]) -> tuple[WhoAmIQuestion, ...]:
    return tuple(
        WhoAmIQuestion(
            id=record.id,
            target=record.target,
            clues=tuple(record.clues),
            difficulty=record.difficulty,
        )
        for record in _parse_records(GameMode.WHO_AM_I, raw, WhoAmIQuestionRecord)
    )


def to_mercato_questions(raw: Sequence[Mapping[str, Any]]) -> tuple[MercatoQuestion, ...]:
    return tuple(
        MercatoQuestion(
            id=record.id,
            clubs=tuple(record.clubs),
            answer=record.answer,
            options=tuple(record.options),
            difficulty=record.difficulty,
        )
        for record in _parse_records(GameMode.MERCATO, raw, MercatoQuestionRecord)
    )


def to_odd_one_out_questions(raw: Sequence[Mapping[str, Any]]) -> tuple[OddOneOutQuestion, ...]:
    return tuple(
        OddOneOutQuestion(
            id=record.id,
            options=tuple(record.options),
            answer=record.answer,
            common_link=record.common_link,
            reason=record.reason,
            difficulty=record.difficulty,
        )
        for record in _parse_records(GameMode.ODD_ONE_OUT, raw, OddOneOutQuestionRecord)
    )


def to_missing_piece_questions(raw: Sequence[Mapping[str, Any]]) -> tuple[MissingPieceQuestion, ...]:
    return tuple(
        MissingPieceQuestion(
            id=record.id,
            piece_type=record.type,
            context=record.context,
            options=tuple(record.options),
            answer=record.answer,
            difficulty=record.difficulty,
        )
        for record in _parse_records(GameMode.MISSING_PIECE, raw, MissingPieceQuestionRecord)
    )


def to_higher_lower_questions(raw: Sequence[Mapping[str, Any]]) -> tuple[HigherLowerQuestion, ...]:
    return tuple(
        HigherLowerQuestion(
            id=record.id,
            label=record.label,
            reference=StatLine(name=record.reference.name, value=record.reference.value),
            target=StatLine(name=record.target.name, value=record.target.value),
            correct_answer=record.correct_answer,
            difficulty=record.difficulty,
        )
        for record in _parse_records(GameMode.HIGHER_LOWER, raw, HigherLowerQuestionRecord)
    )


_SIMPLE_CONVERTERS: dict[GameMode, tuple[str, Callable[[Sequence[Mapping[str, Any]]], tuple]]] = {
    GameMode.MILLIONS: ("millions_questions", to_millions_questions),
    GameMode.SURVIVAL: ("survival_questions", to_survival_questions),
    GameMode.AUCTIONS: ("auction_items", to_auction_items),
    GameMode.WHO_AM_I: ("who_am_i_questions", to_who_am_i_questions),
    GameMode.MERCATO: ("mercato_questions", to_mercato_questions),
    GameMode.ODD_ONE_OUT: ("odd_one_out_questions", to_odd_one_out_questions),
    GameMode.MISSING_PIECE: ("missing_piece_questions", to_missing_piece_questions),
    GameMode.HIGHER_LOWER: ("higher_lower_questions", to_higher_lower_questions),
}


def build_dataset(raw_by_mode: Mapping[GameMode, Sequence[Mapping[str, Any]]]) -> GameDataset:
    """Adapt already-parsed raw records (one list per mode) into a typed dataset.

    Modes missing from ``raw_by_mode`` get empty pools.
    """
    fields: dict[str, tuple] = {}
    champion_raw = raw_by_mode.get(GameMode.CHAMPION)
    if champion_raw is not None:
        fields["champion_themes"], fields["champion_questions"] = to_champion_data(champion_raw)
    for mode, (field_name, converter) in _SIMPLE_CONVERTERS.items():
        raw = raw_by_mode.get(mode)
        if raw is not None:
            fields[field_name] = converter(raw)
    return GameDataset(**fields)
