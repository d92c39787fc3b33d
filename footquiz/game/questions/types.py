from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChampionTheme:
    id: str
    title: str
    category: str


@dataclass(frozen=True, slots=True)
class ChampionQuestion:
    id: str
    theme_id: str
    question: str
    answer: str
    options: tuple[str, ...] = ()
    point_value: int = 1
    explanation: str = ""

    @property
    def canonical_answers(self) -> tuple[str, ...]:
        return (self.answer,)


@dataclass(frozen=True, slots=True)
class MillionsQuestion:
    question: str
    options: tuple[str, ...]
    answer: str
    difficulty: int

    @property
    def canonical_answers(self) -> tuple[str, ...]:
        return (self.answer,)


@dataclass(frozen=True, slots=True)
class SurvivalQuestion:
    id: int
    question: str
    options: tuple[str, ...]
    answer: str
    difficulty: int

    @property
    def canonical_answers(self) -> tuple[str, ...]:
        return (self.answer,)


@dataclass(frozen=True, slots=True)
class AuctionItem:
    id: str
    theme: str
    description: str
    total_count: int
    answers: tuple[str, ...]

    @property
    def canonical_answers(self) -> tuple[str, ...]:
        return self.answers


@dataclass(frozen=True, slots=True)
class WhoAmIQuestion:
    id: str
    target: str
    clues: tuple[str, ...]
    difficulty: int

    @property
    def canonical_answers(self) -> tuple[str, ...]:
        return (self.target,)


@dataclass(frozen=True, slots=True)
class MercatoQuestion:
    id: str
    clubs: tuple[str, ...]
    answer: str
    options: tuple[str, ...]
    difficulty: int

    @property
    def canonical_answers(self) -> tuple[str, ...]:
        return (self.answer,)


@dataclass(frozen=True, slots=True)
class OddOneOutQuestion:
    id: str
    options: tuple[str, ...]
    answer: str
    common_link: str
    reason: str
    difficulty: int

    @property
    def canonical_answers(self) -> tuple[str, ...]:
        return (self.answer,)


@dataclass(frozen=True, slots=True)
class MissingPieceQuestion:
    id: int
    piece_type: str
    context: str
    options: tuple[str, ...]
    answer: str
    difficulty: int

    @property
    def canonical_answers(self) -> tuple[str, ...]:
        return (self.answer,)


@dataclass(frozen=True, slots=True)
class StatLine:
    name: str
    value: float


@dataclass(frozen=True, slots=True)
class HigherLowerQuestion:
    id: str
    label: str
    reference: StatLine
    target: StatLine
    correct_answer: str
    difficulty: int

    @property
    def canonical_answers(self) -> tuple[str, ...]:
        return (self.correct_answer,)


QuizItem = (
    ChampionQuestion
    | MillionsQuestion
    | SurvivalQuestion
    | AuctionItem
    | WhoAmIQuestion
    | MercatoQuestion
    | OddOneOutQuestion
    | MissingPieceQuestion
    | HigherLowerQuestion
)


@dataclass(frozen=True, slots=True)
class GameDataset:
    champion_themes: tuple[ChampionTheme, ...] = ()
    champion_questions: tuple[ChampionQuestion, ...] = ()
    millions_questions: tuple[MillionsQuestion, ...] = ()
    survival_questions: tuple[SurvivalQuestion, ...] = ()
    auction_items: tuple[AuctionItem, ...] = ()
    who_am_i_questions: tuple[WhoAmIQuestion, ...] = ()
    mercato_questions: tuple[MercatoQuestion, ...] = ()
    odd_one_out_questions: tuple[OddOneOutQuestion, ...] = ()
    missing_piece_questions: tuple[MissingPieceQuestion, ...] = ()
    higher_lower_questions: tuple[HigherLowerQuestion, ...] = ()
