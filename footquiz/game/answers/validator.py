from __future__ import annotations

from typing import Callable, Sequence

from footquiz.game.answers.edit_distance import levenshtein_distance
from footquiz.game.answers.normalizer import normalize

DEFAULT_DIFFICULTY = 5
MIN_NAME_TOKEN_LENGTH = 3
LIST_TOLERANCE_DIVISOR = 4


def difficulty_tolerance(length: int, difficulty: int) -> int:
    return max(1, length * (10 - difficulty) // 20)


def list_tolerance(length: int) -> int:
    return max(1, length // LIST_TOLERANCE_DIVISOR)


def _surname_forms(normalized_answer: str) -> list[str]:
    words = normalized_answer.split(" ")
    last_word = words[-1]
    if len(words) < 2 or len(last_word) < MIN_NAME_TOKEN_LENGTH or last_word.isdigit():
        return []
    # Trailing runs only: "de bruyne" and "bruyne" for "kevin de bruyne", never "kevin".
    return [" ".join(words[start:]) for start in range(1, len(words))]


def _is_close(
    normalized_user: str,
    normalized_correct: str,
    *,
    tolerance: Callable[[int], int],
) -> bool:
    if normalized_user == normalized_correct:
        return True
    if levenshtein_distance(normalized_user, normalized_correct) <= tolerance(len(normalized_correct)):
        return True
    return any(
        levenshtein_distance(normalized_user, surname) <= tolerance(len(surname))
        for surname in _surname_forms(normalized_correct)
    )


class AnswerValidator:
    def __init__(self, *, default_difficulty: int = DEFAULT_DIFFICULTY) -> None:
        self.default_difficulty = default_difficulty

    def validate(
        self,
        user_answer: str,
        correct_answer: str,
        difficulty: int | None = None,
    ) -> bool:
        """Check a free-text answer against one canonical answer.

        Tolerance is ``max(1, floor(len(correct) * (10 - difficulty) / 20))`` edits
        over the normalized strings, so a higher difficulty forgives fewer typos
        but never fewer than one.
        """
        if difficulty is None:
            difficulty = self.default_difficulty
        normalized_user = normalize(user_answer)
        normalized_correct = normalize(correct_answer)
        return _is_close(
            normalized_user,
            normalized_correct,
            tolerance=lambda length: difficulty_tolerance(length, difficulty),
        )

    def validate_against_list(self, user_answer: str, candidates: Sequence[str]) -> int:
        """Return the index of the first candidate the answer matches, or -1."""
        if isinstance(candidates, str):
            raise TypeError("validate_against_list expects a sequence of candidates, got str")
        normalized_user = normalize(user_answer)
        for index, candidate in enumerate(candidates):
            if _is_close(normalized_user, normalize(candidate), tolerance=list_tolerance):
                return index
        return -1
