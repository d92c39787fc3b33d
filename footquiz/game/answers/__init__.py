from footquiz.game.answers.edit_distance import levenshtein_distance
from footquiz.game.answers.normalizer import normalize
from footquiz.game.answers.validator import AnswerValidator, difficulty_tolerance, list_tolerance

__all__ = [
    "AnswerValidator",
    "difficulty_tolerance",
    "levenshtein_distance",
    "list_tolerance",
    "normalize",
]
