from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from time import perf_counter

from footquiz.core.config import get_settings
from footquiz.core.logging import configure_logging
from footquiz.game.answers.validator import AnswerValidator
from footquiz.game.modes.catalog import GameMode
from footquiz.game.questions.pool import QuestionPool
from footquiz.game.questions.types import SurvivalQuestion

_ANSWERS: tuple[tuple[str, str], ...] = (
    ("mbappe", "Kylian Mbappé"),
    ("Mbape", "Kylian Mbappé"),
    ("zidane", "Zinédine Zidane"),
    ("Griezzman", "Antoine Griezmann"),
    ("Pogba", "Kylian Mbappé"),
    ("Platini", "Zinédine Zidane"),
)


@dataclass(frozen=True)
class BenchmarkResult:
    variant: str
    iterations: int
    elapsed_ms: float
    avg_ms: float


def _result(variant: str, iterations: int, started_at: float) -> BenchmarkResult:
    elapsed_ms = (perf_counter() - started_at) * 1000
    return BenchmarkResult(
        variant=variant,
        iterations=iterations,
        elapsed_ms=elapsed_ms,
        avg_ms=elapsed_ms / iterations,
    )


def _run_validation(*, iterations: int, difficulty: int) -> BenchmarkResult:
    validator = AnswerValidator(default_difficulty=difficulty)
    started_at = perf_counter()
    for idx in range(iterations):
        user_answer, correct_answer = _ANSWERS[idx % len(_ANSWERS)]
        validator.validate(user_answer, correct_answer)
    return _result("validate", iterations, started_at)


def _run_draws(*, pool_size: int, iterations: int, seed: int) -> BenchmarkResult:
    pool = QuestionPool(
        GameMode.SURVIVAL,
        (
            SurvivalQuestion(
                id=idx,
                question=f"Question {idx}?",
                options=("A", "B", "C", "D"),
                answer="A",
                difficulty=idx % 5 + 1,
            )
            for idx in range(pool_size)
        ),
        rng=random.Random(seed),
    )
    started_at = perf_counter()
    for _ in range(iterations):
        if pool.draw() is None:
            pool.reset()
            if pool.draw() is None:
                raise RuntimeError("draw returned None right after reset")
    return _result("draw", iterations, started_at)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark answer validation and question draws.")
    parser.add_argument("--pool-size", type=int, default=2000)
    parser.add_argument("--iterations", type=int, default=5000)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, app_env=settings.app_env)

    pool_size = max(1, int(args.pool_size))
    iterations = max(1, int(args.iterations))

    results = (
        _run_validation(iterations=iterations, difficulty=settings.quiz_default_difficulty),
        _run_draws(pool_size=pool_size, iterations=iterations, seed=args.seed),
    )
    print("Answer Validation / Question Draw Benchmark")  # noqa: T201
    print(f"pool_size={pool_size} iterations={iterations}")  # noqa: T201
    for result in results:
        print(  # noqa: T201
            f"{result.variant}: total_ms={result.elapsed_ms:.2f} avg_ms={result.avg_ms:.6f}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
