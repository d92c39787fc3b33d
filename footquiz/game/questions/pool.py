from __future__ import annotations

import random
import threading
from typing import Callable, Generic, Hashable, Iterable, TypeVar

import structlog

from footquiz.game.errors import DuplicateQuestionIdError
from footquiz.game.modes.catalog import GameMode
from footquiz.game.questions.identity import item_identity

logger = structlog.get_logger("footquiz.game.questions.pool")

T = TypeVar("T")
ItemPredicate = Callable[[T], bool]


def _matches(predicate: ItemPredicate | None, item: T) -> bool:
    return predicate is None or predicate(item)


class QuestionPool(Generic[T]):
    def __init__(
        self,
        mode: GameMode,
        items: Iterable[T],
        *,
        identity: Callable[[T], Hashable] = item_identity,
        rng: random.Random | None = None,
    ) -> None:
        self.mode = mode
        self._identity = identity
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()
        self._used: set[Hashable] = set()
        self._items, self._ids = self._index_items(items)

    def _index_items(self, items: Iterable[T]) -> tuple[tuple[T, ...], tuple[Hashable, ...]]:
        by_id: dict[Hashable, T] = {}
        for item in items:
            item_id = self._identity(item)
            existing = by_id.get(item_id)
            if existing is None:
                by_id[item_id] = item
                continue
            if existing != item:
                raise DuplicateQuestionIdError(
                    f"{self.mode.value}: question id {item_id!r} is used by two different items"
                )
            logger.warning(
                "question_pool_duplicate_identity",
                mode=self.mode.value,
                question_id=str(item_id),
            )
        return tuple(by_id.values()), tuple(by_id.keys())

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def used_count(self) -> int:
        return len(self._used)

    def is_used(self, item: T) -> bool:
        return self._identity(item) in self._used

    def draw(self, predicate: ItemPredicate | None = None) -> T | None:
        with self._lock:
            candidates = [
                (item_id, item)
                for item_id, item in zip(self._ids, self._items)
                if item_id not in self._used and _matches(predicate, item)
            ]
            if not candidates:
                logger.info(
                    "question_pool_exhausted",
                    mode=self.mode.value,
                    filtered=predicate is not None,
                    used=len(self._used),
                    size=len(self._items),
                )
                return None
            item_id, item = self._rng.choice(candidates)
            self._used.add(item_id)
            return item

    def reset(self) -> None:
        with self._lock:
            self._used.clear()

    def remaining_count(self, predicate: ItemPredicate | None = None) -> int:
        with self._lock:
            if predicate is None:
                return len(self._items) - len(self._used)
            return sum(
                1
                for item_id, item in zip(self._ids, self._items)
                if item_id not in self._used and predicate(item)
            )
