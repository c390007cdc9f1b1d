"""Cache-control hints that resolvers attach to the request being executed."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class Scope(Enum):
    """Cache-control scope."""

    PUBLIC = 0
    PRIVATE = 1


@dataclass(frozen=True)
class Hint:
    """How long, and for whom, a result may be cached."""

    max_age: timedelta | None = None
    scope: Scope = Scope.PUBLIC

    def __str__(self) -> str:
        """Return the HTTP Cache-Control value of the hint."""
        if self.max_age is None:
            raise ValueError("hint has no max age")
        label = "public" if self.scope is Scope.PUBLIC else "private"
        return f"{label}, max-age={int(self.max_age.total_seconds())}"


def ttl(seconds: float) -> timedelta:
    """Return a cache duration of the given number of seconds."""
    return timedelta(seconds=seconds)


def resolve_hints(hints: Iterable[Hint]) -> Hint:
    """Combine hints: the shortest max age wins, and any private hint makes it private."""
    min_age: timedelta | None = None
    scope = Scope.PUBLIC
    for hint in hints:
        if hint.scope is Scope.PRIVATE:
            scope = Scope.PRIVATE
        if hint.max_age is not None and (min_age is None or hint.max_age < min_age):
            min_age = hint.max_age
    return Hint(max_age=min_age if min_age is not None else timedelta(0), scope=scope)


class HintCollector:
    """Gathers the hints given while one request runs."""

    def __init__(self) -> None:
        self._hints: list[Hint] = []
        self._lock = threading.Lock()

    def add(self, hint: Hint) -> None:
        with self._lock:
            self._hints.append(hint)

    def resolve(self) -> Hint:
        with self._lock:
            hints = list(self._hints)
        return resolve_hints(hints)


_current: ContextVar[HintCollector | None] = ContextVar("cache_hints", default=None)


@contextmanager
def hintable() -> Iterator[HintCollector]:
    """Collect the hints added inside the block."""
    collector = HintCollector()
    token = _current.set(collector)
    try:
        yield collector
    finally:
        _current.reset(token)


def add_hint(hint: Hint) -> None:
    """Add a hint to the current request; does nothing outside ``hintable``."""
    collector = _current.get()
    if collector is not None:
        collector.add(hint)