"""Lazy, restartable lists.

A LazyList holds a factory rather than elements: every traversal calls the
factory for a fresh iterator, so an unbounded list can be walked any number of
times without ever being materialised.
"""
from __future__ import annotations

from itertools import chain, count, islice
from typing import Callable, Iterable, Iterator

from fig import FigValue

_MISSING = object()


class LazyList:
    """Produce-on-demand sequence of Fig values."""

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterable[FigValue]]):
        self._factory = factory

    @classmethod
    def naturals(cls, start: int = 1) -> LazyList:
        return cls(lambda: count(start))

    @classmethod
    def chain(cls, *sources: Iterable[FigValue]) -> LazyList:
        # each source is itself restartable (list or LazyList)
        return cls(lambda: chain.from_iterable(sources))

    def __iter__(self) -> Iterator[FigValue]:
        return iter(self._factory())

    def __repr__(self) -> str:
        head = self.take(4)
        shown = ", ".join(repr(x) for x in head[:3])
        more = ", ..." if len(head) > 3 else ""
        return f"LazyList([{shown}{more}])"

    def first(self, default: FigValue = _MISSING) -> FigValue:
        for item in self:
            return item
        if default is _MISSING:
            raise IndexError("first of an empty lazy list")
        return default

    def is_empty(self) -> bool:
        return self.first(_MISSING) is _MISSING

    def take(self, n: int) -> list[FigValue]:
        return list(islice(self, max(n, 0)))

    def drop(self, n: int) -> LazyList:
        factory = self._factory
        n = max(n, 0)
        return LazyList(lambda: islice(factory(), n, None))

    def map(self, fn: Callable[[FigValue], FigValue]) -> LazyList:
        factory = self._factory
        return LazyList(lambda: map(fn, factory()))

    def filter(self, predicate: Callable[[FigValue], bool]) -> LazyList:
        factory = self._factory
        return LazyList(lambda: filter(predicate, factory()))

    def materialize(self) -> list[FigValue]:
        """Realise every element; never returns for an unbounded list."""
        return list(self)
