"""The value stack owned by one evaluation run."""
from __future__ import annotations

from typing import Iterable, Iterator

from fig import FigValue
from fig.errors import StackUnderflow


class Stack:
    """LIFO value stack with low-water marks for list blocks.

    A mark records the stack depth when a list block starts. Popping below a
    mark lowers it, so the block collects exactly what is left above the
    lowest point its body reached.
    """

    __slots__ = ("_items", "_marks")

    def __init__(self, items: Iterable[FigValue] = ()):
        self._items: list[FigValue] = list(items)
        self._marks: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[FigValue]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def push(self, *values: FigValue) -> None:
        self._items.extend(values)

    def pop(self, symbol: str = "pop") -> FigValue:
        return self.pop_many(1, symbol)[0]

    def pop_many(self, count: int, symbol: str = "pop") -> list[FigValue]:
        """Remove the top count values, returned in push order."""
        if count == 0:
            return []
        available = len(self._items)
        if count > available:
            raise StackUnderflow(symbol, count, available)
        values = self._items[-count:]
        del self._items[-count:]
        depth = len(self._items)
        marks = self._marks
        for i in range(len(marks)):
            if marks[i] > depth:
                marks[i] = depth
        return values

    def mark(self) -> None:
        self._marks.append(len(self._items))

    def collect(self) -> list[FigValue]:
        """Close the innermost mark and return everything above it."""
        depth = self._marks.pop()
        values = self._items[depth:]
        del self._items[depth:]
        return values

    def to_list(self) -> list[FigValue]:
        return list(self._items)
