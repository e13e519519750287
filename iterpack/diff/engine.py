"""Lazy positional diff engine over two iterators."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Literal, TypeVar

from iterpack.diff.models import Change, Diff, Insert, Keep, Remove

U = TypeVar("U")

# Which sides may still produce elements. Derived from the exhaustion flags only.
DiffState = Literal["both", "left_only", "right_only", "done"]

DIFF_STATES: tuple[str, ...] = ("both", "left_only", "right_only", "done")

_EXHAUSTED = object()


class DiffIter(Iterator[Diff[U]], Generic[U]):
    """Iterator of the differences between two iterators, one position per pull.

    Element ``i`` of the left side is compared with element ``i`` of the right
    side using ``==``; no alignment search happens. Each pull advances each
    side by at most one element, and a side that has signalled exhaustion is
    never pulled again. Exceptions raised by either cursor propagate unchanged.
    """

    __slots__ = ("_lhs", "_rhs", "_lhs_exhausted", "_rhs_exhausted")

    def __init__(self, lhs: Iterable[Any], rhs: Iterable[U]) -> None:
        self._lhs: Iterator[Any] = iter(lhs)
        self._rhs: Iterator[U] = iter(rhs)
        self._lhs_exhausted = False
        self._rhs_exhausted = False

    @property
    def state(self) -> DiffState:
        if self._lhs_exhausted and self._rhs_exhausted:
            return "done"
        if self._lhs_exhausted:
            return "right_only"
        if self._rhs_exhausted:
            return "left_only"
        return "both"

    def __iter__(self) -> DiffIter[U]:
        return self

    def __next__(self) -> Diff[U]:
        left = self._pull_left()
        right = self._pull_right()

        if left is _EXHAUSTED and right is _EXHAUSTED:
            raise StopIteration
        if left is _EXHAUSTED:
            return Insert(right)
        if right is _EXHAUSTED:
            return Remove()
        if left == right:
            return Keep()
        return Change(right)

    def _pull_left(self) -> Any:
        if self._lhs_exhausted:
            return _EXHAUSTED
        try:
            return next(self._lhs)
        except StopIteration:
            self._lhs_exhausted = True
            return _EXHAUSTED

    def _pull_right(self) -> Any:
        if self._rhs_exhausted:
            return _EXHAUSTED
        try:
            return next(self._rhs)
        except StopIteration:
            self._rhs_exhausted = True
            return _EXHAUSTED

    def __repr__(self) -> str:
        return f"DiffIter(state={self.state})"
