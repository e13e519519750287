"""Entry points that attach positional diffing to arbitrary iterables."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

from iterpack.diff.engine import DiffIter

T = TypeVar("T")
U = TypeVar("U")


def iter_diff(lhs: Iterable[Any], rhs: Iterable[U]) -> DiffIter[U]:
    """Return a lazy iterator over the differences between ``lhs`` and ``rhs``.

    Args:
        lhs: Original iterable.
        rhs: Iterable to attain. Its elements become the payload of
            ``Change`` and ``Insert`` values.

    Returns:
        Single-pass iterator yielding one ``Diff`` per position.
    """
    return DiffIter(lhs, rhs)


class IterDiff:
    """Mixin adding ``.iter_diff(rhs)`` to any iterable class."""

    __slots__ = ()

    def iter_diff(self, rhs: Iterable[U]) -> DiffIter[U]:
        return DiffIter(self, rhs)  # type: ignore[arg-type]

    @staticmethod
    def wrap(iterable: Iterable[T]) -> IterDiffView[T]:
        return IterDiffView(iterable)


class IterDiffView(IterDiff, Generic[T]):
    """Wraps a plain iterable so it gains the ``iter_diff`` method."""

    __slots__ = ("_iterable",)

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterable = iterable

    def __iter__(self) -> Iterator[T]:
        return iter(self._iterable)
