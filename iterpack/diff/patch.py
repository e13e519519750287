"""Replay a diff stream onto the left sequence to rebuild the right one."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, TypeVar

from iterpack.diff.exceptions import PatchError
from iterpack.diff.models import Change, Diff, Insert, Keep, Remove

T = TypeVar("T")

_MISSING = object()


def apply_diff(
    lhs: Iterable[T],
    diffs: Iterable[Diff[Any]],
    *,
    strict: bool = True,
) -> Iterator[Any]:
    """Lazily yield the sequence described by ``diffs`` applied to ``lhs``.

    ``Keep`` yields the current left element, ``Change`` and ``Insert`` yield
    their payload, ``Remove`` drops the current left element. ``Insert`` does
    not advance the left side.

    Raises:
        PatchError: If a diff needs a left element that is not there, or (with
            ``strict``) left elements remain after the diff stream ends.
    """
    cursor = iter(lhs)

    for position, diff in enumerate(diffs, start=1):
        if isinstance(diff, Keep):
            yield _advance(cursor, position, diff)
        elif isinstance(diff, Change):
            _advance(cursor, position, diff)
            yield diff.value
        elif isinstance(diff, Insert):
            yield diff.value
        elif isinstance(diff, Remove):
            _advance(cursor, position, diff)
        else:
            raise PatchError(f"position {position}: not a diff value: {diff!r}")

    if strict and next(cursor, _MISSING) is not _MISSING:
        raise PatchError("diff stream ended before the left sequence was consumed")


def _advance(cursor: Iterator[T], position: int, diff: Diff[Any]) -> T:
    element = next(cursor, _MISSING)
    if element is _MISSING:
        raise PatchError(
            f"position {position}: {diff.kind} requires a left element but the left "
            "sequence is exhausted"
        )
    return element  # type: ignore[return-value]
