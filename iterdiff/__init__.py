"""Stable public API surface for iterdiff.

Iterate through the positional differences between two iterables::

    from iterdiff import Change, Keep, Remove, iter_diff

    diffs = list(iter_diff([0, 1, 2, 3], [0, 2, 2]))
    assert diffs == [Keep(), Change(2), Keep(), Remove()]

Each variant says what to do to the left element at that position to attain
the right one. This module is the supported import path for library users.
"""

from __future__ import annotations

from typing import Any, Iterable

from iterpack import __version__
from iterpack.diff import (
    Change,
    Diff,
    DiffEntry,
    DiffIter,
    DiffKind,
    DiffResult,
    DiffState,
    Insert,
    IterDiff,
    IterDiffView,
    Keep,
    PatchError,
    Remove,
    apply_diff,
    iter_diff,
)
from iterpack.diff import diff_iterables as _diff_iterables


def diff(
    left: Iterable[Any],
    right: Iterable[Any],
    *,
    first_only: bool = False,
    changes_only: bool = False,
    left_label: str = "left",
    right_label: str = "right",
) -> DiffResult:
    """Diff two iterables to completion and return structured comparison data.

    Args:
        left: Original iterable.
        right: Iterable to attain.
        first_only: Stop scanning when the first divergence is found.
        changes_only: Leave ``Keep`` positions out of ``entries``. They are
            still counted in the summary.
        left_label: Name reported for the left side.
        right_label: Name reported for the right side.

    Returns:
        Structured diff result.
    """
    return _diff_iterables(
        left,
        right,
        left_label=left_label,
        right_label=right_label,
        stop_at_first_divergence=first_only,
        include_keeps=not changes_only,
    )


def patch(left: Iterable[Any], diffs: Iterable[Diff[Any]], *, strict: bool = True) -> list[Any]:
    """Apply a diff stream to ``left`` and return the resulting list.

    Args:
        left: Original iterable the diffs were computed against.
        diffs: Diff values, in positional order.
        strict: Reject diff streams that leave left elements unconsumed.

    Returns:
        The elements of the attained sequence.

    Raises:
        PatchError: If the diff stream does not fit ``left``.
    """
    return list(apply_diff(left, diffs, strict=strict))


__all__ = [
    "__version__",
    "Diff",
    "DiffKind",
    "Keep",
    "Change",
    "Insert",
    "Remove",
    "DiffIter",
    "DiffState",
    "IterDiff",
    "IterDiffView",
    "DiffEntry",
    "DiffResult",
    "PatchError",
    "iter_diff",
    "apply_diff",
    "diff",
    "patch",
]
