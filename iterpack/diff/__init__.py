"""Diff subsystem for iterdiff."""

from iterpack.diff.engine import DIFF_STATES, DiffIter, DiffState
from iterpack.diff.exceptions import DiffError, PatchError
from iterpack.diff.extension import IterDiff, IterDiffView, iter_diff
from iterpack.diff.formatting import (
    render_diff_line,
    render_diff_summary,
    render_first_divergence,
)
from iterpack.diff.models import DIFF_KINDS, Change, Diff, DiffKind, Insert, Keep, Remove
from iterpack.diff.patch import apply_diff
from iterpack.diff.result import DiffEntry, DiffResult, diff_iterables

__all__ = [
    "Diff",
    "DiffKind",
    "DIFF_KINDS",
    "Keep",
    "Change",
    "Insert",
    "Remove",
    "DiffIter",
    "DiffState",
    "DIFF_STATES",
    "IterDiff",
    "IterDiffView",
    "iter_diff",
    "apply_diff",
    "DiffEntry",
    "DiffResult",
    "diff_iterables",
    "DiffError",
    "PatchError",
    "render_diff_line",
    "render_diff_summary",
    "render_first_divergence",
]
