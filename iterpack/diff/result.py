"""Eager diff driver with first-divergence detection."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Iterable

from iterpack.diff.extension import iter_diff
from iterpack.diff.models import DIFF_KINDS, Diff, Keep
from iterpack.plugins import get_active_plugin_manager

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """A diff value at a 1-based position."""

    index: int
    diff: Diff[Any]

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, **self.diff.to_dict()}


@dataclass(slots=True)
class DiffResult:
    """Structured diff of two iterables.

    ``first_divergence`` is recorded by ``diff_iterables`` as it runs, even when
    kept positions are left out of ``entries``.
    """

    left_label: str
    right_label: str
    entries: list[DiffEntry] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=lambda: {kind: 0 for kind in DIFF_KINDS})
    complete: bool = True
    first_divergence: DiffEntry | None = None

    @property
    def identical(self) -> bool:
        return self.first_divergence is None

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def summary(self) -> dict[str, int]:
        return dict(self.counts)

    def to_dict(self) -> dict[str, Any]:
        first = self.first_divergence
        return {
            "left_label": self.left_label,
            "right_label": self.right_label,
            "identical": self.identical,
            "complete": self.complete,
            "total": self.total,
            "summary": self.summary(),
            "first_divergence": first.to_dict() if first is not None else None,
            "entries": [entry.to_dict() for entry in self.entries],
        }


def diff_iterables(
    lhs: Iterable[Any],
    rhs: Iterable[Any],
    *,
    left_label: str = "left",
    right_label: str = "right",
    stop_at_first_divergence: bool = False,
    include_keeps: bool = True,
) -> DiffResult:
    """Diff two iterables to completion in one pass.

    Positions are compared in order. With ``include_keeps=False`` only
    divergent entries are kept, although ``Keep`` values are still counted.
    """
    plugin_manager = get_active_plugin_manager()
    plugin_manager.diff_started(
        left_label,
        right_label,
        stop_at_first_divergence=stop_at_first_divergence,
        include_keeps=include_keeps,
    )

    result = DiffResult(left_label=left_label, right_label=right_label)

    try:
        for index, diff in enumerate(iter_diff(lhs, rhs), start=1):
            result.counts[diff.kind] += 1
            if isinstance(diff, Keep):
                if include_keeps:
                    result.entries.append(DiffEntry(index=index, diff=diff))
                continue

            entry = DiffEntry(index=index, diff=diff)
            result.entries.append(entry)
            if result.first_divergence is None:
                result.first_divergence = entry
            if stop_at_first_divergence:
                result.complete = False
                break
    except Exception as error:
        logger.debug("diff %s..%s failed: %r", left_label, right_label, error)
        plugin_manager.diff_failed(left_label, right_label, error)
        raise

    first = result.first_divergence
    first_index = first.index if first is not None else None
    logger.debug(
        "diff %s..%s finished: total=%d first_divergence=%s",
        left_label,
        right_label,
        result.total,
        first_index,
    )
    plugin_manager.diff_finished(
        left_label,
        right_label,
        identical=result.identical,
        first_divergence_index=first_index,
        total=result.total,
        complete=result.complete,
        summary=result.summary(),
    )
    return result
