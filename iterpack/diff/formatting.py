"""CLI-friendly rendering for diff results."""

from __future__ import annotations

from iterpack.diff.models import Change, Insert
from iterpack.diff.result import DiffEntry, DiffResult

MARKERS: dict[str, str] = {
    "keep": "=",
    "change": "~",
    "insert": "+",
    "remove": "-",
}


def render_diff_line(entry: DiffEntry) -> str:
    marker = MARKERS[entry.diff.kind]
    if isinstance(entry.diff, (Change, Insert)):
        return f"{entry.index:>4} {marker} {entry.diff.value!r}"
    return f"{entry.index:>4} {marker}"


def render_diff_summary(result: DiffResult) -> str:
    summary = result.summary()
    return (
        f"left={result.left_label} right={result.right_label} "
        f"keep={summary['keep']} change={summary['change']} "
        f"insert={summary['insert']} remove={summary['remove']}"
    )


def render_first_divergence(result: DiffResult) -> str:
    first = result.first_divergence
    if first is None:
        return "no divergence detected"
    lines = [
        f"first divergence: position {first.index} ({first.diff.kind})",
        render_diff_line(first),
    ]
    return "\n".join(lines)
