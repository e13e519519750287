"""Reference lifecycle plugin implementation."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from iterpack.plugins.base import DiffEndEvent, DiffStartEvent, LifecyclePlugin


@dataclass(slots=True)
class LifecycleTracePlugin(LifecyclePlugin):
    """Appends each diff lifecycle hook as one NDJSON record."""

    output_path: str = "runs/plugins/diff-trace.ndjson"
    name: str = "diff-trace"

    def on_diff_start(self, event: DiffStartEvent) -> None:
        self._append("on_diff_start", event.to_dict())

    def on_diff_end(self, event: DiffEndEvent) -> None:
        self._append("on_diff_end", event.to_dict())

    def _append(self, hook: str, event: dict) -> None:
        path = Path(self.output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        record = json.dumps(
            {"hook": hook, "plugin": self.name, "event": event},
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
        with path.open("a", encoding="utf-8") as handle:
            handle.write(record + "\n")
