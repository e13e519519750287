"""Diff lifecycle events and the plugin interface that receives them."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal

PLUGIN_API_VERSION = "1.0"
PLUGIN_CONFIG_VERSION = 1
PLUGIN_CONFIG_ENV_VAR = "ITERDIFF_PLUGIN_CONFIG"

LifecycleStatus = Literal["ok", "error"]


@dataclass(frozen=True, slots=True)
class DiffStartEvent:
    """Sent before the first pair of elements is pulled."""

    left_label: str
    right_label: str
    stop_at_first_divergence: bool
    include_keeps: bool = True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class DiffEndEvent:
    """Sent once a diff has finished (``status="ok"``) or an input raised.

    ``total`` counts the positions compared; ``complete`` is false when the
    diff stopped at its first divergence. Error events only fill the
    ``error_*`` fields.
    """

    left_label: str
    right_label: str
    status: LifecycleStatus
    identical: bool | None = None
    first_divergence_index: int | None = None
    total: int | None = None
    complete: bool | None = None
    summary: dict[str, int] | None = None
    error_type: str | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class LifecyclePlugin:
    """Plugin with no-op diff hooks; subclass and override what you need."""

    api_version = PLUGIN_API_VERSION
    name = "lifecycle-plugin"

    def on_diff_start(self, event: DiffStartEvent) -> None:
        pass

    def on_diff_end(self, event: DiffEndEvent) -> None:
        pass
