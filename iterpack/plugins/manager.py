"""Diff lifecycle dispatch and plugin activation.

Plugins receive a ``DiffStartEvent`` before an eager diff pulls its first
pair and a ``DiffEndEvent`` once it has finished or failed. A failing hook
never aborts the diff: the error is kept as a ``PluginDiagnostic`` and
surfaced as a ``RuntimeWarning``.

The manager seen by ``diff_iterables`` is, in order of precedence, the one
activated with ``use_plugin_manager``/``use_plugins_from_config`` in the
current context, the one configured by ``ITERDIFF_PLUGIN_CONFIG``, or an
empty manager.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import asdict, dataclass, field
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Union
import warnings

from iterpack.plugins.base import PLUGIN_CONFIG_ENV_VAR, DiffEndEvent, DiffStartEvent
from iterpack.plugins.loader import PluginSpec, load_plugin, read_plugin_specs

logger = logging.getLogger(__name__)

DiffEvent = Union[DiffStartEvent, DiffEndEvent]

_HOOKS: dict[type, str] = {
    DiffStartEvent: "on_diff_start",
    DiffEndEvent: "on_diff_end",
}


@dataclass(frozen=True, slots=True)
class PluginDiagnostic:
    """A hook failure recorded against the diff that triggered it."""

    plugin_name: str
    hook: str
    error_type: str
    message: str
    left_label: str
    right_label: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(slots=True)
class PluginManager:
    plugins: tuple[object, ...] = ()
    diagnostics: list[PluginDiagnostic] = field(default_factory=list)
    specs: tuple[PluginSpec, ...] = ()

    @classmethod
    def from_specs(cls, specs: Iterable[PluginSpec]) -> PluginManager:
        """Instantiate every enabled spec; disabled ones are never imported."""
        specs = tuple(specs)
        return cls(
            plugins=tuple(load_plugin(spec) for spec in specs if spec.enabled),
            specs=specs,
        )

    def clear_diagnostics(self) -> None:
        self.diagnostics.clear()

    def on_diff_start(self, event: DiffStartEvent) -> None:
        self.notify(event)

    def on_diff_end(self, event: DiffEndEvent) -> None:
        self.notify(event)

    def notify(self, event: DiffEvent) -> None:
        hook = _HOOKS[type(event)]
        for plugin in self.plugins:
            callback = getattr(plugin, hook, None)
            if callback is None:
                continue
            try:
                callback(event)
            except Exception as error:
                self._record_failure(plugin, hook, event, error)

    def diff_started(
        self,
        left_label: str,
        right_label: str,
        *,
        stop_at_first_divergence: bool,
        include_keeps: bool,
    ) -> None:
        self.notify(
            DiffStartEvent(
                left_label=left_label,
                right_label=right_label,
                stop_at_first_divergence=stop_at_first_divergence,
                include_keeps=include_keeps,
            )
        )

    def diff_finished(
        self,
        left_label: str,
        right_label: str,
        *,
        identical: bool,
        first_divergence_index: int | None,
        total: int,
        complete: bool,
        summary: dict[str, int],
    ) -> None:
        self.notify(
            DiffEndEvent(
                left_label=left_label,
                right_label=right_label,
                status="ok",
                identical=identical,
                first_divergence_index=first_divergence_index,
                total=total,
                complete=complete,
                summary=summary,
            )
        )

    def diff_failed(self, left_label: str, right_label: str, error: BaseException) -> None:
        self.notify(
            DiffEndEvent(
                left_label=left_label,
                right_label=right_label,
                status="error",
                error_type=error.__class__.__name__,
                error_message=str(error),
            )
        )

    def _record_failure(
        self, plugin: object, hook: str, event: DiffEvent, error: Exception
    ) -> None:
        diagnostic = PluginDiagnostic(
            plugin_name=str(getattr(plugin, "name", plugin.__class__.__name__)),
            hook=hook,
            error_type=error.__class__.__name__,
            message=str(error),
            left_label=event.left_label,
            right_label=event.right_label,
        )
        self.diagnostics.append(diagnostic)
        logger.debug(
            "plugin %s failed in %s for %s..%s",
            diagnostic.plugin_name,
            hook,
            event.left_label,
            event.right_label,
            exc_info=error,
        )
        warnings.warn(
            f"iterdiff plugin failure: plugin={diagnostic.plugin_name} hook={hook} "
            f"diff={event.left_label}..{event.right_label} "
            f"error={diagnostic.error_type}: {diagnostic.message}",
            RuntimeWarning,
            stacklevel=3,
        )


def load_plugin_manager_from_file(path: str | Path) -> PluginManager:
    """Load a plugin manager from a JSON config file."""
    manager = PluginManager.from_specs(read_plugin_specs(path))
    logger.debug(
        "loaded %d plugin(s) from %s (%d disabled)",
        len(manager.plugins),
        path,
        len(manager.specs) - len(manager.plugins),
    )
    return manager


_context_manager: ContextVar[PluginManager | None] = ContextVar(
    "iterdiff_plugin_manager", default=None
)
_NO_PLUGINS = PluginManager()

# Manager built from the env config, with the path it was read from.
# Reused only while the file still parses to the same specs.
_env_manager: tuple[str, PluginManager] | None = None


def get_active_plugin_manager() -> PluginManager:
    """Return the manager diff lifecycle events should go to."""
    manager = _context_manager.get()
    if manager is not None:
        return manager

    config_path = os.environ.get(PLUGIN_CONFIG_ENV_VAR, "").strip()
    if not config_path:
        return _NO_PLUGINS
    return _manager_for_env_config(config_path)


def _manager_for_env_config(config_path: str) -> PluginManager:
    global _env_manager

    specs = tuple(read_plugin_specs(config_path))
    if _env_manager is not None:
        cached_path, cached = _env_manager
        if cached_path == config_path and cached.specs == specs:
            return cached

    manager = PluginManager.from_specs(specs)
    logger.debug(
        "activated %d plugin(s) from %s=%s",
        len(manager.plugins),
        PLUGIN_CONFIG_ENV_VAR,
        config_path,
    )
    _env_manager = (config_path, manager)
    return manager


@contextmanager
def use_plugin_manager(manager: PluginManager) -> Iterator[PluginManager]:
    """Send lifecycle events from diffs in this context to ``manager``."""
    token = _context_manager.set(manager)
    try:
        yield manager
    finally:
        _context_manager.reset(token)


@contextmanager
def use_plugins_from_config(path: str | Path) -> Iterator[PluginManager]:
    with use_plugin_manager(load_plugin_manager_from_file(path)) as manager:
        yield manager


def reset_env_plugin_manager() -> None:
    """Forget the manager built from ``ITERDIFF_PLUGIN_CONFIG``."""
    global _env_manager
    _env_manager = None
