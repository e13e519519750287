"""Versioned plugin configuration loader.

Config files are JSON objects of the form::

    {
      "config_version": 1,
      "plugins": [
        {"entrypoint": "package.module:Factory", "options": {...}, "enabled": true}
      ]
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
import importlib
import inspect
import json
from pathlib import Path
from typing import Any

from iterpack.plugins.base import PLUGIN_API_VERSION, PLUGIN_CONFIG_VERSION
from iterpack.plugins.exceptions import PluginConfigError, PluginLoadError

_ENTRY_KEYS = frozenset({"entrypoint", "options", "enabled"})


@dataclass(frozen=True, slots=True)
class PluginSpec:
    index: int
    entrypoint: str
    options: dict[str, Any] = field(default_factory=dict)
    enabled: bool = True
    source: str = "<config>"

    @property
    def module_name(self) -> str:
        return self.entrypoint.partition(":")[0]

    @property
    def attribute(self) -> str:
        return self.entrypoint.partition(":")[2]


def read_plugin_specs(path: str | Path) -> list[PluginSpec]:
    """Read and validate a JSON plugin config without importing anything."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise PluginConfigError(
            f"Invalid plugin config JSON ({config_path}): {error}",
            source=str(config_path),
        ) from error
    return parse_plugin_config(raw, source=str(config_path))


def parse_plugin_config(raw: Any, *, source: str = "<config>") -> list[PluginSpec]:
    if not isinstance(raw, dict):
        raise PluginConfigError(
            f"Plugin config must be a JSON object ({source}).", source=source
        )

    version = raw.get("config_version")
    if version != PLUGIN_CONFIG_VERSION:
        raise PluginConfigError(
            "Unsupported plugin config version "
            f"{version!r}; expected {PLUGIN_CONFIG_VERSION}.",
            source=source,
        )

    entries = raw.get("plugins")
    if not isinstance(entries, list):
        raise PluginConfigError(
            "Plugin config key 'plugins' must be a JSON array.", source=source
        )

    return [
        _parse_entry(entry, index=index, source=source)
        for index, entry in enumerate(entries, start=1)
    ]


def _parse_entry(entry: Any, *, index: int, source: str) -> PluginSpec:
    def reject(problem: str) -> PluginConfigError:
        return PluginConfigError(f"Plugin entry #{index} {problem}", source=source, entry=index)

    if not isinstance(entry, dict):
        raise reject("must be a JSON object.")

    unknown = sorted(set(entry.keys()) - _ENTRY_KEYS)
    if unknown:
        raise reject(f"contains unsupported keys: {', '.join(unknown)}")

    enabled = entry.get("enabled", True)
    if not isinstance(enabled, bool):
        raise reject("key 'enabled' must be boolean.")

    entrypoint = entry.get("entrypoint")
    if not isinstance(entrypoint, str) or ":" not in entrypoint:
        raise reject("key 'entrypoint' must be 'module:attribute'.")

    options = entry.get("options", {})
    if not isinstance(options, dict):
        raise reject("key 'options' must be a JSON object.")

    return PluginSpec(
        index=index,
        entrypoint=entrypoint,
        options=options,
        enabled=enabled,
        source=source,
    )


def load_plugin(spec: PluginSpec) -> object:
    """Import, instantiate and version-check one plugin."""
    target = _import_entrypoint(spec)
    plugin = _instantiate(target, spec)

    version = str(getattr(plugin, "api_version", PLUGIN_API_VERSION))
    expected_major = PLUGIN_API_VERSION.split(".", 1)[0]
    if version.split(".", 1)[0] != expected_major:
        raise _load_error(
            spec,
            f"'{spec.entrypoint}' declares unsupported api_version {version!r}; "
            f"supported major version is {expected_major}.",
        )
    return plugin


def _load_error(spec: PluginSpec, problem: str) -> PluginLoadError:
    return PluginLoadError(
        f"Plugin entry #{spec.index} {problem}", source=spec.source, entry=spec.index
    )


def _import_entrypoint(spec: PluginSpec) -> object:
    try:
        module = importlib.import_module(spec.module_name)
    except Exception as error:
        raise _load_error(
            spec, f"failed to import module '{spec.module_name}': {error}"
        ) from error

    try:
        return getattr(module, spec.attribute)
    except AttributeError as error:
        raise _load_error(
            spec, f"could not find attribute '{spec.attribute}' in '{spec.module_name}'."
        ) from error


def _instantiate(target: object, spec: PluginSpec) -> object:
    if inspect.isclass(target) or callable(target):
        try:
            return target(**spec.options)
        except Exception as error:
            raise _load_error(
                spec,
                f"failed to instantiate '{spec.entrypoint}' "
                f"with options {sorted(spec.options.keys())}: {error}",
            ) from error

    if spec.options:
        raise _load_error(
            spec, f"uses non-callable '{spec.entrypoint}' and cannot accept options."
        )
    return target
