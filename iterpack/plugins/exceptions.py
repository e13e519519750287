"""Errors raised while reading plugin configs and loading diff plugins."""

from __future__ import annotations


class PluginError(Exception):
    """A diff plugin could not be configured or loaded.

    ``source`` names the config the error came from and ``entry`` the 1-based
    plugin entry inside it, when either is known.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        entry: int | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.entry = entry


class PluginConfigError(PluginError):
    """The config document, or one of its plugin entries, is malformed."""


class PluginLoadError(PluginError):
    """An entrypoint failed to import, instantiate or pass the api_version check."""
