"""Plugin subsystem for diff lifecycle extensions."""

from iterpack.plugins.base import (
    PLUGIN_API_VERSION,
    PLUGIN_CONFIG_ENV_VAR,
    PLUGIN_CONFIG_VERSION,
    DiffEndEvent,
    DiffStartEvent,
    LifecyclePlugin,
)
from iterpack.plugins.exceptions import PluginConfigError, PluginError, PluginLoadError
from iterpack.plugins.loader import (
    PluginSpec,
    load_plugin,
    parse_plugin_config,
    read_plugin_specs,
)
from iterpack.plugins.manager import (
    PluginDiagnostic,
    PluginManager,
    get_active_plugin_manager,
    load_plugin_manager_from_file,
    reset_env_plugin_manager,
    use_plugin_manager,
    use_plugins_from_config,
)
from iterpack.plugins.reference import LifecycleTracePlugin

__all__ = [
    "PLUGIN_API_VERSION",
    "PLUGIN_CONFIG_VERSION",
    "PLUGIN_CONFIG_ENV_VAR",
    "PluginError",
    "PluginConfigError",
    "PluginLoadError",
    "DiffStartEvent",
    "DiffEndEvent",
    "LifecyclePlugin",
    "PluginDiagnostic",
    "PluginManager",
    "PluginSpec",
    "LifecycleTracePlugin",
    "load_plugin",
    "load_plugin_manager_from_file",
    "parse_plugin_config",
    "read_plugin_specs",
    "get_active_plugin_manager",
    "use_plugin_manager",
    "use_plugins_from_config",
    "reset_env_plugin_manager",
]
