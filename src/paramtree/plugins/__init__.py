"""
Contains the process wide plugin registry.

A plugin is any object (usually a module inside this package) which may provide the following attributes:

* `InstanceMethods` / `ClassMethods` - mixins for the validation class
* `ParamMethods` / `ParamClassMethods` - mixins for the validation class' `Param`
* `ResultMethods` / `ResultClassMethods` - mixins for the validation class' `Result`
* `load_dependencies(validation_class, *args, **kwargs)` - activates prerequisite plugins
* `configure(validation_class, *args, **kwargs)` - stores the plugin configuration in `validation_class.opts`

Plugins shipped with this package register themselves by calling `register_plugin` when they get imported and
can therefore be activated by name, e.g. `MyValidation.plugin("validation_helpers")`.
"""
import importlib
import logging
import threading
from typing import Any

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

_plugins: dict[str, Any] = {}
_plugins_lock = threading.Lock()


def register_plugin(name: str, plugin: Any) -> None:
    """
    Registers `plugin` under `name`. Registering a name twice replaces the former entry.
    """
    with _plugins_lock:
        _plugins[name] = plugin
    logger.debug("Registered plugin %r", name)


def load_plugin(name: str) -> Any:
    """
    Returns the plugin registered under `name`. If it is not registered yet, the module `paramtree.plugins.<name>`
    gets imported which is expected to register the plugin as a side effect.
    """
    plugin = _plugins.get(name)
    if plugin is not None:
        return plugin
    module_name = f"{__name__}.{name}"
    try:
        importlib.import_module(module_name)
    except ModuleNotFoundError as error:
        if error.name != module_name:
            raise
        raise ConfigurationError(f"plugin {name} could not be found") from error
    logger.debug("Loaded plugin module %s", module_name)
    plugin = _plugins.get(name)
    if plugin is None:
        raise ConfigurationError(f"plugin {name} did not register itself correctly in paramtree.plugins")
    return plugin
