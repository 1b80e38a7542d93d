# addrkit/core/registry.py
import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Type

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .plugin import BasePlugin

logger = logging.getLogger(__name__)

PLUGINS: Dict[str, Dict[str, Type["BasePlugin"]]] = defaultdict(dict)


def addrkit(kind: str, name: Optional[str] = None) -> Callable[[Type["BasePlugin"]], Type["BasePlugin"]]:
    def decorator(cls: Type["BasePlugin"]) -> Type["BasePlugin"]:
        from .plugin import BasePlugin
        if not issubclass(cls, BasePlugin):
            raise TypeError(
                f"Plugin class {cls.__module__}.{cls.__name__} must extend "
                f"addrkit.core.plugin.BasePlugin"
            )

        plugin_name_to_register = name or cls.__name__

        if plugin_name_to_register in PLUGINS[kind]:
            logger.warning(
                f"Plugin {kind}/{plugin_name_to_register} is being overridden. "
                f"Original: {PLUGINS[kind][plugin_name_to_register].__module__}, "
                f"New: {cls.__module__}.{cls.__name__}"
            )

        PLUGINS[kind][plugin_name_to_register] = cls

        setattr(cls, 'name', plugin_name_to_register)
        setattr(cls, 'kind', kind)

        if getattr(cls, 'version', None) is None:
            setattr(cls, 'version', "0.1.0")

        logger.debug(f"Registered plugin via decorator: {kind}/{plugin_name_to_register} from {cls.__module__}")
        return cls
    return decorator


def get_plugin(kind: str, name: str) -> Type["BasePlugin"]:
    try:
        return PLUGINS[kind][name]
    except KeyError:
        raise KeyError(f"No plugin registered as {kind}/{name}") from None


def get_all_plugins() -> List[Type["BasePlugin"]]:
    all_plugins = []
    for (kind, plugins) in PLUGINS.items():
        for (name, plugin) in plugins.items():
            all_plugins.append(plugin)
    return all_plugins
