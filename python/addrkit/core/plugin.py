# addrkit/core/plugin.py
import logging
from typing import Any, Optional


class BasePlugin:
    """
    Base class for all addrkit plugins.
    Concrete plugins define a `run` method; the CLI turns its parameters
    into flags of the plugin's subcommand.
    """
    # Set by the @addrkit decorator or by the plugin class itself.
    name: str
    version: str
    description: Optional[str] = None

    def __init__(self, **kwargs: Any):
        self._logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
