"""
Logger registry — name -> Logger lookup-or-create.

The registry is an ordinary object. A module-level instance backs
Logger.get(); init_registry() replaces it at program startup when
loggers need a non-default filter or sink:

    init_registry(default_filter=parse_level_spec('+debug'))
    log = Logger.get('app')      # FATAL | ERROR | INFO | DEBUG

Entries live until clear() or until the registry is replaced.
"""

import threading
from typing import Callable, Dict, List, Optional

from .logger import Logger

LoggerFactory = Callable[[str], Logger]


class LoggerRegistry:
    """Lock-guarded mapping from logger name to Logger instance."""

    def __init__(self, factory: Optional[LoggerFactory] = None):
        """
        Args:
            factory: Builds the logger for a new name. Defaults to
                Logger(context={'name': name}).
        """
        self._factory = factory if factory is not None else _default_factory
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Logger:
        """Return the logger registered under name, creating it on first use.

        Repeated calls with the same name return the identical instance.
        """
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = self._factory(name)
                self._loggers[name] = logger
            return logger

    def names(self) -> List[str]:
        """Registered names, in creation order."""
        with self._lock:
            return list(self._loggers)

    def clear(self) -> None:
        """Forget every registered logger."""
        with self._lock:
            self._loggers.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)


def _default_factory(name: str) -> Logger:
    return Logger(context={'name': name})


# =============================================================================
# Module-level singleton
# =============================================================================

_registry: Optional[LoggerRegistry] = None


def init_registry(default_filter: Optional[int] = None,
                  sink=None) -> LoggerRegistry:
    """Replace the module-level registry.

    Call once at program startup. Loggers already handed out keep
    working but are no longer reachable through Logger.get().

    Args:
        default_filter: Filter mask for newly created loggers
            (default: FATAL | ERROR | INFO)
        sink: Sink for newly created loggers' default handlers
            (default: console)

    Returns:
        The new LoggerRegistry
    """
    global _registry

    def factory(name: str) -> Logger:
        return Logger(context={'name': name, 'filter_level': default_filter},
                      sink=sink)

    _registry = LoggerRegistry(factory=factory)
    return _registry


def get_registry() -> LoggerRegistry:
    """Get the module-level LoggerRegistry, creating a default if needed."""
    global _registry
    if _registry is None:
        _registry = LoggerRegistry()
    return _registry
