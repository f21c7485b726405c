"""
Logger — named emitter with bitmask level filtering.

Each severity method checks its bit against the logger's filter mask
and, when set, hands (messages, level_name, context) to the current
handler. The handler does all formatting and writing.

    log = Logger.get('server')
    log.enable(DEBUG)
    log.debug('listening on', 8080)
    if log.enabled_for(TRACE):
        log.trace(expensive_dump())

fatal() is special: it dispatches like the others and then always
raises FatalError, whether or not FATAL is in the mask.
"""

from typing import Any, Optional

from .context import Context, ContextLike, merge_context, to_context
from .handlers import Formatter, Handler, create_default_handler, join_messages
from .levels import LEVELS


class FatalError(RuntimeError):
    """Raised by Logger.fatal() after the message is dispatched."""


class Logger:
    """A named logger with its own filter mask and handler.

    Usage::

        log = Logger(context={'name': 'db'})
        log.warn('slow query', 1.8)           # filtered by default
        log.enable(WARN)
        log.warn('slow query', 1.8)           # [..] [db] [Warn] slow query 1.8
    """

    def __init__(self, context: Optional[ContextLike] = None,
                 formatter: Optional[Formatter] = None, sink=None):
        """
        Args:
            context: Partial context; unset fields get the defaults
                (name 'Logger', filter FATAL | ERROR | INFO)
            formatter: Formatter for the default handler
            sink: Sink for the default handler (default: console)
        """
        self._context: Context = merge_context(context)
        self._handler: Optional[Handler] = self.create_default_handler(
            formatter=formatter, sink=sink)

    def __repr__(self) -> str:
        return (f"<{type(self).__name__} name={self._context.name!r} "
                f"filter_level={self._context.filter_level!r}>")

    @classmethod
    def get(cls, name: str) -> 'Logger':
        """Return the registered logger for name, creating it if needed."""
        # Lazy import to avoid circular dependency
        from .registry import get_registry
        return get_registry().get(name)

    @staticmethod
    def create_default_handler(formatter: Optional[Formatter] = None,
                               sink=None) -> Handler:
        """Create the standard console-style handler.

        See handlers.create_default_handler.
        """
        return create_default_handler(formatter=formatter, sink=sink)

    # -------------------------------------------------------------------------
    # Severity methods
    # -------------------------------------------------------------------------

    def fatal(self, *values: Any) -> None:
        """Log on FATAL, then raise FatalError with the joined values.

        The error is raised even when FATAL is filtered out.
        """
        self._log('FATAL', values)
        raise FatalError(join_messages(values))

    def error(self, *values: Any) -> None:
        self._log('ERROR', values)

    def warn(self, *values: Any) -> None:
        self._log('WARN', values)

    def info(self, *values: Any) -> None:
        self._log('INFO', values)

    def debug(self, *values: Any) -> None:
        self._log('DEBUG', values)

    def trace(self, *values: Any) -> None:
        self._log('TRACE', values)

    def log(self, level_name: str, *values: Any) -> None:
        """Log on a level chosen by name (case-insensitive).

        log('fatal', ...) raises exactly like fatal().

        Raises:
            ValueError: If level_name is not a level.
        """
        key = level_name.upper()
        if key not in LEVELS:
            raise ValueError(f"Unknown log level: {level_name!r}")
        getattr(self, key.lower())(*values)

    def _log(self, level_name: str, values) -> None:
        if self._handler is not None and self.enabled_for(LEVELS[level_name]):
            self._handler(list(values), level_name, self._context)

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------

    def enabled_for(self, level: int) -> bool:
        """True if any bit of level is set in the filter mask.

        A context without an integer filter_level enables nothing.
        """
        return bool(self._mask() & level)

    def _mask(self) -> int:
        # Missing or non-integer masks count as empty
        level = getattr(self._context, 'filter_level', None)
        return level if isinstance(level, int) else 0

    def enable(self, level: int) -> None:
        """OR level (one bit or a combined mask) into the filter mask."""
        self._context.filter_level = self._mask() | level

    def disable(self, level: int) -> None:
        """Clear the bits of level from the filter mask."""
        self._context.filter_level = self._mask() & ~level

    # -------------------------------------------------------------------------
    # Context and handler
    # -------------------------------------------------------------------------

    def set_context(self, context: ContextLike) -> None:
        """Replace the context wholesale.

        Nothing is merged: a context without filter_level leaves the
        logger with no mask, so every level is disabled until enable()
        is called. A Context instance is kept as-is (not copied); a
        mapping is converted.
        """
        if isinstance(context, Context):
            self._context = context
        else:
            self._context = to_context(context)

    def get_context(self) -> Context:
        """Return the live context object."""
        return self._context

    def set_handler(self, handler: Optional[Handler]) -> None:
        """Replace the handler. None disables dispatch entirely."""
        self._handler = handler

    @property
    def name(self) -> Optional[str]:
        return self._context.name

    @property
    def filter_level(self) -> Optional[int]:
        return self._context.filter_level
