"""
isologger — named loggers with bitmask level filtering.

A small logging façade providing:
- Six bit-flag levels combined freely into filter masks
- Named Logger instances with per-logger masks and handlers
- A default console-style handler with a pluggable formatter and sink
- A lock-guarded logger registry behind Logger.get()
- A call tracing decorator on the TRACE level

Public API:
    Logger           — named emitter (fatal/error/warn/info/debug/trace)
    Context          — logger name + filter mask
    FatalError       — raised by Logger.fatal()
    FATAL ... TRACE  — level bits; ALL, NONE, DEFAULT_FILTER masks
    parse_level_spec — "error,warn" / "+debug" -> mask
    create_default_handler, default_formatter
    ConsoleSink, StreamSink, MemorySink
    LoggerRegistry, init_registry, get_registry
    trace_calls      — function tracing decorator
"""

from ._version import __version__, __app_name__
from .levels import (
    FATAL, ERROR, WARN, INFO, DEBUG, TRACE,
    ALL, NONE, DEFAULT_FILTER, LEVELS,
    level_value, level_names, parse_level_spec,
)
from .context import Context
from .handlers import (
    create_default_handler, default_formatter,
    ConsoleSink, StreamSink, MemorySink,
    CHANNEL_ALIASES, channel_for, render_value, join_messages,
)
from .logger import Logger, FatalError
from .registry import LoggerRegistry, init_registry, get_registry
from .trace import trace_calls

__all__ = [
    '__version__', '__app_name__',
    'FATAL', 'ERROR', 'WARN', 'INFO', 'DEBUG', 'TRACE',
    'ALL', 'NONE', 'DEFAULT_FILTER', 'LEVELS',
    'level_value', 'level_names', 'parse_level_spec',
    'Context',
    'create_default_handler', 'default_formatter',
    'ConsoleSink', 'StreamSink', 'MemorySink',
    'CHANNEL_ALIASES', 'channel_for', 'render_value', 'join_messages',
    'Logger', 'FatalError',
    'LoggerRegistry', 'init_registry', 'get_registry',
    'trace_calls',
]
