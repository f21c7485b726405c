"""
Default handler factory, formatter and sinks.

A handler receives (messages, level_name, context) and performs the
actual emission. The default handler runs a formatter over the
messages, joins the result with spaces and writes it to a sink under
the channel named after the level:

    [14:03:27] [Logger] [Info] server started

Sinks accept one joined string tagged by a channel name. Channel names
are the lowercased level names, except where CHANNEL_ALIASES maps a
level onto another channel (fatal goes to the error channel).
"""

import json
import sys
from datetime import datetime
from typing import Any, Callable, Iterable, List, Optional, TextIO, Tuple

from .context import Context

Handler = Callable[[List[Any], str, Context], None]
Formatter = Callable[[List[Any], str, Context], List[Any]]

# Level name -> sink channel, for levels that do not write to their own
CHANNEL_ALIASES = {
    'fatal': 'error',
}


def channel_for(level_name: str) -> str:
    """Sink channel for a level name (case-insensitive)."""
    key = level_name.lower()
    return CHANNEL_ALIASES.get(key, key)


def render_value(value: Any) -> str:
    """Render one loggable value as text.

    Strings pass through, None renders empty, numbers use str() and
    dicts, lists and tuples are written as compact JSON.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ''
    if isinstance(value, (dict, list, tuple)):
        try:
            return json.dumps(value, default=str, separators=(',', ':'))
        except (TypeError, ValueError):
            # Non-string keys or circular references
            return str(value)
    return str(value)


def join_messages(values: Iterable[Any]) -> str:
    """Space-join rendered values."""
    return ' '.join(render_value(v) for v in values)


def default_formatter(messages: List[Any], level_name: str,
                      context: Context) -> List[Any]:
    """Prefix messages with time, logger name and capitalized level.

    Returns a new list; messages is left untouched.
    """
    return [
        '[' + datetime.now().strftime('%X') + ']',
        '[' + str(context.name) + ']',
        '[' + level_name.capitalize() + ']',
        *messages,
    ]


# =============================================================================
# Sinks
# =============================================================================

class ConsoleSink:
    """Write channels to the terminal, console style.

    error and warn go to stderr; info, debug and trace go to stdout.
    Streams left as None resolve to sys.stdout / sys.stderr at write
    time so redirection (and pytest's capsys) is honoured.
    """

    STDERR_CHANNELS = frozenset({'error', 'warn'})
    STDOUT_CHANNELS = frozenset({'info', 'debug', 'trace'})

    def __init__(self, stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        self.stdout = stdout
        self.stderr = stderr

    def write(self, channel: str, text: str) -> None:
        """Write text followed by a newline to the channel's stream.

        Raises:
            ValueError: If the channel is not a console channel.
        """
        if channel in self.STDERR_CHANNELS:
            stream = self.stderr if self.stderr is not None else sys.stderr
        elif channel in self.STDOUT_CHANNELS:
            stream = self.stdout if self.stdout is not None else sys.stdout
        else:
            raise ValueError(f"Unknown console channel: {channel!r}")
        print(text, file=stream)


class StreamSink:
    """Write every channel to a single text stream."""

    def __init__(self, file: TextIO):
        self.file = file

    def write(self, channel: str, text: str) -> None:
        print(text, file=self.file)


class MemorySink:
    """Keep (channel, text) records in memory."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def write(self, channel: str, text: str) -> None:
        self.records.append((channel, text))

    def texts(self, channel: Optional[str] = None) -> List[str]:
        """Recorded texts, optionally only those of one channel."""
        return [t for c, t in self.records if channel is None or c == channel]

    def clear(self) -> None:
        self.records.clear()


# =============================================================================
# Handler factory
# =============================================================================

def create_default_handler(formatter: Optional[Formatter] = None,
                           sink=None) -> Handler:
    """Create a handler bound to a formatter and a sink.

    Args:
        formatter: Returns the message list to write; defaults to
            default_formatter. It is handed a copy of the messages, so
            a formatter that edits that copy and returns None also works.
        sink: Object with a write(channel, text) method; defaults to a
            ConsoleSink on the process streams

    Returns:
        A handler callable (messages, level_name, context) -> None
    """
    fmt = formatter if formatter is not None else default_formatter
    out = sink if sink is not None else ConsoleSink()

    def handler(messages: List[Any], level_name: str, context: Context) -> None:
        working = list(messages)
        formatted = fmt(working, level_name, context)
        # In-place formatters return None; write the list they edited
        if formatted is None:
            formatted = working
        out.write(channel_for(level_name), join_messages(formatted))

    return handler
