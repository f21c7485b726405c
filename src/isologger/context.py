"""
Logger context: a logger's identity plus its filter mask.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

from .levels import DEFAULT_FILTER

DEFAULT_NAME = 'Logger'


@dataclass
class Context:
    """Per-logger mutable state.

    Attributes:
        name: Identifies the logger in output and in the registry
        filter_level: Bitmask of enabled levels. None means no mask at
            all, which enables nothing.
    """
    name: Optional[str] = None
    filter_level: Optional[int] = None


ContextLike = Union[Context, Mapping[str, Any]]


def to_context(value: Optional[ContextLike]) -> Context:
    """Convert a Context or mapping to a fresh Context, no defaults applied.

    Unknown mapping keys are ignored. Missing keys stay None. Anything
    that is neither a Context nor a mapping gives an empty Context.
    """
    if isinstance(value, Context):
        return Context(name=value.name, filter_level=value.filter_level)
    if not isinstance(value, Mapping):
        return Context()
    known = {f.name for f in fields(Context)}
    return Context(**{k: v for k, v in value.items() if k in known})


def merge_context(partial: Optional[ContextLike] = None) -> Context:
    """Build a complete Context, filling unset fields with the defaults."""
    ctx = to_context(partial)
    if ctx.name is None:
        ctx.name = DEFAULT_NAME
    if ctx.filter_level is None:
        ctx.filter_level = DEFAULT_FILTER
    return ctx
