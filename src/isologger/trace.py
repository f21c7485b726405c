"""
Function tracing decorator.

Routes call tracing through a Logger's TRACE level, so tracing is
switched on and off with the same filter mask as everything else.
"""

import functools
import inspect
from pathlib import Path

from .levels import TRACE


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace_calls(logger=None):
    """Decorator to trace function calls on a logger's TRACE level.

    Shows function entry/exit with arguments and return values when
    the logger is enabled for TRACE. Otherwise the function is called
    directly.

    Args:
        logger: Logger to trace on. Defaults to Logger.get() of the
            decorated function's module, looked up at call time.

    Usage::

        @trace_calls()
        def load(path): ...

        @trace_calls(Logger.get('db'))
        def query(sql): ...
    """
    def decorator(func):
        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        func_name = func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = logger
            if log is None:
                # Lazy import to avoid circular dependency
                from .logger import Logger
                log = Logger.get(module_name)

            if not log.enabled_for(TRACE):
                return func(*args, **kwargs)

            args_repr = [_short_repr(arg) for arg in args]
            args_repr += [f"{key}={_short_repr(value)}"
                          for key, value in kwargs.items()]
            args_str = ', '.join(args_repr)

            log.trace(f">> {module_name}.{func_name}({args_str})")

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.trace(f"!! {module_name}.{func_name} raised: "
                          f"{type(e).__name__}: {e}")
                raise

            if result is not None:
                log.trace(f"<< {module_name}.{func_name} returned: "
                          f"{_short_repr(result)}")
            return result

        return wrapper

    return decorator
