"""
Function tracing decorator.

Routes call tracing through a dbug Logger, so tracing is switched on
and off by the same DEBUG patterns as everything else.

Usage::

    log = Logger('db')

    @trace(log)
    def fetch(key): ...

    @trace                      # logger named after the function's module
    def helper(): ...
"""

import functools
import inspect
from pathlib import Path

from .logger import Logger


def _short_repr(value):
    """repr() with long strings, long lists and Paths abbreviated."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def _format_args(func, args, kwargs):
    args_repr = []

    # Methods: show 'self' rather than the instance repr
    params = list(inspect.signature(func).parameters)
    remaining_args = args
    if args and params and params[0] in ('self', 'cls'):
        args_repr.append(params[0])
        remaining_args = args[1:]

    for arg in remaining_args:
        args_repr.append(_short_repr(arg))

    for key, value in kwargs.items():
        args_repr.append(f"{key}={_short_repr(value)}")

    return ', '.join(args_repr)


def _wrap(func, logger):
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    func_name = func.__name__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not logger.enabled:
            return func(*args, **kwargs)

        logger.log(f">> {module_name}.{func_name}({_format_args(func, args, kwargs)})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.log(f"!! {module_name}.{func_name} raised: {type(e).__name__}: {e}")
            raise

        if result is not None:
            logger.log(f"<< {module_name}.{func_name} returned: {_short_repr(result)}")
        return result

    return wrapper


def trace(target):
    """Decorator to trace function calls through a Logger.

    Shows function entry, return value (if not None) and raised
    exceptions when the logger is enabled. When it is disabled the
    function is called straight through.

    Args:
        target: A Logger to trace through, or the function itself when
            used bare (a Logger named after the function's module is
            created on first decoration)
    """
    if isinstance(target, Logger):
        return lambda func: _wrap(func, target)

    module = inspect.getmodule(target)
    return _wrap(target, Logger(module.__name__ if module else target.__name__))
