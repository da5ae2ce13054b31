"""
Logger — namespace-gated debug output.

A Logger is bound to one namespace. Whether it prints is decided once,
when it is constructed, by matching the namespace against the process
PatternSet. Enabled loggers print one line per call::

    <namespace> <message> +<elapsed>

where elapsed is the time since this logger's previous line (or since
its construction, for the first line).

Usage::

    log = Logger('http')
    log('listening on {port}', port=8080)

    conn = log.extend('conn')       # namespace 'http:conn'
    conn.log('accepted')

    emit = conn.to_closure()
    emit('closed')
"""

import sys
import threading
import time
from typing import Any, Callable, Optional, TextIO

from .colors import color_for, colorize
from .matcher import is_enabled
from .patterns import PatternSet
from .registry import get_config, get_patterns


DELIMITER = ':'


def format_elapsed(seconds: float) -> str:
    """Render an elapsed duration as a ``+N<unit>`` suffix.

    Milliseconds are truncated to whole numbers; larger units keep one
    decimal place.
    """
    ms = int(seconds * 1000)
    if ms < 1000:
        return f"+{max(ms, 0)}ms"
    if seconds < 60:
        return f"+{seconds:.1f}s"
    if seconds < 3600:
        return f"+{seconds / 60:.1f}m"
    return f"+{seconds / 3600:.1f}h"


class Logger:
    """A debug logger for one namespace.

    Args:
        namespace: Full label, including any parent segments
        patterns: PatternSet deciding enablement (default: process set)
        clock: Monotonic clock returning seconds (default: time.monotonic)
        file: Output stream (default: sys.stdout at write time)
        colors: Emit ANSI colors (default: from the environment config)
    """

    def __init__(
        self,
        namespace: str,
        patterns: Optional[PatternSet] = None,
        *,
        clock: Callable[[], float] = None,
        file: TextIO = None,
        colors: Optional[bool] = None,
    ):
        if patterns is None:
            patterns = get_patterns()
        if colors is None:
            colors = get_config().use_colors

        self._namespace = namespace
        self._patterns = patterns
        self._clock = clock if clock is not None else time.monotonic
        self._file = file
        self._colors = colors
        self._enabled = is_enabled(patterns, namespace)
        self._color = color_for(namespace)
        self._label = colorize(self._color, namespace, colors)
        self._lock = threading.Lock()
        self._last_emit = self._clock()

    @classmethod
    def new(cls, namespace: str, patterns: Optional[PatternSet] = None,
            **kwargs: Any) -> 'Logger':
        """Alternate constructor, same as Logger(namespace, ...)."""
        return cls(namespace, patterns, **kwargs)

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def color(self) -> int:
        return self._color

    @property
    def last_emit(self) -> float:
        """Clock reading of the last emitted line (or of construction)."""
        return self._last_emit

    def log(self, message: Any) -> None:
        """Print ``message`` if this logger is enabled.

        Disabled loggers return immediately without touching timing state.
        """
        if not self._enabled:
            return

        with self._lock:
            now = self._clock()
            elapsed = now - self._last_emit
            self._last_emit = now
            suffix = colorize(self._color, format_elapsed(elapsed), self._colors)
            out = self._file if self._file is not None else sys.stdout
            print(f"{self._label} {message} {suffix}", file=out, flush=True)

    def __call__(self, message: Any, *args: Any, **kwargs: Any) -> None:
        """Format with str.format (when arguments are given), then log.

        Formatting is skipped entirely for disabled loggers.
        """
        if not self._enabled:
            return
        if args or kwargs:
            message = str(message).format(*args, **kwargs)
        self.log(message)

    def extend(self, suffix: str) -> 'Logger':
        """Create a child logger named ``<namespace>:<suffix>``.

        The child is independent: it shares the pattern set, clock, stream
        and color setting but resolves its own enablement from the full
        name and keeps its own timing.
        """
        return Logger(
            f"{self._namespace}{DELIMITER}{suffix}",
            self._patterns,
            clock=self._clock,
            file=self._file,
            colors=self._colors,
        )

    def to_closure(self) -> Callable[[Any], None]:
        """Return a one-argument function that logs through this instance."""
        return to_closure(self)

    def __repr__(self) -> str:
        state = 'enabled' if self._enabled else 'disabled'
        return f"<Logger {self._namespace!r} {state}>"


def to_closure(logger: Logger) -> Callable[[Any], None]:
    """Wrap a Logger as a plain callable taking a single message."""
    def emit(message: Any) -> None:
        logger.log(message)

    return emit
