"""
Process-wide configuration registry.

Holds the one PatternSet (and DebugConfig) for the process. Both are
built at most once: either explicitly at startup via init_patterns(),
or lazily from the environment the first time a Logger needs them.
Nothing here is ever rebuilt afterwards.
"""

import threading
from typing import Optional

from .config import DebugConfig, load_config
from .patterns import PatternSet, parse_patterns


# =============================================================================
# Module-level singletons
# =============================================================================

_lock = threading.Lock()
_config: Optional[DebugConfig] = None
_patterns: Optional[PatternSet] = None


def _config_locked() -> DebugConfig:
    # Caller holds _lock
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_config() -> DebugConfig:
    """Get the process DebugConfig, reading the environment on first use."""
    if _config is None:
        with _lock:
            return _config_locked()
    return _config


def init_patterns(raw: Optional[str] = None) -> PatternSet:
    """Initialize the process PatternSet.

    Call once at program startup. If the set was already built (by an
    earlier call or by lazy initialization) the existing set is returned
    unchanged.

    Args:
        raw: Pattern string to use instead of the DEBUG environment value

    Returns:
        The process-wide PatternSet
    """
    global _patterns
    with _lock:
        if _patterns is None:
            if raw is None:
                raw = _config_locked().patterns
            _patterns = parse_patterns(raw)
        return _patterns


def get_patterns() -> PatternSet:
    """Get the process PatternSet, building it from DEBUG if needed."""
    if _patterns is None:
        return init_patterns()
    return _patterns
