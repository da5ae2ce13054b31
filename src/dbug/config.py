"""Environment configuration for dbug.

Everything is read from the process environment, once:

  DEBUG         pattern string selecting which namespaces print
  NO_COLOR      any non-empty value turns ANSI colors off
  DEBUG_COLORS  explicit on/off switch for colors (wins over NO_COLOR)

Colors are on by default.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


PATTERN_ENV = "DEBUG"
COLORS_ENV = "DEBUG_COLORS"
NO_COLOR_ENV = "NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class DebugConfig:
    """Resolved environment settings."""
    patterns: str = ""
    use_colors: bool = True


def _parse_switch(value):
    """Return True/False for a recognised on/off string, None otherwise."""
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return None


def load_config(environ: Optional[Mapping[str, str]] = None) -> DebugConfig:
    """Build a DebugConfig from an environment mapping (default os.environ)."""
    if environ is None:
        environ = os.environ

    use_colors = not environ.get(NO_COLOR_ENV)
    switch = _parse_switch(environ.get(COLORS_ENV, ""))
    if switch is not None:
        use_colors = switch

    return DebugConfig(
        patterns=environ.get(PATTERN_ENV, ""),
        use_colors=use_colors,
    )
