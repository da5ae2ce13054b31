"""
Namespace colors for terminal output.

Every namespace gets a stable xterm-256 color picked from a fixed palette,
so the same subsystem always renders in the same color across runs.
"""

import zlib


COLORS = [
    '#0000CC', '#0000FF', '#0033CC', '#0033FF', '#0066CC', '#0066FF', '#0099CC', '#0099FF',
    '#00CC00', '#00CC33', '#00CC66', '#00CC99', '#00CCCC', '#00CCFF', '#3300CC', '#3300FF',
    '#3333CC', '#3333FF', '#3366CC', '#3366FF', '#3399CC', '#3399FF', '#33CC00', '#33CC33',
    '#33CC66', '#33CC99', '#33CCCC', '#33CCFF', '#6600CC', '#6600FF', '#6633CC', '#6633FF',
    '#66CC00', '#66CC33', '#9900CC', '#9900FF', '#9933CC', '#9933FF', '#99CC00', '#99CC33',
    '#CC0000', '#CC0033', '#CC0066', '#CC0099', '#CC00CC', '#CC00FF', '#CC3300', '#CC3333',
    '#CC3366', '#CC3399', '#CC33CC', '#CC33FF', '#CC6600', '#CC6633', '#CC9900', '#CC9933',
    '#CCCC00', '#CCCC33', '#FF0000', '#FF0033', '#FF0066', '#FF0099', '#FF00CC', '#FF00FF',
    '#FF3300', '#FF3333', '#FF3366', '#FF3399', '#FF33CC', '#FF33FF', '#FF6600', '#FF6633',
    '#FF9900', '#FF9933', '#FFCC00', '#FFCC33',
]

FALLBACK_COLOR = 123

_RESET = '\x1b[0m'

# Upper bound of each 6x6x6 cube band
_CUBE_BANDS = (47, 114, 154, 194, 234)


def _scale_to_cube(value: int) -> int:
    for index, upper in enumerate(_CUBE_BANDS):
        if value <= upper:
            return index
    return 5


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Map an RGB triple onto the xterm-256 palette.

    Pure grays use the 24-step grayscale ramp (232-255), everything else
    the 6x6x6 color cube (16-231).
    """
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return 232 + (r - 8) * 24 // 247

    return 16 + 36 * _scale_to_cube(r) + 6 * _scale_to_cube(g) + _scale_to_cube(b)


def hex_to_ansi256(hex_color: str) -> int:
    """Convert ``#RRGGBB`` to an xterm-256 index.

    Raises:
        ValueError: If the string is not six hex digits
    """
    digits = hex_color.lstrip('#')
    if len(digits) != 6:
        raise ValueError(f"Expected #RRGGBB, got {hex_color!r}")
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return rgb_to_ansi256(r, g, b)


def color_for(namespace: str) -> int:
    """Pick the xterm-256 color for a namespace.

    Uses crc32 rather than hash() because str hashing is salted per
    process and colors must stay put between runs.
    """
    index = zlib.crc32(namespace.encode('utf-8')) % len(COLORS)
    try:
        return hex_to_ansi256(COLORS[index])
    except ValueError:
        return FALLBACK_COLOR


def colorize(color: int, text: str, enabled: bool = True) -> str:
    """Wrap text in a bold xterm-256 foreground escape."""
    if not enabled:
        return text
    return f"\x1b[1;38;5;{color}m{text}{_RESET}"
