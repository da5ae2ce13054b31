"""
dbug — namespace-gated debug logging.

Instrument code with debug loggers that stay silent unless their
namespace is switched on through the DEBUG environment variable.

Public API:
    Logger          — namespace-bound debug logger
    to_closure      — wrap a Logger as a single-argument callable
    trace           — function tracing decorator
    PatternSet      — parsed DEBUG patterns
    Fragment        — one enable/skip rule
    parse_patterns  — parse a DEBUG string
    is_enabled      — match a namespace against a PatternSet
    init_patterns   — one-time process pattern initialization
    get_patterns    — access the process PatternSet
    color_for       — stable color for a namespace
    colorize        — wrap text in an xterm-256 escape
"""

from ._version import __version__
from .patterns import Fragment, PatternSet, parse_patterns
from .matcher import is_enabled
from .registry import init_patterns, get_patterns, get_config
from .colors import color_for, colorize
from .logger import Logger, DELIMITER, to_closure
from .trace import trace

__all__ = [
    '__version__',
    'Logger', 'DELIMITER', 'to_closure', 'trace',
    'Fragment', 'PatternSet', 'parse_patterns', 'is_enabled',
    'init_patterns', 'get_patterns', 'get_config',
    'color_for', 'colorize',
]
