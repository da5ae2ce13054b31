"""Main CLI entry point for dbug.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--patterns, --no-color)
  2. Second pass: dispatch to the subcommand

Global flags can appear before OR after the subcommand:
  dbug --patterns 'http*' check http:conn      # works
  dbug check http:conn --patterns 'http*'      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from dbug._version import BASE_VERSION
from dbug.config import PATTERN_ENV


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--patterns": {"aliases": ["-p"], "metavar": "PATTERNS", "default": None,
                   "help": f"Pattern string to use instead of ${PATTERN_ENV}"},
    "--no-color": {"action": "store_true", "default": False,
                   "help": "Disable colored output"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in dbug.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from dbug.commands import check, demo, patterns
    return [check, patterns, demo]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="dbug",
        description="dbug — namespace-gated debug logging",
        epilog=(
            "Run 'dbug <command> --help' for details on a specific command.\n"
            "\n"
            f"Patterns are read from ${PATTERN_ENV} unless --patterns is given,\n"
            "e.g. DEBUG='http*,-http:noisy'."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"dbug {BASE_VERSION}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # Let each command register itself
    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


def _resolve_patterns(global_args):
    """--patterns wins over DEBUG; DEBUG goes through the process registry."""
    if global_args.patterns is not None:
        from dbug.patterns import parse_patterns
        return parse_patterns(global_args.patterns)
    from dbug.registry import get_patterns
    return get_patterns()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for dbug CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Pass 2: parse subcommand args
    parser = _build_parser(_discover_commands())

    # If no args at all, print help
    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    # If subcommand selected but no handler, print help
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    from dbug.registry import get_config
    args.pattern_set = _resolve_patterns(global_args)
    args.colors = get_config().use_colors and not global_args.no_color

    # Dispatch
    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
