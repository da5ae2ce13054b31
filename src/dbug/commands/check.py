"""dbug check — report whether namespaces are enabled.

Matches each namespace against the active patterns (DEBUG, or the
global --patterns flag) and prints one line per namespace::

    $ DEBUG='http*,-http:noisy' dbug check http http:noisy db
    http        enabled
    http:noisy  disabled
    db          disabled
"""

import argparse

from dbug.matcher import is_enabled


def register(subparsers, parents):
    """Register the 'check' subcommand."""
    p = subparsers.add_parser(
        "check",
        parents=parents,
        help="Show whether namespaces are enabled by the current patterns",
        description=(
            "Match each NAMESPACE against the DEBUG patterns (or --patterns)\n"
            "and report whether a logger with that name would print."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("namespaces", nargs="+", metavar="NAMESPACE",
                   help="Namespace to check (e.g. http:conn)")
    p.set_defaults(func=run)


def run(args):
    """Execute the check command."""
    width = max(len(name) for name in args.namespaces)
    for name in args.namespaces:
        state = "enabled" if is_enabled(args.pattern_set, name) else "disabled"
        print(f"{name:<{width}}  {state}")
    return 0
