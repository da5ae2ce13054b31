"""dbug patterns — show how the active pattern string was parsed."""

import argparse


def register(subparsers, parents):
    """Register the 'patterns' subcommand."""
    p = subparsers.add_parser(
        "patterns",
        parents=parents,
        help="Show the parsed enable and skip rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.set_defaults(func=run)


def _describe(fragment):
    if not fragment.prefix:
        return f"{fragment.text}  (exact)"
    if not fragment.text:
        return "*  (everything)"
    return f"{fragment}  (prefix '{fragment.text}')"


def run(args):
    """Execute the patterns command."""
    patterns = args.pattern_set
    if not patterns.enable:
        print("Nothing enabled (DEBUG is unset or has no enable rules).")

    for title, fragments in (("enable", patterns.enable), ("skip", patterns.skip)):
        if not fragments:
            continue
        print(f"{title}:")
        for fragment in fragments:
            print(f"  {_describe(fragment)}")
    return 0
