"""dbug demo — print a short walkthrough of the logger API.

Exercises plain logging, elapsed-time tracking across a pause, the
str.format call form, extended namespaces and closures. Only namespaces
enabled by the active patterns print anything, so try::

    DEBUG='*' dbug demo
    DEBUG='label*,-label:extended' dbug demo
"""

import argparse
import sys
import time

from dbug.logger import Logger


def register(subparsers, parents):
    """Register the 'demo' subcommand."""
    p = subparsers.add_parser(
        "demo",
        parents=parents,
        help="Print a walkthrough of the logger API",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--pause", type=int, default=158, metavar="MS",
                   help="Simulated slow call between logs (default: 158ms)")
    p.set_defaults(func=run)


def run(args):
    """Execute the demo command."""
    if not args.pattern_set.enable:
        print("Nothing is enabled. Try: DEBUG='*' dbug demo", file=sys.stderr)
        return 0

    def make(name):
        return Logger(name, args.pattern_set, colors=args.colors)

    debugger = make("label")
    debugger.log("hello world")
    debugger.log("hello world 2")

    # Simulate a slow function; the next line reports roughly this delay
    time.sleep(args.pause / 1000)

    tester = {"thing": "is a hand"}
    debugger.log(f"hello world 3: {tester!r}")
    debugger("hello world 3.5: {!r}", tester)
    debugger.log("hello world 4")

    extended = debugger.extend("extended")
    extended.log("extended hello world")

    more_ext = extended.extend("deep")
    more_ext.log("more")

    something = make("something")
    log = something.to_closure()
    log("hello from something")

    ext = something.extend("extended_again")
    ext.to_closure()("extended hello world")
    return 0
