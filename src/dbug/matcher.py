"""
Namespace matching against a PatternSet.

Skip rules always win over enable rules, regardless of where they appear
in the DEBUG string: ``*,-db`` and ``-db,*`` both silence ``db``.
"""

import functools

from .patterns import PatternSet


@functools.lru_cache(maxsize=1024)
def is_enabled(patterns: PatternSet, name: str) -> bool:
    """Return True if ``name`` is switched on by ``patterns``.

    A name is enabled when at least one enable fragment matches it and
    no skip fragment does. Results are memoized per (patterns, name);
    PatternSet is immutable so the cache never goes stale.
    """
    if not patterns.enable:
        return False
    if any(f.matches(name) for f in patterns.skip):
        return False
    return any(f.matches(name) for f in patterns.enable)
