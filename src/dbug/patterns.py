"""
Pattern parsing for the DEBUG enable/skip language.

The raw pattern string is a list of tokens separated by commas and/or
whitespace. Each token is one of:

    name        enable exactly ``name``
    name*       enable every namespace starting with ``name``
    *           enable everything
    -name       skip exactly ``name``
    -name*      skip every namespace starting with ``name``

Examples:
    DEBUG=*                 # everything
    DEBUG=http,db*          # 'http' plus anything under 'db'
    DEBUG="*,-db:pool*"     # everything except the db pool
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple


WILDCARD = '*'
NEGATION = '-'

_TOKEN_SPLIT = re.compile(r'[\s,]+')


@dataclass(frozen=True)
class Fragment:
    """A single enable or skip rule.

    Attributes:
        text: The literal namespace, or the prefix when ``prefix`` is set
        prefix: True when the token ended with the wildcard marker
    """
    text: str
    prefix: bool = False

    def matches(self, name: str) -> bool:
        if self.prefix:
            return name.startswith(self.text)
        return name == self.text

    def __str__(self) -> str:
        return f"{self.text}{WILDCARD}" if self.prefix else self.text


@dataclass(frozen=True)
class PatternSet:
    """Parsed DEBUG value: enable rules and skip rules.

    Immutable and hashable, so the matcher can memoize on it.
    """
    enable: Tuple[Fragment, ...] = ()
    skip: Tuple[Fragment, ...] = ()

    @classmethod
    def empty(cls) -> 'PatternSet':
        return cls()

    @classmethod
    def from_string(cls, raw: Optional[str]) -> 'PatternSet':
        return parse_patterns(raw)

    def __bool__(self) -> bool:
        return bool(self.enable)

    def __str__(self) -> str:
        tokens = [str(f) for f in self.enable]
        tokens.extend(f"{NEGATION}{f}" for f in self.skip)
        return ','.join(tokens)


def parse_fragment(token: str) -> Fragment:
    """Parse one token (negation already stripped) into a Fragment."""
    if token.endswith(WILDCARD):
        return Fragment(text=token[:-1], prefix=True)
    return Fragment(text=token)


def parse_patterns(raw: Optional[str]) -> PatternSet:
    """Parse a raw DEBUG value into a PatternSet.

    Never raises: None, empty or junk input yields a set that enables
    nothing.

    Args:
        raw: The pattern string, e.g. ``"app:*,-app:noisy"``

    Returns:
        PatternSet with enable and skip fragments in source order
    """
    if not raw:
        return PatternSet.empty()

    enable = []
    skip = []
    for token in _TOKEN_SPLIT.split(raw.strip()):
        if not token:
            continue
        if token.startswith(NEGATION):
            body = token[len(NEGATION):]
            # A lone '-' names nothing
            if body:
                skip.append(parse_fragment(body))
        else:
            enable.append(parse_fragment(token))

    return PatternSet(enable=tuple(enable), skip=tuple(skip))
