# globstate/core/conditions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Glob-style condition matching.

A condition is written ``pattern1 or pattern2 or ...``. Each pattern is a
shell glob matched against the whole text of an event:

- ``*`` matches any run of characters other than ``/``
- ``?`` matches a single character other than ``/``
- ``[abc]``, ``[a-z]`` and ``[^a-z]`` are character classes
- ``\\`` escapes the character that follows it
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

SEPARATOR = " or "


class _BadPattern(ValueError):
    """Internal marker for a glob that cannot be compiled."""


def _translate_class(pattern: str, i: int) -> Tuple[str, int]:
    """
    Translate the character class opening at ``pattern[i]`` (just past the
    ``[``). Return the regex fragment and the index after the closing ``]``.
    """
    n = len(pattern)
    negate = False
    if i < n and pattern[i] == "^":
        negate = True
        i += 1

    items = []
    while True:
        if i >= n:
            raise _BadPattern("unterminated character class")
        if pattern[i] == "]" and items:
            break
        lo, i = _class_char(pattern, i)
        if i + 1 < n and pattern[i] == "-" and pattern[i + 1] != "]":
            hi, i = _class_char(pattern, i + 1)
            if hi < lo:
                raise _BadPattern(f"inverted range {lo}-{hi}")
            items.append(f"{re.escape(lo)}-{re.escape(hi)}")
        else:
            items.append(re.escape(lo))

    body = "".join(items)
    return ("[^" if negate else "[") + body + "]", i + 1


def _class_char(pattern: str, i: int) -> Tuple[str, int]:
    n = len(pattern)
    if pattern[i] == "\\":
        i += 1
        if i >= n:
            raise _BadPattern("trailing backslash")
    elif pattern[i] == "]":
        raise _BadPattern("empty character class")
    elif pattern[i] == "-":
        raise _BadPattern("unescaped - in character class")
    return pattern[i], i + 1


@lru_cache(maxsize=512)
def _compile(pattern: str) -> Optional[re.Pattern]:
    """
    Compile one glob into an anchored regex. Return None for a malformed glob.
    """
    parts = []
    i, n = 0, len(pattern)
    try:
        while i < n:
            c = pattern[i]
            i += 1
            if c == "*":
                parts.append("[^/]*")
            elif c == "?":
                parts.append("[^/]")
            elif c == "[":
                fragment, i = _translate_class(pattern, i)
                parts.append(fragment)
            elif c == "\\":
                if i >= n:
                    raise _BadPattern("trailing backslash")
                parts.append(re.escape(pattern[i]))
                i += 1
            else:
                parts.append(re.escape(c))
    except _BadPattern as e:
        logger.debug("Ignoring malformed glob %r: %s", pattern, e)
        return None
    return re.compile("".join(parts), re.DOTALL)


def glob_match(pattern: str, text: str) -> bool:
    """
    Match a single glob against the whole text. Malformed globs never match.
    """
    compiled = _compile(pattern)
    if compiled is None:
        return False
    return compiled.fullmatch(text) is not None


def match_condition(expr: str, text: str) -> bool:
    """
    Return True if any ``" or "``-separated pattern in ``expr`` matches ``text``.
    """
    return any(glob_match(pattern, text) for pattern in expr.split(SEPARATOR))


@dataclass(frozen=True)
class Condition:
    """
    A disjunction of glob patterns tested against the text form of an event.
    """

    when: str

    @property
    def patterns(self) -> List[str]:
        """The individual glob patterns, in declaration order."""
        return self.when.split(SEPARATOR)

    def match(self, text: str) -> bool:
        """
        Check the event text against each pattern, stopping at the first match.

        :param text: Event rendered with ``str()``.
        :return: True if any pattern matches.
        """
        return match_condition(self.when, text)
