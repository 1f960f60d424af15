"""Glob expansion of batch inputs."""

from __future__ import annotations

import glob
import logging
import os
import re
from collections.abc import Sequence

from imco.classify import io_reason
from imco.errors import BatchPattern, BatchReadEntry

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\\/]" if os.sep == "\\" else r"/")


def _class_end(pattern: str, start: int) -> int:
    """Return the index of the ``]`` closing the class opened at ``start``, or -1."""
    index = start + 1
    if index < len(pattern) and pattern[index] == "!":
        index += 1
    # A ']' directly after '[' or '[!' is a literal member of the class.
    if index < len(pattern) and pattern[index] == "]":
        index += 1
    return pattern.find("]", index)


def validate_pattern(pattern: str) -> None:
    """Reject glob patterns that cannot be compiled.

    Raises
    ------
    BatchPattern
        On an unterminated character class or a misplaced ``**``.
    """
    index = 0
    while index < len(pattern):
        if pattern[index] == "[":
            end = _class_end(pattern, index)
            if end < 0:
                raise BatchPattern(
                    f"invalid range pattern (near position {index})", pattern
                )
            index = end
        index += 1

    offset = 0
    for component in _SEPARATORS.split(pattern):
        if "**" in component:
            position = offset + component.index("**")
            if "***" in component:
                raise BatchPattern(
                    "wildcards are either regular `*` or recursive `**` "
                    f"(near position {position})",
                    pattern,
                )
            if component != "**":
                raise BatchPattern(
                    "recursive wildcards must form a single path component "
                    f"(near position {position})",
                    pattern,
                )
        offset += len(component) + 1


def expand(patterns: Sequence[str], batch_enabled: bool) -> list[str]:
    """Expand batch input patterns into concrete paths.

    Parameters
    ----------
    patterns : Sequence[str]
        Input arguments, in command-line order.
    batch_enabled : bool
        When ``False`` every entry is returned verbatim.

    Returns
    -------
    list[str]
        Matches of each pattern in sorted order, patterns kept in input order.

    Raises
    ------
    BatchPattern
        If a pattern is malformed.
    BatchReadEntry
        If a matched entry cannot be read.
    """
    if not batch_enabled:
        return list(patterns)

    expanded: list[str] = []
    for pattern in patterns:
        validate_pattern(pattern)
        matches = sorted(glob.glob(pattern, recursive=True))
        for match in matches:
            try:
                os.stat(match)
            except OSError as exc:
                raise BatchReadEntry(io_reason(exc)) from exc
        logger.debug("pattern %r matched %d entries", pattern, len(matches))
        expanded.extend(matches)
    return expanded
