"""Pattern compiler for gitignore-style sync rules.

Turns one line of a ``.syncignore`` file into a :class:`Rule`.

Supported syntax:
- ``# comment`` and blank lines are skipped
- ``!pattern`` re-includes paths matched by other rules
- ``dir/`` matches a directory segment and everything beneath it
- ``/pattern`` is anchored at the workspace root
- ``**/pattern`` may start matching at any depth
- ``*`` and ``?`` never cross ``/``; ``**`` as a whole segment does
- ``\\#`` and ``\\!`` escape a leading ``#`` or ``!``

Every other character is matched literally. Compilation never raises.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from syncignore.core.types import Rule

logger = logging.getLogger(__name__)

# Regex fragments for glob tokens
STAR = "[^/]*"
QUESTION = "[^/]"
ANY_SEGMENTS = "(?:.*/)?"  # zero or more whole segments, including their slash
ANY_TAIL = "/.*"  # everything beneath a directory
SUBTREE = "(?:/.*)?"  # a match on a directory covers its contents
END = r"\Z"  # end of string, never before a trailing newline


def compile_pattern(line: str, ordinal: int = 0) -> Rule | None:
    """Compile a single pattern line.

    Args:
        line: Raw pattern text, as read from a pattern file or passed in.
        ordinal: Position of the pattern in load order.

    Returns:
        The compiled Rule, or None for blank lines, comments and patterns
        that are empty once their markers are stripped.
    """
    raw = line.strip()
    if not raw or raw.startswith("#"):
        return None

    text = raw
    negate = False
    if text.startswith("\\#") or text.startswith("\\!"):
        text = text[1:]
    elif text.startswith("!"):
        negate = True
        text = text[1:]

    directory_anchored = text.endswith("/")

    rooted = text.startswith("/")
    text = text.lstrip("/")

    basename_only = not rooted and "/" not in text.rstrip("/")

    # Prefix is stripped before the anchor slash so "**/" leaves nothing
    any_depth = False
    if text.startswith("**/"):
        any_depth = True
        while text.startswith("**/"):
            text = text[3:]

    text = text.rstrip("/")

    if not text:
        logger.debug("Skipping empty pattern %r", raw)
        return None

    return Rule(
        raw=raw,
        ordinal=ordinal,
        negate=negate,
        directory_anchored=directory_anchored,
        basename_only=basename_only,
        any_depth=any_depth,
        pattern=text,
        glob=_compile_glob(text, basename_only),
    )


def compile_patterns(lines: Iterable[str], start: int = 0) -> list[Rule]:
    """Compile many pattern lines, dropping blanks and comments.

    Ordinals count compiled rules from ``start``.
    """
    rules: list[Rule] = []
    for line in lines:
        rule = compile_pattern(line, start + len(rules))
        if rule is not None:
            rules.append(rule)
    return rules


def glob_to_regex(pattern: str, basename_only: bool = False) -> str:
    """Translate a glob into an anchored regular expression.

    Args:
        pattern: Glob text with markers already stripped.
        basename_only: Translate for a single path segment, where ``**``
            behaves like ``*``.

    Returns:
        Regex source matching the whole string. Path patterns also match
        anything beneath a matching directory.
    """
    if basename_only:
        return "^" + _translate_segment(pattern) + END

    segments = [segment for segment in pattern.split("/") if segment]
    parts: list[str] = []
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        if segment == "**":
            if index == last:
                if not parts:
                    parts.append(".+")
                    break
                # "a/**" matches everything inside a, never a itself
                if parts[-1] == "/":
                    parts.pop()
                parts.append(ANY_TAIL)
            else:
                parts.append(ANY_SEGMENTS)
            continue
        parts.append(_translate_segment(segment))
        if index != last:
            parts.append("/")
    return "^" + "".join(parts) + SUBTREE + END


def _translate_segment(segment: str) -> str:
    out: list[str] = []
    i = 0
    n = len(segment)
    while i < n:
        char = segment[i]
        if char == "*":
            # Runs of stars inside a segment collapse to one
            while i < n and segment[i] == "*":
                i += 1
            out.append(STAR)
            continue
        if char == "?":
            out.append(QUESTION)
        else:
            out.append(re.escape(char))
        i += 1
    return "".join(out)


def _compile_glob(pattern: str, basename_only: bool) -> re.Pattern[str]:
    try:
        return re.compile(glob_to_regex(pattern, basename_only), re.DOTALL)
    except re.error as e:
        logger.debug("Pattern %r degraded to literal match: %s", pattern, e)
        return re.compile("^" + re.escape(pattern) + END)
