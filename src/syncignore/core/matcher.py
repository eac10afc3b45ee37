"""Rule evaluation against workspace-relative paths.

Precedence is not order based: a path matched by any negation rule is
kept, whatever ignore rules also match it. Otherwise any matching ignore
rule excludes it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from syncignore.core.ruleset import RuleSet
    from syncignore.core.types import Rule


def normalize_path(path: str) -> str:
    """Normalize a relative path to forward slashes.

    Backslashes become ``/``, leading ``./`` is collapsed and empty
    segments are dropped. ``..`` is left untouched.
    """
    normalized = path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return "/".join(segment for segment in normalized.split("/") if segment)


def split_segments(path: str) -> list[str]:
    """Split a path into its non-empty segments after normalization."""
    normalized = normalize_path(path)
    return normalized.split("/") if normalized else []


def rule_matches(rule: Rule, segments: list[str], suffixes: list[str]) -> bool:
    """Check one rule against a split path.

    Args:
        rule: Compiled rule.
        segments: Path segments, non-empty.
        suffixes: ``"/".join(segments[i:])`` for every i, full path first.
    """
    if rule.basename_only:
        if rule.directory_anchored:
            return any(rule.glob.match(segment) for segment in segments)
        return rule.glob.match(segments[-1]) is not None

    if rule.any_depth:
        return any(rule.glob.match(suffix) for suffix in suffixes)
    return rule.glob.match(suffixes[0]) is not None


def evaluate(path: str, rule_set: RuleSet) -> Rule | None:
    """Find the rule that decides a path.

    Returns:
        The first matching negation rule if any, else the first matching
        ignore rule, else None.
    """
    segments = split_segments(path)
    if not segments:
        return None
    suffixes = ["/".join(segments[i:]) for i in range(len(segments))]

    first_ignore: Rule | None = None
    for rule in rule_set.rules:
        if rule.negate:
            if rule_matches(rule, segments, suffixes):
                return rule
        elif first_ignore is None and rule_matches(rule, segments, suffixes):
            first_ignore = rule
    return first_ignore


def is_ignored(path: str, rule_set: RuleSet) -> bool:
    """Check whether a path is excluded from sync."""
    rule = evaluate(path, rule_set)
    return rule is not None and not rule.negate
