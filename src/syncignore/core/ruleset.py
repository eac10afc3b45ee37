"""Immutable compiled rule collections."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from syncignore.core.compiler import compile_patterns
from syncignore.core.defaults import DefaultPatternProvider
from syncignore.core.types import PatternSummary, Rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleSet:
    """Compiled rules, defaults first, then custom rules in load order.

    Rule order is kept for diagnostics only; it does not decide
    precedence. A RuleSet never changes once built, so it can be shared
    between threads.

    Attributes:
        rules: Compiled rules in load order.
        default_count: Number of leading rules that came from the defaults.
    """

    rules: tuple[Rule, ...] = ()
    default_count: int = 0

    @classmethod
    def build(
        cls,
        custom_patterns: Iterable[str] | None = None,
        defaults: DefaultPatternProvider | None = None,
    ) -> RuleSet:
        """Compile the default table followed by custom patterns.

        Args:
            custom_patterns: Extra pattern lines, in order.
            defaults: Default table to use (standard table if None).
        """
        provider = defaults or DefaultPatternProvider()
        default_rules = compile_patterns(provider.patterns())
        logger.debug("Loaded %d default patterns", len(default_rules))
        custom_rules = compile_patterns(custom_patterns or (), start=len(default_rules))
        return cls(
            rules=tuple(default_rules + custom_rules),
            default_count=len(default_rules),
        )

    @classmethod
    def from_patterns_only(cls, patterns: Iterable[str]) -> RuleSet:
        """Compile patterns without the default table."""
        return cls(rules=tuple(compile_patterns(patterns)), default_count=0)

    @property
    def default_rules(self) -> tuple[Rule, ...]:
        return self.rules[: self.default_count]

    @property
    def custom_rules(self) -> tuple[Rule, ...]:
        return self.rules[self.default_count :]

    def summary(self) -> PatternSummary:
        """Split effective pattern texts into ignore and negate lists."""
        return PatternSummary(
            ignore=[rule.effective_pattern for rule in self.rules if not rule.negate],
            negate=[rule.effective_pattern for rule in self.rules if rule.negate],
        )

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

