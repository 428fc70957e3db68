"""
Suggestion Advisor
===================

Turns weakness findings into short, imperative improvement advice. The
advisor re-runs the shared weakness tests itself instead of requiring a
pre-built analysis, so it responds to empty or half-typed passwords as
cheaply as the analyzer does.
"""

from __future__ import annotations

from gauger.analyzers.weakness import DEFAULT_MIN_LENGTH, detect_weaknesses
from gauger.core.models import Weakness, WeaknessKind
from gauger.data.patterns import DEFAULT_TABLES, PatternTables

DEFAULT_MAX_SUGGESTIONS = 5

_ADVICE: dict[WeaknessKind, str] = {
    WeaknessKind.TOO_SHORT: "Make it at least {min_length} characters long.",
    WeaknessKind.NO_LOWERCASE: "Add at least one lowercase letter.",
    WeaknessKind.NO_UPPERCASE: "Add at least one uppercase letter.",
    WeaknessKind.NO_DIGIT: "Add at least one number.",
    WeaknessKind.NO_SYMBOL: "Add at least one symbol, such as ! @ # or %.",
    WeaknessKind.COMMON_PATTERN: "Avoid common passwords and words like \"password\" or \"123456\".",
    WeaknessKind.KEYBOARD_WALK: "Avoid runs of neighbouring keys such as \"qwerty\" or \"asdf\".",
    WeaknessKind.SEQUENTIAL_CHARS: "Avoid sequences like \"abc\" or \"321\".",
    WeaknessKind.REPEATED_CHARS: "Don't repeat the same character three or more times in a row.",
}


class SuggestionAdvisor:
    """Derives an ordered, capped list of improvement sentences.

    Usage::

        advisor = SuggestionAdvisor(max_suggestions=4)
        for line in advisor.suggest("hunter2"):
            print(line)

    Args:
        tables: Weak-pattern tables; must match the analyzer's.
        min_length: Length threshold; must match the analyzer's.
        max_suggestions: Upper bound on the number of sentences returned.

    Raises:
        ValueError: If ``max_suggestions`` is less than 1.
    """

    def __init__(
        self,
        tables: PatternTables = DEFAULT_TABLES,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    ) -> None:
        if max_suggestions < 1:
            raise ValueError(f"max_suggestions must be at least 1, got {max_suggestions}")
        self.tables = tables
        self.min_length = min_length
        self.max_suggestions = max_suggestions

    def suggest(self, password: str) -> list[str]:
        """Return advice for *password*; empty when nothing needs fixing."""
        weaknesses = detect_weaknesses(
            password, tables=self.tables, min_length=self.min_length
        )
        return self.from_weaknesses(weaknesses)

    def from_weaknesses(self, weaknesses: tuple[Weakness, ...]) -> list[str]:
        """Map already-detected findings to advice, keeping their order."""
        suggestions: list[str] = []
        for weakness in weaknesses:
            text = _ADVICE[weakness.kind].format(min_length=self.min_length)
            if text not in suggestions:
                suggestions.append(text)
            if len(suggestions) == self.max_suggestions:
                break
        return suggestions


_DEFAULT_ADVISOR = SuggestionAdvisor()


def suggest(password: str) -> list[str]:
    """Improvement advice for *password* with the default settings."""
    return _DEFAULT_ADVISOR.suggest(password)
