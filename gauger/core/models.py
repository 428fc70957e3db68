"""
Gauger Core Data Models
========================

Pydantic models for the password-analysis engine. Every model here is a
value object: analyses are recomputed on each password change and are
never persisted.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
"""

from __future__ import annotations

import datetime as _dt
import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.models import Finding, Severity


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class PasswordStrength(str, enum.Enum):
    """Qualitative password strength, ordered weakest to strongest.

    Score bands (inclusive):
        very_weak    0-20
        weak        21-40
        fair        41-60
        strong      61-80
        very_strong 81-100
    """

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @classmethod
    def from_score(cls, score: int) -> PasswordStrength:
        if score <= 20:
            return cls.VERY_WEAK
        if score <= 40:
            return cls.WEAK
        if score <= 60:
            return cls.FAIR
        if score <= 80:
            return cls.STRONG
        return cls.VERY_STRONG

    @property
    def rank(self) -> int:
        """0 for very_weak through 4 for very_strong."""
        return list(PasswordStrength).index(self)

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class WeaknessKind(str, enum.Enum):
    """Named weakness tests, declared in reporting order.

    Length and composition findings come first, structural pattern
    findings after them.
    """

    TOO_SHORT = "too_short"
    NO_LOWERCASE = "no_lowercase"
    NO_UPPERCASE = "no_uppercase"
    NO_DIGIT = "no_digit"
    NO_SYMBOL = "no_symbol"
    COMMON_PATTERN = "common_pattern"
    KEYBOARD_WALK = "keyboard_walk"
    SEQUENTIAL_CHARS = "sequential_chars"
    REPEATED_CHARS = "repeated_chars"

    @property
    def order(self) -> int:
        return list(WeaknessKind).index(self)


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class Weakness(Finding):
    """A single weakness finding.

    Attributes:
        kind:  Which test produced the finding.
        match: The offending substring for pattern findings; empty for
               length and composition findings.
    """

    # A run of spaces is a legitimate match.
    model_config = ConfigDict(str_strip_whitespace=False)

    kind: WeaknessKind
    match: str = ""


class CrackTimeEstimate(BaseModel):
    """Brute-force time estimate at a given guessing rate.

    Attributes:
        scenario: Description of the attack scenario.
        guesses_per_second: Attack speed.
        seconds: Expected time to find the password.
        display: Human-readable duration.
    """

    model_config = ConfigDict(frozen=True)

    scenario: str
    guesses_per_second: float
    seconds: float
    display: str = ""


class PasswordAnalysis(BaseModel):
    """Strength classification plus diagnostic breakdown of a password.

    Attributes:
        score: Integer score in [0, 100].
        strength: Label derived from ``score``.
        length: Number of Unicode code points.
        has_lower: ASCII lowercase letter present.
        has_upper: ASCII uppercase letter present.
        has_digit: ASCII digit present.
        has_symbol: Printable, non-space, non-alphanumeric character present.
        weaknesses: Findings ordered most actionable first.
        char_pool_size: Effective alphabet size used for the entropy estimate.
        entropy_bits: Combinatorial entropy estimate (informational only).
        crack_time_estimates: Brute-force timings derived from ``entropy_bits``.
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(default=0, ge=0, le=100)
    strength: PasswordStrength = PasswordStrength.VERY_WEAK
    length: int = Field(default=0, ge=0)
    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False
    weaknesses: tuple[Weakness, ...] = ()
    char_pool_size: int = 0
    entropy_bits: float = 0.0
    crack_time_estimates: tuple[CrackTimeEstimate, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    @property
    def weakness_kinds(self) -> list[WeaknessKind]:
        return [w.kind for w in self.weaknesses]

    def has_weakness(self, kind: WeaknessKind) -> bool:
        return any(w.kind is kind for w in self.weaknesses)

    @property
    def class_count(self) -> int:
        """Number of the four character classes present."""
        return sum((self.has_lower, self.has_upper, self.has_digit, self.has_symbol))


# ===================================================================== #
#  Synthesis and Report Models
# ===================================================================== #


class GeneratedPassword(BaseModel):
    """A freshly synthesized strong password.

    Attributes:
        value: The password itself. Never logged or persisted.
        length: Length of ``value``.
        secure: ``False`` when the OS random source was unavailable and a
                non-cryptographic fallback generator produced ``value``.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    length: int
    secure: bool = True


class GaugeReport(BaseModel):
    """Everything an explicit "analyze" action produces in one record.

    Attributes:
        analysis: The strength analysis.
        suggestions: Ordered improvement sentences.
        generated: A fresh strong password, if one was requested.
        table_version: Version of the weak-pattern tables used.
        created_at: UTC timestamp of the evaluation.
        summary: One-line human-readable summary.
    """

    analysis: PasswordAnalysis
    suggestions: list[str] = Field(default_factory=list)
    generated: Optional[GeneratedPassword] = None
    table_version: str = ""
    created_at: _dt.datetime = Field(
        default_factory=lambda: _dt.datetime.now(_dt.timezone.utc)
    )
    summary: str = ""

    @property
    def highest_severity(self) -> Severity | None:
        if not self.analysis.weaknesses:
            return None
        return min((w.severity for w in self.analysis.weaknesses), key=lambda s: s.rank)
