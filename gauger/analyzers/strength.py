"""
Password Strength Analyzer
===========================

Maps a password to a bounded 0-100 score, a strength label and an ordered
list of weakness findings. The analysis is a pure function of the input
string: no randomness, no I/O, no shared mutable state, so it is safe to
call on every keystroke from any number of callers.

Scoring:
    1. Length credit: nothing below 4 characters, 3 points per character
       from the 4th to the 12th, 1.5 points per character after that,
       capped at 40 so length alone never reaches the top bands.
    2. Composition bonus: 15 points per character class present.
    3. Penalties: a fixed amount per triggered weakness test.
    4. Clamp into [0, 100] and map to :class:`PasswordStrength`.

An entropy estimate and brute-force crack times are reported alongside
the score for display, but never feed into it.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

from gauger.analyzers.composition import Composition, composition_of
from gauger.analyzers.weakness import DEFAULT_MIN_LENGTH, detect_weaknesses
from gauger.core.models import (
    CrackTimeEstimate,
    PasswordAnalysis,
    PasswordStrength,
    Weakness,
    WeaknessKind,
)
from gauger.data.patterns import DEFAULT_TABLES, PatternTables

MAX_SCORE = 100

# Length credit
_LENGTH_FLOOR = 4
_LENGTH_KNEE = 12
_CREDIT_PER_CHAR = 3.0
_CREDIT_PER_CHAR_PAST_KNEE = 1.5
_LENGTH_CAP = 40.0

_CLASS_BONUS = 15

_MAX_KEYSPACE_LOG2 = 1000.0

PENALTIES: dict[WeaknessKind, int] = {
    WeaknessKind.TOO_SHORT: 15,
    WeaknessKind.NO_LOWERCASE: 5,
    WeaknessKind.NO_UPPERCASE: 5,
    WeaknessKind.NO_DIGIT: 5,
    WeaknessKind.NO_SYMBOL: 5,
    WeaknessKind.COMMON_PATTERN: 25,
    WeaknessKind.KEYBOARD_WALK: 15,
    WeaknessKind.SEQUENTIAL_CHARS: 10,
    WeaknessKind.REPEATED_CHARS: 10,
}


class PasswordAnalyzer:
    """Scores passwords with composition and pattern heuristics.

    Usage::

        analyzer = PasswordAnalyzer()
        result = analyzer.analyze("MyP@ssw0rd!")
        print(result.strength.label, result.score)

    Args:
        tables: Weak-pattern tables to match against.
        min_length: Length below which ``too_short`` is reported.
    """

    # Attack speed scenarios for crack time estimation
    _ATTACK_SPEEDS: tuple[tuple[str, float], ...] = (
        ("Online attack (throttled)", 1e3),
        ("Offline attack (slow hash, e.g. bcrypt)", 1e6),
        ("Offline attack (fast hash, e.g. MD5 on GPU)", 1e9),
        ("Massive parallel / state-level", 1e12),
    )

    def __init__(
        self,
        tables: PatternTables = DEFAULT_TABLES,
        min_length: int = DEFAULT_MIN_LENGTH,
    ) -> None:
        self.tables = tables
        self.min_length = min_length

    def analyze(self, password: str) -> PasswordAnalysis:
        """Analyse *password*. Never raises for any string input."""
        comp = composition_of(password)
        weaknesses = detect_weaknesses(
            password,
            tables=self.tables,
            min_length=self.min_length,
            composition=comp,
        )
        score = self.score(comp, weaknesses)
        entropy = comp.entropy_bits

        return PasswordAnalysis(
            score=score,
            strength=PasswordStrength.from_score(score),
            length=comp.length,
            has_lower=comp.has_lower,
            has_upper=comp.has_upper,
            has_digit=comp.has_digit,
            has_symbol=comp.has_symbol,
            weaknesses=weaknesses,
            char_pool_size=comp.pool_size,
            entropy_bits=round(entropy, 2),
            crack_time_estimates=self._estimate_crack_times(entropy),
        )

    # ------------------------------------------------------------------ #
    #  Scoring
    # ------------------------------------------------------------------ #

    @staticmethod
    def length_credit(length: int) -> float:
        """Diminishing-returns credit for length, capped at 40."""
        if length < _LENGTH_FLOOR:
            return 0.0
        credited = min(length, _LENGTH_KNEE) - (_LENGTH_FLOOR - 1)
        credit = credited * _CREDIT_PER_CHAR
        credit += max(0, length - _LENGTH_KNEE) * _CREDIT_PER_CHAR_PAST_KNEE
        return min(credit, _LENGTH_CAP)

    @classmethod
    def score(cls, comp: Composition, weaknesses: tuple[Weakness, ...]) -> int:
        if comp.length == 0:
            return 0
        total = cls.length_credit(comp.length)
        total += comp.class_count * _CLASS_BONUS
        total -= sum(PENALTIES[w.kind] for w in weaknesses)
        return max(0, min(MAX_SCORE, int(total)))

    # ------------------------------------------------------------------ #
    #  Crack Time Estimation
    # ------------------------------------------------------------------ #

    def _estimate_crack_times(self, entropy_bits: float) -> tuple[CrackTimeEstimate, ...]:
        """Expected brute-force time: half the keyspace at each attack speed."""
        # Capped so very long inputs stay within float range.
        half_keyspace_log2 = min(max(entropy_bits - 1.0, 0.0), _MAX_KEYSPACE_LOG2)
        estimates: list[CrackTimeEstimate] = []
        for scenario, speed in self._ATTACK_SPEEDS:
            seconds = 2.0 ** half_keyspace_log2 / speed
            estimates.append(CrackTimeEstimate(
                scenario=scenario,
                guesses_per_second=speed,
                seconds=seconds,
                display=format_duration(seconds),
            ))
        return tuple(estimates)


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as a short human-readable string."""
    year = 86400 * 365
    if seconds < 0.001:
        return "instant"
    if seconds < 1:
        return f"{seconds * 1000:.0f} milliseconds"
    if seconds < 60:
        return f"{seconds:.1f} seconds"
    if seconds < 3600:
        return f"{seconds / 60:.1f} minutes"
    if seconds < 86400:
        return f"{seconds / 3600:.1f} hours"
    if seconds < year:
        return f"{seconds / 86400:.1f} days"
    if seconds < year * 1000:
        return f"{seconds / year:.1f} years"
    if seconds < year * 1e6:
        return f"{seconds / (year * 1000):.1f} thousand years"
    if seconds < year * 1e9:
        return f"{seconds / (year * 1e6):.1f} million years"
    return "centuries beyond counting"


_DEFAULT_ANALYZER = PasswordAnalyzer()


def analyze(password: str) -> PasswordAnalysis:
    """Analyse *password* with the built-in tables and default settings."""
    return _DEFAULT_ANALYZER.analyze(password)
