"""
Character Composition
======================

Character classification shared by the analyzer and the advisor, so the
two can never disagree about which classes a password contains.

Classification policy:
    - lower / upper / digit: ASCII ``a-z``, ``A-Z`` and ``0-9`` only.
    - symbol: any printable, non-whitespace character that is not
      alphanumeric, including non-ASCII punctuation, currency signs and
      emoji.
    - other: everything else (non-ASCII letters and digits, whitespace,
      control characters). It counts toward length but earns no class.
      Apart from whitespace, it also widens the entropy pool.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class CharClass(str, enum.Enum):
    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SYMBOL = "symbol"
    OTHER = "other"


# Alphabet sizes for the combinatorial entropy estimate.
POOL_SIZES: dict[CharClass, int] = {
    CharClass.LOWER: 26,
    CharClass.UPPER: 26,
    CharClass.DIGIT: 10,
    CharClass.SYMBOL: 33,
    CharClass.OTHER: 100,
}


def classify(ch: str) -> CharClass:
    """Classify a single code point."""
    if "a" <= ch <= "z":
        return CharClass.LOWER
    if "A" <= ch <= "Z":
        return CharClass.UPPER
    if "0" <= ch <= "9":
        return CharClass.DIGIT
    if ch.isprintable() and not ch.isspace() and not ch.isalnum():
        return CharClass.SYMBOL
    return CharClass.OTHER


@dataclass(frozen=True, slots=True)
class Composition:
    """Which character classes a password contains."""

    length: int = 0
    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False
    has_other: bool = False  # non-whitespace "other" characters only

    @property
    def class_count(self) -> int:
        return sum((self.has_lower, self.has_upper, self.has_digit, self.has_symbol))

    @property
    def pool_size(self) -> int:
        pool = 0
        for present, char_class in (
            (self.has_lower, CharClass.LOWER),
            (self.has_upper, CharClass.UPPER),
            (self.has_digit, CharClass.DIGIT),
            (self.has_symbol, CharClass.SYMBOL),
            (self.has_other, CharClass.OTHER),
        ):
            if present:
                pool += POOL_SIZES[char_class]
        return pool

    @property
    def entropy_bits(self) -> float:
        """``length * log2(pool)``: the ceiling for a uniformly random choice."""
        if self.length == 0 or self.pool_size <= 1:
            return 0.0
        return self.length * math.log2(self.pool_size)


def composition_of(password: str) -> Composition:
    """Scan *password* once and report its character classes."""
    seen: set[CharClass] = set()
    for ch in password:
        char_class = classify(ch)
        if char_class is CharClass.OTHER and ch.isspace():
            continue
        seen.add(char_class)
        if len(seen) == len(CharClass):
            break
    return Composition(
        length=len(password),
        has_lower=CharClass.LOWER in seen,
        has_upper=CharClass.UPPER in seen,
        has_digit=CharClass.DIGIT in seen,
        has_symbol=CharClass.SYMBOL in seen,
        has_other=CharClass.OTHER in seen,
    )
