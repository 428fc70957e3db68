"""
Weak-Pattern Tables
====================

Constant tables of extremely common passwords and keyboard walks. The
tables are versioned so that a report can state which data it was scored
against; extend them through :meth:`PatternTables.extended` (or the
``[analyzer]`` config section) rather than editing scoring code.

References:
    - NIST SP 800-63B (2017), Section 5.1.1.2 -- blocklists of commonly
      used, expected, or compromised values.
    - Bonneau, J. (2012). The Science of Guessing. IEEE S&P.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

TABLE_VERSION = "2026.1"

# Substrings that are matched case-insensitively anywhere in the password.
_COMMON_PASSWORDS: tuple[str, ...] = (
    "password", "passw0rd", "p@ssword", "123456", "12345678", "123123",
    "654321", "111111", "000000", "abc123", "qwerty", "letmein",
    "trustno1", "iloveyou", "welcome", "admin", "login", "monkey",
    "dragon", "master", "shadow", "sunshine", "princess", "football",
    "baseball", "superman", "batman", "starwars", "freedom", "whatever",
    "hunter2", "changeme", "default", "secret", "qazwsx", "zaq1zaq1",
)

# Keyboard rows and columns on a US QWERTY layout. Any window of
# ``walk_window`` characters, read forwards or backwards, is a walk. The
# plain digit row is left out: "1234" is already a sequential run.
_KEYBOARD_WALKS: tuple[str, ...] = (
    "qwertyuiop[]\\",
    "asdfghjkl;'",
    "zxcvbnm,./",
    "~!@#$%^&*()_+",
    "1qaz", "2wsx", "3edc", "4rfv", "5tgb", "6yhn", "7ujm", "8ik,", "9ol.", "0p;/",
    "qazwsx", "wsxedc", "edcrfv",
    "1q2w3e4r5t6y", "zaq1xsw2cde3",
)


@dataclass(frozen=True, slots=True)
class PatternTables:
    """Immutable bundle of weak-pattern tables.

    Attributes:
        version:          Table version string.
        common_passwords: Lower-case substrings that mark a password as common.
        keyboard_walks:   Adjacent-key sequences (lower-case).
        walk_window:      Minimum run length that counts as a keyboard walk.
        walk_fragments:   Every ``walk_window``-length window of every walk,
                          forwards and reversed; derived, not supplied.
    """

    version: str = TABLE_VERSION
    common_passwords: tuple[str, ...] = _COMMON_PASSWORDS
    keyboard_walks: tuple[str, ...] = _KEYBOARD_WALKS
    walk_window: int = 4
    walk_fragments: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        fragments: set[str] = set()
        for walk in self.keyboard_walks:
            for seq in (walk, walk[::-1]):
                for start in range(len(seq) - self.walk_window + 1):
                    fragments.add(seq[start : start + self.walk_window])
        object.__setattr__(self, "walk_fragments", frozenset(fragments))

    def extended(
        self,
        common_passwords: Iterable[str] = (),
        keyboard_walks: Iterable[str] = (),
    ) -> PatternTables:
        """Return a copy with extra entries appended; the version is tagged ``+local``."""
        extra_common = tuple(p.lower() for p in common_passwords if p)
        extra_walks = tuple(w.lower() for w in keyboard_walks if w)
        if not extra_common and not extra_walks:
            return self
        return PatternTables(
            version=f"{self.version}+local",
            common_passwords=self.common_passwords + extra_common,
            keyboard_walks=self.keyboard_walks + extra_walks,
            walk_window=self.walk_window,
        )


DEFAULT_TABLES = PatternTables()
