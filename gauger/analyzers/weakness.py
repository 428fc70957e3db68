"""
Weakness Detection
===================

The weakness tests shared by the analyzer and the advisor. Each test
contributes at most one :class:`~gauger.core.models.Weakness`, and the
result is always ordered by :class:`~gauger.core.models.WeaknessKind`
declaration order (length, then composition, then structural patterns).

All scans are linear in the password length apart from the fixed-size
common-password table.

References:
    - Weir, M., Aggarwal, S., Collins, M., & Stern, H. (2010). Testing
      Metrics for Password Creation Policies by Attacking Large Sets of
      Revealed Passwords. ACM CCS.
"""

from __future__ import annotations

from gauger.analyzers.composition import Composition, composition_of
from gauger.core.models import Weakness, WeaknessKind
from gauger.data.patterns import DEFAULT_TABLES, PatternTables
from shared.models import Severity

DEFAULT_MIN_LENGTH = 8
MIN_RUN = 3

_SEVERITIES: dict[WeaknessKind, Severity] = {
    WeaknessKind.TOO_SHORT: Severity.HIGH,
    WeaknessKind.NO_LOWERCASE: Severity.LOW,
    WeaknessKind.NO_UPPERCASE: Severity.LOW,
    WeaknessKind.NO_DIGIT: Severity.LOW,
    WeaknessKind.NO_SYMBOL: Severity.LOW,
    WeaknessKind.COMMON_PATTERN: Severity.HIGH,
    WeaknessKind.KEYBOARD_WALK: Severity.MEDIUM,
    WeaknessKind.SEQUENTIAL_CHARS: Severity.MEDIUM,
    WeaknessKind.REPEATED_CHARS: Severity.MEDIUM,
}

_TITLES: dict[WeaknessKind, str] = {
    WeaknessKind.TOO_SHORT: "Too short",
    WeaknessKind.NO_LOWERCASE: "No lowercase letters",
    WeaknessKind.NO_UPPERCASE: "No uppercase letters",
    WeaknessKind.NO_DIGIT: "No digits",
    WeaknessKind.NO_SYMBOL: "No symbols",
    WeaknessKind.COMMON_PATTERN: "Common password",
    WeaknessKind.KEYBOARD_WALK: "Keyboard walk",
    WeaknessKind.SEQUENTIAL_CHARS: "Sequential characters",
    WeaknessKind.REPEATED_CHARS: "Repeated characters",
}


# ===================================================================== #
#  Pattern scans
# ===================================================================== #


def find_repeated_run(password: str, min_run: int = MIN_RUN) -> str:
    """Return the first run of one character repeated *min_run*+ times."""
    run_start = 0
    for i in range(1, len(password) + 1):
        if i == len(password) or password[i] != password[run_start]:
            if i - run_start >= min_run:
                return password[run_start:i]
            run_start = i
    return ""


def find_sequential_run(password: str, min_run: int = MIN_RUN) -> str:
    """Return the first ascending or descending code-point run ("abc", "321")."""
    if len(password) < min_run:
        return ""

    start = 0
    step = 0
    for i in range(1, len(password)):
        diff = ord(password[i]) - ord(password[i - 1])
        if diff in (1, -1) and step in (0, diff):
            step = diff
            continue
        if step != 0 and i - start >= min_run:
            return password[start:i]
        if diff in (1, -1):
            start, step = i - 1, diff
        else:
            start, step = i, 0

    if step != 0 and len(password) - start >= min_run:
        return password[start:]
    return ""


def find_keyboard_walk(password: str, tables: PatternTables = DEFAULT_TABLES) -> str:
    """Return the first keyboard walk, extended as far as it continues."""
    lowered = password.lower()
    window = tables.walk_window
    fragments = tables.walk_fragments

    for i in range(len(lowered) - window + 1):
        if lowered[i : i + window] in fragments:
            end = i + window
            while end < len(lowered) and lowered[end - window + 1 : end + 1] in fragments:
                end += 1
            return lowered[i:end]
    return ""


def find_common_pattern(password: str, tables: PatternTables = DEFAULT_TABLES) -> str:
    """Return the longest common-password entry contained in *password*."""
    lowered = password.lower()
    matches = [entry for entry in tables.common_passwords if entry in lowered]
    return max(matches, key=len) if matches else ""


# ===================================================================== #
#  Detection
# ===================================================================== #


def _weakness(kind: WeaknessKind, description: str, match: str = "") -> Weakness:
    return Weakness(
        kind=kind,
        severity=_SEVERITIES[kind],
        title=_TITLES[kind],
        description=description,
        match=match,
    )


def detect_weaknesses(
    password: str,
    *,
    tables: PatternTables = DEFAULT_TABLES,
    min_length: int = DEFAULT_MIN_LENGTH,
    composition: Composition | None = None,
) -> tuple[Weakness, ...]:
    """Run every weakness test against *password*.

    Args:
        password: Any string, including the empty string.
        tables: Weak-pattern tables to match against.
        min_length: Length below which ``too_short`` is reported.
        composition: Pre-computed composition, to avoid a second scan.

    Returns:
        Findings in reporting order, at most one per test.
    """
    comp = composition if composition is not None else composition_of(password)
    found: list[Weakness] = []

    if comp.length < min_length:
        found.append(_weakness(
            WeaknessKind.TOO_SHORT,
            f"Only {comp.length} characters long; at least {min_length} are required.",
        ))

    for present, kind, noun in (
        (comp.has_lower, WeaknessKind.NO_LOWERCASE, "lowercase letters"),
        (comp.has_upper, WeaknessKind.NO_UPPERCASE, "uppercase letters"),
        (comp.has_digit, WeaknessKind.NO_DIGIT, "digits"),
        (comp.has_symbol, WeaknessKind.NO_SYMBOL, "symbols"),
    ):
        if not present:
            found.append(_weakness(kind, f"Contains no {noun}."))

    common = find_common_pattern(password, tables)
    if common:
        found.append(_weakness(
            WeaknessKind.COMMON_PATTERN,
            f"Contains '{common}', one of the most frequently used passwords.",
            common,
        ))

    walk = find_keyboard_walk(password, tables)
    if walk:
        found.append(_weakness(
            WeaknessKind.KEYBOARD_WALK,
            f"Contains '{walk}', a run of adjacent keyboard keys.",
            walk,
        ))

    sequence = find_sequential_run(password)
    if sequence:
        found.append(_weakness(
            WeaknessKind.SEQUENTIAL_CHARS,
            f"Contains '{sequence}', a sequence of consecutive characters.",
            sequence,
        ))

    repeat = find_repeated_run(password)
    if repeat:
        found.append(_weakness(
            WeaknessKind.REPEATED_CHARS,
            f"Repeats '{repeat[0]}' {len(repeat)} times in a row.",
            repeat,
        ))

    found.sort(key=lambda w: w.kind.order)
    return tuple(found)
