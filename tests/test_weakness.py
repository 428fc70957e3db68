"""Tests for the shared weakness tests."""
from __future__ import annotations

import pytest

from gauger.analyzers.weakness import (
    detect_weaknesses,
    find_common_pattern,
    find_keyboard_walk,
    find_repeated_run,
    find_sequential_run,
)
from gauger.core.models import WeaknessKind
from gauger.data.patterns import DEFAULT_TABLES, TABLE_VERSION
from shared.models import Severity


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("", ""),
        ("xx", ""),
        ("aaaa1111", "aaaa"),
        ("abccc", "ccc"),
        ("ab!!!!", "!!!!"),
    ],
)
def test_find_repeated_run(password: str, expected: str) -> None:
    assert find_repeated_run(password) == expected


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("", ""),
        ("ab", ""),
        ("aba", ""),
        ("acegi", ""),
        ("abc", "abc"),
        ("321", "321"),
        ("xabcd!", "abcd"),
        ("abcba", "abc"),
        ("zyx1", "zyx"),
    ],
)
def test_find_sequential_run(password: str, expected: str) -> None:
    assert find_sequential_run(password) == expected


def test_keyboard_walk_is_extended_and_case_insensitive() -> None:
    assert find_keyboard_walk("QWERTY") == "qwerty"
    assert find_keyboard_walk("Lp0!asdfG") == "asdfg"


def test_keyboard_walk_reversed() -> None:
    assert find_keyboard_walk("trewq") == "trewq"


def test_keyboard_walk_needs_full_window() -> None:
    assert find_keyboard_walk("qwe") == ""
    assert find_keyboard_walk("aB3$aB3$") == ""


def test_digit_runs_count_once() -> None:
    assert find_keyboard_walk("1234") == ""
    assert find_keyboard_walk("9876") == ""
    kinds = [w.kind for w in detect_weaknesses("Zz!1234x")]
    assert kinds == [WeaknessKind.SEQUENTIAL_CHARS]


def test_digit_column_walks_still_found() -> None:
    assert find_keyboard_walk("z!1qaz") == "1qaz"


def test_common_pattern_case_insensitive_substring() -> None:
    assert find_common_pattern("MyPASSWORD1") == "password"
    assert find_common_pattern("Passw0rd") == "passw0rd"
    assert find_common_pattern("Tr0ub4dor&3") == ""


def test_empty_password_reports_length_and_absence() -> None:
    kinds = [w.kind for w in detect_weaknesses("")]
    assert kinds == [
        WeaknessKind.TOO_SHORT,
        WeaknessKind.NO_LOWERCASE,
        WeaknessKind.NO_UPPERCASE,
        WeaknessKind.NO_DIGIT,
        WeaknessKind.NO_SYMBOL,
    ]


def test_findings_are_ordered_and_unique() -> None:
    weaknesses = detect_weaknesses("abcabc111qwerpassword")
    kinds = [w.kind for w in weaknesses]
    assert len(kinds) == len(set(kinds))
    assert kinds == sorted(kinds, key=lambda k: k.order)
    assert WeaknessKind.COMMON_PATTERN in kinds
    assert WeaknessKind.KEYBOARD_WALK in kinds
    assert WeaknessKind.SEQUENTIAL_CHARS in kinds
    assert WeaknessKind.REPEATED_CHARS in kinds


def test_pattern_findings_carry_match() -> None:
    weaknesses = {w.kind: w for w in detect_weaknesses("aaaa1111")}
    assert weaknesses[WeaknessKind.REPEATED_CHARS].match == "aaaa"
    assert weaknesses[WeaknessKind.REPEATED_CHARS].severity is Severity.MEDIUM
    assert weaknesses[WeaknessKind.NO_UPPERCASE].match == ""


def test_min_length_is_configurable() -> None:
    kinds = [w.kind for w in detect_weaknesses("Tr0ub4dor&3", min_length=12)]
    assert kinds[0] is WeaknessKind.TOO_SHORT
    assert WeaknessKind.TOO_SHORT not in [
        w.kind for w in detect_weaknesses("Tr0ub4dor&3")
    ]


def test_extended_tables() -> None:
    tables = DEFAULT_TABLES.extended(common_passwords=["Gauger"], keyboard_walks=["HJUY"])
    assert tables.version == f"{TABLE_VERSION}+local"
    assert find_common_pattern("xxGAUGERxx", tables) == "gauger"
    assert find_common_pattern("xxGAUGERxx") == ""
    assert find_keyboard_walk("1yujh2", tables) == "yujh"
    assert find_keyboard_walk("1yujh2") == ""
    assert DEFAULT_TABLES.extended() is DEFAULT_TABLES
