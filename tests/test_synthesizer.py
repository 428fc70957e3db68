"""Tests for strong-password synthesis."""
from __future__ import annotations

import random
import string

import pytest

from gauger import analyze, synthesize_strong_password
from gauger.advisor import synthesizer as synthesizer_module
from gauger.advisor.synthesizer import DEFAULT_SYMBOLS, PasswordSynthesizer
from gauger.core.models import PasswordStrength
from shared.logger import GaugeLogger

_CLASSES = (
    set(string.ascii_uppercase),
    set(string.ascii_lowercase),
    set(string.digits),
    set(DEFAULT_SYMBOLS),
)


def _class_index(ch: str) -> int:
    return next(i for i, chars in enumerate(_CLASSES) if ch in chars)


def test_thousand_passwords_meet_guarantees() -> None:
    outputs = [synthesize_strong_password() for _ in range(1000)]
    alphabet = set().union(*_CLASSES)
    for value in outputs:
        assert 16 <= len(value) <= 21
        assert set(value) <= alphabet
        for chars in _CLASSES:
            assert chars & set(value)


def test_no_fixed_position_bias() -> None:
    outputs = [synthesize_strong_password() for _ in range(1000)]
    # Guaranteed characters are drawn in class order; after the shuffle
    # every class must show up at every leading slot.
    for position in range(4):
        seen = {_class_index(value[position]) for value in outputs}
        assert seen == {0, 1, 2, 3}


def test_lengths_cover_the_range() -> None:
    lengths = {len(synthesize_strong_password()) for _ in range(1000)}
    assert lengths == set(range(16, 22))


def test_regenerated_not_cached() -> None:
    assert len({synthesize_strong_password() for _ in range(50)}) == 50


def test_default_source_is_secure() -> None:
    synth = PasswordSynthesizer()
    assert synth.secure
    assert synth.generate().secure


def test_seeded_rng_is_reproducible_and_flagged(quiet_logger: GaugeLogger) -> None:
    first = PasswordSynthesizer(rng=random.Random(7), logger=quiet_logger)
    second = PasswordSynthesizer(rng=random.Random(7), logger=quiet_logger)
    a, b = first.generate(), second.generate()
    assert a.value == b.value
    assert a.length == len(a.value)
    assert not a.secure


def test_fallback_when_os_source_missing(
    monkeypatch: pytest.MonkeyPatch, quiet_logger: GaugeLogger
) -> None:
    class _NoOsRandom(random.SystemRandom):
        def getrandbits(self, k: int) -> int:
            raise NotImplementedError

    monkeypatch.setattr(synthesizer_module.secrets, "SystemRandom", _NoOsRandom)
    synth = PasswordSynthesizer(logger=quiet_logger)
    generated = synth.generate()
    assert not synth.secure
    assert not generated.secure
    assert 16 <= generated.length <= 21


def test_custom_range_and_symbols(quiet_logger: GaugeLogger) -> None:
    synth = PasswordSynthesizer(
        min_length=20, max_length=20, symbols="#", rng=random.Random(3), logger=quiet_logger
    )
    for _ in range(20):
        value = synth.generate().value
        assert len(value) == 20
        assert "#" in value


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_length": 3},
        {"min_length": 18, "max_length": 17},
        {"symbols": ""},
        {"symbols": "ab"},
        {"symbols": "! "},
    ],
)
def test_invalid_settings(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        PasswordSynthesizer(**kwargs)


def test_generated_passwords_score_well(seeded_synthesizer: PasswordSynthesizer) -> None:
    for _ in range(200):
        result = analyze(seeded_synthesizer.generate().value)
        assert result.class_count == 4
        if not result.weaknesses:
            assert result.strength.rank >= PasswordStrength.STRONG.rank
