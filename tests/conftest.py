"""Shared fixtures for the Gauger test suite."""
from __future__ import annotations

import random

import pytest

from gauger.advisor.synthesizer import PasswordSynthesizer
from gauger.core.engine import GaugeEngine
from shared.logger import GaugeLogger


@pytest.fixture
def quiet_logger() -> GaugeLogger:
    return GaugeLogger("test", console_output=False)


@pytest.fixture
def engine(quiet_logger: GaugeLogger) -> GaugeEngine:
    return GaugeEngine(logger=quiet_logger)


@pytest.fixture
def seeded_synthesizer(quiet_logger: GaugeLogger) -> PasswordSynthesizer:
    return PasswordSynthesizer(rng=random.Random(1234), logger=quiet_logger)
