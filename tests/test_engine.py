"""Tests for the engine facade."""
from __future__ import annotations

import json

import pytest

from gauger.core.engine import GaugeEngine
from gauger.core.models import PasswordStrength, WeaknessKind
from gauger.data.patterns import TABLE_VERSION
from shared.config import AnalyzerConfig, AdvisorConfig, GaugeConfig, GeneratorConfig
from shared.logger import GaugeLogger
from shared.models import Severity


def test_evaluate_bundles_everything(engine: GaugeEngine) -> None:
    report = engine.evaluate("password")
    assert report.analysis.strength is PasswordStrength.VERY_WEAK
    assert report.suggestions == engine.suggest("password")
    assert report.generated is not None
    assert 16 <= report.generated.length <= 21
    assert report.table_version == TABLE_VERSION
    assert report.summary.startswith("Very Weak")
    assert report.highest_severity is Severity.HIGH


def test_evaluate_without_generated(engine: GaugeEngine) -> None:
    report = engine.evaluate("aB3$aB3$aB3$aB3$", include_generated=False)
    assert report.generated is None
    assert report.suggestions == []
    assert report.highest_severity is None


def test_report_serialises_to_json(engine: GaugeEngine) -> None:
    payload = json.dumps(engine.evaluate("hunter2").model_dump(mode="json"))
    data = json.loads(payload)
    assert data["analysis"]["strength"] in {s.value for s in PasswordStrength}
    assert data["analysis"]["weaknesses"][0]["kind"] == "too_short"


def test_engine_matches_module_functions(engine: GaugeEngine) -> None:
    from gauger import analyze, suggest

    for password in ("", "hunter2", "Tr0ub4dor&3", "aB3$aB3$aB3$aB3$"):
        assert engine.analyze(password) == analyze(password)
        assert engine.suggest(password) == suggest(password)


def test_extra_common_passwords(quiet_logger: GaugeLogger) -> None:
    config = GaugeConfig(analyzer=AnalyzerConfig(extra_common_passwords=["Gauger"]))
    custom = GaugeEngine(config, logger=quiet_logger)
    default = GaugeEngine(logger=quiet_logger)

    assert custom.analyze("Gauger!2024x").has_weakness(WeaknessKind.COMMON_PATTERN)
    assert not default.analyze("Gauger!2024x").has_weakness(WeaknessKind.COMMON_PATTERN)
    assert custom.tables.version == f"{TABLE_VERSION}+local"


def test_min_length_shared_by_analyzer_and_advisor(quiet_logger: GaugeLogger) -> None:
    config = GaugeConfig(analyzer=AnalyzerConfig(min_length=12))
    custom = GaugeEngine(config, logger=quiet_logger)

    assert custom.analyze("Tr0ub4dor&3").weakness_kinds == [WeaknessKind.TOO_SHORT]
    assert custom.suggest("Tr0ub4dor&3") == ["Make it at least 12 characters long."]


def test_advisor_limit_from_config(quiet_logger: GaugeLogger) -> None:
    config = GaugeConfig(advisor=AdvisorConfig(max_suggestions=3))
    custom = GaugeEngine(config, logger=quiet_logger)
    assert len(custom.suggest("")) == 3
    assert len(custom.evaluate("").suggestions) == 3


def test_generator_settings_from_config(quiet_logger: GaugeLogger) -> None:
    config = GaugeConfig(generator=GeneratorConfig(min_length=24, max_length=24, symbols="!?"))
    custom = GaugeEngine(config, logger=quiet_logger)
    generated = custom.generate()
    assert generated.length == 24
    assert set(generated.value) & {"!", "?"}


def test_invalid_generator_config(quiet_logger: GaugeLogger) -> None:
    config = GaugeConfig(generator=GeneratorConfig(min_length=30, max_length=20))
    with pytest.raises(ValueError):
        GaugeEngine(config, logger=quiet_logger)


def test_evaluate_logs_without_password(tmp_path) -> None:
    log_file = tmp_path / "gauger.log"
    logger = GaugeLogger(
        "engine-test", log_level="DEBUG", log_file=log_file, json_logs=True, console_output=False
    )
    GaugeEngine(logger=logger).evaluate("Sup3rSecret!Value")

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert any(r["message"] == "Password evaluated" for r in records)
    evaluated = next(r for r in records if r["message"] == "Password evaluated")
    assert evaluated["operation"] == "evaluate"
    assert evaluated["extra"]["length"] == len("Sup3rSecret!Value")
    assert "Sup3rSecret!Value" not in log_file.read_text(encoding="utf-8")
