"""
Gauger Configuration Management
================================

Centralized configuration for the Gauger password-analysis toolkit using
Python dataclasses and TOML-based persistence.

Configuration is always handed to the engine explicitly; nothing in the
analysis core reads module-level mutable settings.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import MISSING, Field, asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class AnalyzerConfig:
    """Configuration for the strength analyzer.

    ``extra_common_passwords`` and ``extra_keyboard_walks`` extend the
    built-in weak-pattern tables without touching the scoring code.
    """

    min_length: int = 8
    extra_common_passwords: list[str] = field(default_factory=list)
    extra_keyboard_walks: list[str] = field(default_factory=list)


@dataclass(frozen=False, slots=True)
class AdvisorConfig:
    """Configuration for the suggestion advisor."""

    max_suggestions: int = 5


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Configuration for strong-password synthesis.

    The symbol set is the fourth character class every generated
    password is guaranteed to contain.
    """

    min_length: int = 16
    max_length: int = 21
    symbols: str = "!@#$%^&*()-_=+"


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Logging and general operational settings."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class GaugeConfig:
    """Master configuration aggregating every section.

    Usage:
        >>> config = GaugeConfig.load()                  # from default path
        >>> config = GaugeConfig.load("custom.toml")     # from custom path
        >>> config.advisor.max_suggestions
        5
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    advisor: AdvisorConfig = field(default_factory=AdvisorConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> GaugeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`GaugeConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ValueError: If the file is not valid TOML or a value has the
                wrong type.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, "global", raw.get("global", {})),
            analyzer=cls._build_section(AnalyzerConfig, "analyzer", raw.get("analyzer", {})),
            advisor=cls._build_section(AdvisorConfig, "advisor", raw.get("advisor", {})),
            generator=cls._build_section(GeneratorConfig, "generator", raw.get("generator", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, section: str, data: Any) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys are ignored so that newer config files keep working
        with older code. Known keys must match the type of the field's
        default.

        Raises:
            ValueError: If the section is not a table or a value has the
                wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"[{section}] must be a table")

        declared = {f.name: f for f in fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in data.items():
            if key not in declared:
                continue
            _check_value(section, key, value, _default_of(declared[key]))
            filtered[key] = value
        return cls(**filtered)


def _default_of(f: Field) -> Any:
    if f.default is not MISSING:
        return f.default
    return f.default_factory()  # type: ignore[misc]


def _check_value(section: str, key: str, value: Any, default: Any) -> None:
    """Raise ``ValueError`` unless *value* has the same shape as *default*."""
    if isinstance(default, list):
        ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
        expected = "a list of strings"
    elif default is None:
        ok = value is None or isinstance(value, str)
        expected = "a string"
    elif isinstance(default, bool):
        ok = isinstance(value, bool)
        expected = "true or false"
    elif isinstance(default, int):
        # bool is an int subclass; ``min_length = true`` is still wrong.
        ok = isinstance(value, int) and not isinstance(value, bool)
        expected = "an integer"
    else:
        ok = isinstance(value, str)
        expected = "a string"

    if not ok:
        raise ValueError(f"[{section}] {key} must be {expected}, got {value!r}")


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> GaugeConfig:
    """Module-level convenience wrapper around :meth:`GaugeConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = GaugeConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
