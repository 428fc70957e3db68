"""
Gauger Analysis Engine
=======================

Facade over the analyzer, advisor and synthesizer. A caller (a UI, the
CLI, a web form) builds one engine from configuration and then calls
:meth:`GaugeEngine.analyze` and :meth:`GaugeEngine.suggest` on every
keystroke, or :meth:`GaugeEngine.evaluate` for an explicit "analyze"
action that also produces a fresh strong password.

Every configurable value reaches the components through the constructor;
the engine keeps no per-call state, so concurrent calls need no locking.
Passwords are never written to the log.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
"""

from __future__ import annotations

from typing import Optional

from shared.config import GaugeConfig
from shared.logger import GaugeLogger

from gauger.advisor.suggestions import SuggestionAdvisor
from gauger.advisor.synthesizer import PasswordSynthesizer
from gauger.analyzers.strength import PasswordAnalyzer
from gauger.core.models import GaugeReport, GeneratedPassword, PasswordAnalysis
from gauger.data.patterns import DEFAULT_TABLES, PatternTables


class GaugeEngine:
    """Orchestrates password analysis, advice and synthesis.

    Usage::

        engine = GaugeEngine()
        analysis = engine.analyze("P@ssw0rd!")
        advice = engine.suggest("P@ssw0rd!")
        report = engine.evaluate("P@ssw0rd!")

    Attributes:
        config: Configuration the components were built from.
        tables: Weak-pattern tables shared by analyzer and advisor.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[GaugeConfig] = None,
        *,
        logger: Optional[GaugeLogger] = None,
        synthesizer: Optional[PasswordSynthesizer] = None,
    ) -> None:
        self.config = config or GaugeConfig()
        settings = self.config.global_settings
        self.logger = logger or GaugeLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

        analyzer_cfg = self.config.analyzer
        self.tables: PatternTables = DEFAULT_TABLES.extended(
            common_passwords=analyzer_cfg.extra_common_passwords,
            keyboard_walks=analyzer_cfg.extra_keyboard_walks,
        )

        self._analyzer = PasswordAnalyzer(
            tables=self.tables,
            min_length=analyzer_cfg.min_length,
        )
        self._advisor = SuggestionAdvisor(
            tables=self.tables,
            min_length=analyzer_cfg.min_length,
            max_suggestions=self.config.advisor.max_suggestions,
        )
        generator_cfg = self.config.generator
        self._synthesizer = synthesizer or PasswordSynthesizer(
            min_length=generator_cfg.min_length,
            max_length=generator_cfg.max_length,
            symbols=generator_cfg.symbols,
            logger=self.logger,
        )

        self.logger.debug(
            "Engine ready",
            table_version=self.tables.version,
            min_length=analyzer_cfg.min_length,
            secure_rng=self._synthesizer.secure,
        )

    # ------------------------------------------------------------------ #
    #  Per-keystroke contracts
    # ------------------------------------------------------------------ #

    def analyze(self, password: str) -> PasswordAnalysis:
        """Analyse *password*; see :class:`PasswordAnalyzer`."""
        return self._analyzer.analyze(password)

    def suggest(self, password: str) -> list[str]:
        """Improvement advice for *password*; empty when nothing needs fixing."""
        return self._advisor.suggest(password)

    def generate(self) -> GeneratedPassword:
        """Synthesize a fresh strong password, unrelated to any input."""
        generated = self._synthesizer.generate()
        self.logger.debug(
            "Generated password", length=generated.length, secure=generated.secure
        )
        return generated

    # ------------------------------------------------------------------ #
    #  Explicit "analyze" action
    # ------------------------------------------------------------------ #

    def evaluate(self, password: str, *, include_generated: bool = True) -> GaugeReport:
        """Analyse, advise and optionally synthesize in one report.

        Args:
            password: The password to evaluate.
            include_generated: Attach a freshly generated strong password.

        Returns:
            A :class:`GaugeReport`.
        """
        with self.logger.operation("evaluate"), self.logger.timed("password evaluation"):
            analysis = self._analyzer.analyze(password)
            suggestions = self._advisor.from_weaknesses(analysis.weaknesses)
            generated = self.generate() if include_generated else None

            summary = (
                f"{analysis.strength.label}: score {analysis.score}/100, "
                f"{analysis.length} characters, "
                f"{len(analysis.weaknesses)} weakness(es)"
            )
            self.logger.debug(
                "Password evaluated",
                length=analysis.length,
                strength=analysis.strength.value,
                score=analysis.score,
                weaknesses=[k.value for k in analysis.weakness_kinds],
            )

        return GaugeReport(
            analysis=analysis,
            suggestions=suggestions,
            generated=generated,
            table_version=self.tables.version,
            summary=summary,
        )
