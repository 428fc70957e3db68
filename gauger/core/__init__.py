"""
Gauger Core Module
===================

Data models for the password-analysis engine. The engine itself lives in
:mod:`gauger.core.engine`.
"""

from gauger.core.models import (
    CrackTimeEstimate,
    GaugeReport,
    GeneratedPassword,
    PasswordAnalysis,
    PasswordStrength,
    Weakness,
    WeaknessKind,
)

__all__ = [
    "CrackTimeEstimate",
    "GaugeReport",
    "GeneratedPassword",
    "PasswordAnalysis",
    "PasswordStrength",
    "Weakness",
    "WeaknessKind",
]
