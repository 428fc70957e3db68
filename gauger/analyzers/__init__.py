"""
Gauger Analyzers
=================

Character classification, weakness detection and strength scoring.
"""

from gauger.analyzers.composition import CharClass, Composition, classify, composition_of
from gauger.analyzers.weakness import detect_weaknesses
from gauger.analyzers.strength import PasswordAnalyzer, analyze

__all__ = [
    "CharClass",
    "Composition",
    "PasswordAnalyzer",
    "analyze",
    "classify",
    "composition_of",
    "detect_weaknesses",
]
