"""
Gauger -- Password Strength Analyzer
=====================================

Estimates how resistant a password is to guessing and produces ranked,
actionable advice plus a freshly generated strong alternative, entirely
from the password string itself.

Modules:
    - gauger.analyzers: Classification, weakness detection and scoring
    - gauger.advisor: Suggestions and strong-password synthesis
    - gauger.data: Versioned weak-pattern tables
    - gauger.core: Pydantic models and the orchestrating engine
    - gauger.output: Rich console rendering
    - gauger.cli: Click-based command-line interface

Usage::

    from gauger import analyze, suggest, synthesize_strong_password

    result = analyze("hunter2")
    print(result.strength, result.score)
"""

from gauger.analyzers.strength import analyze
from gauger.advisor.suggestions import suggest
from gauger.advisor.synthesizer import synthesize_strong_password

__version__ = "1.0.0"
__tool_name__ = "gauger"

__all__ = ["analyze", "suggest", "synthesize_strong_password"]
