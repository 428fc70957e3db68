"""
Gauger Advisor
===============

Improvement suggestions and strong-password synthesis.
"""

from gauger.advisor.suggestions import SuggestionAdvisor, suggest
from gauger.advisor.synthesizer import PasswordSynthesizer, synthesize_strong_password

__all__ = [
    "PasswordSynthesizer",
    "SuggestionAdvisor",
    "suggest",
    "synthesize_strong_password",
]
