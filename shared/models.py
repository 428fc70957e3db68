"""
Gauger Shared Data Models
==========================

Pydantic v2 models shared across the Gauger packages: the qualitative
:class:`Severity` scale and the generic :class:`Finding` record that
weakness findings specialise.

References:
    - OWASP Authentication Cheat Sheet.
      https://cheatsheetseries.owasp.org/cheatsheets/Authentication_Cheat_Sheet.html
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Finding severity level.

    Attributes:
        HIGH:   Makes the password trivially guessable on its own.
        MEDIUM: Substantially shrinks the search space.
        LOW:    Minor deficiency; worth fixing but not urgent.
        INFO:   Informational observation.
    """

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def rank(self) -> int:
        """Sort key; lower ranks are more severe."""
        return list(Severity).index(self)


class Finding(BaseModel):
    """A single immutable finding.

    Attributes:
        severity:    Qualitative severity rating.
        title:       Short, descriptive title.
        description: Human-readable explanation.
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        use_enum_values=False,
        extra="ignore",
    )

    severity: Severity = Field(..., description="Severity level of this finding")
    title: str = Field(..., min_length=1, max_length=256, description="Short title")
    description: str = Field(..., min_length=1, description="Detailed explanation")
