"""
Strong Password Synthesizer
============================

Generates random high-entropy passwords unrelated to any user input.
Each password is 16-21 characters long (by default), contains at least
one uppercase letter, lowercase letter, digit and symbol, fills the
remainder uniformly from the union of all four classes, and is shuffled
with an unbiased Fisher-Yates shuffle so the guaranteed characters do not
sit at predictable positions.

Randomness comes from the operating system CSPRNG. If the platform has
no such source, ``random.Random`` is used instead, a warning is
logged and the result is flagged ``secure=False``.

References:
    - NIST SP 800-63B (2017), Section 5.1.1.2.
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
"""

from __future__ import annotations

import random
import secrets
import string
from typing import Optional

from gauger.core.models import GeneratedPassword
from shared.logger import GaugeLogger

DEFAULT_SYMBOLS = "!@#$%^&*()-_=+"
DEFAULT_MIN_LENGTH = 16
DEFAULT_MAX_LENGTH = 21


def _system_rng() -> tuple[random.Random, bool]:
    """Return ``(rng, secure)``, probing the OS random source once."""
    rng = secrets.SystemRandom()
    try:
        rng.getrandbits(8)
    except NotImplementedError:
        return random.Random(), False
    return rng, True


class PasswordSynthesizer:
    """Builds strong random passwords on demand.

    Usage::

        synth = PasswordSynthesizer()
        generated = synth.generate()
        print(generated.value, generated.secure)

    Args:
        min_length: Shortest password produced (at least 4).
        max_length: Longest password produced.
        symbols: The symbol class; must be non-empty and contain no letters,
            digits or whitespace.
        rng: Random source to use instead of the OS CSPRNG. Anything other
            than a ``random.SystemRandom`` marks results ``secure=False``.
        logger: Logger used to report a degraded random source.

    Raises:
        ValueError: On an impossible length range or an invalid symbol set.
    """

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
        symbols: str = DEFAULT_SYMBOLS,
        *,
        rng: Optional[random.Random] = None,
        logger: Optional[GaugeLogger] = None,
    ) -> None:
        if min_length < 4:
            raise ValueError(
                f"min_length must be at least 4 to fit every character class, got {min_length}"
            )
        if max_length < min_length:
            raise ValueError(
                f"max_length ({max_length}) must not be below min_length ({min_length})"
            )
        if not symbols:
            raise ValueError("symbols must not be empty")
        if any(ch.isalnum() or ch.isspace() or not ch.isprintable() for ch in symbols):
            raise ValueError("symbols must be printable and contain no letters, digits or whitespace")

        self.min_length = min_length
        self.max_length = max_length
        self.classes: tuple[str, ...] = (
            string.ascii_uppercase,
            string.ascii_lowercase,
            string.digits,
            "".join(dict.fromkeys(symbols)),
        )
        self.alphabet = "".join(self.classes)

        if rng is not None:
            self._rng, self._secure = rng, isinstance(rng, random.SystemRandom)
        else:
            self._rng, self._secure = _system_rng()
        if not self._secure:
            (logger or GaugeLogger("synthesizer")).warning(
                "Generated passwords use a non-cryptographic random "
                "generator and should not be adopted as real credentials"
            )

    @property
    def secure(self) -> bool:
        return self._secure

    def generate(self) -> GeneratedPassword:
        """Return a fresh password. No state carries over between calls."""
        length = self._rng.randint(self.min_length, self.max_length)
        chars = [self._rng.choice(char_class) for char_class in self.classes]
        chars.extend(
            self._rng.choice(self.alphabet) for _ in range(length - len(chars))
        )
        self._rng.shuffle(chars)
        value = "".join(chars)
        return GeneratedPassword(value=value, length=len(value), secure=self._secure)


def synthesize_strong_password() -> str:
    """Return a fresh strong password using the default settings."""
    return PasswordSynthesizer().generate().value
