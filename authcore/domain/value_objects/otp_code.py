"""One-time password value object."""

import re
import secrets
from dataclasses import dataclass
from typing import ClassVar, Optional, Protocol


class RandomSource(Protocol):
    """Anything exposing `randint`, e.g. `random.Random` or `secrets.SystemRandom`."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class OtpCode:
    """A six-digit numeric one-time code.

    Codes are drawn uniformly from [100000, 999999], so they always have
    exactly six digits and never start with zero.
    """

    value: str

    MIN_VALUE: ClassVar[int] = 100000
    MAX_VALUE: ClassVar[int] = 999999
    PATTERN: ClassVar[re.Pattern] = re.compile(r"^[1-9][0-9]{5}$")

    def __post_init__(self):
        if not self.PATTERN.match(self.value):
            raise ValueError("OTP must be exactly six digits without a leading zero")

    @classmethod
    def generate(cls, rng: Optional[RandomSource] = None) -> "OtpCode":
        """Draw a new code from `rng`, defaulting to the OS CSPRNG."""
        rng = rng or secrets.SystemRandom()
        return cls(str(rng.randint(cls.MIN_VALUE, cls.MAX_VALUE)))

    def __str__(self) -> str:
        return self.value
