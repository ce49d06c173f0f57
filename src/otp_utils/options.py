"""
Configuration values shared by the HOTP and TOTP verifiers.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

from .exceptions import InvalidArgumentError

ALLOWED_DIGITS = (6, 8)


class Algorithm(str, Enum):
    """HMAC hash functions usable for OTP generation."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f"Unsupported hash algorithm: {value}")


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer")


@dataclass(frozen=True)
class OTPOptions:
    """
    Immutable OTP configuration.

    `window` is the default number of steps probed on each side of the
    current TOTP step, and the default look-ahead for HOTP checks made
    through `OTPHelper`. `step` is the TOTP period in seconds and `offset`
    is added to the clock before the step is computed.
    """

    window: int = 1
    step: int = 30
    algorithm: Union[Algorithm, str] = Algorithm.SHA1
    digits: int = 6
    offset: int = 0

    def __post_init__(self) -> None:
        _require_int("window", self.window)
        _require_int("step", self.step)
        _require_int("digits", self.digits)
        _require_int("offset", self.offset)
        if self.window < 0:
            raise InvalidArgumentError("window must be zero or a positive integer")
        if self.step <= 0:
            raise InvalidArgumentError("step must be a positive integer")
        if self.digits not in ALLOWED_DIGITS:
            raise InvalidArgumentError(f"digits must be 6 or 8, {self.digits} given")
        # frozen dataclass: bypass __setattr__ to store the normalized enum
        object.__setattr__(self, "algorithm", Algorithm.parse(self.algorithm))

    def with_changes(self, **changes: Any) -> "OTPOptions":
        """Return a copy with the given fields replaced (and re-validated)."""
        return replace(self, **changes)
