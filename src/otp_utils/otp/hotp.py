"""
Counter-based one-time passwords (RFC 4226).
"""

import logging
from typing import Any, Optional, Union

from ..encode_utils.crypto_helper import CryptoHelper
from ..exceptions import InvalidArgumentError
from ..options import OTPOptions
from .engine import MAX_COUNTER, compute_code, validate_counter

Secret = Union[bytes, bytearray]


def validate_window(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"Invalid {name} supplied")
    return value


class HotpVerifier:
    """Generate and check HOTP codes with a fixed configuration."""

    def __init__(self, options: Optional[OTPOptions] = None):
        self.options = options or OTPOptions()
        self._logger = logging.getLogger(__name__)

    def generate(self, secret: Secret, counter: int) -> str:
        """Return the code for `counter`."""
        validate_counter(counter)
        return compute_code(secret, counter, self.options.algorithm, self.options.digits)

    def verify(self, secret: Secret, counter: int, candidate: str) -> bool:
        """Check `candidate` against the code for exactly `counter`."""
        return CryptoHelper.constant_time_equals(self.generate(secret, counter), candidate)

    def verify_with_resync(
        self, secret: Secret, counter: int, candidate: str, window: int = 2
    ) -> Optional[int]:
        """
        Search forward from `counter` for a matching code.

        Counters `counter` through `counter + window` are tried in ascending
        order and the first match wins. Counters below `counter` are never
        tried, nor are counters past the 64-bit range.

        Returns:
            The matching counter, or None when nothing in the window matches.
        """
        validate_counter(counter)
        validate_window("counter window", window)

        # the window stops at the largest encodable counter
        for step in range(min(window, MAX_COUNTER - counter) + 1):
            attempt = counter + step
            if self.verify(secret, attempt, candidate):
                if step:
                    self._logger.debug("HOTP code matched %d step(s) ahead", step)
                return attempt

        self._logger.debug("HOTP code did not match within a window of %d", window)
        return None
