"""
Time-based one-time passwords (RFC 6238).
"""

import logging
import time
from typing import Callable, Iterator, Optional

from ..encode_utils.crypto_helper import CryptoHelper
from ..options import OTPOptions
from .engine import MAX_COUNTER, compute_code
from .hotp import Secret, validate_window

Clock = Callable[[], float]


def time_counter(now: float, offset: int, step: int) -> int:
    """floor((now + offset) / step)"""
    return int((now + offset) // step)


def _drift_order(drift: int) -> Iterator[int]:
    yield 0
    for delta in range(-drift, drift + 1):
        if delta:
            yield delta


class TotpVerifier:
    """Generate and check TOTP codes against a clock."""

    def __init__(self, options: Optional[OTPOptions] = None, clock: Optional[Clock] = None):
        self.options = options or OTPOptions()
        self._clock = clock or time.time
        self._logger = logging.getLogger(__name__)

    def now(self) -> float:
        return self._clock()

    def current_counter(self, now: Optional[float] = None) -> int:
        """Time step for `now` (defaults to the clock) including the configured offset."""
        if now is None:
            now = self.now()
        return time_counter(now, self.options.offset, self.options.step)

    def generate(self, secret: Secret, now: Optional[float] = None) -> str:
        """Return the code for the time step containing `now`."""
        return compute_code(
            secret, self.current_counter(now), self.options.algorithm, self.options.digits
        )

    def find_drift(
        self, secret: Secret, candidate: str, drift: int = 1, now: Optional[float] = None
    ) -> Optional[int]:
        """
        Locate `candidate` within `drift` steps of the current one.

        The current step is tried first, then every other step in
        [t0 - drift, t0 + drift]. Steps before the epoch or past the 64-bit
        counter range are skipped.

        Returns:
            The matching offset relative to the current step (0 when the
            current step matched), or None.
        """
        validate_window("timedrift", drift)
        t0 = self.current_counter(now)

        for delta in _drift_order(drift):
            counter = t0 + delta
            if counter < 0 or counter > MAX_COUNTER:
                continue
            expected = compute_code(
                secret, counter, self.options.algorithm, self.options.digits
            )
            if CryptoHelper.constant_time_equals(expected, candidate):
                if delta:
                    self._logger.debug("TOTP code matched with a drift of %d step(s)", delta)
                return delta

        self._logger.debug("TOTP code did not match within a drift of %d", drift)
        return None

    def verify(
        self, secret: Secret, candidate: str, drift: int = 1, now: Optional[float] = None
    ) -> bool:
        """True if `candidate` matches a step within `drift` of the current one."""
        return self.find_drift(secret, candidate, drift, now) is not None
