"""
One-time password (OTP) helper utilities working on Base32 secrets.
"""

import re
from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidArgumentError
from ..options import OTPOptions
from ..otp.hotp import HotpVerifier
from ..otp.totp import Clock, TotpVerifier
from .base32_codec import Base32Codec

_SEPARATORS = re.compile(r"[\s-]+")


@dataclass
class VerifyResult:
    is_valid: bool
    delta: Optional[int] = None


class OTPHelper:
    """Helper for generating and verifying codes from Base32-encoded secrets."""

    def __init__(self, options: Optional[OTPOptions] = None, clock: Optional[Clock] = None):
        self.options = options or OTPOptions()
        self.hotp = HotpVerifier(self.options)
        self.totp = TotpVerifier(self.options, clock=clock)

    @staticmethod
    def secret_bytes(secret: str) -> bytes:
        """
        Decode a Base32 secret as typed by a user.

        Whitespace and hyphens are removed, letters are uppercased and
        missing padding is restored before strict decoding.
        """
        if not isinstance(secret, str):
            raise InvalidArgumentError("secret must be a Base32 string")
        normalized = _SEPARATORS.sub("", secret).upper().rstrip("=")
        normalized += "=" * (-len(normalized) % 8)
        return Base32Codec.decode(normalized)

    def new_secret(self, length: int = 32) -> str:
        """
        Generate a new random Base32 secret.
        """
        return Base32Codec.generate_random(length)

    def timer(self, now: Optional[float] = None) -> int:
        """
        Remaining seconds in the current OTP window.
        """
        if now is None:
            now = self.totp.now()
        elapsed = int(now + self.options.offset) % self.options.step
        return self.options.step - elapsed

    def get_token(self, secret: str, now: Optional[float] = None) -> str:
        """
        Generate the current OTP token for the given secret.
        """
        return self.totp.generate(self.secret_bytes(secret), now)

    def verify_token(
        self, token: str, secret: str, window: Optional[int] = None, now: Optional[float] = None
    ) -> bool:
        """
        Verify an OTP token.
        """
        return self.verify_token_with_detail(token, secret, window, now).is_valid

    def verify_token_with_detail(
        self, token: str, secret: str, window: Optional[int] = None, now: Optional[float] = None
    ) -> VerifyResult:
        """
        Verify an OTP token and report which time step matched.

        `delta` is the matched step relative to the current one, or None.
        """
        drift = window if window is not None else self.options.window
        delta = self.totp.find_drift(self.secret_bytes(secret), token, drift, now)
        return VerifyResult(is_valid=delta is not None, delta=delta)

    def get_hotp_token(self, secret: str, counter: int) -> str:
        """
        Generate the HOTP token for `counter`.
        """
        return self.hotp.generate(self.secret_bytes(secret), counter)

    def verify_hotp_token(
        self, token: str, secret: str, counter: int, window: Optional[int] = None
    ) -> Optional[int]:
        """
        Verify an HOTP token, looking ahead up to `window` counters.

        Returns:
            The matched counter, or None. Callers should store the matched
            counter plus one as the next expected value.
        """
        look_ahead = window if window is not None else self.options.window
        return self.hotp.verify_with_resync(self.secret_bytes(secret), counter, token, look_ahead)
