"""HOTP and TOTP generation and verification."""

from .engine import compute_code
from .hotp import HotpVerifier
from .totp import TotpVerifier, time_counter

__all__ = ["HotpVerifier", "TotpVerifier", "compute_code", "time_counter"]
