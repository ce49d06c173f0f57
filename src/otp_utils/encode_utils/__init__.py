"""Encoding and cryptography helper utilities."""

from .base32_codec import Base32Codec
from .crypto_helper import CryptoHelper
from .otp_helper import OTPHelper, VerifyResult

__all__ = [
    "Base32Codec",
    "CryptoHelper",
    "OTPHelper",
    "VerifyResult",
]
