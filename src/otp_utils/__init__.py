"""
otp-utils: HOTP/TOTP one-time passwords and Base32 secrets

This package implements RFC 4226 and RFC 6238 code generation and
verification together with the RFC 4648 Base32 codec used for secrets.
"""

__version__ = "0.1.0"
__author__ = "xzsean666"

# Import key utilities here for convenient access
from . import encode_utils
from . import otp
from .encode_utils import Base32Codec, CryptoHelper, OTPHelper, VerifyResult
from .exceptions import InvalidArgumentError, InvalidEncodingError, OTPError
from .options import Algorithm, OTPOptions
from .otp import HotpVerifier, TotpVerifier, compute_code

__all__ = [
    "encode_utils",
    "otp",
    "Algorithm",
    "Base32Codec",
    "CryptoHelper",
    "HotpVerifier",
    "InvalidArgumentError",
    "InvalidEncodingError",
    "OTPError",
    "OTPHelper",
    "OTPOptions",
    "TotpVerifier",
    "VerifyResult",
    "compute_code",
]
