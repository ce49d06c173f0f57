"""Exception types raised by otp-utils."""

__all__ = ["OTPError", "InvalidArgumentError", "InvalidEncodingError"]


class OTPError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(OTPError, ValueError):
    """Raised when a caller supplies an out-of-range or malformed argument."""


class InvalidEncodingError(OTPError, ValueError):
    """Raised when Base32 input cannot be decoded."""
