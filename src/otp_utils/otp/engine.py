"""
HMAC-based one-time password computation (RFC 4226 section 5.3).
"""

import struct
from typing import Any, Union

from ..encode_utils.crypto_helper import CryptoHelper
from ..exceptions import InvalidArgumentError
from ..options import Algorithm

MAX_COUNTER = 2**64 - 1


def validate_counter(counter: Any) -> int:
    """Return `counter` if it is an integer in the unsigned 64-bit range."""
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise InvalidArgumentError("Invalid counter supplied")
    if counter < 0 or counter > MAX_COUNTER:
        raise InvalidArgumentError("Invalid counter supplied")
    return counter


def counter_to_bytes(counter: int) -> bytes:
    """Pack a counter as the 8-byte big-endian message fed to HMAC."""
    return struct.pack(">Q", validate_counter(counter))


def truncate(digest: bytes, digits: int) -> str:
    """
    Apply dynamic truncation to an HMAC digest.

    The low nibble of the last byte selects a 4-byte window anywhere in the
    digest, so this works for 20, 32 and 64 byte digests alike.
    """
    offset = digest[-1] & 0x0F
    value = (
        (digest[offset] & 0x7F) << 24
        | digest[offset + 1] << 16
        | digest[offset + 2] << 8
        | digest[offset + 3]
    )
    return str(value % 10**digits).zfill(digits)


def compute_code(
    secret: Union[bytes, bytearray],
    counter: int,
    algorithm: Union[Algorithm, str] = Algorithm.SHA1,
    digits: int = 6,
) -> str:
    """
    Compute the one-time code for `secret` at `counter`.

    Args:
        secret: Raw shared secret, at least one byte.
        counter: Moving factor, 0 <= counter < 2**64.
        algorithm: HMAC hash function.
        digits: Code length; callers validate this through `OTPOptions`.

    Returns:
        The code as a zero-padded decimal string of `digits` characters.
    """
    if not isinstance(secret, (bytes, bytearray)) or not secret:
        raise InvalidArgumentError("secret must be non-empty bytes")
    digest = CryptoHelper.hmac_digest(algorithm, secret, counter_to_bytes(counter))
    return truncate(digest, digits)
