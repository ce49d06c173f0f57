"""
Cryptographic primitives used by the OTP engine and recovery-code generation.
"""

import secrets
from typing import Any, List, Union

from cryptography.hazmat.primitives import constant_time, hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from ..exceptions import InvalidArgumentError
from ..options import Algorithm

_HASHES = {
    Algorithm.SHA1: hashes.SHA1,
    Algorithm.SHA256: hashes.SHA256,
    Algorithm.SHA512: hashes.SHA512,
}


def _require_positive_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer")
    if value < 1:
        raise InvalidArgumentError(f"{name} must be positive")


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return str(value).encode("utf-8")


class CryptoHelper:
    """Collection of cryptographic helper methods."""

    @staticmethod
    def hmac_digest(algorithm: Union[Algorithm, str], key: bytes, message: bytes) -> bytes:
        """
        Compute a raw HMAC digest.

        Args:
            algorithm: Hash function, one of `Algorithm`.
            key: HMAC key.
            message: Data to authenticate.

        Returns:
            20, 32 or 64 raw bytes for SHA-1, SHA-256 and SHA-512.
        """
        hash_cls = _HASHES[Algorithm.parse(algorithm)]
        mac = crypto_hmac.HMAC(key, hash_cls())
        mac.update(message)
        return mac.finalize()

    @staticmethod
    def constant_time_equals(left: Any, right: Any) -> bool:
        """
        Compare two values without short-circuiting on the first difference.

        Strings are UTF-8 encoded before comparison; any other value is
        compared by its `str()` form.
        """
        return constant_time.bytes_eq(_to_bytes(left), _to_bytes(right))

    @staticmethod
    def generate_random_digits(length: int) -> str:
        """
        Generate a string of `length` random decimal digits.

        Args:
            length: Number of digits, must be positive.

        Returns:
            The digit string, possibly with leading zeros.
        """
        _require_positive_int("length", length)
        return "".join(str(secrets.randbelow(10)) for _ in range(length))

    @staticmethod
    def generate_recovery_codes(count: int = 1, length: int = 9) -> List[str]:
        """
        Generate a batch of unique numeric recovery codes.

        Codes that collide with one already in the batch are discarded and
        drawn again until `count` distinct codes are collected.

        Args:
            count: How many codes to return.
            length: Digits per code.

        Returns:
            A list of `count` pairwise-distinct codes, in generation order.
        """
        _require_positive_int("count", count)
        _require_positive_int("length", length)
        if count > 10**length:
            raise InvalidArgumentError(
                f"cannot generate {count} unique codes of {length} digits"
            )

        codes: List[str] = []
        seen = set()
        while len(codes) < count:
            code = CryptoHelper.generate_random_digits(length)
            if code not in seen:
                seen.add(code)
                codes.append(code)
        return codes
