"""
RFC 4648 Base32 encoding helpers used to represent shared OTP secrets.
"""

import secrets
from typing import Dict, Union

from ..exceptions import InvalidArgumentError, InvalidEncodingError

BytesLike = Union[bytes, bytearray, memoryview]

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PAD_CHAR = "="

_DECODE_MAP: Dict[str, int] = {char: index for index, char in enumerate(ALPHABET)}
# Data characters that can legally end a final 8-character group.
_VALID_TAIL_LENGTHS = frozenset({0, 2, 4, 5, 7})


class Base32Codec:
    """Encode, decode and generate Base32 strings (uppercase alphabet, `=` padding)."""

    @staticmethod
    def encode(data: BytesLike) -> str:
        """
        Encode bytes as padded Base32.

        Args:
            data: Bytes to encode. An empty input yields an empty string.

        Returns:
            Base32 text whose length is a multiple of 8.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError("data must be bytes-like")

        symbols = []
        buffer = 0
        bits = 0
        for byte in bytes(data):
            buffer = (buffer << 8) | byte
            bits += 8
            while bits >= 5:
                bits -= 5
                symbols.append(ALPHABET[(buffer >> bits) & 0x1F])
            buffer &= (1 << bits) - 1

        if bits:
            symbols.append(ALPHABET[(buffer << (5 - bits)) & 0x1F])

        return "".join(symbols) + PAD_CHAR * (-len(symbols) % 8)

    @staticmethod
    def decode(encoded: str) -> bytes:
        """
        Decode Base32 text produced by `encode`.

        Only the uppercase alphabet is accepted. Trailing padding is optional,
        but when present it must complete the last 8-character group.
        Leftover bits that do not form a whole byte are discarded.

        Raises:
            InvalidEncodingError: On characters outside the alphabet or
                padding inconsistent with RFC 4648 group sizes.
        """
        if not isinstance(encoded, str):
            raise InvalidEncodingError("encoded value must be a string")

        data = encoded.rstrip(PAD_CHAR)
        padding = len(encoded) - len(data)
        if padding and (len(encoded) % 8 or padding > 6):
            raise InvalidEncodingError("padding does not complete an 8-character group")
        if len(data) % 8 not in _VALID_TAIL_LENGTHS:
            raise InvalidEncodingError(
                f"final group of {len(data) % 8} characters is not valid Base32"
            )

        output = bytearray()
        buffer = 0
        bits = 0
        for position, char in enumerate(data):
            value = _DECODE_MAP.get(char)
            if value is None:
                raise InvalidEncodingError(f"invalid Base32 character {char!r} at position {position}")
            buffer = (buffer << 5) | value
            bits += 5
            if bits >= 8:
                bits -= 8
                output.append((buffer >> bits) & 0xFF)
                buffer &= (1 << bits) - 1

        return bytes(output)

    @staticmethod
    def generate_random(length: int = 16) -> str:
        """
        Generate a random Base32 credential of exactly `length` symbols.

        Symbols are drawn independently from the 32-symbol alphabet using the
        `secrets` module. No padding is added.
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidArgumentError("length must be an integer")
        if length < 1:
            raise InvalidArgumentError("length must be positive")
        return "".join(secrets.choice(ALPHABET) for _ in range(length))
