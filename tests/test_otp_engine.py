"""Tests for the OTP engine (counter encoding and dynamic truncation)."""

import base64
import hashlib

import pyotp
import pytest

from otp_utils.exceptions import InvalidArgumentError
from otp_utils.options import Algorithm
from otp_utils.otp.engine import MAX_COUNTER, compute_code, counter_to_bytes, truncate

SECRET = b"12345678901234567890"


def test_counter_is_packed_big_endian():
    assert counter_to_bytes(0) == b"\x00" * 8
    assert counter_to_bytes(1) == b"\x00" * 7 + b"\x01"
    assert counter_to_bytes(0x0102030405060708) == bytes(range(1, 9))


def test_counter_uses_the_full_64_bits():
    assert counter_to_bytes(2**32) == b"\x00\x00\x00\x01\x00\x00\x00\x00"
    assert counter_to_bytes(MAX_COUNTER) == b"\xff" * 8
    assert compute_code(SECRET, 2**32) != compute_code(SECRET, 0)


def test_truncate_rfc4226_example():
    # digest from RFC 4226 section 5.4
    digest = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")
    assert truncate(digest, 6) == "872921"


def test_truncate_pads_with_zeros():
    digest = bytes(19) + b"\x00"
    assert truncate(digest, 6) == "000000"
    assert truncate(digest, 8) == "00000000"


@pytest.mark.parametrize("counter", [-1, MAX_COUNTER + 1, "1", 1.0, None, True])
def test_invalid_counter_raises(counter):
    with pytest.raises(InvalidArgumentError):
        compute_code(SECRET, counter)


@pytest.mark.parametrize("secret", [b"", "12345678901234567890", None])
def test_invalid_secret_raises(secret):
    with pytest.raises(InvalidArgumentError):
        compute_code(secret, 0)


@pytest.mark.parametrize(
    "algorithm, digestmod",
    [
        (Algorithm.SHA1, hashlib.sha1),
        (Algorithm.SHA256, hashlib.sha256),
        (Algorithm.SHA512, hashlib.sha512),
    ],
)
@pytest.mark.parametrize("digits", [6, 8])
def test_codes_match_pyotp(algorithm, digestmod, digits):
    secret = bytes(range(1, 41))
    reference = pyotp.HOTP(
        base64.b32encode(secret).decode("ascii"), digits=digits, digest=digestmod
    )
    for counter in (0, 1, 7, 12345, 2**31, 2**40):
        assert compute_code(secret, counter, algorithm, digits) == reference.at(counter)


def run():
    test_counter_is_packed_big_endian()
    test_counter_uses_the_full_64_bits()
    test_truncate_rfc4226_example()
    test_truncate_pads_with_zeros()
    for counter in (-1, MAX_COUNTER + 1, "1", 1.0, None, True):
        test_invalid_counter_raises(counter)
    for secret in (b"", "12345678901234567890", None):
        test_invalid_secret_raises(secret)
    for algorithm, digestmod in (
        (Algorithm.SHA1, hashlib.sha1),
        (Algorithm.SHA256, hashlib.sha256),
        (Algorithm.SHA512, hashlib.sha512),
    ):
        for digits in (6, 8):
            test_codes_match_pyotp(algorithm, digestmod, digits)
    print("test_otp_engine: all checks passed.")


if __name__ == "__main__":
    run()
