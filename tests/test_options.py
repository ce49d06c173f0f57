"""Tests for OTPOptions configuration."""

import dataclasses

import pytest

from otp_utils.exceptions import InvalidArgumentError
from otp_utils.options import Algorithm, OTPOptions


def test_defaults():
    options = OTPOptions()
    assert options.window == 1
    assert options.step == 30
    assert options.algorithm is Algorithm.SHA1
    assert options.digits == 6
    assert options.offset == 0


def test_algorithm_strings_are_normalized():
    assert OTPOptions(algorithm="SHA256").algorithm is Algorithm.SHA256
    assert OTPOptions(algorithm=" sha512 ").algorithm is Algorithm.SHA512


def test_options_are_frozen():
    options = OTPOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.digits = 8


def test_with_changes_revalidates():
    options = OTPOptions().with_changes(digits=8, offset=-15)
    assert options.digits == 8
    assert options.offset == -15
    with pytest.raises(InvalidArgumentError):
        options.with_changes(digits=7)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"digits": 7},
        {"digits": 10},
        {"digits": "6"},
        {"step": 0},
        {"step": -30},
        {"window": -1},
        {"window": 1.5},
        {"offset": 0.5},
        {"algorithm": "md5"},
        {"algorithm": 1},
    ],
)
def test_invalid_options_raise(kwargs):
    with pytest.raises(InvalidArgumentError):
        OTPOptions(**kwargs)


def run():
    test_defaults()
    test_algorithm_strings_are_normalized()
    test_options_are_frozen()
    test_with_changes_revalidates()
    print("test_options: all checks passed.")


if __name__ == "__main__":
    run()
