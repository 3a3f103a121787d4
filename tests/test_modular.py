"""
Tests for word validation, modular multiplication and modular exponentiation
"""
from secrets import randbits

import pytest

from modsqrt.core import WORD, WordSizeError, ModulusError
from modsqrt.field import check_word, mul_mod, pow_mod
from tests.utility import LARGE_PRIMES


def test_pow_mod_known_values():
    assert pow_mod(2, 10, 1000) == 24
    assert pow_mod(3, 5, 7) == 5
    assert pow_mod(2, 0, 7) == 1
    assert pow_mod(0, 5, 7) == 0
    assert pow_mod(10, 3, 7) == 6, "Base larger than modulus not reduced"


def test_pow_mod_zero_exponent():
    """
    x^0 = 1 % modulus, which is 0 for the modulus 1
    """
    assert pow_mod(0, 0, 7) == 1
    assert pow_mod(5, 0, 2) == 1
    assert pow_mod(5, 0, 1) == 0
    assert pow_mod(5, 3, 1) == 0


def test_pow_mod_against_builtin():
    """
    We compare random full-width exponentiations against the builtin pow
    """
    for p in LARGE_PRIMES:
        for _ in range(10):
            base = randbits(WORD.BITS)
            exponent = randbits(WORD.BITS)
            assert pow_mod(base, exponent, p) == pow(base, exponent, p), \
                f"pow_mod mismatch for {base}^{exponent} mod {p}"


def test_pow_mod_fermat():
    """
    For prime p and a not divisible by p we have a^(p-1) = 1 (mod p)
    """
    for p in LARGE_PRIMES:
        a = randbits(16) + 1
        assert pow_mod(a, p - 1, p) == 1, f"Fermat's little theorem fails for {p}"


def test_mul_mod_at_word_max():
    p = (1 << 64) - 59
    a = b = WORD.MAX
    assert mul_mod(a, b, p) == (58 * 58) % p
    assert mul_mod(3, 5, 7) == 1


@pytest.mark.parametrize("a, b, modulus", [
    (-1, 2, 7),
    (2, 1 << 64, 7),
    (2, 3, 1 << 64),
    (2.0, 3, 7),
])
def test_mul_mod_rejects_wide_arguments(a, b, modulus):
    with pytest.raises(WordSizeError):
        mul_mod(a, b, modulus)


def test_mul_mod_zero_modulus():
    with pytest.raises(ModulusError):
        mul_mod(2, 3, 0)


def test_check_word():
    assert check_word(0) == 0
    assert check_word(WORD.MAX) == WORD.MAX

    with pytest.raises(WordSizeError):
        check_word(-1)
    with pytest.raises(WordSizeError):
        check_word(WORD.MAX + 1)
    with pytest.raises(WordSizeError):
        check_word(True)
    with pytest.raises(WordSizeError):
        check_word(3.0)


@pytest.mark.parametrize("base, exponent, modulus", [
    (-1, 2, 7),
    (2, -1, 7),
    (2, 2, 1 << 64),
    (1 << 64, 2, 7),
])
def test_pow_mod_rejects_wide_arguments(base, exponent, modulus):
    with pytest.raises(WordSizeError):
        pow_mod(base, exponent, modulus)


def test_pow_mod_zero_modulus():
    with pytest.raises(ModulusError):
        pow_mod(2, 3, 0)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        pow_mod(2, 3, 0)
