"""
Fixtures used in the tests
"""
import pytest

from tests.utility import small_primes


@pytest.fixture()
def odd_primes():
    return small_primes()


@pytest.fixture()
def primes_1_mod_4():
    return [p for p in small_primes() if p % 4 == 1]


@pytest.fixture()
def primes_3_mod_4():
    return [p for p in small_primes() if p % 4 == 3]
