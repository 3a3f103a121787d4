"""
Quadratic residues modulo an odd prime
"""
from modsqrt.core.exceptions import ModulusError, TonelliShanksError
from modsqrt.core.logging import get_logger
from modsqrt.field.modular import check_word, pow_mod

__all__ = ["check_odd_modulus", "legendre_symbol", "quadratic_character", "is_quadratic_residue",
           "find_quadratic_non_residue"]

logger = get_logger(__name__)


def check_odd_modulus(p: int) -> int:
    """
    Verifies p is an odd word greater than 2. Primality is left to the caller.
    """
    check_word(p, "p")
    if p < 3 or p & 1 == 0:
        logger.error(f"Modulus {p} is not an odd prime candidate")
        raise ModulusError(f"Modulus must be an odd prime, got {p}")
    return p


def legendre_symbol(n: int, p: int) -> int:
    """
    Returns the Euler criterion n^((p-1)/2) (mod p) as computed, i.e. one of
        0       if n % p == 0
        1       if n % p != 0 and n is a quadratic residue mod p
        p - 1   if n % p != 0 and n is a quadratic non-residue mod p
    Callers compare the result against 1.
    """
    check_word(n, "n")
    check_odd_modulus(p)
    return pow_mod(n % p, (p - 1) >> 1, p)


def quadratic_character(n: int, p: int) -> int:
    """
    Returns (n | p) = {
        0 if n % p == 0
        1 if n % p != 0 and n is a quadratic residue mod p
        -1 if n % p != 0 and n is a quadratic non-residue mod p
    }
    """
    criterion = legendre_symbol(n, p)
    return -1 if criterion == p - 1 else criterion


def is_quadratic_residue(n: int, p: int) -> bool:
    """
    Returns True if (n|p) != -1. (We include 0 as quadratic residues.)
    """
    return legendre_symbol(n, p) in (0, 1)


def find_quadratic_non_residue(p: int) -> int:
    """
    Returns the smallest z >= 2 whose Euler criterion is not 1. Half of [1, p-1] are non-residues, so the scan is
    short for any prime p.
    """
    check_odd_modulus(p)
    for z in range(2, p):
        if legendre_symbol(z, p) != 1:
            logger.debug(f"Smallest quadratic non-residue mod {p}: {z}")
            return z

    logger.error(f"No quadratic non-residue found mod {p}")
    raise TonelliShanksError(f"No quadratic non-residue modulo {p}; modulus is not prime")
