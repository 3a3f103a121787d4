"""
Square roots modulo an odd prime: the p = 3 (mod 4) shortcut and the general Tonelli-Shanks algorithm
"""
from typing import Optional, Tuple

from modsqrt.core.exceptions import TonelliShanksError
from modsqrt.core.logging import get_logger
from modsqrt.field.modular import check_word, pow_mod, _mul_mod
from modsqrt.field.residue import check_odd_modulus, legendre_symbol, find_quadratic_non_residue

__all__ = ["decompose", "tonelli_shanks", "sqrt_mod", "square_roots"]

logger = get_logger(__name__)


def decompose(p: int) -> Tuple[int, int]:
    """
    Returns (q, s) with p - 1 = 2^s * q, where q is odd and s >= 1.
    """
    check_odd_modulus(p)
    q = p - 1
    s = 0
    while q & 1 == 0:
        s += 1
        q >>= 1
    return q, s


def _shanks_loop(n: int, p: int) -> int:
    """
    Runs Tonelli-Shanks on a reduced, non-zero quadratic residue n. Keeps r^2 = t * n (mod p) throughout.
    """
    # 1) Find a quadratic non residue
    z = find_quadratic_non_residue(p)

    # 2) Divide p-1 into its even and odd components by p-1 = 2^s * q
    q, s = decompose(p)

    # 3) Configure initial variables
    m = s
    c = pow_mod(z, q, p)
    t = pow_mod(n, q, p)
    r = pow_mod(n, (q + 1) >> 1, p)

    # 4) Repeat until t == 1
    while t != 1:

        # Find the least integer i in [1, m) such that t^(2^i) = 1 (mod p)
        i = 0
        factor = t
        while factor != 1:
            i += 1
            if i >= m:
                logger.error(f"No i < {m} with t^(2^i) = 1 for t = {t} mod {p}")
                raise TonelliShanksError(f"Tonelli-Shanks failed to converge modulo {p}; modulus is not prime")
            factor = _mul_mod(factor, factor, p)

        # Reassign variables
        b = pow_mod(c, 1 << (m - i - 1), p)
        m = i
        c = _mul_mod(b, b, p)
        t = _mul_mod(t, c, p)
        r = _mul_mod(r, b, p)

    return r


def tonelli_shanks(n: int, p: int) -> Optional[int]:
    """
    Returns r with r^2 = n (mod p) using the general Tonelli-Shanks algorithm, or None if n is a quadratic
    non-residue. Works for every odd prime p; for p = 3 (mod 4) it agrees with the shortcut used by sqrt_mod.
    """
    check_word(n, "n")
    check_odd_modulus(p)

    n %= p
    if n == 0:
        return 0
    if legendre_symbol(n, p) != 1:
        return None
    return _shanks_loop(n, p)


def sqrt_mod(n: int, p: int) -> Optional[int]:
    """
    Returns a square root r of n modulo the odd prime p, or None if n is a quadratic non-residue.

    The other root is p - r. Which of the two is returned is fixed for given inputs, but not otherwise specified.
    The modulus is checked for parity and word size only; a composite p gives unspecified results or raises
    TonelliShanksError.
    """
    check_word(n, "n")
    check_odd_modulus(p)

    # Trivial case
    n %= p
    if n == 0:
        return 0

    # Euler's criterion
    if legendre_symbol(n, p) != 1:
        logger.debug(f"{n} is a quadratic non-residue mod {p}")
        return None

    # p = 3 (mod 4) case: (n^((p+1)/4))^2 = n * n^((p-1)/2) = n
    if p & 3 == 3:
        logger.debug(f"Using p = 3 (mod 4) shortcut for {n} mod {p}")
        return pow_mod(n, (p + 1) >> 2, p)

    # --- GENERAL CASE --- #
    logger.debug(f"Using Tonelli-Shanks for {n} mod {p}")
    return _shanks_loop(n, p)


def square_roots(n: int, p: int) -> Optional[Tuple[int, int]]:
    """
    Returns both square roots of n modulo p as (smaller, larger), or None if n is a quadratic non-residue.
    """
    r = sqrt_mod(n, p)
    if r is None:
        return None
    neg_r = -r % p
    return min(r, neg_r), max(r, neg_r)
