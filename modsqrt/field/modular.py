"""
Modular arithmetic on fixed-width unsigned words

Every value handled here fits in WORD.BITS bits. A product of two words fits in 2 * WORD.BITS bits and is
reduced immediately.
"""
from modsqrt.core.exceptions import WordSizeError, ModulusError
from modsqrt.core.formats import WORD
from modsqrt.core.logging import get_logger

__all__ = ["check_word", "mul_mod", "pow_mod"]

logger = get_logger(__name__)


def check_word(value: int, name: str = "value") -> int:
    """
    Returns the value if it is an unsigned integer fitting in a word, raises WordSizeError otherwise.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        logger.error(f"{name} has type {type(value).__name__}, expected int")
        raise WordSizeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= WORD.MAX:
        logger.error(f"{name} = {value} outside of the {WORD.BITS}-bit word range")
        raise WordSizeError(f"{name} = {value} does not fit in an unsigned {WORD.BITS}-bit word")
    return value


def _mul_mod(a: int, b: int, modulus: int) -> int:
    # Arguments already validated; the product is formed at double width before the single reduction
    return (a * b) % modulus


def mul_mod(a: int, b: int, modulus: int) -> int:
    """
    Returns a * b (mod modulus) for words a, b and a positive word modulus.
    """
    check_word(a, "a")
    check_word(b, "b")
    check_word(modulus, "modulus")
    if modulus == 0:
        logger.error("mul_mod called with modulus 0")
        raise ModulusError("Modulus must be positive")
    return _mul_mod(a, b, modulus)


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """
    Returns base^exponent (mod modulus) using binary square-and-multiply.

    We read the exponent from its least significant bit. At each step the running base is squared, and multiplied
    into the accumulator whenever the current bit is set:

        base^exponent = prod_{i : e_i = 1} base^(2^i)

    An exponent of 0 gives 1 % modulus, i.e. 1 for modulus > 1 and 0 for modulus = 1.
    """
    check_word(base, "base")
    check_word(exponent, "exponent")
    check_word(modulus, "modulus")
    if modulus == 0:
        logger.error("pow_mod called with modulus 0")
        raise ModulusError("Modulus must be positive")

    result = 1 % modulus
    base %= modulus

    while exponent > 0:
        if exponent & 1:
            result = _mul_mod(result, base, modulus)
        base = _mul_mod(base, base, modulus)
        exponent >>= 1

    return result
