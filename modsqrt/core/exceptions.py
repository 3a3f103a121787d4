"""
The custom exceptions used throughout modsqrt
"""
__all__ = ["FieldError", "WordSizeError", "ModulusError", "TonelliShanksError"]


class FieldError(ValueError):
    """
    Base class for the prime field arithmetic errors
    """
    pass


class WordSizeError(FieldError):
    """
    For use when an argument is not an unsigned integer of the fixed word width
    """
    pass


class ModulusError(FieldError):
    """
    For use when the modulus cannot be used: zero for exponentiation, even or less than 3 for square roots
    """
    pass


class TonelliShanksError(FieldError):
    """
    For use when the Tonelli-Shanks search fails to terminate as expected. Only happens for a composite modulus.
    """
    pass
