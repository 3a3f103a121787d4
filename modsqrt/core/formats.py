"""
The reference formats and settings for modsqrt
"""
from typing import Final

__all__ = ["WORD", "LOGGING"]


class WORD:
    """
    All field elements and moduli are unsigned words of a fixed bit width. Products of two words are formed in a
    double-width accumulator before reduction.
    """
    BITS: Final[int] = 64
    MAX: Final[int] = (1 << 64) - 1


class LOGGING:
    """
    Defaults used by get_logger
    """
    LEVEL: Final[str] = "WARNING"
    FORMAT: Final[str] = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'
