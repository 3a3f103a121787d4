"""
modsqrt: square roots modulo an odd prime for unsigned 64-bit words

    >>> from modsqrt import sqrt_mod, square_roots
    >>> sqrt_mod(2, 7)
    4
    >>> square_roots(2, 7)
    (3, 4)
    >>> sqrt_mod(3, 7) is None
    True
"""
# modsqrt/__init__.py

from modsqrt.core.exceptions import *
from modsqrt.field import *
