"""
Prime field arithmetic: modular exponentiation, quadratic residues and square roots
"""
# field/__init__.py

from modsqrt.field.modular import *
from modsqrt.field.residue import *
from modsqrt.field.tonelli import *
