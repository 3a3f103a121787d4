"""
Contains the core elements that are used within modsqrt

Core:
    -Provides the word size and logging settings
    -Provides custom exceptions for the field arithmetic
    -Provides the logger factory
"""
# core/__init__.py
from modsqrt.core.exceptions import *
from modsqrt.core.formats import *
from modsqrt.core.logging import *
