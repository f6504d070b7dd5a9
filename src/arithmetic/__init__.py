"""
Arithmetic Layer - Pure Numeric Operations

This layer holds the arithmetic utility functions.
- Pure functions (input → output)
- No I/O, no shared state
- Errors are raised to the caller
"""

from .errors import ArithmeticUtilsError, DivisionByZero
from .operations import DEFAULT_DIVIDEND, DEFAULT_DIVISOR, add, divide, square

__all__ = [
    "ArithmeticUtilsError",
    "DivisionByZero",
    "DEFAULT_DIVIDEND",
    "DEFAULT_DIVISOR",
    "add",
    "divide",
    "square",
]
