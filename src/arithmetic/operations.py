"""
Arithmetic Operations

Pure, stateless numeric functions: divide, square and add.
Each call depends only on its arguments.
"""

import logging
from numbers import Real

from .errors import DivisionByZero

logger = logging.getLogger(__name__)

# Operands used when divide() is called without arguments
DEFAULT_DIVIDEND: int = 2000
DEFAULT_DIVISOR: int = 100


def divide(a: Real = DEFAULT_DIVIDEND, b: Real = DEFAULT_DIVISOR) -> Real:
    """
    Divide a by b

    Called with no arguments, divides 2000 by 100.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Real: The quotient a / b

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        logger.debug(f"Rejected division of {a} by zero")
        raise DivisionByZero(a)

    result = a / b
    logger.debug(f"divide({a}, {b}) = {result}")
    return result


def square(x: Real) -> Real:
    """Multiply x by itself"""
    result = x * x
    logger.debug(f"square({x}) = {result}")
    return result


def add(a: Real, b: Real) -> Real:
    """Add a and b"""
    result = a + b
    logger.debug(f"add({a}, {b}) = {result}")
    return result
