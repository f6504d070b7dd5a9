"""Errors raised by the arithmetic utilities."""


class ArithmeticUtilsError(Exception):
    """Base class for errors raised by this project"""


class DivisionByZero(ArithmeticUtilsError, ZeroDivisionError):
    """Raised when a division is attempted with a zero divisor"""

    def __init__(self, dividend=None, message: str | None = None):
        self.dividend = dividend
        if message is None:
            message = (
                f"Cannot divide {dividend} by zero"
                if dividend is not None
                else "Cannot divide by zero"
            )
        super().__init__(message)
