"""Exceptions raised by matrix operations."""


class MatrixError(Exception):
    """Base class for all matrix errors."""

    default_message = "Matrix error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InvalidOperation(MatrixError):
    """An operation that is not defined for the given operands."""

    default_message = "Invalid matrix operation."


class SizeMismatch(MatrixError):
    """Two matrices of different sizes were combined."""

    default_message = "Matrix size mismatch."


class InvalidSize(MatrixError):
    """Matrix data does not have the required shape."""

    default_message = "Matrix size invalid."


class DivisionByZero(MatrixError, ZeroDivisionError):
    """A matrix was divided by zero."""

    default_message = "Division by zero."