"""Square matrices of floats with arithmetic operators, transpose and determinant."""

__version__ = "0.1.0"
__all__ = ["errors", "matrix", "demo"]