"""A square matrix of floating-point numbers with operator support."""

from __future__ import annotations

import math
import numbers
import operator
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import chain, islice

from .errors import DivisionByZero, InvalidOperation, InvalidSize, SizeMismatch


def _fmt(value: float) -> str:
    return format(value, "g")


def _determinant(rows: list[list[float]]) -> float:
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for col, value in enumerate(rows[0]):
        minor = [row[:col] + row[col + 1:] for row in rows[1:]]
        sign = 1.0 if col % 2 == 0 else -1.0
        total += sign * value * _determinant(minor)
    return total


class SquareMat:
    """An n-by-n matrix of floats.

    Rows are reached with ``mat[i]`` and elements with ``mat[i][j]``.
    ``*`` is the matrix product (or scaling by a number), ``%`` with a
    matrix is the element-wise product and with a number the element-wise
    remainder, and ``**`` or ``^`` raise to a non-negative integer power.
    """

    __slots__ = ("_size", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int, data: Iterable[Iterable[float]] | None = None) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError("matrix size must be an integer")
        if size <= 0:
            raise InvalidOperation()
        self._size = size
        if data is None:
            self._data = [[0.0] * size for _ in range(size)]
            return
        rows = [[float(v) for v in islice(row, size)] for row in islice(data, size)]
        if len(rows) != size or any(len(row) != size for row in rows):
            raise InvalidSize()
        self._data = rows

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> SquareMat:
        """Build a matrix from a square list of rows."""
        materialised = [list(row) for row in rows]
        if any(len(row) != len(materialised) for row in materialised):
            raise InvalidSize()
        return cls(len(materialised), materialised)

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._size

    def copy(self) -> SquareMat:
        """Return an independent copy."""
        return self._wrap([list(row) for row in self._data])

    def _wrap(self, rows: list[list[float]]) -> SquareMat:
        result = object.__new__(type(self))
        result._size = len(rows)
        result._data = rows
        return result

    def _assign(self, other: SquareMat) -> SquareMat:
        self._size = other._size
        self._data = other._data
        return self

    def _map(self, func: Callable[[float], float]) -> list[list[float]]:
        return [[func(v) for v in row] for row in self._data]

    def _combine(
        self, other: SquareMat, func: Callable[[float, float], float]
    ) -> list[list[float]]:
        if other._size != self._size:
            raise SizeMismatch()
        return [
            [func(a, b) for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._data, other._data)
        ]

    def __getitem__(self, row: int) -> list[float]:
        index = operator.index(row)
        if not 0 <= index < self._size:
            raise InvalidOperation()
        return self._data[index]

    def __iter__(self) -> Iterator[list[float]]:
        for row in self._data:
            yield list(row)

    def __add__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._wrap(self._combine(other, operator.add))

    def __sub__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._wrap(self._combine(other, operator.sub))

    def __neg__(self) -> SquareMat:
        return self._wrap(self._map(operator.neg))

    def __mul__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            if other._size != self._size:
                raise SizeMismatch()
            columns = list(zip(*other._data))
            return self._wrap(
                [
                    [sum(a * b for a, b in zip(row, col)) for col in columns]
                    for row in self._data
                ]
            )
        if isinstance(other, numbers.Real):
            factor = float(other)
            return self._wrap(self._map(lambda v: v * factor))
        return NotImplemented

    def __rmul__(self, scalar: object) -> SquareMat:
        if isinstance(scalar, numbers.Real):
            return self * scalar
        return NotImplemented

    def __mod__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            return self._wrap(self._combine(other, operator.mul))
        if isinstance(other, numbers.Real):
            divisor = int(other)
            if divisor == 0:
                raise DivisionByZero()
            return self._wrap(self._map(lambda v: math.fmod(v, divisor)))
        return NotImplemented

    def __truediv__(self, scalar: object) -> SquareMat:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise DivisionByZero()
        divisor = float(scalar)
        return self._wrap(self._map(lambda v: v / divisor))

    def __pow__(self, exponent: object) -> SquareMat:
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise InvalidOperation()
        result = self._wrap(
            [
                [1.0 if i == j else 0.0 for j in range(self._size)]
                for i in range(self._size)
            ]
        )
        for _ in range(exponent):
            result = result * self
        return result

    def __xor__(self, exponent: object) -> SquareMat:
        return self.__pow__(exponent)

    def __iadd__(self, other: object) -> SquareMat:
        result = self.__add__(other)
        return result if result is NotImplemented else self._assign(result)

    def __isub__(self, other: object) -> SquareMat:
        result = self.__sub__(other)
        return result if result is NotImplemented else self._assign(result)

    def __imul__(self, other: object) -> SquareMat:
        result = self.__mul__(other)
        return result if result is NotImplemented else self._assign(result)

    def __imod__(self, other: object) -> SquareMat:
        result = self.__mod__(other)
        return result if result is NotImplemented else self._assign(result)

    def __itruediv__(self, scalar: object) -> SquareMat:
        result = self.__truediv__(scalar)
        return result if result is NotImplemented else self._assign(result)

    def increment(self) -> SquareMat:
        """Add one to every element in place and return the matrix."""
        self._data = self._map(lambda v: v + 1)
        return self

    def decrement(self) -> SquareMat:
        """Subtract one from every element in place and return the matrix."""
        self._data = self._map(lambda v: v - 1)
        return self

    def post_increment(self) -> SquareMat:
        """Increment in place and return a copy of the previous value."""
        before = self.copy()
        self.increment()
        return before

    def post_decrement(self) -> SquareMat:
        """Decrement in place and return a copy of the previous value."""
        before = self.copy()
        self.decrement()
        return before

    def transpose(self) -> SquareMat:
        """Return the transposed matrix."""
        return self._wrap([list(col) for col in zip(*self._data)])

    def __invert__(self) -> SquareMat:
        return self.transpose()

    def determinant(self) -> float:
        """Return the determinant, by cofactor expansion along the first row."""
        return _determinant(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(
            a == b
            for mine, theirs in zip(self._data, other._data)
            for a, b in zip(mine, theirs)
        )

    def _sums(self, other: SquareMat) -> tuple[float, float]:
        if other._size < self._size:
            raise InvalidOperation()
        n = self._size
        own = sum(chain.from_iterable(self._data), 0.0)
        theirs = sum(chain.from_iterable(row[:n] for row in other._data[:n]), 0.0)
        return own, theirs

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        own, theirs = self._sums(other)
        return own < theirs

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self < other

    def __str__(self) -> str:
        return "".join(" ".join(_fmt(v) for v in row) + "\n" for row in self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_rows({self._data!r})"


def as_rows(matrix: SquareMat) -> Sequence[list[float]]:
    """Return the rows of a matrix as a list of lists."""
    return list(matrix)