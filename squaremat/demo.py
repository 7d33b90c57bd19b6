"""A short walk through the matrix operations, printed to standard output."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .errors import MatrixError
from .matrix import SquareMat, _fmt


def _show(title: str, matrix: SquareMat) -> None:
    print(f"{title}:\n{matrix}", end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result of each matrix operation on two sample matrices."""
    parser = argparse.ArgumentParser(
        prog="squaremat-demo",
        description="Demonstrate the square matrix operations.",
    )
    parser.parse_args(argv)

    try:
        mat1 = SquareMat.from_rows([[1.0, 2.0], [3.0, 4.0]])
        mat2 = SquareMat.from_rows([[5.0, 6.0], [7.0, 8.0]])

        _show("Matrix 1", mat1)
        _show("Matrix 2", mat2)

        _show("Addition", mat1 + mat2)
        _show("Subtraction", mat2 - mat1)
        _show("Unary minus", -mat1)
        _show("Matrix multiplication", mat1 * mat2)
        _show("Scalar multiplication", mat1 * 2.0)
        _show("Scalar division", mat1 / 2.0)
        _show("Element-wise multiplication", mat1 % mat2)
        _show("Modulo with scalar", mat2 % 3)
        _show("Power (mat1 ^ 2)", mat1 ** 2)
        _show("Transpose (~mat1)", ~mat1)
        print(f"Determinant (!mat1): {_fmt(mat1.determinant())}")

        mat3 = mat1.copy()
        mat3.increment()
        _show("Pre-increment", mat3)
        mat3.post_decrement()
        _show("Post-decrement", mat3)

        print(f"Comparison mat1 == mat1: {int(mat1 == mat1)}")
        print(f"Comparison mat1 > mat2: {int(mat1 > mat2)}")

        print(f"Access mat1[1][1] (should be 4.0): {_fmt(mat1[1][1])}")
        mat3[0][0] = 10.0
        _show("Updated mat3", mat3)
    except MatrixError as exc:
        print(f"Error: {exc}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())