# squaremat

A small, dependency-free square matrix type for Python. A `SquareMat` holds an
`n × n` grid of floats. It supports the usual arithmetic operators, element-wise
products, integer powers, transposition and determinants.

## Installation

```
pip install squaremat
```

## Quick start

```python
from squaremat.matrix import SquareMat

a = SquareMat.from_rows([[1.0, 2.0], [3.0, 4.0]])
b = SquareMat.from_rows([[5.0, 6.0], [7.0, 8.0]])

print(a + b)          # element-wise sum
print(b - a)          # element-wise difference
print(-a)             # negation
print(a * b)          # matrix product
print(a * 2.0)        # scalar product (2.0 * a works too)
print(a / 2.0)        # scalar division
print(a % b)          # element-wise (Hadamard) product
print(b % 3)          # element-wise floating-point remainder (math.fmod)
print(a ** 2)         # matrix power; a ^ 2 gives the same result
print(~a)             # transpose, the same as a.transpose()
print(a.determinant())  # -2.0
```

## Building matrices

- `SquareMat(size)` makes a `size × size` matrix of zeros.
- `SquareMat(size, data)` takes the first `size` rows of `data` and the first
  `size` values of each row; any further rows or values are ignored. If there
  are fewer rows or values than that, `InvalidSize` is raised.
- `SquareMat.from_rows(rows)` takes the size from the number of rows; every
  row must have that many values, or `InvalidSize` is raised.
- `copy()` returns an independent copy.

The size must be a positive `int`: zero or a negative size raises
`InvalidOperation`, and a non-integer raises `TypeError`. The `size`
property gives the number of rows (and columns).

## Printing

`str(matrix)` gives one line per row, values separated by spaces and written
in the `g` format, so `1.0` prints as `1`. `repr(matrix)` gives a
`SquareMat.from_rows([...])` expression.

## Element access

Indexing with a row number returns that row as a list. The row is the
matrix's own storage, so assigning to it changes the matrix:

```python
a[0][0] = 9.0
a[1][1]               # 4.0
```

A row index outside `0 .. size - 1` (negative indices included) raises
`InvalidOperation`. Iterating over a matrix yields a copy of each row, and
`squaremat.matrix.as_rows(matrix)` returns those copies as a list.

## Operators in detail

- `*` with another matrix is the matrix product; with a real number it scales
  every element.
- `%` with another matrix is the element-wise product. With a real number the
  number is truncated to an integer and each element's `math.fmod` remainder
  by it is taken; a number that truncates to zero raises `DivisionByZero`.
- `/` divides every element by a real number; dividing by zero raises
  `DivisionByZero`.
- `**` and `^` take a non-negative `int` exponent; power 0 is the identity
  matrix. A negative exponent raises `InvalidOperation`.
- `determinant()` uses cofactor expansion along the first row and works for
  any size.

### In-place operators

`+=`, `-=`, `*=` (by a matrix or a scalar), `%=` (by a matrix or a number)
and `/=` update the matrix in place.

`increment()` and `decrement()` add or subtract one from every element and
return the matrix itself. `post_increment()` and `post_decrement()` do the
same, but return a copy of the matrix as it was before the change.

### Comparisons

- `==` is true when both matrices have the same size and equal elements.
  Matrices are mutable and therefore not hashable.
- `<`, `<=`, `>` and `>=` compare the sums of all elements. If the right-hand
  matrix is larger, only its top-left block of the left-hand matrix's size is
  summed; if it is smaller, `InvalidOperation` is raised. Two matrices with
  equal sums count as equal for `<=` and `>=`.

## Errors

All errors come from `squaremat.errors` and derive from `MatrixError`:

| Exception          | Raised when                                                                    |
|--------------------|--------------------------------------------------------------------------------|
| `InvalidOperation` | The size is not positive, a row index is out of range, the exponent is negative, or an ordering comparison is made against a smaller matrix |
| `SizeMismatch`     | The two operands of `+`, `-`, `*` or `%` are matrices of different sizes       |
| `InvalidSize`      | The supplied data has too few rows or values, or the rows are not square       |
| `DivisionByZero`   | Dividing by zero, or taking the remainder by zero                              |

`DivisionByZero` is also a `ZeroDivisionError`.

## Demo

The package installs a command that prints the result of each operation on two
sample 2 × 2 matrices:

```
squaremat-demo
```

It takes no options besides `--help`. The same walk-through can be started
from Python with `squaremat.demo.main()`.