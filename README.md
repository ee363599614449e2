# cmatrix

`cmatrix` reads matrices of complex numbers from plain text files. It has
two modules:

* `cmatrix.complex_num` holds `Complex`, a small immutable complex-number
  type with a strict text syntax and equality within a fixed tolerance.
* `cmatrix.loader` reads a matrix file, checks its layout and turns each
  entry into a `Complex`.

## Complex numbers

```python
from cmatrix.complex_num import Complex

a = Complex(1, 2)
b = Complex.parse("3-i")

print(a + b)               # 4+1i
print(a * b)               # 5+5i
print(abs(Complex(3, 4)))  # 5.0
```

`Complex(re, im)` takes a real and an imaginary part, both defaulting to
`0.0`. It supports `+`, `-`, `*`, `/` and unary `-`, with another `Complex`
or with a plain `int`, `float` or `complex` on either side, and converts
with `complex()`. Dividing by zero raises `ZeroDivisionError`. Two numbers
are equal when their real parts and their imaginary parts each differ by no
more than 10000 machine epsilons, so results that carry rounding error still
compare equal to the exact value.

`str()` writes the shortest natural form: `3`, `i`, `-i`, `2.5i`, `1+2i`,
`1-2i`.

`Complex.parse(text)` reads the first whitespace-separated token of `text`
and accepts the same forms, with no spaces inside:

| Text     | Value              |
|----------|--------------------|
| `7`      | `Complex(7, 0)`    |
| `-0.5`   | `Complex(-0.5, 0)` |
| `i`      | `Complex(0, 1)`    |
| `-i`     | `Complex(0, -1)`   |
| `4i`     | `Complex(0, 4)`    |
| `1+2i`   | `Complex(1, 2)`    |
| `1.5-i`  | `Complex(1.5, -1)` |

Empty text, any character other than digits, `.`, `+`, `-` and `i`, an `i`
that is not last, or a stray sign makes it raise `ValueError`.

## Matrix files

A matrix file has one row per line. Each line starts and ends with `|`, and
the entries between the bars are separated by spaces:

```
|1 2i 0|
|-i 1+i 3|
|0 0 1|
```

Every row must have the same number of entries as the first one.

```python
from cmatrix.loader import load_matrix, to_real

matrix = load_matrix("rotation.txt")   # list of rows of Complex
real_matrix = to_real(matrix)          # list of rows of float
```

`load_matrix(path)` returns the matrix as a list of rows, each a list of
`Complex`. A line that does not start and end with `|` (an empty line
included), a row of the wrong length, or an entry that `Complex.parse`
rejects raises `MatrixFormatError`, a subclass of `ValueError`; a file that
cannot be opened raises `OSError`.

`count_rows(path)` counts the lines of a matrix file, checking that each is
wrapped in `|`, and `count_columns(path)` counts the entries of its first
line.

`to_real(matrix)` turns a 3×3 matrix of complex entries into one of plain
floats. It raises `ValueError` if the matrix is not 3×3 or if any entry has a
non-zero imaginary part.

## Helpers for scripts

`parse_arguments(argv)` checks that exactly one file path was given and
returns it (with no argument it looks at `sys.argv[1:]`); otherwise it raises
`ValueError`. `handle(exception)` writes the exception's message to standard
error. Together they let a script of your own validate its arguments and
report failures.

## What the package does not do

`cmatrix` only represents complex numbers and loads matrices. It performs no
matrix analysis: there is no transpose, row echelon form, rank, trace,
determinant, inverse or rotation analysis, and it installs no command-line
program.

## Running the tests

Install the `test` extra and run pytest from the project root.