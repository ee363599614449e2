"""Reading complex matrices from text files and related helpers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike

from .complex_num import Complex

StrPath = str | PathLike


class MatrixFormatError(ValueError):
    """The matrix file is not laid out as expected."""


def parse_arguments(argv: Sequence[str] | None = None) -> str:
    """Return the single file path given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        raise ValueError(
            "Invalid arguments: the program requires exactly one argument "
            "specifying the file path."
        )
    return args[0]


def _read_lines(path: StrPath) -> list[str]:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise OSError(f"Can't open file: {path}") from exc
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _row_body(line: str) -> str:
    end = line.rfind("|")
    start = line.find("|") + 1
    return line[start:end] if end >= 0 else line[start:]


def _row_elements(line: str) -> list[str]:
    return [element for element in _row_body(line).split(" ") if element]


def count_rows(path: StrPath) -> int:
    """Count the rows of a matrix file, checking each is wrapped in '|'."""
    lines = _read_lines(path)
    for line in lines:
        if not line or line[0] != "|" or line[-1] != "|":
            raise MatrixFormatError(
                'Invalid format: each row of the matrix must starts and ends with "|"!'
            )
    return len(lines)


def count_columns(path: StrPath) -> int:
    """Count the elements of the first row of a matrix file."""
    lines = _read_lines(path)
    return len(_row_elements(lines[0])) if lines else 0


def load_matrix(path: StrPath) -> list[list[Complex]]:
    """Load a matrix of complex numbers as a list of rows."""
    count_rows(path)
    columns = count_columns(path)
    matrix: list[list[Complex]] = []
    for line in _read_lines(path):
        row: list[Complex] = []
        for element in _row_elements(line):
            if len(row) + 1 > columns:
                raise MatrixFormatError(
                    "All rows should have the same number of columns!"
                )
            try:
                row.append(Complex.parse(element))
            except ValueError as exc:
                raise MatrixFormatError("Failed to parse matrix element!") from exc
        if len(row) < columns:
            raise MatrixFormatError("All rows should have the same number of columns!")
        matrix.append(row)
    return matrix


def to_real(matrix: Sequence[Sequence[Complex]]) -> list[list[float]]:
    """Convert a 3x3 matrix of purely real complex numbers to floats."""
    if len(matrix) != 3 or any(len(row) != 3 for row in matrix):
        raise ValueError("The size of matrix must be 3x3 for the further analysis.")
    result: list[list[float]] = []
    for row in matrix:
        if any(value.im != 0 for value in row):
            raise ValueError(
                "Matrix must contain only real numbers for the further analysis."
            )
        result.append([value.re for value in row])
    return result


def handle(exception: BaseException) -> None:
    """Report an error on standard error."""
    print(exception, file=sys.stderr)