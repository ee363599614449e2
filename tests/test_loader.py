import pytest

from cmatrix.complex_num import Complex
from cmatrix.loader import (
    MatrixFormatError,
    count_columns,
    count_rows,
    handle,
    load_matrix,
    parse_arguments,
    to_real,
)

COLUMNS_MESSAGE = "All rows should have the same number of columns!"


@pytest.fixture
def write(tmp_path):
    def _write(content, name="matrix.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


def test_parse_arguments_single_path():
    assert parse_arguments(["data.txt"]) == "data.txt"


@pytest.mark.parametrize("argv", [[], ["a", "b"]])
def test_parse_arguments_wrong_count(argv):
    with pytest.raises(ValueError, match="exactly one argument"):
        parse_arguments(argv)


def test_counts(write):
    path = write("|1  2i 3|\n|4 5 6|\n")
    assert count_rows(path) == 2
    assert count_columns(path) == 3


def test_counts_of_empty_file(write):
    path = write("")
    assert count_rows(path) == 0
    assert count_columns(path) == 0
    assert load_matrix(path) == []


@pytest.mark.parametrize("content", ["1 2|\n", "|1 2\n", "|1|\n\n|2|\n"])
def test_row_delimiters_required(write, content):
    with pytest.raises(MatrixFormatError, match="must starts and ends with"):
        count_rows(write(content))


def test_load_matrix_values(write):
    path = write("|1 2i|\n|3+4i  -5-i|")
    assert load_matrix(path) == [
        [Complex(1, 0), Complex(0, 2)],
        [Complex(3, 4), Complex(-5, -1)],
    ]


def test_load_matrix_shape_matches_counts(write):
    path = write("|1 2 3|\n|4 5 6|\n|7 8 9|\n|i -i 0|\n")
    matrix = load_matrix(path)
    assert len(matrix) == count_rows(path)
    assert all(len(row) == count_columns(path) for row in matrix)


@pytest.mark.parametrize("content", ["|1 2|\n|3|\n", "|1|\n|2 3|\n"])
def test_ragged_rows_rejected(write, content):
    with pytest.raises(MatrixFormatError, match=COLUMNS_MESSAGE):
        load_matrix(write(content))


def test_bad_element_rejected(write):
    with pytest.raises(MatrixFormatError, match="Failed to parse matrix element!"):
        load_matrix(write("|1 x|\n"))


def test_extra_column_reported_before_bad_element(write):
    with pytest.raises(MatrixFormatError, match=COLUMNS_MESSAGE):
        load_matrix(write("|1|\n|2 x|\n"))


def test_missing_file(tmp_path):
    missing = tmp_path / "absent.txt"
    with pytest.raises(OSError, match="Can't open file"):
        load_matrix(missing)


def test_to_real_converts():
    matrix = [[Complex(float(3 * r + c), 0.0) for c in range(3)] for r in range(3)]
    result = to_real(matrix)
    assert result == [[value.re for value in row] for row in matrix]
    assert all(isinstance(value, float) for row in result for value in row)


@pytest.mark.parametrize(
    "matrix",
    [
        [[Complex(1, 0)] * 3] * 2,
        [[Complex(1, 0)] * 2] * 3,
        [[Complex(1, 0)] * 3, [Complex(1, 0)] * 3, [Complex(1, 0)] * 4],
    ],
)
def test_to_real_requires_3x3(matrix):
    with pytest.raises(ValueError, match="must be 3x3"):
        to_real(matrix)


def test_to_real_rejects_imaginary_parts():
    matrix = [[Complex(1, 0)] * 3, [Complex(1, 0), Complex(0, 1), Complex(1, 0)], [Complex(1, 0)] * 3]
    with pytest.raises(ValueError, match="only real numbers"):
        to_real(matrix)


def test_handle_writes_message_to_stderr(capsys):
    handle(RuntimeError("something failed"))
    captured = capsys.readouterr()
    assert captured.err == "something failed\n"
    assert captured.out == ""