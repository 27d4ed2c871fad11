import pytest

from numlab.matrix import format_matrix, main, make_matrix


def test_make_matrix_shape():
    matrix = make_matrix(3, 5)
    assert len(matrix) == 3
    assert all(len(row) == 5 for row in matrix)


def test_make_matrix_markers():
    matrix = make_matrix(3, 5)
    assert matrix[1][1] == 999
    assert matrix[2][2] == 999


def test_make_matrix_values_follow_pattern():
    matrix = make_matrix(3, 5)
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if (i, j) in ((1, 1), (2, 2)):
                continue
            assert value == pytest.approx(i + j / 10.0)


def test_make_matrix_small_shape_skips_out_of_range_markers():
    matrix = make_matrix(2, 2)
    assert matrix[1][1] == 999
    assert matrix[0][0] == 0.0


@pytest.mark.parametrize("rows,cols", [(0, 5), (3, 0), (-1, 2)])
def test_make_matrix_rejects_bad_shape(rows, cols):
    with pytest.raises(ValueError):
        make_matrix(rows, cols)


def test_format_matrix_header_and_rows():
    text = format_matrix(make_matrix(3, 5))
    lines = text.splitlines()
    assert lines[0] == "The 3x5 2D dynamic matrix"
    assert len(lines) == 4
    assert lines[1] == " 0.0\t 0.1\t 0.2\t 0.3\t 0.4\t"
    assert "999.0\t" in lines[2]


def test_format_matrix_fields_round_trip():
    matrix = make_matrix(4, 3)
    rows = format_matrix(matrix).splitlines()[1:]
    parsed = [[float(f) for f in line.split("\t") if f.strip()] for line in rows]
    assert parsed == [[round(v, 1) for v in row] for row in matrix]


def test_main_prints_matrix(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Simple alloc: rows and columns: 3, 5\n")
    assert "The 3x5 2D dynamic matrix" in out


def test_main_timing_mode(capsys):
    assert main(["4", "6", "--time", "10"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Simple alloc: rows and columns: 4, 6\n"
    assert "Elapsed CPU Time Time = '" in captured.err
    assert "Elapsed CPU Time per Iteration (Time, 10) = '" in captured.err


def test_main_rejects_bad_shape():
    with pytest.raises(SystemExit):
        main(["0", "5"])