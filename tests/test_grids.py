import pytest

from contestsolver.grids import matrix_moves, snake_pattern


def _matrix_with_one_at(row, column):
    matrix = [[0] * 5 for _ in range(5)]
    matrix[row][column] = 1
    return matrix


def test_matrix_moves_centre_needs_none():
    assert not matrix_moves(_matrix_with_one_at(2, 2))


def test_matrix_moves_example():
    assert matrix_moves(_matrix_with_one_at(1, 4)) == 3


def test_matrix_moves_corners_agree():
    corners = {matrix_moves(_matrix_with_one_at(r, c)) for r in (0, 4) for c in (0, 4)}
    assert corners == {4}


def test_matrix_moves_symmetric():
    assert matrix_moves(_matrix_with_one_at(0, 3)) == matrix_moves(
        _matrix_with_one_at(3, 0)
    )


def test_matrix_moves_without_one_raises():
    with pytest.raises(ValueError):
        matrix_moves([[0] * 5 for _ in range(5)])


def test_snake_pattern_small():
    assert snake_pattern(3, 3) == ["###", "..#", "###"]


@pytest.mark.parametrize("n, m", [(3, 4), (5, 3), (9, 9)])
def test_snake_pattern_shape(n, m):
    rows = snake_pattern(n, m)
    assert len(rows) == n
    assert all(len(row) == m for row in rows)
    assert set("".join(rows)) <= {"#", "."}


def test_snake_pattern_odd_rows_full():
    rows = snake_pattern(7, 5)
    assert all(row == "#" * 5 for row in rows[::2])


def test_snake_pattern_turns_alternate():
    rows = snake_pattern(9, 6)
    turns = rows[1::2]
    for first, second in zip(turns, turns[1:]):
        assert second == first[::-1]
    assert turns[0].endswith("#")
    assert turns[0].count("#") == 1