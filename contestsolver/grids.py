"""Contest problems about small character and number grids."""

from __future__ import annotations

from collections.abc import Sequence

_CENTRE = 2


def matrix_moves(matrix: Sequence[Sequence[int]]) -> int:
    """Moves of adjacent rows or columns needed to bring the single 1 to the centre."""
    for row_index, row in enumerate(matrix):
        for column_index, value in enumerate(row):
            if value == 1:
                return abs(row_index - _CENTRE) + abs(column_index - _CENTRE)
    raise ValueError("matrix holds no 1")


def snake_pattern(n: int, m: int) -> list[str]:
    """Rows of an n by m snake drawn with '#' on a '.' background."""
    rows = []
    turn_right = True
    for row_number in range(1, n + 1):
        if row_number % 2:
            rows.append("#" * m)
        else:
            if turn_right:
                rows.append("." * (m - 1) + "#")
            else:
                rows.append("#" + "." * (m - 1))
            turn_right = not turn_right
    return rows