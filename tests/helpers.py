import numpy as np

from densela.matrix import Matrix


def check_grid(m: Matrix, first_val: float) -> None:
    """Assert ``m[r][c] == first_val + 10r + c`` everywhere."""
    for r in range(m.nrows):
        for c in range(m.ncols):
            assert m.get(r, c) == first_val + r * 10 + c, (r, c)


def check_progression(v, first_val: float, step: float) -> None:
    """Assert ``v[i] == first_val + i * step`` for every element."""
    for i in range(v.dimension):
        assert v.get(i) == first_val + i * step, i


def rows_except(m: Matrix, excluded: set[int]) -> dict[int, list[float]]:
    return {
        r: [m.get(r, c) for c in range(m.ncols)]
        for r in range(m.nrows)
        if r not in excluded
    }


def assert_matrix_close(actual: Matrix, expected, atol: float = 1e-6) -> None:
    expected = np.asarray(expected, dtype=float)
    assert actual.shape == expected.shape
    assert np.allclose(actual.to_numpy(), expected, atol=atol), (
        f"\n{actual}\n!=\n{expected}"
    )


def verify_echelon_structure(m: Matrix, atol: float = 1e-9) -> bool:
    """
    Check, treating ``|x| <= atol`` as zero:
    - For each non-zero row, the first non-zero column index strictly increases.
    - Once a zero row appears, all later rows are zero.
    """
    last_pivot_col = -1
    zero_row_seen = False
    for r in range(m.nrows):
        pivot_col = -1
        for c in range(m.ncols):
            if abs(m.get(r, c)) > atol:
                pivot_col = c
                break
        if pivot_col == -1:
            zero_row_seen = True
            continue
        if zero_row_seen or pivot_col <= last_pivot_col:
            return False
        last_pivot_col = pivot_col
    return True
