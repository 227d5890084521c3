"""Row-echelon utilities for dense real matrices.

This module holds the row-reduction routines of the package. They work on
any ``Matrix`` (dense storage or a view of it) and mutate it in place using
only the elementary row operations the abstraction provides:

* ``to_echelon_form`` performs Gaussian elimination with partial pivoting.
  Each step narrows the working region to a sub-matrix view, so the row
  operations of later steps land in the caller's matrix through the view.
* ``reduce_echelon_form`` back-substitutes bottom-up, turning an echelon
  form into the reduced echelon form.
* ``to_reduced_echelon_form`` chains the two.

Zero tests are exact comparisons with ``0.0``. A value such as ``1e-16``
left behind by rounding counts as non-zero.
"""

from typing import Optional

from .errors import PivotError
from .matrix import Matrix
from .trace import NULL_TRACER, Tracer


def find_pivot_column(mat: Matrix) -> int:
    """Return the leftmost column holding a non-zero value, or -1.

    Columns are scanned left to right and each column top to bottom.
    """
    nrows, ncols = mat.shape
    for c in range(ncols):
        for r in range(nrows):
            if mat.get(r, c) != 0.0:
                return c
    return -1


def find_pivot_row(mat: Matrix) -> int:
    """Return the row with the largest absolute value in column 0.

    Ties go to the lowest row index.

    Raises:
        PivotError: If every entry of column 0 is zero.
    """
    max_value = abs(mat.get(0, 0))
    max_row = 0
    for r in range(1, mat.nrows):
        value = abs(mat.get(r, 0))
        if value > max_value:
            max_value = value
            max_row = r
    if max_value == 0.0:
        raise PivotError("No non-zero pivot value in column 0")
    return max_row


def to_echelon_form(mat: Matrix, *, tracer: Optional[Tracer] = None) -> Matrix:
    """Drive ``mat`` to row-echelon form in place.

    Each elimination step works on a region ``M`` (initially ``mat``):

    1. Stop when ``M`` has at most one row or is entirely zero.
    2. Narrow ``M`` to start at its pivot column, dropping leading zero
       columns.
    3. Swap the row with the largest ``|M[r][0]|`` to the top.
    4. Clear column 0 below the pivot with ``add_rows_with_mult``.
    5. Continue on ``M[1:, 1:]``.

    Zero rows end up at the bottom as a consequence of the elimination,
    never through an explicit sort.

    Args:
        mat: Matrix to reduce. Views are reduced through to their backing
            storage.
        tracer: Optional diagnostics sink.

    Returns:
        ``mat`` itself.
    """
    tracer = tracer or NULL_TRACER
    region = mat
    while True:
        tracer.trace("Matrix at entry\n%s", region)
        nrows, ncols = region.shape
        if nrows <= 1:
            break

        pivot_col = find_pivot_column(region)
        if pivot_col == -1:
            break  # nothing left but zeros
        if pivot_col > 0:
            region = region.get_sub_matrix(0, nrows, pivot_col, ncols - pivot_col)
            ncols = region.ncols

        region.swap_rows(0, find_pivot_row(region))

        pivot_value = region.get(0, 0)
        for r in range(1, nrows):
            leading = region.get(r, 0)
            if leading == 0.0:
                continue
            region.add_rows_with_mult(0, -1 * (leading / pivot_value), r)

        tracer.trace("Matrix after zero reduction\n%s", region)
        region = region.get_sub_matrix(1, nrows - 1, 1, ncols - 1)
    return mat


def reduce_echelon_form(mat: Matrix, *, tracer: Optional[Tracer] = None) -> Matrix:
    """Turn an echelon-form matrix into reduced echelon form in place.

    Rows are processed from the bottom up. Each non-zero row is normalized
    so its leading entry is 1.0, then its leading column is cleared in
    every row above it. Pivot columns cleared by lower rows are not
    disturbed, because a higher pivot row is zero in every column to the
    left of its own leading entry.

    The input must already be in echelon form; see ``to_echelon_form``.
    """
    tracer = tracer or NULL_TRACER
    for r in range(mat.nrows - 1, -1, -1):
        lead_col = mat.get_leading_entry_col(r)
        if lead_col == -1:
            continue  # zero row
        mat.normalize(r)
        for above in range(r):
            value = mat.get(above, lead_col)
            if value == 0.0:
                continue
            mat.add_rows_with_mult(r, -value, above)
    tracer.trace("Matrix after reduction\n%s", mat)
    return mat


def to_reduced_echelon_form(mat: Matrix, *, tracer: Optional[Tracer] = None) -> Matrix:
    """Row-reduce ``mat`` in place to reduced echelon form."""
    to_echelon_form(mat, tracer=tracer)
    return reduce_echelon_form(mat, tracer=tracer)


def is_echelon_form(mat: Matrix) -> bool:
    """
    Check:
    - For each non-zero row, the leading column strictly increases.
    - Once a zero row appears, all later rows are zero.
    """
    last_lead = -1
    zero_row_seen = False
    for r in range(mat.nrows):
        lead = mat.get_leading_entry_col(r)
        if lead == -1:
            zero_row_seen = True
            continue
        if zero_row_seen or lead <= last_lead:
            return False
        last_lead = lead
    return True


def is_reduced_echelon_form(mat: Matrix) -> bool:
    """Echelon form with every leading entry 1.0 and alone in its column."""
    if not is_echelon_form(mat):
        return False
    for r in range(mat.nrows):
        lead = mat.get_leading_entry_col(r)
        if lead == -1:
            continue
        if mat.get(r, lead) != 1.0:
            return False
        for other in range(mat.nrows):
            if other != r and mat.get(other, lead) != 0.0:
                return False
    return True
