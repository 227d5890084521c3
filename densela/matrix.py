"""Matrix abstraction, dense row-major storage and the sub-matrix view.

``Matrix`` declares the raw accessors (``get``/``set``, the shape and the
three view constructors) and derives everything else from them: the three
elementary row operations, leading-entry detection, row normalization and
formatting. Any storage variant inherits those for free.

``DenseMatrix`` is the only variant that allocates. ``SubMatrix`` translates
coordinates onto its backing matrix and, when asked for a view of itself,
asks the backing matrix to build that view in its own coordinates. Nested
sub-views therefore stay one layer deep over the dense storage.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from .errors import DimensionError, check_index, check_span
from .vector import ColumnView, RowView, Vector


class Matrix(ABC):
    """Rectangular array of doubles addressed by (row, column)."""

    __hash__ = None  # mutable

    @property
    @abstractmethod
    def nrows(self) -> int:
        ...

    @property
    @abstractmethod
    def ncols(self) -> int:
        ...

    @abstractmethod
    def get(self, row: int, col: int) -> float:
        ...

    @abstractmethod
    def set(self, row: int, col: int, value: float) -> None:
        ...

    @abstractmethod
    def get_sub_row(self, row: int, first_col: int, ncols: int) -> Vector:
        """View of ``ncols`` elements of ``row`` starting at ``first_col``."""

    @abstractmethod
    def get_sub_col(self, col: int, first_row: int, nrows: int) -> Vector:
        """View of ``nrows`` elements of ``col`` starting at ``first_row``."""

    @abstractmethod
    def get_sub_matrix(self, first_row: int, nrows: int,
                       first_col: int, ncols: int) -> "Matrix":
        """View of the ``nrows`` x ``ncols`` block at (first_row, first_col)."""

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nrows, self.ncols

    def is_square(self) -> bool:
        return self.nrows == self.ncols

    def get_row(self, row: int) -> Vector:
        return self.get_sub_row(row, 0, self.ncols)

    def get_col(self, col: int) -> Vector:
        return self.get_sub_col(col, 0, self.nrows)

    def set_row(self, row: int, vector: Vector) -> None:
        if vector.dimension != self.ncols:
            raise DimensionError(
                f"Row vector has dimension {vector.dimension}, expected {self.ncols}",
                expected=self.ncols,
                actual=vector.dimension,
            )
        self.set_sub_row(row, 0, vector)

    def set_col(self, col: int, vector: Vector) -> None:
        if vector.dimension > self.nrows:
            raise DimensionError(
                f"Column vector has dimension {vector.dimension}, "
                f"at most {self.nrows} allowed",
                expected=self.nrows,
                actual=vector.dimension,
            )
        self.set_sub_col(col, 0, vector)

    def set_sub_row(self, row: int, first_col: int, vector: Vector) -> None:
        """Copy ``vector`` into ``row`` starting at column ``first_col``."""
        n = vector.dimension
        check_index(row, self.nrows, "row")
        if first_col < 0 or first_col + n > self.ncols:
            raise DimensionError(
                f"Vector of dimension {n} does not fit in row at column "
                f"{first_col} of a {self.nrows}x{self.ncols} matrix",
                expected=self.ncols - first_col,
                actual=n,
            )
        values = [vector.get(i) for i in range(n)]
        for i, value in enumerate(values):
            self.set(row, first_col + i, value)

    def set_sub_col(self, col: int, first_row: int, vector: Vector) -> None:
        """Copy ``vector`` into ``col`` starting at row ``first_row``."""
        n = vector.dimension
        check_index(col, self.ncols, "column")
        if first_row < 0 or first_row + n > self.nrows:
            raise DimensionError(
                f"Vector of dimension {n} does not fit in column at row "
                f"{first_row} of a {self.nrows}x{self.ncols} matrix",
                expected=self.nrows - first_row,
                actual=n,
            )
        values = [vector.get(i) for i in range(n)]
        for i, value in enumerate(values):
            self.set(first_row + i, col, value)

    # --- elementary row operations ---

    def swap_rows(self, row1: int, row2: int) -> "Matrix":
        """Exchange two rows in place. Swapping a row with itself is a no-op."""
        check_index(row1, self.nrows, "row")
        check_index(row2, self.nrows, "row")
        if row1 == row2:
            return self
        for c in range(self.ncols):
            tmp = self.get(row1, c)
            self.set(row1, c, self.get(row2, c))
            self.set(row2, c, tmp)
        return self

    def scale_row(self, row: int, factor: float) -> "Matrix":
        """Multiply every element of ``row`` by ``factor`` in place."""
        check_index(row, self.nrows, "row")
        for c in range(self.ncols):
            self.set(row, c, factor * self.get(row, c))
        return self

    def add_rows_with_mult(self, source_row: int, multiplier: float,
                           target_row: int) -> "Matrix":
        """
        In-place: ``row[target] <- row[target] + multiplier * row[source]``.

        Only the target row changes. ``source_row == target_row`` is
        allowed and scales the row by ``1 + multiplier``.
        """
        check_index(source_row, self.nrows, "row")
        check_index(target_row, self.nrows, "row")
        for c in range(self.ncols):
            target = self.get(target_row, c)
            delta = self.get(source_row, c) * multiplier
            self.set(target_row, c, target + delta)
        return self

    # --- leading entries ---

    def get_leading_entry_col(self, row: int) -> int:
        """Column of the first exactly non-zero value in ``row``, or -1."""
        check_index(row, self.nrows, "row")
        for c in range(self.ncols):
            if self.get(row, c) != 0.0:
                return c
        return -1

    def get_leading_entry(self, row: int) -> float:
        """
        Leading entry of ``row``; 0.0 for an all-zero row.

        Use ``get_leading_entry_col`` to tell the two cases apart.
        """
        col = self.get_leading_entry_col(row)
        if col == -1:
            return 0.0
        return self.get(row, col)

    def normalize(self, row: int | None = None) -> "Matrix":
        """
        Scale a row so its leading entry is exactly 1.0.

        With no ``row`` argument every row is normalized. All-zero rows
        are left untouched. The leading position is assigned 1.0 rather
        than multiplied, and columns to its left are zero already.
        """
        if row is None:
            for r in range(self.nrows):
                self.normalize(r)
            return self

        lead_col = self.get_leading_entry_col(row)
        if lead_col == -1:
            return self
        factor = 1.0 / self.get(row, lead_col)
        self.set(row, lead_col, 1.0)
        for c in range(lead_col + 1, self.ncols):
            self.set(row, c, factor * self.get(row, c))
        return self

    # --- conversions and formatting ---

    def __getitem__(self, key: Tuple[int, int]) -> float:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        row, col = key
        self.set(row, col, value)

    def to_rows(self) -> List[List[float]]:
        return [[self.get(r, c) for c in range(self.ncols)]
                for r in range(self.nrows)]

    def to_numpy(self) -> np.ndarray:
        return np.array(self.to_rows(), dtype=np.float64).reshape(self.shape)

    def to_sympy(self):
        import sympy as sp
        return sp.Matrix(self.to_rows())

    def pprint(self):
        from sympy import pprint
        pprint(self.to_sympy())

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            self.get(r, c) == other.get(r, c)
            for r in range(self.nrows)
            for c in range(self.ncols)
        )

    def __str__(self) -> str:
        lines = []
        for r in range(self.nrows):
            cells = ", ".join("%6.2f" % self.get(r, c) for c in range(self.ncols))
            lines.append("|" + cells + "|\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_rows()!r})"


class DenseMatrix(Matrix):
    """Matrix owning a row-major float64 buffer; index(r, c) = r * ncols + c."""

    def __init__(self, nrows: int, ncols: int):
        if nrows < 0 or ncols < 0:
            raise DimensionError(
                f"Matrix shape must be non-negative, got {nrows}x{ncols}",
                actual=(nrows, ncols),
            )
        self._nrows = nrows
        self._ncols = ncols
        self._values = np.zeros(nrows * ncols, dtype=np.float64)

    @classmethod
    def from_rows(cls, rows: Sequence[Union[Sequence[float], Vector]]) -> "DenseMatrix":
        rows = [list(row) for row in rows]
        if not rows:
            return cls(0, 0)
        ncols = len(rows[0])
        for row in rows:
            if len(row) != ncols:
                raise DimensionError(
                    "All rows must have the same length",
                    expected=ncols,
                    actual=len(row),
                )
        m = cls(len(rows), ncols)
        m._values[:] = [float(x) for row in rows for x in row]
        return m

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "DenseMatrix":
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise DimensionError(
                f"Expected a 2-D array, got {array.ndim} dimension(s)",
                expected=2,
                actual=array.ndim,
            )
        m = cls(*array.shape)
        m._values[:] = array.ravel()
        return m

    @classmethod
    def identity(cls, n: int) -> "DenseMatrix":
        m = cls(n, n)
        for i in range(n):
            m._values[i * n + i] = 1.0
        return m

    @property
    def nrows(self) -> int:
        return self._nrows

    @property
    def ncols(self) -> int:
        return self._ncols

    def _pos(self, row: int, col: int) -> int:
        row = check_index(row, self._nrows, "row")
        col = check_index(col, self._ncols, "column")
        return row * self._ncols + col

    def get(self, row: int, col: int) -> float:
        return float(self._values[self._pos(row, col)])

    def set(self, row: int, col: int, value: float) -> None:
        self._values[self._pos(row, col)] = value

    def get_sub_row(self, row: int, first_col: int, ncols: int) -> Vector:
        return RowView(self, row, first_col, ncols)

    def get_sub_col(self, col: int, first_row: int, nrows: int) -> Vector:
        return ColumnView(self, col, first_row, nrows)

    def get_sub_matrix(self, first_row: int, nrows: int,
                       first_col: int, ncols: int) -> Matrix:
        return SubMatrix(self, first_row, nrows, first_col, ncols)

    def to_numpy(self) -> np.ndarray:
        return self._values.reshape(self.shape).copy()


class SubMatrix(Matrix):
    """
    Rectangular window onto a backing matrix.

    Owns no storage: ``(r, c)`` maps to ``(r + first_row, c + first_col)``
    on the backing matrix, so writes through the window are writes to the
    backing storage. Views requested from a SubMatrix are built by the
    backing matrix in its own coordinates.
    """

    def __init__(self, backing: Matrix, first_row: int, nrows: int,
                 first_col: int, ncols: int):
        check_span(first_row, nrows, backing.nrows, "row")
        check_span(first_col, ncols, backing.ncols, "column")
        self._backing = backing
        self._first_row = first_row
        self._first_col = first_col
        self._nrows = nrows
        self._ncols = ncols

    @property
    def backing(self) -> Matrix:
        return self._backing

    @property
    def offset(self) -> Tuple[int, int]:
        return self._first_row, self._first_col

    @property
    def nrows(self) -> int:
        return self._nrows

    @property
    def ncols(self) -> int:
        return self._ncols

    def _outer_row(self, row: int) -> int:
        return row + self._first_row

    def _outer_col(self, col: int) -> int:
        return col + self._first_col

    def get(self, row: int, col: int) -> float:
        check_index(row, self._nrows, "row")
        check_index(col, self._ncols, "column")
        return self._backing.get(self._outer_row(row), self._outer_col(col))

    def set(self, row: int, col: int, value: float) -> None:
        check_index(row, self._nrows, "row")
        check_index(col, self._ncols, "column")
        self._backing.set(self._outer_row(row), self._outer_col(col), value)

    def get_sub_row(self, row: int, first_col: int, ncols: int) -> Vector:
        check_index(row, self._nrows, "row")
        check_span(first_col, ncols, self._ncols, "column")
        return self._backing.get_sub_row(
            self._outer_row(row), self._outer_col(first_col), ncols
        )

    def get_sub_col(self, col: int, first_row: int, nrows: int) -> Vector:
        check_index(col, self._ncols, "column")
        check_span(first_row, nrows, self._nrows, "row")
        return self._backing.get_sub_col(
            self._outer_col(col), self._outer_row(first_row), nrows
        )

    def get_sub_matrix(self, first_row: int, nrows: int,
                       first_col: int, ncols: int) -> Matrix:
        check_span(first_row, nrows, self._nrows, "row")
        check_span(first_col, ncols, self._ncols, "column")
        return self._backing.get_sub_matrix(
            self._outer_row(first_row), nrows, self._outer_col(first_col), ncols
        )


def mat(*rows: Iterable[float]) -> DenseMatrix:
    """Build a DenseMatrix from its rows: ``mat(vec(1, 2), [3, 4])``."""
    return DenseMatrix.from_rows(rows)
