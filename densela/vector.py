"""Vector abstraction, dense vector storage and matrix-backed vector views.

``Vector`` fixes the capability contract (``dimension``, ``get``, ``set``)
and derives comparison, iteration and formatting from it. Three variants
implement the contract:

* ``DenseVector`` owns a contiguous float64 buffer.
* ``RowView`` and ``ColumnView`` own nothing; they translate an index into
  a (row, column) pair on a backing matrix, so every ``set`` lands in the
  matrix storage and is immediately visible through every other alias.
"""

import math
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List

import numpy as np

from .errors import DimensionError, check_index, check_span


def _compare_doubles(a: float, b: float) -> int:
    """Total order on floats: -0.0 < 0.0 and NaN above everything."""
    if a < b:
        return -1
    if a > b:
        return 1
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)
    # a == b here; only the sign of zero can still differ.
    sa = math.copysign(1.0, a)
    sb = math.copysign(1.0, b)
    if sa < sb:
        return -1
    if sa > sb:
        return 1
    return 0


class Vector(ABC):
    """Fixed-length sequence of doubles with structural equality."""

    __hash__ = None  # mutable

    @property
    @abstractmethod
    def dimension(self) -> int:
        ...

    @abstractmethod
    def get(self, index: int) -> float:
        ...

    @abstractmethod
    def set(self, index: int, value: float) -> None:
        ...

    def compare(self, other: "Vector") -> int:
        """
        Lexicographic comparison up to the shorter length.

        Elements are ordered totally: ``-0.0`` sorts before ``0.0`` and NaN
        sorts after every other value while equal to itself. When every
        compared element is equal, the shorter vector is the lesser one.
        Returns -1, 0 or 1.
        """
        len1 = self.dimension
        len2 = other.dimension
        for i in range(min(len1, len2)):
            cmp = _compare_doubles(self.get(i), other.get(i))
            if cmp != 0:
                return cmp
        if len1 < len2:
            return -1
        if len1 > len2:
            return 1
        return 0

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.compare(other) >= 0

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        for i in range(self.dimension):
            yield self.get(i)

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def to_list(self) -> List[float]:
        return [self.get(i) for i in range(self.dimension)]

    def to_numpy(self) -> np.ndarray:
        return np.array(self.to_list(), dtype=np.float64)

    def __str__(self) -> str:
        return "<" + ", ".join("%f" % v for v in self) + ">"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


class DenseVector(Vector):
    """Vector that owns its values in a contiguous float64 buffer."""

    def __init__(self, dimension: int):
        if dimension < 0:
            raise DimensionError(
                f"Vector dimension must be non-negative, got {dimension}",
                actual=dimension,
            )
        self._values = np.zeros(dimension, dtype=np.float64)

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "DenseVector":
        data = [float(v) for v in values]
        vec = cls(len(data))
        vec._values[:] = data
        return vec

    @property
    def dimension(self) -> int:
        return self._values.shape[0]

    def get(self, index: int) -> float:
        return float(self._values[check_index(index, self._values.shape[0])])

    def set(self, index: int, value: float) -> None:
        self._values[check_index(index, self._values.shape[0])] = value


class RowView(Vector):
    """
    Window onto ``length`` consecutive elements of one matrix row.

    Holds only the backing matrix reference and the offsets; element
    ``i`` is ``matrix[row, first_col + i]``.
    """

    def __init__(self, matrix, row: int, first_col: int, length: int):
        check_index(row, matrix.nrows, "row")
        check_span(first_col, length, matrix.ncols, "column")
        self._matrix = matrix
        self._row = row
        self._first_col = first_col
        self._length = length

    @property
    def dimension(self) -> int:
        return self._length

    def get(self, index: int) -> float:
        check_index(index, self._length)
        return self._matrix.get(self._row, self._first_col + index)

    def set(self, index: int, value: float) -> None:
        check_index(index, self._length)
        self._matrix.set(self._row, self._first_col + index, value)


class ColumnView(Vector):
    """
    Window onto ``length`` consecutive elements of one matrix column.

    Element ``i`` is ``matrix[first_row + i, col]``.
    """

    def __init__(self, matrix, col: int, first_row: int, length: int):
        check_index(col, matrix.ncols, "column")
        check_span(first_row, length, matrix.nrows, "row")
        self._matrix = matrix
        self._col = col
        self._first_row = first_row
        self._length = length

    @property
    def dimension(self) -> int:
        return self._length

    def get(self, index: int) -> float:
        check_index(index, self._length)
        return self._matrix.get(self._first_row + index, self._col)

    def set(self, index: int, value: float) -> None:
        check_index(index, self._length)
        self._matrix.set(self._first_row + index, self._col, value)


def vec(*values: float) -> DenseVector:
    """Build a DenseVector from its elements: ``vec(1, 2, 3)``."""
    return DenseVector.from_values(values)
