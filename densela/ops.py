"""Free functions over the Vector and Matrix abstractions.

These work only through ``get``/``set``/``dimension`` (or the matrix
shape), so they behave identically on dense storage and on any view.
Output arguments may alias inputs: every element is read before the
same index is written.
"""

from typing import Union

from .errors import DimensionError
from .matrix import DenseMatrix, Matrix
from .vector import DenseVector, Vector


def copy(obj: Union[Vector, Matrix]) -> Union[DenseVector, DenseMatrix]:
    """Deep-copy a vector or matrix into new dense storage."""
    if isinstance(obj, Vector):
        n = obj.dimension
        out = DenseVector(n)
        for i in range(n):
            out.set(i, obj.get(i))
        return out
    if isinstance(obj, Matrix):
        nrows, ncols = obj.shape
        out = DenseMatrix(nrows, ncols)
        for r in range(nrows):
            for c in range(ncols):
                out.set(r, c, obj.get(r, c))
        return out
    raise TypeError(f"Cannot copy object of type {type(obj).__name__}")


def _require_same_dimension(*vectors: Vector) -> int:
    dim = vectors[0].dimension
    for v in vectors[1:]:
        if v.dimension != dim:
            raise DimensionError(
                f"Dimension mismatch: {dim} != {v.dimension}",
                expected=dim,
                actual=v.dimension,
            )
    return dim


def add(v1: Vector, v2: Vector, out: Vector) -> Vector:
    """``out[i] = v1[i] + v2[i]``; returns ``out``."""
    dim = _require_same_dimension(v1, v2, out)
    for i in range(dim):
        out.set(i, v1.get(i) + v2.get(i))
    return out


def scale(factor: float, v: Vector, out: Vector) -> Vector:
    """``out[i] = factor * v[i]``; returns ``out``."""
    dim = _require_same_dimension(v, out)
    for i in range(dim):
        out.set(i, factor * v.get(i))
    return out


def dot_product(v1: Vector, v2: Vector) -> float:
    dim = _require_same_dimension(v1, v2)
    total = 0.0
    for i in range(dim):
        total += v1.get(i) * v2.get(i)
    return total
