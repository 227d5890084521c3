import logging as _logging

from .echelon import (
    find_pivot_column,
    find_pivot_row,
    is_echelon_form,
    is_reduced_echelon_form,
    reduce_echelon_form,
    to_echelon_form,
    to_reduced_echelon_form,
)
from .errors import DenseLAError, DimensionError, IndexOutOfRangeError, PivotError
from .matrix import DenseMatrix, Matrix, SubMatrix, mat
from .ops import add, copy, dot_product, scale
from .trace import Tracer
from .vector import ColumnView, DenseVector, RowView, Vector, vec

__all__ = [
    "Vector",
    "DenseVector",
    "RowView",
    "ColumnView",
    "vec",
    "Matrix",
    "DenseMatrix",
    "SubMatrix",
    "mat",
    "copy",
    "add",
    "scale",
    "dot_product",
    "find_pivot_column",
    "find_pivot_row",
    "to_echelon_form",
    "reduce_echelon_form",
    "to_reduced_echelon_form",
    "is_echelon_form",
    "is_reduced_echelon_form",
    "Tracer",
    "DenseLAError",
    "DimensionError",
    "IndexOutOfRangeError",
    "PivotError",
]

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
