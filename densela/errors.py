"""
Exception hierarchy for densela.

All exceptions inherit from DenseLAError so callers can catch any
library-specific error. Each concrete class also inherits the matching
builtin (ValueError, IndexError, RuntimeError) so generic handlers keep
working.

Every error raised here is a programming error: the library raises it at
the point of failure and never retries or swallows it.
"""

from numbers import Integral


class DenseLAError(Exception):
    """Base exception for all densela errors."""
    pass


class DimensionError(DenseLAError, ValueError):
    """
    Vector or matrix dimensions are inconsistent.

    Attributes:
        expected: The dimension the operation required, if known
        actual: The dimension that was supplied, if known
    """

    def __init__(self, message: str, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(DenseLAError, IndexError):
    """
    An element index lies outside ``0 <= index < bound``.

    Attributes:
        index: The offending index
        bound: The exclusive upper bound for that axis
    """

    def __init__(self, message: str, index: int | None = None,
                 bound: int | None = None):
        super().__init__(message)
        self.index = index
        self.bound = bound


class PivotError(DenseLAError, RuntimeError):
    """
    Pivot search found no non-zero candidate where one must exist.

    Signals a corrupted matrix or an algorithm bug, never a condition
    to recover from.
    """
    pass


def check_index(index, bound: int, axis: str = "index") -> int:
    """Validate ``0 <= index < bound`` and return the index."""
    if not isinstance(index, Integral) or isinstance(index, bool):
        raise TypeError(f"{axis} must be an int, got {type(index).__name__}")
    index = int(index)
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{axis} {index} out of range [0, {bound})", index=index, bound=bound
        )
    return index


def check_span(start: int, length: int, bound: int, axis: str = "index") -> None:
    """Validate that ``[start, start + length)`` fits inside ``[0, bound)``."""
    if length < 0:
        raise DimensionError(
            f"{axis} span length must be non-negative, got {length}", actual=length
        )
    if start < 0 or start + length > bound:
        raise IndexOutOfRangeError(
            f"{axis} span [{start}, {start + length}) out of range [0, {bound})",
            index=start,
            bound=bound,
        )
