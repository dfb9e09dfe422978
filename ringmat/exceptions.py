"""Faults raised by matrix factories and arithmetic.

Every fault carries the structured data that caused it, so callers can inspect
the offending dimension or sizes instead of parsing the message.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from ringmat.structures.base import Matrix
    from ringmat.structures.indexes import Indexes

V = TypeVar("V")


class MatrixError(Exception):
    """Base class for all faults raised by ``ringmat``."""


class Cause(Enum):
    """Which dimension of a matrix was invalid."""

    ROW = "row"
    COLUMN = "column"


class InvalidLengthError(MatrixError, ValueError):
    """A row or column count that is not strictly positive.

    Attributes:
        cause: The dimension which was invalid.
        length: The offending value.
    """

    def __init__(self, cause: Cause, length: int) -> None:
        """Store the invalid dimension and its value.

        Args:
            cause: The dimension which was invalid.
            length: The offending value.
        """
        super().__init__(f"{cause.value} length must be positive. Got {length}.")
        self.cause = cause
        self.length = length


class InconsistentSizeError(MatrixError, ValueError):
    """Two matrix operands with different sizes.

    Attributes:
        this_size: Size of the matrix the operation was called on.
        other_size: Size of the other operand.
    """

    def __init__(self, this_size: Indexes, other_size: Indexes) -> None:
        """Store both sizes.

        Args:
            this_size: Size of the matrix the operation was called on.
            other_size: Size of the other operand.
        """
        super().__init__(f"Matrix sizes don't match: {this_size} vs. {other_size}.")
        self.this_size = this_size
        self.other_size = other_size


class NonSquareError(MatrixError, ValueError):
    """A matrix that must be square is not.

    Attributes:
        size: The non-diagonal size of the matrix.
    """

    def __init__(self, size: Indexes) -> None:
        """Store the size.

        Args:
            size: The non-diagonal size of the matrix.
        """
        super().__init__(f"Matrix must be square. Got size {size}.")
        self.size = size


class OutOfRangeError(MatrixError, IndexError):
    """A look-up outside the rectangle covered by a matrix.

    Attributes:
        indexes: The requested position.
        size: The size of the matrix.
    """

    def __init__(self, indexes: Indexes, size: Indexes) -> None:
        """Store the requested position and the matrix size.

        Args:
            indexes: The requested position.
            size: The size of the matrix.
        """
        super().__init__(f"{indexes} lies outside a matrix of size {size}.")
        self.indexes = indexes
        self.size = size


def require_not_none(value: V, name: str) -> V:
    """Make sure a required argument was supplied.

    Args:
        value: The argument.
        name: Name of the argument to be printed in the error message.

    Returns:
        The argument.

    Raises:
        TypeError: If the argument is ``None``.
    """
    if value is None:
        raise TypeError(f"{name} must not be None.")
    return value


def require_non_empty(cause: Cause, length: int) -> int:
    """Make sure a row or column count is positive.

    Args:
        cause: The dimension that is checked.
        length: The row or column count.

    Returns:
        The length.

    Raises:
        InvalidLengthError: If ``length`` is not positive.
    """
    require_not_none(cause, "cause")
    if length <= 0:
        raise InvalidLengthError(cause, length)
    return length


def require_matching_size(this: Matrix[Any], other: Matrix[Any]) -> Indexes:
    """Make sure two matrices have the same size.

    Args:
        this: First matrix.
        other: Second matrix.

    Returns:
        The common size.

    Raises:
        InconsistentSizeError: If the sizes differ.
    """
    require_not_none(this, "this")
    require_not_none(other, "other")
    if this.size() != other.size():
        raise InconsistentSizeError(this.size(), other.size())
    return this.size()


def require_diagonal(size: Indexes) -> Indexes:
    """Make sure a size describes a square matrix.

    Args:
        size: The size to check.

    Returns:
        The size.

    Raises:
        NonSquareError: If ``size`` is not on the diagonal.
    """
    require_not_none(size, "size")
    if not size.are_diagonal():
        raise NonSquareError(size)
    return size
