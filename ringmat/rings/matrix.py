"""Square matrices of a fixed size form a ring."""

from __future__ import annotations

from typing import TypeVar

from ringmat.exceptions import Cause, require_non_empty, require_not_none
from ringmat.rings.base import Ring
from ringmat.structures.base import Matrix
from ringmat.structures.dense import MatrixMap
from ringmat.structures.indexes import Indexes

T = TypeVar("T")
S = TypeVar("S")


class MatrixRing(Ring[Matrix[T]]):
    """Ring of `size x size` matrices over an element ring.

    Sum and product delegate to `Matrix.plus` and `Matrix.times`. Because the
    result is a ring itself, it can serve as the element ring of another matrix
    or polynomial.

    Use `MatrixRing.instance` to construct.
    """

    def __init__(self, ring: Ring[T], size: int) -> None:
        """Store the element ring and the matrix dimension.

        Args:
            ring: Ring of the matrix entries.
            size: Number of rows and columns.
        """
        self._ring = ring
        self._size = size

    @classmethod
    def instance(cls, ring: Ring[S], size: int) -> MatrixRing[S]:
        """Create the ring of square matrices over `ring`.

        Args:
            ring: Ring of the matrix entries.
            size: Number of rows and columns.

        Returns:
            The matrix ring.
        """
        require_not_none(ring, "ring")
        require_non_empty(Cause.ROW, size)
        return cls(ring, size)

    def zero(self) -> Matrix[T]:
        return MatrixMap.constant(self._size, self._ring.zero())

    def identity(self) -> Matrix[T]:
        return MatrixMap.identity(self._size, self._ring.zero(), self._ring.identity())

    def sum(self, x: Matrix[T], y: Matrix[T]) -> Matrix[T]:
        self._check_operands(x, y)
        return x.plus(y, self._ring)

    def product(self, x: Matrix[T], y: Matrix[T]) -> Matrix[T]:
        self._check_operands(x, y)
        return x.times(y, self._ring)

    def is_zero(self, value: Matrix[T]) -> bool:
        """Check whether all entries of a matrix are zero in the element ring.

        Args:
            value: The matrix to check.

        Returns:
            Whether every entry of `value` is zero.
        """
        return all(
            self._ring.is_zero(value.value(idx))
            for idx in Indexes.stream_size(value.size())
        )
