"""Dense matrix implemented in the `Matrix` interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Mapping, Sequence, TypeVar

from torch import Tensor

from ringmat.exceptions import (
    Cause,
    require_diagonal,
    require_matching_size,
    require_non_empty,
    require_not_none,
)
from ringmat.rings.base import Ring
from ringmat.rings.utils import ring_sum
from ringmat.structures.base import Matrix
from ringmat.structures.indexes import Indexes
from ringmat.structures.utils import tensor_to_rows

if TYPE_CHECKING:
    from ringmat.structures.sparse import SparseMatrix

T = TypeVar("T")
S = TypeVar("S")


class MatrixMap(Matrix[T]):
    """Dense matrix that stores an entry for every position.

    The size is inferred as the largest stored position. Use the class method
    factories to construct instances.
    """

    def __init__(self, matrix: Mapping[Indexes, T]) -> None:
        """Store the entries and compute the size.

        Note:
            The caller must supply an entry for every position of the rectangle.
            Prefer the factories, which guarantee this.

        Args:
            matrix: Mapping from every position to its entry.
        """
        super().__init__(matrix)
        self._size = max(self._matrix)

    def size(self) -> Indexes:
        return self._size

    def value(self, indexes: Indexes) -> T:
        """Return the stored entry at a position.

        Args:
            indexes: The position to look up.

        Returns:
            The entry at `indexes`.

        Raises:
            OutOfRangeError: If `indexes` lies outside the matrix.
        """
        require_not_none(indexes, "indexes")
        return self._matrix[self._require_contains(indexes)]

    def value_at(self, row: int, column: int) -> T:
        """Return the entry at a row and column.

        Warning:
            Row and column must be positive. Use `value` to access row or column 0.

        Args:
            row: Row of the entry.
            column: Column of the entry.

        Returns:
            The entry at `(row, column)`.
        """
        require_non_empty(Cause.ROW, row)
        require_non_empty(Cause.COLUMN, column)
        return self.value(Indexes(row, column))

    ###############################################################################
    #                                  Factories                                  #
    ###############################################################################
    @classmethod
    def instance(
        cls, rows: int, columns: int, generator: Callable[[Indexes], S]
    ) -> MatrixMap[S]:
        """Create a matrix whose entries are computed from their positions.

        Args:
            rows: Number of rows.
            columns: Number of columns.
            generator: Function that maps a position to its entry. Called once per
                position, in row-major order.

        Returns:
            The dense matrix.
        """
        require_not_none(generator, "generator")
        require_non_empty(Cause.ROW, rows)
        require_non_empty(Cause.COLUMN, columns)

        matrix: Dict[Indexes, S] = {
            idx: generator(idx) for idx in Indexes.stream(rows, columns)
        }
        return cls(matrix)

    @classmethod
    def from_size(
        cls, size: Indexes, generator: Callable[[Indexes], S]
    ) -> MatrixMap[S]:
        """Create a matrix of a given size from a generator.

        Args:
            size: Largest position of the matrix (inclusive).
            generator: Function that maps a position to its entry.

        Returns:
            The dense matrix.
        """
        require_not_none(size, "size")
        require_not_none(generator, "generator")
        return cls.instance(size.row + 1, size.column + 1, generator)

    @classmethod
    def constant(cls, size: int, value: S) -> MatrixMap[S]:
        """Create a square matrix with all entries equal.

        Args:
            size: Number of rows and columns.
            value: The entry used for every position.

        Returns:
            The constant matrix.
        """
        require_not_none(value, "value")
        require_non_empty(Cause.ROW, size)
        return cls.instance(size, size, lambda idx: value)

    @classmethod
    def identity(cls, size: int, zero: S, identity: S) -> MatrixMap[S]:
        """Create a square identity matrix.

        Args:
            size: Number of rows and columns.
            zero: Entry used off the diagonal.
            identity: Entry used on the diagonal.

        Returns:
            The identity matrix.
        """
        require_not_none(zero, "zero")
        require_not_none(identity, "identity")
        require_non_empty(Cause.ROW, size)
        return cls.instance(
            size, size, lambda idx: identity if idx.are_diagonal() else zero
        )

    @classmethod
    def from_array(cls, array: Sequence[Sequence[S]]) -> MatrixMap[S]:
        """Create a matrix from a rectangular array of rows.

        Warning:
            The array is assumed to be rectangular. This is not checked.

        Args:
            array: Nested sequence, indexed as `array[row][column]`.

        Returns:
            The dense matrix.
        """
        require_not_none(array, "array")
        columns = len(array[0]) if len(array) > 0 else 0
        return cls.instance(len(array), columns, lambda idx: idx.value(array))

    @classmethod
    def from_tensor(cls, mat: Tensor) -> MatrixMap:
        """Create a matrix from a 2d PyTorch tensor.

        Args:
            mat: A 2d tensor. Its entries are converted into Python scalars.

        Returns:
            The dense matrix.
        """
        require_not_none(mat, "mat")
        return cls.from_array(tensor_to_rows(mat))

    ###############################################################################
    #                                 Arithmetic                                  #
    ###############################################################################
    def plus(self, other: Matrix[T], ring: Ring[T]) -> MatrixMap[T]:
        """Add another matrix entrywise.

        Args:
            other: Matrix of the same size. May use any representation.
            ring: Ring that defines the sum of two entries.

        Returns:
            The dense sum.
        """
        require_not_none(other, "other")
        require_not_none(ring, "ring")
        require_matching_size(self, other)

        return MatrixMap.from_size(
            self.size(), lambda idx: ring.sum(self.value(idx), other.value(idx))
        )

    def times(self, other: Matrix[T], ring: Ring[T]) -> MatrixMap[T]:
        """Multiply with another square matrix (`self @ other`).

        Args:
            other: Square matrix of the same size. May use any representation.
            ring: Ring that defines sum and product of two entries.

        Returns:
            The dense product.
        """
        require_not_none(other, "other")
        require_not_none(ring, "ring")
        require_matching_size(self, other)
        require_diagonal(self.size())

        return MatrixMap.from_size(
            self.size(), lambda idx: self._product_at(other, ring, idx)
        )

    def _product_at(self, other: Matrix[T], ring: Ring[T], indexes: Indexes) -> T:
        """Compute one entry of `self @ other`.

        Args:
            other: The right factor.
            ring: Ring that defines sum and product of two entries.
            indexes: Position of the entry.

        Returns:
            Sum over `i` of `self[row, i] * other[i, column]`.
        """
        products = [
            ring.product(
                self.value(Indexes(indexes.row, i)),
                other.value(Indexes(i, indexes.column)),
            )
            for i in range(self.size().row + 1)
        ]
        return ring_sum(products, ring)

    ###############################################################################
    #                                 Conversion                                  #
    ###############################################################################
    def to_sparse_matrix(self, ring: Ring[T]) -> SparseMatrix[T]:
        """Convert into a sparse matrix.

        Args:
            ring: Ring whose zero is dropped from storage.

        Returns:
            Sparse matrix with the same entries.
        """
        from ringmat.structures.sparse import SparseMatrix

        return SparseMatrix.from_size(self.size(), self.value, ring)

    def __str__(self) -> str:
        return f"MatrixMap [matrix={self._entries_str()}]"
