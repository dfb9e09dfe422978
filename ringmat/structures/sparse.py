"""Sparse matrix implemented in the `Matrix` interface."""

from __future__ import annotations

from typing import (
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Sequence,
    TypeVar,
    Union,
)

import torch
from torch import Tensor, tensor, zeros

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
from ringmat.structures.dense import MatrixMap
from ringmat.structures.indexes import Indexes
from ringmat.structures.utils import tensor_to_rows

T = TypeVar("T")
S = TypeVar("S")


class SparseMatrix(Matrix[T]):
    """Sparse matrix that only stores entries which are not zero.

    Positions without a stored entry hold the zero of the matrix's ring. Since
    zeros are not stored, the size can't be inferred from the entries and is kept
    explicitly.

    Addition of two sparse matrices only visits positions stored in one of the
    operands. Multiplication only evaluates products whose factors are both
    stored, which saves ring operations for matrices with many zeros.
    """

    IS_SPARSE: bool = True

    def __init__(
        self, matrix: Mapping[Indexes, T], size: Indexes, ring: Ring[T]
    ) -> None:
        """Store the non-zero entries, the size and the ring.

        Note:
            `matrix` must not contain zero entries. Prefer the factories, which
            drop them.

        Args:
            matrix: Mapping from positions to non-zero entries.
            size: Largest position of the matrix (inclusive).
            ring: Ring whose zero is returned for positions without an entry.
        """
        super().__init__(matrix)
        self._size = size
        self._ring = ring

    def size(self) -> Indexes:
        return self._size

    def value(self, indexes: Indexes) -> T:
        """Return the entry at a position.

        Args:
            indexes: The position to look up.

        Returns:
            The stored entry, or the ring's zero if there is none.

        Raises:
            OutOfRangeError: If `indexes` lies outside the matrix.
        """
        require_not_none(indexes, "indexes")
        self._require_contains(indexes)
        if indexes in self._matrix:
            return self._matrix[indexes]
        return self._ring.zero()

    ###############################################################################
    #                                  Factories                                  #
    ###############################################################################
    @classmethod
    def instance(
        cls,
        rows: int,
        columns: int,
        generator: Callable[[Indexes], S],
        ring: Ring[S],
    ) -> SparseMatrix[S]:
        """Create a matrix whose entries are computed from their positions.

        Args:
            rows: Number of rows.
            columns: Number of columns.
            generator: Function that maps a position to its entry. Called once per
                position, in row-major order.
            ring: Ring whose zero entries are not stored.

        Returns:
            The sparse matrix.
        """
        require_not_none(generator, "generator")
        require_not_none(ring, "ring")
        require_non_empty(Cause.ROW, rows)
        require_non_empty(Cause.COLUMN, columns)

        matrix = cls._non_zero_entries(Indexes.stream(rows, columns), generator, ring)
        return cls(matrix, Indexes(rows - 1, columns - 1), ring)

    @classmethod
    def from_size(
        cls, size: Indexes, generator: Callable[[Indexes], S], ring: Ring[S]
    ) -> SparseMatrix[S]:
        """Create a matrix of a given size from a generator.

        Args:
            size: Largest position of the matrix (inclusive).
            generator: Function that maps a position to its entry.
            ring: Ring whose zero entries are not stored.

        Returns:
            The sparse matrix.
        """
        require_not_none(size, "size")
        require_not_none(generator, "generator")
        require_not_none(ring, "ring")
        return cls.instance(size.row + 1, size.column + 1, generator, ring)

    @classmethod
    def constant(cls, size: int, value: S, ring: Ring[S]) -> SparseMatrix[S]:
        """Create a square matrix with all entries equal.

        Args:
            size: Number of rows and columns.
            value: The entry used for every position.
            ring: Ring whose zero entries are not stored.

        Returns:
            The constant matrix. Empty storage if `value` is zero.
        """
        require_not_none(value, "value")
        require_not_none(ring, "ring")
        require_non_empty(Cause.ROW, size)
        return cls.instance(size, size, lambda idx: value, ring)

    @classmethod
    def identity(cls, size: int, ring: Ring[S]) -> SparseMatrix[S]:
        """Create a square identity matrix.

        Args:
            size: Number of rows and columns.
            ring: Ring that supplies zero and identity.

        Returns:
            The identity matrix, storing only the diagonal.
        """
        require_not_none(ring, "ring")
        zero = require_not_none(ring.zero(), "zero")
        identity = require_not_none(ring.identity(), "identity")
        require_non_empty(Cause.ROW, size)
        return cls.instance(
            size, size, lambda idx: identity if idx.are_diagonal() else zero, ring
        )

    @classmethod
    def from_array(cls, array: Sequence[Sequence[S]], ring: Ring[S]) -> SparseMatrix[S]:
        """Create a matrix from a rectangular array of rows.

        Warning:
            The array is assumed to be rectangular. This is not checked.

        Args:
            array: Nested sequence, indexed as `array[row][column]`.
            ring: Ring whose zero entries are not stored.

        Returns:
            The sparse matrix.
        """
        require_not_none(array, "array")
        columns = len(array[0]) if len(array) > 0 else 0
        return cls.instance(len(array), columns, lambda idx: idx.value(array), ring)

    @classmethod
    def from_tensor(cls, mat: Tensor, ring: Ring) -> SparseMatrix:
        """Create a matrix from a 2d PyTorch tensor.

        Args:
            mat: A 2d tensor. Its entries are converted into Python scalars.
            ring: Ring whose zero entries are not stored.

        Returns:
            The sparse matrix.
        """
        require_not_none(mat, "mat")
        return cls.from_array(tensor_to_rows(mat), ring)

    @staticmethod
    def _non_zero_entries(
        positions: Iterable[Indexes], generator: Callable[[Indexes], S], ring: Ring[S]
    ) -> Dict[Indexes, S]:
        """Evaluate a generator and keep the entries which are not zero.

        Args:
            positions: The positions to evaluate.
            generator: Function that maps a position to its entry.
            ring: Ring that decides which entries are zero.

        Returns:
            Mapping from positions to non-zero entries.
        """
        matrix: Dict[Indexes, S] = {}
        for idx in positions:
            value = generator(idx)
            if not ring.is_zero(value):
                matrix[idx] = value
        return matrix

    ###############################################################################
    #                                 Arithmetic                                  #
    ###############################################################################
    def plus(self, other: Matrix[T], ring: Ring[T]) -> SparseMatrix[T]:
        """Add another matrix entrywise.

        If `other` is sparse, only positions stored in either operand are visited.
        Otherwise, every position is visited.

        Args:
            other: Matrix of the same size.
            ring: Ring that defines the sum of two entries.

        Returns:
            The sparse sum.
        """
        require_not_none(other, "other")
        require_not_none(ring, "ring")
        require_matching_size(self, other)

        def entry(idx: Indexes) -> T:
            return ring.sum(self.value(idx), other.value(idx))

        if not other.IS_SPARSE:
            self._warn_naive_implementation("plus")
            return SparseMatrix.from_size(self.size(), entry, ring)

        union = sorted(self.stored_indexes() | other.stored_indexes())
        matrix = self._non_zero_entries(union, entry, ring)
        return SparseMatrix(matrix, self.size(), ring)

    def times(self, other: Matrix[T], ring: Ring[T]) -> SparseMatrix[T]:
        """Multiply with another square matrix (`self @ other`).

        A product `self[row, i] * other[i, column]` is only evaluated if both
        factors are stored. All other terms contain an implicit zero and don't
        contribute. A dense `other` stores every position.

        Args:
            other: Square matrix of the same size.
            ring: Ring that defines sum and product of two entries.

        Returns:
            The sparse product.
        """
        require_not_none(other, "other")
        require_not_none(ring, "ring")
        require_matching_size(self, other)
        require_diagonal(self.size())

        other_stored = other.stored_indexes()
        # stored columns of `self`, grouped by row
        row_support: Dict[int, List[int]] = {}
        for idx in sorted(self._matrix):
            row_support.setdefault(idx.row, []).append(idx.column)

        def entry(idx: Indexes) -> T:
            return self._product_at(other, ring, idx, row_support, other_stored)

        matrix = self._non_zero_entries(Indexes.stream_size(self.size()), entry, ring)
        return SparseMatrix(matrix, self.size(), ring)

    def _product_at(
        self,
        other: Matrix[T],
        ring: Ring[T],
        indexes: Indexes,
        row_support: Mapping[int, List[int]],
        other_stored: FrozenSet[Indexes],
    ) -> T:
        """Compute one entry of `self @ other` from the stored factors only.

        Args:
            other: The right factor.
            ring: Ring that defines sum and product of two entries.
            indexes: Position of the entry.
            row_support: Stored columns of `self`, grouped by row.
            other_stored: Positions stored in `other`.

        Returns:
            Sum over `i` of `self[row, i] * other[i, column]`, restricted to stored
            factors. The ring's zero if no term remains.
        """
        products = [
            ring.product(
                self._matrix[Indexes(indexes.row, i)],
                other.value(Indexes(i, indexes.column)),
            )
            for i in row_support.get(indexes.row, [])
            if Indexes(i, indexes.column) in other_stored
        ]
        return ring_sum(products, ring)

    ###############################################################################
    #                                 Conversion                                  #
    ###############################################################################
    def to_matrix_map(self) -> MatrixMap[T]:
        """Convert into a dense matrix.

        Returns:
            Dense matrix with the same entries, zeros made explicit.
        """
        return MatrixMap.from_size(self.size(), self.value)

    def to_tensor(
        self,
        dtype: Union[torch.dtype, None] = None,
        device: Union[torch.device, None] = None,
    ) -> Tensor:
        """Convert a sparse matrix of numbers into a dense PyTorch tensor.

        Only the stored entries are written, all others are zero.

        Args:
            dtype: Optional data type of the tensor. If not specified, it is
                inferred from the stored entries and the ring's zero.
            device: Optional device of the tensor. If not specified, uses the
                default tensor type.

        Returns:
            Tensor of shape `[rows, columns]` holding the entries.
        """
        size = self.size()
        if dtype is None:
            dtype = tensor([self._ring.zero(), *self._matrix.values()]).dtype
        mat = zeros((size.row + 1, size.column + 1), dtype=dtype, device=device)
        for idx, value in self._matrix.items():
            mat[idx.row, idx.column] = value
        return mat

    def __str__(self) -> str:
        return f"SparseMatrix [matrix={self._entries_str()}]"
