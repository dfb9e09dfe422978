"""Common interface of matrices whose entries are elements of a ring."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, Generic, Mapping, Set, TypeVar, Union
from warnings import warn

import torch
from torch import Tensor, equal, tensor

from ringmat.exceptions import OutOfRangeError, require_not_none
from ringmat.rings.base import Ring
from ringmat.structures.indexes import Indexes

T = TypeVar("T")


class Matrix(ABC, Generic[T]):
    """Base class for matrices over a ring.

    A matrix maps every position of a rectangle `[0, size()]` to a ring element.
    How the entries are stored is up to the child class. Arithmetic never uses
    built-in operators on the entries; the ring that defines them is passed to
    every operation.

    Matrices are immutable. All operations return new matrices.

    The minimum amount of work to add a new representation requires implementing
    the following methods:

    - `value`
    - `size`
    - `plus`
    - `times`

    and passing the explicitly stored entries to `__init__`.

    Note:
        Representations may choose faster algorithms when both operands share a
        storage scheme. This is decided with the `IS_SPARSE` capability flag and
        `stored_indexes`, not by inspecting the operand's class.

    Attributes:
        IS_SPARSE: Whether absent positions are implicitly zero. Dense matrices
            store every position explicitly. Default: `False`.
        WARN_NAIVE: Warn the user if a method falls back to a naive implementation
            which ignores the storage scheme of an operand. Default: `True`.
        WARN_NAIVE_EXCEPTIONS: Set of methods that should not trigger a warning even
            if `WARN_NAIVE` is `True`.
    """

    IS_SPARSE: bool = False
    WARN_NAIVE: bool = True
    WARN_NAIVE_EXCEPTIONS: Set[str] = set()

    def __init__(self, matrix: Mapping[Indexes, T]) -> None:
        """Store a private copy of the explicitly stored entries.

        Args:
            matrix: Mapping from positions to entries.
        """
        self._matrix: Dict[Indexes, T] = dict(matrix)

    @abstractmethod
    def value(self, indexes: Indexes) -> T:
        """Return the entry at a position.

        Args:
            indexes: The position to look up.

        Raises:
            NotImplementedError: Must be implemented by a child class.
        """
        raise NotImplementedError

    @abstractmethod
    def size(self) -> Indexes:
        """Return the largest position of the matrix (inclusive).

        A matrix with `R` rows and `C` columns has size `Indexes(R - 1, C - 1)`.

        Raises:
            NotImplementedError: Must be implemented by a child class.
        """
        raise NotImplementedError

    @abstractmethod
    def plus(self, other: Matrix[T], ring: Ring[T]) -> Matrix[T]:
        """Add another matrix of the same size.

        Args:
            other: The matrix to add.
            ring: Ring that defines the sum of two entries.

        Raises:
            NotImplementedError: Must be implemented by a child class.
        """
        raise NotImplementedError

    @abstractmethod
    def times(self, other: Matrix[T], ring: Ring[T]) -> Matrix[T]:
        """Multiply with another square matrix of the same size (`self @ other`).

        Args:
            other: The right factor.
            ring: Ring that defines sum and product of two entries.

        Raises:
            NotImplementedError: Must be implemented by a child class.
        """
        raise NotImplementedError

    def get_map(self) -> Dict[Indexes, T]:
        """Return a snapshot of the explicitly stored entries.

        Returns:
            A new dictionary. Modifying it does not affect the matrix.
        """
        return dict(self._matrix)

    def stored_indexes(self) -> FrozenSet[Indexes]:
        """Return the positions with an explicitly stored entry.

        Returns:
            Frozen set of positions.
        """
        return frozenset(self._matrix)

    def contains(self, indexes: Indexes) -> bool:
        """Check whether a position lies inside the matrix.

        Args:
            indexes: The position to check.

        Returns:
            Whether `indexes` is in the rectangle spanned by `size()`.
        """
        require_not_none(indexes, "indexes")
        size = self.size()
        return indexes.row <= size.row and indexes.column <= size.column

    def _require_contains(self, indexes: Indexes) -> Indexes:
        """Make sure a position lies inside the matrix.

        Args:
            indexes: The position to check.

        Returns:
            The position.

        Raises:
            OutOfRangeError: If `indexes` lies outside the matrix.
        """
        if not self.contains(indexes):
            raise OutOfRangeError(indexes, self.size())
        return indexes

    def to_tensor(
        self,
        dtype: Union[torch.dtype, None] = None,
        device: Union[torch.device, None] = None,
    ) -> Tensor:
        """Convert a matrix of numbers into a dense PyTorch tensor.

        Args:
            dtype: Optional data type of the tensor. If not specified, it is
                inferred from the entries.
            device: Optional device of the tensor. If not specified, uses the
                default tensor type.

        Returns:
            Tensor of shape `[rows, columns]` holding the entries.
        """
        size = self.size()
        rows = [
            [self.value(Indexes(row, column)) for column in range(size.column + 1)]
            for row in range(size.row + 1)
        ]
        return tensor(rows, dtype=dtype, device=device)

    def __eq__(self, other: object) -> bool:
        """Compare entrywise, independent of the representation.

        Args:
            other: Object to compare with.

        Returns:
            Whether `other` is a matrix of the same size with equal entries.
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(
            _entries_equal(self.value(idx), other.value(idx))
            for idx in Indexes.stream_size(self.size())
        )

    def _entries_str(self) -> str:
        """Render the stored entries in row-major order.

        Returns:
            Entries formatted as `{Indexes[row=R, column=C]=V, ...}`.
        """
        entries = ", ".join(
            f"{idx}={self._matrix[idx]}" for idx in sorted(self._matrix)
        )
        return "{" + entries + "}"

    @classmethod
    def _warn_naive_implementation(cls, fn_name: str):
        """Warn the user that a naive implementation is called.

        This happens when an operand's storage scheme can't be exploited and the
        whole rectangle is visited instead.

        You can turn off the warning by setting the `WARN_NAIVE` class attribute.

        Args:
            fn_name: Name of the function whose naive version is being called.
        """
        if cls.WARN_NAIVE and fn_name not in cls.WARN_NAIVE_EXCEPTIONS:
            cls_name = cls.__name__
            warn(
                f"Calling naive implementation of {cls_name}.{fn_name}. "
                + "Use operands of the same representation to exploit structure."
            )


def _entries_equal(entry1: Any, entry2: Any) -> bool:
    """Compare two matrix entries.

    Tensors are equal if they have the same shape and values.

    Args:
        entry1: First entry.
        entry2: Second entry.

    Returns:
        Whether the entries are equal.
    """
    if isinstance(entry1, Tensor) and isinstance(entry2, Tensor):
        return equal(entry1, entry2)
    return bool(entry1 == entry2)
