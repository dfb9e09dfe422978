"""Two-dimensional coordinates used to address matrix entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, TypeVar

V = TypeVar("V")


@dataclass(frozen=True, order=True, repr=False)
class Indexes:
    """Immutable (row, column) position of a matrix entry.

    Indexes are ordered row-major: first by row, then by column. This order
    defines the size of a dense matrix (its maximum index) and the order in
    which entries are iterated and printed.

    Attributes:
        row: Non-negative row number.
        column: Non-negative column number.
    """

    row: int
    column: int

    def __post_init__(self) -> None:
        """Validate the coordinates.

        Raises:
            ValueError: If the row or column is negative.
        """
        if self.row < 0 or self.column < 0:
            raise ValueError(
                f"Indexes must be non-negative. Got row={self.row}, "
                + f"column={self.column}."
            )

    def __repr__(self) -> str:
        return f"Indexes[row={self.row}, column={self.column}]"

    def are_diagonal(self) -> bool:
        """Whether the position lies on the main diagonal."""
        return self.row == self.column

    def value(self, array: Sequence[Sequence[V]]) -> V:
        """Look up this position in a rectangular array of rows.

        Args:
            array: Nested sequence, indexed as ``array[row][column]``.

        Returns:
            The entry at this position.
        """
        return array[self.row][self.column]

    @staticmethod
    def stream(rows: int, columns: int) -> Iterator[Indexes]:
        """Yield all positions of a ``rows x columns`` rectangle in row-major order.

        Every call returns a fresh iterator.

        Args:
            rows: Number of rows.
            columns: Number of columns.

        Yields:
            The positions ``(0, 0), (0, 1), ..., (rows - 1, columns - 1)``.
        """
        for row in range(rows):
            for column in range(columns):
                yield Indexes(row, column)

    @staticmethod
    def stream_size(size: Indexes) -> Iterator[Indexes]:
        """Yield all positions up to and including ``size``, row-major.

        Args:
            size: The inclusive maximum position.

        Returns:
            Iterator over the positions of the rectangle spanned by ``size``.
        """
        return Indexes.stream(size.row + 1, size.column + 1)
