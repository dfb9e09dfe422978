"""Polynomials with coefficients in a ring."""

from __future__ import annotations

from typing import Generic, Iterator, List, Sequence, Tuple, TypeVar

from ringmat.exceptions import require_not_none
from ringmat.rings.base import Ring
from ringmat.rings.utils import ring_sum

T = TypeVar("T")
S = TypeVar("S")


class Polynomial(Generic[T]):
    r"""Immutable polynomial, stored as its coefficients from highest degree down.

    The coefficients `[c_0, c_1, ..., c_n]` represent

    \[
    c_0 x^n + c_1 x^{n-1} + \dots + c_n\,.
    \]

    Leading zero coefficients are kept as given. Use
    `Polynomial.from_coefficients` to construct.
    """

    def __init__(self, coefficients: Sequence[T]) -> None:
        """Store a copy of the coefficients.

        Args:
            coefficients: Coefficients, highest degree first.
        """
        self._coefficients: Tuple[T, ...] = tuple(coefficients)

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[S]) -> Polynomial[S]:
        """Create a polynomial.

        Args:
            coefficients: Coefficients, highest degree first.

        Returns:
            The polynomial.
        """
        require_not_none(coefficients, "coefficients")
        return cls(coefficients)

    def get_coefficients(self) -> List[T]:
        """Return a copy of the coefficients, highest degree first."""
        return list(self._coefficients)

    def __iter__(self) -> Iterator[T]:
        return iter(self._coefficients)

    def __len__(self) -> int:
        return len(self._coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __str__(self) -> str:
        return str(list(self._coefficients))

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)})"

    def plus(self, other: Polynomial[T], ring: Ring[T]) -> Polynomial[T]:
        """Add another polynomial termwise.

        Terms are matched from the constant term upwards. The extra high-degree
        terms of the longer polynomial are carried over unchanged.

        Args:
            other: The polynomial to add.
            ring: Ring that defines the sum of two coefficients.

        Returns:
            The sum, as long as the longer operand.
        """
        require_not_none(other, "other")
        require_not_none(ring, "ring")

        if len(self) >= len(other):
            longer, shorter = self.get_coefficients(), other.get_coefficients()
        else:
            longer, shorter = other.get_coefficients(), self.get_coefficients()

        shift = len(longer) - len(shorter)
        for i, coefficient in enumerate(shorter):
            longer[shift + i] = ring.sum(longer[shift + i], coefficient)

        return Polynomial(longer)

    def times(self, other: Polynomial[T], ring: Ring[T]) -> Polynomial[T]:
        """Multiply with another polynomial (convolution of the coefficients).

        Args:
            other: The right factor.
            ring: Ring that defines sum and product of two coefficients.

        Returns:
            The product with `len(self) + len(other) - 1` coefficients. If one
            factor has no coefficients, all coefficients are the ring's zero.
        """
        require_not_none(other, "other")
        require_not_none(ring, "ring")

        p, q = self._coefficients, other._coefficients

        result = []
        for k in range(max(len(p) + len(q) - 1, 0)):
            # clip `i` so that both `p[i]` and `q[k - i]` exist
            first = max(0, k - len(q) + 1)
            last = min(k, len(p) - 1)
            products = [ring.product(p[i], q[k - i]) for i in range(first, last + 1)]
            result.append(ring_sum(products, ring))

        return Polynomial(result)
