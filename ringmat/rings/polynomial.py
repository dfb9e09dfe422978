"""Polynomials over a ring form a ring."""

from __future__ import annotations

from typing import TypeVar

from ringmat.exceptions import require_not_none
from ringmat.polynomial import Polynomial
from ringmat.rings.base import Ring

T = TypeVar("T")
S = TypeVar("S")


class PolynomialRing(Ring[Polynomial[T]]):
    """Ring of polynomials with coefficients in an element ring.

    Use `PolynomialRing.instance` to construct.
    """

    def __init__(self, ring: Ring[T]) -> None:
        self._ring = ring

    @classmethod
    def instance(cls, ring: Ring[S]) -> PolynomialRing[S]:
        """Create the ring of polynomials over `ring`.

        Args:
            ring: Ring of the coefficients.

        Returns:
            The polynomial ring.
        """
        require_not_none(ring, "ring")
        return cls(ring)

    def zero(self) -> Polynomial[T]:
        return Polynomial.from_coefficients([])

    def identity(self) -> Polynomial[T]:
        return Polynomial.from_coefficients([self._ring.identity()])

    def sum(self, x: Polynomial[T], y: Polynomial[T]) -> Polynomial[T]:
        self._check_operands(x, y)
        return x.plus(y, self._ring)

    def product(self, x: Polynomial[T], y: Polynomial[T]) -> Polynomial[T]:
        self._check_operands(x, y)
        return x.times(y, self._ring)

    def is_zero(self, value: Polynomial[T]) -> bool:
        """Check whether all coefficients are zero in the element ring.

        Args:
            value: The polynomial to check.

        Returns:
            Whether `value` is the zero polynomial (with any number of zero
            coefficients, including none).
        """
        return all(self._ring.is_zero(c) for c in value)
