"""Algebraic rings over which matrices and polynomials are built."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Ring(ABC, Generic[T]):
    """Base class for rings.

    A ring supplies an additive zero, a multiplicative identity, and the sum
    and product of two elements. Matrices and polynomials never use built-in
    arithmetic on their entries; every operation goes through a ring, which makes
    it possible to nest them (matrices of matrices, polynomials of matrices, ...).

    The minimum amount of work to add a new ring requires implementing

    - `zero`
    - `identity`
    - `sum`
    - `product`

    Implementations must not mutate their operands and must reject `None`
    operands (see `_check_operands`).
    """

    @abstractmethod
    def zero(self) -> T:
        """Return the additive identity.

        Raises:
            NotImplementedError: Must be implemented by a child class.
        """
        raise NotImplementedError

    @abstractmethod
    def identity(self) -> T:
        """Return the multiplicative identity.

        Raises:
            NotImplementedError: Must be implemented by a child class.
        """
        raise NotImplementedError

    @abstractmethod
    def sum(self, x: T, y: T) -> T:
        """Add two elements.

        Args:
            x: First summand.
            y: Second summand.

        Raises:
            NotImplementedError: Must be implemented by a child class.
        """
        raise NotImplementedError

    @abstractmethod
    def product(self, x: T, y: T) -> T:
        """Multiply two elements.

        Args:
            x: Left factor.
            y: Right factor.

        Raises:
            NotImplementedError: Must be implemented by a child class.
        """
        raise NotImplementedError

    def is_zero(self, value: T) -> bool:
        """Check whether an element equals the ring's zero.

        This is the equality notion sparse matrices use to decide which entries
        are stored. The default compares structurally with `==`. Rings whose
        elements don't compare to a single `bool` must override it.

        Args:
            value: The element to check.

        Returns:
            Whether `value` is zero.
        """
        return value == self.zero()

    @staticmethod
    def _check_operands(x: T, y: T):
        """Make sure both operands of a binary operation were supplied.

        Args:
            x: First operand.
            y: Second operand.

        Raises:
            TypeError: If one of the operands is `None`.
        """
        if x is None or y is None:
            raise TypeError("Ring operands must not be None.")
