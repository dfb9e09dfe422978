"""Rings of numbers and of dense PyTorch tensors."""

from __future__ import annotations

from typing import Union

import torch
from torch import Tensor, zeros

from ringmat.exceptions import Cause, require_non_empty
from ringmat.rings.base import Ring
from ringmat.structures.utils import supported_eye


class IntegerRing(Ring[int]):
    """Ring of Python integers.

    Python integers have arbitrary precision, so this ring never overflows.
    """

    def zero(self) -> int:
        return 0

    def identity(self) -> int:
        return 1

    def sum(self, x: int, y: int) -> int:
        self._check_operands(x, y)
        return x + y

    def product(self, x: int, y: int) -> int:
        self._check_operands(x, y)
        return x * y


class FloatRing(Ring[float]):
    """Ring of Python floats."""

    def zero(self) -> float:
        return 0.0

    def identity(self) -> float:
        return 1.0

    def sum(self, x: float, y: float) -> float:
        self._check_operands(x, y)
        return x + y

    def product(self, x: float, y: float) -> float:
        self._check_operands(x, y)
        return x * y


class TensorRing(Ring[Tensor]):
    r"""Ring of square PyTorch matrices under addition and matrix multiplication.

    Elements are tensors of shape `[dim, dim]`. Using this ring as the element
    ring of a matrix turns the matrix into a block matrix

    \[
    \begin{pmatrix}
    \mathbf{A}_{11} & \cdots & \mathbf{A}_{1n} \\
    \vdots & \ddots & \vdots \\
    \mathbf{A}_{n1} & \cdots & \mathbf{A}_{nn}
    \end{pmatrix}
    \quad \text{with} \quad
    \mathbf{A}_{ij} \in \mathbb{R}^{\text{dim} \times \text{dim}}\,.
    \]
    """

    def __init__(
        self,
        dim: int,
        dtype: Union[torch.dtype, None] = None,
        device: Union[torch.device, None] = None,
    ) -> None:
        """Store the block dimension and tensor type.

        Args:
            dim: Dimension of the square blocks.
            dtype: Optional data type of the blocks. If not specified, uses the
                default tensor type.
            device: Optional device of the blocks. If not specified, uses the
                default tensor type.
        """
        self.dim = require_non_empty(Cause.ROW, dim)
        self.dtype = dtype
        self.device = device

    def zero(self) -> Tensor:
        return zeros((self.dim, self.dim), dtype=self.dtype, device=self.device)

    def identity(self) -> Tensor:
        return supported_eye(self.dim, dtype=self.dtype, device=self.device)

    def sum(self, x: Tensor, y: Tensor) -> Tensor:
        self._check_operands(x, y)
        return x + y

    def product(self, x: Tensor, y: Tensor) -> Tensor:
        self._check_operands(x, y)
        return x @ y

    def is_zero(self, value: Tensor) -> bool:
        """Check whether a block has no non-zero entries.

        Args:
            value: The block to check.

        Returns:
            Whether all entries of `value` are zero.
        """
        return not value.any().item()
