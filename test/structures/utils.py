"""Utility functions for testing the interface of matrices."""

from abc import ABC, abstractmethod
from test.utils import DEVICE_IDS, DEVICES, RING_IDS, RINGS, cast, report_nonclose
from typing import Callable, List, Sequence, Type

import torch
from pytest import mark, raises
from torch import Tensor, cat, device, manual_seed, rand

from ringmat.exceptions import InconsistentSizeError, NonSquareError
from ringmat.rings.base import Ring
from ringmat.rings.numeric import FloatRing, IntegerRing, TensorRing
from ringmat.structures.base import Matrix
from ringmat.structures.dense import MatrixMap
from ringmat.structures.indexes import Indexes

A = [[1, 2], [3, 4]]
B = [[0, 1], [1, 0]]
A_TIMES_B = [[2, 1], [4, 3]]
A_PLUS_B = [[1, 3], [4, 4]]


def sparsify(mat: Tensor, density: float = 0.5) -> Tensor:
    """Set a random subset of a tensor's entries to zero.

    Args:
        mat: A tensor.
        density: Expected fraction of entries that are kept. Default: `0.5`.

    Returns:
        A copy of `mat` with some entries set to zero.
    """
    mask = rand(mat.shape, device=mat.device) < density
    return mat * mask


def assemble_blocks(blocks: Sequence[Sequence[Tensor]]) -> Tensor:
    """Assemble a dense tensor from a nested sequence of blocks.

    Args:
        blocks: Blocks, indexed as `blocks[row][column]`.

    Returns:
        The block matrix as one tensor.
    """
    return cat([cat(list(row), dim=1) for row in blocks], dim=0)


def blocks_of(matrix: Matrix[Tensor]) -> List[List[Tensor]]:
    """Extract the blocks of a matrix over a `TensorRing`.

    Args:
        matrix: A matrix whose entries are tensors.

    Returns:
        The blocks, indexed as `blocks[row][column]`.
    """
    size = matrix.size()
    return [
        [matrix.value(Indexes(row, column)) for column in range(size.column + 1)]
        for row in range(size.row + 1)
    ]


class _TestMatrix(ABC):
    """Abstract class for testing `Matrix` implementations.

    To test a new representation, create a new class and specify the class
    attributes, then implement the `create` method.

    `
    class TestMatrixMap(_TestMatrix):
        MATRIX_CLS = MatrixMap

        def create(self, size, generator, ring):
            ...
    `

    `pytest` will automatically pick up the tests defined for `TestMatrixMap`
    via the base class.

    Attributes:
        MATRIX_CLS: The class of the matrix representation that is tested.
        DIMS: A list of dimensions of the square matrices to be tested.
    """

    MATRIX_CLS: Type[Matrix]
    DIMS: List[int] = [1, 2, 3]

    @abstractmethod
    def create(
        self, size: Indexes, generator: Callable[[Indexes], object], ring: Ring
    ) -> Matrix:
        """Create a matrix of the tested representation.

        Args:
            size: Largest position of the matrix (inclusive).
            generator: Function that maps a position to its entry.
            ring: Ring of the entries.

        Returns:
            The matrix.
        """
        raise NotImplementedError("Must be implemented by a child class.")

    def create_from_array(self, array: Sequence[Sequence], ring: Ring) -> Matrix:
        """Create a matrix of the tested representation from nested lists.

        Args:
            array: Entries, indexed as `array[row][column]`.
            ring: Ring of the entries.

        Returns:
            The matrix.
        """
        size = Indexes(len(array) - 1, len(array[0]) - 1)
        return self.create(size, lambda idx: cast(ring, idx.value(array)), ring)

    def create_identity(self, dim: int, ring: Ring) -> Matrix:
        """Create an identity matrix of the tested representation.

        Args:
            dim: Number of rows and columns.
            ring: Ring of the entries.

        Returns:
            The identity matrix.
        """
        return self.create(
            Indexes(dim - 1, dim - 1),
            lambda idx: ring.identity() if idx.are_diagonal() else ring.zero(),
            ring,
        )

    @mark.parametrize("ring", RINGS, ids=RING_IDS)
    def test_plus_and_times_example(self, ring: Ring):
        """Test sum and product of two fixed 2x2 matrices.

        Args:
            ring: The ring of the entries.
        """
        mat_a = self.create_from_array(A, ring)
        mat_b = self.create_from_array(B, ring)

        assert mat_a.times(mat_b, ring) == MatrixMap.from_array(A_TIMES_B)
        assert mat_a.plus(mat_b, ring) == MatrixMap.from_array(A_PLUS_B)

    @mark.parametrize("ring", RINGS, ids=RING_IDS)
    def test_identity_law(self, ring: Ring):
        """Test that multiplying with the identity leaves a matrix unchanged.

        Args:
            ring: The ring of the entries.
        """
        for dim in self.DIMS:
            size = Indexes(dim - 1, dim - 1)
            mat = self.create(
                size, lambda idx: cast(ring, 3 * idx.row + idx.column + 1), ring
            )
            identity = self.create_identity(dim, ring)

            assert mat.times(identity, ring) == mat
            assert identity.times(mat, ring) == mat

    @mark.parametrize("ring", RINGS, ids=RING_IDS)
    def test_plus_commutative(self, ring: Ring):
        """Test that addition does not depend on the order of the operands.

        Args:
            ring: The ring of the entries.
        """
        for dim in self.DIMS:
            size = Indexes(dim - 1, dim - 1)
            mat1 = self.create(
                size, lambda idx: cast(ring, idx.row - idx.column), ring
            )
            mat2 = self.create(
                size, lambda idx: cast(ring, idx.row * idx.column), ring
            )
            assert mat1.plus(mat2, ring) == mat2.plus(mat1, ring)

    def test_plus_inconsistent_size(self):
        """Test that adding matrices of different sizes fails."""
        ring = IntegerRing()
        mat1 = self.create(Indexes(1, 1), lambda idx: 1, ring)
        mat2 = self.create(Indexes(2, 2), lambda idx: 1, ring)

        with raises(InconsistentSizeError) as excinfo:
            mat1.plus(mat2, ring)
        assert excinfo.value.this_size == Indexes(1, 1)
        assert excinfo.value.other_size == Indexes(2, 2)

        with raises(InconsistentSizeError):
            mat1.times(mat2, ring)

    def test_times_non_square(self):
        """Test that multiplying non-square matrices fails."""
        ring = IntegerRing()
        mat = self.create(Indexes(1, 2), lambda idx: 1, ring)

        with raises(NonSquareError) as excinfo:
            mat.times(mat, ring)
        assert excinfo.value.size == Indexes(1, 2)

    def test_none_arguments(self):
        """Test that missing operands or rings are rejected."""
        ring = IntegerRing()
        mat = self.create(Indexes(1, 1), lambda idx: 1, ring)

        with raises(TypeError):
            mat.plus(None, ring)
        with raises(TypeError):
            mat.times(mat, None)
        with raises(TypeError):
            mat.value(None)

    def test_get_map_is_snapshot(self):
        """Test that modifying the returned mapping does not affect the matrix."""
        ring = IntegerRing()
        mat = self.create_from_array(A, ring)

        entries = mat.get_map()
        entries[Indexes(0, 0)] = 42
        entries.clear()

        assert mat.value(Indexes(0, 0)) == 1
        assert mat.get_map()[Indexes(1, 1)] == 4

    @mark.parametrize("dev", DEVICES, ids=DEVICE_IDS)
    def test_times_matches_torch(self, dev: device):
        """Compare matrix multiplication over floats with PyTorch.

        Args:
            dev: The device on which to run the test.
        """
        manual_seed(0)
        ring = FloatRing()
        dim = 6
        mat1 = sparsify(rand((dim, dim), device=dev, dtype=torch.float64))
        mat2 = sparsify(rand((dim, dim), device=dev, dtype=torch.float64))
        truth = mat1 @ mat2

        size = Indexes(dim - 1, dim - 1)
        structured1 = self.create(
            size, lambda idx: mat1[idx.row, idx.column].item(), ring
        )
        structured2 = self.create(
            size, lambda idx: mat2[idx.row, idx.column].item(), ring
        )
        result = structured1.times(structured2, ring)

        report_nonclose(truth, result.to_tensor(dtype=torch.float64, device=dev))

    @mark.parametrize("dev", DEVICES, ids=DEVICE_IDS)
    def test_block_matrix(self, dev: device):
        """Multiply and add block matrices whose blocks are PyTorch tensors.

        Args:
            dev: The device on which to run the test.
        """
        manual_seed(0)
        block_dim, num_blocks = 3, 2
        ring = TensorRing(block_dim, dtype=torch.float64, device=dev)

        def random_block(idx: Indexes) -> Tensor:
            if idx == Indexes(1, 0):
                return ring.zero()
            return rand((block_dim, block_dim), dtype=torch.float64, device=dev)

        size = Indexes(num_blocks - 1, num_blocks - 1)
        mat1 = self.create(size, random_block, ring)
        mat2 = self.create(size, random_block, ring)
        dense1 = assemble_blocks(blocks_of(mat1))
        dense2 = assemble_blocks(blocks_of(mat2))

        report_nonclose(
            dense1 @ dense2, assemble_blocks(blocks_of(mat1.times(mat2, ring)))
        )
        report_nonclose(
            dense1 + dense2, assemble_blocks(blocks_of(mat1.plus(mat2, ring)))
        )

        assert mat1.plus(mat2, ring) == mat2.plus(mat1, ring)
        assert mat1 == MatrixMap.from_size(size, mat1.value)
        assert mat1 != mat2

