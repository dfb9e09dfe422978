"""# Basic usage.

This example demonstrates how to build matrices and polynomials over a ring
and how to combine them. Nothing in `ringmat` uses built-in arithmetic on the
entries; every operation receives the ring that defines it.

First, the imports.
"""

from torch import cuda, device, float64, manual_seed, rand

from ringmat import (
    Indexes,
    IntegerRing,
    MatrixMap,
    MatrixRing,
    Polynomial,
    SparseMatrix,
    TensorRing,
)

manual_seed(0)  # make deterministic
DEV = device("cuda" if cuda.is_available() else "cpu")

# %%
# ## Dense Matrices
#
# A `MatrixMap` stores every entry. Sum and product take the other matrix and
# the ring of the entries:

integers = IntegerRing()
A = MatrixMap.from_array([[1, 2], [3, 4]])
B = MatrixMap.from_array([[0, 1], [1, 0]])

print(A.times(B, integers))
print(A.plus(B, integers))

# %%
# ## Sparse Matrices
#
# A `SparseMatrix` only stores entries that are not zero in its ring. Products
# only evaluate terms whose factors are both stored:

identity = SparseMatrix.identity(3, integers)
shift = SparseMatrix.instance(
    3, 3, lambda idx: 1 if idx.column == idx.row + 1 else 0, integers
)
print(shift.times(shift, integers))
print(identity.plus(shift, integers).to_matrix_map())

# %%
# ## Matrices of Matrices
#
# Square matrices of a fixed size form a ring themselves, so they can be the
# entries of another matrix:

blocks = MatrixRing.instance(integers, 2)
block_matrix = MatrixMap.constant(2, A)
print(block_matrix.times(block_matrix, blocks).value(Indexes(0, 0)))

# %%
#
# The same works with PyTorch tensors as blocks:

tensors = TensorRing(4, dtype=float64, device=DEV)
block_matrix = MatrixMap.instance(
    2, 2, lambda idx: rand(4, 4, dtype=float64, device=DEV)
)
print(block_matrix.times(block_matrix, tensors).value(Indexes(1, 1)).shape)

# %%
# ## Polynomials
#
# Polynomials store their coefficients highest degree first. Their product is
# the convolution of the coefficients:

p = Polynomial.from_coefficients([1, 2])  # x + 2
q = Polynomial.from_coefficients([1, 1])  # x + 1
print(p.times(q, integers))  # x^2 + 3x + 2
