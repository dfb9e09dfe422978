"""Matrices and polynomials over arbitrary rings."""

from ringmat.polynomial import Polynomial
from ringmat.rings.base import Ring
from ringmat.rings.matrix import MatrixRing
from ringmat.rings.numeric import FloatRing, IntegerRing, TensorRing
from ringmat.rings.polynomial import PolynomialRing
from ringmat.structures.base import Matrix
from ringmat.structures.dense import MatrixMap
from ringmat.structures.indexes import Indexes
from ringmat.structures.sparse import SparseMatrix

__all__ = [
    "FloatRing",
    "Indexes",
    "IntegerRing",
    "Matrix",
    "MatrixMap",
    "MatrixRing",
    "Polynomial",
    "PolynomialRing",
    "Ring",
    "SparseMatrix",
    "TensorRing",
]
