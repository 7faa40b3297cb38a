"""Matrix — плотные float32 матрицы и Gauss-Jordan solver.

- DenseMatrix: общее хранилище, алгебра, предикаты
- Matrix: произвольный размер, solve(augmented) / inverse()
- Matrix2x2, Matrix4x4: фиксированный размер, solve(...) → вектор
- elimination: единственная реализация Gauss-Jordan
- CheckedMatrixOps: операции с явным MatrixOpResult
"""

from .checked_ops import CheckedMatrixOps, MatrixOpFailure, MatrixOpResult, MatrixOpsConfig
from .dense import DenseMatrix, MatrixDimensionError
from .elimination import EliminationReport, gauss_jordan
from .fixed_size import FixedSizeMatrix
from .matrix import Matrix
from .matrix2x2 import Matrix2x2
from .matrix4x4 import Matrix4x4

__all__ = [
    "CheckedMatrixOps",
    "MatrixOpFailure",
    "MatrixOpResult",
    "MatrixOpsConfig",
    "DenseMatrix",
    "MatrixDimensionError",
    "EliminationReport",
    "gauss_jordan",
    "FixedSizeMatrix",
    "Matrix",
    "Matrix2x2",
    "Matrix4x4",
]
