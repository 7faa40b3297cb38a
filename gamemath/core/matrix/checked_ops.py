"""
Checked Ops — матричные операции с явным результатом

Методы Matrix / FixedSizeMatrix сигнализируют об ошибках молча:
несовпадение размеров → no-op, необратимая матрица → без изменений.
CheckedMatrixOps выполняет те же операции, но возвращает MatrixOpResult,
чтобы вызывающий код (и тесты) мог отличить «no-op из-за ошибки» от
успешной операции.

Порядок проверок каждой операции:
1. Инициализация операндов
2. Совместимость размеров / квадратность
3. Выполнение операции
4. Проверка результата (inverse, solve)
"""

from dataclasses import dataclass
from enum import Enum

from gamemath.core.matrix.dense import DenseMatrix


# =============================================================================
# ENUMS
# =============================================================================


class MatrixOpFailure(str, Enum):
    """Причина, по которой операция не выполнена."""

    NONE = "none"
    UNINITIALIZED = "uninitialized"
    DIMENSION_MISMATCH = "dimension_mismatch"
    NOT_SQUARE = "not_square"
    NON_POSITIVE_EXPONENT = "non_positive_exponent"
    NOT_INVERTIBLE = "not_invertible"
    NOT_FULLY_REDUCED = "not_fully_reduced"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class MatrixOpResult:
    """Результат checked операции."""

    succeeded: bool
    reason: MatrixOpFailure

    # Результирующая матрица (при неудаче — операнд в исходном состоянии)
    matrix: DenseMatrix

    # Детали
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MatrixOpsConfig:
    """Конфигурация CheckedMatrixOps.

    copy_inputs: операции выполняются на копии левого операнда,
        исходная матрица не изменяется
    """

    copy_inputs: bool = True


# =============================================================================
# CHECKED OPS
# =============================================================================


class CheckedMatrixOps:
    """Матричные операции, возвращающие MatrixOpResult вместо молчаливого no-op."""

    def __init__(self, config: MatrixOpsConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or MatrixOpsConfig()

    def _target(self, matrix: DenseMatrix) -> DenseMatrix:
        return matrix.clone() if self.config.copy_inputs else matrix

    @staticmethod
    def _ok(matrix: DenseMatrix, details: str) -> MatrixOpResult:
        return MatrixOpResult(
            succeeded=True,
            reason=MatrixOpFailure.NONE,
            matrix=matrix,
            details=details,
        )

    @staticmethod
    def _failed(matrix: DenseMatrix, reason: MatrixOpFailure, details: str) -> MatrixOpResult:
        return MatrixOpResult(
            succeeded=False,
            reason=reason,
            matrix=matrix,
            details=details,
        )

    @staticmethod
    def _shape(matrix: DenseMatrix) -> str:
        return f"{matrix.row_count}x{matrix.col_count}"

    def _check_initialized(self, *matrices: DenseMatrix) -> MatrixOpResult | None:
        for m in matrices:
            if not m.is_initialized:
                return self._failed(
                    matrices[0], MatrixOpFailure.UNINITIALIZED, "operand is not initialized"
                )
        return None

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def add(self, left: DenseMatrix, right: DenseMatrix) -> MatrixOpResult:
        failed = self._check_initialized(left, right)
        if failed:
            return failed

        if not left.same_dimensions(right):
            return self._failed(
                left,
                MatrixOpFailure.DIMENSION_MISMATCH,
                f"cannot add {self._shape(right)} to {self._shape(left)}",
            )

        return self._ok(self._target(left).add(right), f"add {self._shape(left)}")

    def subtract(self, left: DenseMatrix, right: DenseMatrix) -> MatrixOpResult:
        failed = self._check_initialized(left, right)
        if failed:
            return failed

        if not left.same_dimensions(right):
            return self._failed(
                left,
                MatrixOpFailure.DIMENSION_MISMATCH,
                f"cannot subtract {self._shape(right)} from {self._shape(left)}",
            )

        return self._ok(self._target(left).subtract(right), f"subtract {self._shape(left)}")

    def multiply(self, left: DenseMatrix, right: DenseMatrix) -> MatrixOpResult:
        failed = self._check_initialized(left, right)
        if failed:
            return failed

        if not left.can_multiply(right):
            return self._failed(
                left,
                MatrixOpFailure.DIMENSION_MISMATCH,
                f"cannot multiply {self._shape(left)} by {self._shape(right)}",
            )

        target = self._target(left)
        product = target.multiply(right)

        # FixedSizeMatrix отказывается от неквадратного правого операнда
        if product.col_count != right.col_count:
            return self._failed(
                left,
                MatrixOpFailure.DIMENSION_MISMATCH,
                f"{type(left).__name__} cannot hold a {left.row_count}x{right.col_count} product",
            )

        return self._ok(product, f"multiply {self._shape(left)} x {self._shape(right)}")

    def power(self, matrix: DenseMatrix, exponent: int) -> MatrixOpResult:
        failed = self._check_initialized(matrix)
        if failed:
            return failed

        if not matrix.is_square_matrix():
            return self._failed(
                matrix, MatrixOpFailure.NOT_SQUARE, f"power of {self._shape(matrix)}"
            )

        if exponent <= 0:
            return self._failed(
                matrix,
                MatrixOpFailure.NON_POSITIVE_EXPONENT,
                f"exponent must be positive, got {exponent}",
            )

        return self._ok(self._target(matrix).power(exponent), f"power {exponent}")

    # -------------------------------------------------------------------------
    # Элиминация
    # -------------------------------------------------------------------------

    def inverse(self, matrix: DenseMatrix) -> MatrixOpResult:
        failed = self._check_initialized(matrix)
        if failed:
            return failed

        if not matrix.is_square_matrix():
            return self._failed(
                matrix, MatrixOpFailure.NOT_SQUARE, f"inverse of {self._shape(matrix)}"
            )

        target = self._target(matrix)
        if not target.try_inverse():
            rank = target.last_elimination.rank
            return self._failed(
                target,
                MatrixOpFailure.NOT_INVERTIBLE,
                f"reduction reached rank {rank} of {matrix.row_count}",
            )

        return self._ok(target, f"inverse {self._shape(matrix)}")

    def solve(self, matrix: DenseMatrix, augmented: DenseMatrix) -> MatrixOpResult:
        """
        Решение matrix · X = augmented.

        Returns:
            MatrixOpResult, где matrix — решение X (копия augmented после
            редукции). NOT_FULLY_REDUCED, если матрица не приведена к
            единичной: система вырождена или недоопределена.
        """
        failed = self._check_initialized(matrix, augmented)
        if failed:
            return failed

        if augmented.row_count != matrix.row_count:
            return self._failed(
                augmented,
                MatrixOpFailure.DIMENSION_MISMATCH,
                f"augmented {self._shape(augmented)} does not match {self._shape(matrix)}",
            )

        reduced = self._target(matrix)
        solution = self._target(augmented)
        reduced.reduce(solution)

        if not reduced.is_identity_matrix():
            rank = reduced.last_elimination.rank
            return self._failed(
                solution,
                MatrixOpFailure.NOT_FULLY_REDUCED,
                f"reduction reached rank {rank} of {matrix.row_count}",
            )

        return self._ok(solution, f"solve {self._shape(matrix)} | {self._shape(augmented)}")
