"""
Matrix — матрица произвольного размера rows×cols

Создание:
- Matrix()                       — неинициализированная (0×0, без буфера)
- Matrix(rows, cols)             — нулевая матрица
- Matrix.from_flat(data, r, c)   — из плоского row-major массива
- Matrix.from_rows([[...], ...]) — из списка строк
- Matrix.copy_of(m) / m.clone()  — глубокая копия

Элиминация:
- solve(augmented=None) — Gauss-Jordan in-place, augmented получает
  те же строковые операции; без проверки на единичную матрицу
- inverse()             — обращение с откатом, если не получена точная
  единичная матрица
"""

import logging
from typing import Iterable, Sequence

from gamemath.core.math.numerical_safeguards import validate_dimension
from gamemath.core.matrix.dense import DenseMatrix, MatrixDimensionError

logger = logging.getLogger(__name__)


class Matrix(DenseMatrix):
    """
    Плотная float32 матрица с динамическими размерами.

    Examples:
        >>> m = Matrix.from_rows([[4, 7], [2, 6]])
        >>> print(m.inverse())
        0.6 -0.7
        -0.2 0.4
    """

    def __init__(self, rows: int | None = None, cols: int | None = None) -> None:
        """
        Args:
            rows: Количество строк (None — неинициализированная матрица)
            cols: Количество столбцов

        Raises:
            MatrixDimensionError: Если задан только один размер или размер отрицательный
        """
        super().__init__()

        if rows is None and cols is None:
            return

        if rows is None or cols is None:
            raise MatrixDimensionError("both rows and cols must be given")

        try:
            validate_dimension(rows, "rows")
            validate_dimension(cols, "cols")
        except ValueError as e:
            raise MatrixDimensionError(str(e)) from e

        self._allocate(int(rows), int(cols))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_flat(cls, data: Iterable[float], rows: int, cols: int) -> "Matrix":
        """
        Матрица из плоского row-major массива.

        Raises:
            MatrixDimensionError: Если len(data) != rows * cols
        """
        matrix = cls(rows, cols)
        values = list(data)
        if not matrix._load_flat(values):
            raise MatrixDimensionError(
                f"flat data has {len(values)} entries, expected {rows * cols} ({rows}x{cols})"
            )
        return matrix

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Матрица из списка строк одинаковой длины.

        Raises:
            MatrixDimensionError: Если строки разной длины
        """
        row_count = len(rows)
        col_count = len(rows[0]) if row_count else 0

        for row in rows:
            if len(row) != col_count:
                raise MatrixDimensionError(
                    f"ragged rows: expected {col_count} entries, got {len(row)}"
                )

        return cls.from_flat((v for row in rows for v in row), row_count, col_count)

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        matrix = cls(size, size)
        for i in range(size):
            matrix.set(i, i, 1.0)
        return matrix

    @classmethod
    def copy_of(cls, other: DenseMatrix) -> "Matrix":
        """Глубокая копия любой плотной матрицы как Matrix."""
        matrix = cls()
        if other.is_initialized:
            matrix._allocate(other.row_count, other.col_count)
            matrix._load_flat(other._data)
        else:
            matrix._rows = other.row_count
            matrix._cols = other.col_count
        return matrix

    def set_values(self, data: Iterable[float], rows: int, cols: int) -> bool:
        """
        Перезапись содержимого из плоского массива.

        Неинициализированная матрица выделяет буфер rows×cols.

        Returns:
            False (без изменений), если размеры не совпадают с уже
            выделенными или длина data != rows * cols
        """
        if rows < 0 or cols < 0:
            return False

        if self._data is None:
            previous = (self._rows, self._cols)
            self._allocate(rows, cols)
            if not self._load_flat(data):
                self._rows, self._cols = previous
                self._data = None
                return False
            return True

        if self._rows != rows or self._cols != cols:
            return False

        return self._load_flat(data)

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def multiply(self, other: DenseMatrix) -> "Matrix":
        """
        Матричное произведение self × other (in-place).

        При несовместимых размерах (self.cols != other.rows) возвращается
        КОПИЯ self, а сама матрица не изменяется.
        """
        if not self.can_multiply(other) or self._data is None or other._data is None:
            logger.debug(
                "multiply skipped: %dx%d x %dx%d", self._rows, self._cols, other._rows, other._cols
            )
            return self.clone()

        self._multiply_into(other)
        return self

    # -------------------------------------------------------------------------
    # Элиминация
    # -------------------------------------------------------------------------

    def solve(self, augmented: DenseMatrix | None = None) -> "Matrix":
        """
        Gauss-Jordan редукция in-place.

        Args:
            augmented: Правая часть системы (те же rows, любое число
                столбцов). Получает все строковые операции и после прохода
                содержит решение, если матрица приведена к единичной.

        Returns:
            self. Проверки на единичную матрицу нет: вызывающий код
            проверяет is_identity_matrix() / last_elimination сам.
            При несовпадении rows у augmented — no-op.
        """
        self.reduce(augmented)
        return self
