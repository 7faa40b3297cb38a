"""
FixedSizeMatrix — квадратная матрица с размером, заданным классом

Общая логика Matrix2x2 и Matrix4x4: размер SIZE фиксирован, строки читаются
и задаются векторами VECTOR_TYPE, solve() возвращает решённый augmented
столбец как вектор. Элиминация — тот же gauss_jordan, что и у Matrix.
"""

import logging
from typing import ClassVar, Iterable, Sequence, TypeVar

import numpy as np

from gamemath.core.domain.vector_base import VectorBase
from gamemath.core.math.numerical_safeguards import ERROR, snap_to_integer
from gamemath.core.matrix.dense import DenseMatrix, MatrixDimensionError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound="FixedSizeMatrix")


class FixedSizeMatrix(DenseMatrix):
    """
    Базовый класс квадратных матриц фиксированного размера.

    Подклассы задают:
        SIZE: Размер стороны
        VECTOR_TYPE: Тип вектора строки / решения (Vec2F, Vec4F)

    Конструктор принимает:
        - ничего              → нулевая матрица
        - SIZE*SIZE скаляров  → элементы построчно
        - SIZE векторов       → строки
        - один аргумент: плоский список, список строк, список векторов
          или другая матрица того же размера
    """

    SIZE: ClassVar[int] = 0
    VECTOR_TYPE: ClassVar[type[VectorBase]] = VectorBase

    def __init__(self, *args) -> None:
        super().__init__()
        self._allocate(self.SIZE, self.SIZE)

        if not args:
            return

        if len(args) == 1:
            self.set_from(args[0])
        else:
            self.set_from(args)

    @classmethod
    def identity(cls: type[F]) -> F:
        """Единичная матрица SIZE×SIZE."""
        matrix = cls()
        for i in range(cls.SIZE):
            matrix.set(i, i, 1.0)
        return matrix

    # -------------------------------------------------------------------------
    # Заполнение
    # -------------------------------------------------------------------------

    def set_from(self: F, source) -> F:
        """
        Глубокое копирование содержимого из source.

        Args:
            source: Матрица того же размера, плоская последовательность из
                SIZE*SIZE чисел, SIZE строк-последовательностей или SIZE векторов

        Raises:
            MatrixDimensionError: Если форма source не соответствует SIZE×SIZE
        """
        n = self.SIZE

        if isinstance(source, DenseMatrix):
            if source.row_count != n or source.col_count != n or not source.is_initialized:
                raise MatrixDimensionError(
                    f"{type(self).__name__} needs a {n}x{n} source, "
                    f"got {source.row_count}x{source.col_count}"
                )
            self._data = source._data.copy()
            return self

        items = list(source)

        if len(items) == n and all(isinstance(r, VectorBase) for r in items):
            for i, row in enumerate(items):
                self.set_row(i, row)
            return self

        if len(items) == n and all(isinstance(r, (Sequence, np.ndarray)) for r in items):
            flat = [v for row in items for v in row]
        else:
            flat = items

        if not self._load_flat(flat):
            raise MatrixDimensionError(
                f"{type(self).__name__} needs {n * n} entries, got {len(flat)}"
            )
        return self

    def set_row(self: F, i: int, row: VectorBase | Iterable[float]) -> F:
        """Запись строки i из вектора или последовательности; вне диапазона — no-op."""
        if not 0 <= i < self.SIZE:
            return self

        values = row.components() if isinstance(row, VectorBase) else tuple(row)
        for j, value in enumerate(values[: self.SIZE]):
            self._data[i * self.SIZE + j] = value
        return self

    def row(self, i: int) -> VectorBase | None:
        """Строка i как новый вектор VECTOR_TYPE (None, если i вне диапазона)."""
        if not 0 <= i < self.SIZE:
            return None

        return self.VECTOR_TYPE(*self.get_row(i))

    def column(self, j: int) -> VectorBase | None:
        """Столбец j как новый вектор VECTOR_TYPE (None, если j вне диапазона)."""
        if not 0 <= j < self.SIZE:
            return None

        return self.VECTOR_TYPE(*self.get_column(j))

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def multiply(self: F, other: DenseMatrix) -> F:
        """
        Матричное произведение self × other (in-place).

        other должна быть SIZE×SIZE, иначе no-op: размер результата
        обязан оставаться фиксированным.
        """
        if other.row_count != self.SIZE or other.col_count != self.SIZE:
            logger.debug(
                "multiply skipped: %s x %dx%d",
                type(self).__name__,
                other.row_count,
                other.col_count,
            )
            return self

        return super().multiply(other)

    def multiply_vector(self, vector: VectorBase | Sequence[float]) -> VectorBase:
        """
        Произведение матрицы на вектор-столбец: новый вектор M × v.

        Суммы проходят ту же snap-to-integer коррекцию, что и multiply().

        Raises:
            TypeError: Если размерность вектора != SIZE
        """
        values = vector.components() if isinstance(vector, VectorBase) else tuple(vector)
        if len(values) != self.SIZE:
            raise TypeError(
                f"{type(self).__name__} needs a {self.SIZE}-component vector, got {len(values)}"
            )

        n = self.SIZE
        column = np.asarray(values, dtype=np.float32)
        result = []
        for i in range(n):
            total = np.float32(0.0)
            for j in range(n):
                total += self._data[i * n + j] * column[j]
            result.append(float(snap_to_integer(total, ERROR)))

        return self.VECTOR_TYPE(*result)

    # -------------------------------------------------------------------------
    # Элиминация
    # -------------------------------------------------------------------------

    def solve(self, *rhs) -> VectorBase:
        """
        Решение системы self · x = rhs методом Gauss-Jordan.

        Матрица редуцируется in-place. Правая часть задаётся SIZE скалярами
        или одним вектором VECTOR_TYPE.

        Returns:
            Новый вектор с содержимым augmented столбца после прохода.
            Если матрица не приведена к единичной, это не решение —
            проверяйте is_identity_matrix().

        Examples:
            >>> Matrix2x2(1, 1, 0, 1).solve(3, 1)
            Vec2F(x=2.0, y=1.0)
        """
        if len(rhs) == 1 and isinstance(rhs[0], VectorBase):
            values = rhs[0].components()
        else:
            values = tuple(rhs)

        if len(values) != self.SIZE:
            raise TypeError(
                f"{type(self).__name__}.solve needs {self.SIZE} values, got {len(values)}"
            )

        augmented = np.asarray(values, dtype=np.float32)
        self._reduce(augmented, 1)

        return self.VECTOR_TYPE(*(float(v) for v in augmented))
