"""
DenseMatrix — общее хранилище и алгебра матриц

Плотная матрица rows×cols из float32, хранимая в одном плоском row-major
буфере numpy (stride = cols). Базовый класс для Matrix (произвольные
размеры) и FixedSizeMatrix (Matrix2x2 / Matrix4x4).

КОНТРАКТЫ:
1. get() вне диапазона или на неинициализированной матрице → 0.0, без исключений
2. set() вне диапазона → no-op
3. add / subtract при несовпадении размеров → no-op (возвращается self)
4. multiply применяет snap-to-integer коррекцию к каждой сумме
5. Все мутирующие операции возвращают self (chaining)
6. == — совпадение размеров и поэлементная толерантность ERROR
"""

import logging
from typing import Iterable, TypeVar

import numpy as np

from gamemath.core.math.numerical_safeguards import ERROR, snap_to_integer, within_tolerance
from gamemath.core.matrix.elimination import (
    EliminationReport,
    gauss_jordan,
    invert_buffer,
    is_identity_buffer,
    new_buffer,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="DenseMatrix")

_ZERO = np.float32(0.0)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixDimensionError(ValueError):
    """
    Некорректные размеры при создании матрицы.

    Поднимается только при конструировании (отрицательные размеры, длина
    плоских данных не равна rows * cols). Арифметика с несовместимыми
    размерами исключений не поднимает.
    """

    pass


# =============================================================================
# DENSE MATRIX
# =============================================================================


class DenseMatrix:
    """
    Плотная float32 матрица с in-place арифметикой.

    Атрибуты:
        _rows, _cols: Размеры
        _data: Плоский буфер numpy float32 длины rows * cols, либо None
    """

    __slots__ = ("_rows", "_cols", "_data", "last_elimination")

    def __init__(self) -> None:
        self._rows = 0
        self._cols = 0
        self._data: np.ndarray | None = None
        self.last_elimination: EliminationReport | None = None

    # -------------------------------------------------------------------------
    # Хранилище
    # -------------------------------------------------------------------------

    def _allocate(self, rows: int, cols: int) -> None:
        self._rows = rows
        self._cols = cols
        self._data = new_buffer(rows * cols)

    def _new_like(self: M) -> M:
        """Пустой экземпляр того же класса (без вызова __init__ подкласса)."""
        clone = type(self).__new__(type(self))
        DenseMatrix.__init__(clone)
        return clone

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def col_count(self) -> int:
        return self._cols

    @property
    def is_initialized(self) -> bool:
        return self._data is not None

    def _in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self._rows and 0 <= j < self._cols

    def get(self, i: int, j: int) -> float:
        """
        Элемент (i, j).

        Returns:
            Значение элемента, либо 0.0 если индекс вне диапазона или
            матрица не инициализирована
        """
        if self._data is None or not self._in_bounds(i, j):
            return 0.0

        return float(self._data[i * self._cols + j])

    def set(self, i: int, j: int, value: float) -> None:
        """Запись элемента (i, j); вне диапазона — no-op."""
        if self._data is None or not self._in_bounds(i, j):
            return

        self._data[i * self._cols + j] = value

    def get_row(self, i: int) -> list[float]:
        """Строка i как список (пустой, если i вне диапазона)."""
        if self._data is None or not 0 <= i < self._rows:
            return []

        base = i * self._cols
        return [float(v) for v in self._data[base : base + self._cols]]

    def get_column(self, j: int) -> list[float]:
        """Столбец j как список (пустой, если j вне диапазона)."""
        if self._data is None or not 0 <= j < self._cols:
            return []

        return [float(v) for v in self._data[j :: self._cols]]

    def to_rows(self) -> list[list[float]]:
        """Матрица как список строк."""
        return [self.get_row(i) for i in range(self._rows)]

    def clear_to(self: M, value: float) -> M:
        """Заполнение всех элементов значением value."""
        if self._data is not None:
            self._data.fill(value)
        return self

    def _load_flat(self, data: Iterable[float]) -> bool:
        values = np.asarray(list(data), dtype=np.float32)
        if values.size != self._rows * self._cols:
            return False

        self._data = values
        return True

    def clone(self: M) -> M:
        """Глубокая копия (неинициализированная матрица остаётся такой же)."""
        clone = self._new_like()
        clone._rows = self._rows
        clone._cols = self._cols
        clone._data = None if self._data is None else self._data.copy()
        return clone

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def same_dimensions(self, other: "DenseMatrix") -> bool:
        return self._rows == other._rows and self._cols == other._cols

    def can_multiply(self, other: "DenseMatrix") -> bool:
        """self.cols == other.rows"""
        return self._cols == other._rows

    def transpose(self: M) -> M:
        """
        Транспонирование in-place.

        Квадратная матрица — перестановка элементов, прямоугольная —
        новый буфер cols×rows.
        """
        if self._data is None:
            return self

        rows, cols = self._rows, self._cols

        if rows == cols:
            for i in range(rows):
                for j in range(i + 1, cols):
                    a = i * cols + j
                    b = j * cols + i
                    self._data[a], self._data[b] = self._data[b], self._data[a]
        else:
            self._data = np.ascontiguousarray(
                self._data.reshape(rows, cols).T
            ).reshape(rows * cols)

        self._rows, self._cols = cols, rows
        return self

    def add(self: M, other: "DenseMatrix") -> M:
        """Поэлементное сложение; при несовпадении размеров — no-op."""
        if not self.same_dimensions(other) or self._data is None or other._data is None:
            logger.debug(
                "add skipped: %dx%d + %dx%d", self._rows, self._cols, other._rows, other._cols
            )
            return self

        self._data += other._data
        return self

    def subtract(self: M, other: "DenseMatrix") -> M:
        """Поэлементное вычитание; при несовпадении размеров — no-op."""
        if not self.same_dimensions(other) or self._data is None or other._data is None:
            logger.debug(
                "subtract skipped: %dx%d - %dx%d", self._rows, self._cols, other._rows, other._cols
            )
            return self

        self._data -= other._data
        return self

    def scale(self: M, value: float) -> M:
        """Умножение всех элементов на value."""
        if self._data is not None:
            self._data *= np.float32(value)
        return self

    def _multiply_into(self, other: "DenseMatrix") -> None:
        """
        self = self × other (размеры уже проверены).

        Каждая сумма накапливается в float32 и проходит snap_to_integer.
        """
        rows, inner, cols = self._rows, self._cols, other._cols
        a = self._data
        b = other._data
        out = new_buffer(rows * cols)

        for k in range(cols):
            for i in range(rows):
                total = np.float32(0.0)
                base = i * inner
                for j in range(inner):
                    total += a[base + j] * b[j * cols + k]
                out[i * cols + k] = snap_to_integer(total, ERROR)

        self._data = out
        self._cols = cols

    def multiply(self: M, other: "DenseMatrix") -> M:
        """
        Матричное произведение self × other (in-place).

        При несовместимых размерах self не изменяется.
        """
        if not self.can_multiply(other) or self._data is None or other._data is None:
            logger.debug(
                "multiply skipped: %dx%d x %dx%d", self._rows, self._cols, other._rows, other._cols
            )
            return self

        self._multiply_into(other)
        return self

    def power(self: M, exponent: int) -> M:
        """
        Целая степень квадратной матрицы: n - 1 самоумножений.

        exponent <= 0 или неквадратная матрица → no-op.
        """
        if not self.is_square_matrix() or exponent <= 0 or self._data is None:
            return self

        base = self.clone()
        for _ in range(1, exponent):
            self._multiply_into(base)

        return self

    # -------------------------------------------------------------------------
    # Элиминация
    # -------------------------------------------------------------------------

    def _reduce(self, augmented: np.ndarray | None = None, aug_cols: int = 0) -> EliminationReport:
        """Один проход Gauss-Jordan над собственным буфером."""
        report = gauss_jordan(self._data, self._rows, self._cols, augmented, aug_cols)
        self.last_elimination = report
        return report

    def reduce(self, augmented: "DenseMatrix | None" = None) -> EliminationReport | None:
        """
        Gauss-Jordan редукция in-place, augmented получает те же строковые операции.

        Args:
            augmented: Правая часть (те же rows, любое число столбцов)

        Returns:
            EliminationReport прохода, либо None (no-op), если матрица
            не инициализирована или rows у augmented не совпадает
        """
        if self._data is None:
            return None

        if augmented is None:
            return self._reduce()

        if augmented._rows != self._rows or augmented._data is None:
            logger.debug(
                "reduce skipped: augmented has %d rows, matrix has %d",
                augmented._rows,
                self._rows,
            )
            return None

        return self._reduce(augmented._data, augmented._cols)

    def try_inverse(self) -> bool:
        """
        Обращение матрицы in-place с явным результатом.

        Элиминация на копии с augmented единичной матрицей. Если копия не
        приведена ТОЧНО к единичной матрице (без толерантности), матрица
        не изменяется.

        Returns:
            True если матрица заменена обратной
        """
        if not self.is_square_matrix() or self._data is None:
            return False

        inverse, report = invert_buffer(self._data, self._rows)
        self.last_elimination = report

        if inverse is None:
            return False

        self._data = inverse
        return True

    def inverse(self: M) -> M:
        """
        Обращение матрицы in-place.

        Необратимая (или неквадратная) матрица не изменяется — это сигнал
        «обратной нет», без исключения. Проверка: try_inverse().
        """
        self.try_inverse()
        return self

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def _entries(self) -> np.ndarray:
        return self._data if self._data is not None else new_buffer(0)

    def is_square_matrix(self) -> bool:
        return self._rows == self._cols

    def is_zero_matrix(self) -> bool:
        return not np.any(self._entries())

    def is_lower_triangle_matrix(self) -> bool:
        """Все элементы выше главной диагонали равны 0."""
        for i in range(self._rows - 1):
            for j in range(i + 1, self._cols):
                if self._data[i * self._cols + j] != _ZERO:
                    return False
        return True

    def is_upper_triangle_matrix(self) -> bool:
        """Все элементы ниже главной диагонали равны 0."""
        for i in range(1, self._rows):
            for j in range(min(i, self._cols)):
                if self._data[i * self._cols + j] != _ZERO:
                    return False
        return True

    def is_symmetric_matrix(self) -> bool:
        if not self.is_square_matrix():
            return False

        n = self._rows
        for i in range(n - 1):
            for j in range(i + 1, n):
                if self._data[i * n + j] != self._data[j * n + i]:
                    return False
        return True

    def is_diagonal_matrix(self) -> bool:
        """Вне диагонали только нули; нулевая матрица диагональной не считается."""
        if self.is_zero_matrix():
            return False

        return self.is_lower_triangle_matrix() and self.is_upper_triangle_matrix()

    def is_identity_matrix(self) -> bool:
        """Точная проверка единичной матрицы (без толерантности)."""
        return is_identity_buffer(self._entries(), self._rows, self._cols)

    def is_row_vector(self) -> bool:
        return self._rows == 1

    def is_column_vector(self) -> bool:
        return self._cols == 1

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def equals(self, other: "DenseMatrix", tol: float = ERROR) -> bool:
        """Совпадение размеров и |a - b| <= tol для каждой пары элементов."""
        if not self.same_dimensions(other):
            return False

        return all(
            within_tolerance(float(a), float(b), tol)
            for a, b in zip(self._entries(), other._entries())
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """
        Строки через '\\n', элементы через пробел.

        Каждый элемент — кратчайшая десятичная запись, однозначно задающая
        float32 значение, без экспоненты и без хвостового '.0'.
        """
        if self._data is None:
            return ""

        lines = []
        for i in range(self._rows):
            base = i * self._cols
            row = self._data[base : base + self._cols]
            lines.append(" ".join(np.format_float_positional(v, trim="-") for v in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self._rows}, cols={self._cols}, data={self.to_rows()})"
