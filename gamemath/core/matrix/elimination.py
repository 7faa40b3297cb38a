"""
Elimination — Gauss-Jordan редукция над плоскими float32 буферами

Единственная реализация элиминации для Matrix, Matrix2x2 и Matrix4x4.
Работает in-place над row-major буфером (stride = cols) и опциональным
augmented буфером (stride = aug_cols), который получает каждую строковую
операцию основного буфера.

АЛГОРИТМ (один проход, столбец pivot отслеживается отдельно от строки):
    j = 0
    для i = 0 .. rows - 1:
        1. если A[i][j] == 0: поменять строку i с первой строкой y > i,
           где A[y][j] != 0. Нет такой строки → j += 1, следующий i
           (столбец j для этой строки повторно не проверяется)
        2. если A[i][j] != 1: разделить строку i (и augmented строку i)
           на A[i][j]
        3. для каждой k != i: строка k -= A[k][j] * строка i
           (и то же для augmented)
        4. j += 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ровно один проход, исключений для вырожденных матриц нет
2. Любой ноль, полученный делением или вычитанием, хранится как +0.0
3. Augmented буфер получает те же перестановки и операции, что и основной
4. Все вычисления в float32
"""

import logging
from dataclasses import dataclass

import numpy as np

from gamemath.core.math.numerical_safeguards import canonical_zero

logger = logging.getLogger(__name__)

_ZERO = np.float32(0.0)
_ONE = np.float32(1.0)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EliminationReport:
    """Результат одного прохода элиминации."""

    # Столбец pivot для каждой строки; None — строка пропущена (нет pivot)
    pivot_columns: tuple[int | None, ...]
    row_swaps: int
    skipped_rows: tuple[int, ...]

    @property
    def rank(self) -> int:
        """Количество строк, получивших pivot."""
        return sum(1 for col in self.pivot_columns if col is not None)

    @property
    def fully_pivoted(self) -> bool:
        """Каждая строка получила pivot."""
        return not self.skipped_rows


# =============================================================================
# BUFFERS
# =============================================================================


def new_buffer(size: int) -> np.ndarray:
    """Плоский float32 буфер, заполненный нулями."""
    return np.zeros(size, dtype=np.float32)


def identity_buffer(size: int) -> np.ndarray:
    """Плоский row-major буфер единичной матрицы size×size."""
    buf = new_buffer(size * size)
    buf[:: size + 1] = _ONE
    return buf


def is_identity_buffer(buf: np.ndarray, rows: int, cols: int) -> bool:
    """
    Точная (без толерантности) проверка единичной матрицы.

    Для прямоугольной матрицы проверяется главная диагональ = 1,
    остальное = 0.
    """
    for i in range(rows):
        base = i * cols
        for j in range(cols):
            expected = _ONE if i == j else _ZERO
            if buf[base + j] != expected:
                return False
    return True


def swap_rows(buf: np.ndarray, stride: int, r1: int, r2: int) -> None:
    """Перестановка строк r1 и r2 в плоском буфере."""
    a = r1 * stride
    b = r2 * stride
    tmp = buf[a : a + stride].copy()
    buf[a : a + stride] = buf[b : b + stride]
    buf[b : b + stride] = tmp


def _find_pivot_row(buf: np.ndarray, rows: int, cols: int, i: int, j: int) -> int | None:
    """Первая строка y > i с ненулевым элементом в столбце j."""
    for y in range(i + 1, rows):
        if buf[y * cols + j] != _ZERO:
            return y
    return None


def _divide_row(buf: np.ndarray, stride: int, row: int, divisor: np.float32) -> None:
    base = row * stride
    for l in range(stride):
        buf[base + l] = canonical_zero(buf[base + l] / divisor)


def _eliminate_row(
    buf: np.ndarray,
    stride: int,
    target: int,
    pivot_row: int,
    factor: np.float32,
) -> None:
    t = target * stride
    p = pivot_row * stride
    for l in range(stride):
        buf[t + l] = canonical_zero(buf[t + l] - buf[p + l] * factor)


# =============================================================================
# GAUSS-JORDAN
# =============================================================================


def gauss_jordan(
    primary: np.ndarray,
    rows: int,
    cols: int,
    augmented: np.ndarray | None = None,
    aug_cols: int = 0,
) -> EliminationReport:
    """
    Редукция primary к reduced row echelon форме (in-place).

    Args:
        primary: Плоский float32 буфер rows×cols (row-major)
        rows: Количество строк
        cols: Количество столбцов (stride основного буфера)
        augmented: Плоский float32 буфер rows×aug_cols (optional)
        aug_cols: Stride augmented буфера

    Returns:
        EliminationReport с использованными столбцами pivot

    Примечание:
        Если j выходит за последний столбец (высокая прямоугольная матрица),
        оставшиеся строки считаются пропущенными.
    """
    has_aug = augmented is not None and aug_cols > 0

    pivot_columns: list[int | None] = [None] * rows
    skipped: list[int] = []
    swaps = 0
    j = 0

    for i in range(rows):
        if j >= cols:
            skipped.extend(range(i, rows))
            break

        # 1. pivot в столбце j
        if primary[i * cols + j] == _ZERO:
            y = _find_pivot_row(primary, rows, cols, i, j)
            if y is None:
                skipped.append(i)
                j += 1
                continue

            swap_rows(primary, cols, i, y)
            if has_aug:
                swap_rows(augmented, aug_cols, i, y)
            swaps += 1

        # 2. нормализация строки pivot
        entry = primary[i * cols + j]
        if entry != _ONE:
            _divide_row(primary, cols, i, entry)
            if has_aug:
                _divide_row(augmented, aug_cols, i, entry)

        # 3. исключение столбца j из остальных строк
        for k in range(rows):
            if k == i:
                continue
            factor = primary[k * cols + j]
            _eliminate_row(primary, cols, k, i, factor)
            if has_aug:
                _eliminate_row(augmented, aug_cols, k, i, factor)

        pivot_columns[i] = j

        # 4. следующий столбец
        j += 1

    if skipped:
        logger.debug("elimination skipped rows %s (%dx%d)", skipped, rows, cols)

    return EliminationReport(
        pivot_columns=tuple(pivot_columns),
        row_swaps=swaps,
        skipped_rows=tuple(skipped),
    )


def invert_buffer(buf: np.ndarray, size: int) -> tuple[np.ndarray | None, EliminationReport]:
    """
    Обращение квадратной матрицы size×size через Gauss-Jordan.

    Элиминация идёт на копии buf с augmented буфером, инициализированным
    единичной матрицей. Исходный buf не изменяется.

    Returns:
        (inverse, report): inverse — плоский буфер обратной матрицы, либо
        None, если копия не была приведена точно к единичной матрице
    """
    work = buf.copy()
    augmented = identity_buffer(size)

    report = gauss_jordan(work, size, size, augmented, size)

    if not is_identity_buffer(work, size, size):
        logger.debug("matrix %dx%d is not invertible (rank %d)", size, size, report.rank)
        return None, report

    return augmented, report
