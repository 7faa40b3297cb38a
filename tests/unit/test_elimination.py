"""
Тесты для Gauss-Jordan элиминации над плоскими буферами

Проверяет:
1. Редукцию к единичной матрице и перенос операций на augmented буфер
2. Перестановку строк при нулевом pivot
3. Пропуск строк без pivot (вырожденные матрицы)
4. Высокие и широкие прямоугольные матрицы
5. Канонизацию -0.0
6. invert_buffer: успех и отказ без изменения исходного буфера
"""

import numpy as np
import pytest

from gamemath.core.matrix.elimination import (
    EliminationReport,
    gauss_jordan,
    identity_buffer,
    invert_buffer,
    is_identity_buffer,
    new_buffer,
    swap_rows,
)


def _buf(*values: float) -> np.ndarray:
    return np.asarray(values, dtype=np.float32)


# =============================================================================
# ТЕСТЫ БУФЕРОВ
# =============================================================================


class TestBuffers:
    """Тесты вспомогательных функций буферов"""

    def test_new_buffer_zeros(self) -> None:
        """Новый буфер — нулевой float32"""
        buf = new_buffer(6)
        assert buf.dtype == np.float32
        assert buf.size == 6
        assert not np.any(buf)

    def test_identity_buffer(self) -> None:
        """Единичный буфер 3×3 в row-major порядке"""
        assert list(identity_buffer(3)) == [1, 0, 0, 0, 1, 0, 0, 0, 1]

    def test_is_identity_exact(self) -> None:
        """Проверка без толерантности"""
        assert is_identity_buffer(identity_buffer(2), 2, 2)
        assert not is_identity_buffer(_buf(1.0, 0.0, 0.0, 0.99999), 2, 2)

    def test_swap_rows(self) -> None:
        """Перестановка двух строк на месте"""
        buf = _buf(1, 2, 3, 4, 5, 6)
        swap_rows(buf, 3, 0, 1)
        assert list(buf) == [4, 5, 6, 1, 2, 3]


# =============================================================================
# ТЕСТЫ GAUSS-JORDAN
# =============================================================================


class TestGaussJordan:
    """Тесты для gauss_jordan"""

    def test_diagonal_with_augmented(self) -> None:
        """[[2,0],[0,4]] | [2,8] → I | [1,2]"""
        primary = _buf(2, 0, 0, 4)
        augmented = _buf(2, 8)

        report = gauss_jordan(primary, 2, 2, augmented, 1)

        assert is_identity_buffer(primary, 2, 2)
        assert list(augmented) == [1.0, 2.0]
        assert report.pivot_columns == (0, 1)
        assert report.fully_pivoted
        assert report.rank == 2

    def test_upper_triangular_system(self) -> None:
        """[[1,1],[0,1]] | [3,1] → [2,1]"""
        primary = _buf(1, 1, 0, 1)
        augmented = _buf(3, 1)

        gauss_jordan(primary, 2, 2, augmented, 1)

        assert is_identity_buffer(primary, 2, 2)
        assert list(augmented) == [2.0, 1.0]

    def test_zero_pivot_swaps_rows(self) -> None:
        """Нулевой pivot — перестановка с первой подходящей строкой ниже"""
        primary = _buf(0, 1, 1, 0)
        augmented = identity_buffer(2)

        report = gauss_jordan(primary, 2, 2, augmented, 2)

        assert is_identity_buffer(primary, 2, 2)
        assert list(augmented) == [0, 1, 1, 0]
        assert report.row_swaps == 1

    def test_singular_row_is_skipped(self) -> None:
        """[[1,2],[2,4]]: вторая строка обнуляется и не получает pivot"""
        primary = _buf(1, 2, 2, 4)

        report = gauss_jordan(primary, 2, 2)

        assert list(primary) == [1, 2, 0, 0]
        assert report.pivot_columns == (0, None)
        assert report.skipped_rows == (1,)
        assert report.rank == 1
        assert not report.fully_pivoted

    def test_missing_pivot_advances_column(self) -> None:
        """Строка без pivot сдвигает столбец; следующая строка берёт столбец 1"""
        primary = _buf(0, 1, 0, 1)

        report = gauss_jordan(primary, 2, 2)

        assert report.pivot_columns == (None, 1)
        assert report.skipped_rows == (0,)
        assert list(primary) == [0, 0, 0, 1]

    def test_tall_matrix_stops_at_last_column(self) -> None:
        """3×2: третья строка остаётся без pivot"""
        primary = _buf(1, 0, 0, 1, 1, 1)

        report = gauss_jordan(primary, 3, 2)

        assert list(primary) == [1, 0, 0, 1, 0, 0]
        assert report.pivot_columns == (0, 1, None)
        assert report.skipped_rows == (2,)

    def test_wide_matrix(self) -> None:
        """2×3 приводится к reduced row echelon форме"""
        primary = _buf(1, 2, 3, 4, 5, 6)

        report = gauss_jordan(primary, 2, 3)

        assert list(primary) == [1, 0, -1, 0, 1, 2]
        assert report.fully_pivoted

    def test_negative_zero_canonicalized(self) -> None:
        """0 / -2 даёт +0.0, а не -0.0"""
        primary = _buf(-2, 0, 0, 1)

        gauss_jordan(primary, 2, 2)

        assert is_identity_buffer(primary, 2, 2)
        assert not np.any(np.signbit(primary))

    def test_empty_matrix(self) -> None:
        """0×0 — пустой отчёт, считается полностью приведённой"""
        report = gauss_jordan(new_buffer(0), 0, 0)
        assert report.pivot_columns == ()
        assert report.fully_pivoted


# =============================================================================
# ТЕСТЫ INVERT_BUFFER
# =============================================================================


class TestInvertBuffer:
    """Тесты для invert_buffer"""

    def test_invertible(self) -> None:
        """[[4,7],[2,6]]⁻¹ = [[0.6,-0.7],[-0.2,0.4]]"""
        source = _buf(4, 7, 2, 6)

        inverse, report = invert_buffer(source, 2)

        assert inverse is not None
        assert list(inverse) == pytest.approx([0.6, -0.7, -0.2, 0.4], abs=1e-5)
        assert report.fully_pivoted

    def test_source_unchanged(self) -> None:
        """Исходный буфер не изменяется"""
        source = _buf(4, 7, 2, 6)
        invert_buffer(source, 2)
        assert list(source) == [4, 7, 2, 6]

    def test_singular_returns_none(self) -> None:
        """Вырожденная матрица → (None, report) с рангом 1"""
        source = _buf(1, 2, 2, 4)

        inverse, report = invert_buffer(source, 2)

        assert inverse is None
        assert report.rank == 1
        assert list(source) == [1, 2, 2, 4]

    def test_report_is_frozen(self) -> None:
        """EliminationReport неизменяем"""
        _, report = invert_buffer(identity_buffer(2), 2)
        assert isinstance(report, EliminationReport)
        with pytest.raises(AttributeError):
            report.row_swaps = 5  # type: ignore[misc]
