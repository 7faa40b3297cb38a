"""
Numerical Safeguards — скалярные примитивы gamemath

Модуль содержит базовые численные функции, на которых построены векторы
и матрицы:
- Константы (PI, DEG_TO_RAD, ...) и толерантности float32 вычислений
- Сравнение float с учётом накопленной потери точности
- clamp / signum / absolute / округления
- Канонизация -0.0 и snap-to-integer коррекция для матричного произведения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ERROR — единственная толерантность для snap-to-integer и равенства матриц
2. canonical_zero никогда не возвращает -0.0
3. snap_to_integer считается в float32 (поведение single-precision)
4. Все функции чистые и детерминированные
"""

import math
from typing import Final

import numpy as np

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

PI: Final[float] = 3.141592653589793
TWO_PI: Final[float] = 6.283185307179586
HALF_PI: Final[float] = 1.570796326794897
INVERSE_PI: Final[float] = 0.318309886192889

# deg = rad * (360 / 2PI), rad = deg * (2PI / 360)
DEG_TO_RAD: Final[float] = 0.017453292519943
RAD_TO_DEG: Final[float] = 57.29577951308232

# Допустимая потеря точности float после арифметики.
# Используется для snap-to-integer в multiply и для равенства матриц/векторов.
ERROR: Final[float] = 2.0e-5

# Допуск для float_equals (совпадает с ERROR, но задаётся отдельно)
PRECISION_LOSS: Final[float] = 2.0e-5

_ONE_F32: Final = np.float32(1.0)
_ERROR_F32: Final = np.float32(ERROR)


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def float_equals(a: float, b: float, threshold: float = 0.0) -> bool:
    """
    Сравнение float с учётом PRECISION_LOSS и дополнительного порога.

    Алгоритм:
        b - PRECISION_LOSS - threshold <= a <= b + PRECISION_LOSS + threshold

    Args:
        a: Первое значение
        b: Второе значение
        threshold: Дополнительная толерантность (default: 0.0)

    Returns:
        True если значения совпадают в пределах толерантности

    Examples:
        >>> float_equals(1.0, 1.00001)
        True
        >>> float_equals(1.0, 1.1)
        False
        >>> float_equals(1.0, 1.1, threshold=0.2)
        True
    """
    tol = PRECISION_LOSS + threshold
    return (b - tol) <= a <= (b + tol)


def within_tolerance(a: float, b: float, tol: float = ERROR) -> bool:
    """
    Проверка |a - b| <= tol.

    Используется для поэлементного равенства матриц.
    """
    diff = a - b
    if diff < 0:
        diff = -diff
    return diff <= tol


def signum(value: float) -> float:
    """
    Знак числа.

    Returns:
        -1.0 если value < 0, 1.0 если value > 0, иначе 0.0
    """
    if value < 0.0:
        return -1.0
    elif value > 0.0:
        return 1.0
    return 0.0


def absolute(value: float) -> float:
    """Абсолютное значение; -0.0 превращается в 0.0."""
    if value <= 0.0:
        return 0.0 - value
    return value


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE 754 результатом при нулевом знаменателе.

    Вместо ZeroDivisionError возвращает ±inf (знак числителя), либо nan
    для 0 / 0. Используется геометрией прямых и эллипсов, где вертикальная
    прямая или вырожденная ось — допустимый вход.

    Examples:
        >>> ieee_divide(6.0, 3.0)
        2.0
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)

    return numerator / denominator


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def floor_int(value: float) -> int:
    """
    Округление вниз до целого.

    Examples:
        >>> floor_int(2.7)
        2
        >>> floor_int(-2.3)
        -3
    """
    return math.floor(value)


def ceil_int(value: float) -> int:
    """
    Округление вверх до целого.

    Examples:
        >>> ceil_int(2.1)
        3
        >>> ceil_int(-2.7)
        -2
    """
    return math.ceil(value)


def round_half_up(value: float) -> int:
    """
    Округление до ближайшего целого, половины — в сторону +inf.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
        >>> round_half_up(-2.6)
        -3
    """
    return math.floor(value + 0.5)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в диапазоне [min_value, max_value].

    Args:
        value: Исходное значение
        min_value: Нижняя граница (optional)
        max_value: Верхняя граница (optional)

    Returns:
        Значение, ограниченное диапазоном

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, max_value=10.0)
        10.0
    """
    if min_value is not None and value < min_value:
        return min_value

    if max_value is not None and value > max_value:
        return max_value

    return value


# =============================================================================
# УГЛЫ
# =============================================================================


def rad_to_deg(radians: float) -> float:
    """Радианы → градусы."""
    return radians * RAD_TO_DEG


def deg_to_rad(degrees: float) -> float:
    """Градусы → радианы."""
    return degrees * DEG_TO_RAD


# =============================================================================
# FLOAT32 КОРРЕКЦИИ (используются матричным ядром)
# =============================================================================


def canonical_zero(value: float | np.floating) -> float | np.floating:
    """
    Канонизация нуля: -0.0 → +0.0.

    Тип значения сохраняется (float32 остаётся float32). Рендеринг матриц
    и равенство опираются на отсутствие -0.0 после элиминации.

    Examples:
        >>> str(canonical_zero(-0.0))
        '0.0'
    """
    if value == 0:
        return type(value)(0.0)
    return value


def snap_to_integer(value: float | np.floating, tol: float = ERROR) -> np.float32:
    """
    Snap-to-integer коррекция накопленной суммы.

    Если дробная часть |value| не больше tol или не меньше 1 - tol,
    значение округляется до ближайшего целого (half up). Иначе значение
    возвращается без изменений. Вычисление идёт в float32.

    Args:
        value: Накопленная сумма (float32 или float)
        tol: Толерантность (default: ERROR)

    Returns:
        Скорректированное значение как np.float32

    Examples:
        >>> float(snap_to_integer(2.9999981))
        3.0
        >>> float(snap_to_integer(-4.000001))
        -4.0
        >>> float(snap_to_integer(0.5))
        0.5
    """
    value = np.float32(value)
    if not np.isfinite(value):
        return value

    tol32 = _ERROR_F32 if tol == ERROR else np.float32(tol)
    magnitude = -value if value < 0 else value
    fraction = np.float32(magnitude - np.float32(int(magnitude)))

    if fraction <= tol32 or (fraction + tol32) >= _ONE_F32:
        return np.float32(round_half_up(float(value)))

    return value


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_dimension(value: int, name: str) -> None:
    """
    Валидация размерности матрицы.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не целое или отрицательное
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
