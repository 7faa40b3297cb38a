"""
Geometry — 2D геометрические предикаты и преобразования

Функции над «сырыми» координатами и Vec2F:
- Угол точки относительно начала координат
- Векторное/скалярное произведение в 2D
- Проверка принадлежности точки треугольнику, кругу, эллипсу, AABB
- Конверсия линейного индекса ↔ 2D точка (row-major)

Все функции чистые: аргументы-векторы не изменяются.
"""

import math

from gamemath.core.domain.vec2 import Vec2F
from gamemath.core.math.numerical_safeguards import TWO_PI

# =============================================================================
# УГЛЫ
# =============================================================================


def slope_to_rad(x: float, y: float) -> float:
    """
    Угол точки (x, y) относительно начала координат, в радианах [0, 2PI).

    Examples:
        >>> slope_to_rad(1.0, 0.0)
        0.0
        >>> round(slope_to_rad(0.0, 1.0), 6)
        1.570796
        >>> round(slope_to_rad(-1.0, 0.0), 6)
        3.141593
    """
    if x == 0.0 and y == 0.0:
        return 0.0

    radians = math.atan2(y, x)

    # atan2(-0.0, x) == -0.0
    if radians == 0.0:
        return 0.0

    if radians < 0.0:
        return TWO_PI + radians

    return radians


# =============================================================================
# ПРОИЗВЕДЕНИЯ
# =============================================================================


def cross_product(x1: float, y1: float, x2: float, y2: float) -> float:
    """Псевдо-векторное произведение в 2D: x1*y2 - x2*y1."""
    return y2 * x1 - x2 * y1


def dot_product(x1: float, y1: float, x2: float, y2: float) -> float:
    """Скалярное произведение в 2D: x1*x2 + y1*y2."""
    return (x1 * x2) + (y1 * y2)


def side_point_on(point: Vec2F, start: Vec2F, end: Vec2F) -> float:
    """
    С какой стороны линии start → end лежит точка.

    Args:
        point: Проверяемая точка
        start: Начало линии
        end: Конец линии

    Returns:
        Положительное значение, если точка справа/ниже линии относительно
        её направления; отрицательное — слева; 0 — на линии.
    """
    point_diff = point.clone().negate(end)
    start_diff = start.clone().negate(end)
    return start_diff.cross_product(point_diff)


# =============================================================================
# ПРЕДИКАТЫ ПРИНАДЛЕЖНОСТИ
# =============================================================================


def is_point_inside_triangle(point: Vec2F, a: Vec2F, b: Vec2F, c: Vec2F) -> bool:
    """
    Проверка, лежит ли точка внутри треугольника abc.

    Порядок обхода вершин не важен: все три теста сторон должны совпасть.
    """
    b1 = side_point_on(point, a, b) > 0.0
    b2 = side_point_on(point, b, c) > 0.0
    b3 = side_point_on(point, c, a) > 0.0

    return b1 == b2 and b2 == b3


def is_point_inside_circle(x: float, y: float, cx: float, cy: float, cr: float) -> bool:
    """
    Проверка (x - cx)^2 + (y - cy)^2 < cr^2.

    Граница круга не считается внутренней.
    """
    xx = x - cx
    yy = y - cy
    return (xx * xx + yy * yy) < (cr * cr)


def is_point_inside_ellipse(
    x: float,
    y: float,
    cx: float,
    cy: float,
    rw: float,
    rh: float,
) -> bool:
    """
    Проверка (x - cx)^2 / rw^2 + (y - cy)^2 / rh^2 < 1.

    Args:
        x, y: Проверяемая точка
        cx, cy: Центр эллипса
        rw: Полуось по X
        rh: Полуось по Y

    Returns:
        False для вырожденного эллипса (rw == 0 или rh == 0)
    """
    if rw == 0 or rh == 0:
        return False

    xx = x - cx
    yy = y - cy
    distance = (xx * xx) / (rw * rw) + (yy * yy) / (rh * rh)
    return distance < 1.0


def is_point_inside_box(
    x: float,
    y: float,
    bx: float,
    by: float,
    bw: float,
    bh: float,
) -> bool:
    """
    Проверка принадлежности точки AABB (границы включительно).

    Args:
        x, y: Проверяемая точка
        bx, by: Левый верхний угол
        bw, bh: Ширина и высота
    """
    end_x = bx + bw
    end_y = by + bh

    return bx <= x <= end_x and by <= y <= end_y


# =============================================================================
# ИНДЕКСЫ
# =============================================================================


def index_to_point(index: int, width: int) -> Vec2F:
    """
    Линейный индекс → 2D точка (row-major, левый верхний угол = 0).

    Returns:
        Vec2F(index % width, index // width); Vec2F() если width <= 0

    Examples:
        >>> index_to_point(7, 3)
        Vec2F(x=1.0, y=2.0)
    """
    if width <= 0:
        return Vec2F()

    return Vec2F(index % width, index // width)


def point_to_index(x: int, y: int, width: int) -> int:
    """2D точка → линейный индекс: y * width + x."""
    return y * width + x
