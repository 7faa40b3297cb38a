"""
Тесты для модуля Geometry

Проверяет:
1. slope_to_rad в диапазоне [0, 2PI)
2. 2D cross / dot product и сторону точки относительно линии
3. Предикаты принадлежности (треугольник, круг, эллипс, AABB)
4. Конверсию линейный индекс ↔ точка
"""

import math

import pytest

from gamemath.core.domain import Vec2F
from gamemath.core.math.geometry import (
    cross_product,
    dot_product,
    index_to_point,
    is_point_inside_box,
    is_point_inside_circle,
    is_point_inside_ellipse,
    is_point_inside_triangle,
    point_to_index,
    side_point_on,
    slope_to_rad,
)

# =============================================================================
# ТЕСТЫ УГЛОВ И ПРОИЗВЕДЕНИЙ
# =============================================================================


class TestSlopeToRad:
    """Тесты для slope_to_rad"""

    def test_axes(self) -> None:
        """Оси дают 0, PI/2, PI, 3PI/2"""
        assert slope_to_rad(1.0, 0.0) == 0.0
        assert slope_to_rad(0.0, 1.0) == pytest.approx(math.pi / 2)
        assert slope_to_rad(-1.0, 0.0) == pytest.approx(math.pi)
        assert slope_to_rad(0.0, -1.0) == pytest.approx(3 * math.pi / 2)

    def test_origin(self) -> None:
        """Нулевой вектор → 0"""
        assert slope_to_rad(0.0, 0.0) == 0.0

    def test_negative_zero_y(self) -> None:
        """atan2(-0.0, x) не даёт отрицательный ноль"""
        result = slope_to_rad(1.0, -0.0)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0


class TestProducts:
    """Тесты cross / dot product"""

    def test_cross_product(self) -> None:
        """Знак cross product зависит от порядка векторов"""
        assert cross_product(1.0, 0.0, 0.0, 1.0) == 1.0
        assert cross_product(0.0, 1.0, 1.0, 0.0) == -1.0

    def test_dot_product(self) -> None:
        """(1, 2) · (3, 4) = 11"""
        assert dot_product(1.0, 2.0, 3.0, 4.0) == 11.0

    def test_side_point_on(self) -> None:
        """Точки по разные стороны линии дают разные знаки"""
        start = Vec2F(0, 0)
        end = Vec2F(4, 0)
        left = side_point_on(Vec2F(2, 1), start, end)
        right = side_point_on(Vec2F(2, -1), start, end)
        assert left * right < 0

    def test_side_point_on_does_not_mutate(self) -> None:
        """Аргументы не изменяются"""
        point = Vec2F(2, 1)
        start = Vec2F(0, 0)
        end = Vec2F(4, 0)
        side_point_on(point, start, end)
        assert point == Vec2F(2, 1)
        assert start == Vec2F(0, 0)


# =============================================================================
# ТЕСТЫ ПРЕДИКАТОВ
# =============================================================================


class TestContainment:
    """Тесты предикатов принадлежности"""

    def test_triangle(self) -> None:
        """Точка внутри и снаружи треугольника"""
        a, b, c = Vec2F(0, 0), Vec2F(4, 0), Vec2F(0, 4)
        assert is_point_inside_triangle(Vec2F(1, 1), a, b, c)
        assert not is_point_inside_triangle(Vec2F(5, 5), a, b, c)

    def test_circle_boundary_exclusive(self) -> None:
        """Граница круга не входит"""
        assert is_point_inside_circle(1.0, 1.0, 0.0, 0.0, 2.0)
        assert not is_point_inside_circle(3.0, 4.0, 0.0, 0.0, 5.0)

    def test_ellipse_boundary_exclusive(self) -> None:
        """Граница эллипса не входит"""
        assert is_point_inside_ellipse(1.0, 0.5, 0.0, 0.0, 4.0, 2.0)
        assert not is_point_inside_ellipse(4.0, 0.0, 0.0, 0.0, 4.0, 2.0)

    def test_degenerate_ellipse_contains_nothing(self) -> None:
        """Нулевая полуось → False без ZeroDivisionError"""
        assert not is_point_inside_ellipse(1.0, 1.0, 0.0, 0.0, 0.0, 1.0)
        assert not is_point_inside_ellipse(0.0, 0.0, 0.0, 0.0, 2.0, 0.0)

    def test_box_boundary_inclusive(self) -> None:
        """Границы AABB входят"""
        assert is_point_inside_box(1.0, 1.0, 1.0, 1.0, 2.0, 2.0)
        assert is_point_inside_box(3.0, 3.0, 1.0, 1.0, 2.0, 2.0)
        assert not is_point_inside_box(3.5, 2.0, 1.0, 1.0, 2.0, 2.0)


# =============================================================================
# ТЕСТЫ ИНДЕКСОВ
# =============================================================================


class TestIndices:
    """Тесты конверсии индексов"""

    def test_index_to_point(self) -> None:
        """Линейный индекс → (x, y) по ширине"""
        assert index_to_point(7, 3) == Vec2F(1, 2)
        assert index_to_point(0, 5) == Vec2F(0, 0)

    def test_zero_width(self) -> None:
        """Нулевая ширина → нулевая точка"""
        assert index_to_point(7, 0) == Vec2F()

    def test_point_to_index(self) -> None:
        """(x, y) → y * width + x"""
        assert point_to_index(1, 2, 3) == 7

    @pytest.mark.parametrize("index", [0, 4, 11, 23])
    def test_round_trip(self, index: int) -> None:
        """index → point → index возвращает исходный индекс"""
        point = index_to_point(index, 6)
        assert point_to_index(int(point.x), int(point.y), 6) == index
