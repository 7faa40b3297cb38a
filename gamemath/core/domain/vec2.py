"""
Vec2F — 2D точка/вектор

Кроме общей арифметики VectorBase содержит 2D-специфичные операции:
наклон и пересечения прямой, углы, поворот вокруг точки, интерполяцию,
проверки попадания в треугольник / круг / эллипс / AABB.
"""

import math

from gamemath.core.domain.vector_base import VectorBase
from gamemath.core.math.numerical_safeguards import TWO_PI, ieee_divide


class Vec2F(VectorBase):
    """
    2D точка/вектор (x, y).

    Examples:
        >>> Vec2F(3, 4).magnitude()
        5.0
        >>> Vec2F(1, 0).rotate(Vec2F(0, 0), 0.0)
        Vec2F(x=1.0, y=0.0)
    """

    x: float = 0.0
    y: float = 0.0

    def __init__(self, x: float = 0.0, y: float = 0.0, **data) -> None:
        super().__init__(x=float(x), y=float(y), **data)

    def set_x(self, value: float) -> "Vec2F":
        self.x = float(value)
        return self

    def set_y(self, value: float) -> "Vec2F":
        self.y = float(value)
        return self

    def inc_x(self, value: float) -> "Vec2F":
        self.x += value
        return self

    def inc_y(self, value: float) -> "Vec2F":
        self.y += value
        return self

    def set_using_index(self, index: int, width: int) -> "Vec2F":
        """
        Установка из линейного индекса: (index % width, index // width).

        При отрицательных аргументах или width == 0 вектор не меняется.
        """
        if index < 0 or width <= 0:
            return self

        self.x = float(index % width)
        self.y = float(index // width)
        return self

    def index(self, width: int) -> int:
        """Линейный индекс точки в сетке шириной width; 0 при невалидных данных."""
        if width < 0 or self.x < 0 or self.y < 0:
            return 0

        return int(self.y) * width + int(self.x)

    # -------------------------------------------------------------------------
    # Прямые и углы
    # -------------------------------------------------------------------------

    def slope(self, point: "Vec2F | None" = None) -> float:
        """
        Наклон y/x вектора (или прямой через self и point).

        Для вертикальной прямой возвращает ±inf или nan, без исключения.
        """
        if point is not None:
            return self.clone().negate(point).slope()

        return ieee_divide(self.y, self.x)

    def y_intercept(self, point: "Vec2F") -> float:
        """b в y = m*x + b для прямой через self и point."""
        return self.y - (self.slope(point) * self.x)

    def solve_x(self, point_or_slope: "Vec2F | float", y: float) -> float:
        """
        x на прямой при заданном y.

        Args:
            point_or_slope: Вторая точка прямой, либо наклон m
            y: Значение y

        Returns:
            x, либо nan для горизонтальной прямой (решение не единственно).
            При наклоне m == 0 — ±inf или nan, без исключения
        """
        if not isinstance(point_or_slope, Vec2F):
            m = point_or_slope
            return ieee_divide(y - self.y + m * self.x, m)

        diff = self.clone().negate(point_or_slope)
        if diff.x != 0 and diff.y != 0:
            m = self.slope(point_or_slope)
            b = self.y_intercept(point_or_slope)
            return (y - b) / m
        elif diff.x == 0:
            # вертикальная прямая: x одинаков для любого y
            return self.x

        return math.nan

    def solve_y(self, point_or_slope: "Vec2F | float", x: float) -> float:
        """
        y на прямой при заданном x.

        Args:
            point_or_slope: Вторая точка прямой, либо наклон m
            x: Значение x

        Returns:
            y, либо nan для вертикальной прямой
        """
        if not isinstance(point_or_slope, Vec2F):
            m = point_or_slope
            return (m * x) - (m * self.x) + self.y

        diff = self.clone().negate(point_or_slope)
        if diff.y != 0 and diff.x != 0:
            m = self.slope(point_or_slope)
            b = self.y_intercept(point_or_slope)
            return (m * x) + b
        elif diff.y == 0:
            # горизонтальная прямая: y одинаков для любого x
            return self.y

        return math.nan

    def side_point_on(self, end: "Vec2F", test: "Vec2F") -> float:
        """Сторона точки test относительно прямой self → end (знак cross product)."""
        test_diff = test.clone().negate(end)
        this_diff = self.clone().negate(end)
        return this_diff.cross_product(test_diff)

    def atan2_theta(self) -> float:
        return math.atan2(self.y, self.x)

    def radian(self, point: "Vec2F | None" = None) -> float:
        """Угол в [0, 2PI) (относительно начала координат или point)."""
        if point is not None:
            return self.clone().negate(point).radian()

        rad = self.atan2_theta()
        if rad < 0:
            rad += TWO_PI
        return rad

    def cross_product(self, point: "Vec2F") -> float:
        return point.y * self.x - point.x * self.y

    # -------------------------------------------------------------------------
    # Проверки попадания
    # -------------------------------------------------------------------------

    def test_triangle(self, a: "Vec2F", b: "Vec2F", c: "Vec2F") -> bool:
        b1 = a.side_point_on(self, b) > 0.0
        b2 = b.side_point_on(self, c) > 0.0
        b3 = c.side_point_on(self, a) > 0.0
        return b1 == b2 and b2 == b3

    def test_circle(self, center: "Vec2F", radius: float) -> bool:
        """Попадание в круг (граница включительно)."""
        return self.magnitude_squared(center) <= radius * radius

    def test_ellipse(self, center: "Vec2F", rw: float, rh: float) -> bool:
        """
        Попадание в эллипс с полуосями rw, rh (граница включительно).

        Вырожденный эллипс (rw == 0 или rh == 0) не содержит точек.
        """
        if rw == 0 or rh == 0:
            return False

        xx = self.x - center.x
        yy = self.y - center.y
        return (xx * xx) / (rw * rw) + (yy * yy) / (rh * rh) <= 1.0

    def test_box_aabb(self, location: "Vec2F", w: float, h: float) -> bool:
        """Попадание в AABB с минимальным углом location."""
        return (
            location.x <= self.x <= location.x + w
            and location.y <= self.y <= location.y + h
        )

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def rotate(self, center: "Vec2F", radians: float) -> "Vec2F":
        """
        Поворот вокруг center: точка ставится на окружность радиуса
        |self - center| под углом -radians.
        """
        radius = self.magnitude(center)
        px = radius * math.cos(-radians)
        py = radius * math.sin(-radians)
        return self.set(center.x + px, center.y + py)

    def lerp_y(self, m: float, x_offset: float) -> "Vec2F":
        """Сдвиг вдоль прямой с наклоном m на x_offset по X."""
        self.y = m * (self.x + x_offset) - m * self.x + self.y
        self.x = self.x + x_offset
        return self

    def lerp_x(self, m: float, y_offset: float) -> "Vec2F":
        """
        Сдвиг вдоль прямой с наклоном m на y_offset по Y.

        Горизонтальная прямая (m == 0): x становится ±inf или nan.
        """
        self.x = ieee_divide((self.y + y_offset) - self.y + m * self.x, m)
        self.y = self.y + y_offset
        return self

    def lerp_ratio(self, point: "Vec2F", ratio: float) -> "Vec2F":
        """Сдвиг к point на долю ratio расстояния (ratio в [0, 1])."""
        dist = self.magnitude(point) * ratio
        return self.lerp_distance(point, dist)

    def lerp_distance(self, point: "Vec2F", dist: float) -> "Vec2F":
        """Сдвиг к point на абсолютное расстояние dist."""
        step = point.clone().negate(self).normalize().multiply(dist)
        return self.add(step)

    def cartesian_to_polar(self) -> "Vec2F":
        """(x, y) → (radius, radians)."""
        return self.set(self.magnitude(), self.atan2_theta())

    def polar_to_cartesian(self) -> "Vec2F":
        """(radius, radians) → (x, y)."""
        r, t = self.x, self.y
        return self.set(r * math.cos(t), r * math.sin(t))
