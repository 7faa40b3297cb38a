"""
Vec3F — 3D точка/вектор
"""

from gamemath.core.domain.vector_base import VectorBase


class Vec3F(VectorBase):
    """3D точка/вектор (x, y, z)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, **data) -> None:
        super().__init__(x=float(x), y=float(y), z=float(z), **data)

    def set_x(self, value: float) -> "Vec3F":
        self.x = float(value)
        return self

    def set_y(self, value: float) -> "Vec3F":
        self.y = float(value)
        return self

    def set_z(self, value: float) -> "Vec3F":
        self.z = float(value)
        return self

    def inc_x(self, value: float) -> "Vec3F":
        self.x += value
        return self

    def inc_y(self, value: float) -> "Vec3F":
        self.y += value
        return self

    def inc_z(self, value: float) -> "Vec3F":
        self.z += value
        return self

    def cross_product(self, point: "Vec3F") -> "Vec3F":
        """
        Векторное произведение self × point (новый экземпляр).

        Examples:
            >>> Vec3F(1, 0, 0).cross_product(Vec3F(0, 1, 0))
            Vec3F(x=0.0, y=0.0, z=1.0)
        """
        return Vec3F(
            self.y * point.z - self.z * point.y,
            self.z * point.x - self.x * point.z,
            self.x * point.y - self.y * point.x,
        )

    def test_sphere(self, center: "Vec3F", radius: float) -> bool:
        """Попадание внутрь сферы (граница не включается)."""
        return self.magnitude_squared(center) < radius * radius

    def test_box_aabb(self, location: "Vec3F", w: float, h: float, d: float) -> bool:
        """Попадание в AABB с минимальным углом location и размерами w×h×d."""
        return (
            location.x <= self.x <= location.x + w
            and location.y <= self.y <= location.y + h
            and location.z <= self.z <= location.z + d
        )
