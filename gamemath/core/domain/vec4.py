"""
Vec4F — 4D вектор (однородные координаты, строки Matrix4x4)
"""

from gamemath.core.domain.vector_base import VectorBase


class Vec4F(VectorBase):
    """4D вектор (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        w: float = 0.0,
        **data,
    ) -> None:
        super().__init__(x=float(x), y=float(y), z=float(z), w=float(w), **data)

    def set_x(self, value: float) -> "Vec4F":
        self.x = float(value)
        return self

    def set_y(self, value: float) -> "Vec4F":
        self.y = float(value)
        return self

    def set_z(self, value: float) -> "Vec4F":
        self.z = float(value)
        return self

    def set_w(self, value: float) -> "Vec4F":
        self.w = float(value)
        return self

    def inc_x(self, value: float) -> "Vec4F":
        self.x += value
        return self

    def inc_y(self, value: float) -> "Vec4F":
        self.y += value
        return self

    def inc_z(self, value: float) -> "Vec4F":
        self.z += value
        return self

    def inc_w(self, value: float) -> "Vec4F":
        self.w += value
        return self
