"""
Vector value types.

Mutable Pydantic models Vec2F, Vec3F, Vec4F sharing VectorBase arithmetic.
"""

from gamemath.core.domain.vec2 import Vec2F
from gamemath.core.domain.vec3 import Vec3F
from gamemath.core.domain.vec4 import Vec4F
from gamemath.core.domain.vector_base import VectorBase

__all__ = [
    "VectorBase",
    "Vec2F",
    "Vec3F",
    "Vec4F",
]
