"""
Matrix4x4 — матрица 4×4 со строками Vec4F
"""

from gamemath.core.domain.vec4 import Vec4F
from gamemath.core.matrix.fixed_size import FixedSizeMatrix


class Matrix4x4(FixedSizeMatrix):
    """
    Матрица 4×4 (однородные преобразования).

    solve(x, y, z, w) / solve(Vec4F) возвращает Vec4F; row(i) / column(j) — Vec4F.
    """

    SIZE = 4
    VECTOR_TYPE = Vec4F
