"""
Matrix2x2 — матрица 2×2 со строками Vec2F
"""

from gamemath.core.domain.vec2 import Vec2F
from gamemath.core.matrix.fixed_size import FixedSizeMatrix


class Matrix2x2(FixedSizeMatrix):
    """
    Матрица 2×2.

    solve(x, y) / solve(Vec2F) возвращает Vec2F; row(i) / column(j) — Vec2F.

    Examples:
        >>> Matrix2x2(Vec2F(1, 2), Vec2F(3, 4)).get(1, 0)
        3.0
        >>> print(Matrix2x2(4, 7, 2, 6).inverse())
        0.6 -0.7
        -0.2 0.4
    """

    SIZE = 2
    VECTOR_TYPE = Vec2F
