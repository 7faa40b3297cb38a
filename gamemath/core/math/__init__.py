"""
Core math modules для gamemath

Скалярные примитивы и случайные числа.
Геометрические предикаты (зависят от Vec2F) импортируются напрямую
из gamemath.core.math.geometry.
"""

# Numerical Safeguards
from gamemath.core.math.numerical_safeguards import (
    # Constants
    DEG_TO_RAD,
    ERROR,
    HALF_PI,
    INVERSE_PI,
    PI,
    PRECISION_LOSS,
    RAD_TO_DEG,
    TWO_PI,
    # Comparisons
    absolute,
    float_equals,
    ieee_divide,
    signum,
    within_tolerance,
    # Rounding
    ceil_int,
    clamp,
    floor_int,
    round_half_up,
    # Angles
    deg_to_rad,
    rad_to_deg,
    # Float32 corrections
    canonical_zero,
    snap_to_integer,
    # Validation
    validate_dimension,
)

# Randomness
from gamemath.core.math.randomness import random_int, random_range, srand

__all__ = [
    # Numerical Safeguards — Constants
    "DEG_TO_RAD",
    "ERROR",
    "HALF_PI",
    "INVERSE_PI",
    "PI",
    "PRECISION_LOSS",
    "RAD_TO_DEG",
    "TWO_PI",
    # Numerical Safeguards — Comparisons
    "absolute",
    "float_equals",
    "ieee_divide",
    "signum",
    "within_tolerance",
    # Numerical Safeguards — Rounding
    "ceil_int",
    "clamp",
    "floor_int",
    "round_half_up",
    # Numerical Safeguards — Angles
    "deg_to_rad",
    "rad_to_deg",
    # Numerical Safeguards — Float32 corrections
    "canonical_zero",
    "snap_to_integer",
    # Numerical Safeguards — Validation
    "validate_dimension",
    # Randomness
    "random_int",
    "random_range",
    "srand",
]
