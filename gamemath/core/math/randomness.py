"""
Randomness — целочисленные случайные значения с общим seed

Один модульный генератор: srand() делает последующие random_int / random_range
воспроизводимыми.
"""

import random

_RAND = random.Random()


def srand(seed: int) -> None:
    """Установка seed общего генератора."""
    _RAND.seed(seed)


def random_int(max_value: int) -> int:
    """
    Случайное целое в [0, max_value - 1].

    Raises:
        ValueError: Если max_value <= 0
    """
    if max_value <= 0:
        raise ValueError(f"max_value must be positive, got {max_value}")

    return _RAND.randrange(max_value)


def random_range(min_value: int, max_value: int) -> int:
    """
    Случайное целое в [min_value, min_value + |max_value - min_value| - 1].

    Границы могут быть отрицательными. При max_value < min_value диапазон
    отсчитывается от min_value вверх на ту же ширину.

    Raises:
        ValueError: Если min_value == max_value (пустой диапазон)
    """
    width = abs(max_value - min_value)
    if width == 0:
        raise ValueError(f"empty range [{min_value}, {max_value})")

    return min_value + _RAND.randrange(width)
