"""
VectorBase — общая модель для Vec2F / Vec3F / Vec4F

Mutable Pydantic модель фиксированной размерности. Компоненты — объявленные
поля модели (x, y[, z[, w]]), порядок полей задаёт порядок компонент.

Все мутирующие операции изменяют экземпляр и возвращают self для chaining:

    >>> Vec2F(1, 2).add(3, 4).multiply(2)
    Vec2F(x=8.0, y=12.0)

Операнд арифметики может быть:
- вектор той же размерности
- по одному скаляру на компоненту
- один скаляр (для multiply / divide — применяется ко всем компонентам)
"""

import math
from typing import TypeVar

from pydantic import BaseModel

from gamemath.core.math.numerical_safeguards import ERROR

V = TypeVar("V", bound="VectorBase")


class VectorBase(BaseModel):
    """
    Базовый вектор фиксированной размерности.

    Подклассы объявляют только float поля; вся покомпонентная арифметика
    реализована здесь через model_fields.
    """

    model_config = {"validate_assignment": False}

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    @classmethod
    def dimension(cls) -> int:
        """Количество компонент."""
        return len(cls.model_fields)

    @classmethod
    def component_names(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)

    def components(self) -> tuple[float, ...]:
        """Компоненты в порядке объявления полей."""
        return tuple(getattr(self, name) for name in self.component_names())

    def __getitem__(self, index: int) -> float:
        return getattr(self, self.component_names()[index])

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self.component_names()[index], float(value))

    def __len__(self) -> int:
        return self.dimension()

    def _assign(self: V, values) -> V:
        for name, value in zip(self.component_names(), values):
            setattr(self, name, float(value))
        return self

    def _operand(self, args: tuple, broadcast: bool) -> tuple[float, ...]:
        """
        Нормализация аргументов арифметики в кортеж компонент.

        Raises:
            TypeError: Если аргументы не соответствуют размерности
        """
        dim = self.dimension()

        if len(args) == 1:
            other = args[0]
            if isinstance(other, VectorBase):
                if other.dimension() != dim:
                    raise TypeError(
                        f"{type(self).__name__} operand must have {dim} components, "
                        f"got {type(other).__name__}"
                    )
                return other.components()
            if broadcast:
                return (float(other),) * dim

        if len(args) != dim:
            raise TypeError(
                f"{type(self).__name__} expects a vector or {dim} components, got {len(args)}"
            )

        return tuple(float(a) for a in args)

    # -------------------------------------------------------------------------
    # Мутаторы
    # -------------------------------------------------------------------------

    def set(self: V, *args) -> V:
        """Установка всех компонент (из вектора или скаляров)."""
        return self._assign(self._operand(args, broadcast=False))

    def add(self: V, *args) -> V:
        """Покомпонентное сложение."""
        other = self._operand(args, broadcast=False)
        return self._assign(a + b for a, b in zip(self.components(), other))

    def negate(self: V, *args) -> V:
        """Покомпонентное вычитание."""
        other = self._operand(args, broadcast=False)
        return self._assign(a - b for a, b in zip(self.components(), other))

    def multiply(self: V, *args) -> V:
        """Покомпонентное умножение (или масштабирование одним скаляром)."""
        other = self._operand(args, broadcast=True)
        return self._assign(a * b for a, b in zip(self.components(), other))

    def divide(self: V, *args) -> V:
        """
        Покомпонентное деление (или деление на один скаляр).

        Raises:
            ZeroDivisionError: Если делитель содержит 0
        """
        other = self._operand(args, broadcast=True)
        return self._assign(a / b for a, b in zip(self.components(), other))

    def ceil(self: V) -> V:
        return self._assign(math.ceil(a) for a in self.components())

    def floor(self: V) -> V:
        return self._assign(math.floor(a) for a in self.components())

    def abs(self: V) -> V:
        return self._assign(-a if a < 0 else a for a in self.components())

    def invert(self: V) -> V:
        """Смена знака всех компонент."""
        return self._assign(-a for a in self.components())

    # -------------------------------------------------------------------------
    # Метрики
    # -------------------------------------------------------------------------

    def magnitude_squared(self, point: "VectorBase | None" = None) -> float:
        """
        Квадрат длины вектора, либо квадрат расстояния до point.

        Args:
            point: Точка отсчёта (optional)
        """
        if point is None:
            return sum(a * a for a in self.components())

        diff = self._operand((point,), broadcast=False)
        return sum((a - b) * (a - b) for a, b in zip(self.components(), diff))

    def magnitude(self, point: "VectorBase | None" = None) -> float:
        """Длина вектора, либо расстояние до point."""
        return math.sqrt(self.magnitude_squared(point))

    def dot_product(self, point: "VectorBase") -> float:
        other = self._operand((point,), broadcast=False)
        return sum(a * b for a, b in zip(self.components(), other))

    def normalize(self: V, point: "VectorBase | None" = None) -> V:
        """
        Нормализация по длине вектора (или по расстоянию до point).

        При нулевой длине — no-op, без исключения.
        """
        mag = self.magnitude(point)
        if mag == 0:
            return self

        return self._assign(a / mag if a != 0 else a for a in self.components())

    # -------------------------------------------------------------------------
    # Копирование и сравнение
    # -------------------------------------------------------------------------

    def clone(self: V) -> V:
        """Независимая копия."""
        return self.model_copy()

    def equals(self, point: "VectorBase", threshold: float = 0.0) -> bool:
        """
        Сравнение с толерантностью: |a - b| <= ERROR + threshold покомпонентно.
        """
        if not isinstance(point, VectorBase) or point.dimension() != self.dimension():
            return False

        tol = ERROR + threshold
        return all(
            (a + tol >= b) and (a - tol <= b)
            for a, b in zip(self.components(), point.components())
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "{" + ", ".join(str(a) for a in self.components()) + "}"
