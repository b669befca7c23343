"""
Vector2: двумерный вектор над float

Value-тип (x, y) с планарной алгеброй:
- Скалярное произведение и скалярный "cross" (x1*y2 - y1*x2)
- Нормализация, модуль, расстояние между точками
- Поворот на произвольный угол и на ±90° без тригонометрии
- Отражение относительно нормали, линейная интерполяция

КОНВЕНЦИИ:
1. normalize, clamp_max, clamp_min, reflect_inplace и составные операторы
   (+=, -=, *=, /=) изменяют вектор на месте и возвращают None
   (операторы возвращают сам вектор)
2. Все остальные операции возвращают новый вектор
3. Равенство покомпонентное и точное, без толерантности
4. Предусловия (ненулевой вектор, нормализованная нормаль) не проверяются:
   нарушение даёт бессмысленный или неконечный результат,
   деление на ноль порождает ZeroDivisionError
"""

import math
from dataclasses import dataclass
from typing import Iterator

from geovec.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_NORMALIZED,
    cos_for_angle,
    is_close,
)


@dataclass(slots=True)
class Vector2:
    """Двумерный вектор с компонентами x и y."""

    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    def is_nullvector(self) -> bool:
        """
        Проверка на нулевой вектор (0, 0).

        Сравнение точное, без epsilon: Vector2(0.0001, 0.0) не нулевой.
        """
        return self.x == 0.0 and self.y == 0.0

    def is_normalized(self) -> bool:
        """Проверка единичной длины: |1 - magn_sq| < EPS_NORMALIZED."""
        return abs(1.0 - self.magn_sq()) < EPS_NORMALIZED

    @staticmethod
    def is_collinear(v1: "Vector2", v2: "Vector2") -> bool:
        """
        Проверка, является ли один вектор кратным другому.

        Предусловие: ни один из векторов не нулевой.

        Examples:
            >>> Vector2.is_collinear(Vector2(1.0, 2.0), Vector2(-2.0, -4.0))
            True
        """
        return Vector2.crossp(v1, v2) == 0.0

    def is_close(
        self,
        other: "Vector2",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное приближённое сравнение (см. numerical_safeguards.is_close)."""
        return is_close(self.x, other.x, rel_tol, abs_tol) and is_close(
            self.y, other.y, rel_tol, abs_tol
        )

    # =========================================================================
    # ПРОИЗВЕДЕНИЯ И МЕТРИКИ
    # =========================================================================

    @staticmethod
    def scalar(v1: "Vector2", v2: "Vector2") -> float:
        """
        Скалярное (dot) произведение.

        Examples:
            >>> Vector2.scalar(Vector2(1.25, 0.5), Vector2(2.0, 1.0))
            3.0
        """
        return v1.x * v2.x + v1.y * v2.y

    @staticmethod
    def crossp(v1: "Vector2", v2: "Vector2") -> float:
        """Планарное векторное произведение (z-компонента 3D cross): x1*y2 - y1*x2."""
        return v1.x * v2.y - v1.y * v2.x

    def magn_sq(self) -> float:
        """Квадрат длины. Предпочтительнее magn() там, где достаточно сравнения."""
        return self.x * self.x + self.y * self.y

    def magn(self) -> float:
        """
        Евклидова длина вектора.

        Через math.hypot: не переполняется и не обнуляется у краёв
        диапазона double, где magn_sq() уже inf или 0.0.

        Examples:
            >>> Vector2(1e200, 0.0).magn()
            1e+200
        """
        return math.hypot(self.x, self.y)

    def __abs__(self) -> float:
        return self.magn()

    @staticmethod
    def dist_sq(v1: "Vector2", v2: "Vector2") -> float:
        """Квадрат расстояния между точками, соответствующими векторам."""
        dx = v1.x - v2.x
        dy = v1.y - v2.y
        return dx * dx + dy * dy

    @staticmethod
    def dist(v1: "Vector2", v2: "Vector2") -> float:
        """Расстояние между точками, соответствующими векторам."""
        return math.hypot(v1.x - v2.x, v1.y - v2.y)

    @staticmethod
    def angle_between(v1: "Vector2", v2: "Vector2") -> float:
        """
        Угол между векторами в радианах, в диапазоне [0, pi].

        Считается через atan(o / a) с коррекцией квадранта, где
        o = y1*x2 - x1*y2 (ориентация), a = x1*x2 + y1*y2 (скалярное).

        Для перпендикулярных векторов (a == 0) не определён:
        деление даёт ZeroDivisionError.

        Examples:
            >>> Vector2.angle_between(Vector2(1.0, 0.0), Vector2(-1.0, 0.0))
            3.141592653589793
        """
        o = v1.y * v2.x - v1.x * v2.y
        a = v1.x * v2.x + v1.y * v2.y
        res = math.atan(o / a)

        if o < 0.0:
            return math.pi - res if a <= 0.0 else -res
        return math.pi + res if a < 0.0 else res

    # =========================================================================
    # НОРМАЛИЗАЦИЯ И ОГРАНИЧЕНИЕ ДЛИНЫ (на месте)
    # =========================================================================

    def normalize(self) -> None:
        """
        Приведение длины к 1 с сохранением направления (на месте).

        Предусловие: вектор не нулевой (иначе ZeroDivisionError).
        """
        inv_magn = 1.0 / self.magn()
        self.x *= inv_magn
        self.y *= inv_magn

    def normalized(self) -> "Vector2":
        """Нормализованная копия; исходный вектор не меняется."""
        result = self.copy()
        result.normalize()
        return result

    def clamp_max(self, max_magn: float) -> None:
        """Уменьшение длины до max_magn, если она больше (на месте)."""
        length = self.magn()
        if length > max_magn:
            factor = max_magn / length
            self.x *= factor
            self.y *= factor

    def clamp_min(self, min_magn: float) -> None:
        """
        Увеличение длины до min_magn, если она меньше (на месте).

        Для нулевого вектора при min_magn > 0 деление на ноль
        (ZeroDivisionError).
        """
        length = self.magn()
        if length < min_magn:
            factor = min_magn / length
            self.x *= factor
            self.y *= factor

    # =========================================================================
    # ИНТЕРПОЛЯЦИЯ, ПОВОРОТ, ОТРАЖЕНИЕ
    # =========================================================================

    @staticmethod
    def lerp(v1: "Vector2", v2: "Vector2", factor: float) -> "Vector2":
        """
        Линейная интерполяция v1*(1 - factor) + v2*factor.

        factor вне [0, 1] даёт экстраполяцию.
        """
        rest = 1.0 - factor
        return Vector2(v1.x * rest + v2.x * factor, v1.y * rest + v2.y * factor)

    def rotate(self, angle: float) -> "Vector2":
        """
        Поворот против часовой стрелки на angle радиан.

        Косинус берётся из уже посчитанного синуса, когда угол
        лежит в [-pi/2, pi/2] (см. cos_for_angle).

        Examples:
            >>> Vector2(1.0, 1.0).rotate(0.5 * math.pi)
            Vector2(x=-1.0, y=1.0)
        """
        sin_a = math.sin(angle)
        cos_a = cos_for_angle(angle, sin_a)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.y * cos_a + self.x * sin_a,
        )

    def rotate_right(self) -> "Vector2":
        """Поворот на +90° по правилу правой руки (против часовой стрелки)."""
        return Vector2(-self.y, self.x)

    def rotate_left(self) -> "Vector2":
        """Поворот на -90° (по часовой стрелке)."""
        return Vector2(self.y, -self.x)

    def reflect(self, n0: "Vector2") -> "Vector2":
        """
        Отражение относительно поверхности с нормалью n0: v - 2*(v·n0)*n0.

        Предусловие: n0 нормализован (не проверяется).
        """
        factor = 2.0 * Vector2.scalar(self, n0)
        return Vector2(self.x - n0.x * factor, self.y - n0.y * factor)

    def reflect_inplace(self, n0: "Vector2") -> None:
        """То же, что reflect, но изменяет сам вектор."""
        factor = 2.0 * Vector2.scalar(self, n0)
        self.x -= n0.x * factor
        self.y -= n0.y * factor

    # =========================================================================
    # ИМЕНОВАННЫЕ АРИФМЕТИЧЕСКИЕ ОПЕРАЦИИ
    # =========================================================================

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    def divide(self, quotient: float) -> "Vector2":
        """Деление на скаляр через умножение на обратное значение."""
        inv = 1.0 / quotient
        return Vector2(self.x * inv, self.y * inv)

    def negate(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor: float) -> "Vector2":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self.scale(factor)

    def __rmul__(self, factor: float) -> "Vector2":
        return self.__mul__(factor)

    def __truediv__(self, quotient: float) -> "Vector2":
        if not isinstance(quotient, (int, float)):
            return NotImplemented
        return self.divide(quotient)

    def __neg__(self) -> "Vector2":
        return self.negate()

    def __iadd__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, factor: float) -> "Vector2":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        self.x *= factor
        self.y *= factor
        return self

    def __itruediv__(self, quotient: float) -> "Vector2":
        if not isinstance(quotient, (int, float)):
            return NotImplemented
        inv = 1.0 / quotient
        self.x *= inv
        self.y *= inv
        return self

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
