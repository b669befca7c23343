"""
Vector3: трёхмерный вектор над float

Value-тип (x, y, z) с пространственной алгеброй. Повторяет поверхность
Vector2 и добавляет:
- Векторное произведение (crossp) и проверку компланарности
- Угол между векторами через acos (беззнаковый, [0, pi])
- Поворот вокруг оси по формуле Родрига:
      v_rot = v*cos(a) + (n × v)*sin(a) + n*(n·v)*(1 - cos(a))
- Вложение Vector2 в плоскость z = 0

Конвенции мутации и предусловия те же, что у Vector2: ось поворота и
нормаль отражения должны быть нормализованы, но это не проверяется.
"""

import math
from dataclasses import dataclass
from typing import Iterator

from geovec.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_NORMALIZED,
    clamp,
    cos_for_angle,
    is_close,
)
from geovec.core.math.vector2 import Vector2


@dataclass(slots=True)
class Vector3:
    """Трёхмерный вектор с компонентами x, y и z."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vector2(cls, v: Vector2) -> "Vector3":
        """Вложение двумерного вектора в плоскость z = 0."""
        return cls(v.x, v.y, 0.0)

    def to_vector2(self) -> Vector2:
        """Проекция на плоскость xy (z отбрасывается)."""
        return Vector2(self.x, self.y)

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    def is_nullvector(self) -> bool:
        """
        Проверка на нулевой вектор (0, 0, 0).

        Examples:
            >>> Vector3(0.0, 0.0, 0.0).is_nullvector()
            True
            >>> Vector3(0.125, 0.0, 0.0).is_nullvector()
            False
        """
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def is_normalized(self) -> bool:
        """Проверка единичной длины: |1 - magn_sq| < EPS_NORMALIZED."""
        return abs(1.0 - self.magn_sq()) < EPS_NORMALIZED

    @staticmethod
    def is_collinear(v1: "Vector3", v2: "Vector3") -> bool:
        """
        Проверка, является ли один вектор кратным другому.

        Векторное произведение коллинеарных векторов нулевое.
        Предусловие: ни один из векторов не нулевой.
        """
        return Vector3.crossp(v1, v2).is_nullvector()

    @staticmethod
    def is_coplanar(v1: "Vector3", v2: "Vector3", v3: "Vector3") -> bool:
        """
        Проверка существования плоскости через начало координат,
        содержащей все три вектора: v3 · (v1 × v2) == 0.

        Предусловие: ни один из векторов не нулевой.

        Examples:
            >>> v1 = Vector3(0.75, 0.5, 6.0)
            >>> v2 = Vector3(2.5, 1.0, -5.0)
            >>> Vector3.is_coplanar(v1, v2, Vector3(1.0, 0.0, -17.0))
            True
            >>> Vector3.is_coplanar(v1, v2, Vector3(2.0, 0.0, -17.0))
            False
        """
        return Vector3.scalar(v3, Vector3.crossp(v1, v2)) == 0.0

    def is_close(
        self,
        other: "Vector3",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное приближённое сравнение (см. numerical_safeguards.is_close)."""
        return (
            is_close(self.x, other.x, rel_tol, abs_tol)
            and is_close(self.y, other.y, rel_tol, abs_tol)
            and is_close(self.z, other.z, rel_tol, abs_tol)
        )

    # =========================================================================
    # ПРОИЗВЕДЕНИЯ И МЕТРИКИ
    # =========================================================================

    @staticmethod
    def scalar(v1: "Vector3", v2: "Vector3") -> float:
        """
        Скалярное (dot) произведение.

        Examples:
            >>> Vector3.scalar(Vector3(1.25, 0.5, 6.0), Vector3(2.0, 1.0, -5.0))
            -27.0
        """
        return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z

    @staticmethod
    def crossp(v1: "Vector3", v2: "Vector3") -> "Vector3":
        """Векторное произведение, антикоммутативно: crossp(a, b) == -crossp(b, a)."""
        return Vector3(
            v1.y * v2.z - v1.z * v2.y,
            v1.z * v2.x - v1.x * v2.z,
            v1.x * v2.y - v1.y * v2.x,
        )

    def magn_sq(self) -> float:
        """
        Квадрат длины.

        Examples:
            >>> Vector3(1.5, 0.5, 6.0).magn_sq()
            38.5
        """
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magn(self) -> float:
        """Евклидова длина вектора (math.hypot, без переполнения magn_sq)."""
        return math.hypot(self.x, self.y, self.z)

    def __abs__(self) -> float:
        return self.magn()

    @staticmethod
    def dist_sq(v1: "Vector3", v2: "Vector3") -> float:
        """
        Квадрат расстояния между точками, соответствующими векторам.

        Examples:
            >>> Vector3.dist_sq(Vector3(3.5, 2.5, 4.0), Vector3(2.0, 2.0, -2.0))
            38.5
        """
        dx = v1.x - v2.x
        dy = v1.y - v2.y
        dz = v1.z - v2.z
        return dx * dx + dy * dy + dz * dz

    @staticmethod
    def dist(v1: "Vector3", v2: "Vector3") -> float:
        """Расстояние между точками, соответствующими векторам."""
        return math.hypot(v1.x - v2.x, v1.y - v2.y, v1.z - v2.z)

    @staticmethod
    def angle_between(v1: "Vector3", v2: "Vector3") -> float:
        """
        Беззнаковый угол между векторами в радианах, [0, pi].

        acos(v1·v2 / (|v1| * |v2|)). Косинус ограничивается
        диапазоном [-1, 1], чтобы ошибка округления не выводила
        аргумент acos за область определения.

        Для нулевого вектора не определён (ZeroDivisionError).
        """
        cos_a = Vector3.scalar(v1, v2) / (v1.magn() * v2.magn())
        return math.acos(clamp(cos_a, -1.0, 1.0))

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
        self.z *= inv_magn

    def normalized(self) -> "Vector3":
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
            self.z *= factor

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
            self.z *= factor

    # =========================================================================
    # ИНТЕРПОЛЯЦИЯ, ПОВОРОТ, ОТРАЖЕНИЕ
    # =========================================================================

    @staticmethod
    def lerp(v1: "Vector3", v2: "Vector3", factor: float) -> "Vector3":
        """Линейная интерполяция v1*(1 - factor) + v2*factor (factor любой)."""
        rest = 1.0 - factor
        return Vector3(
            v1.x * rest + v2.x * factor,
            v1.y * rest + v2.y * factor,
            v1.z * rest + v2.z * factor,
        )

    def rotate(self, angle: float, axis: "Vector3") -> "Vector3":
        """
        Поворот против часовой стрелки (правило правой руки) на angle
        радиан вокруг оси axis по формуле Родрига.

        Предусловие: axis нормализована. Для ненормализованной оси
        результат не является чистым поворотом.

        Args:
            angle: Угол поворота в радианах
            axis: Единичный вектор оси

        Returns:
            Повёрнутый вектор
        """
        sin_a = math.sin(angle)
        cos_a = cos_for_angle(angle, sin_a)

        cross = Vector3.crossp(axis, self)
        f = Vector3.scalar(axis, self) * (1.0 - cos_a)

        return Vector3(
            self.x * cos_a + cross.x * sin_a + axis.x * f,
            self.y * cos_a + cross.y * sin_a + axis.y * f,
            self.z * cos_a + cross.z * sin_a + axis.z * f,
        )

    def rotate_right(self, axis: "Vector3") -> "Vector3":
        """Поворот на +90° вокруг axis: (n × v) + n*(n·v)."""
        cross = Vector3.crossp(axis, self)
        f = Vector3.scalar(axis, self)
        return Vector3(cross.x + axis.x * f, cross.y + axis.y * f, cross.z + axis.z * f)

    def rotate_left(self, axis: "Vector3") -> "Vector3":
        """Поворот на -90° вокруг axis: -(n × v) + n*(n·v)."""
        cross = Vector3.crossp(axis, self)
        f = Vector3.scalar(axis, self)
        return Vector3(axis.x * f - cross.x, axis.y * f - cross.y, axis.z * f - cross.z)

    def reflect(self, n0: "Vector3") -> "Vector3":
        """
        Отражение относительно поверхности с нормалью n0: v - 2*(v·n0)*n0.

        Предусловие: n0 нормализован (не проверяется).
        """
        factor = 2.0 * Vector3.scalar(self, n0)
        return Vector3(
            self.x - n0.x * factor,
            self.y - n0.y * factor,
            self.z - n0.z * factor,
        )

    def reflect_inplace(self, n0: "Vector3") -> None:
        """То же, что reflect, но изменяет сам вектор."""
        factor = 2.0 * Vector3.scalar(self, n0)
        self.x -= n0.x * factor
        self.y -= n0.y * factor
        self.z -= n0.z * factor

    # =========================================================================
    # ИМЕНОВАННЫЕ АРИФМЕТИЧЕСКИЕ ОПЕРАЦИИ
    # =========================================================================

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def divide(self, quotient: float) -> "Vector3":
        """Деление на скаляр через умножение на обратное значение."""
        inv = 1.0 / quotient
        return Vector3(self.x * inv, self.y * inv, self.z * inv)

    def negate(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor: float) -> "Vector3":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self.scale(factor)

    def __rmul__(self, factor: float) -> "Vector3":
        return self.__mul__(factor)

    def __truediv__(self, quotient: float) -> "Vector3":
        if not isinstance(quotient, (int, float)):
            return NotImplemented
        return self.divide(quotient)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, factor: float) -> "Vector3":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    def __itruediv__(self, quotient: float) -> "Vector3":
        if not isinstance(quotient, (int, float)):
            return NotImplemented
        inv = 1.0 / quotient
        self.x *= inv
        self.y *= inv
        self.z *= inv
        return self

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"
