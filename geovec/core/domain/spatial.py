"""
Spatial: интерфейс векторов для структур пространственного разбиения

Структура пространственного разбиения (например, quadtree) использует
Vector2 как координаты точек и опирается только на:
- точное покомпонентное равенство
- квадрат расстояния (dist_sq), без квадратных корней
- доступ к компонентам x, y для проверок попадания в область

Модуль фиксирует этот контракт (PointLike) и даёт общие примитивы
для проверок по области: осевой прямоугольник и отбор точек по радиусу.
Внутренний алгоритм разбиения сюда не входит.
"""

from dataclasses import dataclass
from typing import Iterable, Protocol

from geovec.core.math.vector2 import Vector2


# =============================================================================
# PROTOCOLS
# =============================================================================


class PointLike(Protocol):
    """Всё, что имеет координаты x и y (Vector2, Vector3)."""

    x: float
    y: float


# =============================================================================
# BOUNDING BOX
# =============================================================================


@dataclass(frozen=True)
class BoundingBox2:
    """
    Осевой прямоугольник [min_x, max_x] × [min_y, max_y].

    Границы включены. Immutable: хранит компоненты, а не ссылки на
    векторы, чтобы изменение исходных Vector2 не меняло область.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"BoundingBox2 min corner must not exceed max corner, got "
                f"min=({self.min_x}, {self.min_y}) max=({self.max_x}, {self.max_y})"
            )

    @classmethod
    def from_points(cls, points: Iterable[PointLike]) -> "BoundingBox2":
        """
        Минимальный прямоугольник, содержащий все точки.

        Raises:
            ValueError: Если points пуст
        """
        xs: list[float] = []
        ys: list[float] = []
        for point in points:
            xs.append(point.x)
            ys.append(point.y)

        if not xs:
            raise ValueError("Cannot build BoundingBox2 from an empty set of points")

        return cls(min(xs), min(ys), max(xs), max(ys))

    def contains(self, point: PointLike) -> bool:
        """Попадание точки в прямоугольник (границы включены)."""
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def intersects(self, other: "BoundingBox2") -> bool:
        """Пересечение двух прямоугольников (касание считается пересечением)."""
        return not (
            other.min_x > self.max_x
            or other.max_x < self.min_x
            or other.min_y > self.max_y
            or other.max_y < self.min_y
        )

    def center(self) -> Vector2:
        return Vector2.lerp(
            Vector2(self.min_x, self.min_y), Vector2(self.max_x, self.max_y), 0.5
        )

    def half_extent(self) -> Vector2:
        """Половина размеров по осям."""
        return Vector2(self.max_x - self.min_x, self.max_y - self.min_y) * 0.5


# =============================================================================
# RADIUS QUERIES
# =============================================================================


def points_within_radius(
    center: Vector2,
    points: Iterable[Vector2],
    radius: float,
) -> list[Vector2]:
    """
    Точки, лежащие не дальше radius от center (граница включена).

    Сравнение идёт по квадрату расстояния, без sqrt.

    Args:
        center: Центр окрестности
        points: Кандидаты
        radius: Радиус окрестности

    Returns:
        Список точек в исходном порядке (те же объекты, без копирования)

    Raises:
        ValueError: Если radius отрицателен
    """
    if radius < 0.0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    radius_sq = radius * radius
    return [point for point in points if Vector2.dist_sq(center, point) <= radius_sq]
