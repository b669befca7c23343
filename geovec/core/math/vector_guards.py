"""
Vector Guards: явная проверка предусловий векторных операций

Операции Vector2/Vector3 намеренно не проверяют предусловия (ненулевой
вектор, нормализованная ось/нормаль, конечные компоненты): нарушение
даёт неконечный или бессмысленный результат без исключения.

Модуль предназначен для кода на границе доверия (входные данные,
десериализация), которому нужна явная ошибка вместо тихого NaN.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверки не изменяют переданные векторы
2. Нарушение предусловия → VectorPreconditionViolation с именем параметра
"""

from geovec.core.math.numerical_safeguards import (
    EPS_NORMALIZED,
    is_valid_float,
    validate_finite,
)
from geovec.core.math.vector2 import Vector2
from geovec.core.math.vector3 import Vector3


# =============================================================================
# EXCEPTIONS
# =============================================================================


class VectorPreconditionViolation(Exception):
    """
    Нарушение предусловия векторной операции.

    Примеры: нормализация нулевого вектора, поворот вокруг
    ненормализованной оси, NaN/Inf в компонентах.
    """
    pass


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_finite_vector(v: Vector2 | Vector3) -> bool:
    """
    Проверка, что все компоненты вектора конечны.

    Args:
        v: Vector2 или Vector3

    Returns:
        True если ни одна компонента не NaN/Inf
    """
    return all(is_valid_float(component) for component in v)


def validate_finite_vector(v: Vector2 | Vector3, name: str) -> None:
    """
    Валидация, что вектор не содержит NaN/Inf.

    Каждая компонента проверяется validate_finite под именем вида
    "axis.z"; исходный ValueError сохраняется как __cause__.

    Raises:
        VectorPreconditionViolation: Если хотя бы одна компонента не конечна
    """
    for axis, component in zip("xyz", v):
        try:
            validate_finite(component, f"{name}.{axis}")
        except ValueError as e:
            raise VectorPreconditionViolation(
                f"{name} must have finite components (not NaN/Inf), got {v}"
            ) from e


def validate_non_null(v: Vector2 | Vector3, name: str) -> None:
    """
    Валидация, что вектор не нулевой.

    Требуется для normalize, clamp_min, is_collinear, is_coplanar,
    angle_between.

    Raises:
        VectorPreconditionViolation: Если v нулевой вектор
    """
    if v.is_nullvector():
        raise VectorPreconditionViolation(f"{name} must not be the null vector")


def validate_normalized(v: Vector2 | Vector3, name: str) -> None:
    """
    Валидация, что вектор единичной длины.

    Требуется для оси rotate/rotate_right/rotate_left и нормали reflect.

    Raises:
        VectorPreconditionViolation: Если |1 - magn_sq| >= EPS_NORMALIZED
    """
    if not v.is_normalized():
        raise VectorPreconditionViolation(
            f"{name} must be normalized (|1 - magn_sq| < {EPS_NORMALIZED}), "
            f"got magn_sq={v.magn_sq()}"
        )


# =============================================================================
# БЕЗОПАСНАЯ НОРМАЛИЗАЦИЯ
# =============================================================================


def normalized_or(v: Vector2 | Vector3, fallback: Vector2 | Vector3) -> Vector2 | Vector3:
    """
    Нормализованная копия v или копия fallback, если v нулевой.

    Args:
        v: Исходный вектор
        fallback: Значение для нулевого вектора (копируется)

    Returns:
        Новый вектор, v и fallback не изменяются

    Examples:
        >>> normalized_or(Vector2(0.0, 0.0), Vector2(1.0, 0.0))
        Vector2(x=1.0, y=0.0)
        >>> normalized_or(Vector2(0.0, 4.0), Vector2(1.0, 0.0))
        Vector2(x=0.0, y=1.0)
    """
    if v.is_nullvector():
        return fallback.copy()
    return v.normalized()
