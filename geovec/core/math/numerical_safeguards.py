"""
Numerical Safeguards: общие численные примитивы для векторной алгебры

Модуль содержит константы толерантности и вспомогательные функции,
разделяемые Vector2 и Vector3:
- Epsilon-параметры для проверки нормализации и сравнения float
- Быстрое получение косинуса из синуса (с ограничением по квадранту)
- NaN/Inf проверки и валидация
- Ограничение значения в диапазоне

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все константы неизменяемы (Final), глобального изменяемого состояния нет
2. cos_from_sin корректен только при неотрицательном косинусе
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность для проверки нормализации: |1 - magn_sq| < EPS_NORMALIZED
# Используется всеми is_normalized
EPS_NORMALIZED: Final[float] = 1e-8

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Четверть оборота: граница, в пределах которой cos(angle) >= 0
QUARTER_TURN: Final[float] = math.pi / 2


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def cos_from_sin(sin_a: float) -> float:
    """
    Модуль косинуса по синусу: sqrt(1 - sin²).

    ВАЖНО: это не тождество cos(a). Для углов во II и III четвертях
    настоящий косинус отрицателен, а функция всегда возвращает
    неотрицательное значение. Вызывающий код обязан гарантировать,
    что угол лежит в [-pi/2, pi/2] (см. cos_for_angle).

    Args:
        sin_a: Синус угла

    Returns:
        sqrt(1 - sin_a * sin_a)

    Examples:
        >>> cos_from_sin(0.0)
        1.0
        >>> cos_from_sin(1.0)
        0.0
    """
    return math.sqrt(1.0 - sin_a * sin_a)


def cos_for_angle(angle: float, sin_a: float) -> float:
    """
    Косинус угла с использованием уже посчитанного синуса.

    Если |angle| <= pi/2, косинус неотрицателен и берётся через
    cos_from_sin (без вызова math.cos). Иначе считается напрямую.

    Args:
        angle: Угол в радианах
        sin_a: Значение math.sin(angle)

    Returns:
        cos(angle)

    Examples:
        >>> cos_for_angle(0.0, 0.0)
        1.0
        >>> cos_for_angle(math.pi, math.sin(math.pi))
        -1.0
    """
    if -QUARTER_TURN <= angle <= QUARTER_TURN:
        return cos_from_sin(sin_a)
    return math.cos(angle)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value является NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    NaN проходит без изменений.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(1.0000000000000002, -1.0, 1.0)
        1.0
        >>> clamp(-3.0, -1.0, 1.0)
        -1.0
    """
    result = value

    if min_value is not None and result < min_value:
        result = min_value

    if max_value is not None and result > max_value:
        result = max_value

    return result
