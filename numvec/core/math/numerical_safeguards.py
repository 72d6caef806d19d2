"""
Numerical Safeguards — численные примитивы для векторной арифметики

Модуль обеспечивает численную устойчивость операций над векторами:
- Epsilon-параметры для приближённого сравнения элементов
- Сравнение скаляров (в том числе complex) с абсолютной толерантностью
- Ограничение значения диапазоном (clamp) для тригонометрических производных
- Валидация аргументов конструкторов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение элементов идёт по модулю разности: abs(a - b) <= eps;
   точно равные значения (в том числе одинаковые inf) всегда совпадают
2. Отношение cos(theta) перед sqrt всегда лежит в [-1, 1]
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from numbers import Complex, Integral
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для сравнения векторов (==, !=)
# Фиксирована для всех экземпляров и не настраивается пользователем
EPS_VECTOR_COMPARE: Final[float] = 1e-6

# Превышение |cos(theta)| над 1, начиная с которого clamp фиксируется в логе
# Меньшие превышения считаются шумом округления для параллельных векторов
EPS_ANGLE_CLAMP: Final[float] = 1e-9


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def within_tolerance(a: Complex, b: Complex, eps: float = EPS_VECTOR_COMPARE) -> bool:
    """
    Проверка, что два скаляра совпадают с точностью до eps.

    Работает для int, float, complex и numpy-скаляров: abs() разности
    для complex — это модуль комплексного числа.

    Args:
        a: Первое значение
        b: Второе значение
        eps: Абсолютная толерантность (default: EPS_VECTOR_COMPARE)

    Returns:
        True если a == b (в том числе одинаковые бесконечности) или abs(a - b) <= eps

    Examples:
        >>> within_tolerance(1.0, 1.0 + 1e-7)
        True
        >>> within_tolerance(1.0, 1.1)
        False
        >>> within_tolerance(1 + 1j, 1 + 1.0000001j)
        True
    """
    return a == b or abs(a - b) <= eps


# =============================================================================
# ОГРАНИЧЕНИЕ ДИАПАЗОНОМ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    NaN не ограничивается и возвращается как есть.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(1.0000000002, -1.0, 1.0)
        1.0
    """
    if math.isnan(value):
        return value

    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def sine_from_cosine(cos_value: float) -> float:
    """
    sin(theta) по cos(theta) для угла theta в [0, pi].

    Формула: sqrt(1 - cos^2). Перед извлечением корня cos ограничивается
    диапазоном [-1, 1]: для (почти) параллельных векторов округление
    даёт |cos| чуть больше 1, и подкоренное выражение становится
    отрицательным.

    Args:
        cos_value: Косинус угла (может быть NaN для вырожденных векторов)

    Returns:
        Синус угла в [0, 1], либо NaN если cos_value — NaN

    Examples:
        >>> sine_from_cosine(0.0)
        1.0
        >>> sine_from_cosine(1.0000000000000002)
        0.0
    """
    cos_clamped = clamp(cos_value, -1.0, 1.0)
    return math.sqrt(1.0 - cos_clamped * cos_clamped)


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое.

    bool отклоняется явно, несмотря на то что это подкласс int.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не целое, bool или отрицательное
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение — конечное число (не NaN, не Inf).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN или Inf
    """
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")
