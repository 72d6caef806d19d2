"""
Sampling — равномерное заполнение вектора случайными значениями

Модуль отвечает за конструктор Vector.random:
- UniformRange: immutable Pydantic модель диапазона [low, high)
- draw_scalars: независимые равномерные значения заданного dtype

Источник случайности инъецируется (random.Random), а не берётся из
скрытого глобального состояния: тесты передают генератор с seed.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый элемент (для complex — каждая компонента) лежит в [low, high)
   уже после приведения к dtype
2. Для complex вещественная и мнимая части выбираются независимо
3. Для целых типов значения равномерны на [ceil(low), ceil(high))
"""

import logging
import math
import random
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from numvec.core.domain.scalars import ScalarKind, coerce_scalar, scalar_kind
from numvec.core.math.numerical_safeguards import validate_finite

logger = logging.getLogger(__name__)

# Сколько раз перевыбирать значение, если после приведения к dtype
# (например, numpy.float32) оно вышло за [low, high)
MAX_DRAW_ATTEMPTS: Final[int] = 64


# =============================================================================
# UNIFORM RANGE MODEL
# =============================================================================


class UniformRange(BaseModel):
    """
    Полуоткрытый диапазон [low, high) для равномерного распределения.

    Immutable модель (frozen=True). Границы конечны и low < high.
    """

    low: float = Field(..., description="Нижняя граница (включительно)")
    high: float = Field(..., description="Верхняя граница (исключительно)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "UniformRange":
        """Проверка конечности и порядка границ."""
        validate_finite(self.low, "low")
        validate_finite(self.high, "high")
        if self.low >= self.high:
            raise ValueError(f"low must be < high, got low={self.low}, high={self.high}")
        return self

    def contains(self, value: float) -> bool:
        """Принадлежит ли значение [low, high)."""
        return self.low <= value < self.high


# =============================================================================
# DRAWS
# =============================================================================


def new_rng() -> random.Random:
    """Новый генератор, инициализированный из системного источника энтропии."""
    return random.Random()


def _uniform_component(rng: random.Random, bounds: UniformRange) -> float:
    return bounds.low + (bounds.high - bounds.low) * rng.random()


def _draw_integer(dtype: type, rng: random.Random, bounds: UniformRange) -> Any:
    start = math.ceil(bounds.low)
    stop = math.ceil(bounds.high)
    if start >= stop:
        raise ValueError(
            f"Range [{bounds.low}, {bounds.high}) contains no integer values"
        )
    return coerce_scalar(dtype, rng.randrange(start, stop))


def _draw_real(dtype: type, rng: random.Random, bounds: UniformRange) -> Any:
    for _ in range(MAX_DRAW_ATTEMPTS):
        value = coerce_scalar(dtype, _uniform_component(rng, bounds))
        if bounds.contains(value):
            return value
    raise ValueError(
        f"Range [{bounds.low}, {bounds.high}) is too narrow for {dtype.__name__}"
    )


def _draw_complex(dtype: type, rng: random.Random, bounds: UniformRange) -> Any:
    for _ in range(MAX_DRAW_ATTEMPTS):
        real = _uniform_component(rng, bounds)
        imag = _uniform_component(rng, bounds)
        value = coerce_scalar(dtype, complex(real, imag))
        if bounds.contains(value.real) and bounds.contains(value.imag):
            return value
    raise ValueError(
        f"Range [{bounds.low}, {bounds.high}) is too narrow for {dtype.__name__}"
    )


_DRAWERS = {
    ScalarKind.INTEGER: _draw_integer,
    ScalarKind.REAL: _draw_real,
    ScalarKind.COMPLEX: _draw_complex,
}


def draw_scalars(
    size: int,
    dtype: type,
    bounds: UniformRange,
    rng: random.Random | None = None,
) -> list[Any]:
    """
    Независимые равномерные значения dtype на [low, high).

    Args:
        size: Количество значений
        dtype: Скалярный тип (INTEGER, REAL или COMPLEX)
        bounds: Диапазон [low, high)
        rng: Генератор случайных чисел (default: новый, из системной энтропии)

    Returns:
        Список из size значений типа dtype

    Raises:
        ScalarTypeError: Если dtype не поддерживается
        ValueError: Если диапазон не содержит ни одного значения dtype
    """
    kind = scalar_kind(dtype)
    if rng is None:
        rng = new_rng()

    logger.debug(
        "Drawing %d %s values from [%s, %s)", size, dtype.__name__, bounds.low, bounds.high
    )

    drawer = _DRAWERS[kind]
    return [drawer(dtype, rng, bounds) for _ in range(size)]
