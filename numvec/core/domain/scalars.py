"""
Scalars — допустимые скалярные типы вектора

Вектор параметризуется скалярным типом (dtype). Допустимы:
- INTEGER: целые типы (int, numpy.int32, ...), кроме bool
- REAL: вещественные типы (float, fractions.Fraction, numpy.float32, ...)
- COMPLEX: комплексные типы (complex, numpy.complex64, numpy.complex128)

Классификация идёт через ABC из модуля numbers, поэтому numpy-скаляры
поддерживаются без импорта numpy: numpy регистрирует свои типы в
numbers.Integral / numbers.Real / numbers.Complex.

Неподдерживаемый тип отклоняется при создании вектора (ScalarTypeError),
а не даёт молча неверный численный результат.
"""

from enum import Enum
from numbers import Complex, Integral, Real
from typing import Any, Iterable

from numvec.core.domain.errors import ScalarTypeError


# =============================================================================
# ENUMS
# =============================================================================


class ScalarKind(str, Enum):
    """Вид скалярного типа"""

    INTEGER = "integer"
    REAL = "real"
    COMPLEX = "complex"

    @property
    def is_real(self) -> bool:
        """Поддерживает ли вид real-only операции (length, angle, area)."""
        return self is not ScalarKind.COMPLEX


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def scalar_kind(dtype: Any) -> ScalarKind:
    """
    Определение вида скалярного типа.

    Args:
        dtype: Скалярный тип (класс, не экземпляр)

    Returns:
        ScalarKind для dtype

    Raises:
        ScalarTypeError: Если dtype не класс, bool или не числовой тип

    Examples:
        >>> scalar_kind(int)
        <ScalarKind.INTEGER: 'integer'>
        >>> scalar_kind(float)
        <ScalarKind.REAL: 'real'>
        >>> scalar_kind(complex)
        <ScalarKind.COMPLEX: 'complex'>
    """
    if not isinstance(dtype, type):
        raise ScalarTypeError(f"dtype must be a type, got {dtype!r}")

    if issubclass(dtype, bool):
        raise ScalarTypeError("bool is not a supported vector scalar type")

    # Порядок важен: Integral ⊂ Real ⊂ Complex
    if issubclass(dtype, Integral):
        return ScalarKind.INTEGER
    if issubclass(dtype, Real):
        return ScalarKind.REAL
    if issubclass(dtype, Complex):
        return ScalarKind.COMPLEX

    raise ScalarTypeError(
        f"Vector can only be instantiated with numeric or complex types, "
        f"got {dtype.__name__}"
    )


def require_real(dtype: type, operation: str) -> ScalarKind:
    """
    Проверка, что операция определена для dtype.

    length, sin_of_angle_with и area_triangle определены только для
    вещественных (и целых) типов.

    Args:
        dtype: Скалярный тип вектора
        operation: Имя операции (для сообщения об ошибке)

    Returns:
        ScalarKind для dtype

    Raises:
        ScalarTypeError: Если dtype комплексный
    """
    kind = scalar_kind(dtype)
    if not kind.is_real:
        raise ScalarTypeError(
            f"{operation} can only be calculated with real numeric types, "
            f"got {dtype.__name__}"
        )
    return kind


def coerce_scalar(dtype: type, value: Any) -> Any:
    """
    Приведение значения к dtype.

    Используется для каждого записываемого элемента, так что элементы
    вектора всегда имеют тип dtype. Для INTEGER приведение float
    отбрасывает дробную часть (усечение к нулю).

    Raises:
        TypeError: Если значение не приводится к dtype (например, complex -> float)
    """
    if type(value) is dtype:
        return value
    return dtype(value)


# Порядок расширения: INTEGER -> REAL -> COMPLEX
_KIND_RANK = {
    ScalarKind.INTEGER: 0,
    ScalarKind.REAL: 1,
    ScalarKind.COMPLEX: 2,
}


def widest_scalar_type(values: Iterable[Any], default: type = float) -> type:
    """
    Скалярный тип, вмещающий все значения без потери вида.

    Выбирается тип первого значения самого широкого вида:
    [1, 2.5] -> float, [1, 2.5, 1j] -> complex, [1, 2] -> int.

    Args:
        values: Значения
        default: Тип для пустой последовательности (default: float)

    Returns:
        Тип первого значения с наибольшим ScalarKind

    Raises:
        ScalarTypeError: Если тип какого-либо значения не поддерживается
    """
    widest: type | None = None
    widest_rank = -1
    for value in values:
        dtype = type(value)
        rank = _KIND_RANK[scalar_kind(dtype)]
        if rank > widest_rank:
            widest, widest_rank = dtype, rank
    return widest if widest is not None else default
