"""
Vector — числовой вектор фиксированной размерности

Mutable value-объект над скалярным типом dtype (int, float, complex,
numpy-скаляры). Размерность и dtype фиксируются при создании.

Операции:
- Конструкторы: заполнение константой, случайными значениями из [low, high),
  копия другого вектора, из последовательности значений
- Индексация с проверкой границ на чтение и запись
- Поэлементные +, -, умножение/деление на скаляр (коммутативное умножение)
- Скалярное произведение (dot), приближённое сравнение (eps = 1e-6)
- Геометрия (только вещественные dtype): длина, sin угла, площадь треугольника

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. size и dtype не меняются за время жизни вектора
2. Хранилище всегда содержит ровно size элементов типа dtype
3. Бинарные операции требуют равной размерности (DimensionMismatchError)
4. Операторы не изменяют операнды; копия никогда не разделяет хранилище
5. Сравнение векторов разной размерности даёт False, а не ошибку

ФОРМУЛЫ:
    dot(a, b)  = Σ a[i] * b[i]
    |a|        = sqrt(Σ a[i]^2)
    cos(theta) = dot(a, b) / (|a| * |b|),  ограничивается [-1, 1]
    sin(theta) = sqrt(1 - cos(theta)^2)
    area       = 0.5 * |a| * |b| * sin(theta)
"""

import logging
import math
import operator
from numbers import Complex, Integral
from random import Random
from typing import Any, Callable, ClassVar, Iterable, Iterator

from numvec.core.domain.errors import (
    DimensionMismatchError,
    ScalarTypeError,
    VectorIndexError,
)
from numvec.core.domain.sampling import UniformRange, draw_scalars
from numvec.core.domain.scalars import (
    ScalarKind,
    coerce_scalar,
    require_real,
    scalar_kind,
    widest_scalar_type,
)
from numvec.core.math.numerical_safeguards import (
    EPS_ANGLE_CLAMP,
    EPS_VECTOR_COMPARE,
    sine_from_cosine,
    validate_non_negative_int,
    within_tolerance,
)

logger = logging.getLogger(__name__)


def _is_scalar(value: Any) -> bool:
    # bool не скаляр, как и не dtype
    return (
        isinstance(value, Complex)
        and not isinstance(value, bool)
        and not isinstance(value, Vector)
    )


def _truncating_div(a: Any, b: Any) -> Any:
    # Точное целочисленное деление с усечением к нулю; b == 0 -> ZeroDivisionError
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


# =============================================================================
# VECTOR
# =============================================================================


class Vector:
    """
    Числовой вектор фиксированной размерности.

    Примеры:
        >>> v1 = Vector(2, 1.0)
        >>> v2 = Vector(2, 1.0)
        >>> v1[1] = 0.0
        >>> round(v1.area_triangle(v2), 6)
        0.5
    """

    __slots__ = ("_size", "_dtype", "_kind", "_data")

    # Толерантность сравнения: фиксирована, не аргумент конструктора
    epsilon: ClassVar[float] = EPS_VECTOR_COMPARE

    # numpy-скаляры слева (np.float64(2.0) * v) должны уходить в __rmul__,
    # а не превращать вектор в ndarray
    __array_ufunc__ = None

    # Mutable value-объект с __eq__: не хешируется
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int, value: Any, dtype: type | None = None):
        """
        Вектор размерности size, все элементы равны value.

        Args:
            size: Размерность (неотрицательное целое, 0 допустим)
            value: Значение всех элементов
            dtype: Скалярный тип (default: type(value))

        Raises:
            ValueError: Если size отрицательный или не целый
            ScalarTypeError: Если dtype не числовой тип
        """
        validate_non_negative_int(size, "size")
        if dtype is None:
            dtype = type(value)

        self._kind = scalar_kind(dtype)
        self._dtype = dtype
        self._size = int(size)
        self._data = [coerce_scalar(dtype, value)] * self._size

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _wrap(cls, data: list[Any], dtype: type, kind: ScalarKind) -> "Vector":
        # data уже приведены к dtype и принадлежат новому вектору
        vector = cls.__new__(cls)
        vector._size = len(data)
        vector._dtype = dtype
        vector._kind = kind
        vector._data = data
        return vector

    @classmethod
    def random(
        cls,
        size: int,
        low: float,
        high: float,
        dtype: type = float,
        rng: Random | None = None,
    ) -> "Vector":
        """
        Вектор из независимых равномерных значений на [low, high).

        Для complex dtype вещественная и мнимая части выбираются независимо
        из [low, high). Для целых dtype — равномерно на [ceil(low), ceil(high)).

        Args:
            size: Размерность
            low: Нижняя граница (включительно)
            high: Верхняя граница (исключительно)
            dtype: Скалярный тип (default: float)
            rng: Генератор случайных чисел (default: новый, из системной энтропии)

        Raises:
            ValueError: Если size невалиден или low >= high
            ScalarTypeError: Если dtype не числовой тип
        """
        validate_non_negative_int(size, "size")
        kind = scalar_kind(dtype)
        bounds = UniformRange(low=low, high=high)
        return cls._wrap(draw_scalars(size, dtype, bounds, rng), dtype, kind)

    @classmethod
    def copy_of(cls, other: "Vector") -> "Vector":
        """Глубокая копия другого вектора."""
        if not isinstance(other, Vector):
            raise TypeError(f"Expected Vector, got {type(other).__name__}")
        return other.copy()

    @classmethod
    def from_values(cls, values: Iterable[Any], dtype: type | None = None) -> "Vector":
        """
        Вектор из явной последовательности значений.

        dtype по умолчанию — самый широкий тип среди элементов
        ([1, 2.5] -> float), float для пустой последовательности.
        """
        items = list(values)
        if dtype is None:
            dtype = widest_scalar_type(items)
        kind = scalar_kind(dtype)
        return cls._wrap([coerce_scalar(dtype, item) for item in items], dtype, kind)

    def copy(self) -> "Vector":
        """Независимая копия: изменения копии не затрагивают исходный вектор."""
        return self._wrap(list(self._data), self._dtype, self._kind)

    def __copy__(self) -> "Vector":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Vector":
        return self.copy()

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Размерность вектора."""
        return self._size

    @property
    def dtype(self) -> type:
        """Скалярный тип элементов."""
        return self._dtype

    @property
    def kind(self) -> ScalarKind:
        """Вид скалярного типа."""
        return self._kind

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def to_list(self) -> list[Any]:
        """Копия элементов в виде списка."""
        return list(self._data)

    def __repr__(self) -> str:
        return f"Vector({self._data!r}, dtype={self._dtype.__name__})"

    # -------------------------------------------------------------------------
    # Индексация
    # -------------------------------------------------------------------------

    def _check_index(self, index: Any) -> int:
        if isinstance(index, bool):
            raise TypeError("Vector index must be an integer, not bool")
        position = operator.index(index)
        if position < 0 or position >= self._size:
            raise VectorIndexError(position, self._size)
        return position

    def get(self, index: int) -> Any:
        """
        Элемент по индексу.

        Raises:
            VectorIndexError: Если index вне [0, size)
        """
        return self._data[self._check_index(index)]

    def set(self, index: int, value: Any) -> None:
        """
        Запись элемента по индексу (значение приводится к dtype).

        Raises:
            VectorIndexError: Если index вне [0, size)
        """
        position = self._check_index(index)
        self._data[position] = coerce_scalar(self._dtype, value)

    __getitem__ = get
    __setitem__ = set

    # -------------------------------------------------------------------------
    # Проверки операндов
    # -------------------------------------------------------------------------

    def _check_same_size(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            raise TypeError(f"Expected Vector, got {type(other).__name__}")
        if self._size != other._size:
            raise DimensionMismatchError(self._size, other._size)
        return other

    def _check_compatible(self, other: Any) -> "Vector":
        other = self._check_same_size(other)
        if self._dtype is not other._dtype:
            raise ScalarTypeError(
                f"Vectors must have the same dtype: "
                f"{self._dtype.__name__} != {other._dtype.__name__}"
            )
        return other

    def _check_scalar(self, scalar: Any) -> Any:
        if not _is_scalar(scalar):
            raise TypeError(f"Expected a numeric scalar, got {type(scalar).__name__}")
        return scalar

    # -------------------------------------------------------------------------
    # Присваивание
    # -------------------------------------------------------------------------

    def assign(self, other: "Vector") -> "Vector":
        """
        Замена всех элементов элементами other (приводятся к dtype).

        Самоприсваивание безопасно и ничего не меняет.

        Returns:
            self

        Raises:
            DimensionMismatchError: Если размерности различаются
        """
        other = self._check_same_size(other)
        if other is not self:
            self._data[:] = [coerce_scalar(self._dtype, item) for item in other._data]
        return self

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _elementwise(self, other: "Vector", op: Callable[[Any, Any], Any]) -> "Vector":
        other = self._check_compatible(other)
        dtype = self._dtype
        data = [coerce_scalar(dtype, op(a, b)) for a, b in zip(self._data, other._data)]
        return self._wrap(data, dtype, self._kind)

    def _map_scalar(self, scalar: Any, op: Callable[[Any, Any], Any]) -> "Vector":
        scalar = self._check_scalar(scalar)
        dtype = self._dtype
        data = [coerce_scalar(dtype, op(item, scalar)) for item in self._data]
        return self._wrap(data, dtype, self._kind)

    def add(self, other: "Vector") -> "Vector":
        """
        Поэлементная сумма.

        Raises:
            DimensionMismatchError: Если размерности различаются
            ScalarTypeError: Если dtype различаются
        """
        return self._elementwise(other, operator.add)

    def subtract(self, other: "Vector") -> "Vector":
        """
        Поэлементная разность.

        Raises:
            DimensionMismatchError: Если размерности различаются
            ScalarTypeError: Если dtype различаются
        """
        return self._elementwise(other, operator.sub)

    def scale(self, scalar: Any) -> "Vector":
        """Поэлементное умножение на скаляр."""
        return self._map_scalar(scalar, operator.mul)

    def divide(self, scalar: Any) -> "Vector":
        """
        Поэлементное деление на скаляр.

        Деление на ноль не перехватывается: поведение определяется типом
        скаляра (ZeroDivisionError для int/float, inf/nan для numpy).
        Для целых dtype и целого скаляра деление точное, с усечением к нулю
        (без промежуточного float, поэтому значения больше 2**53 не теряют
        точность).
        """
        if self._kind is ScalarKind.INTEGER and isinstance(scalar, Integral):
            return self._map_scalar(scalar, _truncating_div)
        return self._map_scalar(scalar, operator.truediv)

    def dot(self, other: "Vector") -> Any:
        """
        Скалярное произведение Σ a[i] * b[i].

        Для complex — без сопряжения. Результат имеет тип dtype.

        Raises:
            DimensionMismatchError: Если размерности различаются
            ScalarTypeError: Если dtype различаются
        """
        other = self._check_compatible(other)
        dtype = self._dtype
        total = coerce_scalar(dtype, 0)
        for a, b in zip(self._data, other._data):
            total += a * b
        return coerce_scalar(dtype, total)

    def __add__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Any:
        # vector * vector: скалярное произведение; vector * k: масштабирование
        if isinstance(other, Vector):
            return self.dot(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Vector":
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> "Vector":
        if _is_scalar(other):
            return self.divide(other)
        return NotImplemented

    def __neg__(self) -> "Vector":
        data = [coerce_scalar(self._dtype, -item) for item in self._data]
        return self._wrap(data, self._dtype, self._kind)

    def __pos__(self) -> "Vector":
        return self.copy()

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals(self, other: "Vector") -> bool:
        """
        Приближённое равенство: равные размерности и abs(a[i] - b[i]) <= eps.

        Никогда не выбрасывает исключение: разная размерность даёт False.
        """
        if not isinstance(other, Vector):
            return False
        if self._size != other._size:
            return False
        return all(
            within_tolerance(a, b, self.epsilon) for a, b in zip(self._data, other._data)
        )

    def not_equals(self, other: "Vector") -> bool:
        """Отрицание equals."""
        return not self.equals(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.not_equals(other)

    # -------------------------------------------------------------------------
    # Геометрия
    # -------------------------------------------------------------------------

    def _real_result(self, value: float) -> Any:
        # REAL: результат в dtype (float32 остаётся float32); INTEGER и NaN: float
        if self._kind is ScalarKind.REAL and math.isfinite(value):
            return coerce_scalar(self._dtype, value)
        return float(value)

    def length(self) -> Any:
        """
        Евклидова норма sqrt(Σ a[i]^2).

        Returns:
            dtype для вещественных типов, float для целых

        Raises:
            ScalarTypeError: Если dtype комплексный
        """
        require_real(self._dtype, "Length")
        total = sum(item * item for item in self._data)
        return self._real_result(math.sqrt(total))

    norm = length

    def sin_of_angle_with(self, other: "Vector") -> Any:
        """
        Синус угла между векторами: sqrt(1 - cos^2).

        cos = dot / (|a| * |b|) ограничивается [-1, 1], поэтому для
        параллельных векторов результат 0, а не NaN. Если хотя бы один
        вектор нулевой, угол не определён и результат — NaN.

        Raises:
            DimensionMismatchError: Если размерности различаются
            ScalarTypeError: Если dtype комплексный
        """
        other = self._check_same_size(other)
        require_real(self._dtype, "Angle")
        require_real(other._dtype, "Angle")

        norm_product = float(self.length()) * float(other.length())
        if norm_product == 0.0:
            logger.debug("Angle is undefined for zero-length vector (size=%d)", self._size)
            return self._real_result(math.nan)

        dot_product = math.fsum(float(a) * float(b) for a, b in zip(self._data, other._data))
        cos_value = dot_product / norm_product
        if abs(cos_value) - 1.0 > EPS_ANGLE_CLAMP:
            logger.debug("Clamping cos(theta)=%r to [-1, 1]", cos_value)

        return self._real_result(sine_from_cosine(cos_value))

    def area_triangle(self, other: "Vector") -> Any:
        """
        Площадь треугольника, натянутого на два вектора: 0.5 * |a| * |b| * sin(theta).

        Raises:
            DimensionMismatchError: Если размерности различаются
            ScalarTypeError: Если dtype комплексный
        """
        sin_value = float(self.sin_of_angle_with(other))
        area = 0.5 * float(self.length()) * float(other.length()) * sin_value
        return self._real_result(area)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def scale(left: Any, right: Any) -> Vector:
    """
    Умножение вектора на скаляр в любом порядке аргументов.

    scale(v, k) == scale(k, v) == v * k == k * v

    Raises:
        TypeError: Если ровно один из аргументов не Vector
    """
    if isinstance(left, Vector) and not isinstance(right, Vector):
        return left.scale(right)
    if isinstance(right, Vector) and not isinstance(left, Vector):
        return right.scale(left)
    raise TypeError("scale expects exactly one Vector and one scalar")
