"""
Vector errors — таксономия ошибок векторного типа

Два вида ошибок использования и одна ошибка типа:
- VectorIndexError: индекс вне диапазона [0, size)
- DimensionMismatchError: бинарная операция над векторами разной размерности
- ScalarTypeError: неподдерживаемый скалярный тип или real-only операция над complex

Все ошибки синхронные и никогда не перехватываются внутри библиотеки.
Каждая наследует и VectorError, и соответствующее встроенное исключение,
поэтому вызывающий код может ловить как IndexError/ValueError/TypeError.
"""


class VectorError(Exception):
    """Базовая ошибка векторного типа."""

    pass


class VectorIndexError(VectorError, IndexError):
    """
    Индекс вне диапазона.

    Возникает при любом чтении или записи элемента с index >= size
    (или index < 0).
    """

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for vector of size {size}")


class DimensionMismatchError(VectorError, ValueError):
    """
    Несовпадение размерностей.

    Возникает в assign, add, subtract, dot, sin_of_angle_with, area_triangle.
    Размерности никогда не выравниваются молча (нет broadcast/truncate/pad).
    """

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"Vectors must have the same size: {left} != {right}")


class ScalarTypeError(VectorError, TypeError):
    """Неподдерживаемый скалярный тип для вектора или для операции."""

    pass
