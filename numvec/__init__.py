"""
numvec — generic fixed-length numeric vector value type.

Elementwise arithmetic, dot product, Euclidean norm, sine of the angle between
two vectors and triangle area over int, float, complex and numpy scalar types.
"""

from numvec.core.domain import (
    DimensionMismatchError,
    ScalarKind,
    ScalarTypeError,
    UniformRange,
    Vector,
    VectorError,
    VectorIndexError,
    scale,
)

__version__ = "0.1.0"

__all__ = [
    "Vector",
    "scale",
    "ScalarKind",
    "UniformRange",
    "VectorError",
    "VectorIndexError",
    "DimensionMismatchError",
    "ScalarTypeError",
]
