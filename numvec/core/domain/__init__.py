"""
Domain models and value objects.

Contains the Vector value type and its supporting pieces: scalar kinds,
uniform sampling and the error taxonomy.
"""

from numvec.core.domain.errors import (
    DimensionMismatchError,
    ScalarTypeError,
    VectorError,
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
from numvec.core.domain.vector import Vector, scale

__all__ = [
    # Errors
    "VectorError",
    "VectorIndexError",
    "DimensionMismatchError",
    "ScalarTypeError",
    # Scalars
    "ScalarKind",
    "scalar_kind",
    "require_real",
    "coerce_scalar",
    "widest_scalar_type",
    # Sampling
    "UniformRange",
    "draw_scalars",
    # Vector
    "Vector",
    "scale",
]
