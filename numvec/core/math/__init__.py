"""
Core math modules для numvec

Численные примитивы: epsilon-параметры, сравнения с толерантностью, clamp.
"""

from numvec.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_ANGLE_CLAMP,
    EPS_VECTOR_COMPARE,
    # Epsilon comparisons
    within_tolerance,
    # Utilities
    clamp,
    sine_from_cosine,
    # Validation
    validate_finite,
    validate_non_negative_int,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_ANGLE_CLAMP",
    "EPS_VECTOR_COMPARE",
    # Numerical Safeguards: Epsilon comparisons
    "within_tolerance",
    # Numerical Safeguards: Utilities
    "clamp",
    "sine_from_cosine",
    # Numerical Safeguards: Validation
    "validate_finite",
    "validate_non_negative_int",
]
