"""
Core math modules для geovec

Двумерные и трёхмерные векторы над float и общие численные примитивы.
"""

# Numerical Safeguards
from geovec.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_NORMALIZED,
    QUARTER_TURN,
    # Trigonometry
    cos_for_angle,
    cos_from_sin,
    # NaN/Inf checks
    is_valid_float,
    validate_finite,
    # Comparisons and utilities
    clamp,
    is_close,
)

# Vectors
from geovec.core.math.vector2 import Vector2
from geovec.core.math.vector3 import Vector3

# Vector Guards
from geovec.core.math.vector_guards import (
    VectorPreconditionViolation,
    is_finite_vector,
    normalized_or,
    validate_finite_vector,
    validate_non_null,
    validate_normalized,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_NORMALIZED",
    "QUARTER_TURN",
    # Numerical Safeguards: Trigonometry
    "cos_for_angle",
    "cos_from_sin",
    # Numerical Safeguards: NaN/Inf checks
    "is_valid_float",
    "validate_finite",
    # Numerical Safeguards: Comparisons and utilities
    "clamp",
    "is_close",
    # Vectors
    "Vector2",
    "Vector3",
    # Vector Guards: Exceptions
    "VectorPreconditionViolation",
    # Vector Guards: Functions
    "is_finite_vector",
    "normalized_or",
    "validate_finite_vector",
    "validate_non_null",
    "validate_normalized",
]
