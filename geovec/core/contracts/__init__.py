"""
Contract Validation Module

JSON Schema контракты векторов geovec, построенные из Pydantic моделей.
"""

from .validators import (
    CONTRACT_MODELS,
    JSON_SCHEMA_DIALECT,
    ContractValidator,
    SchemaRegistry,
    load_contract,
    validate_bounding_box2,
    validate_contract,
    validate_vector2,
    validate_vector3,
)

__all__ = [
    # Constants
    "CONTRACT_MODELS",
    "JSON_SCHEMA_DIALECT",
    # Classes
    "SchemaRegistry",
    "ContractValidator",
    # Functions
    "validate_contract",
    "load_contract",
    "validate_vector2",
    "validate_vector3",
    "validate_bounding_box2",
]
