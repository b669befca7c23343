"""
Vector Models: Pydantic модели векторов для границы сериализации

Immutable Pydantic модели для обмена векторами через JSON.
Из этих моделей строятся JSON Schema контракты (geovec.core.contracts).

В отличие от Vector2/Vector3 (рабочие value-типы, допускающие NaN/Inf),
модели принимают только конечные значения: JSON не представляет NaN/Inf.
"""

from pydantic import BaseModel, Field, field_validator

from geovec.core.domain.spatial import BoundingBox2
from geovec.core.math.vector2 import Vector2
from geovec.core.math.vector3 import Vector3


# =============================================================================
# VECTOR MODELS
# =============================================================================


class Vector2Model(BaseModel):
    """Сериализуемое представление Vector2."""

    x: float = Field(..., allow_inf_nan=False, description="Компонента x")
    y: float = Field(..., allow_inf_nan=False, description="Компонента y")

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_vector(cls, v: Vector2) -> "Vector2Model":
        return cls(x=v.x, y=v.y)

    def to_vector(self) -> Vector2:
        """Новый (изменяемый) Vector2 с теми же компонентами."""
        return Vector2(self.x, self.y)


class Vector3Model(BaseModel):
    """Сериализуемое представление Vector3."""

    x: float = Field(..., allow_inf_nan=False, description="Компонента x")
    y: float = Field(..., allow_inf_nan=False, description="Компонента y")
    z: float = Field(..., allow_inf_nan=False, description="Компонента z")

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_vector(cls, v: Vector3) -> "Vector3Model":
        return cls(x=v.x, y=v.y, z=v.z)

    def to_vector(self) -> Vector3:
        """Новый (изменяемый) Vector3 с теми же компонентами."""
        return Vector3(self.x, self.y, self.z)


# =============================================================================
# BOUNDING BOX MODEL
# =============================================================================


class BoundingBox2Model(BaseModel):
    """
    Сериализуемое представление BoundingBox2.

    Углы задаются вложенными Vector2Model: {"min": {...}, "max": {...}}.
    """

    min: Vector2Model = Field(..., description="Нижний левый угол")
    max: Vector2Model = Field(..., description="Верхний правый угол")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("max")
    @classmethod
    def validate_max_not_below_min(cls, v: Vector2Model, info) -> Vector2Model:
        """Проверка, что max не меньше min ни по одной оси"""
        if "min" in info.data:
            lower = info.data["min"]
            if v.x < lower.x or v.y < lower.y:
                raise ValueError("max corner must not be below min corner")
        return v

    @classmethod
    def from_box(cls, box: BoundingBox2) -> "BoundingBox2Model":
        return cls(
            min=Vector2Model(x=box.min_x, y=box.min_y),
            max=Vector2Model(x=box.max_x, y=box.max_y),
        )

    def to_box(self) -> BoundingBox2:
        return BoundingBox2(self.min.x, self.min.y, self.max.x, self.max.y)
