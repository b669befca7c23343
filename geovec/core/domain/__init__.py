"""
Domain models and value objects.

Contains serialization models for vectors and the interface used by
spatial-partitioning consumers.
"""

from geovec.core.domain.spatial import BoundingBox2, PointLike, points_within_radius
from geovec.core.domain.vectors import BoundingBox2Model, Vector2Model, Vector3Model

__all__ = [
    # Spatial interface
    "PointLike",
    "BoundingBox2",
    "points_within_radius",
    # Serialization models
    "Vector2Model",
    "Vector3Model",
    "BoundingBox2Model",
]
