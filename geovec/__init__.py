"""
geovec: 2D/3D vector algebra over double-precision floats.
"""

from geovec.core.math import EPS_NORMALIZED, Vector2, Vector3

__all__ = ["EPS_NORMALIZED", "Vector2", "Vector3"]

__version__ = "0.1.0"
