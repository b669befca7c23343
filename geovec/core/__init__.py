"""
Core vector types, numerical primitives, and serialization contracts.

This module contains the foundational building blocks that are independent
of any consumer (spatial indexes, physics, rendering).
"""
