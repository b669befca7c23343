"""
Test suite for geovec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
