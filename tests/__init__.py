"""
Test suite for gamemath

Contains:
- tests/unit/          : Unit tests for scalar helpers, vectors, matrices and elimination
"""
