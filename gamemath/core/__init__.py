"""
Core math primitives, value types and the matrix solver.

Everything here is pure in-process computation: no I/O, no global state
besides the seeded random generator in core.math.randomness.
"""
