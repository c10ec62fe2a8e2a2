"""
Core numeric primitives and invariants.

This module contains the numeric tower: fixed-width integers, floats and
arbitrary-precision integers behind one canonical numeric value.
"""
