"""
Test suite for the numeric tower

Contains:
- tests/unit/          : Unit tests for individual modules
"""
