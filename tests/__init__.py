"""
Test suite for the RREF puzzle engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
