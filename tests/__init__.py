"""
Test suite for exactnum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
