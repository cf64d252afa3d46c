"""
Test suite for sqrtkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
