"""
Test suite for matcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
