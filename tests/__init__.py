"""
Test suite for decimal-bignum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
