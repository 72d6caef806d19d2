"""
Test suite for numvec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
