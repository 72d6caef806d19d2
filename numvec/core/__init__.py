"""
Core domain models and mathematical primitives.

This module contains the Vector value type and the numeric safeguards it
relies on.
"""
