"""
Core Module for the Unit Algebra

Converters, units and the error hierarchy.
"""
