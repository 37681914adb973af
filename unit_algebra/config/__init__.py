"""
Configuration Module for the Unit Algebra
"""

from .settings import AlgebraConfiguration

__all__ = ['AlgebraConfiguration']
