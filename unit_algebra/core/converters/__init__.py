"""
Converter Module for the Unit Algebra

Immutable unit converters with exact composition rules: power-of-ten and
rational scales simplify against each other, everything else is chained.
"""

from .base import (
    AbstractConverter,
    IdentityConverter,
    IDENTITY,
    ConverterChain,
    MultiplyConverter,
    AddConverter
)
from .power_of_ten import PowerOfTenScale
from .rational import RationalScale, POWERS_OF_TEN

__all__ = [
    'AbstractConverter',
    'IdentityConverter',
    'IDENTITY',
    'ConverterChain',
    'MultiplyConverter',
    'AddConverter',
    'PowerOfTenScale',
    'RationalScale',
    'POWERS_OF_TEN'
]
