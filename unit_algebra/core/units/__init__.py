"""
Units Module for the Unit Algebra

Unit values, their canonical products and the SI catalogue, plus a
cached converter between registered units.
"""

from .abstract import AbstractUnit
from .base import BaseUnit, AlternateUnit
from .transformed import TransformedUnit
from .product import (
    ProductElement,
    ProductUnit,
    ONE,
    product_of,
    quotient_of,
    power_of,
    root_of
)
from .dimension import QuantityDimension
from .prefixes import MetricPrefix
from .definitions import (
    SI_UNIT_DEFINITIONS,
    UnitDefinition,
    UnitType,
    register_custom_unit,
    unregister_custom_unit,
    get_unit_info,
    list_units_by_type,
    get_all_unit_symbols
)
from .converter import UnitConverter

# Create default converter instance
default_converter = UnitConverter()


# Convenience functions using default converter
def convert_value(value, from_unit, to_unit):
    """Convert value between units using default converter"""
    return default_converter.convert(value, from_unit, to_unit)


def get_conversion_factor(from_unit, to_unit):
    """Get conversion factor between units using default converter"""
    return default_converter.get_conversion_factor(from_unit, to_unit)


__all__ = [
    'AbstractUnit',
    'BaseUnit',
    'AlternateUnit',
    'TransformedUnit',
    'ProductElement',
    'ProductUnit',
    'ONE',
    'product_of',
    'quotient_of',
    'power_of',
    'root_of',
    'QuantityDimension',
    'MetricPrefix',
    'SI_UNIT_DEFINITIONS',
    'UnitDefinition',
    'UnitType',
    'register_custom_unit',
    'unregister_custom_unit',
    'get_unit_info',
    'list_units_by_type',
    'get_all_unit_symbols',
    'UnitConverter',
    'default_converter',
    'convert_value',
    'get_conversion_factor'
]
