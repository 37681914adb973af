"""
Unit Algebra

Composable physical units with exact conversions: units are immutable
values kept in a canonical form, so equal units compare equal however they
were built.
"""

import logging

__version__ = "1.0.0"

# Library modules only log through the package logger
logging.getLogger("unit_algebra").addHandler(logging.NullHandler())

# Core imports for public API
from .core.converters import (
    AbstractConverter,
    IDENTITY,
    ConverterChain,
    MultiplyConverter,
    AddConverter,
    PowerOfTenScale,
    RationalScale
)
from .core.exceptions import (
    UnitAlgebraError,
    InvalidConverterConstruction,
    UnsupportedConversion,
    InvalidRootOrder,
    UnitConversionError,
    ConfigurationError
)
from .core.units import (
    AbstractUnit,
    BaseUnit,
    AlternateUnit,
    TransformedUnit,
    ProductUnit,
    ONE,
    product_of,
    quotient_of,
    power_of,
    root_of,
    QuantityDimension,
    MetricPrefix,
    UnitConverter
)
from .config.settings import AlgebraConfiguration

# Infrastructure
from .infrastructure.logging.logger import get_logger, setup_logging

__all__ = [
    # Converters
    'AbstractConverter', 'IDENTITY', 'ConverterChain', 'MultiplyConverter',
    'AddConverter', 'PowerOfTenScale', 'RationalScale',

    # Errors
    'UnitAlgebraError', 'InvalidConverterConstruction', 'UnsupportedConversion',
    'InvalidRootOrder', 'UnitConversionError', 'ConfigurationError',

    # Units
    'AbstractUnit', 'BaseUnit', 'AlternateUnit', 'TransformedUnit', 'ProductUnit',
    'ONE', 'product_of', 'quotient_of', 'power_of', 'root_of',
    'QuantityDimension', 'MetricPrefix', 'UnitConverter',

    # Configuration and logging
    'AlgebraConfiguration', 'get_logger', 'setup_logging',

    # Version info
    '__version__'
]
