"""
Unit Definitions for the Unit Algebra

SI base units, the derived units built from them, and a symbol registry
used by the converter facade and the command line.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from . import dimension
from .abstract import AbstractUnit
from .base import AlternateUnit, BaseUnit
from .prefixes import CENTI, GIGA, KILO, MEGA, MICRO, MILLI, NANO
from .product import ONE


class UnitType(Enum):
    """Categories of physical units"""
    LENGTH = "length"
    TIME = "time"
    MASS = "mass"
    ELECTRIC_CURRENT = "electric_current"
    TEMPERATURE = "temperature"
    AMOUNT_OF_SUBSTANCE = "amount_of_substance"
    LUMINOUS_INTENSITY = "luminous_intensity"
    FORCE = "force"
    PRESSURE = "pressure"
    ENERGY = "energy"
    POWER = "power"
    FREQUENCY = "frequency"
    VOLUME = "volume"
    VELOCITY = "velocity"
    DIMENSIONLESS = "dimensionless"


@dataclass(frozen=True)
class UnitDefinition:
    """
    Registry entry for a unit

    Pairs a unit value with the metadata needed to look it up by symbol
    and list it by category.
    """
    symbol: str  # Lookup symbol (e.g., "km", "kWh")
    name: str  # Full name (e.g., "kilometre")
    unit: AbstractUnit  # Unit value
    unit_type: UnitType  # Category of unit
    description: str = ""  # Human-readable description
    aliases: List[str] = field(default_factory=list)  # Alternative symbols

    def __post_init__(self):
        """Validate unit definition after creation"""
        if not self.symbol:
            raise ValueError("Unit symbol must not be empty")
        if not isinstance(self.unit, AbstractUnit):
            raise ValueError(f"Unit for '{self.symbol}' must be a unit value, got {self.unit!r}")


# ===================================================================
# SI BASE UNITS
# ===================================================================

METRE = BaseUnit('m', dimension.LENGTH, 'metre')
KILOGRAM = BaseUnit('kg', dimension.MASS, 'kilogram')
SECOND = BaseUnit('s', dimension.TIME, 'second')
AMPERE = BaseUnit('A', dimension.ELECTRIC_CURRENT, 'ampere')
KELVIN = BaseUnit('K', dimension.TEMPERATURE, 'kelvin')
MOLE = BaseUnit('mol', dimension.AMOUNT_OF_SUBSTANCE, 'mole')
CANDELA = BaseUnit('cd', dimension.LUMINOUS_INTENSITY, 'candela')

# ===================================================================
# DERIVED UNITS
# ===================================================================

GRAM = KILOGRAM.divide(1000).with_symbol('g')
MINUTE = SECOND.multiply(60).with_symbol('min')
HOUR = SECOND.multiply(3600).with_symbol('h')
DAY = SECOND.multiply(86400).with_symbol('d')
LITRE = METRE.pow(3).divide(1000).with_symbol('l')
CELSIUS = KELVIN.shift(273.15).with_symbol('°C')

NEWTON = AlternateUnit(METRE.multiply(KILOGRAM).divide(SECOND.pow(2)), 'N', 'newton')
PASCAL = AlternateUnit(NEWTON.divide(METRE.pow(2)), 'Pa', 'pascal')
JOULE = AlternateUnit(NEWTON.multiply(METRE), 'J', 'joule')
WATT = AlternateUnit(JOULE.divide(SECOND), 'W', 'watt')
HERTZ = AlternateUnit(ONE.divide(SECOND), 'Hz', 'hertz')

METRE_PER_SECOND = METRE.divide(SECOND)
KILOWATT_HOUR = KILO(WATT).multiply(HOUR)

# ===================================================================
# SYMBOL REGISTRY
# ===================================================================

SI_UNIT_DEFINITIONS: Dict[str, UnitDefinition] = {
    # Length
    'm': UnitDefinition('m', 'metre', METRE, UnitType.LENGTH, 'SI base unit of length', aliases=['meter']),
    'km': UnitDefinition('km', 'kilometre', KILO(METRE), UnitType.LENGTH),
    'cm': UnitDefinition('cm', 'centimetre', CENTI(METRE), UnitType.LENGTH),
    'mm': UnitDefinition('mm', 'millimetre', MILLI(METRE), UnitType.LENGTH),
    'µm': UnitDefinition('µm', 'micrometre', MICRO(METRE), UnitType.LENGTH, aliases=['um']),
    'nm': UnitDefinition('nm', 'nanometre', NANO(METRE), UnitType.LENGTH),

    # Mass
    'kg': UnitDefinition('kg', 'kilogram', KILOGRAM, UnitType.MASS, 'SI base unit of mass'),
    'g': UnitDefinition('g', 'gram', GRAM, UnitType.MASS),
    'mg': UnitDefinition('mg', 'milligram', MILLI(GRAM), UnitType.MASS),
    'µg': UnitDefinition('µg', 'microgram', MICRO(GRAM), UnitType.MASS, aliases=['ug']),

    # Time
    's': UnitDefinition('s', 'second', SECOND, UnitType.TIME, 'SI base unit of time'),
    'ms': UnitDefinition('ms', 'millisecond', MILLI(SECOND), UnitType.TIME),
    'µs': UnitDefinition('µs', 'microsecond', MICRO(SECOND), UnitType.TIME, aliases=['us']),
    'min': UnitDefinition('min', 'minute', MINUTE, UnitType.TIME),
    'h': UnitDefinition('h', 'hour', HOUR, UnitType.TIME),
    'd': UnitDefinition('d', 'day', DAY, UnitType.TIME),

    # Other base quantities
    'A': UnitDefinition('A', 'ampere', AMPERE, UnitType.ELECTRIC_CURRENT, 'SI base unit of current'),
    'K': UnitDefinition('K', 'kelvin', KELVIN, UnitType.TEMPERATURE, 'SI base unit of temperature'),
    '°C': UnitDefinition('°C', 'degree Celsius', CELSIUS, UnitType.TEMPERATURE,
                         'Offset by 273.15 K', aliases=['degC']),
    'mol': UnitDefinition('mol', 'mole', MOLE, UnitType.AMOUNT_OF_SUBSTANCE, 'SI base unit of amount'),
    'cd': UnitDefinition('cd', 'candela', CANDELA, UnitType.LUMINOUS_INTENSITY,
                         'SI base unit of luminous intensity'),

    # Mechanics
    'N': UnitDefinition('N', 'newton', NEWTON, UnitType.FORCE, 'kg·m/s²'),
    'Pa': UnitDefinition('Pa', 'pascal', PASCAL, UnitType.PRESSURE, 'N/m²'),
    'kPa': UnitDefinition('kPa', 'kilopascal', KILO(PASCAL), UnitType.PRESSURE),
    'MPa': UnitDefinition('MPa', 'megapascal', MEGA(PASCAL), UnitType.PRESSURE),
    'm/s': UnitDefinition('m/s', 'metre per second', METRE_PER_SECOND, UnitType.VELOCITY),
    'l': UnitDefinition('l', 'litre', LITRE, UnitType.VOLUME, 'Cubic decimetre', aliases=['L']),
    'ml': UnitDefinition('ml', 'millilitre', MILLI(LITRE), UnitType.VOLUME, aliases=['mL']),

    # Energy and power
    'J': UnitDefinition('J', 'joule', JOULE, UnitType.ENERGY, 'N·m'),
    'kJ': UnitDefinition('kJ', 'kilojoule', KILO(JOULE), UnitType.ENERGY),
    'MJ': UnitDefinition('MJ', 'megajoule', MEGA(JOULE), UnitType.ENERGY),
    'kWh': UnitDefinition('kWh', 'kilowatt hour', KILOWATT_HOUR, UnitType.ENERGY),
    'W': UnitDefinition('W', 'watt', WATT, UnitType.POWER, 'J/s'),
    'kW': UnitDefinition('kW', 'kilowatt', KILO(WATT), UnitType.POWER),
    'MW': UnitDefinition('MW', 'megawatt', MEGA(WATT), UnitType.POWER),
    'GW': UnitDefinition('GW', 'gigawatt', GIGA(WATT), UnitType.POWER),
    'Hz': UnitDefinition('Hz', 'hertz', HERTZ, UnitType.FREQUENCY, '1/s'),

    # Dimensionless
    '1': UnitDefinition('1', 'one', ONE, UnitType.DIMENSIONLESS, 'Dimensionless unit'),
}

# ===================================================================
# UNIT REGISTRY FUNCTIONS
# ===================================================================

_custom_units: Dict[str, UnitDefinition] = {}


def register_custom_unit(unit_def: UnitDefinition) -> None:
    """
    Register a custom unit definition

    Args:
        unit_def: Custom unit definition to register

    Raises:
        ValueError: If unit symbol already exists
    """
    if unit_def.symbol in SI_UNIT_DEFINITIONS or unit_def.symbol in _custom_units:
        raise ValueError(f"Unit '{unit_def.symbol}' already registered")

    _custom_units[unit_def.symbol] = unit_def


def unregister_custom_unit(symbol: str) -> None:
    """Remove a custom unit definition, ignoring unknown symbols"""
    _custom_units.pop(symbol, None)


def get_unit_info(unit_symbol: str) -> Optional[UnitDefinition]:
    """
    Get unit definition by symbol

    Args:
        unit_symbol: Symbol to look up (e.g., 'kWh')

    Returns:
        UnitDefinition if found, None otherwise
    """
    # Check custom units first
    if unit_symbol in _custom_units:
        return _custom_units[unit_symbol]

    if unit_symbol in SI_UNIT_DEFINITIONS:
        return SI_UNIT_DEFINITIONS[unit_symbol]

    # Check aliases
    for unit_def in {**SI_UNIT_DEFINITIONS, **_custom_units}.values():
        if unit_symbol in unit_def.aliases:
            return unit_def

    return None


def list_units_by_type(unit_type: UnitType) -> List[UnitDefinition]:
    """
    List all units of a specific type

    Args:
        unit_type: Type of units to list

    Returns:
        List of unit definitions of the specified type
    """
    all_units = {**SI_UNIT_DEFINITIONS, **_custom_units}
    return [unit_def for unit_def in all_units.values() if unit_def.unit_type == unit_type]


def get_all_unit_symbols() -> List[str]:
    """Get list of all registered unit symbols"""
    all_units = {**SI_UNIT_DEFINITIONS, **_custom_units}
    symbols = list(all_units.keys())

    # Add aliases
    for unit_def in all_units.values():
        symbols.extend(unit_def.aliases)

    return sorted(set(symbols))
