"""Tests for unit values, prefixes, dimensions and the SI catalogue"""

from fractions import Fraction

import pytest

from unit_algebra.core.converters import (
    AddConverter,
    IDENTITY,
    MultiplyConverter,
    PowerOfTenScale,
    RationalScale,
)
from unit_algebra.core.exceptions import InvalidRootOrder, UnitConversionError
from unit_algebra.core.units import dimension
from unit_algebra.core.units.base import AlternateUnit, BaseUnit
from unit_algebra.core.units.definitions import (
    CELSIUS,
    GRAM,
    HOUR,
    JOULE,
    KELVIN,
    KILOGRAM,
    KILOWATT_HOUR,
    LITRE,
    METRE,
    NEWTON,
    SECOND,
    SI_UNIT_DEFINITIONS,
    UnitDefinition,
    UnitType,
    WATT,
    get_all_unit_symbols,
    get_unit_info,
    list_units_by_type,
    register_custom_unit,
    unregister_custom_unit,
)
from unit_algebra.core.units.prefixes import CENTI, KILO, MEGA, MICRO, MILLI, MetricPrefix
from unit_algebra.core.units.product import ONE
from unit_algebra.core.units.transformed import TransformedUnit


class TestQuantityDimension:

    def test_algebra(self):
        velocity = dimension.LENGTH / dimension.TIME
        assert velocity.exponents == {'L': Fraction(1), 'T': Fraction(-1)}
        assert velocity * dimension.TIME == dimension.LENGTH
        assert (dimension.LENGTH ** 2).root(2) == dimension.LENGTH

    def test_zero_exponents_dropped(self):
        assert (dimension.MASS / dimension.MASS) == dimension.NONE
        assert (dimension.MASS / dimension.MASS).is_dimensionless()

    def test_fractional_exponents(self):
        assert dimension.LENGTH.root(2).exponents == {'L': Fraction(1, 2)}

    def test_invalid_root(self):
        with pytest.raises(InvalidRootOrder):
            dimension.LENGTH.root(0)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            dimension.LENGTH._exponents = ()

    def test_hashable(self):
        assert len({dimension.LENGTH, dimension.QuantityDimension.of('L'), dimension.MASS}) == 2

    def test_str(self):
        assert str(dimension.NONE) == "[1]"
        assert str(dimension.LENGTH / dimension.TIME ** 2) == "[L·T^-2]"


class TestPrefixes:

    def test_milli_kilo_cancel(self):
        assert MILLI(KILO(METRE)) == METRE
        assert MILLI(KILO(METRE)) is METRE

    def test_prefix_symbols(self):
        assert KILO(METRE).symbol == "km"
        assert MICRO(GRAM).symbol == "µg"
        assert MetricPrefix.from_symbol("M") is MEGA
        assert MetricPrefix.from_symbol("x") is None

    def test_prefix_converter(self):
        assert KILO.converter == PowerOfTenScale(3)
        assert CENTI(METRE).get_converter_to(METRE) == PowerOfTenScale(-2)

    def test_equal_converters_along_different_paths(self):
        by_prefix = MICRO(GRAM)
        by_division = GRAM.divide(1000).divide(1000)
        assert by_prefix == by_division

        forward = by_prefix.get_converter_to(KILOGRAM)
        assert forward == by_division.get_converter_to(KILOGRAM)
        assert forward == PowerOfTenScale(-9)
        assert KILOGRAM.get_converter_to(by_prefix) == KILOGRAM.get_converter_to(by_division)

    def test_different_paths_different_factor(self):
        other = GRAM.divide(1000).divide(2000)
        assert other.get_converter_to(KILOGRAM) != MICRO(GRAM).get_converter_to(KILOGRAM)
        assert other.get_converter_to(KILOGRAM) == RationalScale(1, 2000000000)

    def test_kilogram_is_kilo_gram(self):
        assert KILO(GRAM) == KILOGRAM

    def test_prefix_method(self):
        assert METRE.prefix(KILO) == KILO(METRE)


class TestUnitArithmetic:

    def test_scale_by_number(self):
        assert METRE.multiply(1000) == KILO(METRE)
        assert METRE.multiply(1) is METRE
        assert METRE.multiply(Fraction(1, 100)) == CENTI(METRE)
        assert METRE.multiply(1000.0) == KILO(METRE)

    def test_scale_by_float(self):
        foot = METRE.multiply(0.3048)
        assert isinstance(foot, TransformedUnit)
        assert foot.converter == MultiplyConverter(0.3048)

    def test_invalid_scale(self):
        with pytest.raises(TypeError):
            METRE.multiply("1000")

    def test_operators(self):
        assert METRE * SECOND == METRE.multiply(SECOND)
        assert METRE / SECOND == METRE.divide(SECOND)
        assert METRE ** 2 == METRE.pow(2)

    def test_inverse(self):
        assert ONE.inverse() is ONE
        assert SECOND.inverse().inverse() == SECOND

    def test_shift(self):
        assert KELVIN.shift(0) is KELVIN
        assert CELSIUS.converter == AddConverter(273.15)

    def test_transform_folds_into_parent(self):
        hour_in_milli = MILLI(HOUR)
        assert hour_in_milli.parent_unit is SECOND
        assert hour_in_milli.converter == RationalScale(18, 5)

    def test_converter_to_self(self):
        assert METRE.get_converter_to(METRE) is IDENTITY

    def test_incompatible_units(self):
        with pytest.raises(UnitConversionError):
            METRE.get_converter_to(SECOND)

    def test_celsius_to_kelvin(self):
        assert CELSIUS.get_converter_to(KELVIN).convert(25.0) == pytest.approx(298.15)
        assert KELVIN.get_converter_to(CELSIUS).convert(0.0) == pytest.approx(-273.15)

    def test_kilowatt_hour_to_joule(self):
        assert KILOWATT_HOUR.get_converter_to(JOULE) == RationalScale(3600000, 1)
        assert KILOWATT_HOUR.get_converter_to(MEGA(JOULE)) == RationalScale(18, 5)

    def test_litre(self):
        assert LITRE.get_converter_to(METRE ** 3) == PowerOfTenScale(-3)
        assert MILLI(LITRE).get_converter_to(CENTI(METRE) ** 3) is IDENTITY

    def test_alternate_unit_requires_system_parent(self):
        with pytest.raises(ValueError):
            AlternateUnit(KILO(METRE), 'X')

    def test_alternate_unit_dimension(self):
        assert WATT.get_dimension() == dimension.MASS * dimension.LENGTH ** 2 / dimension.TIME ** 3
        assert NEWTON.is_system_unit()

    def test_base_unit_equality(self):
        assert BaseUnit('m', dimension.LENGTH) == METRE
        assert BaseUnit('m', dimension.TIME) != METRE


class TestDefinitions:

    def test_lookup(self):
        assert get_unit_info('kWh').unit == KILOWATT_HOUR
        assert get_unit_info('meter').symbol == 'm'
        assert get_unit_info('furlong') is None

    def test_registry_symbols_match_keys(self):
        for symbol, unit_def in SI_UNIT_DEFINITIONS.items():
            assert unit_def.symbol == symbol

    def test_list_by_type(self):
        power_units = {d.symbol for d in list_units_by_type(UnitType.POWER)}
        assert power_units == {'W', 'kW', 'MW', 'GW'}

    def test_register_custom_unit(self):
        foot = UnitDefinition('ft', 'foot', METRE.multiply(0.3048), UnitType.LENGTH)
        register_custom_unit(foot)
        assert get_unit_info('ft') is foot
        assert 'ft' in get_all_unit_symbols()

        with pytest.raises(ValueError):
            register_custom_unit(foot)

        unregister_custom_unit('ft')
        assert get_unit_info('ft') is None

    def test_register_duplicate_si_symbol(self):
        with pytest.raises(ValueError):
            register_custom_unit(UnitDefinition('m', 'metre', METRE, UnitType.LENGTH))

    def test_invalid_definition(self):
        with pytest.raises(ValueError):
            UnitDefinition('', 'nothing', METRE, UnitType.LENGTH)
        with pytest.raises(ValueError):
            UnitDefinition('x', 'not a unit', 42, UnitType.LENGTH)
