"""Tests for the converter family and its simplification rules"""

from decimal import Context, Decimal
import itertools

import numpy as np
import pytest

from unit_algebra.core.converters import (
    AddConverter,
    ConverterChain,
    IDENTITY,
    MultiplyConverter,
    PowerOfTenScale,
    RationalScale,
)
from unit_algebra.core.exceptions import InvalidConverterConstruction, UnitAlgebraError


EXPONENTS = [-30, -24, -9, -3, -1, 1, 2, 3, 6, 24, 30]
RATIONALS = [(3, 7), (-5, 2), (1, 3), (3600, 1), (22, 7), (1, 60)]


class TestPowerOfTenScale:

    @pytest.mark.parametrize("a,b", list(itertools.product(EXPONENTS, repeat=2)))
    def test_exponents_add(self, a, b):
        result = PowerOfTenScale(a).concatenate(PowerOfTenScale(b))
        if a + b == 0:
            assert result is IDENTITY
        else:
            assert result == PowerOfTenScale(a + b)

    def test_zero_exponent_rejected(self):
        with pytest.raises(InvalidConverterConstruction):
            PowerOfTenScale(0)

    def test_non_integer_exponent_rejected(self):
        with pytest.raises(InvalidConverterConstruction):
            PowerOfTenScale(1.5)

    def test_construction_error_is_value_error(self):
        with pytest.raises(ValueError):
            PowerOfTenScale(0)

    def test_tabulated_factors_are_exact(self):
        assert PowerOfTenScale(3).convert(1.0) == 1000.0
        assert PowerOfTenScale(-3).convert(1.0) == 0.001
        assert PowerOfTenScale(24).factor == 1e24
        assert PowerOfTenScale(-24).factor == 1e-24

    def test_outside_table_uses_exponentiation(self):
        assert PowerOfTenScale(30).factor == pytest.approx(1e30)
        assert PowerOfTenScale(400).factor == float('inf')

    def test_exact_conversion_shifts_exponent(self):
        assert PowerOfTenScale(3).convert_exact(Decimal("1.234")) == Decimal("1234")
        assert PowerOfTenScale(-40).convert_exact(Decimal("5")) == Decimal("5E-40")

    def test_exact_conversion_ignores_context_precision(self):
        value = Decimal("1.23456789012345678901234567890")
        result = PowerOfTenScale(2).convert_exact(value, Context(prec=3))
        assert result == Decimal("123.456789012345678901234567890")

    def test_inverse(self):
        assert PowerOfTenScale(6).inverse() == PowerOfTenScale(-6)

    def test_numpy_arrays(self):
        np.testing.assert_allclose(PowerOfTenScale(3).convert(np.array([1.0, 2.5])), [1000.0, 2500.0])

    def test_repr(self):
        assert repr(PowerOfTenScale(-6)) == "PowerOfTenScale(-6)"


class TestRationalScale:

    def test_canonical_powers_of_ten(self):
        assert RationalScale.of(1000, 1) == PowerOfTenScale(3)
        assert RationalScale.of(1, 1000000) == PowerOfTenScale(-6)
        assert RationalScale.of(7, 7) is IDENTITY

    def test_concatenation_reduces_to_power_of_ten(self):
        assert RationalScale(1000, 7).concatenate(RationalScale(7, 1)) == PowerOfTenScale(3)
        assert RationalScale(1, 3000).concatenate(RationalScale(3, 1000)) == PowerOfTenScale(-6)

    def test_concatenation_is_gcd_reduced(self):
        result = RationalScale(6, 4).concatenate(RationalScale(2, 9))
        assert result == RationalScale(1, 3)

    def test_absorbs_power_of_ten(self):
        assert RationalScale(1, 3).concatenate(PowerOfTenScale(3)) == RationalScale(1000, 3)
        assert PowerOfTenScale(-2).concatenate(RationalScale(300, 1)) == RationalScale(3, 1)
        assert RationalScale(3, 1).concatenate(PowerOfTenScale(-2)) == RationalScale(3, 100)

    def test_not_reduced_at_construction(self):
        scale = RationalScale(1000, 1)
        assert scale.numerator == 1000
        assert scale.denominator == 1

    @pytest.mark.parametrize("numerator,denominator", [(1, 0), (1, -2), (5, 5)])
    def test_invalid_construction(self, numerator, denominator):
        with pytest.raises(InvalidConverterConstruction):
            RationalScale(numerator, denominator)

    def test_of_normalizes_sign(self):
        assert RationalScale.of(3, -4) == RationalScale(-3, 4)

    @pytest.mark.parametrize("r1,r2", list(itertools.product(RATIONALS, repeat=2)))
    def test_concatenation_matches_sequential_conversion(self, r1, r2):
        a, b = RationalScale(*r1), RationalScale(*r2)
        x = 12.375
        assert a.concatenate(b).convert(x) == pytest.approx(a.convert(b.convert(x)))

    @pytest.mark.parametrize("r1,r2", list(itertools.product(RATIONALS, repeat=2)))
    def test_concatenation_exact_under_decimal_path(self, r1, r2):
        a, b = RationalScale(*r1), RationalScale(*r2)
        context = Context(prec=50)
        x = Decimal("12.375")
        combined = a.concatenate(b).convert_exact(x, context)
        expected = context.divide(context.multiply(x, Decimal(r1[0] * r2[0])), Decimal(r1[1] * r2[1]))
        assert combined == expected

    def test_exact_conversion_without_denominator(self):
        huge = RationalScale(10 ** 40 + 1, 1)
        assert huge.convert_exact(Decimal("2")) == Decimal(2 * (10 ** 40 + 1))

    def test_exact_conversion_rounds_with_context(self):
        result = RationalScale(1, 3).convert_exact(Decimal(1), Context(prec=5))
        assert result == Decimal("0.33333")

    def test_big_integers_convert_to_float(self):
        scale = RationalScale(10 ** 400, 3)
        assert scale.convert(1.0) == float('inf')

    def test_inverse_keeps_denominator_positive(self):
        assert RationalScale(-3, 4).inverse() == RationalScale(-4, 3)

    def test_as_fraction(self):
        assert RationalScale(22, 7).as_fraction().numerator == 22


class TestInverseLaw:

    @pytest.mark.parametrize("converter", [
        PowerOfTenScale(3),
        PowerOfTenScale(-27),
        RationalScale(22, 7),
        RationalScale(-1, 60),
    ])
    def test_inverse_law(self, converter):
        assert converter.concatenate(converter.inverse()) is IDENTITY
        assert converter.inverse().inverse() == converter

    def test_identity(self):
        assert IDENTITY.inverse() is IDENTITY
        assert IDENTITY.concatenate(PowerOfTenScale(3)) == PowerOfTenScale(3)
        assert PowerOfTenScale(3).concatenate(IDENTITY) == PowerOfTenScale(3)
        assert IDENTITY.flatten_to_steps() == []

    def test_float_factor_inverse_is_approximate(self):
        converter = MultiplyConverter(49.0)
        round_trip = converter.concatenate(converter.inverse())
        assert round_trip.convert(7.0) == pytest.approx(7.0)
        assert converter.inverse().inverse().factor == pytest.approx(49.0)


class TestChains:

    def test_fallback_chain(self):
        chain = AddConverter(273.15).concatenate(PowerOfTenScale(-3))
        assert isinstance(chain, ConverterChain)
        assert chain.convert(1000.0) == pytest.approx(274.15)
        assert not chain.is_linear()

    def test_chain_inverse(self):
        chain = AddConverter(10.0).concatenate(RationalScale(1, 3))
        assert chain.inverse().convert(chain.convert(6.0)) == pytest.approx(6.0)

    def test_flatten_to_steps_in_application_order(self):
        chain = AddConverter(1.0).concatenate(PowerOfTenScale(2))
        assert chain.flatten_to_steps() == [PowerOfTenScale(2), AddConverter(1.0)]
        assert PowerOfTenScale(2).flatten_to_steps() == [PowerOfTenScale(2)]

    def test_multiply_converters_combine(self):
        assert MultiplyConverter(2.0).concatenate(MultiplyConverter(0.5)) is IDENTITY
        assert MultiplyConverter(2.0).concatenate(MultiplyConverter(3.0)) == MultiplyConverter(6.0)

    def test_add_converters_combine(self):
        assert AddConverter(1.5).concatenate(AddConverter(-1.5)) is IDENTITY

    def test_identity_factors_rejected(self):
        with pytest.raises(InvalidConverterConstruction):
            MultiplyConverter(1.0)
        with pytest.raises(UnitAlgebraError):
            AddConverter(0.0)

    def test_converters_are_callable(self):
        assert RationalScale(1, 4)(8.0) == 2.0

    def test_structural_equality_and_hash(self):
        assert RationalScale(3, 7) == RationalScale(3, 7)
        assert hash(PowerOfTenScale(3)) == hash(PowerOfTenScale(3))
        assert len({RationalScale(3, 7), RationalScale(3, 7), PowerOfTenScale(3)}) == 2
