"""
Exact rational scaling

RationalScale multiplies by ``numerator / denominator`` using Python's
arbitrary-precision integers. Compositions are reduced by their greatest
common divisor and pure powers of ten are handed back as PowerOfTenScale,
so every exact factor reachable from prefixes and integer ratios has a
single representation.
"""

import math
from dataclasses import dataclass
from decimal import Context, Decimal, getcontext, MAX_EMAX, MIN_EMIN
from fractions import Fraction
from typing import Dict, Optional

from ..exceptions import InvalidConverterConstruction
from .base import AbstractConverter, IDENTITY
from .power_of_ten import PowerOfTenScale

# 10**n -> n, n = 0..32
POWERS_OF_TEN: Dict[int, int] = {10 ** n: n for n in range(33)}


def _to_float(integer: int) -> float:
    """int -> float, infinite when the integer is out of double range"""
    try:
        return float(integer)
    except OverflowError:
        return math.copysign(math.inf, integer)


@dataclass(frozen=True)
class RationalScale(AbstractConverter):
    """
    Multiplication by an exact ratio of integers

    The denominator is always positive; the sign lives in the numerator.
    The pair need not be in lowest terms when constructed directly.
    """
    numerator: int
    denominator: int

    def __post_init__(self):
        for name in ('numerator', 'denominator'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConverterConstruction(f"{name.capitalize()} must be an integer",
                                                   converter="RationalScale", value=value)
        if self.denominator <= 0:
            raise InvalidConverterConstruction("Negative or zero denominator",
                                               converter="RationalScale", value=self.denominator)
        if self.numerator == self.denominator:
            raise InvalidConverterConstruction("Would result in identity converter",
                                               converter="RationalScale",
                                               value=f"{self.numerator}/{self.denominator}")

    @classmethod
    def of(cls, numerator: int, denominator: int) -> AbstractConverter:
        """
        Canonical converter for ``numerator / denominator``

        The ratio is reduced to lowest terms, then returned as the identity,
        a PowerOfTenScale or a RationalScale, in that order of preference.
        """
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        if denominator == 0:
            raise InvalidConverterConstruction("Negative or zero denominator",
                                               converter="RationalScale", value=denominator)

        gcd = math.gcd(numerator, denominator)
        numerator //= gcd
        denominator //= gcd

        if denominator == 1:
            if numerator == 1:
                return IDENTITY
            if numerator in POWERS_OF_TEN:
                return PowerOfTenScale(POWERS_OF_TEN[numerator])
        elif numerator == 1 and denominator in POWERS_OF_TEN:
            return PowerOfTenScale(-POWERS_OF_TEN[denominator])

        return cls(numerator, denominator)

    @classmethod
    def from_fraction(cls, value: Fraction) -> AbstractConverter:
        value = Fraction(value)
        return cls.of(value.numerator, value.denominator)

    @property
    def factor(self) -> float:
        """Scale factor as a double"""
        return _to_float(self.numerator) / _to_float(self.denominator)

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def convert(self, value):
        return value * _to_float(self.numerator) / _to_float(self.denominator)

    def convert_exact(self, value: Decimal, context: Optional[Context] = None) -> Decimal:
        context = context or getcontext()

        # Wide enough to hold the full product, so only the division rounds
        digits = len(value.as_tuple().digits) + len(str(abs(self.numerator)))
        exact = Context(prec=digits, Emax=MAX_EMAX, Emin=MIN_EMIN)
        multiplied = exact.multiply(value, Decimal(self.numerator))

        if self.denominator == 1:
            return multiplied
        return context.divide(multiplied, Decimal(self.denominator))

    def concatenate(self, other: AbstractConverter) -> AbstractConverter:
        if not isinstance(other, (RationalScale, PowerOfTenScale)):
            return super().concatenate(other)

        if isinstance(other, RationalScale):
            numerator = self.numerator * other.numerator
            denominator = self.denominator * other.denominator
        elif other.exponent > 0:
            numerator = self.numerator * 10 ** other.exponent
            denominator = self.denominator
        else:
            numerator = self.numerator
            denominator = self.denominator * 10 ** -other.exponent

        return RationalScale.of(numerator, denominator)

    def inverse(self) -> 'RationalScale':
        if self.numerator < 0:
            return RationalScale(-self.denominator, -self.numerator)
        return RationalScale(self.denominator, self.numerator)

    def is_linear(self) -> bool:
        return True

    def __repr__(self):
        return f"RationalScale({self.numerator}, {self.denominator})"
