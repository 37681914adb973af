"""
Power-of-ten scaling, the converter behind every metric prefix.
"""

from dataclasses import dataclass
from decimal import Context, Decimal
from typing import Optional

from ..exceptions import InvalidConverterConstruction
from .base import AbstractConverter, IDENTITY

# Exact double literals; 10.0 ** n drifts in the last bit for some n
_POSITIVE_FACTORS = tuple(float(f"1e{n}") for n in range(25))
_NEGATIVE_FACTORS = tuple(float(f"1e-{n}") for n in range(25))
MAX_TABULATED_EXPONENT = 24


@dataclass(frozen=True)
class PowerOfTenScale(AbstractConverter):
    """
    Multiplication by ``10 ** exponent``

    Exponents in [-24, 24] use a table of exact double factors. Outside that
    range the factor comes from direct exponentiation and may lose precision;
    ``convert_exact`` is always exact.
    """
    exponent: int

    def __post_init__(self):
        if isinstance(self.exponent, bool) or not isinstance(self.exponent, int):
            raise InvalidConverterConstruction("Exponent must be an integer",
                                               converter="PowerOfTenScale", value=self.exponent)
        if self.exponent == 0:
            raise InvalidConverterConstruction("Would result in identity converter",
                                               converter="PowerOfTenScale", value=self.exponent)

    @property
    def factor(self) -> float:
        """Scale factor as a double"""
        if 0 <= self.exponent <= MAX_TABULATED_EXPONENT:
            return _POSITIVE_FACTORS[self.exponent]
        if -MAX_TABULATED_EXPONENT <= self.exponent < 0:
            return _NEGATIVE_FACTORS[-self.exponent]
        try:
            return 10.0 ** self.exponent
        except OverflowError:
            return float('inf')

    def convert(self, value):
        return value * self.factor

    def convert_exact(self, value: Decimal, context: Optional[Context] = None) -> Decimal:
        # Shifting the decimal point never rounds, so the context is not used
        sign, digits, exponent = value.as_tuple()
        if not isinstance(exponent, int):
            return value
        return Decimal((sign, digits, exponent + self.exponent))

    def concatenate(self, other: AbstractConverter) -> AbstractConverter:
        from .rational import RationalScale

        if isinstance(other, RationalScale):
            return other.concatenate(self)
        if not isinstance(other, PowerOfTenScale):
            return super().concatenate(other)

        exponent = self.exponent + other.exponent
        if exponent == 0:
            return IDENTITY
        return PowerOfTenScale(exponent)

    def inverse(self) -> 'PowerOfTenScale':
        return PowerOfTenScale(-self.exponent)

    def is_linear(self) -> bool:
        return True

    def __repr__(self):
        return f"PowerOfTenScale({self.exponent})"
