"""
Behaviour shared by every unit: arithmetic, transforms and converters.
"""

import numbers
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Optional

from ..converters import (
    AbstractConverter,
    AddConverter,
    IDENTITY,
    MultiplyConverter,
    RationalScale
)
from ..exceptions import UnitConversionError
from .dimension import QuantityDimension


def scale_for(factor) -> AbstractConverter:
    """
    Converter multiplying by ``factor``

    Integers, fractions and integral floats give an exact (canonical) scale,
    other floats a MultiplyConverter and 1 the identity.
    """
    if isinstance(factor, bool) or not isinstance(factor, numbers.Real):
        raise TypeError(f"Unsupported scale factor: {factor!r}")

    if isinstance(factor, numbers.Integral):
        fraction = Fraction(int(factor))
    elif isinstance(factor, numbers.Rational):
        fraction = Fraction(int(factor.numerator), int(factor.denominator))
    else:
        value = float(factor)
        if not value.is_integer():
            return MultiplyConverter(value)
        fraction = Fraction(int(value))

    return RationalScale.from_fraction(fraction)


class AbstractUnit(ABC):
    """
    Base class of all units

    Subclasses describe how they relate to their system unit; everything
    built on top of that (products, prefixes, converters between units) is
    defined here once.
    """

    @property
    def symbol(self) -> Optional[str]:
        return None

    @abstractmethod
    def get_system_converter(self) -> AbstractConverter:
        """Converter from this unit to its system unit"""

    @abstractmethod
    def get_dimension(self) -> QuantityDimension:
        """Dimension of the quantity measured by this unit"""

    @abstractmethod
    def to_system_unit(self) -> 'AbstractUnit':
        """Unscaled reference unit of the same family"""

    def get_system_unit(self) -> 'AbstractUnit':
        return self.to_system_unit()

    def get_symbol(self) -> Optional[str]:
        return self.symbol

    def is_system_unit(self) -> bool:
        system_unit = self.to_system_unit()
        return system_unit is self or self == system_unit

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def transform(self, converter: AbstractConverter) -> 'AbstractUnit':
        """Unit whose system converter is followed by ``converter``"""
        if converter.is_identity():
            return self
        from .transformed import TransformedUnit
        return TransformedUnit(self, converter)

    def shift(self, offset: float) -> 'AbstractUnit':
        if offset == 0:
            return self
        return self.transform(AddConverter(offset))

    def prefix(self, prefix) -> 'AbstractUnit':
        return prefix(self)

    def multiply(self, other) -> 'AbstractUnit':
        if isinstance(other, AbstractUnit):
            from .product import product_of
            return product_of(self, other)
        return self.transform(scale_for(other))

    def divide(self, other) -> 'AbstractUnit':
        if isinstance(other, AbstractUnit):
            from .product import quotient_of
            return quotient_of(self, other)
        return self.transform(scale_for(other).inverse())

    def pow(self, n: int) -> 'AbstractUnit':
        from .product import power_of
        return power_of(self, n)

    def root(self, n: int) -> 'AbstractUnit':
        from .product import root_of
        return root_of(self, n)

    def inverse(self) -> 'AbstractUnit':
        from .product import ONE, quotient_of
        if self == ONE:
            return self
        return quotient_of(ONE, self)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def is_compatible(self, that: 'AbstractUnit') -> bool:
        return (self.get_system_unit() == that.get_system_unit()
                or self.get_dimension() == that.get_dimension())

    def get_converter_to(self, that: 'AbstractUnit') -> AbstractConverter:
        """
        Converter from magnitudes in this unit to magnitudes in ``that``

        Raises:
            UnitConversionError: If the units measure different dimensions
        """
        if self == that:
            return IDENTITY
        if not self.is_compatible(that):
            raise UnitConversionError(
                f"{self} and {that} have different dimensions "
                f"({self.get_dimension()} vs {that.get_dimension()})",
                str(self), str(that))
        return that.get_system_converter().inverse().concatenate(self.get_system_converter())

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __mul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __pow__(self, n):
        return self.pow(n)

    def __str__(self):
        return self.symbol if self.symbol else repr(self)
