"""
Converter Base Classes

Common behaviour of every unit converter plus the converters that do not
simplify any further: the identity, an opaque two-step chain, an arbitrary
floating point factor and an affine offset.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Context, Decimal, getcontext
from typing import List, Optional

from ..exceptions import InvalidConverterConstruction


class AbstractConverter(ABC):
    """
    Immutable mapping of a magnitude in one unit to a magnitude in another

    ``a.concatenate(b)`` is the converter applying ``b`` first and then ``a``.
    Subclasses override ``concatenate`` only where the pair simplifies;
    everything else falls back to a ``ConverterChain``.
    """

    @abstractmethod
    def convert(self, value):
        """Convert a float (or numpy array) value"""

    @abstractmethod
    def convert_exact(self, value: Decimal, context: Optional[Context] = None) -> Decimal:
        """Convert a decimal value, rounding with ``context`` where needed"""

    @abstractmethod
    def inverse(self) -> 'AbstractConverter':
        """Converter undoing this one"""

    @abstractmethod
    def is_linear(self) -> bool:
        """True when the converter is a pure scale factor"""

    def is_identity(self) -> bool:
        return False

    def concatenate(self, other: 'AbstractConverter') -> 'AbstractConverter':
        if other.is_identity():
            return self
        return ConverterChain(self, other)

    def flatten_to_steps(self) -> List['AbstractConverter']:
        """Primitive converters in application order of ``convert``"""
        return [self]

    def __call__(self, value):
        return self.convert(value)


@dataclass(frozen=True)
class IdentityConverter(AbstractConverter):
    """Converter leaving every value untouched"""

    def convert(self, value):
        return value

    def convert_exact(self, value: Decimal, context: Optional[Context] = None) -> Decimal:
        return value

    def inverse(self) -> 'IdentityConverter':
        return self

    def is_linear(self) -> bool:
        return True

    def is_identity(self) -> bool:
        return True

    def concatenate(self, other: AbstractConverter) -> AbstractConverter:
        return other

    def flatten_to_steps(self) -> List[AbstractConverter]:
        return []

    def __repr__(self):
        return "IdentityConverter()"


IDENTITY = IdentityConverter()


@dataclass(frozen=True)
class ConverterChain(AbstractConverter):
    """
    Composite of two converters that could not be merged

    ``right`` is applied first, then ``left``.
    """
    left: AbstractConverter
    right: AbstractConverter

    def convert(self, value):
        return self.left.convert(self.right.convert(value))

    def convert_exact(self, value: Decimal, context: Optional[Context] = None) -> Decimal:
        return self.left.convert_exact(self.right.convert_exact(value, context), context)

    def inverse(self) -> 'ConverterChain':
        return ConverterChain(self.right.inverse(), self.left.inverse())

    def is_linear(self) -> bool:
        return self.left.is_linear() and self.right.is_linear()

    def flatten_to_steps(self) -> List[AbstractConverter]:
        return self.right.flatten_to_steps() + self.left.flatten_to_steps()

    def __repr__(self):
        return f"ConverterChain({self.left!r}, {self.right!r})"


@dataclass(frozen=True)
class MultiplyConverter(AbstractConverter):
    """
    Scaling by an arbitrary floating point factor

    The inverse divides the factor in floating point, so inverting twice or
    concatenating with the inverse is only equal to the original (or the
    identity) up to rounding. Exact factors belong in a RationalScale.
    """
    factor: float

    def __post_init__(self):
        if self.factor == 1.0:
            raise InvalidConverterConstruction("Would result in identity converter",
                                               converter="MultiplyConverter", value=self.factor)

    def convert(self, value):
        return value * self.factor

    def convert_exact(self, value: Decimal, context: Optional[Context] = None) -> Decimal:
        context = context or getcontext()
        return context.multiply(value, Decimal(repr(self.factor)))

    def concatenate(self, other: AbstractConverter) -> AbstractConverter:
        if not isinstance(other, MultiplyConverter):
            return super().concatenate(other)
        factor = self.factor * other.factor
        return IDENTITY if factor == 1.0 else MultiplyConverter(factor)

    def inverse(self) -> 'MultiplyConverter':
        return MultiplyConverter(1.0 / self.factor)

    def is_linear(self) -> bool:
        return True

    def __repr__(self):
        return f"MultiplyConverter({self.factor!r})"


@dataclass(frozen=True)
class AddConverter(AbstractConverter):
    """Affine shift by a constant offset, e.g. kelvin to degree Celsius"""
    offset: float

    def __post_init__(self):
        if self.offset == 0:
            raise InvalidConverterConstruction("Would result in identity converter",
                                               converter="AddConverter", value=self.offset)

    def convert(self, value):
        return value + self.offset

    def convert_exact(self, value: Decimal, context: Optional[Context] = None) -> Decimal:
        context = context or getcontext()
        return context.add(value, Decimal(repr(self.offset)))

    def concatenate(self, other: AbstractConverter) -> AbstractConverter:
        if not isinstance(other, AddConverter):
            return super().concatenate(other)
        offset = self.offset + other.offset
        return IDENTITY if offset == 0 else AddConverter(offset)

    def inverse(self) -> 'AddConverter':
        return AddConverter(-self.offset)

    def is_linear(self) -> bool:
        return False

    def __repr__(self):
        return f"AddConverter({self.offset!r})"
