"""
Physical dimensions as rational exponent vectors over base quantities.
"""

from fractions import Fraction
from typing import Dict, Iterator, Mapping, Tuple, Union

from ..exceptions import InvalidRootOrder

Exponent = Union[int, Fraction]


class QuantityDimension:
    """
    Immutable product of base dimensions raised to rational powers

    Zero exponents are never stored, so equal dimensions always have equal
    internal representations.
    """

    __slots__ = ('_exponents',)

    def __init__(self, exponents: Mapping[str, Exponent] = None):
        items = ((symbol, Fraction(power)) for symbol, power in (exponents or {}).items())
        object.__setattr__(self, '_exponents',
                           tuple(sorted((s, p) for s, p in items if p != 0)))

    def __setattr__(self, name, value):
        raise AttributeError("QuantityDimension is immutable")

    @classmethod
    def of(cls, symbol: str) -> 'QuantityDimension':
        """Base dimension identified by ``symbol``"""
        return cls({symbol: 1})

    @property
    def exponents(self) -> Dict[str, Fraction]:
        return dict(self._exponents)

    def multiply(self, other: 'QuantityDimension') -> 'QuantityDimension':
        combined = dict(self._exponents)
        for symbol, power in other._exponents:
            combined[symbol] = combined.get(symbol, 0) + power
        return QuantityDimension(combined)

    def divide(self, other: 'QuantityDimension') -> 'QuantityDimension':
        return self.multiply(other.pow(-1))

    def pow(self, n: int) -> 'QuantityDimension':
        return QuantityDimension({s: p * n for s, p in self._exponents})

    def root(self, n: int) -> 'QuantityDimension':
        if n <= 0:
            raise InvalidRootOrder("Root order must be positive", order=n)
        return QuantityDimension({s: p / n for s, p in self._exponents})

    def is_dimensionless(self) -> bool:
        return not self._exponents

    def __iter__(self) -> Iterator[Tuple[str, Fraction]]:
        return iter(self._exponents)

    def __mul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __pow__(self, n):
        return self.pow(n)

    def __eq__(self, other):
        if not isinstance(other, QuantityDimension):
            return NotImplemented
        return self._exponents == other._exponents

    def __hash__(self):
        return hash(self._exponents)

    def __repr__(self):
        return f"QuantityDimension({dict(self._exponents)!r})"

    def __str__(self):
        if not self._exponents:
            return "[1]"
        parts = []
        for symbol, power in self._exponents:
            parts.append(symbol if power == 1 else f"{symbol}^{power}")
        return "[" + "·".join(parts) + "]"


NONE = QuantityDimension()
LENGTH = QuantityDimension.of('L')
MASS = QuantityDimension.of('M')
TIME = QuantityDimension.of('T')
ELECTRIC_CURRENT = QuantityDimension.of('I')
TEMPERATURE = QuantityDimension.of('Θ')
AMOUNT_OF_SUBSTANCE = QuantityDimension.of('N')
LUMINOUS_INTENSITY = QuantityDimension.of('J')
