"""
Leaf units: independent base units and named coherent units.
"""

from typing import Optional

from ..converters import AbstractConverter, IDENTITY
from .abstract import AbstractUnit
from .dimension import NONE, QuantityDimension


class BaseUnit(AbstractUnit):
    """Dimensionally independent unit, e.g. the metre"""

    __slots__ = ('_symbol', '_dimension', 'name')

    def __init__(self, symbol: str, dimension: QuantityDimension = NONE, name: Optional[str] = None):
        self._symbol = symbol
        self._dimension = dimension
        self.name = name

    @property
    def symbol(self) -> str:
        return self._symbol

    def get_system_converter(self) -> AbstractConverter:
        return IDENTITY

    def get_dimension(self) -> QuantityDimension:
        return self._dimension

    def to_system_unit(self) -> 'BaseUnit':
        return self

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, BaseUnit):
            return NotImplemented
        return self._symbol == other._symbol and self._dimension == other._dimension

    def __hash__(self):
        return hash(self._symbol)

    def __repr__(self):
        return f"BaseUnit({self._symbol!r})"


class AlternateUnit(AbstractUnit):
    """
    Named unit standing for a product of system units, e.g. W for J/s

    An alternate unit is a system unit in its own right; it shares the
    dimension of its parent but is not equal to it.
    """

    __slots__ = ('_parent', '_symbol', 'name')

    def __init__(self, parent: AbstractUnit, symbol: str, name: Optional[str] = None):
        if not parent.is_system_unit():
            raise ValueError(f"The parent unit {parent} is not a system unit")
        self._parent = parent
        self._symbol = symbol
        self.name = name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def parent_unit(self) -> AbstractUnit:
        return self._parent

    def get_system_converter(self) -> AbstractConverter:
        return IDENTITY

    def get_dimension(self) -> QuantityDimension:
        return self._parent.get_dimension()

    def to_system_unit(self) -> 'AlternateUnit':
        return self

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, AlternateUnit):
            return NotImplemented
        return self._symbol == other._symbol and self._parent == other._parent

    def __hash__(self):
        return hash((self._symbol, self._parent))

    def __repr__(self):
        return f"AlternateUnit({self._symbol!r})"
