"""
Units derived from a parent unit through a converter (km, g, h, °C, ...).
"""

from typing import Optional

from ..converters import AbstractConverter
from .abstract import AbstractUnit
from .dimension import QuantityDimension


class TransformedUnit(AbstractUnit):
    """
    Parent unit followed by a converter

    The converter maps magnitudes in this unit to magnitudes in the parent
    unit. Transforming a transformed unit folds the two converters together,
    so prefixes applied in sequence never nest.
    """

    def __init__(self, parent: AbstractUnit, converter: AbstractConverter, symbol: Optional[str] = None):
        if not isinstance(parent, AbstractUnit):
            raise TypeError(f"The parent unit {parent!r} is not a unit")
        self._parent = parent
        self._converter = converter
        self._symbol = symbol

    @property
    def symbol(self) -> Optional[str]:
        return self._symbol

    @property
    def parent_unit(self) -> AbstractUnit:
        return self._parent

    @property
    def converter(self) -> AbstractConverter:
        return self._converter

    def with_symbol(self, symbol: str) -> 'TransformedUnit':
        return TransformedUnit(self._parent, self._converter, symbol)

    def get_system_converter(self) -> AbstractConverter:
        return self._parent.get_system_converter().concatenate(self._converter)

    def get_dimension(self) -> QuantityDimension:
        return self._parent.get_dimension()

    def to_system_unit(self) -> AbstractUnit:
        return self._parent.get_system_unit()

    def transform(self, converter: AbstractConverter) -> AbstractUnit:
        if converter.is_identity():
            return self
        return self._parent.transform(self._converter.concatenate(converter))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, TransformedUnit):
            return NotImplemented
        return self._parent == other._parent and self._converter == other._converter

    def __hash__(self):
        return hash((self._parent, self._converter))

    def __repr__(self):
        return f"TransformedUnit({self._parent!r}, {self._converter!r})"
