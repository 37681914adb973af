"""
Product Unit Canonicalization

A product unit is a set of ``(unit, power, root)`` factors, each denoting
``unit ** (power / root)``. The four entry points (product, quotient, power
and root) always return the canonical unit for their result:

* no two factors share a unit and no factor has a zero power;
* every ``power / root`` pair is reduced to lowest terms;
* factors are sorted by a permutation-independent key;
* the empty product is ``ONE`` and a single factor with exponent exactly 1
  collapses to its unit.

Structurally equal products therefore compare equal field by field.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..converters import AbstractConverter, IDENTITY, PowerOfTenScale, RationalScale
from ..exceptions import InvalidRootOrder, UnsupportedConversion
from ...infrastructure.logging.logger import get_logger
from .abstract import AbstractUnit
from .dimension import NONE, QuantityDimension
from .transformed import TransformedUnit

logger = get_logger()


@dataclass(frozen=True)
class ProductElement:
    """One factor ``unit ** (power / root)`` of a product unit"""
    unit: object
    power: int
    root: int = 1

    def __hash__(self):
        return hash((self.unit, self.power / self.root))

    def sort_key(self) -> Tuple[int, str]:
        # Hash decides the order; repr only breaks hash collisions
        return hash(self), repr(self)

    def inverted(self) -> 'ProductElement':
        return ProductElement(self.unit, -self.power, self.root)


def _reduced(unit, power: int, root: int) -> ProductElement:
    gcd = math.gcd(abs(power), root)
    return ProductElement(unit, power // gcd, root // gcd)


class ProductUnit(AbstractUnit):
    """
    Canonical product of units raised to rational exponents

    Instances come from ``product_of``, ``quotient_of``, ``power_of`` and
    ``root_of``; ``ProductUnit()`` is the dimensionless unit.
    """

    def __init__(self, elements: Sequence[ProductElement] = ()):
        self._elements: Tuple[ProductElement, ...] = tuple(elements)

    @property
    def elements(self) -> Tuple[ProductElement, ...]:
        return self._elements

    @property
    def symbol(self) -> Optional[str]:
        # Composing a display symbol is left to formatters
        return None

    def get_unit_count(self) -> int:
        return len(self._elements)

    def get_unit(self, index: int):
        return self._elements[index].unit

    def get_unit_pow(self, index: int) -> int:
        return self._elements[index].power

    def get_unit_root(self, index: int) -> int:
        return self._elements[index].root

    def get_base_units(self) -> Dict[object, int]:
        return {element.unit: element.power for element in self._elements}

    def _is_wrapper(self) -> bool:
        return len(self._elements) == 1 and self._elements[0].power == self._elements[0].root

    def get_dimension(self) -> QuantityDimension:
        dimension = NONE
        for element in self._elements:
            unit_dimension = element.unit.get_dimension()
            dimension = dimension.multiply(unit_dimension.pow(element.power).root(element.root))
        return dimension

    def get_system_converter(self) -> AbstractConverter:
        """
        Converter to the system unit, built factor by factor

        Raises:
            UnsupportedConversion: If a factor has a fractional exponent or a
                non-linear system converter
        """
        converter = IDENTITY
        for element in self._elements:
            element_converter = element.unit.get_system_converter()
            if not element_converter.is_linear():
                logger.debug(f"Non-linear factor {element.unit} in {self}", category="product")
                raise UnsupportedConversion(f"{element.unit} is non-linear, cannot convert",
                                            unit=element.unit, reason="non-linear")
            if element.root != 1:
                logger.debug(f"Fractional exponent for {element.unit} in {self}", category="product")
                raise UnsupportedConversion(f"{element.unit} holds a base unit with fractional exponent",
                                            unit=element.unit, reason="fractional exponent")
            power = element.power
            if power < 0:
                power = -power
                element_converter = element_converter.inverse()
            for _ in range(power):
                converter = converter.concatenate(element_converter)
        return converter

    def to_system_unit(self) -> AbstractUnit:
        system_unit = ONE
        for element in self._elements:
            unit = element.unit.get_system_unit().pow(element.power).root(element.root)
            system_unit = system_unit.multiply(unit)
        return system_unit

    def is_system_unit(self) -> bool:
        return all(isinstance(e.unit, AbstractUnit) and e.unit.is_system_unit() for e in self._elements)

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, ProductUnit):
            return self._elements == other._elements
        if isinstance(other, AbstractUnit):
            # A wrapper product is equal to the unit it wraps
            return self._is_wrapper() and self._elements[0].unit == other
        return NotImplemented

    def __hash__(self):
        if self._is_wrapper():
            return hash(self._elements[0].unit)
        return sum(hash(element) for element in self._elements)

    def __repr__(self):
        return f"ProductUnit({list(self._elements)!r})"

    def __str__(self):
        if not self._elements:
            return "one"
        parts = []
        for element in self._elements:
            text = str(element.unit)
            if element.root != 1:
                text += f"^({element.power}/{element.root})"
            elif element.power != 1:
                text += f"^{element.power}"
            parts.append(text)
        return "·".join(parts)


ONE = ProductUnit()


# ===================================================================
# CANONICALIZATION ENGINE
# ===================================================================

def _elements_of(unit) -> Tuple[ProductElement, ...]:
    if isinstance(unit, ProductUnit):
        return unit.elements
    return (ProductElement(unit, 1, 1),)


def _maybe_wrap(unit) -> AbstractUnit:
    if isinstance(unit, AbstractUnit):
        return unit
    return ProductUnit((ProductElement(unit, 1, 1),))


def merge(left: Sequence[ProductElement], right: Sequence[ProductElement]) -> AbstractUnit:
    """
    Combine two element lists into the canonical unit of their product

    Exponents of factors sharing a unit are added as fractions and reduced;
    factors whose exponent cancels are dropped.
    """
    result: List[ProductElement] = []

    for left_element in left:
        p1, r1 = left_element.power, left_element.root
        p2, r2 = 0, 1
        for right_element in right:
            if left_element.unit == right_element.unit:
                p2, r2 = right_element.power, right_element.root
                break
        power = p1 * r2 + p2 * r1
        if power != 0:
            result.append(_reduced(left_element.unit, power, r1 * r2))

    for right_element in right:
        if not any(right_element.unit == left_element.unit for left_element in left):
            result.append(right_element)

    if not result:
        return ONE
    if len(result) == 1 and result[0].power == result[0].root:
        return _maybe_wrap(result[0].unit)

    result.sort(key=ProductElement.sort_key)
    return ProductUnit(result)


def _unwrap_transformed(unit) -> Tuple[object, AbstractConverter]:
    """Split a transformed product (e.g. MWh) into its product and converter"""
    if isinstance(unit, TransformedUnit) and isinstance(unit.parent_unit, ProductUnit):
        return unit.parent_unit, unit.converter
    return unit, IDENTITY


def _apply(unit: AbstractUnit, converter: AbstractConverter) -> AbstractUnit:
    if converter.is_identity():
        return unit
    return unit.transform(converter)


def product_of(left, right) -> AbstractUnit:
    """Canonical unit of ``left * right``"""
    left, left_converter = _unwrap_transformed(left)
    right, right_converter = _unwrap_transformed(right)
    product = merge(_elements_of(left), _elements_of(right))
    return _apply(product, left_converter.concatenate(right_converter))


def quotient_of(left, right) -> AbstractUnit:
    """Canonical unit of ``left / right``"""
    left, left_converter = _unwrap_transformed(left)
    right, right_converter = _unwrap_transformed(right)
    quotient = merge(_elements_of(left), [e.inverted() for e in _elements_of(right)])
    return _apply(quotient, left_converter.concatenate(right_converter.inverse()))


def _converter_power(converter: AbstractConverter, n: int) -> AbstractConverter:
    if n < 0:
        converter, n = converter.inverse(), -n
    result = IDENTITY
    for _ in range(n):
        result = result.concatenate(converter)
    return result


def _integer_root(value: int, n: int) -> Optional[int]:
    """Exact integer ``n``-th root of ``value``, or None"""
    if value < 0:
        if n % 2 == 0:
            return None
        root = _integer_root(-value, n)
        return None if root is None else -root

    low, high = 0, 1 << (value.bit_length() // n + 1)
    while low < high:
        middle = (low + high) // 2
        if middle ** n < value:
            low = middle + 1
        else:
            high = middle
    return low if low ** n == value else None


def _converter_root(converter: AbstractConverter, n: int) -> Optional[AbstractConverter]:
    """Exact ``n``-th root of a scale converter, or None when there is none"""
    if converter.is_identity() or n == 1:
        return converter
    if isinstance(converter, PowerOfTenScale):
        if converter.exponent % n == 0:
            return PowerOfTenScale(converter.exponent // n)
        return None
    if isinstance(converter, RationalScale):
        numerator = _integer_root(converter.numerator, n)
        denominator = _integer_root(converter.denominator, n)
        if numerator is None or denominator is None:
            return None
        return RationalScale.of(numerator, denominator)
    return None


def power_of(unit, n: int) -> AbstractUnit:
    """Canonical unit of ``unit ** n``"""
    parent, converter = _unwrap_transformed(unit)
    if not converter.is_identity() and converter.is_linear():
        # Same representation product_of gives, so MWh * MWh == MWh ** 2
        return _apply(power_of(parent, n), _converter_power(converter, n))

    if isinstance(unit, ProductUnit):
        elements = [_reduced(e.unit, e.power * n, e.root) for e in unit.elements]
    else:
        elements = [ProductElement(unit, n, 1)]
    return merge(elements, ())


def root_of(unit, n: int) -> AbstractUnit:
    """
    Canonical unit of the ``n``-th root of ``unit``

    A transformed product is rooted on its parent when its converter has an
    exact root; otherwise the unit is kept as a single fractional factor.

    Raises:
        InvalidRootOrder: If ``n`` is zero or negative
    """
    if n <= 0:
        raise InvalidRootOrder(f"Root order must be positive, got {n}", order=n)

    parent, converter = _unwrap_transformed(unit)
    if not converter.is_identity():
        converter_root = _converter_root(converter, n)
        if converter_root is not None:
            return _apply(root_of(parent, n), converter_root)

    if isinstance(unit, ProductUnit):
        elements = [_reduced(e.unit, e.power, e.root * n) for e in unit.elements]
    else:
        elements = [ProductElement(unit, 1, n)]
    return merge(elements, ())
