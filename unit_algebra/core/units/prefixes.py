"""
SI metric prefixes

Each prefix is a power-of-ten converter with a symbol. Calling a prefix on
a unit returns the prefixed unit: ``MetricPrefix.KILO(METRE)``.
"""

from enum import Enum
from typing import Optional

from ..converters import PowerOfTenScale
from .abstract import AbstractUnit
from .transformed import TransformedUnit


class MetricPrefix(Enum):
    """Decimal prefixes from yotta (10^24) to yocto (10^-24)"""
    YOTTA = ("Y", 24)
    ZETTA = ("Z", 21)
    EXA = ("E", 18)
    PETA = ("P", 15)
    TERA = ("T", 12)
    GIGA = ("G", 9)
    MEGA = ("M", 6)
    KILO = ("k", 3)
    HECTO = ("h", 2)
    DEKA = ("da", 1)
    DECI = ("d", -1)
    CENTI = ("c", -2)
    MILLI = ("m", -3)
    MICRO = ("µ", -6)
    NANO = ("n", -9)
    PICO = ("p", -12)
    FEMTO = ("f", -15)
    ATTO = ("a", -18)
    ZEPTO = ("z", -21)
    YOCTO = ("y", -24)

    def __init__(self, symbol: str, exponent: int):
        self.symbol = symbol
        self.exponent = exponent
        self.converter = PowerOfTenScale(exponent)

    def __call__(self, unit: AbstractUnit) -> AbstractUnit:
        prefixed = unit.transform(self.converter)
        if isinstance(prefixed, TransformedUnit) and unit.symbol:
            prefixed = prefixed.with_symbol(self.symbol + unit.symbol)
        return prefixed

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional['MetricPrefix']:
        for prefix in cls:
            if prefix.symbol == symbol:
                return prefix
        return None


YOTTA = MetricPrefix.YOTTA
ZETTA = MetricPrefix.ZETTA
EXA = MetricPrefix.EXA
PETA = MetricPrefix.PETA
TERA = MetricPrefix.TERA
GIGA = MetricPrefix.GIGA
MEGA = MetricPrefix.MEGA
KILO = MetricPrefix.KILO
HECTO = MetricPrefix.HECTO
DEKA = MetricPrefix.DEKA
DECI = MetricPrefix.DECI
CENTI = MetricPrefix.CENTI
MILLI = MetricPrefix.MILLI
MICRO = MetricPrefix.MICRO
NANO = MetricPrefix.NANO
PICO = MetricPrefix.PICO
FEMTO = MetricPrefix.FEMTO
ATTO = MetricPrefix.ATTO
ZEPTO = MetricPrefix.ZEPTO
YOCTO = MetricPrefix.YOCTO
