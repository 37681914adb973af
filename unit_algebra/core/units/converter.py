"""
Unit Conversion Facade

Converts magnitudes between units given either as unit values or as
registered symbols, caching the converter built for each unit pair.
"""

import threading
from collections import deque
from decimal import Decimal
from typing import Any, Deque, Dict, Optional, Tuple, Union

import numpy as np

from ..converters import AbstractConverter
from ..exceptions import UnitAlgebraError, UnitConversionError, create_error_summary
from ...config.settings import AlgebraConfiguration
from ...infrastructure.logging.logger import get_logger
from .abstract import AbstractUnit
from .definitions import SI_UNIT_DEFINITIONS, get_unit_info, _custom_units

UnitLike = Union[AbstractUnit, str]


class UnitConverter:
    """
    Unit converter with caching and robust error handling

    Builds converters through the unit algebra and keeps the most recent
    ones per (source, target) pair.
    """

    def __init__(self, config: Optional[AlgebraConfiguration] = None):
        """
        Initialize unit converter

        Args:
            config: Configuration (caching, decimal precision); defaults apply
                when omitted
        """
        self.config = config or AlgebraConfiguration()
        self.logger = get_logger()

        # Converter cache keyed on the resolved unit pair
        self._converter_cache: Dict[Tuple[AbstractUnit, AbstractUnit], AbstractConverter] = {}
        self._lock = threading.Lock()

        # Statistics for monitoring
        self._stats = {
            'conversions': 0,
            'cache_hits': 0,
            'cache_misses': 0,
            'errors': 0
        }
        # Most recent errors only; the total lives in the statistics
        self._errors: Deque[Exception] = deque(maxlen=self.config.error_history_size)

    def resolve(self, unit: UnitLike) -> AbstractUnit:
        """
        Resolve a unit value or registered symbol

        Raises:
            UnitConversionError: If the symbol is not registered
        """
        if isinstance(unit, AbstractUnit):
            return unit

        unit_info = get_unit_info(unit)
        if unit_info is None:
            raise UnitConversionError(f"Unknown unit: '{unit}'", from_unit=str(unit))
        return unit_info.unit

    def get_converter(self, from_unit: UnitLike, to_unit: UnitLike) -> AbstractConverter:
        """
        Get converter between units with caching

        Raises:
            UnitConversionError: If units are unknown or incompatible
        """
        source = self.resolve(from_unit)
        target = self.resolve(to_unit)
        cache_key = (source, target)

        if self.config.enable_caching:
            with self._lock:
                cached = self._converter_cache.get(cache_key)
                if cached is not None:
                    self._stats['cache_hits'] += 1
                    return cached
                self._stats['cache_misses'] += 1

        try:
            converter = source.get_converter_to(target)
        except UnitConversionError:
            raise
        except UnitAlgebraError as e:
            raise UnitConversionError(f"Cannot determine converter: {e}", str(source), str(target)) from e

        self.logger.debug(f"{source} -> {target}: {converter!r}", category="converter")

        if self.config.enable_caching:
            with self._lock:
                if len(self._converter_cache) >= self.config.cache_size:
                    # Simple cache eviction - remove oldest 25%
                    items_to_remove = max(1, self.config.cache_size // 4)
                    for _ in range(items_to_remove):
                        self._converter_cache.pop(next(iter(self._converter_cache)))
                self._converter_cache[cache_key] = converter

        return converter

    def convert(self, value: Union[float, np.ndarray],
                from_unit: UnitLike, to_unit: UnitLike) -> Union[float, np.ndarray]:
        """
        Convert value(s) between units

        Args:
            value: Value(s) to convert
            from_unit: Source unit
            to_unit: Target unit

        Returns:
            Converted value(s)

        Raises:
            UnitConversionError: If conversion fails
        """
        try:
            converter = self.get_converter(from_unit, to_unit)
            if isinstance(value, (list, tuple)):
                value = np.asarray(value, dtype=float)
            result = converter.convert(value)
        except UnitConversionError as e:
            self._record_error(e)
            raise

        with self._lock:
            self._stats['conversions'] += 1
        return result

    def convert_exact(self, value: Union[Decimal, str, int],
                      from_unit: UnitLike, to_unit: UnitLike) -> Decimal:
        """
        Convert a decimal value using the configured precision context

        Raises:
            UnitConversionError: If conversion fails
        """
        try:
            converter = self.get_converter(from_unit, to_unit)
            result = converter.convert_exact(Decimal(value), self.config.decimal_context())
        except UnitConversionError as e:
            self._record_error(e)
            raise

        with self._lock:
            self._stats['conversions'] += 1
        return result

    def get_conversion_factor(self, from_unit: UnitLike, to_unit: UnitLike) -> float:
        """
        Get the multiplication factor between two units

        Raises:
            UnitConversionError: If the units are incompatible or the
                conversion is not a pure scale (e.g. °C to K)
        """
        try:
            converter = self.get_converter(from_unit, to_unit)
            if not converter.is_linear():
                raise UnitConversionError("Conversion is not a pure scale factor",
                                          str(from_unit), str(to_unit))
        except UnitConversionError as e:
            self._record_error(e)
            raise
        return converter.convert(1.0)

    def validate_unit(self, unit: UnitLike) -> bool:
        """
        Check if unit is recognized by the converter

        Args:
            unit: Unit value or symbol to validate

        Returns:
            True if unit is recognized, False otherwise
        """
        try:
            self.resolve(unit)
            return True
        except UnitConversionError:
            return False

    def _record_error(self, error: Exception):
        with self._lock:
            self._stats['errors'] += 1
            self._errors.append(error)
        self.logger.warning(str(error), category="converter")

    def get_error_summary(self) -> Dict[str, Any]:
        """Summary of the most recent conversion errors"""
        with self._lock:
            return create_error_summary(list(self._errors))

    def get_statistics(self) -> Dict[str, Any]:
        """Get converter usage statistics"""
        with self._lock:
            stats = self._stats.copy()
            stats.update({
                'cache_size': len(self._converter_cache),
                'cache_hit_rate': (self._stats['cache_hits'] /
                                   max(1, self._stats['cache_hits'] + self._stats['cache_misses'])),
                'registered_units': len(SI_UNIT_DEFINITIONS) + len(_custom_units)
            })
        return stats

    def clear_cache(self):
        """Clear converter cache"""
        with self._lock:
            self._converter_cache.clear()
            self._stats['cache_hits'] = 0
            self._stats['cache_misses'] = 0
