"""Configuration for the unit algebra"""

import decimal
import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.exceptions import ConfigurationError

ROUNDING_MODES = (
    decimal.ROUND_CEILING, decimal.ROUND_DOWN, decimal.ROUND_FLOOR, decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN, decimal.ROUND_HALF_UP, decimal.ROUND_UP, decimal.ROUND_05UP,
)
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class AlgebraConfiguration:
    """
    Settings shared by the converter facade and the command line

    Validated on construction; ``decimal_context`` builds the rounding
    context handed to exact conversions.
    """
    decimal_precision: int = 34                      # Significant digits for exact division
    rounding: str = decimal.ROUND_HALF_EVEN          # decimal rounding mode name

    # Performance options
    enable_caching: bool = True                      # Cache converters per unit pair
    cache_size: int = 256                            # Maximum cached converters
    error_history_size: int = 100                    # Recent errors kept for summaries

    # Logging
    log_level: str = 'INFO'
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization"""
        self.validate()

    def validate(self) -> bool:
        """
        Validate configuration

        Returns:
            True if valid

        Raises:
            ConfigurationError: If a parameter is invalid
        """
        if not isinstance(self.decimal_precision, int) or self.decimal_precision < 1:
            raise ConfigurationError(f"Decimal precision must be a positive integer, got {self.decimal_precision}",
                                     'decimal', 'decimal_precision')

        if self.rounding not in ROUNDING_MODES:
            raise ConfigurationError(f"Unknown rounding mode: {self.rounding}", 'decimal', 'rounding')

        if self.cache_size < 1:
            raise ConfigurationError(f"Cache size must be positive, got {self.cache_size}",
                                     'performance', 'cache_size')

        if self.error_history_size < 1:
            raise ConfigurationError(f"Error history size must be positive, got {self.error_history_size}",
                                     'performance', 'error_history_size')

        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}", 'logging', 'log_level')

        return True

    def decimal_context(self) -> decimal.Context:
        """Rounding context for exact conversions"""
        return decimal.Context(prec=self.decimal_precision, rounding=self.rounding)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AlgebraConfiguration':
        """Create from dictionary"""
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'AlgebraConfiguration':
        """
        Load configuration from a JSON file

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot load configuration from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {path} must be a JSON object")
        return cls.from_dict(data)

    def save(self, path: Union[str, Path]) -> None:
        """Write configuration as JSON"""
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)
