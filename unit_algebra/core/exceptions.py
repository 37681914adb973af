"""
Custom Exceptions for the Unit Algebra

Exception hierarchy for converter construction, unit arithmetic and
conversion failures. Every error carries a details dictionary that is
rendered in its string form to help track down the offending operand.
"""

from typing import Any, Dict, List


class UnitAlgebraError(Exception):
    """Base exception for all unit algebra errors"""

    def __init__(self, message: str, details: dict = None):
        self.details = details or {}
        super().__init__(message)

    def __str__(self):
        base_msg = super().__str__()
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base_msg} (Details: {detail_str})"
        return base_msg


class InvalidConverterConstruction(UnitAlgebraError, ValueError):
    """Raised when a converter would silently be the identity or is malformed"""

    def __init__(self, message: str, converter: str = None, value=None):
        details = {}
        if converter:
            details['converter'] = converter
        if value is not None:
            details['value'] = str(value)
        super().__init__(message, details)


class UnsupportedConversion(UnitAlgebraError):
    """Raised when a conversion cannot be expressed as a linear scale factor"""

    def __init__(self, message: str, unit=None, reason: str = None):
        details = {}
        if unit is not None:
            details['unit'] = str(unit)
        if reason:
            details['reason'] = reason
        super().__init__(message, details)


class InvalidRootOrder(UnitAlgebraError, ArithmeticError):
    """Raised when a root of order zero or less is requested"""

    def __init__(self, message: str, order: int = None):
        details = {}
        if order is not None:
            details['order'] = order
        super().__init__(message, details)


class UnitConversionError(UnitAlgebraError):
    """Raised when a value cannot be converted between two units"""

    def __init__(self, message: str, from_unit: str = None, to_unit: str = None):
        details = {}
        if from_unit:
            details['from_unit'] = from_unit
        if to_unit:
            details['to_unit'] = to_unit
        super().__init__(message, details)


class ConfigurationError(UnitAlgebraError):
    """Raised when configuration is invalid"""

    def __init__(self, message: str, config_section: str = None, parameter: str = None):
        details = {}
        if config_section:
            details['section'] = config_section
        if parameter:
            details['parameter'] = parameter
        super().__init__(message, details)


# ===================================================================
# EXCEPTION UTILITIES
# ===================================================================

def create_error_summary(errors: List[Exception]) -> Dict[str, Any]:
    """
    Create summary of errors for reporting

    Args:
        errors: List of exceptions

    Returns:
        Dictionary with error summary
    """
    error_counts = {}
    error_details = []

    for error in errors:
        error_type = type(error).__name__
        error_counts[error_type] = error_counts.get(error_type, 0) + 1

        error_info = {
            'type': error_type,
            'message': str(error),
        }

        if hasattr(error, 'details'):
            error_info['details'] = error.details

        error_details.append(error_info)

    return {
        'total_errors': len(errors),
        'error_counts': error_counts,
        'error_details': error_details
    }
