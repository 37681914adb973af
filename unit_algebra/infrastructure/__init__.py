"""
Infrastructure Module for the Unit Algebra

Infrastructure services shared by the algebra, currently logging.
"""

from .logging.logger import AlgebraLogger, setup_logging, get_logger

__all__ = [
    'AlgebraLogger',
    'setup_logging',
    'get_logger'
]
