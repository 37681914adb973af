"""Shared fixtures for the unit algebra test suite"""

import pytest

from unit_algebra.config.settings import AlgebraConfiguration
from unit_algebra.core.units import definitions
from unit_algebra.core.units.converter import UnitConverter


@pytest.fixture
def converter():
    return UnitConverter(AlgebraConfiguration())


@pytest.fixture(autouse=True)
def clean_custom_units():
    yield
    definitions._custom_units.clear()
