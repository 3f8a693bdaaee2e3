"""
Shared fixtures for the psychrocalc test suite.
"""

import pytest

from psychrocalc.units import UnitSystem


@pytest.fixture(autouse=True)
def reset_unit_system(monkeypatch):
    """Start every test with no process-wide unit system set."""
    monkeypatch.setattr("psychrocalc.units.core._ACTIVE_UNIT_SYSTEM", None)


@pytest.fixture(params=[UnitSystem.IP, UnitSystem.SI], ids=["ip", "si"])
def unit_system(request):
    """Both systems of units."""
    return request.param
