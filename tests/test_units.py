"""
Unit tests for frequency, component and angle conversions.
"""
import math

import pytest

from smithkit.backend.models.complex_value import Complex
from smithkit.backend.smith import SmithDomainError
from smithkit.backend.units import (capacitance_to_reactance, db, deg2rad,
                                    frequency_from_wavelength,
                                    inductance_to_reactance, rad2deg,
                                    reactance_to_capacitance,
                                    reactance_to_inductance,
                                    wavelength_from_frequency)
from smithkit.constants import SPEED_OF_LIGHT


class TestWavelength:
    """Test frequency/wavelength conversion."""

    def test_wavelength_from_frequency(self) -> None:
        assert wavelength_from_frequency(SPEED_OF_LIGHT) == pytest.approx(1.0)
        assert wavelength_from_frequency(1e9) == pytest.approx(0.299792458)

    def test_frequency_from_wavelength(self) -> None:
        assert frequency_from_wavelength(0.299792458) == pytest.approx(1e9)

    def test_roundtrip(self) -> None:
        for f in (1e3, 2.4e9, 77e9):
            assert frequency_from_wavelength(wavelength_from_frequency(f)) == pytest.approx(f)

    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_non_positive_input(self, value: float) -> None:
        with pytest.raises(SmithDomainError):
            wavelength_from_frequency(value)
        with pytest.raises(SmithDomainError):
            frequency_from_wavelength(value)


class TestComponentValues:
    """Test reactance <-> capacitance/inductance conversion."""

    def test_capacitance(self) -> None:
        # 1 pF at 1 GHz has X = -159.15 ohm
        x = -1 / (2 * math.pi * 1e9 * 1e-12)
        assert reactance_to_capacitance(x, 1e9) == pytest.approx(1e-12)
        assert capacitance_to_reactance(1e-12, 1e9).imag == pytest.approx(x)
        assert capacitance_to_reactance(1e-12, 1e9).real == 0.0

    def test_inductance(self) -> None:
        # 10 nH at 100 MHz has X = 6.283 ohm
        x = 2 * math.pi * 100e6 * 10e-9
        assert reactance_to_inductance(x, 100e6) == pytest.approx(10e-9)
        assert inductance_to_reactance(10e-9, 100e6) == Complex(0.0, x)

    def test_sign_guards(self) -> None:
        assert reactance_to_capacitance(0.0, 1e9) is None
        assert reactance_to_capacitance(10.0, 1e9) is None
        assert reactance_to_inductance(0.0, 1e9) is None
        assert reactance_to_inductance(-10.0, 1e9) is None

    def test_invalid_frequency_or_component(self) -> None:
        with pytest.raises(SmithDomainError):
            reactance_to_capacitance(-10.0, 0.0)
        with pytest.raises(SmithDomainError):
            capacitance_to_reactance(0.0, 1e9)
        with pytest.raises(SmithDomainError):
            inductance_to_reactance(1e-9, -5.0)


class TestAnglesAndDecibels:
    """Test angle and decibel helpers."""

    def test_angles(self) -> None:
        assert rad2deg(math.pi) == pytest.approx(180.0)
        assert deg2rad(90.0) == pytest.approx(math.pi / 2)
        assert rad2deg(deg2rad(-37.5)) == pytest.approx(-37.5)

    def test_db(self) -> None:
        assert db(10.0) == pytest.approx(20.0)
        assert db(1.0) == 0.0
        with pytest.raises(SmithDomainError):
            db(0.0)
