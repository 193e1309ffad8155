"""
Unit conversions used by chart readouts.

Frequency/wavelength, reactance/component value and angle conversions.
"""
from __future__ import annotations

import math
from typing import Optional

from smithkit.backend.models.complex_value import Complex
from smithkit.backend.smith import SmithDomainError
from smithkit.constants import SPEED_OF_LIGHT


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise SmithDomainError(f"{name} must be > 0, got {value}")


def wavelength_from_frequency(frequency: float) -> float:
    """Free-space wavelength in meters for a frequency in Hz."""
    _require_positive("Frequency", frequency)
    return SPEED_OF_LIGHT / frequency


def frequency_from_wavelength(wavelength: float) -> float:
    """Frequency in Hz for a free-space wavelength in meters."""
    _require_positive("Wavelength", wavelength)
    return SPEED_OF_LIGHT / wavelength


def reactance_to_capacitance(x: float, frequency: float) -> Optional[float]:
    """
    Capacitance in farads that has reactance x (ohms) at a frequency.

    Returns:
        Capacitance, or None for non-negative (inductive) reactance
    """
    _require_positive("Frequency", frequency)
    if x >= 0:
        return None
    return -1 / (2 * math.pi * frequency * x)


def capacitance_to_reactance(capacitance: float, frequency: float) -> Complex:
    """Reactance of a capacitor as the impedance 0 - j/(2πfC)."""
    _require_positive("Frequency", frequency)
    _require_positive("Capacitance", capacitance)
    return Complex(0.0, -1 / (2 * math.pi * frequency * capacitance))


def reactance_to_inductance(x: float, frequency: float) -> Optional[float]:
    """
    Inductance in henries that has reactance x (ohms) at a frequency.

    Returns:
        Inductance, or None for non-positive (capacitive) reactance
    """
    _require_positive("Frequency", frequency)
    if x <= 0:
        return None
    return x / (2 * math.pi * frequency)


def inductance_to_reactance(inductance: float, frequency: float) -> Complex:
    """Reactance of an inductor as the impedance 0 + j2πfL."""
    _require_positive("Frequency", frequency)
    _require_positive("Inductance", inductance)
    return Complex(0.0, 2 * math.pi * frequency * inductance)


def rad2deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def deg2rad(deg: float) -> float:
    return deg * math.pi / 180.0


def db(value: float) -> float:
    """Voltage ratio in decibels, 20·log10(value)."""
    _require_positive("Ratio", value)
    return 20 * math.log10(value)
