"""
Smith chart transforms and reflection coefficient metrics.

Provides the bilinear transforms between reflection coefficient and
normalized impedance/admittance, scalar metrics derived from a reflection
coefficient (SWR, return loss, mismatch loss, Q, ...) together with their
inverse companions, and the SmithChart context that binds a reference
impedance for physical-unit conversions.

Singular transforms return None rather than raising or producing NaN.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from smithkit.backend.models.complex_value import Complex
from smithkit.constants import DEFAULT_Z0, EPSILON


class SmithDomainError(ValueError):
    """Exception raised when an input lies outside a function's domain."""
    pass


def reflection_to_impedance(rc: Complex) -> Optional[Complex]:
    """
    Convert reflection coefficient to normalized impedance.

    Uses the transformation: z = (1 + Γ) / (1 - Γ)

    Args:
        rc: Reflection coefficient

    Returns:
        Normalized impedance, or None near Γ = +1 (open circuit)
    """
    gr, gi = rc.real, rc.imag
    d = (1 - gr) * (1 - gr) + gi * gi
    if abs(d) < EPSILON:
        return None
    zr = (1 - gr * gr - gi * gi) / d
    zi = (2 * gi) / d
    return Complex(zr, zi)


def impedance_to_reflection(z: Complex) -> Optional[Complex]:
    """
    Convert normalized impedance to reflection coefficient.

    Uses the transformation: Γ = (z - 1) / (z + 1)

    Args:
        z: Normalized impedance

    Returns:
        Reflection coefficient, or None near z = -1
    """
    zr, zi = z.real, z.imag
    d = (zr + 1) * (zr + 1) + zi * zi
    if abs(d) < EPSILON:
        return None
    gr = (zr * zr + zi * zi - 1) / d
    gi = (2 * zi) / d
    return Complex(gr, gi)


def reflection_to_admittance(rc: Complex) -> Optional[Complex]:
    """
    Convert reflection coefficient to normalized admittance.

    Uses the transformation: y = (1 - Γ) / (1 + Γ)

    Args:
        rc: Reflection coefficient

    Returns:
        Normalized admittance, or None near Γ = -1 (short circuit)
    """
    gr, gi = rc.real, rc.imag
    d = (gr + 1) * (gr + 1) + gi * gi
    if abs(d) < EPSILON:
        return None
    yr = (1 - gr * gr - gi * gi) / d
    yi = (-2 * gi) / d
    return Complex(yr, yi)


def admittance_to_reflection(y: Complex) -> Optional[Complex]:
    """
    Convert normalized admittance to reflection coefficient.

    Uses the transformation: Γ = (1 - y) / (1 + y)

    Args:
        y: Normalized admittance

    Returns:
        Reflection coefficient, or None near y = -1
    """
    yr, yi = y.real, y.imag
    d = (yr + 1) * (yr + 1) + yi * yi
    if abs(d) < EPSILON:
        return None
    gr = (1 - yr * yr - yi * yi) / d
    gi = (-2 * yi) / d
    return Complex(gr, gi)


# Magnitude and power

def reflection_magnitude(rc: Complex) -> float:
    """Voltage (or current) reflection coefficient magnitude |Γ|."""
    return rc.abs()


def reflection_power(rc: Complex) -> float:
    """Fraction of incident power that is reflected, |Γ|²."""
    return rc.abs() ** 2


def power_to_reflection_magnitude(p: float) -> float:
    if not 0 <= p <= 1:
        raise SmithDomainError(f"Reflected power fraction must be in [0, 1], got {p}")
    return math.sqrt(p)


def transmission_power(rc: Complex) -> float:
    """Fraction of incident power delivered to the load, 1 - |Γ|²."""
    return 1 - reflection_power(rc)


def transmission_power_to_reflection_magnitude(tp: float) -> float:
    if not 0 <= tp <= 1:
        raise SmithDomainError(f"Transmitted power fraction must be in [0, 1], got {tp}")
    return math.sqrt(1.0 - tp)


def transmission_coeff(rc: Complex) -> Complex:
    """Voltage transmission coefficient T = Γ + 1."""
    return rc.add(1)


def transmission_to_reflection(tc: Complex) -> Complex:
    return tc.sub(1)


def transmission_magnitude(rc: Complex) -> float:
    return transmission_coeff(rc).abs()


# Standing wave ratio

def swr(rc: Complex) -> float:
    """
    Voltage standing wave ratio (1 + |Γ|) / (1 - |Γ|).

    Returns math.inf at full reflection (|Γ| = 1).
    """
    gamma = rc.abs()
    d = 1 - gamma
    if abs(d) < EPSILON:
        return math.inf
    return (1 + gamma) / d


def swr_to_reflection_magnitude(value: float) -> float:
    """
    Convert SWR to reflection coefficient magnitude (swr - 1) / (swr + 1).

    Raises:
        SmithDomainError: If swr < 1
    """
    if value < 1:
        raise SmithDomainError(f"SWR must be >= 1, got {value}")
    if math.isinf(value):
        return 1.0
    return (value - 1) / (value + 1)


def swr_to_dbs(value: float) -> float:
    if value <= 0:
        raise SmithDomainError(f"SWR must be > 0 to express in dB, got {value}")
    return 20 * math.log10(value)


def dbs_to_swr(dbs_value: float) -> float:
    return 10 ** (dbs_value / 20.0)


def dbs(rc: Complex) -> float:
    """SWR expressed in decibels, 20·log10(SWR)."""
    return swr_to_dbs(swr(rc))


def dbs_to_reflection_magnitude(dbs_value: float) -> float:
    return swr_to_reflection_magnitude(dbs_to_swr(dbs_value))


# Losses

def return_loss(rc: Complex) -> float:
    """
    Return loss in dB, -20·log10(|Γ|).

    Returns math.inf for a perfect match (Γ = 0).
    """
    gamma = rc.abs()
    if gamma < EPSILON:
        return math.inf
    return -20.0 * math.log10(gamma)


def return_loss_to_reflection_magnitude(rl: float) -> float:
    if rl < 0:
        raise SmithDomainError(f"Return loss must be >= 0 dB, got {rl}")
    if math.isinf(rl):
        return 0.0
    return 10 ** (-rl / 20.0)


def mismatch_loss(rc: Complex) -> float:
    """
    Mismatch loss in dB, -10·log10(1 - |Γ|²).

    Returns math.inf at full reflection (|Γ| = 1).

    Raises:
        SmithDomainError: If |Γ| > 1 (no power is absorbed)
    """
    tp = transmission_power(rc)
    if abs(tp) < EPSILON:
        return math.inf
    if tp < 0:
        raise SmithDomainError(f"Mismatch loss undefined for |Γ| = {rc.abs()} > 1")
    return -10.0 * math.log10(tp)


def mismatch_loss_to_reflection_magnitude(ml: float) -> float:
    if ml < 0:
        raise SmithDomainError(f"Mismatch loss must be >= 0 dB, got {ml}")
    return math.sqrt(1 - 10 ** (-ml / 10))


# Standing wave peak and loss coefficient

def standing_wave_peak(rc: Complex) -> float:
    """Standing wave voltage peak at constant power, |V|max/|V|max,0 = sqrt(SWR)."""
    value = swr(rc)
    if value < 0:
        raise SmithDomainError(f"Standing wave peak undefined for |Γ| = {rc.abs()} > 1")
    return math.sqrt(value)


def standing_wave_peak_to_reflection_magnitude(peak: float) -> float:
    return swr_to_reflection_magnitude(peak ** 2)


def standing_wave_loss_coeff(rc: Complex) -> float:
    """
    Standing wave loss coefficient (1 + |Γ|²) / (1 - |Γ|²).

    Returns math.inf at full reflection (|Γ| = 1).
    """
    p = reflection_power(rc)
    d = 1 - p
    if abs(d) < EPSILON:
        return math.inf
    return (1 + p) / d


def standing_wave_loss_coeff_to_reflection_magnitude(swlc: float) -> float:
    if swlc < 1:
        raise SmithDomainError(f"Standing wave loss coefficient must be >= 1, got {swlc}")
    return math.sqrt((swlc - 1) / (swlc + 1))


def q_factor(rc: Complex) -> Optional[float]:
    """
    Quality factor |x / r| of the impedance at a reflection coefficient.

    Returns:
        Q, or None when the impedance is undefined or purely reactive
    """
    z = reflection_to_impedance(rc)
    if z is None or abs(z.real) < EPSILON:
        return None
    return abs(z.imag / z.real)


@dataclass(frozen=True)
class SmithChart:
    """
    Smith chart context bound to a reference impedance.

    Converts between reflection coefficient and physical impedance or
    admittance. The reference impedance never changes after construction;
    use with_z0() to obtain a chart with a different one.

    Attributes:
        z0: Reference impedance in ohms
    """
    z0: float = DEFAULT_Z0

    def __post_init__(self) -> None:
        """Validate reference impedance after initialization."""
        if not math.isfinite(self.z0) or self.z0 <= 0:
            raise SmithDomainError(f"Reference impedance must be a positive real, got {self.z0}")

    def with_z0(self, z0: float) -> SmithChart:
        return SmithChart(z0)

    def normalize(self, z: Complex) -> Complex:
        """Normalize impedance by reference impedance (z / Z0)."""
        return z.div(self.z0)

    def denormalize(self, z: Complex) -> Complex:
        """Convert normalized impedance back to ohms (z * Z0)."""
        return z.mul(self.z0)

    def normalize_admittance(self, y: Complex) -> Complex:
        """Normalize admittance in siemens (y * Z0)."""
        return y.mul(self.z0)

    def denormalize_admittance(self, y: Complex) -> Complex:
        """Convert normalized admittance back to siemens (y / Z0)."""
        return y.div(self.z0)

    def impedance(self, rc: Complex) -> Optional[Complex]:
        """Impedance in ohms at a reflection coefficient, None if undefined."""
        z = reflection_to_impedance(rc)
        if z is None:
            return None
        return self.denormalize(z)

    def admittance(self, rc: Complex) -> Optional[Complex]:
        """Admittance in siemens at a reflection coefficient, None if undefined."""
        y = reflection_to_admittance(rc)
        if y is None:
            return None
        return self.denormalize_admittance(y)

    def reflection_from_impedance(self, z: Complex) -> Optional[Complex]:
        return impedance_to_reflection(self.normalize(z))

    def reflection_from_admittance(self, y: Complex) -> Optional[Complex]:
        return admittance_to_reflection(self.normalize_admittance(y))

    def add_series_impedance(self, rc: Complex, z: Complex) -> Optional[Complex]:
        """
        Move a point by adding a series impedance.

        Args:
            rc: Starting reflection coefficient
            z: Series impedance in ohms

        Returns:
            Reflection coefficient after the series element, or None if
            either transform is singular
        """
        z_load = reflection_to_impedance(rc)
        if z_load is None:
            return None
        return impedance_to_reflection(z_load.add(self.normalize(z)))

    def add_shunt_admittance(self, rc: Complex, y: Complex) -> Optional[Complex]:
        """
        Move a point by adding a shunt admittance.

        Args:
            rc: Starting reflection coefficient
            y: Shunt admittance in siemens

        Returns:
            Reflection coefficient after the shunt element, or None if
            either transform is singular
        """
        y_load = reflection_to_admittance(rc)
        if y_load is None:
            return None
        return admittance_to_reflection(y_load.add(self.normalize_admittance(y)))
