"""
Vectorized reflection coefficient conversions for one-port traces.

Array counterparts of the scalar transforms in smithkit.backend.smith,
operating on numpy arrays of reflection coefficients sampled across
frequency. Samples where a transform is singular are masked (numpy.ma)
rather than filled with NaN or infinity.

All functions support broadcasting over multiple frequency points.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

from smithkit.constants import EPSILON


def _bilinear(num: np.ndarray, den: np.ndarray) -> np.ma.MaskedArray:
    """Divide num by den, masking samples where |den|² is below EPSILON."""
    singular = np.abs(den) ** 2 < EPSILON
    safe_den = np.where(singular, 1.0, den)
    return np.ma.masked_array(num / safe_den, mask=singular)


def gamma_to_impedance(gamma: np.ndarray) -> np.ma.MaskedArray:
    """
    Convert reflection coefficients to normalized impedance.

    Uses the transformation: z = (1 + Γ) / (1 - Γ)

    Args:
        gamma: Reflection coefficient array

    Returns:
        Normalized impedance, masked where Γ ≈ +1
    """
    gamma = np.asarray(gamma, dtype=complex)
    return _bilinear(1 + gamma, 1 - gamma)


def gamma_to_admittance(gamma: np.ndarray) -> np.ma.MaskedArray:
    """
    Convert reflection coefficients to normalized admittance.

    Uses the transformation: y = (1 - Γ) / (1 + Γ)

    Args:
        gamma: Reflection coefficient array

    Returns:
        Normalized admittance, masked where Γ ≈ -1
    """
    gamma = np.asarray(gamma, dtype=complex)
    return _bilinear(1 - gamma, 1 + gamma)


def impedance_to_gamma(z_normalized: np.ndarray) -> np.ma.MaskedArray:
    """
    Convert normalized impedance to reflection coefficient.

    Uses the transformation: Γ = (z - 1) / (z + 1)
    """
    z_normalized = np.asarray(z_normalized, dtype=complex)
    return _bilinear(z_normalized - 1, z_normalized + 1)


def admittance_to_gamma(y_normalized: np.ndarray) -> np.ma.MaskedArray:
    """
    Convert normalized admittance to reflection coefficient.

    Uses the transformation: Γ = (1 - y) / (1 + y)
    """
    y_normalized = np.asarray(y_normalized, dtype=complex)
    return _bilinear(1 - y_normalized, 1 + y_normalized)


def swr_array(gamma: np.ndarray) -> np.ndarray:
    """SWR per sample; full reflection maps to +inf."""
    mag = np.abs(np.asarray(gamma, dtype=complex))
    den = 1 - mag
    full = np.abs(den) < EPSILON
    return np.where(full, np.inf, (1 + mag) / np.where(full, 1.0, den))


def return_loss_array(gamma: np.ndarray) -> np.ndarray:
    """Return loss in dB per sample; a perfect match maps to +inf."""
    mag = np.abs(np.asarray(gamma, dtype=complex))
    matched = mag < EPSILON
    return np.where(matched, np.inf, -20.0 * np.log10(np.where(matched, 1.0, mag)))


def mismatch_loss_array(gamma: np.ndarray) -> np.ma.MaskedArray:
    """
    Mismatch loss in dB per sample.

    Full reflection maps to +inf; samples with |Γ| > 1 are masked.
    """
    mag = np.abs(np.asarray(gamma, dtype=complex))
    tp = 1 - mag ** 2
    full = np.abs(tp) < EPSILON
    active = (tp < 0) & ~full
    safe_tp = np.where(full | active, 1.0, tp)
    loss = np.where(full, np.inf, -10.0 * np.log10(safe_tp))
    return np.ma.masked_array(loss, mask=active)


def gamma_to_cartesian(gamma: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert reflection coefficient to Cartesian coordinates for plotting.

    Args:
        gamma: Complex reflection coefficient array

    Returns:
        Tuple of (x, y) coordinates for plotting
    """
    gamma = np.asarray(gamma, dtype=complex)
    return np.real(gamma), np.imag(gamma)


def cartesian_to_gamma(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """
    Convert Cartesian coordinates back to reflection coefficient.

    Args:
        x: Real part coordinates
        y: Imaginary part coordinates

    Returns:
        Complex reflection coefficient array
    """
    return np.asarray(x, dtype=float) + 1j * np.asarray(y, dtype=float)


def clip_to_unit_disk(gamma: np.ndarray) -> np.ndarray:
    """
    Pull samples with |Γ| > 1 back onto the chart boundary.

    Returns a new array; the input is not modified.
    """
    gamma = np.array(gamma, dtype=complex)
    magnitude = np.abs(gamma)
    mask = magnitude > 1.0
    if np.any(mask):
        gamma[mask] = gamma[mask] / magnitude[mask]
    return gamma
