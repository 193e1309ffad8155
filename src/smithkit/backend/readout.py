"""
Cursor and marker readouts.

Bundles every quantity shown for a point on the chart: the reflection
coefficient, impedance, admittance, SWR, losses and Q. Marker readouts
add the frequency of the sample and the equivalent series component.
Undefined quantities are None so the display layer can show a
placeholder instead.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from smithkit.backend.models.complex_value import Complex
from smithkit.backend.smith import (SmithChart, SmithDomainError,
                                    mismatch_loss, q_factor, return_loss,
                                    swr)
from smithkit.backend.units import (reactance_to_capacitance,
                                    reactance_to_inductance)
from smithkit.constants import ADMITTANCE_DISPLAY_SCALE

logger = logging.getLogger(__name__)


class ComponentValue(NamedTuple):
    """Series component equivalent to a reactance at one frequency."""
    kind: str  # 'capacitance' (farads) or 'inductance' (henries)
    value: float


def _pair(value: Optional[Complex]) -> Optional[tuple]:
    return value.to_pair() if value is not None else None


@dataclass(frozen=True)
class CursorReadout:
    """
    Values at an arbitrary chart position.

    Attributes:
        reflection_coefficient: Γ at the position
        impedance: Impedance in ohms (None at the open-circuit point)
        admittance: Admittance in siemens (None at the short-circuit point)
        swr: Standing wave ratio (inf at full reflection)
        return_loss: Return loss in dB (inf at a perfect match)
        mismatch_loss: Mismatch loss in dB (None outside the chart)
        q: Quality factor (None when undefined)
    """
    reflection_coefficient: Complex
    impedance: Optional[Complex]
    admittance: Optional[Complex]
    swr: float
    return_loss: float
    mismatch_loss: Optional[float]
    q: Optional[float]

    @property
    def admittance_ms(self) -> Optional[Complex]:
        """Admittance scaled to millisiemens for display."""
        if self.admittance is None:
            return None
        return self.admittance.mul(ADMITTANCE_DISPLAY_SCALE)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'reflection_coefficient': self.reflection_coefficient.to_pair(),
            'impedance': _pair(self.impedance),
            'admittance': _pair(self.admittance),
            'swr': self.swr,
            'return_loss': self.return_loss,
            'mismatch_loss': self.mismatch_loss,
            'q': self.q
        }


@dataclass(frozen=True)
class MarkerReadout(CursorReadout):
    """
    Values at a marker placed on a measured trace.

    Attributes:
        frequency: Frequency of the marked sample in Hz
        dataset_no: Index of the trace the marker belongs to
        marker_no: Index of the marker within its trace
        component: Equivalent series component (None when undefined)
    """
    frequency: float = 0.0
    dataset_no: int = 0
    marker_no: int = 0
    component: Optional[ComponentValue] = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'frequency': self.frequency,
            'dataset_no': self.dataset_no,
            'marker_no': self.marker_no,
            'component': self.component._asdict() if self.component is not None else None
        })
        return data


def _readout_fields(chart: SmithChart, rc: Complex) -> Dict[str, Any]:
    impedance = chart.impedance(rc)
    admittance = chart.admittance(rc)
    if impedance is None:
        logger.debug("Impedance undefined at Γ = %s", rc)
    if admittance is None:
        logger.debug("Admittance undefined at Γ = %s", rc)

    try:
        ml = mismatch_loss(rc)
    except SmithDomainError:
        logger.debug("Mismatch loss undefined at Γ = %s", rc)
        ml = None

    return {
        'reflection_coefficient': rc,
        'impedance': impedance,
        'admittance': admittance,
        'swr': swr(rc),
        'return_loss': return_loss(rc),
        'mismatch_loss': ml,
        'q': q_factor(rc),
    }


def cursor_readout(chart: SmithChart, rc: Complex) -> CursorReadout:
    """
    Compute the readout for a chart position.

    Args:
        chart: Chart providing the reference impedance
        rc: Reflection coefficient under the cursor

    Returns:
        CursorReadout for the position
    """
    return CursorReadout(**_readout_fields(chart, rc))


def equivalent_component(chart: SmithChart, rc: Complex,
                         frequency: float) -> Optional[ComponentValue]:
    """
    Series capacitor or inductor matching the reactance at rc.

    Negative reactance maps to a capacitance, zero or positive reactance
    to an inductance.

    Args:
        chart: Chart providing the reference impedance
        rc: Reflection coefficient
        frequency: Frequency in Hz

    Returns:
        ComponentValue, or None when the impedance is undefined or the
        frequency is not positive (DC samples)
    """
    if not frequency > 0:
        logger.debug("No equivalent component at f = %s Hz", frequency)
        return None

    z = chart.impedance(rc)
    if z is None:
        return None

    x = z.imag
    if x < 0:
        return ComponentValue('capacitance', reactance_to_capacitance(x, frequency))
    if x == 0:
        return ComponentValue('inductance', 0.0)
    return ComponentValue('inductance', reactance_to_inductance(x, frequency))


def marker_readout(chart: SmithChart, rc: Complex, frequency: float,
                   dataset_no: int = 0, marker_no: int = 0) -> MarkerReadout:
    """
    Compute the readout for a marker on a measured trace.

    Args:
        chart: Chart providing the reference impedance
        rc: Reflection coefficient of the marked sample
        frequency: Frequency of the marked sample in Hz
        dataset_no: Trace index
        marker_no: Marker index within the trace

    Returns:
        MarkerReadout for the sample
    """
    return MarkerReadout(
        frequency=frequency,
        dataset_no=dataset_no,
        marker_no=marker_no,
        component=equivalent_component(chart, rc, frequency),
        **_readout_fields(chart, rc)
    )


def trace_readouts(chart: SmithChart, frequencies: Sequence[float],
                   gammas: Sequence[complex], dataset_no: int = 0) -> List[MarkerReadout]:
    """
    Compute marker readouts for every sample of a one-port trace.

    Args:
        chart: Chart providing the reference impedance
        frequencies: Sample frequencies in Hz
        gammas: Reflection coefficient per sample
        dataset_no: Trace index stored in each readout

    Returns:
        One MarkerReadout per sample, numbered in sample order

    Raises:
        ValueError: If the two sequences differ in length
    """
    if len(frequencies) != len(gammas):
        raise ValueError(
            f"Frequency and reflection coefficient counts differ "
            f"({len(frequencies)} != {len(gammas)})"
        )

    return [
        marker_readout(chart, Complex.from_complex(complex(g)), float(f),
                       dataset_no=dataset_no, marker_no=i)
        for i, (f, g) in enumerate(zip(frequencies, gammas))
    ]
