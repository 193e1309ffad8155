"""
Smith chart grid generation.

Builds the gridlines of an impedance (Z) or admittance (Y) chart from the
circle families in smithkit.backend.circles, sampled into polylines and
clipped to the chart boundary. Optional constant-Q and constant-SWR
overlays can be added in either mode. Mapping the normalized coordinates
to pixels is left to the rendering layer.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from smithkit.backend.circles import (conductance_circle, const_q_circle,
                                      reactance_circle, resistance_circle,
                                      susceptance_circle, swr_circle,
                                      unit_circle_crossings)
from smithkit.backend.models.geometry import Circle
from smithkit.backend.smith import SmithDomainError
from smithkit.constants import (ARC_POINTS, DEFAULT_CONDUCTANCE_VALUES,
                                DEFAULT_REACTANCE_VALUES,
                                DEFAULT_RESISTANCE_VALUES,
                                DEFAULT_SUSCEPTANCE_VALUES, EPSILON)

logger = logging.getLogger(__name__)


@dataclass
class GridLine:
    """
    A single sampled gridline.

    Attributes:
        family: Circle family ('boundary', 'resistance', 'reactance',
            'conductance', 'susceptance', 'q', 'swr')
        value: Normalized parameter value of the line
        x: Sample x coordinates (real part of Γ)
        y: Sample y coordinates (imaginary part of Γ)
        circle: Generating circle, or None for the real axis
        label: Text label for the line
    """
    family: str
    value: float
    x: np.ndarray
    y: np.ndarray
    circle: Optional[Circle] = None
    label: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'family': self.family,
            'value': self.value,
            'x': self.x.tolist(),
            'y': self.y.tolist(),
            'circle': self.circle.to_dict() if self.circle is not None else None,
            'label': self.label
        }


@dataclass
class SmithGrid:
    """
    Complete set of gridlines for one chart mode.

    Attributes:
        mode: 'Z' for impedance mode or 'Y' for admittance mode
        lines: Gridlines in drawing order
    """
    mode: str
    lines: List[GridLine] = field(default_factory=list)

    def by_family(self, family: str) -> List[GridLine]:
        """Get all gridlines of one family."""
        return [line for line in self.lines if line.family == family]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': self.mode,
            'lines': [line.to_dict() for line in self.lines]
        }


def sample_circle_in_unit_disk(circle: Circle,
                               n_points: int = ARC_POINTS) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the part of a circle that lies inside the chart boundary.

    Args:
        circle: Circle to sample
        n_points: Number of samples

    Returns:
        Tuple of (x, y) arrays; empty when the circle is outside the chart
    """
    cx, cy = circle.center
    r = circle.radius
    crossings = unit_circle_crossings(circle)

    if not crossings:
        if math.hypot(cx, cy) + r <= 1 + EPSILON:
            theta = np.linspace(0, 2 * np.pi, n_points)
        else:
            return np.array([]), np.array([])
    else:
        p1, p2 = crossings
        a1 = math.atan2(p1.y - cy, p1.x - cx)
        a2 = math.atan2(p2.y - cy, p2.x - cx)
        span = (a2 - a1) % (2 * math.pi)

        # Counterclockwise a1 -> a2 is the inside arc if its midpoint is inside
        mid = a1 + span / 2
        mx, my = cx + r * math.cos(mid), cy + r * math.sin(mid)
        if mx * mx + my * my <= 1:
            theta = np.linspace(a1, a1 + span, n_points)
        else:
            theta = np.linspace(a2, a2 + (2 * math.pi - span), n_points)

    return cx + r * np.cos(theta), cy + r * np.sin(theta)


def _real_axis(family: str, n_points: int) -> GridLine:
    x = np.linspace(-1.0, 1.0, n_points)
    return GridLine(family=family, value=0.0, x=x, y=np.zeros_like(x), label='0')


def _circle_family(family: str,
                   values: List[float],
                   generator: Callable[[float], Circle],
                   n_points: int,
                   skip_negative: bool = False) -> List[GridLine]:
    """Build gridlines for one circle family, skipping invalid values."""
    lines = []
    for value in values:
        if skip_negative and value < 0:
            # Negative resistance/conductance is unphysical for passive loads
            logger.debug("Skipping negative %s value %s", family, value)
            continue
        try:
            circle = generator(value)
        except SmithDomainError as e:
            logger.debug("Skipping %s value %s: %s", family, value, e)
            continue

        x, y = sample_circle_in_unit_disk(circle, n_points)
        if x.size == 0:
            logger.debug("%s circle for %s lies outside the chart", family, value)
            continue

        lines.append(GridLine(family=family, value=value, x=x, y=y,
                              circle=circle, label=f"{value:g}"))
    return lines


def _arc_family(family: str,
                values: List[float],
                generator: Callable[[float], Circle],
                n_points: int) -> List[GridLine]:
    """Build reactance-style arcs; zero maps to the real axis."""
    lines = []
    nonzero = []
    for value in values:
        if abs(value) < EPSILON:
            lines.append(_real_axis(family, n_points))
        else:
            nonzero.append(value)
    return lines + _circle_family(family, nonzero, generator, n_points)


def generate_smith_grid(mode: str = 'Z',
                        resistance_values: Optional[List[float]] = None,
                        reactance_values: Optional[List[float]] = None,
                        conductance_values: Optional[List[float]] = None,
                        susceptance_values: Optional[List[float]] = None,
                        q_values: Optional[List[float]] = None,
                        swr_values: Optional[List[float]] = None,
                        n_points: int = ARC_POINTS) -> SmithGrid:
    """
    Generate complete Smith chart grid for specified mode.

    Args:
        mode: 'Z' for impedance mode or 'Y' for admittance mode
        resistance_values: Custom resistance values (Z-mode)
        reactance_values: Custom reactance values (Z-mode)
        conductance_values: Custom conductance values (Y-mode)
        susceptance_values: Custom susceptance values (Y-mode)
        q_values: Constant-Q overlay values, omitted when None
        swr_values: Constant-SWR overlay values, omitted when None
        n_points: Samples per gridline

    Returns:
        SmithGrid with the boundary first, then the mode's families,
        then any overlays

    Raises:
        ValueError: If mode is not 'Z' or 'Y'
    """
    if mode not in ['Z', 'Y']:
        raise ValueError("mode must be 'Z' or 'Y'")

    grid = SmithGrid(mode=mode)

    boundary = resistance_circle(0.0)
    bx, by = sample_circle_in_unit_disk(boundary, n_points)
    grid.lines.append(GridLine(family='boundary', value=0.0, x=bx, y=by,
                               circle=boundary, label='0'))

    if mode == 'Z':
        if resistance_values is None:
            resistance_values = DEFAULT_RESISTANCE_VALUES
        if reactance_values is None:
            reactance_values = DEFAULT_REACTANCE_VALUES

        grid.lines.extend(_circle_family('resistance', resistance_values,
                                         resistance_circle, n_points, skip_negative=True))
        grid.lines.extend(_arc_family('reactance', reactance_values,
                                      reactance_circle, n_points))

    else:  # Y-mode
        if conductance_values is None:
            conductance_values = DEFAULT_CONDUCTANCE_VALUES
        if susceptance_values is None:
            susceptance_values = DEFAULT_SUSCEPTANCE_VALUES

        grid.lines.extend(_circle_family('conductance', conductance_values,
                                         conductance_circle, n_points, skip_negative=True))
        grid.lines.extend(_arc_family('susceptance', susceptance_values,
                                      susceptance_circle, n_points))

    if q_values is not None:
        grid.lines.extend(_circle_family('q', q_values, const_q_circle, n_points))

    if swr_values is not None:
        grid.lines.extend(_circle_family('swr', swr_values, swr_circle, n_points))

    logger.debug("Generated %s-mode grid with %d lines", mode, len(grid.lines))
    return grid
