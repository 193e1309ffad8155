"""
Smith chart circle families and circle geometry.

Generates the constant resistance, reactance, conductance, susceptance,
Q and SWR circles that make up the chart grid, and provides the
intersection, membership and tangent helpers used to clip arcs and
orient labels. All circles are in the normalized reflection coefficient
plane where the chart boundary is the unit circle.
"""
from __future__ import annotations

import math
from typing import Tuple

from smithkit.backend.models.geometry import UNIT_CIRCLE, Circle, Point
from smithkit.backend.smith import SmithDomainError, swr_to_reflection_magnitude
from smithkit.constants import EPSILON


def resistance_circle(n: float) -> Circle:
    """
    Constant resistance circle for normalized resistance n.

    Center: (n/(n+1), 0), radius: 1/(n+1). n = 0 gives the chart boundary.

    Raises:
        SmithDomainError: If n = -1
    """
    if abs(n + 1) < EPSILON:
        raise SmithDomainError("Resistance circle undefined for r = -1")
    return Circle(Point(n / (n + 1), 0.0), 1 / (n + 1))


def reactance_circle(n: float) -> Circle:
    """
    Constant reactance circle for normalized reactance n.

    Center: (1, 1/n), radius: |1/n|. Every such circle passes through (1, 0).

    Raises:
        SmithDomainError: If n = 0 (the real axis, a straight line)
    """
    if abs(n) < EPSILON:
        raise SmithDomainError("Reactance circle undefined for x = 0")
    return Circle(Point(1.0, 1 / n), abs(1 / n))


def conductance_circle(n: float) -> Circle:
    """
    Constant conductance circle for normalized conductance n.

    Center: (-n/(n+1), 0), radius: 1/(n+1).

    Raises:
        SmithDomainError: If n = -1
    """
    if abs(n + 1) < EPSILON:
        raise SmithDomainError("Conductance circle undefined for g = -1")
    return Circle(Point(-n / (n + 1), 0.0), 1 / (n + 1))


def susceptance_circle(n: float) -> Circle:
    """
    Constant susceptance circle for normalized susceptance n.

    Center: (-1, -1/n), radius: |1/n|. Every such circle passes through (-1, 0).

    Raises:
        SmithDomainError: If n = 0
    """
    if abs(n) < EPSILON:
        raise SmithDomainError("Susceptance circle undefined for b = 0")
    return Circle(Point(-1.0, -1 / n), abs(1 / n))


def const_q_circle(q: float) -> Circle:
    """
    Constant Q circle.

    Center is (0, 1/q). The circle passes through (-1, 0) and (1, 0); for
    positive q its arc inside the chart lies in the lower (capacitive)
    half, for negative q in the upper (inductive) half.

    Raises:
        SmithDomainError: If q = 0
    """
    if abs(q) < EPSILON:
        raise SmithDomainError("Constant Q circle undefined for Q = 0")
    return Circle(Point(0.0, 1 / q), math.sqrt(1 + 1 / (q * q)))


def reflection_magnitude_circle(rho: float) -> Circle:
    """Circle of constant |Γ| centered on the chart origin."""
    if rho < 0:
        raise SmithDomainError(f"Reflection coefficient magnitude must be >= 0, got {rho}")
    return Circle(Point(0.0, 0.0), rho)


def swr_circle(value: float) -> Circle:
    """
    Constant SWR circle centered on the chart origin.

    Raises:
        SmithDomainError: If swr < 1
    """
    return reflection_magnitude_circle(swr_to_reflection_magnitude(value))


def intersect(c1: Circle, c2: Circle) -> Tuple[Point, Point]:
    """
    Find both intersection points of two circles.

    Rotates the unit vector from c1's center towards c2's center by ±A,
    where A is the angle at c1's center in the triangle formed by both
    centers and an intersection point.

    Args:
        c1: First circle
        c2: Second circle

    Returns:
        The two intersection points; equal when the circles are tangent

    Raises:
        SmithDomainError: If the circles are concentric, c1 has zero
            radius, or the circles do not intersect
    """
    dx = c2.center.x - c1.center.x
    dy = c2.center.y - c1.center.y
    dl = math.hypot(dx, dy)

    if dl < EPSILON:
        raise SmithDomainError("Concentric circles have no isolated intersection points")
    if c1.radius < EPSILON:
        raise SmithDomainError("Cannot intersect a circle of zero radius")

    cos_a = (dl * dl + c1.radius * c1.radius - c2.radius * c2.radius) / (2 * dl * c1.radius)
    if abs(cos_a) > 1 + EPSILON:
        raise SmithDomainError("Circles do not intersect")

    # Tangent circles can land marginally outside [-1, 1]
    cos_a = max(-1.0, min(1.0, cos_a))
    sin_a = math.sqrt(1 - cos_a * cos_a)

    vpx = dx * c1.radius / dl
    vpy = dy * c1.radius / dl

    return (
        Point(vpx * cos_a - vpy * sin_a + c1.center.x,
              vpx * sin_a + vpy * cos_a + c1.center.y),
        Point(vpx * cos_a + vpy * sin_a + c1.center.x,
              vpy * cos_a - vpx * sin_a + c1.center.y),
    )


def point_in_circle(p: Point, c: Circle) -> bool:
    """Check whether a point lies inside or on a circle."""
    return c.contains(p)


def unit_circle_crossings(c: Circle) -> Tuple[Point, ...]:
    """
    Find where a circle crosses the chart boundary.

    Returns:
        Two points, or an empty tuple when the circle does not cross the
        boundary (inside, outside, tangent to it or concentric with it)
    """
    d = math.hypot(c.center.x, c.center.y)
    if d < EPSILON:
        return ()
    # Separate or externally tangent
    if d >= c.radius + 1 - EPSILON:
        return ()
    # Nested or internally tangent
    if d <= abs(c.radius - 1) + EPSILON:
        return ()
    return intersect(c, UNIT_CIRCLE)


def tangent_angle_deg(c: Circle, p: Point) -> float:
    """
    Angle of the tangent to a circle at point p, in degrees.

    Used to orient labels along grid circles. A point level with the
    center has a vertical tangent, reported as ±90 degrees.
    """
    num = c.center.x - p[0]
    den = p[1] - c.center.y
    if abs(den) < EPSILON:
        return math.copysign(90.0, num)
    return math.degrees(math.atan(num / den))
