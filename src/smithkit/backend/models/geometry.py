"""
Geometric values in the reflection coefficient plane.

Coordinates are normalized so that the chart boundary is the unit circle.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple


class Point(NamedTuple):
    """A location in the reflection coefficient plane."""
    x: float
    y: float


@dataclass(frozen=True)
class Circle:
    """
    A circle in the normalized reflection coefficient plane.

    Attributes:
        center: Circle center
        radius: Circle radius (non-negative)
    """
    center: Point
    radius: float

    def __post_init__(self) -> None:
        # Accept plain tuples/lists for the center
        if not isinstance(self.center, Point):
            object.__setattr__(self, 'center', Point(*self.center))

    def contains(self, p: Point) -> bool:
        """Check whether a point lies inside or on the circle."""
        dx = p[0] - self.center.x
        dy = p[1] - self.center.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def to_dict(self) -> Dict[str, Any]:
        """Convert circle to dictionary."""
        return {
            'center': (self.center.x, self.center.y),
            'radius': self.radius
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Circle:
        """Create circle from dictionary."""
        return cls(center=Point(*data['center']), radius=data['radius'])


UNIT_CIRCLE = Circle(Point(0.0, 0.0), 1.0)
