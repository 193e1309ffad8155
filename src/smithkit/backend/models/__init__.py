"""Value types shared by the backend."""

from smithkit.backend.models.complex_value import Complex
from smithkit.backend.models.geometry import UNIT_CIRCLE, Circle, Point

__all__ = ['Complex', 'Circle', 'Point', 'UNIT_CIRCLE']
