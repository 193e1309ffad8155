"""
Complex value type for Smith chart calculations.

An immutable two-component value with the arithmetic needed by the
reflection coefficient transforms. Real scalars are accepted wherever
another Complex is, and are treated as ``r + j0``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

Operand = Union['Complex', int, float]


@dataclass(frozen=True)
class Complex:
    """
    Immutable complex number.

    Equality is component-wise; callers comparing computed values should
    allow for floating-point noise.

    Attributes:
        real: Real component
        imag: Imaginary component
    """
    real: float
    imag: float = 0.0

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> Complex:
        """Create from an ordered ``(real, imag)`` pair."""
        if len(pair) != 2:
            raise ValueError(f"Expected a 2-element pair, got {len(pair)} elements")
        return cls(float(pair[0]), float(pair[1]))

    @classmethod
    def from_complex(cls, value: complex) -> Complex:
        """Create from a built-in complex number."""
        return cls(value.real, value.imag)

    @classmethod
    def polar(cls, magnitude: float, angle: float) -> Complex:
        """Create from magnitude and angle (radians)."""
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    def add(self, other: Operand) -> Complex:
        """
        Sum with a Complex or a real number.

        A real operand is added as r + j0, so only the real part changes.
        Broadcasting r across both parts (r + jr) would break Γ + 1 = T.
        """
        if isinstance(other, Complex):
            return Complex(self.real + other.real, self.imag + other.imag)
        return Complex(self.real + other, self.imag)

    def sub(self, other: Operand) -> Complex:
        """Difference with a Complex or a real number (taken as r + j0)."""
        if isinstance(other, Complex):
            return Complex(self.real - other.real, self.imag - other.imag)
        return Complex(self.real - other, self.imag)

    def mul(self, other: Operand) -> Complex:
        if isinstance(other, Complex):
            return Complex(
                self.real * other.real - self.imag * other.imag,
                self.real * other.imag + self.imag * other.real,
            )
        return Complex(self.real * other, self.imag * other)

    def div(self, other: Operand) -> Complex:
        """
        Divide by another Complex or a real.

        Division by zero is not guarded and raises ZeroDivisionError.
        """
        if isinstance(other, Complex):
            d = other.real * other.real + other.imag * other.imag
            return Complex(
                (self.real * other.real + self.imag * other.imag) / d,
                (self.imag * other.real - self.real * other.imag) / d,
            )
        return Complex(self.real / other, self.imag / other)

    def abs(self) -> float:
        """Magnitude ``sqrt(real² + imag²)``."""
        return math.hypot(self.real, self.imag)

    def arg(self) -> float:
        """Argument in radians, ``atan2(imag, real)``."""
        return math.atan2(self.imag, self.real)

    def conjugate(self) -> Complex:
        return Complex(self.real, -self.imag)

    def to_pair(self) -> Tuple[float, float]:
        return (self.real, self.imag)

    def to_string(self, decimal_places: int = 3) -> str:
        """Format as ``"a + jb"`` or ``"a - jb"``."""
        sign = '-' if self.imag < 0 else '+'
        return (f"{self.real:.{decimal_places}f} {sign} "
                f"j{abs(self.imag):.{decimal_places}f}")

    def to_polar_string(self, decimal_places: int = 3, unit: str = '') -> str:
        """Format as magnitude and angle in degrees."""
        angle = math.degrees(self.arg())
        magnitude = f"{self.abs():.{decimal_places}f}"
        if unit:
            magnitude = f"{magnitude} {unit}"
        return f"{magnitude} ∠{angle:.{decimal_places}f}°"

    # Operator aliases

    def __add__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Operand) -> Complex:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Operand) -> Complex:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Complex(other - self.real, -self.imag)

    def __mul__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Operand) -> Complex:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Operand) -> Complex:
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Operand) -> Complex:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Complex(other, 0.0).div(self)

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imag)

    def __abs__(self) -> float:
        return self.abs()

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __iter__(self) -> Iterator[float]:
        yield self.real
        yield self.imag

    def __str__(self) -> str:
        return self.to_string()
