"""
Unit tests for the Complex value type.
"""
import math

import pytest

from smithkit.backend.models.complex_value import Complex


class TestComplexConstruction:
    """Test the ways a Complex can be built."""

    def test_from_components(self) -> None:
        c = Complex(1.5, -2.0)
        assert c.real == 1.5
        assert c.imag == -2.0

    def test_from_pair(self) -> None:
        assert Complex.from_pair((3, 4)) == Complex(3.0, 4.0)
        assert Complex.from_pair([0.25, -0.5]) == Complex(0.25, -0.5)

    def test_from_pair_rejects_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="2-element"):
            Complex.from_pair((1.0, 2.0, 3.0))

    def test_from_builtin_complex(self) -> None:
        assert Complex.from_complex(2 - 3j) == Complex(2.0, -3.0)
        assert complex(Complex(2.0, -3.0)) == 2 - 3j

    def test_polar(self) -> None:
        c = Complex.polar(2.0, math.pi / 2)
        assert c.real == pytest.approx(0.0, abs=1e-12)
        assert c.imag == pytest.approx(2.0)

    def test_immutable(self) -> None:
        c = Complex(1.0, 1.0)
        with pytest.raises(AttributeError):
            c.real = 2.0  # type: ignore[misc]

    def test_unpacks_as_pair(self) -> None:
        re, im = Complex(0.1, 0.2)
        assert (re, im) == (0.1, 0.2)


class TestComplexArithmetic:
    """Test arithmetic against Complex and real operands."""

    def test_add_sub_complex(self) -> None:
        a = Complex(1.0, 2.0)
        b = Complex(0.5, -1.0)
        assert a.add(b) == Complex(1.5, 1.0)
        assert a.sub(b) == Complex(0.5, 3.0)
        assert a + b == a.add(b)
        assert a - b == a.sub(b)

    def test_add_sub_real_moves_real_part_only(self) -> None:
        a = Complex(0.3, 0.4)
        assert complex(a.add(1)) == pytest.approx(1.3 + 0.4j)
        assert complex(a.sub(1)) == pytest.approx(-0.7 + 0.4j)
        assert complex(1 + a) == pytest.approx(1.3 + 0.4j)
        assert complex(1 - a) == pytest.approx(0.7 - 0.4j)

    def test_mul_complex(self) -> None:
        # (1 + 2j)(3 - 1j) = 3 - j + 6j + 2 = 5 + 5j
        assert Complex(1.0, 2.0).mul(Complex(3.0, -1.0)) == Complex(5.0, 5.0)
        assert Complex(0.0, 1.0) * Complex(0.0, 1.0) == Complex(-1.0, 0.0)

    def test_mul_div_real_scales_both_components(self) -> None:
        a = Complex(2.0, -4.0)
        assert a.mul(0.5) == Complex(1.0, -2.0)
        assert a.div(2) == Complex(1.0, -2.0)
        assert 3 * a == Complex(6.0, -12.0)

    def test_div_complex(self) -> None:
        result = Complex(5.0, 5.0).div(Complex(3.0, -1.0))
        assert result.real == pytest.approx(1.0)
        assert result.imag == pytest.approx(2.0)

    def test_reflected_div(self) -> None:
        result = 1 / Complex(0.0, 2.0)
        assert result.real == pytest.approx(0.0)
        assert result.imag == pytest.approx(-0.5)

    def test_div_by_zero_is_not_guarded(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Complex(1.0, 1.0).div(Complex(0.0, 0.0))

    def test_matches_builtin_complex(self) -> None:
        a, b = 0.3 - 0.7j, -1.2 + 0.4j
        ca, cb = Complex.from_complex(a), Complex.from_complex(b)
        for got, expected in [(ca * cb, a * b), (ca / cb, a / b),
                              (ca + cb, a + b), (ca - cb, a - b)]:
            assert complex(got) == pytest.approx(expected)

    def test_negation_and_conjugate(self) -> None:
        assert -Complex(1.0, -2.0) == Complex(-1.0, 2.0)
        assert Complex(1.0, -2.0).conjugate() == Complex(1.0, 2.0)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            Complex(1.0, 0.0) + "1"  # type: ignore[operator]


class TestComplexProperties:
    """Test magnitude, argument and formatting."""

    def test_abs(self) -> None:
        assert Complex(3.0, 4.0).abs() == pytest.approx(5.0)
        assert abs(Complex(-3.0, -4.0)) == pytest.approx(5.0)

    def test_arg(self) -> None:
        assert Complex(0.0, 1.0).arg() == pytest.approx(math.pi / 2)
        assert Complex(-1.0, 0.0).arg() == pytest.approx(math.pi)
        assert Complex(1.0, -1.0).arg() == pytest.approx(-math.pi / 4)

    def test_to_string(self) -> None:
        assert Complex(50.0, 25.5).to_string() == "50.000 + j25.500"
        assert Complex(12.3456, -7.0).to_string(2) == "12.35 - j7.00"
        assert str(Complex(0.0, 0.0)) == "0.000 + j0.000"

    def test_to_polar_string(self) -> None:
        assert Complex(0.0, 2.0).to_polar_string(1) == "2.0 ∠90.0°"
        assert Complex(1.0, 0.0).to_polar_string(2, unit="V") == "1.00 V ∠0.00°"
