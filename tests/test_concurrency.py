"""
Purity checks: engine functions give identical results from many threads.
"""
import math
from concurrent.futures import ThreadPoolExecutor

from smithkit.backend.circles import intersect, reactance_circle, resistance_circle
from smithkit.backend.models.complex_value import Complex
from smithkit.backend.readout import cursor_readout
from smithkit.backend.smith import (SmithChart, reflection_to_admittance,
                                    reflection_to_impedance, swr)


def _inputs(n: int):
    return [Complex.polar(0.95 * (k % 20) / 20, 2 * math.pi * k / n) for k in range(n)]


def _evaluate(rc: Complex):
    chart = SmithChart(50.0)
    return (
        reflection_to_impedance(rc),
        reflection_to_admittance(rc),
        swr(rc),
        cursor_readout(chart, rc),
    )


class TestConcurrentPurity:
    """Test that concurrent calls match sequential execution."""

    def test_transforms_match_sequential(self) -> None:
        points = _inputs(400)
        sequential = [_evaluate(rc) for rc in points]

        with ThreadPoolExecutor(max_workers=8) as pool:
            concurrent = list(pool.map(_evaluate, points))

        assert concurrent == sequential

    def test_shared_chart_across_threads(self) -> None:
        chart = SmithChart(75.0)
        points = _inputs(200)
        sequential = [chart.impedance(rc) for rc in points]

        with ThreadPoolExecutor(max_workers=8) as pool:
            concurrent = list(pool.map(chart.impedance, points))

        assert concurrent == sequential
        assert chart.z0 == 75.0

    def test_intersections_match_sequential(self) -> None:
        pairs = [(resistance_circle(r / 4), reactance_circle(x / 4))
                 for r in range(1, 9) for x in (-4, -2, -1, 1, 2, 4)]
        sequential = [intersect(a, b) for a, b in pairs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            concurrent = list(pool.map(lambda ab: intersect(*ab), pairs))

        assert concurrent == sequential
