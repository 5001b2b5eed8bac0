import math
import pytest

from intcalc.common import ExprError
from intcalc.integral import DiscreteIntegral, calculate, integrate


@pytest.mark.parametrize("intervals", [1, 2, 7, 100])
def test_linear_is_exact(intervals):
    di = DiscreteIntegral("x", 0, 10, intervals)

    assert calculate(di) == pytest.approx(50)
    assert di.result == pytest.approx(50)


@pytest.mark.parametrize("a, b, intervals", [(0, 1, 1), (-3, 4.5, 10), (2, 12, 333)])
def test_constant(a, b, intervals):
    di = integrate("1", a, b, intervals)

    assert di.result == pytest.approx(b - a)


def test_zero_width():
    di = integrate("sin(x) * 100 + x^3", 2.5, 2.5, 50)

    assert di.result == 0


def test_samples():
    di = integrate("x^2", -1, 3, 8)

    assert len(di.samples) == 9
    assert di.samples[0] == (-1, 1)
    assert di.samples[-1] == (3, 9)
    assert di.xs == sorted(di.xs)
    assert di.xs == pytest.approx([-1 + 0.5 * i for i in range(9)])
    assert di.ys == pytest.approx([x * x for x in di.xs])


def test_reference_scenario():
    di = DiscreteIntegral("x / (1 + (x^2))", -5, 5, 1000)
    result = di.calculate()

    assert result == pytest.approx(0, abs=1e-9)
    assert len(di.samples) == 1001


def test_quadratic():
    # trapezoidal error for x^2 on [0, 1] is h^2/6
    di = integrate("x^2", 0, 1, 10)

    assert di.result == pytest.approx(1 / 3 + 0.01 / 6)


def test_sine():
    di = integrate("sin(x)", 0, math.pi, 1000)

    assert di.result == pytest.approx(2, rel=1e-5)


def test_syntax_error():
    di = DiscreteIntegral("x +", 0, 1, 10)

    with pytest.raises(ExprError):
        di.calculate()

    assert di.result is None
    assert di.samples == []


def test_special_values_flow_through():
    di = integrate("1 / x", -1, 1, 2)

    assert di.samples[1] == (0, math.inf)
    assert di.result == math.inf


def test_expression_is_parsed_once():
    di = DiscreteIntegral("x", 0, 1, 4)

    assert di.expr is di.expr


def test_calculate_twice_appends():
    di = DiscreteIntegral("x", 0, 1, 4)
    di.calculate()
    di.calculate()

    assert len(di.samples) == 10
    assert di.result == pytest.approx(0.5)
