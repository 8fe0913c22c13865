import pytest
from glocko2.core.estimators import estimate_delta, estimate_variance, performance
from glocko2.core.projection import project_opponents
from glocko2.core.types import MatchResult

RESULTS = [MatchResult(1400.0, 30.0, 1.0), MatchResult(1550.0, 100.0, 0.0), MatchResult(1700.0, 300.0, 0.0)]
V = 1.7789770897239976


def test_estimate_variance():
    projections = project_opponents(0.0, RESULTS)
    assert estimate_variance(projections) == pytest.approx(V, rel=1e-12)


def test_estimate_delta():
    projections = project_opponents(0.0, RESULTS)
    assert estimate_delta(V, projections) == pytest.approx(-0.4839332609836549, rel=1e-12)


def test_performance_sign():
    assert performance(project_opponents(0.0, [MatchResult(1500.0, 100.0, 1.0)])) > 0.0
    assert performance(project_opponents(0.0, [MatchResult(1500.0, 100.0, 0.0)])) < 0.0
    assert performance(project_opponents(0.0, [MatchResult(1500.0, 100.0, 0.5)])) == 0.0


def test_order_does_not_matter():
    forward = project_opponents(0.0, RESULTS)
    backward = project_opponents(0.0, RESULTS[::-1])
    assert estimate_variance(backward) == pytest.approx(estimate_variance(forward), rel=1e-14)
    assert performance(backward) == pytest.approx(performance(forward), rel=1e-14)


def test_no_opponents():
    with pytest.raises(ZeroDivisionError):
        estimate_variance([])
