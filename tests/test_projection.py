"""
example from: http://www.glicko.net/glicko/glicko2.pdf
"""
import pytest
from glocko2.core.projection import expected_score, g, project_opponents
from glocko2.core.types import MatchResult

RESULTS = [MatchResult(1400.0, 30.0, 1.0), MatchResult(1550.0, 100.0, 0.0), MatchResult(1700.0, 300.0, 0.0)]


def test_g_bounds():
    assert g(0.0) == 1.0
    values = [g(phi) for phi in (0.0, 0.1, 0.5, 1.0, 2.0, 10.0, 1000.0)]
    assert all(0.0 < value <= 1.0 for value in values)
    assert all(a > b for a, b in zip(values, values[1:]))


def test_g_symmetric():
    assert g(-1.3) == g(1.3)


@pytest.mark.parametrize('mu', [-3.0, 0.0, 0.7])
@pytest.mark.parametrize('phij', [0.0, 0.3, 2.5])
def test_expected_score_even_match(mu, phij):
    assert expected_score(mu, mu, phij) == 0.5


def test_expected_score_favours_stronger_player():
    assert expected_score(0.5, 0.0, 1.0) > 0.5
    assert expected_score(0.0, 0.5, 1.0) < 0.5
    assert expected_score(0.5, 0.0, 1.0) + expected_score(0.0, 0.5, 1.0) == pytest.approx(1.0)


def test_project_opponents():
    expected = [
        (-0.5756462492617337, 0.1726938747785201, 0.9954980064506083, 0.6394677305521533, 1.0),
        (0.28782312463086684, 0.5756462492617337, 0.9531489778689763, 0.4318423561076679, 0.0),
        (1.1512924985234674, 1.726938747785201, 0.7242354780877526, 0.30284072909521925, 0.0),
    ]
    projections = project_opponents(0.0, RESULTS)
    assert len(projections) == 3
    for projection, values in zip(projections, expected):
        assert tuple(projection) == pytest.approx(values, rel=1e-12)


def test_project_opponents_keeps_order():
    projections = project_opponents(0.0, list(reversed(RESULTS)))
    assert [p.sj for p in projections] == [0.0, 0.0, 1.0]
    assert projections[0].muj == pytest.approx(1.1512924985234674)
