"""
example from: http://www.glicko.net/glicko/glicko2.pdf
"""
import pytest
from glocko2 import MatchResult, Player, Rating, rate
from glocko2.core.errors import RootIterationExhausted
from glocko2.core.projection import project_opponents
from glocko2.core.updater import new_rating, phi_star

PLAYER = Player(r=1500.0, rd=200.0, sigma=0.06)
RESULTS = [MatchResult(1400.0, 30.0, 1.0), MatchResult(1550.0, 100.0, 0.0), MatchResult(1700.0, 300.0, 0.0)]


def test_phi_star():
    assert phi_star(0.059995984286488495, 1.1512924985234674) == pytest.approx(1.1528546895801364, abs=1e-8)


def test_new_rating():
    projections = project_opponents(0.0, RESULTS)
    mu_prime, phi_prime = new_rating(1.1528546895801364, 0.0, 1.7789770897239976, projections)
    assert mu_prime == pytest.approx(-0.20694096667525494, abs=1e-8)
    assert phi_prime == pytest.approx(0.8721991881307343, abs=1e-8)


def test_rate():
    new = rate(PLAYER, RESULTS, tau=0.5)
    assert isinstance(new, Rating)
    assert new.r == pytest.approx(1464.0506705393013, abs=1e-4)
    assert new.rd == pytest.approx(151.51652412385727, abs=1e-4)
    assert new.sigma == pytest.approx(0.059995984286488495, abs=1e-8)
    r, rd, sigma = new
    assert (r, rd, sigma) == tuple(new)


def test_deviation_shrinks():
    new = rate(PLAYER, RESULTS, tau=0.5)
    assert new.rd < PLAYER.rd


@pytest.mark.parametrize('first_score', [0.0, 0.5])
def test_better_results_give_higher_rating(first_score):
    worse = [RESULTS[0]._replace(sj=first_score)] + RESULTS[1:]
    assert rate(PLAYER, RESULTS, tau=0.5).r > rate(PLAYER, worse, tau=0.5).r


def test_not_idempotent():
    once = rate(PLAYER, RESULTS, tau=0.5)
    twice = rate(Player(*once), RESULTS, tau=0.5)
    assert twice.rd < once.rd
    assert twice.r != pytest.approx(once.r)


def test_single_draw_against_equal():
    new = rate(PLAYER, [MatchResult(1500.0, 200.0, 0.5)], tau=0.5)
    assert new.r == pytest.approx(1500.0)
    assert new.rd < 200.0


def test_player_is_not_mutated():
    player = Player(r=1500.0, rd=200.0, sigma=0.06, id='p0', name='Alice')
    rate(player, RESULTS, tau=0.5)
    assert player == Player(r=1500.0, rd=200.0, sigma=0.06, id='p0', name='Alice')


def test_solver_settings_are_passed_on():
    with pytest.raises(RootIterationExhausted):
        rate(PLAYER, RESULTS, tau=0.5, max_iterations=1)


def test_no_opponents():
    with pytest.raises(ZeroDivisionError):
        rate(PLAYER, [], tau=0.5)
