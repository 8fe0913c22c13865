"""steps 6 to 8 of http://www.glicko.net/glicko/glicko2.pdf and the full pipeline"""
import math
from typing import Sequence
from glocko2.core.estimators import estimate_delta, estimate_variance, performance
from glocko2.core.projection import project_opponents
from glocko2.core.scaling import scale, unscale
from glocko2.core.types import MatchResult, OpponentProjection, Player, Rating, VolatilityParams
from glocko2.core.volatility import solve_volatility
from glocko2.utils.constants import EPSILON, MAX_BRACKET_STEPS, MAX_ITERATIONS


def phi_star(sigma_prime, phi):
    """pre-period deviation grown by the new volatility, also the whole update for a player who did not compete"""
    return math.sqrt(phi**2.0 + sigma_prime**2.0)


def new_rating(phi_s: float, mu: float, v: float, projections: Sequence[OpponentProjection]):
    """returns (mu', phi') from phi* and the period's games"""
    phi_prime = 1.0 / math.sqrt((1.0 / (phi_s**2.0)) + (1.0 / v))
    mu_prime = mu + (phi_prime**2.0) * performance(projections)
    return mu_prime, phi_prime


def rate(
    player: Player,
    results: Sequence[MatchResult],
    tau: float,
    epsilon: float = EPSILON,
    max_iterations: int = MAX_ITERATIONS,
    max_bracket_steps: int = MAX_BRACKET_STEPS,
) -> Rating:
    """
    Computes a player's rating after one rating period.

    Parameters:
        player (Player): the player's pre-period rating
        results (Sequence[MatchResult]): every game of the period, against opponents' pre-period ratings.
            Must not be empty.
        tau (float): system constant limiting the change in volatility, commonly between 0.3 and 1.2
        epsilon, max_iterations, max_bracket_steps: passed on to solve_volatility

    Returns:
        Rating: (r', rd', sigma') on the display scale
    """
    mu, phi = scale(player.r, player.rd)
    projections = project_opponents(mu, results)
    v = estimate_variance(projections)
    delta = estimate_delta(v, projections)
    sigma_prime = solve_volatility(
        VolatilityParams(player.sigma, phi, v, delta, tau),
        epsilon=epsilon,
        max_iterations=max_iterations,
        max_bracket_steps=max_bracket_steps,
    )
    mu_prime, phi_prime = new_rating(phi_star(sigma_prime, phi), mu, v, projections)
    r_prime, rd_prime = unscale(mu_prime, phi_prime)
    return Rating(r_prime, rd_prime, sigma_prime)
