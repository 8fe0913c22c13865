"""per-opponent quantities relative to the player being rated"""
import math
from typing import Iterable, List
from glocko2.core.scaling import scale
from glocko2.core.types import MatchResult, OpponentProjection
from glocko2.utils.constants import THREE_OVER_PI_SQUARED
from glocko2.utils.math_utils import sigmoid_scalar


def g(phi):
    """
    Discounts the influence of an opponent by how uncertain their rating is.
    Equals 1 at phi = 0 and decreases towards 0 as |phi| grows.
    """
    return 1.0 / math.sqrt(1.0 + (THREE_OVER_PI_SQUARED * (phi**2.0)))


def expected_score(mu, muj, phij):
    """probability that a player at mu beats an opponent at (muj, phij)"""
    return sigmoid_scalar(g(phij) * (mu - muj))


def project_opponents(mu: float, results: Iterable[MatchResult]) -> List[OpponentProjection]:
    """scale every opponent and evaluate g and E against mu, keeping the input order"""
    projections = []
    for result in results:
        muj, phij = scale(result.r, result.rd)
        gphij = g(phij)
        emmp = sigmoid_scalar(gphij * (mu - muj))
        projections.append(OpponentProjection(muj, phij, gphij, emmp, result.sj))
    return projections
