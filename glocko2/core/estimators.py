"""aggregates over the opponent projections of one rating period"""
from typing import Sequence
from glocko2.core.types import OpponentProjection


def estimate_variance(projections: Sequence[OpponentProjection]) -> float:
    """
    Estimated variance of the player's rating based only on game outcomes.

    There must be at least one opponent. With none the sum is zero and this raises
    ZeroDivisionError, there is no sensible default.
    """
    total = 0.0
    for opp in projections:
        total += (opp.gphij**2.0) * opp.emmp * (1.0 - opp.emmp)
    return 1.0 / total


def performance(projections: Sequence[OpponentProjection]) -> float:
    """sum of g-weighted surprises, positive when the player did better than expected"""
    total = 0.0
    for opp in projections:
        total += opp.gphij * (opp.sj - opp.emmp)
    return total


def estimate_delta(v: float, projections: Sequence[OpponentProjection]) -> float:
    """estimated improvement in rating, in Glicko2 units"""
    return v * performance(projections)
