"""value types passed into and out of the rating pipeline"""
from dataclasses import dataclass
from typing import NamedTuple, Optional
from glocko2.utils.constants import BASE_RATING, DEFAULT_RD, DEFAULT_SIGMA


@dataclass(frozen=True)
class Player:
    """
    A snapshot of one player's Glicko2 rating, on the display scale.

    Attributes:
        r (float): rating, centred at 1500
        rd (float): rating deviation, must be non-negative. Lower means more certain.
        sigma (float): volatility, the expected size of swings in true skill
        id (str, optional): identifier of the player, unique within a roster
        name (str, optional): display name
        active (bool): inactive players are skipped entirely by rate_roster
    """

    r: float = BASE_RATING
    rd: float = DEFAULT_RD
    sigma: float = DEFAULT_SIGMA
    id: Optional[str] = None
    name: Optional[str] = None
    active: bool = True


class MatchResult(NamedTuple):
    """one game against an opponent given by their pre-period rating and deviation"""

    r: float
    rd: float
    sj: float  # 1.0 win, 0.5 draw, 0.0 loss


class Opponent(NamedTuple):
    """one game against the player at index idx of a roster"""

    idx: int
    sj: float


class OpponentProjection(NamedTuple):
    muj: float
    phij: float
    gphij: float
    emmp: float
    sj: float


class VolatilityParams(NamedTuple):
    """everything the volatility objective depends on"""

    sigma: float
    phi: float
    v: float
    delta: float
    tau: float


class Rating(NamedTuple):
    r: float
    rd: float
    sigma: float
