"""
glocko2
=======

Glicko2 rating updates. rate() takes one player's pre-period rating and the results of their
games in a rating period and returns the new (rating, deviation, volatility). rate_roster() and
the Glicko2 model apply the same update to every competitor of a roster.
"""
from glocko2.core.errors import BracketSearchExhausted, ConvergenceError, RootIterationExhausted
from glocko2.core.period import rate_player, rate_roster
from glocko2.core.scaling import scale, unscale
from glocko2.core.types import MatchResult, Opponent, Player, Rating
from glocko2.core.updater import rate
from glocko2.models.glicko2 import Glicko2
from glocko2.utils.data_utils import MatchupDataset

__all__ = [
    'BracketSearchExhausted',
    'ConvergenceError',
    'Glicko2',
    'MatchResult',
    'MatchupDataset',
    'Opponent',
    'Player',
    'Rating',
    'RootIterationExhausted',
    'rate',
    'rate_player',
    'rate_roster',
    'scale',
    'unscale',
]
