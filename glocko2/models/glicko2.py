"""
Glicko 2
paper: http://www.glicko.net/research/dpcmsv.pdf
example: http://www.glicko.net/glicko/glicko2.pdf

"""
import logging
import numpy as np
from glocko2.core.base import OnlineRatingSystem
from glocko2.core.errors import ConvergenceError
from glocko2.core.scaling import scale
from glocko2.core.types import MatchResult, Player
from glocko2.core.updater import rate
from glocko2.utils.constants import (
    BASE_RATING,
    DEFAULT_RD,
    DEFAULT_SIGMA,
    DEFAULT_TAU,
    EPSILON,
    MAX_BRACKET_STEPS,
    MAX_ITERATIONS,
    SCALE,
    THREE_OVER_PI_SQUARED,
)
from glocko2.utils.math_utils import sigmoid

logger = logging.getLogger(__name__)


class Glicko2(OnlineRatingSystem):
    """
    Implements the Glicko 2 rating system, designed by Mark Glickman, for a fixed list of competitors.

    Each call to update is one rating period. Every game in the period is evaluated against the
    ratings competitors had when the period started.
    """

    rating_dim = 2

    def __init__(
        self,
        competitors: list,
        initial_rating: float = BASE_RATING,
        initial_rd: float = DEFAULT_RD,
        initial_sigma: float = DEFAULT_SIGMA,
        tau: float = DEFAULT_TAU,
        epsilon: float = EPSILON,
        max_iterations: int = MAX_ITERATIONS,
        max_bracket_steps: int = MAX_BRACKET_STEPS,
        dtype=np.float64,
    ):
        """
        Initializes the Glicko 2 rating system with the given parameters.

        Parameters:
            competitors (list): A list of competitors to be rated within the system.
            initial_rating (float, optional): Rating of new competitors. Defaults to 1500.0.
            initial_rd (float, optional): Rating deviation of new competitors. Defaults to 350.0.
            initial_sigma (float, optional): Volatility of new competitors. Defaults to 0.06.
            tau (float, optional): System constant limiting the change in volatility. Defaults to 0.5.
            epsilon (float, optional): Convergence tolerance of the volatility solver. Defaults to 1e-6.
            max_iterations (int, optional): Iteration cap of the volatility solver. Defaults to 100.
            max_bracket_steps (int, optional): Step cap of the solver's bracket search. Defaults to 10000.
            dtype: The data type for the rating arrays. Defaults to np.float64.
        """
        super().__init__(competitors)
        self.ratings = np.zeros(shape=self.num_competitors, dtype=dtype) + initial_rating
        self.rating_devs = np.zeros(shape=self.num_competitors, dtype=dtype) + initial_rd
        self.sigmas = np.zeros(shape=self.num_competitors, dtype=dtype) + initial_sigma
        self.has_played = np.zeros(shape=self.num_competitors, dtype=np.bool_)
        self.prev_time_step = -1
        self.tau = tau
        self.solver_kwargs = {
            'epsilon': epsilon,
            'max_iterations': max_iterations,
            'max_bracket_steps': max_bracket_steps,
        }

    @staticmethod
    def g_vector(phi):
        """vector version of glocko2.core.projection.g"""
        return 1.0 / np.sqrt(1.0 + (THREE_OVER_PI_SQUARED * np.square(phi)))

    def predict(self, matchups: np.ndarray, time_step: int = None):
        """win probability of the first competitor, discounted by the uncertainty of both"""
        mus, phis = scale(self.ratings[matchups], self.rating_devs[matchups])
        mu_diff = mus[:, 0] - mus[:, 1]
        combined_g = self.g_vector(np.sqrt(np.square(phis[:, 0]) + np.square(phis[:, 1])))
        return sigmoid(combined_g * mu_diff)

    def get_pre_match_ratings(self, matchups: np.ndarray, **kwargs):
        ratings = self.ratings[matchups]
        devs = self.rating_devs[matchups]
        return np.concatenate((ratings[..., None], devs[..., None]), axis=2).reshape(ratings.shape[0], -1)

    @staticmethod
    def increase_rating_dev(rating_devs, sigmas, time_delta):
        """deviations after sitting out time_delta rating periods"""
        phis = rating_devs / SCALE
        return SCALE * np.sqrt(np.square(phis) + (time_delta * np.square(sigmas)))

    def update(self, matchups, outcomes, time_step=None, **kwargs):
        """apply one rating period, leaving the model untouched if any competitor cannot be rated"""
        matchups = np.asarray(matchups)
        outcomes = np.asarray(outcomes, dtype=np.float64)
        if time_step is None:
            time_step = self.prev_time_step + 1
        time_delta = time_step - self.prev_time_step

        active_in_period = np.unique(matchups)
        ratings = self.ratings.copy()
        rating_devs = self.rating_devs.copy()
        sigmas = self.sigmas.copy()
        has_played = self.has_played.copy()

        idle_mask = has_played.copy()
        idle_mask[active_in_period] = False
        if idle_mask.any():
            rating_devs[idle_mask] = self.increase_rating_dev(rating_devs[idle_mask], sigmas[idle_mask], time_delta)
        # rate() covers one period of growth, returning competitors also sat out the rest
        returning_mask = np.zeros_like(has_played)
        returning_mask[active_in_period] = has_played[active_in_period]
        if time_delta > 1 and returning_mask.any():
            rating_devs[returning_mask] = self.increase_rating_dev(
                rating_devs[returning_mask], sigmas[returning_mask], time_delta - 1
            )
        has_played[active_in_period] = True

        # every game is evaluated against pre-period ratings
        new_ratings = ratings.copy()
        new_rating_devs = rating_devs.copy()
        new_sigmas = sigmas.copy()
        for comp in active_in_period:
            results = []
            for side, other in ((0, 1), (1, 0)):
                rows = np.flatnonzero(matchups[:, side] == comp)
                scores = outcomes[rows] if side == 0 else 1.0 - outcomes[rows]
                opponents = matchups[rows, other]
                results.extend(MatchResult(ratings[o], rating_devs[o], s) for o, s in zip(opponents, scores))

            player = Player(ratings[comp], rating_devs[comp], sigmas[comp])
            try:
                new = rate(player, results, self.tau, **self.solver_kwargs)
            except ConvergenceError as err:
                logger.error(
                    'could not rate competitor %s in time step %s: %s', self.competitors[comp], time_step, err
                )
                raise
            new_ratings[comp], new_rating_devs[comp], new_sigmas[comp] = new

        self.ratings = new_ratings
        self.rating_devs = new_rating_devs
        self.sigmas = new_sigmas
        self.has_played = has_played
        self.prev_time_step = time_step

    def get_ratings(self):
        """(rating, rating deviation, volatility) arrays in competitor order"""
        return self.ratings.copy(), self.rating_devs.copy(), self.sigmas.copy()

    def print_leaderboard(self, num_places=None):
        sort_array = self.ratings - (2.0 * self.rating_devs)
        if num_places is None:
            num_places = self.num_competitors
        sorted_idxs = np.argsort(-sort_array)[:num_places]
        max_len = min(np.max([len(str(comp)) for comp in self.competitors] + [10]), 25)
        print(f'{"competitor": <{max_len}}\t{"rating - (2*dev)"}\t{"rating"}\t{"dev"}\t{"sigma"}')
        for comp_idx in sorted_idxs:
            print(
                f'{str(self.competitors[comp_idx]): <{max_len}}\t{sort_array[comp_idx]:.2f}\t'
                f'{self.ratings[comp_idx]:.2f}\t{self.rating_devs[comp_idx]:.2f}\t{self.sigmas[comp_idx]:.6f}'
            )
