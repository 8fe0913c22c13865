"""base class for online rating systems"""
from abc import ABC
from typing import Optional
import numpy as np
from glocko2.utils.data_utils import MatchupDataset


class OnlineRatingSystem(ABC):
    """
    Base class for rating systems that keep ratings for a fixed list of competitors and update them
    one rating period at a time.

    Attributes:
        rating_dim (int): number of values describing a competitor before a match, e.g. 2 for (rating, deviation)
        competitors (list): the competitors within the rating system
        num_competitors (int): the number of competitors in the system
    """

    rating_dim: int

    def __init__(self, competitors):
        self.competitors = competitors
        self.num_competitors = len(competitors)

    def print_leaderboard(self, num_places=None):
        """
        Prints the leaderboard of the rating system.

        Parameters:
            num_places int: The number of top places to display on the leaderboard.
        """
        raise NotImplementedError

    def predict(self, matchups: np.ndarray, time_step: int = None):
        """
        Probability that the first competitor of each matchup wins.

        Parameters:
            matchups (np.ndarray of shape (n,2)): competitor indices
            time_step (optional int)

        Returns:
            np.ndarray of shape (n,)
        """
        raise NotImplementedError

    def update(self, matchups: np.ndarray, outcomes: np.ndarray, time_step: Optional[int]):
        """
        Updates competitor ratings with the results of one rating period.

        Parameters:
            matchups (np.ndarray): Array of matchups, where each matchup is represented by a pair of competitor indices
            outcomes (np.ndarray): Array of outcomes for the first competitor of each matchup: win (1), loss (0), or draw (0.5).
            time_step (int): The rating period the matchups belong to.
        """
        raise NotImplementedError

    def get_pre_match_ratings(self, matchups: np.ndarray, time_step: Optional[int] = None) -> np.ndarray:
        """
        Returns the ratings for competitors at the timestep of the matchups
        Useful when using pre-match ratings as features in downstream ML pipelines

        Parameters:
            matchups (np.ndarray of shape (n,2)): competitor indices
            time_step (optional int)

        Returns:
            np.ndarray of shape (n, 2 * rating_dim): ratings for specified competitors
        """
        raise NotImplementedError

    def fit_batch(
        self,
        matchups: np.ndarray,
        outcomes: np.ndarray,
        time_step: int = None,
        return_pre_match_probs: bool = False,
        return_pre_match_ratings: bool = False,
    ):
        """update on one rating period, optionally returning what the model knew before it"""
        outputs = []
        if return_pre_match_probs:
            outputs.append(self.predict(matchups=matchups, time_step=time_step))
        if return_pre_match_ratings:
            outputs.append(self.get_pre_match_ratings(matchups, time_step=time_step))
        self.update(matchups, outcomes, time_step=time_step)
        if len(outputs) == 2:
            return tuple(outputs)
        elif outputs:
            return outputs[0]
        return None

    def fit_dataset(
        self,
        dataset: MatchupDataset,
        return_pre_match_probs: bool = False,
        return_pre_match_ratings: bool = False,
    ):
        """run every rating period of a dataset through the model in order"""
        n_matchups = len(dataset)
        if return_pre_match_probs:
            pre_match_probs = np.empty(shape=(n_matchups))
        if return_pre_match_ratings:
            pre_match_ratings = np.empty(shape=(n_matchups, 2 * self.rating_dim))

        idx = 0
        for matchups, outcomes, time_step in dataset:
            batch_size = matchups.shape[0]
            if return_pre_match_probs:
                pre_match_probs[idx : idx + batch_size] = self.predict(matchups, time_step=time_step)
            if return_pre_match_ratings:
                pre_match_ratings[idx : idx + batch_size] = self.get_pre_match_ratings(matchups, time_step=time_step)
            self.update(matchups, outcomes, time_step=time_step)
            idx += batch_size

        if return_pre_match_probs and return_pre_match_ratings:
            return pre_match_probs, pre_match_ratings
        elif return_pre_match_probs:
            return pre_match_probs
        elif return_pre_match_ratings:
            return pre_match_ratings
        return None
