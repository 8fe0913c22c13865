"""Classes and functions for turning match tables into rating periods"""

from typing import List, Optional
import numpy as np
import polars as pl
from glocko2.utils.date_utils import get_duration


class MatchupDataset:
    """
    Paired comparison results grouped into rating periods.

    Rows are sorted by time before indexing so that every rating period is a contiguous
    block of matchups. Iterating yields (matchups, outcomes, time_step) once per period.
    """

    def __init__(
        self,
        df: pl.DataFrame,
        competitor_cols: List[str],
        outcome_col: str,
        datetime_col: Optional[str] = None,
        time_step_col: Optional[str] = None,
        rating_period: str = '1W',
    ):
        if sum([bool(datetime_col), bool(time_step_col)]) != 1:
            raise ValueError('Specify exactly one of datetime_col or time_step_col')
        if len(competitor_cols) != 2:
            raise ValueError('Exactly two competitor columns are required')
        df = df.sort(datetime_col or time_step_col, maintain_order=True)

        self._init_competitors(df, competitor_cols)
        self._init_matchups(df, competitor_cols)
        self.outcomes = df[outcome_col].cast(pl.Float64).to_numpy()
        if time_step_col:
            self.time_steps = df[time_step_col].to_numpy()
        else:
            self.time_steps = self._convert_datetime(df[datetime_col], rating_period)
        self._process_time_steps()

    def _init_competitors(self, df: pl.DataFrame, competitor_cols: List[str]):
        competitor_series = pl.concat([df[col].cast(pl.Utf8) for col in competitor_cols])
        self.competitors = sorted(competitor_series.unique().to_list())
        self.num_competitors = len(self.competitors)
        self.competitor_to_idx = dict(zip(self.competitors, range(self.num_competitors)))

    def _init_matchups(self, df: pl.DataFrame, competitor_cols: List[str]):
        """Create numerical matchup indices."""
        if df.height == 0:
            self.matchups = np.empty((0, 2), dtype=np.int32)
            return
        columns = [
            df[col].cast(pl.Utf8).replace_strict(self.competitor_to_idx, return_dtype=pl.Int32).to_numpy()
            for col in competitor_cols
        ]
        self.matchups = np.ascontiguousarray(np.column_stack(columns))

    @staticmethod
    def _convert_datetime(datetime_series: pl.Series, rating_period: str) -> np.ndarray:
        """Bucket timestamps into rating periods counted from the first match."""
        if datetime_series.dtype == pl.Date:
            datetime_series = datetime_series.cast(pl.Datetime)
        elif datetime_series.dtype == pl.Utf8:
            datetime_series = datetime_series.str.to_datetime()

        period_seconds = get_duration(rating_period)
        if datetime_series.len() == 0:
            return np.empty(0, dtype=np.int32)
        seconds_since_epoch = (datetime_series.dt.timestamp() // 1_000_000).to_numpy()
        return ((seconds_since_epoch - seconds_since_epoch[0]) // period_seconds).astype(np.int32)

    def _process_time_steps(self):
        """Calculate time period boundaries."""
        self.unique_time_steps, time_indices = np.unique(self.time_steps, return_index=True)
        self.time_step_end_idxs = np.roll(time_indices, -1)
        if len(self.time_step_end_idxs):
            self.time_step_end_idxs[-1] = len(self.time_steps)

    def __len__(self):
        return self.matchups.shape[0]

    def __iter__(self):
        """Iterate through rating periods."""
        start_idx = 0
        for time_step, end_idx in zip(self.unique_time_steps, self.time_step_end_idxs):
            yield self.matchups[start_idx:end_idx], self.outcomes[start_idx:end_idx], time_step
            start_idx = end_idx

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self.init_from_arrays(
                time_steps=self.time_steps[key],
                matchups=self.matchups[key],
                outcomes=self.outcomes[key],
                competitors=self.competitors,
            )
        raise ValueError('Only slice indexing supported')

    @classmethod
    def init_from_arrays(cls, time_steps: np.ndarray, matchups: np.ndarray, outcomes: np.ndarray, competitors: list):
        """Factory method for creating datasets from arrays already sorted by time step."""
        dataset = cls.__new__(cls)
        dataset.time_steps = np.asarray(time_steps)
        dataset.matchups = np.asarray(matchups)
        dataset.outcomes = np.asarray(outcomes, dtype=np.float64)
        dataset.competitors = competitors
        dataset.num_competitors = len(competitors)
        dataset.competitor_to_idx = dict(zip(competitors, range(len(competitors))))
        dataset._process_time_steps()
        return dataset
