import numpy as np
import pandas as pd
from scipy.stats import pearsonr

from sample_io import COLUMNS, to_frame


class SampleAnalyzer:
    def __init__(self, samples, burn_in: int = 0):
        """
        Args:
            samples: (n, 2) array or DataFrame with columns x, y
            burn_in: number of leading samples to ignore
        """
        if burn_in < 0:
            raise ValueError("burn_in must be non-negative")
        self.burn_in = burn_in
        self.df = to_frame(samples).iloc[burn_in:].reset_index(drop=True)
        if len(self.df) < 3:
            raise ValueError(f"Need at least 3 samples after burn-in, got {len(self.df)}")

    def get_samples(self) -> np.ndarray:
        return self.df.to_numpy()

    def get_mean(self) -> np.ndarray:
        return self.df.mean().to_numpy()

    def get_variance(self) -> np.ndarray:
        return self.df.var().to_numpy()

    def get_covariance(self) -> np.ndarray:
        return self.df.cov().to_numpy()

    def get_correlation(self) -> float:
        return float(pearsonr(self.df["x"], self.df["y"])[0])

    def get_lag_autocorrelation(self, lag: int = 1, column: str = "x") -> float:
        """
        Correlation of one marginal with itself shifted by `lag` positions.
        Near zero for independent draws, clearly positive for a sticky chain.
        """
        if column not in COLUMNS:
            raise ValueError(f"column must be one of {COLUMNS}")
        values = self.df[column].to_numpy()
        if lag < 1 or len(values) - lag < 2:
            raise ValueError(f"lag must be between 1 and {len(values) - 2}, got {lag}")
        return float(pearsonr(values[:-lag], values[lag:])[0])

    def summary(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "mean": self.df.mean(),
                "variance": self.df.var(),
                "lag1_autocorrelation": [self.get_lag_autocorrelation(1, c) for c in COLUMNS],
            },
            index=COLUMNS,
        )
