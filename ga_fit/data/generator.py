"""
Dataset Generation and Loading Module

This module builds the weighted datasets the chi-square figure of merit is
fitted against. The toy dataset is a histogram of gaussian samples normalized
to a probability density, with per-bin errors taken from the sum of squared
weights.
"""
import math
import os
from typing import Dict

import numpy as np
import pandas as pd

from ga_fit.functions import ParametricFunction, gaussian

DATASET_COLUMNS = ['x', 'y', 'ey']


def sample_gaussian(n_samples: int, mean: float, sigma: float, seed: int = 1234) -> np.ndarray:
    """Draws n_samples values from a gaussian distribution."""
    if n_samples < 0:
        raise ValueError(f"n_samples must be >= 0, got {n_samples}")
    rng = np.random.default_rng(seed)
    return rng.normal(mean, sigma, size=n_samples)


def histogram_density(samples: np.ndarray, x_min: float, x_max: float, n_bins: int = 100) -> pd.DataFrame:
    """
    Histograms samples as a probability density.

    Each sample is filled with weight 1 / (n * dx). Samples outside
    [x_min, x_max) are dropped, but still count in n.

    Args:
        samples: The raw samples.
        x_min: Lower edge of the first bin.
        x_max: Upper edge of the last bin.
        n_bins: Number of bins.

    Returns:
        A DataFrame with columns x (bin center), y (density) and ey (error).
    """
    if n_bins <= 0:
        raise ValueError(f"n_bins must be > 0, got {n_bins}")
    if not x_min < x_max:
        raise ValueError(f"x_min ({x_min}) must be < x_max ({x_max})")

    samples = np.asarray(samples, dtype=np.float64)
    edges = np.linspace(x_min, x_max, n_bins + 1)
    dx = (x_max - x_min) / n_bins
    weight = 1.0 / (len(samples) * dx) if len(samples) else 0.0

    counts, _ = np.histogram(samples, bins=edges)
    y = counts * weight
    ey = np.sqrt(counts * weight * weight)
    centers = 0.5 * (edges[:-1] + edges[1:])

    return pd.DataFrame({'x': centers, 'y': y, 'ey': ey}, columns=DATASET_COLUMNS)


def generate_gaussian_histogram(n_samples: int = 10000, mean: float = 1.5, sigma: float = 2.3,
                                n_bins: int = 100, seed: int = 1234) -> pd.DataFrame:
    """
    Generates a gaussian probability-density histogram over [mean - 5 sigma, mean + 5 sigma].
    """
    samples = sample_gaussian(n_samples, mean, sigma, seed=seed)
    return histogram_density(samples, mean - 5 * sigma, mean + 5 * sigma, n_bins)


def reference_gaussian_fit(samples: np.ndarray) -> Dict[str, float]:
    """
    Maximum-likelihood gaussian for the samples.

    Returns:
        A dictionary with Constant (normalization of a unit-area gaussian),
        Mean and Sigma.
    """
    samples = np.asarray(samples, dtype=np.float64)
    if samples.size < 2:
        raise ValueError("At least two samples are needed for a reference fit.")
    mean = float(np.mean(samples))
    sigma = float(np.std(samples))
    return {
        'Constant': 1.0 / (sigma * math.sqrt(2 * math.pi)),
        'Mean': mean,
        'Sigma': sigma,
    }


def reference_function(fit: Dict[str, float]) -> ParametricFunction:
    """Builds a gaussian ParametricFunction from reference_gaussian_fit() output."""
    return gaussian(fit['Constant'], fit['Mean'], fit['Sigma'])


def fill_figure_of_merit(figure_of_merit, df: pd.DataFrame) -> int:
    """
    Appends every dataset row to a chi-square figure of merit.

    Columns other than y and ey are treated as the coordinate vector, so
    multi-dimensional datasets (x0, x1, ...) are supported.

    Returns:
        The number of points added.
    """
    missing = {'y', 'ey'} - set(df.columns)
    if missing:
        raise ValueError(f"DataFrame is missing columns: {sorted(missing)}")

    x_columns = [c for c in df.columns if c not in ('y', 'ey')]
    if not x_columns:
        raise ValueError("DataFrame must contain at least one coordinate column.")

    for row in df.itertuples(index=False):
        row = row._asdict()
        figure_of_merit.add_data([row[c] for c in x_columns], row['y'], row['ey'])
    return len(df)


def load_dataset(file_path: str) -> pd.DataFrame:
    """Loads a dataset CSV with at least y and ey columns."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Dataset not found at {file_path}")
    df = pd.read_csv(file_path)
    df.dropna(how='all', inplace=True)
    for col in df.columns:
        df[col] = pd.to_numeric(df[col])
    return df


def save_dataset(df: pd.DataFrame, file_path: str):
    df.to_csv(file_path, index=False)
