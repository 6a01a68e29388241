"""
Visualization Utilities Module

Helper functions to plot the fitted function against the data, the score
history of an optimization run, and the parent-selection density.
"""
from typing import Optional, Sequence

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt


def _finish(fig, save_path: Optional[str]):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path)
        print(f"Plot saved to {save_path}")
        plt.close(fig)
    else:
        plt.show()


def plot_fit(df: pd.DataFrame, best_function, reference_function=None,
             generation: Optional[int] = None, save_path: Optional[str] = None):
    """
    Plots the dataset with error bars, the GA fit and an optional reference fit.

    Args:
        df: Dataset with x, y and ey columns.
        best_function: The best model's ParametricFunction.
        reference_function: Optional reference (e.g. likelihood) fit.
        generation: If provided, annotated on the plot.
        save_path: If provided, the plot is saved there instead of shown.
    """
    for col in ('x', 'y', 'ey'):
        if col not in df.columns:
            raise ValueError(f"DataFrame must contain a '{col}' column.")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.errorbar(df['x'], df['y'], yerr=df['ey'], fmt='o', color='black', markersize=3, label='Data')

    grid = np.linspace(df['x'].min(), df['x'].max(), 500)
    if reference_function is not None:
        ax.plot(grid, [reference_function([x]) for x in grid], color='blue', linestyle='--',
                label='Likelihood fit')
    ax.plot(grid, [best_function([x]) for x in grid], color='red', label='GA fit')

    if generation is not None:
        ax.text(0.05, 0.9, f'Generation: {generation}', transform=ax.transAxes)
    ax.set_xlabel('x', fontsize=12)
    ax.set_ylabel('Probability density', fontsize=12)
    ax.legend()
    ax.grid(True, alpha=0.3, linestyle='--')

    _finish(fig, save_path)


def plot_score_history(history: pd.DataFrame, save_path: Optional[str] = None):
    """
    Plots the best score and the relative score RMS per generation (log-log).

    Args:
        history: DataFrame indexed by generation with best and rms columns,
                 as returned by OptimizationResult.to_dataframe().
    """
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    generations = history.index.to_numpy() + 1

    axes[0].plot(generations, history['best'], color='blue', linewidth=2)
    axes[0].set_ylabel('Best score')

    relative_rms = history['rms'] / history['best'].replace(0, np.nan)
    axes[1].plot(generations, relative_rms, color='blue', linewidth=2)
    axes[1].set_ylabel('Score RMS / best score')

    for ax in axes:
        ax.set_xscale('log')
        ax.set_yscale('log')
        ax.set_xlabel('Generation + 1')
        ax.grid(True, alpha=0.3, linestyle='--')

    _finish(fig, save_path)


def plot_selection_density(indices: Sequence[int], population_size: int, n_bins: int = 100,
                           save_path: Optional[str] = None):
    """
    Plots the measured selection probability density over rank with a linear fit.

    Returns:
        (slope, intercept) of the linear fit.
    """
    density, centers = selection_density(indices, population_size, n_bins)
    slope, intercept = np.polyfit(centers, density, 1)

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(centers, density, 'o', color='black', markersize=3, label='Measured PDF')
    ax.plot(centers, slope * centers + intercept, color='red',
            label=f'Linear fit: y = {slope:.2g} x + {intercept:.2g}')
    ax.set_xlabel('Rank', fontsize=12)
    ax.set_ylabel('Probability density', fontsize=12)
    ax.legend()
    ax.grid(True)

    _finish(fig, save_path)
    return slope, intercept


def selection_density(indices: Sequence[int], population_size: int, n_bins: int = 100):
    """
    Histograms selected indices into a probability density over rank.

    Returns:
        (density, bin_centers)
    """
    indices = np.asarray(indices)
    counts, edges = np.histogram(indices, bins=n_bins, range=(0, population_size))
    density = counts / (len(indices) * population_size / n_bins)
    centers = 0.5 * (edges[:-1] + edges[1:])
    return density, centers
