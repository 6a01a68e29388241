"""
Utility Functions
"""
from .visualization import plot_fit, plot_score_history, plot_selection_density, selection_density

__all__ = [
    'plot_fit',
    'plot_score_history',
    'plot_selection_density',
    'selection_density'
]
