"""
Dataset generation and loading
"""
from .generator import (
    sample_gaussian,
    histogram_density,
    generate_gaussian_histogram,
    reference_gaussian_fit,
    reference_function,
    fill_figure_of_merit,
    load_dataset,
    save_dataset
)

__all__ = [
    'sample_gaussian',
    'histogram_density',
    'generate_gaussian_histogram',
    'reference_gaussian_fit',
    'reference_function',
    'fill_figure_of_merit',
    'load_dataset',
    'save_dataset'
]
