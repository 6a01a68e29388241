"""
GA Fit: a pluggable genetic algorithm for fitting bounded-parameter functions
to weighted data.
"""

__version__ = "0.1.0"
