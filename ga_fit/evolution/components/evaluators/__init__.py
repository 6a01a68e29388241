"""適應度評估器模組"""

from .base import FigureOfMerit
from .chi2_evaluator import Chi2FitFigureOfMerit

__all__ = ['FigureOfMerit', 'Chi2FitFigureOfMerit']
