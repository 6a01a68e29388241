"""
Evolution module: genetic algorithm components and early stopping.
"""
from .components import (
    GeneticAlgorithm, ParametricPopulation, Chi2FitFigureOfMerit, create_genetic_algorithm
)
from .early_stopping import EarlyStopping

__all__ = ['GeneticAlgorithm', 'ParametricPopulation', 'Chi2FitFigureOfMerit',
           'create_genetic_algorithm', 'EarlyStopping']
