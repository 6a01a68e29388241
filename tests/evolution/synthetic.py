"""
Synthetic models, figures of merit and populations shared by the evolution tests.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from ga_fit.evolution.components.individual import Model
from ga_fit.evolution.components.population import Population
from ga_fit.evolution.components.evaluators.base import FigureOfMerit
from ga_fit.evolution.components.exceptions import ConfigurationError
from ga_fit.evolution.components.random_stream import RandomStream


class IndexedModel(Model):
    """A model whose only gene is the index it was created with."""

    def __init__(self, index):
        super().__init__()
        self.index = index


class IndexFigureOfMerit(FigureOfMerit):
    """score = index, higher is better."""

    def evaluate(self, model):
        return float(model.index)


class HalfIndexFigureOfMerit(FigureOfMerit):
    """score = index // 2, so neighbours tie."""

    def evaluate(self, model):
        return float(model.index // 2)


class IndexedPopulation(Population):
    """Crossover copies the first parent's index; mutation is only recorded."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.mutated = []

    def do_initialize(self, n):
        if n < 0:
            raise ConfigurationError(f"Population size ({n}) must be >= 0")
        self.clear()
        self.individuals.extend(IndexedModel(i) for i in range(n))

    def do_cross_over(self, parents):
        genes = [group[0].index for group in parents]
        for model, gene in zip(self.individuals, genes):
            model.index = gene

    def do_mutate(self, model):
        self.mutated.append(model)


class RecordingStream(RandomStream):
    """RandomStream that logs every draw as (kind, argument)."""

    def __init__(self, seed=1234):
        super().__init__(seed)
        self.calls = []

    def uniform_int(self, n):
        self.calls.append(('int', n))
        return super().uniform_int(n)

    def uniform_real(self, low=0.0, high=1.0):
        self.calls.append(('real', (low, high)))
        return super().uniform_real(low, high)

    def gaussian(self, mean=0.0, std=1.0):
        self.calls.append(('gauss', std))
        return super().gaussian(mean, std)


def make_indexed_population(n=4, mutate_rate=0.0, fom=None, seed=1234):
    population = IndexedPopulation(seed=seed, mutate_rate=mutate_rate)
    population.set_figure_of_merit(fom if fom is not None else IndexFigureOfMerit())
    population.initialize(n)
    return population
