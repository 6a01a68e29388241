"""
Unit tests for the configuration factory
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ga_fit.evolution import create_genetic_algorithm
from ga_fit.evolution.components import (
    DEFAULT_CONFIG, merge_config, GeneticAlgorithm, ParametricPopulation,
    Chi2FitFigureOfMerit, ValidationError
)


def minimal_config(**overrides):
    config = {'evolution': {'population_size': 20, 'generations': 50},
              'fitness': {'evaluator': 'chi2', 'accept_threshold': 0.5}}
    config.update(overrides)
    return config


class TestMergeConfig:
    """預設值合併"""

    def test_fills_missing_sections(self):
        merged = merge_config({'evolution': {'population_size': 10}})
        assert merged['evolution'] == {'population_size': 10, 'generations': 10000}
        assert merged['population'] == DEFAULT_CONFIG['population']

    def test_does_not_mutate_defaults(self):
        merged = merge_config({})
        merged['population']['seed'] = 1
        assert DEFAULT_CONFIG['population']['seed'] == 1234

    def test_keeps_unknown_sections(self):
        merged = merge_config({'experiment': {'name': 'x'}})
        assert merged['experiment'] == {'name': 'x'}


class TestCreateGeneticAlgorithm:
    """工廠函數"""

    def test_creates_components(self):
        algorithm, population, fom = create_genetic_algorithm(minimal_config())

        assert isinstance(algorithm, GeneticAlgorithm)
        assert isinstance(population, ParametricPopulation)
        assert isinstance(fom, Chi2FitFigureOfMerit)
        assert algorithm.population_size == 20
        assert algorithm.generations_max == 50
        assert fom.get_accept_threshold() == 0.5
        assert population.get_figure_of_merit() is fom
        assert population.get_mutate_rate() == 0.01
        assert population.get_function().get_bounds(0) == (0.001, 1.0)

    @pytest.mark.parametrize("section", ['evolution', 'fitness'])
    def test_missing_section(self, section):
        config = minimal_config()
        del config[section]
        with pytest.raises(ValueError, match="缺少必要部分"):
            create_genetic_algorithm(config)

    def test_unknown_evaluator(self):
        config = minimal_config(fitness={'evaluator': 'sharpe'})
        with pytest.raises(ValueError, match="不支持的評估器類型"):
            create_genetic_algorithm(config)

    def test_unknown_function(self):
        config = minimal_config(model={'function': 'spline'})
        with pytest.raises(ValueError, match="不支持的函數"):
            create_genetic_algorithm(config)

    def test_polynomial_model(self):
        config = minimal_config(model={'function': 'polynomial', 'degree': 2,
                                       'parameters': [1.0, 0.0, 0.0],
                                       'limits': [[0, 2], [-1, 1], [-1, 1]]})
        _, population, _ = create_genetic_algorithm(config)

        function = population.get_function()
        assert function.parameter_count() == 3
        assert function.get_parameters().tolist() == [1.0, 0.0, 0.0]
        assert function.get_bounds(2) == (-1.0, 1.0)

    def test_polynomial_without_limits_is_fixed(self):
        _, population, _ = create_genetic_algorithm(minimal_config(model={'function': 'polynomial'}))
        assert population.get_function().get_bounds(0) == (0.0, 0.0)

    def test_limits_count_mismatch(self):
        config = minimal_config(model={'function': 'gaussian', 'limits': [[0, 1]]})
        with pytest.raises(ValueError, match="limits"):
            create_genetic_algorithm(config)

    def test_invalid_mutate_rate(self):
        config = minimal_config(population={'mutate_rate': 2.0})
        with pytest.raises(ValidationError):
            create_genetic_algorithm(config)

    def test_end_to_end_with_data(self):
        from ga_fit.data import generate_gaussian_histogram, fill_figure_of_merit

        config = minimal_config(fitness={'evaluator': 'chi2', 'accept_threshold': 0.0})
        algorithm, population, fom = create_genetic_algorithm(config)
        fill_figure_of_merit(fom, generate_gaussian_histogram(n_samples=2000))

        best = algorithm.optimize(population)
        result = algorithm.get_result(config)

        assert result.generations_completed == 51
        assert best.get_score() == result.best_score
        assert len(result.history) == 52
        assert not result.accepted
