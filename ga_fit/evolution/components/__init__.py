"""
組件化遺傳演算法框架

將個體、適應度評估器、族群與優化循環抽象成可插拔的組件。
"""

import copy
import logging
from typing import Any, Dict, Tuple

from .engine import GeneticAlgorithm, LoopState
from .individual import Model, ParametricModel
from .population import Population
from .parametric_population import ParametricPopulation
from .result import OptimizationResult
from .random_stream import RandomStream
from .evaluators import FigureOfMerit, Chi2FitFigureOfMerit
from .exceptions import (
    GeneticAlgorithmError, ModelTypeError, RankOutOfRangeError,
    ConfigurationError, ValidationError
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    'evolution': {
        'population_size': 500,
        'generations': 10000,
    },
    'population': {
        'mutate_rate': 0.01,
        'mutation_size': 0.1,
        'seed': 1234,
    },
    'fitness': {
        'evaluator': 'chi2',
        'accept_threshold': 0.85,
    },
    'model': {
        'function': 'gaussian',
        'degree': 1,
        'parameters': None,
        'limits': None,
    },
    'data': {
        'n_samples': 10000,
        'mean': 1.5,
        'sigma': 2.3,
        'n_bins': 100,
    },
}

# gaussian 未指定 limits 時使用 (Constant, Mean, Sigma)
DEFAULT_GAUSSIAN_LIMITS = [[0.001, 1.0], [-10.0, 10.0], [0.001, 10.0]]

EVALUATOR_MAPPINGS = {
    'chi2': Chi2FitFigureOfMerit,
}


def merge_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """以 DEFAULT_CONFIG 補齊缺少的設定值"""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in config.items():
        if isinstance(values, dict) and section in merged:
            merged[section].update(values)
        else:
            merged[section] = copy.deepcopy(values)
    return merged


def _create_evaluator(config: dict) -> FigureOfMerit:
    """
    根據配置創建適應度評估器

    Raises:
        ValueError: 評估器名稱不存在
    """
    fitness_config = config['fitness']
    evaluator_type = fitness_config['evaluator']
    if evaluator_type not in EVALUATOR_MAPPINGS:
        available = list(EVALUATOR_MAPPINGS.keys())
        raise ValueError(f"不支持的評估器類型: {evaluator_type}。可用評估器: {available}")

    evaluator = EVALUATOR_MAPPINGS[evaluator_type]()
    evaluator.set_accept_threshold(fitness_config['accept_threshold'])
    return evaluator


def _create_function(config: dict):
    """
    根據配置創建參數函數模板

    Raises:
        ValueError: 函數名稱不存在或界限數量不符
    """
    from ...functions import FUNCTION_FACTORIES

    model_config = config['model']
    function_name = model_config['function']
    if function_name not in FUNCTION_FACTORIES:
        available = list(FUNCTION_FACTORIES.keys())
        raise ValueError(f"不支持的函數: {function_name}。可用函數: {available}")

    if function_name == 'polynomial':
        function = FUNCTION_FACTORIES[function_name](int(model_config.get('degree', 1)))
    else:
        function = FUNCTION_FACTORIES[function_name]()

    if model_config.get('parameters') is not None:
        function.set_parameters(model_config['parameters'])

    limits = model_config.get('limits')
    if limits is None:
        limits = DEFAULT_GAUSSIAN_LIMITS if function_name == 'gaussian' else []
    if limits and len(limits) != function.parameter_count():
        raise ValueError(f"limits 數量 ({len(limits)}) 與參數數量 ({function.parameter_count()}) 不符")
    for i, (pmin, pmax) in enumerate(limits):
        function.set_bounds(i, pmin, pmax)

    return function


def create_genetic_algorithm(config: dict) -> Tuple[GeneticAlgorithm, ParametricPopulation, FigureOfMerit]:
    """
    工廠函數：根據配置創建遺傳演算法

    建立評估器、參數族群與優化循環。資料點需由呼叫者另外加入評估器。

    Args:
        config: 配置字典，缺少的值以 DEFAULT_CONFIG 補齊

    Returns:
        (algorithm, population, figure_of_merit)

    Raises:
        ValueError: 配置缺少必要部分或名稱無效
        ValidationError: 數值超出範圍
    """
    required_sections = ['evolution', 'fitness']
    for section in required_sections:
        if section not in config:
            raise ValueError(f"配置文件缺少必要部分: {section}")

    config = merge_config(config)
    logger.debug("配置驗證通過")

    evaluator = _create_evaluator(config)
    function = _create_function(config)

    population_config = config['population']
    population = ParametricPopulation(function,
                                      mutation_size=population_config['mutation_size'],
                                      seed=population_config['seed'],
                                      mutate_rate=population_config['mutate_rate'])
    population.set_figure_of_merit(evaluator)

    evolution_config = config['evolution']
    algorithm = GeneticAlgorithm(generations_max=evolution_config['generations'],
                                 population_size=evolution_config['population_size'])

    logger.info(f"遺傳演算法創建完成: 族群={algorithm.population_size}, "
                f"世代={algorithm.generations_max}, 評估器={config['fitness']['evaluator']}")
    return algorithm, population, evaluator


__all__ = [
    'GeneticAlgorithm', 'LoopState', 'Model', 'ParametricModel', 'Population',
    'ParametricPopulation', 'OptimizationResult', 'RandomStream',
    'FigureOfMerit', 'Chi2FitFigureOfMerit',
    'GeneticAlgorithmError', 'ModelTypeError', 'RankOutOfRangeError',
    'ConfigurationError', 'ValidationError',
    'DEFAULT_CONFIG', 'DEFAULT_GAUSSIAN_LIMITS', 'merge_config', 'create_genetic_algorithm',
]
