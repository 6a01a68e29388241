"""
演化策略模組

包含基因層級的演化策略：
- 初始化策略
- 選擇策略
- 交配策略
- 變異策略
"""

from .base import EvolutionStrategy
from .initialization import UniformRangeInitializationStrategy, randomize_parameters
from .selection import RankBiasedSelectionStrategy, select_rank_biased_pair
from .crossover import UniformCrossoverStrategy, uniform_gene_crossover
from .mutation import GaussianMutationStrategy, gaussian_gene_mutation

__all__ = [
    'EvolutionStrategy',
    # 初始化策略
    'UniformRangeInitializationStrategy', 'randomize_parameters',
    # 選擇策略
    'RankBiasedSelectionStrategy', 'select_rank_biased_pair',
    # 交配策略
    'UniformCrossoverStrategy', 'uniform_gene_crossover',
    # 變異策略
    'GaussianMutationStrategy', 'gaussian_gene_mutation',
]
