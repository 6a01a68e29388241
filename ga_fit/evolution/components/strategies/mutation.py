"""
變異策略模組

隨機挑選一個參數並加上高斯雜訊。變異後的值不會被截回界限內。
"""

import logging

from .base import EvolutionStrategy
from ..random_stream import RandomStream

logger = logging.getLogger(__name__)


def gaussian_gene_mutation(function, mutation_size: float, random: RandomStream) -> int:
    """
    對單一參數執行高斯變異

    雜訊標準差為 mutation_size * |value|，value 為 0 時為 mutation_size。
    固定參數 (min >= max) 被選中時不做任何事。

    Args:
        function: 個體自己擁有的 ParametricFunction
        mutation_size: 相對變異大小
        random: 族群的隨機數串流

    Returns:
        被選中的參數索引
    """
    p = random.uniform_int(function.parameter_count())
    pmin, pmax = function.get_bounds(p)
    if pmin < pmax:
        value = function.get_parameter(p)
        sigma = mutation_size if value == 0 else abs(value) * mutation_size
        value += random.gaussian(0.0, sigma)
        function.set_parameter(p, value)
        logger.debug(f"參數 {p} 變異為 {value:.6g}")
    return p


class GaussianMutationStrategy(EvolutionStrategy):
    """
    高斯變異策略
    """

    def __init__(self, mutation_size: float = 0.1):
        super().__init__()
        self.name = "gaussian"
        self.mutation_size = mutation_size

    def mutate(self, function, random: RandomStream) -> int:
        return gaussian_gene_mutation(function, self.mutation_size, random)
