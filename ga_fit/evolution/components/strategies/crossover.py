"""
交配策略模組

每個基因各自擲一次公平硬幣決定來自哪個父母（不是單一交配點）。
"""

from typing import List, Sequence
import logging

from .base import EvolutionStrategy
from ..random_stream import RandomStream

logger = logging.getLogger(__name__)


def uniform_gene_crossover(genes1: Sequence[float], genes2: Sequence[float],
                           random: RandomStream) -> List[float]:
    """
    基因層級均勻交配

    Args:
        genes1: 父母 1 的參數向量
        genes2: 父母 2 的參數向量
        random: 族群的隨機數串流

    Returns:
        子代的參數向量
    """
    offspring = []
    for p in range(len(genes1)):
        if random.uniform_int(2):
            offspring.append(float(genes1[p]))
        else:
            offspring.append(float(genes2[p]))
    return offspring


class UniformCrossoverStrategy(EvolutionStrategy):
    """
    均勻交配策略
    """

    def __init__(self):
        super().__init__()
        self.name = "uniform"

    def cross(self, genes1, genes2, random: RandomStream) -> List[float]:
        return uniform_gene_crossover(genes1, genes2, random)
