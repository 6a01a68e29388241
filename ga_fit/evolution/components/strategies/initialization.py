"""
初始化策略模組

參數在允許範圍內均勻初始化；min >= max 的參數視為固定。
"""

import logging

from .base import EvolutionStrategy
from ..random_stream import RandomStream

logger = logging.getLogger(__name__)


def randomize_parameters(function, random: RandomStream):
    """
    依照界限隨機設定函數參數

    Args:
        function: 個體自己擁有的 ParametricFunction
        random: 族群的隨機數串流
    """
    for p in range(function.parameter_count()):
        pmin, pmax = function.get_bounds(p)
        if pmin < pmax:
            function.set_parameter(p, random.uniform_real(pmin, pmax))


class UniformRangeInitializationStrategy(EvolutionStrategy):
    """
    均勻範圍初始化策略
    """

    def __init__(self):
        super().__init__()
        self.name = "uniform_range"

    def initialize(self, function, random: RandomStream):
        randomize_parameters(function, random)
