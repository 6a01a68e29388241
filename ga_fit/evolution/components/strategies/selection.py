"""
選擇策略模組

排名偏置的拒絕抽樣：族群由最佳 (索引 0) 排到最差 (索引 N-1)，
被選中的機率隨排名近似線性遞減。
"""

from typing import Tuple
import logging

from .base import EvolutionStrategy
from ..random_stream import RandomStream

logger = logging.getLogger(__name__)


def select_rank_biased_pair(random: RandomStream, size: int) -> Tuple[int, int]:
    """
    選出兩個不同的父母索引

    每個父母先抽 f 再抽 p（皆在 [0, size) 均勻分布），p > f 時整對重抽。
    第二個父母另外要求 p2 != p1。抽樣順序必須固定，否則結果不可重現。

    Args:
        random: 族群的隨機數串流
        size: 族群大小，必須 >= 2，否則第二個父母永遠無法選出

    Returns:
        (p1, p2)
    """
    while True:
        f1 = random.uniform_int(size)
        p1 = random.uniform_int(size)
        if p1 <= f1:
            break
    while True:
        f2 = random.uniform_int(size)
        p2 = random.uniform_int(size)
        if p2 != p1 and p2 <= f2:
            break
    return p1, p2


class RankBiasedSelectionStrategy(EvolutionStrategy):
    """
    排名偏置選擇策略

    Population.select_parents() 的預設實現。
    """

    def __init__(self):
        super().__init__()
        self.name = "rank_biased"

    def select_pair(self, random: RandomStream, size: int) -> Tuple[int, int]:
        return select_rank_biased_pair(random, size)
