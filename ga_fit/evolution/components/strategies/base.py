"""
演化策略基類

策略是無狀態的基因層級運算，所有隨機數都由呼叫者傳入的
RandomStream 提供，以保持抽樣順序可重現。
"""

from abc import ABC
import logging

logger = logging.getLogger(__name__)


class EvolutionStrategy(ABC):
    """
    演化策略基類
    """

    def __init__(self):
        self.name = "base_strategy"
