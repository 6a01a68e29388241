"""
隨機數串流

族群擁有的單一可重現隨機數來源。所有抽樣（選擇、變異判定、
領域掛鉤）都依固定順序從同一串流取值。
"""

import numpy as np

DEFAULT_SEED = 1234


class RandomStream:
    """
    封裝 numpy 的 Mersenne Twister 產生器

    同一種子與同一呼叫序列必定產生相同結果。
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = seed
        self._generator = np.random.Generator(np.random.MT19937(seed))

    def set_seed(self, seed: int):
        """重設種子並重建產生器"""
        self.seed = seed
        self._generator = np.random.Generator(np.random.MT19937(seed))

    def uniform_int(self, n: int) -> int:
        """回傳 [0, n) 之間的整數"""
        return int(self._generator.integers(n))

    def uniform_real(self, low: float = 0.0, high: float = 1.0) -> float:
        """回傳 [low, high) 之間的浮點數"""
        return float(self._generator.uniform(low, high))

    def gaussian(self, mean: float = 0.0, std: float = 1.0) -> float:
        return float(self._generator.normal(mean, std))

    def __repr__(self) -> str:
        return f"RandomStream(seed={self.seed})"
