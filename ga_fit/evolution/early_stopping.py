"""
Early Stopping for GA Optimization

提供早停機制，當連續 N 代最佳分數無進步時終止優化。
"""

from typing import Callable, Optional, Dict, Any
import operator


class EarlyStopping:
    """
    早停機制類

    當連續 N 個 generation 的最佳分數沒有顯著改進時，提前終止優化。
    「改進」由比較函數決定，與適應度評估器的 is_better_score 相容。

    Example:
        >>> early_stopping = EarlyStopping(patience=10, min_delta=0.001, is_better=operator.lt)
        >>> while algorithm.next_generation():
        ...     best = population.get_best_fitted().get_score()
        ...     if early_stopping.step(best):
        ...         break
    """

    def __init__(self, patience: int = 10, min_delta: float = 0.0,
                 is_better: Callable[[float, float], bool] = operator.gt):
        """
        初始化早停機制

        Args:
            patience: 連續無進步的 generation 數量。達到此數量時觸發早停。
            min_delta: 最小改進閾值。只有當改進大於此值時才被視為有進步。
            is_better: is_better(a, b) 為 True 表示 a 優於 b，預設越大越好

        Raises:
            ValueError: 如果 patience < 1 或 min_delta < 0
        """
        if patience < 1:
            raise ValueError(f"patience must be >= 1, got {patience}")

        if min_delta < 0:
            raise ValueError(f"min_delta must be >= 0, got {min_delta}")

        self.patience = patience
        self.min_delta = min_delta
        self.is_better = is_better

        # 內部狀態
        self.counter = 0
        self.best_score: Optional[float] = None
        self.should_stop = False
        self.generation = 0

    def step(self, current_score: float) -> bool:
        """
        檢查是否應該停止優化

        Args:
            current_score: 當前 generation 的最佳分數

        Returns:
            bool: True 表示應該停止，False 表示繼續
        """
        self.generation += 1

        if self.best_score is None:
            self.best_score = current_score
            return False

        improved = (self.is_better(current_score, self.best_score)
                    and abs(current_score - self.best_score) > self.min_delta)

        if improved:
            self.best_score = current_score
            self.counter = 0
        else:
            self.counter += 1

        if self.counter >= self.patience:
            self.should_stop = True
            return True

        return False

    def get_status(self) -> Dict[str, Any]:
        """
        返回當前早停狀態
        """
        return {
            'counter': self.counter,
            'best_score': self.best_score,
            'should_stop': self.should_stop,
            'generation': self.generation,
            'patience': self.patience,
            'min_delta': self.min_delta
        }

    def reset(self):
        """重置早停狀態"""
        self.counter = 0
        self.best_score = None
        self.should_stop = False
        self.generation = 0

    def __repr__(self) -> str:
        return (f"EarlyStopping(patience={self.patience}, min_delta={self.min_delta}, "
                f"counter={self.counter}, generation={self.generation})")
