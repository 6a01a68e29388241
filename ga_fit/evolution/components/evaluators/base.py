"""
適應度評估器基類

定義評分、接受門檻與比較策略的統一接口。
"""

from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class FigureOfMerit(ABC):
    """
    適應度評估器基類

    子類至少必須實現 evaluate()。預設策略：分數越高越好，
    分數優於 accept_threshold 即可作為最終答案。

    - 只改變分數處理方式（例如分數越低越好）時，覆寫
      accept_score() 與 / 或 is_better_score()。
    - 決策不僅依賴分數時，覆寫 accept() 與 is_better_than()，
      此時 evaluate() 可以只回傳一個佔位值。
    """

    def __init__(self, accept_threshold: float = 0.0):
        self.name = "base_figure_of_merit"
        self.accept_threshold = accept_threshold

    @abstractmethod
    def evaluate(self, model) -> float:
        """
        評估單個個體的適應度

        Args:
            model: 要評估的個體

        Returns:
            適應度值
        """
        pass

    def accept_score(self, score: float) -> bool:
        """分數是否可作為最終答案"""
        return self.is_better_score(score, self.accept_threshold)

    def accept(self, model) -> bool:
        """個體是否可作為最終答案"""
        return self.accept_score(model.get_score())

    def is_better_score(self, score_to_test: float, reference_score: float) -> bool:
        """預設：分數越高越好"""
        return score_to_test > reference_score

    def is_better_than(self, model_to_test, reference_model) -> bool:
        return self.is_better_score(model_to_test.get_score(), reference_model.get_score())

    def set_accept_threshold(self, threshold: float):
        self.accept_threshold = threshold

    def get_accept_threshold(self) -> float:
        return self.accept_threshold

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(accept_threshold={self.accept_threshold})"
