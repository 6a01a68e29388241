"""
族群基類

實現通用的評分、排名與排名偏置的父母選擇，並將領域相關的
初始化、交配與變異委派給子類別的掛鉤方法。
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
import logging
import math

from .individual import Model
from .exceptions import ConfigurationError, RankOutOfRangeError, ValidationError
from .random_stream import RandomStream, DEFAULT_SEED
from .strategies.selection import RankBiasedSelectionStrategy

logger = logging.getLogger(__name__)

DEFAULT_MUTATE_RATE = 0.01


class Population(ABC):
    """
    族群基類

    子類至少必須實現：
    - do_initialize(n): 建立 n 個個體
    - do_cross_over(parents): 依每個位置的父母群組覆寫個體基因
    - do_mutate(model): 變異單一個體

    另外可以覆寫 select_parents() 以改變預設的選擇行為。
    族群獨占擁有其個體；適應度評估器只是借用的引用。
    """

    def __init__(self, seed: int = DEFAULT_SEED, mutate_rate: float = DEFAULT_MUTATE_RATE):
        self.individuals: List[Model] = []
        self.random = RandomStream(seed)
        self.figure_of_merit = None
        self.selection = RankBiasedSelectionStrategy()
        self.sorted = False
        self.score_mean = 0.0
        self.score_rms = 0.0
        self.parents: List[List[Model]] = []
        self.parent_indices: List[Tuple[int, ...]] = []
        self.set_mutate_rate(mutate_rate)

    # ------------------------------------------------------------------
    # 子類掛鉤
    # ------------------------------------------------------------------

    @abstractmethod
    def do_initialize(self, n: int):
        """實際的初始化，必須產生恰好 n 個個體"""
        pass

    @abstractmethod
    def do_cross_over(self, parents: List[List[Model]]):
        """實際的交配，parents[i] 為位置 i 的父母群組 (1 或 2 個)"""
        pass

    @abstractmethod
    def do_mutate(self, model: Model):
        """實際的單一個體變異"""
        pass

    # ------------------------------------------------------------------
    # 演化操作
    # ------------------------------------------------------------------

    def initialize(self, n: int):
        """
        初始化指定大小的族群

        Args:
            n: 族群大小，由 do_initialize() 負責驗證
        """
        self.do_initialize(n)
        self.sorted = False
        logger.debug(f"族群初始化完成: {self.size()} 個個體")

    def cross_over(self):
        """
        執行族群交配

        位置 0 保留目前最佳個體（菁英，不做基因混合），
        其他位置各自透過 select_parents() 選出兩個父母。
        """
        self.sort()

        self.parents = []
        self.parent_indices = []
        for i in range(self.size()):
            if i == 0:
                self.parents.append([self.individuals[0]])
                self.parent_indices.append((0,))
            else:
                p1, p2 = self.select_parents()
                self.parents.append([self.individuals[p1], self.individuals[p2]])
                self.parent_indices.append((p1, p2))

        # 掛鉤可能中途失敗；族群此時仍標記為未排序
        self.sorted = False
        self.do_cross_over(self.parents)

    def mutate(self):
        """
        依變異率對每個個體執行變異

        菁英個體也在其中，不享有豁免。
        """
        self.sorted = False
        for model in self.individuals:
            if self.random.uniform_real(0.0, 1.0) < self.mutate_rate:
                self.do_mutate(model)

    def score(self):
        """
        計算所有個體的分數

        同時計算分數的平均值與 RMS，最後重新排名。
        """
        self.check_figure_of_merit()

        if not self.size():
            return

        self.sorted = False
        total = 0.0
        total_sq = 0.0
        for model in self.individuals:
            value = self.figure_of_merit.evaluate(model)
            model.set_score(value)
            total += value
            total_sq += value * value

        n = self.size()
        self.score_mean = total / n
        variance = total_sq / n - self.score_mean * self.score_mean
        # 浮點誤差可能讓變異數略小於 0
        if variance < 0:
            variance = 0.0
        self.score_rms = math.sqrt(variance)

        self.sort()

    def sort(self):
        """
        由最佳到最差排名

        穩定的相鄰交換排序，每一輪縮短未排序的尾段，沒有交換即結束。
        已排序時為 O(N)。
        """
        if self.sorted:
            return

        self.check_figure_of_merit()

        self.sorted = True

        if self.size() <= 1:
            return

        individuals = self.individuals
        n = len(individuals)
        while n > 0:
            new_n = 0
            for i in range(1, n):
                if self.figure_of_merit.is_better_than(individuals[i], individuals[i - 1]):
                    individuals[i], individuals[i - 1] = individuals[i - 1], individuals[i]
                    new_n = i
            n = new_n

    def select_parents(self) -> Tuple[int, int]:
        """
        選出兩個不同的父母索引

        Returns:
            (p1, p2)
        """
        return self.selection.select_pair(self.random, self.size())

    # ------------------------------------------------------------------
    # 存取方法
    # ------------------------------------------------------------------

    def get_best_fitted(self, rank: int = 0) -> Model:
        """
        取得指定排名的個體

        Args:
            rank: 排名，0 為最佳

        Raises:
            RankOutOfRangeError: rank 不在 [0, size()) 之內
        """
        if rank < 0 or rank >= self.size():
            raise RankOutOfRangeError(f"Rank ({rank}) is out of range [0, {self.size()}[")

        self.sort()

        return self.individuals[rank]

    def size(self) -> int:
        return len(self.individuals)

    def __len__(self) -> int:
        return len(self.individuals)

    def get_score_mean(self) -> float:
        return self.score_mean

    def get_score_rms(self) -> float:
        return self.score_rms

    def clear(self):
        """釋放所有個體"""
        self.individuals.clear()
        self.parents = []
        self.parent_indices = []
        self.sorted = False

    def set_random_seed(self, seed: int):
        self.random.set_seed(seed)

    def set_mutate_rate(self, rate: float):
        """
        設置變異率

        Raises:
            ValidationError: rate 不在 [0, 1] 之內
        """
        if not 0 <= rate <= 1:
            raise ValidationError(f"Specified rate ({rate}) is out of range [0,1]")
        self.mutate_rate = rate

    def get_mutate_rate(self) -> float:
        return self.mutate_rate

    def set_figure_of_merit(self, figure_of_merit):
        """設置用於評分與排名的適應度評估器（不擁有）"""
        self.figure_of_merit = figure_of_merit
        self.sorted = False

    def get_figure_of_merit(self):
        return self.figure_of_merit

    def check_figure_of_merit(self):
        """確認已經指定適應度評估器"""
        if self.figure_of_merit is None:
            raise ConfigurationError("Figure of merit not assigned for this population.")

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(size={self.size()}, mutate_rate={self.mutate_rate}, "
                f"score_mean={self.score_mean:.6g}, score_rms={self.score_rms:.6g})")
