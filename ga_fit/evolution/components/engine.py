"""
遺傳演算法核心類

在 Model、FigureOfMerit 與 Population 接口之上實現優化循環：

- 建立初始族群並排名。
- 重複以下步驟，直到找到可接受的解或超過最大世代數：
  - 交配（包含父母選擇與菁英保留）
  - 變異
  - 重新評分與排名
"""

from enum import Enum
from typing import Any, Dict, List, Optional
import logging

from deap import tools

from .exceptions import ConfigurationError, ValidationError
from .handlers.base import EventHandler
from .result import OptimizationResult

logger = logging.getLogger(__name__)

DEFAULT_GENERATIONS_MAX = 10000
DEFAULT_POPULATION_SIZE = 100


class LoopState(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    TERMINATED = "terminated"


class GeneticAlgorithm:
    """
    遺傳演算法

    不需要繼承此類。使用者可以直接呼叫 optimize()，或自行呼叫
    initialize() 與 next_generation() 以在世代之間觀察狀態。
    """

    def __init__(self, generations_max: int = DEFAULT_GENERATIONS_MAX,
                 population_size: int = DEFAULT_POPULATION_SIZE):
        self.set_generations_max(generations_max)
        self.set_population_size(population_size)

        # 優化狀態
        self.current_generation = 0
        self.population = None
        self.state = LoopState.UNINITIALIZED
        self.should_stop = False
        self.handlers: List[EventHandler] = []
        self.logbook = self._new_logbook()

    @staticmethod
    def _new_logbook() -> tools.Logbook:
        logbook = tools.Logbook()
        logbook.header = ['gen', 'best', 'mean', 'rms', 'size']
        return logbook

    def set_generations_max(self, generations_max: int):
        """設置放棄前的最大世代數"""
        if generations_max < 0:
            raise ValidationError(f"generations_max must be >= 0, got {generations_max}")
        self.generations_max = generations_max

    def set_population_size(self, population_size: int):
        if population_size < 0:
            raise ValidationError(f"population_size must be >= 0, got {population_size}")
        self.population_size = population_size

    def add_handler(self, handler: EventHandler):
        """
        添加事件處理器

        Args:
            handler: 處理器實例
        """
        if not isinstance(handler, EventHandler):
            raise TypeError(f"處理器必須繼承自 EventHandler: {type(handler)}")

        self.handlers.append(handler)
        handler.set_engine(self)
        logger.debug(f"已添加事件處理器: {handler.__class__.__name__}")

    def _fire_event(self, event_name: str, **kwargs):
        """
        觸發事件，通知所有處理器

        處理器的錯誤只記錄，不中斷優化。
        """
        for handler in self.handlers:
            try:
                if hasattr(handler, f'on_{event_name}'):
                    getattr(handler, f'on_{event_name}')(**kwargs)
            except Exception as e:
                logger.error(f"事件處理器 {handler.__class__.__name__} 處理 {event_name} 事件時出錯: {e}")

    def optimize(self, population):
        """
        尋找族群中的最佳解

        Args:
            population: 要優化的族群

        Returns:
            優化後排名第一的個體
        """
        self.initialize(population)

        while self.next_generation():
            pass

        return population.get_best_fitted()

    def initialize(self, population):
        """
        在優化循環開始前初始化

        Args:
            population: 要優化的族群
        """
        population.initialize(self.population_size)
        population.score()

        self.current_generation = 0
        self.population = population
        self.state = LoopState.RUNNING
        self.should_stop = False
        self.logbook = self._new_logbook()

        logger.info(f"🌱 初始族群建立完成: {population.size()} 個個體, "
                    f"最大世代數={self.generations_max}")

        self._fire_event('evolution_start', engine=self, population=population)
        self._record_generation()

    def next_generation(self) -> bool:
        """
        執行一次優化迭代，產生下一代

        Returns:
            True 表示需要更多世代，False 表示已經結束
        """
        if self.state is LoopState.UNINITIALIZED:
            raise ConfigurationError("Genetic algorithm not initialized: call initialize() first.")
        if self.state is LoopState.TERMINATED:
            return False

        best = self.population.get_best_fitted()
        if self.population.get_figure_of_merit().accept(best):
            self._terminate(accepted=True)
            return False

        if self.current_generation > self.generations_max or self.should_stop:
            self._terminate(accepted=False)
            return False

        self.current_generation += 1

        self.population.cross_over()
        self.population.mutate()
        self.population.score()

        self._record_generation()
        return True

    def _terminate(self, accepted: bool):
        self.state = LoopState.TERMINATED
        best = self.population.get_best_fitted()
        logger.info(f"⏹️ 優化於第 {self.current_generation} 世代結束, "
                    f"最佳分數={best.get_score():.6g}, 接受={accepted}")
        self._fire_event('evolution_complete', engine=self, generation=self.current_generation,
                         best_model=best, accepted=accepted)

    def _record_generation(self):
        """記錄世代統計並通知處理器"""
        population = self.population
        best = population.get_best_fitted() if population.size() else None
        best_score = best.get_score() if best is not None else float('nan')
        self.logbook.record(gen=self.current_generation,
                            best=best_score,
                            mean=population.get_score_mean(),
                            rms=population.get_score_rms(),
                            size=population.size())
        logger.debug(f"第 {self.current_generation} 世代: 最佳={best_score:.6g}, "
                     f"平均={population.get_score_mean():.6g}, RMS={population.get_score_rms():.6g}")

        if best is not None:
            self._fire_event('generation_complete', engine=self, generation=self.current_generation,
                             population=population, best_model=best)

    def stop(self):
        """要求在下一次 next_generation() 時結束"""
        self.should_stop = True
        logger.info("收到停止信號")

    def get_current_generation(self) -> int:
        return self.current_generation

    def get_population(self):
        return self.population

    def get_state(self) -> LoopState:
        return self.state

    def get_logbook(self) -> tools.Logbook:
        return self.logbook

    def get_result(self, config: Optional[Dict[str, Any]] = None) -> OptimizationResult:
        """
        創建優化結果

        Raises:
            ConfigurationError: 尚未初始化
        """
        if self.population is None:
            raise ConfigurationError("Genetic algorithm not initialized: call initialize() first.")

        best = self.population.get_best_fitted() if self.population.size() else None
        accepted = best is not None and self.population.get_figure_of_merit().accept(best)
        return OptimizationResult(
            best_model=best,
            accepted=accepted,
            generations_completed=self.current_generation,
            history=[dict(record) for record in self.logbook],
            config=config
        )

    def get_status(self) -> Dict[str, Any]:
        """獲取引擎狀態"""
        return {
            'state': self.state.value,
            'current_generation': self.current_generation,
            'generations_max': self.generations_max,
            'population_size': self.population_size,
        }
