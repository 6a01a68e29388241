"""
早停事件處理器

將 EarlyStopping 接到引擎：連續多代沒有進步時呼叫 engine.stop()。
"""

import logging

from .base import EventHandler
from ...early_stopping import EarlyStopping

logger = logging.getLogger(__name__)


class EarlyStoppingHandler(EventHandler):
    """
    早停處理器

    「進步」以族群適應度評估器的 is_better_score 判斷。
    在 initialize() 之後才加入引擎時，於第一個世代完成事件建立監控。
    """

    def __init__(self, patience: int = 100, min_delta: float = 0.0):
        super().__init__()
        self.name = "early_stopping_handler"
        self.patience = patience
        self.min_delta = min_delta
        self.early_stopping = None

    def _create_early_stopping(self, population) -> EarlyStopping:
        fom = population.get_figure_of_merit()
        return EarlyStopping(patience=self.patience,
                             min_delta=self.min_delta,
                             is_better=fom.is_better_score)

    def on_evolution_start(self, population=None, **kwargs):
        self.early_stopping = self._create_early_stopping(population)

    def on_generation_complete(self, generation=0, population=None, best_model=None, **kwargs):
        if self.early_stopping is None:
            self.early_stopping = self._create_early_stopping(population)
            logger.debug(f"早停監控於第 {generation} 世代開始")

        if self.early_stopping.step(best_model.get_score()):
            logger.info(f"⏹️ 連續 {self.patience} 代無進步，於第 {generation} 世代提前停止")
            self.engine.stop()
