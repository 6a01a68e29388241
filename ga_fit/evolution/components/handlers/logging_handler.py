"""
日誌事件處理器

每隔固定世代數記錄一次最佳分數、平均值與 RMS。
"""

import logging

from .base import EventHandler

logger = logging.getLogger(__name__)


class LoggingHandler(EventHandler):
    """
    日誌處理器
    """

    def __init__(self, log_every: int = 100, level: int = logging.INFO):
        super().__init__()
        self.name = "logging_handler"
        self.log_every = max(1, log_every)
        self.level = level

    def on_evolution_start(self, population=None, **kwargs):
        logger.log(self.level, f"🚀 開始優化: 族群={population.size()}")

    def on_generation_complete(self, generation=0, population=None, best_model=None, **kwargs):
        if generation % self.log_every:
            return
        logger.log(self.level,
                   f"🔄 第 {generation} 世代 | 最佳: {best_model.get_score():.6g} | "
                   f"平均: {population.get_score_mean():.6g} | RMS: {population.get_score_rms():.6g}")

    def on_evolution_complete(self, generation=0, best_model=None, accepted=False, **kwargs):
        status = "已接受" if accepted else "未達門檻"
        logger.log(self.level, f"✅ 第 {generation} 世代結束 ({status})，最佳分數: {best_model.get_score():.6g}")
