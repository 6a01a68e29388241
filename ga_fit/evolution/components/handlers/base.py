"""
事件處理器基類

定義優化過程中事件處理的基本接口。
"""

from abc import ABC


class EventHandler(ABC):
    """
    事件處理器基類

    子類只需覆寫關心的 on_<event>() 方法。
    """

    def __init__(self):
        self.name = "base_handler"
        self.engine = None

    def set_engine(self, engine):
        """設置優化引擎引用"""
        self.engine = engine

    def on_evolution_start(self, **kwargs):
        """優化開始事件"""
        pass

    def on_generation_complete(self, **kwargs):
        """世代完成事件"""
        pass

    def on_evolution_complete(self, **kwargs):
        """優化結束事件"""
        pass
