"""
演化個體類

Model 只負責保存分數；具體的基因由子類別擁有。
ParametricModel 以一個有界參數函數作為基因。
"""

from typing import Optional
import numpy as np

from .exceptions import ModelTypeError


class Model:
    """
    演化個體基類

    分數只有在所屬族群呼叫 score() 之後才有意義。
    任何浮點數（包括 NaN）都會被接受。
    """

    def __init__(self):
        self._score: float = 0.0

    def get_score(self) -> float:
        return self._score

    def set_score(self, score: float):
        self._score = score

    @property
    def score(self) -> float:
        """分數（便利屬性）"""
        return self._score

    @score.setter
    def score(self, value: float):
        self._score = value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(score={self._score:.6g})"


class ParametricModel(Model):
    """
    參數函數模型

    保存函數模板的獨立副本，之後修改原模板不會影響此個體。
    """

    def __init__(self, function=None):
        super().__init__()
        self._function = None
        if function is not None:
            self.set_function(function)

    def set_function(self, function):
        """
        設置此模型的函數

        Args:
            function: ParametricFunction 模板，會被複製一份
        """
        self._function = function.clone()

    def get_function(self):
        return self._function

    def get_parameters(self) -> np.ndarray:
        if self._function is None:
            return np.array([])
        return self._function.get_parameters()

    def evaluate(self, x) -> float:
        """在 x 處以目前參數計算函數值"""
        return self._function(x)

    def __repr__(self) -> str:
        params = ", ".join(f"{p:.4g}" for p in self.get_parameters())
        return f"ParametricModel(score={self._score:.6g}, parameters=[{params}])"


def require_parametric_model(model, message: Optional[str] = None) -> ParametricModel:
    """確認個體為 ParametricModel，否則拋出 ModelTypeError"""
    if not isinstance(model, ParametricModel):
        raise ModelTypeError(message or f"Given model is not a parametric model: {type(model).__name__}")
    return model
