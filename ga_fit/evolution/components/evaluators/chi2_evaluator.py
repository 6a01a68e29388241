"""
Chi-square 適應度評估器

將參數模型與帶誤差的資料集比較：

    chi2/ndf = (1/N) * sum_i (f(x_i) - y_i)^2 / sigma_i^2

只計入 y_i != 0 的點。分數越低越好。
"""

from typing import List, Sequence
import logging
import numpy as np

from .base import FigureOfMerit
from ..individual import require_parametric_model

logger = logging.getLogger(__name__)

DEFAULT_ACCEPT_THRESHOLD = 0.1


class Chi2FitFigureOfMerit(FigureOfMerit):
    """
    chi2/ndf 評估器

    資料點需在評估前明確加入；clear_data() 明確清空，沒有隱式失效。
    """

    def __init__(self, accept_threshold: float = DEFAULT_ACCEPT_THRESHOLD):
        super().__init__(accept_threshold)
        self.name = "chi2"
        self._x: List[np.ndarray] = []
        self._y: List[float] = []
        self._ey: List[float] = []

    def add_data(self, x: Sequence[float], y: float, ey: float):
        """
        加入一個資料點

        Args:
            x: 座標向量
            y: 觀測值
            ey: y 的誤差 sigma_y
        """
        self._x.append(np.atleast_1d(np.asarray(x, dtype=float)))
        self._y.append(float(y))
        self._ey.append(float(ey))

    def clear_data(self):
        self._x.clear()
        self._y.clear()
        self._ey.clear()

    def data_size(self) -> int:
        return len(self._x)

    def evaluate(self, model) -> float:
        """
        計算 chi2/ndf

        資料全部為 y == 0 時 ndf 為 0，sigma_y 為 0 的點會得到無限大；
        兩者都依 IEEE 規則產生 NaN 或 inf（numpy 會發出 RuntimeWarning），不會被攔截。
        """
        model = require_parametric_model(model)

        if not self._x:
            return 0.0

        function = model.get_function()
        chi2 = np.float64(0.0)
        ndf = 0
        for x, y, ey in zip(self._x, self._y, self._ey):
            if y == 0:
                continue
            fx = function(x)
            residual = np.float64(fx - y)
            chi2 += residual * residual / np.float64(ey * ey)
            ndf += 1

        return float(chi2 / np.float64(ndf))

    def is_better_score(self, score_to_test: float, reference_score: float) -> bool:
        """chi2 越低越好"""
        return score_to_test < reference_score
