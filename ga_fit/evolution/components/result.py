"""
優化結果類

封裝一次優化的結果：最佳個體、是否被接受、世代統計歷史。
"""

from typing import Dict, List, Any, Optional
from dataclasses import dataclass, field
import pandas as pd


@dataclass
class OptimizationResult:
    """
    優化結果封裝類
    """

    # 優化結果
    best_model: Any  # 最佳個體
    accepted: bool  # 最佳個體是否通過接受門檻
    generations_completed: int  # 完成的世代數

    # 統計信息
    history: List[Dict[str, Any]] = field(default_factory=list)  # 每世代的 gen/best/mean/rms/size
    config: Optional[Dict[str, Any]] = None

    @property
    def best_score(self) -> float:
        """最佳分數"""
        if self.best_model is None:
            return float('nan')
        return self.best_model.get_score()

    @property
    def total_evaluations(self) -> int:
        """總評估次數"""
        return sum(record.get('size', 0) for record in self.history)

    def to_dataframe(self) -> pd.DataFrame:
        """將世代歷史轉為 DataFrame（以 gen 為索引）"""
        df = pd.DataFrame(self.history, columns=['gen', 'best', 'mean', 'rms', 'size'])
        return df.set_index('gen')

    def get_summary(self) -> Dict[str, Any]:
        """獲取結果摘要"""
        summary = {
            'generations_completed': self.generations_completed,
            'accepted': self.accepted,
            'best_score': self.best_score,
            'total_evaluations': self.total_evaluations,
        }
        if self.history:
            summary['initial_best'] = self.history[0]['best']
            summary['final_mean'] = self.history[-1]['mean']
            summary['final_rms'] = self.history[-1]['rms']
        return summary
