"""
Unit tests for EarlyStopping class
"""

import operator
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from ga_fit.evolution.early_stopping import EarlyStopping


class TestEarlyStopping:
    """Test cases for EarlyStopping class"""

    def test_initialization(self):
        """測試初始化"""
        es = EarlyStopping(patience=5, min_delta=0.01)

        assert es.patience == 5
        assert es.min_delta == 0.01
        assert es.is_better is operator.gt
        assert es.counter == 0
        assert es.best_score is None
        assert es.should_stop is False
        assert es.generation == 0

    def test_invalid_patience(self):
        """測試無效的 patience"""
        with pytest.raises(ValueError, match="patience must be >= 1"):
            EarlyStopping(patience=0)

    def test_invalid_min_delta(self):
        """測試無效的 min_delta"""
        with pytest.raises(ValueError, match="min_delta must be >= 0"):
            EarlyStopping(min_delta=-0.5)

    def test_basic_early_stopping(self):
        """測試基本早停功能"""
        es = EarlyStopping(patience=3, min_delta=0.0)

        assert not es.step(1.0)
        assert es.best_score == 1.0

        assert not es.step(1.5)
        assert es.counter == 0
        assert es.best_score == 1.5

        # 後 3 代無進步
        assert not es.step(1.5)
        assert es.counter == 1

        assert not es.step(1.2)
        assert es.counter == 2

        assert es.step(1.5)  # 第 3 代無進步，應該停止
        assert es.counter == 3
        assert es.should_stop is True

    def test_early_stopping_with_min_delta(self):
        """測試帶閾值的早停"""
        es = EarlyStopping(patience=2, min_delta=0.1)

        assert not es.step(1.0)

        # 改進 0.05 < 0.1，計數 +1
        assert not es.step(1.05)
        assert es.counter == 1
        assert es.best_score == 1.0  # 未更新

        assert es.step(1.08)
        assert es.should_stop is True

    def test_reset_on_improvement(self):
        """測試有進步時重置計數器"""
        es = EarlyStopping(patience=3)

        es.step(1.0)
        es.step(1.0)
        es.step(1.0)
        assert es.counter == 2

        assert not es.step(1.5)
        assert es.counter == 0
        assert es.best_score == 1.5

    def test_lower_is_better(self):
        """測試分數越低越好（chi2）"""
        es = EarlyStopping(patience=2, is_better=operator.lt)

        assert not es.step(10.0)
        assert not es.step(5.0)  # 有進步（減少）
        assert es.counter == 0
        assert es.best_score == 5.0

        assert not es.step(6.0)  # 變差
        assert es.counter == 1

        assert es.step(5.0)
        assert es.should_stop is True

    def test_get_status(self):
        """測試獲取狀態"""
        es = EarlyStopping(patience=5, min_delta=0.01)

        es.step(1.0)
        es.step(1.0)

        assert es.get_status() == {
            'counter': 1,
            'best_score': 1.0,
            'should_stop': False,
            'generation': 2,
            'patience': 5,
            'min_delta': 0.01,
        }

    def test_reset(self):
        """測試重置功能"""
        es = EarlyStopping(patience=3)

        es.step(1.0)
        es.step(1.0)
        es.step(1.0)
        es.reset()

        assert es.counter == 0
        assert es.best_score is None
        assert es.should_stop is False
        assert es.generation == 0

    def test_repr(self):
        """測試字符串表示"""
        es = EarlyStopping(patience=10, min_delta=0.001)
        es.step(1.0)

        repr_str = repr(es)

        assert 'EarlyStopping' in repr_str
        assert 'patience=10' in repr_str
        assert 'min_delta=0.001' in repr_str
        assert 'counter=0' in repr_str
        assert 'generation=1' in repr_str

    def test_chi2_scenario(self):
        """測試 chi2/ndf 收斂場景"""
        es = EarlyStopping(patience=5, min_delta=0.01, is_better=operator.lt)

        chi2_values = [5.0, 2.0, 1.0, 0.995, 0.992, 0.991, 0.9905, 0.9902]

        stopped_at = None
        for i, chi2 in enumerate(chi2_values):
            if es.step(chi2):
                stopped_at = i
                break

        assert stopped_at == 7
        assert es.best_score == 1.0


if __name__ == '__main__':
    # 運行測試
    pytest.main([__file__, '-v'])
