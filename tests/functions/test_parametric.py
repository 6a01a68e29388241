"""
Unit tests for ParametricFunction and its factories
"""
import math
import numpy as np
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from ga_fit.functions import ParametricFunction, gaussian, polynomial, FUNCTION_FACTORIES


class TestParametricFunction:
    """有界參數函數"""

    def test_defaults(self):
        f = ParametricFunction(lambda x, p: p[0], 2)
        assert f.parameter_count() == 2
        assert f.get_parameters().tolist() == [0.0, 0.0]
        assert f.get_bounds(0) == (0.0, 0.0)
        assert f.get_parameter_name(1) == "p1"

    def test_parameter_access(self):
        f = ParametricFunction(lambda x, p: p[0], 2)
        f.set_parameter(1, 3.5)
        assert f.get_parameter(1) == 3.5

        f.set_parameters([1.0, 2.0])
        assert f.get_parameters().tolist() == [1.0, 2.0]

    def test_get_parameters_returns_copy(self):
        f = ParametricFunction(lambda x, p: p[0], 1, values=[1.0])
        params = f.get_parameters()
        params[0] = 99.0
        assert f.get_parameter(0) == 1.0

    def test_wrong_parameter_count(self):
        f = ParametricFunction(lambda x, p: p[0], 2)
        with pytest.raises(ValueError, match="Expected 2 parameters"):
            f.set_parameters([1.0, 2.0, 3.0])

    @pytest.mark.parametrize("index", [-1, 2])
    def test_index_out_of_range(self, index):
        f = ParametricFunction(lambda x, p: p[0], 2)
        with pytest.raises(IndexError):
            f.get_parameter(index)
        with pytest.raises(IndexError):
            f.set_bounds(index, 0.0, 1.0)

    def test_negative_parameter_count(self):
        with pytest.raises(ValueError):
            ParametricFunction(lambda x, p: 0.0, -1)

    def test_clone_is_independent(self):
        f = gaussian(1.0, 0.0, 1.0, limits=[(0, 2), (-1, 1), (0.1, 3)])
        g = f.clone()
        g.set_parameter(0, 5.0)
        g.set_bounds(0, 0.0, 10.0)

        assert f.get_parameter(0) == 1.0
        assert f.get_bounds(0) == (0.0, 2.0)
        assert g([0.0]) == pytest.approx(5.0)

    def test_evaluate_with_explicit_parameters(self):
        f = polynomial(2, [1.0, 0.0, 1.0])
        assert f.evaluate([0.0, 0.0, 2.0], 3.0) == pytest.approx(18.0)
        assert f(3.0) == pytest.approx(10.0)

    def test_describe(self):
        f = gaussian(0.5, 1.5, 2.0, limits=[(0, 1), (-10, 10), (0.001, 10)])
        text = f.describe()
        assert "Constant : 0.5" in text
        assert "range: [-10, 10]" in text
        assert len(text.splitlines()) == 3


class TestFactories:
    """函數工廠"""

    def test_gaussian(self):
        f = gaussian(2.0, 1.0, 0.5)
        assert [f.get_parameter_name(i) for i in range(3)] == ["Constant", "Mean", "Sigma"]
        assert f([1.0]) == pytest.approx(2.0)
        assert f([1.5]) == pytest.approx(2.0 * math.exp(-0.5))

    def test_gaussian_limits(self):
        f = gaussian(limits=[(0.001, 1.0), (-10.0, 10.0), (0.001, 10.0)])
        assert f.get_bounds(1) == (-10.0, 10.0)

    def test_polynomial(self):
        f = polynomial(1, [1.0, 2.0])
        assert f.parameter_count() == 2
        assert f(np.array([3.0])) == pytest.approx(7.0)

    def test_polynomial_negative_degree(self):
        with pytest.raises(ValueError):
            polynomial(-1)

    def test_registry(self):
        assert set(FUNCTION_FACTORIES) == {'gaussian', 'polynomial'}
