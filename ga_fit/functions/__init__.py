"""
Parametric function module
"""
from .parametric import ParametricFunction, gaussian, polynomial, FUNCTION_FACTORIES

__all__ = ['ParametricFunction', 'gaussian', 'polynomial', 'FUNCTION_FACTORIES']
