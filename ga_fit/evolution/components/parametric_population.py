"""
參數模型族群

- 初始化：參數在允許範圍內均勻抽樣。
- 交配：每個參數隨機取自其中一個父母。
- 變異：隨機挑選一個參數並加上高斯雜訊。
"""

from typing import List
import logging

from .population import Population
from .individual import Model, ParametricModel, require_parametric_model
from .exceptions import ConfigurationError, ValidationError
from .random_stream import DEFAULT_SEED
from .strategies.initialization import UniformRangeInitializationStrategy
from .strategies.crossover import UniformCrossoverStrategy
from .strategies.mutation import GaussianMutationStrategy

logger = logging.getLogger(__name__)

DEFAULT_MUTATION_SIZE = 0.1


class ParametricPopulation(Population):
    """
    參數模型族群

    每個個體擁有函數模板的獨立副本。
    """

    def __init__(self, function=None, mutation_size: float = DEFAULT_MUTATION_SIZE, **kwargs):
        """
        Args:
            function: ParametricFunction 模板（族群不擁有）
            mutation_size: 高斯變異的相對大小
            **kwargs: 傳給 Population 的 seed / mutate_rate
        """
        super().__init__(**kwargs)
        self.function = function
        self.initialization = UniformRangeInitializationStrategy()
        self.crossover = UniformCrossoverStrategy()
        self.mutation = GaussianMutationStrategy()
        self.set_mutation_size(mutation_size)

    def set_function(self, function):
        """設置此族群的函數模板"""
        self.function = function

    def get_function(self):
        return self.function

    def set_mutation_size(self, relative_size: float):
        """
        設置高斯變異的相對大小

        Raises:
            ValidationError: relative_size 為負數
        """
        if relative_size < 0:
            raise ValidationError(f"Mutation size ({relative_size}) must be >= 0")
        self.mutation_size = relative_size
        self.mutation.mutation_size = relative_size

    def get_mutation_size(self) -> float:
        return self.mutation_size

    def do_initialize(self, n: int):
        """
        建立 n 個參數模型，參數依函數界限均勻初始化

        Raises:
            ConfigurationError: n < 0 或尚未設置函數模板
        """
        if n < 0:
            raise ConfigurationError(f"Population size ({n}) must be >= 0")
        if self.function is None:
            raise ConfigurationError("Function template not assigned for this population.")

        self.clear()
        for _ in range(n):
            model = ParametricModel(self.function)
            self.initialization.initialize(model.get_function(), self.random)
            self.individuals.append(model)

    def do_cross_over(self, parents: List[List[Model]]):
        """
        每個參數隨機取自其中一個父母

        單一父母的群組直接複製整個參數向量。先計算全部子代基因，
        再寫回個體，因為父母本身也是被覆寫的個體。
        """
        offspring_genes = []
        for group in parents:
            if len(group) == 1:
                parent = require_parametric_model(group[0], "Given models are not parametric models")
                offspring = [float(v) for v in parent.get_function().get_parameters()]
            elif len(group) == 2:
                parent1 = require_parametric_model(group[0], "Given models are not parametric models")
                parent2 = require_parametric_model(group[1], "Given models are not parametric models")
                offspring = self.crossover.cross(parent1.get_function().get_parameters(),
                                                 parent2.get_function().get_parameters(),
                                                 self.random)
            else:
                offspring = []
            offspring_genes.append(offspring)

        for model, genes in zip(self.individuals, offspring_genes):
            function = require_parametric_model(model).get_function()
            for p, value in enumerate(genes):
                function.set_parameter(p, value)

    def do_mutate(self, model: Model):
        """
        隨機挑選一個參數並加上高斯雜訊

        變異後的值可能超出參數界限。
        """
        model = require_parametric_model(model, "Given models are not parametric models")
        self.mutation.mutate(model.get_function(), self.random)
