"""
遺傳演算法例外類別

核心不做任何內部恢復，所有錯誤直接拋給呼叫者。
"""


class GeneticAlgorithmError(Exception):
    """Base GA exception"""
    pass


class ModelTypeError(GeneticAlgorithmError, TypeError):
    """個體不是此領域預期的具體類型"""
    pass


class RankOutOfRangeError(GeneticAlgorithmError, IndexError):
    """排名或索引超出有效範圍"""
    pass


class ConfigurationError(GeneticAlgorithmError):
    """缺少適應度評估器、族群大小無效等設定錯誤"""
    pass


class ValidationError(GeneticAlgorithmError, ValueError):
    """設定值超出允許範圍 (例如變異率不在 [0, 1])"""
    pass
