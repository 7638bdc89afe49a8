from .string_condition_func import StringConditionFunc
from .string_transform_func import StringTransformFunc

__all__: list[str] = ["StringConditionFunc", "StringTransformFunc"]
