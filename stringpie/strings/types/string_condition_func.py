from collections.abc import Callable
from typing import TypeAlias

StringConditionFunc: TypeAlias = Callable[[str], bool]
