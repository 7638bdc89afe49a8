from collections.abc import Callable
from typing import TypeAlias

StringTransformFunc: TypeAlias = Callable[[str], str]
