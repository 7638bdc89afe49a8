from .prefix import prefix
from .suffix import suffix

__all__: list[str] = ["prefix", "suffix"]
