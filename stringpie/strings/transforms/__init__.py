from .to_lower import to_lower
from .to_upper import to_upper
from .trim import trim

__all__: list[str] = ["to_lower", "to_upper", "trim"]
