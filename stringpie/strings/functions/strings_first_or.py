import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def strings_first_or(ss: Sequence[str] | None, default_value: str) -> str:
    """Returns the first element, or ``default_value`` if there are no elements."""
    if not ss:
        logger.debug("No elements found. Returning default value.")
        return default_value

    return ss[0]
