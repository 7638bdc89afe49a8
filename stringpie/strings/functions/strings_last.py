from collections.abc import Sequence

from stringpie.strings.functions.strings_last_or import strings_last_or


def strings_last(ss: Sequence[str] | None) -> str:
    """Returns the last element, or an empty string. Also see ``strings_last_or``."""
    return strings_last_or(ss, "")
