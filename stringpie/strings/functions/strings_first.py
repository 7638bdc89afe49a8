from collections.abc import Sequence

from stringpie.strings.functions.strings_first_or import strings_first_or


def strings_first(ss: Sequence[str] | None) -> str:
    """Returns the first element, or an empty string. Also see ``strings_first_or``."""
    return strings_first_or(ss, "")
