from collections.abc import Sequence

from stringpie.strings.types.string_condition_func import StringConditionFunc


def strings_only(
    ss: Sequence[str] | None, condition: StringConditionFunc
) -> list[str]:
    """
    Returns a new list with only the elements that satisfy the condition.

    Original order is kept. When nothing qualifies (or ``ss`` is None) the
    result is an empty list, never None.

    See also ``strings_without``, which keeps the complement.

    Example:
        >>> strings_only(["Bob", "Sally", "John"], lambda s: len(s) <= 3)
        ['Bob']
    """
    if not ss:
        return []

    return [s for s in ss if condition(s)]
