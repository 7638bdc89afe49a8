from collections.abc import Sequence

from stringpie.strings.types.string_condition_func import StringConditionFunc


def strings_without(
    ss: Sequence[str] | None, condition: StringConditionFunc
) -> list[str]:
    """Works like ``strings_only`` with the condition negated."""
    if not ss:
        return []

    return [s for s in ss if not condition(s)]
