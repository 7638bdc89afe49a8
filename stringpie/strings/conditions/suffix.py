from stringpie.strings.types.string_condition_func import StringConditionFunc


def suffix(value: str) -> StringConditionFunc:
    """Builds a condition that is true for strings ending with ``value``."""

    def condition(s: str) -> bool:
        return s.endswith(value)

    return condition
