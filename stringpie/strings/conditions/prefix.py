from stringpie.strings.types.string_condition_func import StringConditionFunc


def prefix(value: str) -> StringConditionFunc:
    """
    Builds a condition that is true for strings starting with ``value``.

    Example:
        >>> Strings(["Bob", "Sally", "John", "Jane"]).without(prefix("J"))
        Strings(['Bob', 'Sally'])
    """

    def condition(s: str) -> bool:
        return s.startswith(value)

    return condition
