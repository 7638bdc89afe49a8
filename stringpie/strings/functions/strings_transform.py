from collections.abc import Sequence

from stringpie.strings.types.string_transform_func import StringTransformFunc


def strings_transform(
    ss: Sequence[str] | None, fn: StringTransformFunc
) -> list[str]:
    """
    Applies ``fn`` to every element and returns the results as a new list.

    The result always has the same length and order as the input. ``fn`` is
    expected to be a pure mapping; it is called exactly once per element.

    Args:
        ss: The strings to transform. ``None`` yields an empty list.
        fn: The mapping applied to each element.

    Returns:
        list[str]: The transformed elements.
    """
    if not ss:
        return []

    return [fn(s) for s in ss]
