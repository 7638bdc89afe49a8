from stringpie.strings.types.string_transform_func import StringTransformFunc


def to_upper() -> StringTransformFunc:
    return str.upper
