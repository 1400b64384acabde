from enum import Enum


class Direction(Enum):
    LTR = 'ltr'
    RTL = 'rtl'
    AUTO = 'auto'


def normalize_value(value):
    """Returns the backing scalar of an enum member, or its name when the
    member is not backed by a string or a number. Anything else is
    returned as is.
    """
    if isinstance(value, Enum):
        if isinstance(value.value, (str, int, float)):
            return value.value
        return value.name
    return value


def normalize_array(values):
    return [normalize_value(value) for value in values]
