from .errors import InvalidArgumentError, Message
from .values import normalize_array, normalize_value


def is_list(value):
    return isinstance(value, (list, tuple))


def in_list(attribute, value, allowed, throw=False):
    allowed = normalize_array(allowed)
    allowed_str = "', '".join(str(item) for item in allowed)

    if value == '' and throw:
        raise InvalidArgumentError(Message.VALUE_CANNOT_BE_EMPTY,
                                   attribute, allowed_str)

    value = normalize_value(value)
    if value in allowed:
        return True

    if throw and isinstance(value, (str, int)):
        raise InvalidArgumentError(Message.VALUE_NOT_IN_LIST,
                                   value, attribute, allowed_str)
    return False


def int_like(value, min_, max_=None):
    """Checks that value is an integer, or a string of decimal digits,
    within ``[min_, max_]`` bounds. Signed strings are rejected unless
    they are exactly the lower bound.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value >= min_ and (max_ is None or value <= max_)

    if not isinstance(value, str):
        return False

    if value == str(min_):
        return True

    if not (value.isascii() and value.isdigit()):
        return False

    number = int(value)
    return number >= min_ and (max_ is None or number <= max_)
