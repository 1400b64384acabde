import re
from enum import Enum

from .utils import in_list, is_list
from .errors import InvalidArgumentError, Message
from .values import normalize_array, normalize_value


_UNSAFE_RE = re.compile('[<>@!]')
_PLACEHOLDER_RE = re.compile(r'%%|%(?:1\$)?s')


def _unique(tokens):
    return list(dict.fromkeys(tokens))


def _tokens(value, parents=()):
    if isinstance(value, Enum):
        value = normalize_value(value)
        # int backed members never name a class
        if not isinstance(value, str):
            return []
    if is_list(value):
        if id(value) in parents:
            return []
        parents += (id(value),)
        tokens = []
        for item in value:
            tokens.extend(_tokens(item, parents))
        return tokens
    if isinstance(value, str):
        return value.split()
    return []


def normalize(value):
    """Returns deduplicated class tokens of a string, list or enum value
    joined with single spaces.
    """
    return ' '.join(_unique(_tokens(value)))


def add(attributes, classes, override=False):
    """Merges classes into the ``class`` entry of the attributes mapping.

    Tokens containing ``<``, ``>``, ``@`` or ``!`` are dropped. When
    nothing is left the mapping is not touched, even with ``override``.
    """
    tokens = [token for token in _tokens(classes)
              if not _UNSAFE_RE.search(token)]
    if not tokens:
        return

    if not override:
        tokens = _tokens(attributes.get('class')) + tokens
    attributes['class'] = ' '.join(_unique(tokens))


def render(value, template, allowed):
    if not in_list('class', value, allowed, throw=True):
        # values which are neither str nor int are not reported by in_list
        raise InvalidArgumentError(
            Message.VALUE_NOT_IN_LIST, normalize_value(value), 'class',
            "', '".join(str(item) for item in normalize_array(allowed)),
        )
    value = str(normalize_value(value))

    def replace(match):
        return '%' if match.group() == '%%' else value

    return _PLACEHOLDER_RE.sub(replace, template)
