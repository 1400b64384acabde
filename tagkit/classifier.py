from collections import namedtuple

from .constant import Tag, CATEGORIES, EMBEDDED, FLOW, LISTING, PHRASING
from .constant import SCRIPT_SUPPORTING, TABLE, VOID
from .errors import InvalidArgumentError, Message
from .values import normalize_value


Classification = namedtuple('Classification', 'is_block is_inline is_void')


def _names(*groups):
    return [tag.value for group in groups for tag in group]


def _exclude(tags, *groups):
    excluded = set(_names(*groups))
    return [tag for tag in tags if tag not in excluded]


def category(name):
    """Returns the ordered list of tag names of a content category."""
    return _names(CATEGORIES[name])


def inline_tags():
    tags = _names(PHRASING, (Tag.OPTGROUP, Tag.OPTION))
    return _exclude(tags, EMBEDDED, LISTING, SCRIPT_SUPPORTING, TABLE, VOID)


def block_tags():
    tags = _names(FLOW, (Tag.FIGCAPTION, Tag.LEGEND, Tag.SUMMARY))
    excluded = _exclude(tags, LISTING, SCRIPT_SUPPORTING, TABLE, VOID)
    inline = set(inline_tags())
    return [tag for tag in excluded if tag not in inline]


def void_tags():
    return _names(VOID)


_BLOCK = frozenset(block_tags())
_INLINE = frozenset(inline_tags())
_VOID = frozenset(void_tags())


def tag_name(tag):
    """Normalizes a tag identifier to its lowercase name."""
    name = normalize_value(tag)
    if name == '':
        raise InvalidArgumentError(Message.EMPTY_TAG_NAME)
    return str(name).lower()


def is_block(tag):
    return tag_name(tag) in _BLOCK


def is_inline(tag):
    return tag_name(tag) in _INLINE


def is_void(tag):
    return tag_name(tag) in _VOID


def classify(tag):
    name = tag_name(tag)
    return Classification(name in _BLOCK, name in _INLINE, name in _VOID)
