from markupsafe import Markup

from . import attributes as _attributes
from .encode import encode_content
from .errors import InvalidArgumentError, Message
from .classifier import tag_name, is_block, is_inline, is_void


def _block_name(tag):
    name = tag_name(tag)
    if not is_block(name):
        raise InvalidArgumentError(Message.INVALID_BLOCK_ELEMENT, name)
    return name


def begin(tag, attributes=None):
    name = _block_name(tag)
    return Markup('<{}{}>').format(Markup(name),
                                   _attributes.render(attributes or {}))


def end(tag):
    return Markup('</{}>').format(Markup(_block_name(tag)))


def inline(tag, content, attributes=None, encode=False):
    name = tag_name(tag)
    if is_void(name) and content:
        raise InvalidArgumentError(Message.VOID_ELEMENT_CANNOT_HAVE_CONTENT,
                                   name)
    if not is_inline(name):
        raise InvalidArgumentError(Message.INVALID_INLINE_ELEMENT, name)
    if encode:
        content = encode_content(content)
    else:
        content = Markup(content)
    return Markup('<{0}{1}>{2}</{0}>').format(
        Markup(name), _attributes.render(attributes or {}), content,
    )


def void(tag, attributes=None):
    name = tag_name(tag)
    if not is_void(name):
        raise InvalidArgumentError(Message.INVALID_VOID_ELEMENT, name)
    return Markup('<{}{}>').format(Markup(name),
                                   _attributes.render(attributes or {}))
