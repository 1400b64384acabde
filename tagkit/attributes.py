import re
import json
import logging
from collections.abc import Mapping

from markupsafe import Markup

from . import cssclass
from .encode import encode_value
from .errors import InvalidArgumentError, Message
from .values import normalize_value


log = logging.getLogger(__name__)


ATTRIBUTE_ORDER = (
    'class', 'id', 'name', 'type', 'value', 'href', 'src', 'srcset', 'form',
    'action', 'method', 'selected', 'checked', 'readonly', 'disabled',
    'multiple', 'size', 'maxlength', 'minlength', 'width', 'height', 'rows',
    'cols', 'alt', 'title', 'rel', 'media',
)

# keys whose mapping values expand into ``key-subkey`` attributes
DATA_ATTRIBUTES = ('aria', 'data', 'data-ng', 'ng')

_NAME_RE = re.compile(r'^[A-Za-z_:][A-Za-z0-9_:-]*$')

_JSON_ESCAPES = (
    ('&', '\\u0026'),
    ('<', '\\u003c'),
    ('>', '\\u003e'),
    ("'", '\\u0027'),
)


def _valid_name(name):
    return isinstance(name, str) and _NAME_RE.match(name) is not None


def _resolve(value):
    if callable(value) and not hasattr(value, '__html__'):
        value = value()
    return normalize_value(value)


def _is_nested(value):
    return isinstance(value, (Mapping, list, tuple))


def _is_scalar(value):
    return (isinstance(value, (str, int, float)) or
            hasattr(value, '__html__'))


def _is_expandable(name):
    return name in DATA_ATTRIBUTES or name.startswith(('data-', 'aria-'))


def _encode_leaves(value, parents=()):
    if _is_nested(value):
        if id(value) in parents:
            raise ValueError('Circular reference detected')
        parents += (id(value),)
    if isinstance(value, Mapping):
        return {str(key): _encode_leaves(item, parents)
                for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode_leaves(item, parents) for item in value]
    value = _resolve(value)
    if isinstance(value, str):
        return str(encode_value(value))
    return value


def json_encode(value):
    """Serializes a nested value to compact JSON which is safe to put
    inside a single-quoted attribute.
    """
    text = json.dumps(_encode_leaves(value), separators=(',', ':'),
                      ensure_ascii=False)
    for char, replacement in _JSON_ESCAPES:
        text = text.replace(char, replacement)
    return text


def _render_json(name, value):
    try:
        return "{}='{}'".format(name, json_encode(value))
    except (TypeError, ValueError) as e:
        log.debug('Skipping attribute %r, value is not serializable: %s',
                  name, e)
        return None


def _render_scalar(name, value):
    return '{}="{}"'.format(name, encode_value(value))


def _expand(name, value):
    items = value.items() if isinstance(value, Mapping) else enumerate(value)
    for key, item in items:
        sub_name = '{}-{}'.format(name, key)
        if key == '' or not _valid_name(sub_name):
            log.debug('Skipping attribute with invalid name %r', sub_name)
            continue
        item = _resolve(item)
        if item is None:
            continue
        if isinstance(item, bool):
            if item:
                yield sub_name
        elif _is_nested(item):
            rendered = _render_json(sub_name, item)
            if rendered is not None:
                yield rendered
        elif _is_scalar(item):
            yield _render_scalar(sub_name, item)
        else:
            log.debug('Skipping attribute %r with unsupported value %r',
                      sub_name, item)


def _render_style(value):
    parts = []
    quote = '"'
    for key, item in value.items():
        item = _resolve(item)
        if item is None:
            continue
        if isinstance(item, bool):
            item = 'true' if item else 'false'
        elif _is_nested(item):
            try:
                item = json_encode(item)
            except (TypeError, ValueError) as e:
                log.debug('Skipping style property %r: %s', key, e)
                continue
            if '"' in item:
                quote = "'"
        else:
            item = encode_value(item)
        parts.append('{}: {};'.format(encode_value(key), item))
    if not parts:
        return None
    return 'style={0}{1}{0}'.format(quote, ' '.join(parts))


def _ordered(attributes):
    keys = [key for key in ATTRIBUTE_ORDER if key in attributes]
    keys.extend(key for key in attributes if key not in ATTRIBUTE_ORDER)
    return keys


def _render_item(name, value):
    if isinstance(value, bool):
        if value:
            yield name
    elif name == 'class':
        value = cssclass.normalize(value)
        if value:
            yield _render_scalar(name, value)
    elif name == 'style' and isinstance(value, Mapping):
        rendered = _render_style(value)
        if rendered is not None:
            yield rendered
    elif _is_nested(value):
        if _is_expandable(name):
            yield from _expand(name, value)
        else:
            rendered = _render_json(name, value)
            if rendered is not None:
                yield rendered
    elif _is_scalar(value):
        yield _render_scalar(name, value)
    else:
        log.debug('Skipping attribute %r with unsupported value %r',
                  name, value)


def render(attributes):
    """Renders an attributes mapping to a string with a leading space.

    Malformed entries are skipped, an empty string is returned when
    nothing is left to render.
    """
    result = []
    for name in _ordered(attributes):
        if not _valid_name(name):
            log.debug('Skipping attribute with invalid name %r', name)
            continue
        value = _resolve(attributes[name])
        if value is None or value == '':
            continue
        if _is_nested(value) and not value:
            continue
        result.extend(_render_item(name, value))
    if not result:
        return Markup('')
    return Markup(' ' + ' '.join(result))


def set_data(attributes, values):
    """Strict counterpart of ``data`` expansion, stores every entry as a
    ``data-key`` attribute. Nothing is stored unless every entry is valid.
    """
    for key, value in values.items():
        if not isinstance(key, str):
            raise InvalidArgumentError(
                Message.DATA_ATTRIBUTE_KEY_MUST_BE_STRING, type(key).__name__)
        if key == '':
            raise InvalidArgumentError(Message.DATA_ATTRIBUTE_KEY_NOT_EMPTY)
        if not (isinstance(value, str) or callable(value)):
            raise InvalidArgumentError(
                Message.DATA_ATTRIBUTE_VALUE_MUST_BE_STRING_OR_CLOSURE,
                type(value).__name__)
    attributes.update(('data-' + key, value)
                      for key, value in values.items())
