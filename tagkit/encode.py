import re
from html.entities import html5

from markupsafe import Markup, escape


_ENTITY_RE = re.compile(r'&(?:[A-Za-z][A-Za-z0-9]*|#\d+|#[xX][0-9a-fA-F]+);')
_SURROGATE_RE = re.compile('[\ud800-\udfff]')

# markupsafe escapes quotes as numeric references
_CONTENT_QUOTES = (('&#34;', '"'), ('&#39;', "'"))
_VALUE_QUOTES = (('&#34;', '&quot;'), ('&#39;', '&apos;'))


def _to_text(value):
    if value is None:
        return ''
    if isinstance(value, bytes):
        return value.decode('utf-8', 'replace')
    return _SURROGATE_RE.sub('\ufffd', str(value))


def _is_entity(entity):
    name = entity[1:]
    if name.startswith('#'):
        digits = name[1:-1]
        if digits[:1] in ('x', 'X'):
            code = int(digits[1:], 16)
        else:
            code = int(digits)
        return 0 < code <= 0x10ffff
    return name in html5


def _escape(text, quotes):
    text = str(escape(text))
    for old, new in quotes:
        text = text.replace(old, new)
    return text


def _encode(value, double_encode, quotes):
    if hasattr(value, '__html__'):
        return Markup(value)

    text = _to_text(value)
    if double_encode:
        return Markup(_escape(text, quotes))

    parts = []
    pos = 0
    for match in _ENTITY_RE.finditer(text):
        parts.append(_escape(text[pos:match.start()], quotes))
        entity = match.group()
        parts.append(entity if _is_entity(entity)
                     else _escape(entity, quotes))
        pos = match.end()
    parts.append(_escape(text[pos:], quotes))
    return Markup(''.join(parts))


def encode_content(content, double_encode=True):
    """Escapes text placed between tags. Quotes are left as is."""
    return _encode(content, double_encode, _CONTENT_QUOTES)


def encode_value(value, double_encode=True):
    """Escapes text placed inside an attribute value, quotes included."""
    return _encode(value, double_encode, _VALUE_QUOTES)
