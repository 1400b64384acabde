import os
import copy
from abc import ABC, abstractmethod

from markupsafe import Markup

from . import element as _element
from . import stack, factory, cssclass, template as _template
from .utils import in_list
from .encode import encode_content
from .values import Direction, normalize_value
from .attributes import set_data
from .classifier import is_void


class BaseTag(ABC):
    """Immutable tag builder, every setter returns a modified copy."""

    def __init__(self):
        self._attributes = {}

    @property
    @abstractmethod
    def element(self):
        pass

    def __str__(self):
        return str(self.render())

    def __html__(self):
        return self.render()

    @classmethod
    def tag(cls, *definitions, registry=None):
        return factory.build(cls, definitions, registry)

    def _clone(self):
        new = copy.copy(self)
        new._attributes = dict(self._attributes)
        return new

    def _set(self, name, value):
        new = self._clone()
        if value is None:
            new._attributes.pop(name, None)
        else:
            new._attributes[name] = value
        return new

    def get_attributes(self):
        return dict(self._attributes)

    def attributes(self, values):
        new = self._clone()
        new._attributes.update(values)
        return new

    def add_attribute(self, name, value):
        return self._set(name, value)

    def class_(self, value, override=False):
        new = self._clone()
        if value is None:
            new._attributes.pop('class', None)
        else:
            cssclass.add(new._attributes, value, override)
        return new

    def id(self, value):
        return self._set('id', value)

    def dir(self, value):
        if value is not None:
            in_list('dir', value, list(Direction), throw=True)
            value = normalize_value(value)
        return self._set('dir', value)

    def lang(self, value):
        return self._set('lang', value)

    def style(self, value):
        return self._set('style', value)

    def title(self, value):
        return self._set('title', value)

    def hidden(self, flag):
        return self._set('hidden', True if flag else None)

    def data_attributes(self, values):
        new = self._clone()
        set_data(new._attributes, values)
        return new

    def get_defaults(self, tag):
        return {}

    def apply(self, tag, theme):
        return {}

    def add_default_provider(self, *providers):
        return factory.apply_defaults(self, providers)

    def add_theme_provider(self, name, *providers):
        return factory.apply_theme(self, name, providers)

    def before_run(self):
        return True

    def after_run(self, result):
        return result

    @abstractmethod
    def run(self):
        pass

    def render(self):
        if self.before_run() is False:
            return Markup('')
        return self.after_run(self.run())


def _join(values, encode=True):
    convert = encode_content if encode else Markup
    return Markup('').join(convert(value) for value in values)


class _ContentMixin:

    def get_content(self):
        return self._content

    def content(self, *values):
        new = self._clone()
        new._content += _join(values)
        return new

    def html(self, *values):
        new = self._clone()
        new._content += _join(values, encode=False)
        return new


class BaseBlock(_ContentMixin, BaseTag):

    def __init__(self):
        super().__init__()
        self._content = Markup('')

    def begin(self):
        opened = _element.begin(self.element, self._attributes)
        stack.push(self)
        return opened + os.linesep

    @classmethod
    def end(cls):
        tag = stack.pop(cls)
        return os.linesep + _element.end(tag.element)

    def run(self):
        return Markup(_template.render('{begin}\n{content}\n{end}', {
            '{begin}': _element.begin(self.element, self._attributes),
            '{content}': self._content,
            '{end}': _element.end(self.element),
        }))


class BaseInline(_ContentMixin, BaseTag):
    TEMPLATE = '{prefix}\\n{tag}\\n{suffix}'

    def __init__(self):
        super().__init__()
        self._content = Markup('')
        self._template = self.TEMPLATE
        self._prefix = Markup('')
        self._prefix_tag = None
        self._prefix_attributes = {}
        self._suffix = Markup('')
        self._suffix_tag = None
        self._suffix_attributes = {}

    def _replace(self, **fields):
        new = self._clone()
        for name, value in fields.items():
            setattr(new, '_' + name, value)
        return new

    def template(self, value):
        return self._replace(template=value)

    def prefix(self, *values):
        return self._replace(prefix=self._prefix + _join(values))

    def prefix_tag(self, tag):
        return self._replace(prefix_tag=tag)

    def prefix_attributes(self, values):
        return self._replace(prefix_attributes=dict(values))

    def suffix(self, *values):
        return self._replace(suffix=self._suffix + _join(values))

    def suffix_tag(self, tag):
        return self._replace(suffix_tag=tag)

    def suffix_attributes(self, values):
        return self._replace(suffix_attributes=dict(values))

    @staticmethod
    def _affix(content, tag, attributes):
        if tag is None:
            return content
        if not content:
            # wrapper without content makes sense only for void elements
            return _element.void(tag, attributes) if is_void(tag) else ''
        return _element.inline(tag, content, attributes)

    def run(self):
        return Markup(_template.render(self._template, {
            '{prefix}': self._affix(self._prefix, self._prefix_tag,
                                    self._prefix_attributes),
            '{tag}': _element.inline(self.element, self._content,
                                     self._attributes),
            '{suffix}': self._affix(self._suffix, self._suffix_tag,
                                    self._suffix_attributes),
        }))


class BaseVoid(BaseTag):

    def run(self):
        return _element.void(self.element, self._attributes)
