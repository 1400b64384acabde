import inspect
import logging

from .errors import LogicError, Message
from .utils import is_list


log = logging.getLogger(__name__)


class Registry:
    """Per-class default definitions applied by ``create``."""

    def __init__(self):
        self._defaults = {}

    def set_defaults(self, cls, definitions):
        self._defaults[cls] = dict(definitions)

    def get_defaults(self, cls):
        return dict(self._defaults.get(cls, {}))

    def reset(self):
        self._defaults.clear()


DEFAULT_REGISTRY = Registry()


def _call(tag, name, value):
    if name.startswith('_'):
        raise AttributeError('Cannot call private method {!r} of {}'
                             .format(name, type(tag).__name__))
    method = getattr(tag, name)
    args = value if is_list(value) else [value]
    return method(*args)


def _set_field(tag, name, value):
    new = tag._clone()
    setattr(new, name, value)
    return new


def configure(tag, definitions):
    """Applies definitions to a tag and returns the configured copy.

    ``name()`` keys call builder methods, list values are passed as
    positional arguments. Keys naming public instance fields set them,
    any other key becomes an HTML attribute.
    """
    for key, value in definitions.items():
        if key.endswith('()'):
            tag = _call(tag, key[:-2], value)
        elif key.startswith('_') and hasattr(tag, key):
            raise AttributeError('Cannot set private field {!r} of {}'
                                 .format(key, type(tag).__name__))
        elif key in vars(tag):
            tag = _set_field(tag, key, value)
        else:
            tag = tag.add_attribute(key, value)
    return tag


def create(cls):
    if inspect.isabstract(cls):
        raise LogicError(Message.CANNOT_INSTANTIATE_ABSTRACT_CLASS,
                         cls.__name__)
    return cls()


def build(cls, definitions, registry=None):
    registry = DEFAULT_REGISTRY if registry is None else registry
    tag = create(cls)
    for definition in (registry.get_defaults(cls),) + tuple(definitions):
        if definition:
            tag = configure(tag, definition)
    return tag


def _instance(provider):
    return provider() if isinstance(provider, type) else provider


def apply_defaults(tag, providers):
    for provider in map(_instance, providers):
        definitions = provider.get_defaults(tag)
        if definitions:
            log.debug('Applying defaults of %s to %s: %r',
                      type(provider).__name__, type(tag).__name__,
                      definitions)
            tag = configure(tag, definitions)
    return tag


def apply_theme(tag, name, providers):
    for provider in map(_instance, providers):
        definitions = provider.apply(tag, name)
        if definitions:
            log.debug('Applying theme %r of %s to %s: %r', name,
                      type(provider).__name__, type(tag).__name__,
                      definitions)
            tag = configure(tag, definitions)
    return tag
