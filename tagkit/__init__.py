from .constant import Tag
from .values import Direction
from .errors import TagkitError, InvalidArgumentError, LogicError, Message
from .factory import Registry, DEFAULT_REGISTRY
from .html import Div, Span, Hr
