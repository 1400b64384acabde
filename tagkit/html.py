from .constant import Tag
from .tag import BaseBlock, BaseInline, BaseVoid


class Div(BaseBlock):
    element = Tag.DIV


class Span(BaseInline):
    element = Tag.SPAN


class Hr(BaseVoid):
    element = Tag.HR
