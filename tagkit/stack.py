from contextvars import ContextVar

from .errors import LogicError, Message


_stack = ContextVar('tagkit_stack', default=())


def push(tag):
    _stack.set(_stack.get() + (tag,))


def pop(cls):
    """Pops the innermost tag opened in the current context and checks
    that it is an instance of ``cls``.
    """
    stack = _stack.get()
    if not stack:
        raise LogicError(Message.UNEXPECTED_END_CALL_NO_BEGIN, cls.__name__)
    tag = stack[-1]
    _stack.set(stack[:-1])
    if type(tag) is not cls:
        raise LogicError(Message.TAG_CLASS_MISMATCH_ON_END,
                         type(tag).__name__, cls.__name__)
    return tag


def depth():
    return len(_stack.get())
