from enum import Enum


class Message(Enum):
    EMPTY_TAG_NAME = 'Tag name cannot be empty.'
    INVALID_BLOCK_ELEMENT = "Invalid block-level element: '%s'."
    INVALID_INLINE_ELEMENT = "Invalid inline-level element: '%s'."
    INVALID_VOID_ELEMENT = "Invalid void element: '%s'."
    VOID_ELEMENT_CANNOT_HAVE_CONTENT = "Void element '%s' cannot have content."
    VALUE_CANNOT_BE_EMPTY = ("The '%s' must not be empty, valid values "
                             "are: '%s'.")
    VALUE_NOT_IN_LIST = ("Value '%s' is not in the list of valid values "
                         "for '%s': '%s'.")
    DATA_ATTRIBUTE_KEY_MUST_BE_STRING = ("Data attribute key must be of type "
                                         "'str', '%s' given.")
    DATA_ATTRIBUTE_KEY_NOT_EMPTY = 'Data attribute key must not be empty.'
    DATA_ATTRIBUTE_VALUE_MUST_BE_STRING_OR_CLOSURE = (
        "Data attribute value must be of type 'str' or callable, "
        "'%s' given."
    )
    UNEXPECTED_END_CALL_NO_BEGIN = ('Unexpected %s.end() call. A matching '
                                    'begin() is not found.')
    TAG_CLASS_MISMATCH_ON_END = 'Expecting end() of %s found %s.'
    CANNOT_INSTANTIATE_ABSTRACT_CLASS = 'Cannot instantiate abstract class %s.'

    def format(self, *args):
        return self.value % args


class TagkitError(Exception):

    def __init__(self, kind, *args):
        self.kind = kind
        self.args_ = args
        super().__init__(kind.format(*args))


class InvalidArgumentError(TagkitError, ValueError):
    pass


class LogicError(TagkitError, RuntimeError):
    pass
