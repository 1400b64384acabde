from enum import Enum

from tagkit.errors import Message, InvalidArgumentError
from tagkit.utils import in_list, int_like, is_list

from .base import TestCase


class Size(Enum):
    SM = 'sm'
    MD = 'md'


class TestInList(TestCase):

    def testFound(self):
        self.assertTrue(in_list('size', 'sm', ['sm', 'md']))
        self.assertTrue(in_list('size', Size.MD, list(Size)))
        self.assertTrue(in_list('size', 'md', list(Size)))
        self.assertTrue(in_list('cols', 2, [1, 2, 3]))

    def testNotFound(self):
        self.assertFalse(in_list('size', 'xl', ['sm', 'md']))
        self.assertFalse(in_list('size', '', ['sm', 'md']))
        self.assertFalse(in_list('cols', '2', [1, 2, 3]))

    def testNotFoundThrows(self):
        message = ("Value 'xl' is not in the list of valid values for "
                   "'size': 'sm', 'md'.")
        with self.assertError(Message.VALUE_NOT_IN_LIST, message):
            in_list('size', 'xl', list(Size), throw=True)

    def testEmptyThrows(self):
        message = "The 'size' must not be empty, valid values are: 'sm', 'md'."
        with self.assertError(Message.VALUE_CANNOT_BE_EMPTY, message):
            in_list('size', '', ['sm', 'md'], throw=True)

    def testErrorIsValueError(self):
        with self.assertRaises(ValueError) as cm:
            in_list('size', 'xl', ['sm'], throw=True)
        self.assertIsInstance(cm.exception, InvalidArgumentError)
        self.assertIs(cm.exception.kind, Message.VALUE_NOT_IN_LIST)


class TestIntLike(TestCase):

    def testInt(self):
        self.assertTrue(int_like(1, 0))
        self.assertTrue(int_like(4, 0, 4))
        self.assertFalse(int_like(5, 0, 4))
        self.assertFalse(int_like(-1, 0))

    def testString(self):
        self.assertTrue(int_like('10', 1, 10))
        self.assertFalse(int_like('11', 1, 10))
        self.assertFalse(int_like('0', 1))
        self.assertFalse(int_like('1.5', 0))
        self.assertFalse(int_like('', 0))
        self.assertFalse(int_like('\u0661', 0))

    def testSign(self):
        self.assertTrue(int_like('-1', -1))
        self.assertFalse(int_like('-2', -5))
        self.assertFalse(int_like('+1', 0))


def test_is_list():
    assert is_list([])
    assert is_list((1, 2))
    assert not is_list({'a': 1})
    assert not is_list('ab')
