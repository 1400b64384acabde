import os
import unittest
from unittest.mock import patch
from contextlib import contextmanager, ExitStack

from tagkit.factory import Registry


@contextmanager
def _nested(*managers):
    with ExitStack() as stack:
        for manager in managers:
            stack.enter_context(manager)
        yield


# every test gets its own process-wide defaults
REGISTRY_PATCHER = patch('tagkit.factory.DEFAULT_REGISTRY',
                         new_callable=Registry)


def lines(*values):
    return os.linesep.join(values)


class TestCase(unittest.TestCase):
    ctx = tuple()

    def run(self, result=None):
        with _nested(*self.ctx):
            return super().run(result)

    def assertEqualsWithoutLE(self, first, second):
        self.assertEqual(str(first).replace('\r\n', '\n'),
                         str(second).replace('\r\n', '\n'))

    def assertError(self, kind, message=None):
        return _ErrorContext(self, kind, message)


class _ErrorContext:

    def __init__(self, test, kind, message):
        self.test = test
        self.kind = kind
        self.message = message
        self.exception = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        if exc_type is None:
            raise self.test.failureException(
                '{} not raised'.format(self.kind.name))
        if getattr(exc_value, 'kind', None) is not self.kind:
            return False
        self.exception = exc_value
        if self.message is not None:
            self.test.assertEqual(str(exc_value), self.message)
        return True
