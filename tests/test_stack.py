import asyncio
import functools
import contextvars

from tagkit import stack
from tagkit.html import Div
from tagkit.constant import Tag
from tagkit.errors import Message, LogicError
from tagkit.tag import BaseBlock

from .base import TestCase, REGISTRY_PATCHER, lines


class Section(BaseBlock):
    element = Tag.SECTION


class InlineBlock(BaseBlock):
    element = Tag.SPAN


def isolated(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return contextvars.copy_context().run(func, *args, **kwargs)
    return wrapper


class TestBeginEnd(TestCase):
    ctx = [REGISTRY_PATCHER]

    @isolated
    def testBeginEnd(self):
        opened = Div.tag().class_('a').begin()
        self.assertEqual(opened, lines('<div class="a">', ''))
        self.assertEqual(stack.depth(), 1)
        self.assertEqual(Div.end(), lines('', '</div>'))
        self.assertEqual(stack.depth(), 0)

    @isolated
    def testNested(self):
        html = (Div.tag().id('a').begin() + Section.tag().begin() + 'x' +
                Section.end() + Div.end())
        self.assertEqualsWithoutLE(
            html, '<div id="a">\n<section>\nx\n</section>\n</div>',
        )

    @isolated
    def testEndWithoutBegin(self):
        message = 'Unexpected Div.end() call. A matching begin() is not found.'
        with self.assertError(Message.UNEXPECTED_END_CALL_NO_BEGIN, message):
            Div.end()

    @isolated
    def testMismatch(self):
        Div.tag().begin()
        with self.assertRaises(RuntimeError) as cm:
            Section.end()
        self.assertIsInstance(cm.exception, LogicError)
        self.assertIs(cm.exception.kind, Message.TAG_CLASS_MISMATCH_ON_END)
        self.assertEqual(str(cm.exception),
                         'Expecting end() of Div found Section.')

    @isolated
    def testInvalidBeginLeavesStackEmpty(self):
        with self.assertError(Message.INVALID_BLOCK_ELEMENT):
            InlineBlock.tag().begin()
        self.assertEqual(stack.depth(), 0)
        with self.assertError(Message.UNEXPECTED_END_CALL_NO_BEGIN):
            InlineBlock.end()

    @isolated
    def testContextIsolation(self):
        ctx = contextvars.copy_context()
        ctx.run(Div.tag().begin)
        self.assertEqual(ctx.run(stack.depth), 1)
        self.assertEqual(stack.depth(), 0)
        self.assertEqual(ctx.run(Div.end), lines('', '</div>'))

    @isolated
    def testTasks(self):
        async def block(name):
            opened = Div.tag().id(name).begin()
            await asyncio.sleep(0)
            return str(opened + Div.end())

        async def main():
            return await asyncio.gather(block('a'), block('b'))

        self.assertEqual(asyncio.run(main()), [
            lines('<div id="a">', '', '</div>'),
            lines('<div id="b">', '', '</div>'),
        ])
