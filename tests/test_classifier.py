from tagkit.constant import Tag
from tagkit.errors import Message
from tagkit.classifier import is_block, is_inline, is_void, classify, category
from tagkit.classifier import block_tags, inline_tags, void_tags

from .base import TestCase


class TestClassifier(TestCase):

    def testBlock(self):
        for tag in ('div', 'DIV', 'Div', Tag.DIV, 'p', 'section', 'legend',
                    'figcaption', 'summary', 'h1'):
            self.assertTrue(is_block(tag), tag)
        for tag in ('span', 'br', 'hr', 'ul', 'li', 'table', 'td', 'script',
                    'template', 'custom-element'):
            self.assertFalse(is_block(tag), tag)

    def testInline(self):
        for tag in ('span', 'a', 'strong', 'option', 'optgroup', Tag.EM):
            self.assertTrue(is_inline(tag), tag)
        for tag in ('div', 'img', 'video', 'br', 'noscript', 'li'):
            self.assertFalse(is_inline(tag), tag)

    def testVoid(self):
        for tag in ('br', 'hr', 'img', 'INPUT', Tag.META, 'wbr'):
            self.assertTrue(is_void(tag), tag)
        for tag in ('span', 'div', 'param', 'unknown'):
            self.assertFalse(is_void(tag), tag)

    def testEmptyName(self):
        for func in (is_block, is_inline, is_void, classify):
            with self.assertError(Message.EMPTY_TAG_NAME,
                                  'Tag name cannot be empty.'):
                func('')

    def testIdempotent(self):
        self.assertEqual(classify('Div'), classify('div'))
        self.assertEqual(classify('div'), classify('div'))

    def testClassify(self):
        self.assertEqual(classify('hr'), (False, False, True))
        self.assertTrue(classify(Tag.SPAN).is_inline)
        self.assertTrue(classify('div').is_block)
        self.assertEqual(classify('tbody'), (False, False, False))

    def testDisjoint(self):
        block, inline, void = (set(block_tags()), set(inline_tags()),
                               set(void_tags()))
        self.assertFalse(block & inline)
        self.assertFalse(block & void)
        self.assertFalse(inline & void)

    def testCategory(self):
        self.assertEqual(category('heading'),
                         ['h1', 'h2', 'h3', 'h4', 'h5', 'h6'])
        self.assertEqual(category('root'), ['body', 'head', 'html'])
        self.assertEqual(category('sectioning'),
                         ['article', 'aside', 'nav', 'section'])
        self.assertNotIn('param', category('void'))
        self.assertIn('search', category('flow'))
        with self.assertRaises(KeyError):
            category('unknown')
