import unittest
from stringkit import edit
from stringkit.entities import Affix, BracketStyle, Delimiter, QuoteStyle, Wrapper

class TestPrefix(unittest.TestCase):
    def setUp(self):
        self.slash = edit.prefix('/')

    def test_add(self):
        self.assertEqual(self.slash.add('path'), '/path')

    def test_add_idempotent(self):
        once = self.slash.add('path')
        self.assertEqual(self.slash.add(once), once)

    def test_remove(self):
        self.assertEqual(self.slash.remove('/path'), 'path')

    def test_remove_strips_one_occurrence(self):
        self.assertEqual(self.slash.remove('//path'), '/path')

    def test_remove_without_prefix(self):
        self.assertEqual(self.slash.remove('path'), 'path')

    def test_multi_character(self):
        https = edit.prefix('https://')
        self.assertEqual(https.add('example.com'), 'https://example.com')
        self.assertEqual(https.remove('https://example.com'), 'example.com')

    def test_absent(self):
        self.assertEqual(self.slash.add(None), '')
        self.assertEqual(self.slash.remove(''), '')

    def test_returns_affix(self):
        self.assertIsInstance(self.slash, Affix)

class TestSuffix(unittest.TestCase):
    def setUp(self):
        self.ext = edit.suffix('.txt')

    def test_add(self):
        self.assertEqual(self.ext.add('notes'), 'notes.txt')

    def test_add_idempotent(self):
        once = self.ext.add('notes')
        self.assertEqual(self.ext.add(once), once)

    def test_remove(self):
        self.assertEqual(self.ext.remove('notes.txt'), 'notes')
        self.assertEqual(self.ext.remove('notes.md'), 'notes.md')

    def test_empty_suffix_remove(self):
        self.assertEqual(edit.suffix('').remove('notes'), 'notes')

    def test_absent(self):
        self.assertEqual(self.ext.add(None), '')
        self.assertEqual(self.ext.remove(None), '')

class TestWrap(unittest.TestCase):
    def test_symmetric(self):
        self.assertEqual(edit.wrap('hello', '"'), '"hello"')

    def test_pair_mapping(self):
        self.assertEqual(edit.wrap('hello', {'start': '[', 'end': ']'}), '[hello]')

    def test_pair_tuple(self):
        self.assertEqual(edit.wrap('hello', ('{{', '}}')), '{{hello}}')

    def test_nests(self):
        result = edit.wrap(edit.wrap('hello', '*'), '*')
        self.assertEqual(result, '**hello**')

    def test_absent(self):
        self.assertEqual(edit.wrap(None, '"'), '')

    def test_invalid_delimiter(self):
        with self.assertRaises(TypeError):
            edit.wrap('hello', 42)

class TestUnwrap(unittest.TestCase):
    def test_symmetric(self):
        self.assertEqual(edit.unwrap('"hello"', '"'), 'hello')

    def test_pair(self):
        self.assertEqual(edit.unwrap('[hello]', Delimiter('[', ']')), 'hello')

    def test_requires_both_ends(self):
        self.assertEqual(edit.unwrap('[hello', ('[', ']')), '[hello')
        self.assertEqual(edit.unwrap('hello]', ('[', ']')), 'hello]')

    def test_strips_one_layer(self):
        self.assertEqual(edit.unwrap('((x))', ('(', ')')), '(x)')

    def test_inverse_of_wrap(self):
        for delimiter in ['"', '**', ('<b>', '</b>'), {'start': '(', 'end': ')'}]:
            with self.subTest(delimiter=delimiter):
                wrapped = edit.wrap('text', delimiter)
                self.assertEqual(edit.unwrap(wrapped, delimiter), 'text')

    def test_absent(self):
        self.assertEqual(edit.unwrap('', '"'), '')

class TestQuote(unittest.TestCase):
    def test_default_double(self):
        dq = edit.quote()
        self.assertEqual(dq.add('hello'), '"hello"')
        self.assertEqual(dq.remove('"hello"'), 'hello')

    def test_styles(self):
        self.assertEqual(edit.quote('single').add('x'), "'x'")
        self.assertEqual(edit.quote(QuoteStyle.BACKTICK).add('x'), '`x`')

    def test_remove_other_style(self):
        self.assertEqual(edit.quote('single').remove('"x"'), '"x"')

    def test_unknown_style(self):
        with self.assertRaises(ValueError):
            edit.quote('guillemet')

    def test_returns_wrapper(self):
        self.assertIsInstance(edit.quote(), Wrapper)

class TestBracket(unittest.TestCase):
    def test_default_round(self):
        rb = edit.bracket()
        self.assertEqual(rb.add('hello'), '(hello)')
        self.assertEqual(rb.remove('(hello)'), 'hello')

    def test_styles(self):
        expected = {
            'round': '(x)',
            'square': '[x]',
            'curly': '{x}',
            'angle': '<x>'
        }
        for style, wrapped in expected.items():
            with self.subTest(style=style):
                self.assertEqual(edit.bracket(style).add('x'), wrapped)
                self.assertEqual(edit.bracket(style).remove(wrapped), 'x')

    def test_enum_member(self):
        self.assertEqual(edit.bracket(BracketStyle.CURLY).add('x'), '{x}')

    def test_unknown_style(self):
        with self.assertRaises(ValueError):
            edit.bracket('triangle')

class TestTrim(unittest.TestCase):
    def test_trim(self):
        self.assertEqual(edit.trim('Hello World', 5), 'Hello...')

    def test_custom_marker(self):
        self.assertEqual(edit.trim('Hello World', 5, '~'), 'Hello~')

    def test_short_text_unchanged(self):
        self.assertEqual(edit.trim('Hello', 5), 'Hello')
        self.assertEqual(edit.trim('Hello', 10), 'Hello')

    def test_no_max_length(self):
        self.assertEqual(edit.trim('Hello World'), 'Hello World')
        self.assertEqual(edit.trim('Hello World', 0), 'Hello World')

    def test_length_bound(self):
        text = 'The quick brown fox jumps over the lazy dog'
        for max_length in range(1, len(text)):
            with self.subTest(max_length=max_length):
                result = edit.trim(text, max_length)
                self.assertEqual(len(result), max_length + len('...'))

    def test_truncate_alias(self):
        self.assertEqual(edit.truncate('Hello World', 5), 'Hello...')

    def test_absent(self):
        self.assertEqual(edit.trim(None, 5), '')

class TestPad(unittest.TestCase):
    def test_both(self):
        self.assertEqual(edit.pad('hello', 10), '  hello   ')

    def test_start(self):
        self.assertEqual(edit.pad('hello', 10, '*', 'start'), '*****hello')

    def test_end(self):
        self.assertEqual(edit.pad('hello', 10, '-', 'end'), 'hello-----')

    def test_already_long_enough(self):
        self.assertEqual(edit.pad('hello', 5, '*'), 'hello')
        self.assertEqual(edit.pad('hello', 3, '*'), 'hello')

    def test_unknown_position(self):
        with self.assertRaises(ValueError):
            edit.pad('hello', 10, '*', 'middle')

    def test_absent(self):
        self.assertEqual(edit.pad(None, 10), '')

    def test_no_op_ignores_position(self):
        self.assertEqual(edit.pad(None, 5, '*', 'middle'), '')
        self.assertEqual(edit.pad('hello', 5, '*', 'middle'), 'hello')

class TestRepeat(unittest.TestCase):
    def test_repeat(self):
        self.assertEqual(edit.repeat('ha', 3), 'hahaha')
        self.assertEqual(edit.repeat('*', 5), '*****')

    def test_count_below_one(self):
        self.assertEqual(edit.repeat('ha', 0), '')
        self.assertEqual(edit.repeat('ha', -2), '')

    def test_absent(self):
        self.assertEqual(edit.repeat(None, 3), '')
