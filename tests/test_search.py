import unittest
from stringext import search
from stringext.errors import InvalidArgumentError

class TestPositionOf(unittest.TestCase):
    def test_finds_first_occurrence(self):
        result = search.position_of('a/b/c', '/')
        self.assertEqual(result, 1)

    def test_respects_start_offset(self):
        result = search.position_of('a/b/c', '/', 2)
        self.assertEqual(result, 3)

    def test_match_at_start_offset(self):
        result = search.position_of('a/b/c', '/', 1)
        self.assertEqual(result, 1)

    def test_not_found(self):
        result = search.position_of('abc', 'x')
        self.assertEqual(result, -1)

    def test_not_found_after_offset(self):
        result = search.position_of('a/bc', '/', 2)
        self.assertEqual(result, -1)

    def test_found_occurrence_is_the_token(self):
        text, token = 'T12/R13 WELS/T9 R8 WELS', 'WELS'
        i = search.position_of(text, token)
        self.assertEqual(text[i:i + len(token)], token)
        self.assertNotIn(token, text[:i])

    def test_ordinal_comparison(self):
        self.assertEqual(search.position_of('Straße', 'SS'), -1)
        self.assertEqual(search.position_of('ABC', 'b'), -1)
        self.assertEqual(search.position_of('e\u0301', '\u00e9'), -1)

    def test_start_equal_to_length(self):
        self.assertEqual(search.position_of('abc', 'a', 3), -1)
        self.assertEqual(search.position_of('abc', '', 3), 3)

    def test_start_out_of_range(self):
        with self.assertRaises(IndexError):
            search.position_of('abc', 'b', 4)
        with self.assertRaises(IndexError):
            search.position_of('abc', 'b', -1)

    def test_none_input(self):
        with self.assertRaises(InvalidArgumentError):
            search.position_of(None, 'a')
        with self.assertRaises(InvalidArgumentError):
            search.position_of('abc', None)

class TestMatches(unittest.TestCase):
    def test_ignores_case_and_whitespace(self):
        self.assertTrue(search.matches(' Portland ', 'PORTLAND'))

    def test_different_strings(self):
        self.assertFalse(search.matches('Portland', 'South Portland'))

    def test_none_input(self):
        with self.assertRaises(InvalidArgumentError):
            search.matches(None, 'a')

    def test_none_match(self):
        with self.assertRaises(InvalidArgumentError):
            search.matches('a', None)

class TestComprises(unittest.TestCase):
    def test_contains(self):
        self.assertTrue(search.comprises('Cross Lake Twp', 'lake'))

    def test_does_not_contain(self):
        self.assertFalse(search.comprises('Cross Lake Twp', 'pond'))
