import unittest
from enum import Enum
from stringext import coercion
from stringext.errors import InvalidArgumentError

class Geotype(Enum):
    UNKNOWN = 0
    TOWN = 1
    CITY = 2

class Color(Enum):
    RED = 'red'
    BLUE = 'blue'

class TestTryParse(unittest.TestCase):
    def test_int(self):
        self.assertEqual(coercion.try_parse(' -42 ', int), -42)
        self.assertEqual(coercion.try_parse('+7', int), 7)

    def test_int_failure(self):
        self.assertEqual(coercion.try_parse('abc', int), 0)
        self.assertEqual(coercion.try_parse('1.5', int), 0)
        self.assertEqual(coercion.try_parse('1_000', int), 0)
        self.assertEqual(coercion.try_parse('', int), 0)

    def test_custom_default(self):
        self.assertEqual(coercion.try_parse('abc', int, -1), -1)

    def test_none_text(self):
        self.assertEqual(coercion.try_parse(None, int), 0)
        self.assertIs(coercion.try_parse(None, bool), False)

    def test_bool(self):
        self.assertIs(coercion.try_parse(' TRUE ', bool), True)
        self.assertIs(coercion.try_parse('false', bool), False)
        self.assertIs(coercion.try_parse('yes', bool), False)
        self.assertIs(coercion.try_parse('1', bool), False)

    def test_float(self):
        self.assertEqual(coercion.try_parse('1.5', float), 1.5)
        self.assertEqual(coercion.try_parse('nope', float), 0.0)

    def test_float_rejects_digit_separators(self):
        self.assertEqual(coercion.try_parse('1_000', float), 0.0)
        self.assertEqual(coercion.try_parse('1_000.5', float, -1.0), -1.0)
        self.assertEqual(coercion.try_parse('1000.5', float), 1000.5)

    def test_str(self):
        self.assertEqual(coercion.try_parse('abc', str), 'abc')
        self.assertEqual(coercion.try_parse(None, str), '')

    def test_enum_by_name(self):
        self.assertIs(coercion.try_parse('city', Geotype), Geotype.CITY)
        self.assertIs(coercion.try_parse(' Town ', Geotype), Geotype.TOWN)

    def test_enum_by_value(self):
        self.assertIs(coercion.try_parse('2', Geotype), Geotype.CITY)

    def test_enum_failure_returns_zero_member(self):
        self.assertIs(coercion.try_parse('village', Geotype), Geotype.UNKNOWN)
        self.assertIs(coercion.try_parse('9', Geotype), Geotype.UNKNOWN)

    def test_enum_without_zero_member(self):
        self.assertIsNone(coercion.try_parse('green', Color))
        self.assertIs(coercion.try_parse('BLUE', Color), Color.BLUE)

    def test_unsupported_target(self):
        with self.assertRaises(InvalidArgumentError):
            coercion.try_parse('1', list)

class TestZeroValue(unittest.TestCase):
    def test_builtins(self):
        self.assertEqual(coercion.zero_value(int), 0)
        self.assertEqual(coercion.zero_value(float), 0.0)
        self.assertIs(coercion.zero_value(bool), False)
        self.assertEqual(coercion.zero_value(str), '')

    def test_enum(self):
        self.assertIs(coercion.zero_value(Geotype), Geotype.UNKNOWN)
        self.assertIsNone(coercion.zero_value(Color))

class TestWrappers(unittest.TestCase):
    def test_to_int(self):
        self.assertEqual(coercion.to_int('12'), 12)

    def test_to_bool(self):
        self.assertIs(coercion.to_bool('True'), True)

    def test_to_float(self):
        self.assertEqual(coercion.to_float('1.5e3'), 1500.0)

    def test_to_enum(self):
        self.assertIs(coercion.to_enum('TOWN', Geotype), Geotype.TOWN)

    def test_to_enum_rejects_non_enum(self):
        with self.assertRaises(InvalidArgumentError):
            coercion.to_enum('1', int)
