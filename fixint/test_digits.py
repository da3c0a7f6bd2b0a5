"""
Testing fixint digits.py
"""

import array
import unittest

from fixint import digits


class BaseTests(unittest.TestCase):

    def test_valid_bases(self):
        for base in range(digits.BASE_MIN, digits.BASE_MAX + 1):
            digits.check_base(base)

    def test_invalid_bases(self):
        for base in (-10, 0, 1, 257, 300):
            with self.assertRaises(digits.InvalidBase):
                digits.check_base(base)

    def test_non_int_bases(self):
        for base in ('10', 10.0, True, None):
            with self.assertRaises(digits.InvalidBase):
                digits.check_base(base)

    def test_invalid_base_is_value_error(self):
        self.assertTrue(issubclass(digits.InvalidBase, ValueError))
        self.assertTrue(issubclass(digits.InvalidDigit, ValueError))


class AlphabetTests(unittest.TestCase):

    def test_decimal_digits(self):
        self.assertEqual(list(range(10)), [digits.digit_from_char(c) for c in '0123456789'])

    def test_upper_case(self):
        self.assertEqual(10, digits.digit_from_char('A'))
        self.assertEqual(35, digits.digit_from_char('Z'))

    def test_lower_case(self):
        self.assertEqual(36, digits.digit_from_char('a'))
        self.assertEqual(61, digits.digit_from_char('z'))

    def test_past_z(self):
        self.assertEqual(62, digits.digit_from_char('{'))
        self.assertEqual(255, digits.digit_from_char(chr(ord('a') + 219)))
        self.assertIsNone(digits.digit_from_char(chr(ord('a') + 220)))

    def test_outside_alphabet(self):
        for c in '-+ .:@[`_\n':
            self.assertIsNone(digits.digit_from_char(c), repr(c))

    def test_every_digit_has_its_own_char(self):
        chars = [digits.char_from_digit(d) for d in range(256)]
        self.assertEqual(256, len(set(chars)))
        for d, c in enumerate(chars):
            self.assertEqual(d, digits.digit_from_char(c))

    def test_char_from_digit(self):
        self.assertEqual('9', digits.char_from_digit(9))
        self.assertEqual('A', digits.char_from_digit(10))
        self.assertEqual('a', digits.char_from_digit(36))
        self.assertEqual('{', digits.char_from_digit(62))


class ParseTests(unittest.TestCase):

    def test_digits_from_text(self):
        self.assertEqual([1, 10, 11, 12, 13, 14, 15], digits.digits_from_text('1ABCDEF', 16))

    def test_empty(self):
        with self.assertRaises(digits.InvalidDigit):
            digits.digits_from_text('', 10)

    def test_invalid_character(self):
        with self.assertRaises(digits.InvalidDigit):
            digits.digits_from_text('1-2', 10)
        with self.assertRaises(digits.InvalidDigit):
            digits.digits_from_text(' 12', 10)

    def test_digit_too_big_for_base(self):
        with self.assertRaises(digits.InvalidDigit):
            digits.digits_from_text('12X', 10)
        with self.assertRaises(digits.InvalidDigit):
            digits.digits_from_text('G', 16)
        with self.assertRaises(digits.InvalidDigit):
            digits.digits_from_text('2', 2)

    def test_hex_is_upper_case(self):
        with self.assertRaises(digits.InvalidDigit):
            digits.digits_from_text('ff', 16)

    def test_invalid_base_before_digits(self):
        with self.assertRaises(digits.InvalidBase):
            digits.digits_from_text('', 1)

    def test_limbs_from_text(self):
        limbs, lost = digits.limbs_from_text('4660', 10, 2, 8)
        self.assertEqual([0x34, 0x12], list(limbs))
        self.assertFalse(lost)

    def test_limbs_from_text_leading_zeros(self):
        limbs, lost = digits.limbs_from_text('0000000000000000000012', 10, 1, 8)
        self.assertEqual([12], list(limbs))
        self.assertFalse(lost)

    def test_limbs_from_text_lost(self):
        limbs, lost = digits.limbs_from_text('256', 10, 1, 8)
        self.assertEqual([0], list(limbs))
        self.assertTrue(lost)

    def test_limbs_from_text_base_256(self):
        limbs, lost = digits.limbs_from_text('34', 256, 2, 8)
        self.assertEqual([4, 3], list(limbs))
        self.assertFalse(lost)


class FormatTests(unittest.TestCase):

    def test_zero_every_base(self):
        zero = array.array('B', [0, 0, 0])
        for base in range(digits.BASE_MIN, digits.BASE_MAX + 1):
            self.assertEqual('0', digits.text_from_limbs(zero, base, 8))

    def test_hex(self):
        self.assertEqual('FF', digits.text_from_limbs(array.array('B', [0xFF, 0x00]), 16, 8))
        self.assertEqual('1234', digits.text_from_limbs(array.array('B', [0x34, 0x12]), 16, 8))

    def test_binary(self):
        self.assertEqual('11111111', digits.text_from_limbs(array.array('B', [0xFF]), 2, 8))
        self.assertEqual('100000000', digits.text_from_limbs(array.array('B', [0x00, 0x01]), 2, 8))

    def test_decimal_multi_chunk(self):
        value = 10**40 + 7
        limbs = array.array('Q', [value & (2**64 - 1), (value >> 64) & (2**64 - 1), value >> 128])
        self.assertEqual('1' + '0' * 39 + '7', digits.text_from_limbs(limbs, 10, 64))

    def test_base_256(self):
        self.assertEqual('34', digits.text_from_limbs(array.array('B', [4, 3]), 256, 8))
        self.assertEqual(chr(ord('a') + 219), digits.text_from_limbs(array.array('B', [0xFF]), 256, 8))

    def test_input_untouched(self):
        limbs = array.array('B', [0x34, 0x12])
        digits.text_from_limbs(limbs, 10, 8)
        self.assertEqual([0x34, 0x12], list(limbs))

    def test_invalid_base(self):
        with self.assertRaises(digits.InvalidBase):
            digits.text_from_limbs(array.array('B', [1]), 1, 8)
        with self.assertRaises(digits.InvalidBase):
            digits.text_from_limbs(array.array('B', [1]), 300, 8)

    def test_chunk_for_base(self):
        self.assertEqual((10**19, 19), digits.chunk_for_base(10, 64))
        self.assertEqual((100, 2), digits.chunk_for_base(10, 8))
        self.assertEqual((256, 1), digits.chunk_for_base(256, 8))
        self.assertEqual((2**8, 8), digits.chunk_for_base(2, 8))


if __name__ == '__main__':
    import unittest
    unittest.main()
