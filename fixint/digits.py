"""
Base conversion between limb arrays and digit strings, in any base from 2 to 256.

The digit alphabet:

     0 ..  9    '0' .. '9'
    10 .. 35    'A' .. 'Z'
    36 .. 61    'a' .. 'z'
    62 .. 255   the code points after 'z', i.e. chr(ord('a') + digit - 36)

So hexadecimal is upper case, base 62 is the familiar 0-9A-Za-z, and bases above 62
spill into '{', '|', '}', '~', DEL, and on into Latin-1 and beyond.
Every base from 2 to 256 has exactly one character per digit value, so any value
survives the round trip through to_string and back.
"""

from . import limbs as limb_routines


BASE_MIN = 2
BASE_MAX = 256
BASE_DEFAULT = 10

_DIGIT_UPPER = 10   # value of 'A'
_DIGIT_LOWER = 36   # value of 'a'


class InvalidBase(ValueError):
    """e.g. to_string(1) or from_string('101', 300)"""


class InvalidDigit(ValueError):
    """e.g. from_string('12X', 10) or from_string('', 10)"""


def check_base(base):
    """Raise InvalidBase unless base is an int in BASE_MIN .. BASE_MAX."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase("Base must be an int, not {}".format(type(base).__name__))
    if not BASE_MIN <= base <= BASE_MAX:
        raise InvalidBase("Base must be in [{}, {}], not {}".format(BASE_MIN, BASE_MAX, base))


def digit_from_char(c):
    """Value of one digit character, or None if c is not in the alphabet."""
    code = ord(c)
    if ord('0') <= code <= ord('9'):
        return code - ord('0')
    elif ord('A') <= code <= ord('Z'):
        return code - ord('A') + _DIGIT_UPPER
    elif ord('a') <= code < ord('a') + BASE_MAX - _DIGIT_LOWER:
        return code - ord('a') + _DIGIT_LOWER
    else:
        return None
assert 0 == digit_from_char('0')
assert 15 == digit_from_char('F')
assert 36 == digit_from_char('a')
assert 62 == digit_from_char('{')
assert None is digit_from_char('-')


def char_from_digit(digit):
    """Character for one digit value, 0 .. 255."""
    assert 0 <= digit < BASE_MAX
    if digit < _DIGIT_UPPER:
        return chr(ord('0') + digit)
    elif digit < _DIGIT_LOWER:
        return chr(ord('A') + digit - _DIGIT_UPPER)
    else:
        return chr(ord('a') + digit - _DIGIT_LOWER)
assert 'F' == char_from_digit(15)
assert 'z' == char_from_digit(61)


def digits_from_text(text, base):
    """
    Translate a digit string into a list of digit values, most significant first.

    Raises InvalidDigit for an empty string, a character outside the alphabet,
    or a digit too big for the base.  Nothing is returned until every character checks out.
    """
    check_base(base)
    if len(text) == 0:
        raise InvalidDigit("Empty string has no digits")
    return_value = []
    for position, c in enumerate(text):
        digit = digit_from_char(c)
        if digit is None:
            raise InvalidDigit("Invalid character {char} at position {position} in {text}".format(
                char=repr(c),
                position=position,
                text=repr(text),
            ))
        if digit >= base:
            raise InvalidDigit("Digit {char} is {digit}, too big for base {base}, in {text}".format(
                char=repr(c),
                digit=digit,
                base=base,
                text=repr(text),
            ))
        return_value.append(digit)
    return return_value
assert [1, 10, 11] == digits_from_text('1AB', 16)


def limbs_from_text(text, base, num_limbs, word_bits=limb_routines.WORD_BITS_DEFAULT):
    """
    Parse a digit string into a new array of num_limbs limbs.

    Digits are folded in most significant first:  acc = acc * base + digit.
    Returns (limbs, lost) where lost is True if some high-order part of the value
    did not fit in num_limbs limbs and was discarded.
    """
    digits = digits_from_text(text, base)
    limbs = limb_routines.new_limbs(num_limbs, word_bits)
    lost = False
    started = False
    for digit in digits:
        if not started:
            if digit == 0:
                continue   # leading zero
            started = True
        if limb_routines.mul_add_small(limbs, base, digit, word_bits):
            lost = True
    return limbs, lost


def chunk_for_base(base, word_bits=limb_routines.WORD_BITS_DEFAULT):
    """
    Biggest power of base that is a legal single-limb divisor.

    Returns (base ** count, count).  Dividing by base ** count peels off count digits
    at once instead of one.  count is at least 1 since every base fits in 8 bits.
    """
    big_base = base
    count = 1
    while big_base * base <= (1 << word_bits):
        big_base *= base
        count += 1
    return big_base, count
assert (10 ** 19, 19) == chunk_for_base(10, 64)
assert (256, 1) == chunk_for_base(256, 8)
assert (2 ** 64, 64) == chunk_for_base(2, 64)


def text_from_limbs(limbs, base, word_bits=limb_routines.WORD_BITS_DEFAULT):
    """
    Format a limb array as a digit string, most significant digit first, no leading zeros.

    Zero is '0'.  The input is not modified:  division happens on a copy of its
    significant limbs.
    """
    check_base(base)
    size = limb_routines.significant_length(limbs)
    if size == 0:
        return '0'
    work = limb_routines.new_limbs(size, word_bits)
    for i in range(size):
        work[i] = limbs[i]
    big_base, count = chunk_for_base(base, word_bits)
    digits_backwards = []
    while size > 0:
        remainder = limb_routines.divmod_small(work, big_base, word_bits, size)
        for _ in range(count):
            remainder, digit = divmod(remainder, base)
            digits_backwards.append(digit)
        while size > 0 and work[size - 1] == 0:
            size -= 1
    while len(digits_backwards) > 1 and digits_backwards[-1] == 0:
        digits_backwards.pop()
    return ''.join(char_from_digit(digit) for digit in reversed(digits_backwards))
