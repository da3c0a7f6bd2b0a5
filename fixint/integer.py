"""
A FixedWidthInt is an unsigned integer of a fixed number of bits, stored as machine-word limbs.

Features:
 - any width, chosen once per class, e.g. fixed_width(256)
 - construct from int or from a digit string in any base 2 to 256
 - format to a digit string in any base 2 to 256
 - add, subtract, multiply, with the carry, borrow, or overflow handed back, not raised
"""

import logging

from . import digits
from . import limbs as limb_routines


logger = logging.getLogger(__name__)


class FixedWidthInt(object):
    """
    Unsigned integers of a fixed bit-width.

    Each width is its own class.  Get one from fixed_width():

        Int256 = fixed_width(256)
        assert '123456789' == Int256(123456789).to_string()
        assert 'FF' == Int256(255).to_string(16)
        assert 255 == int(Int256('FF', 16))

    Internally the value lives in an array of NUM_LIMBS unsigned words, each WORD_BITS wide,
    least significant word first.  Bits at and above BITS are always zero.
    The array never changes size.  Except for clear(), a value never changes after construction.

    Arithmetic returns a pair, the result and a flag:

        total, carry = a.add(b)           # width max(a.BITS, b.BITS), carry if it overflowed
        difference, borrow = a.sub(b)     # width max(a.BITS, b.BITS), borrow if a < b
        product, overflow = a.mul(b)      # width a.BITS + b.BITS, overflow never for valid inputs

    The flag is part of the answer.  Ignoring it is how a 256-bit sum quietly wraps.

    Too-big content does not raise, it is truncated to the low BITS bits:

        assert 0x34 == int(fixed_width(8)(0x1234))

    Use fits() first when truncation would be a problem.
    """

    __slots__ = ('_limbs',)

    BITS = None        # \
    WORD_BITS = None   # | set by fixed_width()
    NUM_LIMBS = None   # /

    InvalidBase = digits.InvalidBase
    InvalidDigit = digits.InvalidDigit

    class ConstructorTypeError(TypeError):
        """e.g. Int256(1.5) or FixedWidthInt(1) with no width"""

    class ConstructorValueError(ValueError):
        """e.g. Int256(-1) or fixed_width(0)"""

    class OperandError(TypeError):
        """e.g. Int256(1).add(1) or adding 64-bit-limb and 32-bit-limb values"""

    def __init__(self, content=None, base=digits.BASE_DEFAULT):
        """
        FixedWidthInt constructor.

        content - the type can be:
            None                   zero
            int                    123456789  (nonnegative)
            digit string           '1ABCDEF'  (in the given base)
            another FixedWidthInt  Int128(5)  (any width)
        base - 2 to 256, used by digit string content, checked for any content
        """
        if self.BITS is None:
            raise self.ConstructorTypeError(
                "FixedWidthInt has no width.  Use e.g. fixed_width(256)({})".format(repr(content))
            )
        digits.check_base(base)
        if content is None:
            self._limbs = limb_routines.new_limbs(self.NUM_LIMBS, self.WORD_BITS)
        elif isinstance(content, bool):
            raise self.ConstructorTypeError("{}(bool) is not supported".format(type_name(self)))
        elif isinstance(content, int):
            self._limbs = self._limbs_from_int(content)
        elif isinstance(content, str):
            self._limbs = self._limbs_from_string(content, base)
        elif isinstance(content, FixedWidthInt):
            self._limbs = self._limbs_from_another(content)
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))
        assert len(self._limbs) == self.NUM_LIMBS

    @classmethod
    def from_unsigned(cls, value):
        """Construct from a nonnegative int, keeping the low BITS bits."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise cls.ConstructorTypeError("from_unsigned() needs an int, not {}".format(type_name(value)))
        return cls(value)

    @classmethod
    def from_string(cls, text, base=digits.BASE_DEFAULT):
        """
        Construct from a digit string.

        assert 28036591 == int(Int256.from_string('1ABCDEF', 16))
        """
        if not isinstance(text, str):
            raise cls.ConstructorTypeError("from_string() needs a str, not {}".format(type_name(text)))
        return cls(text, base)

    @classmethod
    def _limbs_from_int(cls, value):
        if value < 0:
            raise cls.ConstructorValueError(
                "{} is unsigned, it cannot hold {}".format(cls.__name__, value)
            )
        if value.bit_length() > cls.BITS:
            logger.debug("%s truncating a %d-bit int", cls.__name__, value.bit_length())
        return_value = limb_routines.limbs_from_int(value, cls.NUM_LIMBS, cls.WORD_BITS)
        limb_routines.mask_top(return_value, cls.BITS, cls.WORD_BITS)
        return return_value

    @classmethod
    def _limbs_from_string(cls, text, base):
        return_value, lost = cls._parse(text, base)
        if lost:
            logger.debug("%s truncating base %d string of %d digits", cls.__name__, base, len(text))
        return return_value

    @classmethod
    def _parse(cls, text, base):
        """Digit string to limbs, and whether anything was truncated."""
        return_value, lost = digits.limbs_from_text(text, base, cls.NUM_LIMBS, cls.WORD_BITS)
        spilled = limb_routines.mask_top(return_value, cls.BITS, cls.WORD_BITS)
        return return_value, lost or spilled

    def _limbs_from_another(self, other):
        """
        Copy constructor, between any two widths.

            assert Int256(42) == Int256(Int64(42))
        """
        return self._limbs_from_int(int(other))

    @classmethod
    def fits(cls, content, base=digits.BASE_DEFAULT):
        """
        Would this content survive construction without truncation?

        Invalid content raises the same exceptions construction would.

            assert fixed_width(8).fits(255)
            assert not fixed_width(8).fits('100', 16)
        """
        digits.check_base(base)
        if isinstance(content, bool):
            raise cls.ConstructorTypeError("{}.fits(bool) is not supported".format(cls.__name__))
        elif isinstance(content, int):
            if content < 0:
                raise cls.ConstructorValueError(
                    "{} is unsigned, it cannot hold {}".format(cls.__name__, content)
                )
            return content.bit_length() <= cls.BITS
        elif isinstance(content, str):
            _, lost = cls._parse(content, base)
            return not lost
        elif isinstance(content, FixedWidthInt):
            return content.bit_length() <= cls.BITS
        else:
            raise cls.ConstructorTypeError("{outer}.fits({inner}) is not supported".format(
                outer=cls.__name__,
                inner=type_name(content),
            ))

    @property
    def limbs(self):
        """
        The limbs, least significant first, as a tuple.

            assert (1, 1, 0, 0) == Int256(2**64 + 1).limbs
        """
        return tuple(self._limbs)

    def clear(self):
        """Set to zero, in place.  The only way a value ever changes."""
        for i in range(self.NUM_LIMBS):
            self._limbs[i] = 0

    # Output
    # ------
    def to_string(self, base=digits.BASE_DEFAULT):
        """
        Digits in the given base, most significant first, no leading zeros.

            assert '0' == Int256().to_string(7)
            assert '1ABCDEF' == Int256('1ABCDEF', 16).to_string(16)
        """
        return digits.text_from_limbs(self._limbs, base, self.WORD_BITS)

    def hex(self):
        """Upper case hexadecimal digits, no '0x' prefix."""
        return self.to_string(16)

    def __str__(self):
        """Handle str(FixedWidthInt(x)), decimal digits."""
        return self.to_string()

    def __repr__(self):
        """Handle repr(FixedWidthInt(x))"""
        return "{}('{}')".format(type_name(self), self.to_string())

    def __int__(self):
        return limb_routines.int_from_limbs(self._limbs, self.WORD_BITS)

    def bit_length(self):
        """Number of bits up to and including the most significant one bit.  Zero for zero."""
        size = limb_routines.significant_length(self._limbs)
        if size == 0:
            return 0
        return (size - 1) * self.WORD_BITS + self._limbs[size - 1].bit_length()

    def is_zero(self):
        return limb_routines.significant_length(self._limbs) == 0

    # Comparison
    # ----------
    def __eq__(self, other):
        """
        Equal values are equal, whatever the widths.

            assert Int256(3) == fixed_width(8)(3)
            assert Int256(3) == 3
        """
        if isinstance(other, FixedWidthInt):
            return int(self) == int(other)
        elif isinstance(other, int) and not isinstance(other, bool):
            return int(self) == other
        else:
            return NotImplemented

    def __ne__(self, other):
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    # NOTE:  clear() changes the value in place, so a value-based hash would go stale
    #        inside a set or dict.  Unhashable, like list.
    __hash__ = None

    # Pickling
    # --------
    def __getstate__(self):
        """For the 'pickle' package, object serialization."""
        return self.limbs

    def __setstate__(self, limbs_incoming):
        """For the 'pickle' package, object serialization."""
        self._limbs = limb_routines.new_limbs(self.NUM_LIMBS, self.WORD_BITS)
        for i, limb in enumerate(limbs_incoming):
            self._limbs[i] = limb

    def __reduce__(self):
        # NOTE:  Width classes are made on the fly, so pickle cannot find them by name.
        #        Rebuild the class from its width instead.
        return _blank_of_width, (self.BITS, self.WORD_BITS), self.__getstate__()

    # Arithmetic
    # ----------
    def add(self, other):
        """
        Sum, and whether it carried out of the result width.

            total, carry = Int256(123456789).add(Int256(987654321))
            assert (1111111110, False) == (int(total), carry)
        """
        self._check_operand(other)
        result = fixed_width(max(self.BITS, other.BITS), self.WORD_BITS)()
        carry = limb_routines.add_n(result._limbs, self._limbs, other._limbs, self.WORD_BITS)
        spilled = limb_routines.mask_top(result._limbs, result.BITS, result.WORD_BITS)
        return result, bool(carry) or spilled

    def sub(self, other):
        """
        Difference modulo 2**width, and whether it borrowed (i.e. self < other).

            difference, borrow = Int256(1).sub(Int256(2))
            assert (2**256 - 1, True) == (int(difference), borrow)
        """
        self._check_operand(other)
        result = fixed_width(max(self.BITS, other.BITS), self.WORD_BITS)()
        borrow = limb_routines.sub_n(result._limbs, self._limbs, other._limbs, self.WORD_BITS)
        limb_routines.mask_top(result._limbs, result.BITS, result.WORD_BITS)
        return result, bool(borrow)

    def mul(self, other):
        """
        Product, in a width wide enough for any product, and whether it overflowed anyway.

            product, overflow = Int64(123456).mul(Int64(7890))
            assert 128 == product.BITS
        """
        self._check_operand(other)
        result = fixed_width(self.BITS + other.BITS, self.WORD_BITS)()
        overflow = limb_routines.mul_n(result._limbs, self._limbs, other._limbs, self.WORD_BITS)
        spilled = limb_routines.mask_top(result._limbs, result.BITS, result.WORD_BITS)
        return result, overflow or spilled

    def _check_operand(self, other):
        """Arithmetic needs another FixedWidthInt with the same size limbs."""
        if not isinstance(other, FixedWidthInt) or other.BITS is None:
            raise self.OperandError("Cannot do arithmetic on {} and {}".format(
                type_name(self),
                type_name(other),
            ))
        if other.WORD_BITS != self.WORD_BITS:
            raise self.OperandError("Mismatched limbs, {} bits and {} bits".format(
                self.WORD_BITS,
                other.WORD_BITS,
            ))


_classes_by_width = {}


def fixed_width(bits, word_bits=limb_routines.WORD_BITS_DEFAULT):
    """
    The FixedWidthInt class for bits-wide values.

    The same arguments always give the same class.

        assert fixed_width(256) is fixed_width(256)
        assert 4 == fixed_width(256).NUM_LIMBS
        assert 8 == fixed_width(256, word_bits=32).NUM_LIMBS
    """
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
        raise FixedWidthInt.ConstructorValueError("Width must be a positive int, not {}".format(repr(bits)))
    if type(word_bits) is not int or word_bits not in limb_routines.WORD_BITS_SUPPORTED:
        raise FixedWidthInt.ConstructorValueError("Limbs must be one of {} bits, not {}".format(
            limb_routines.WORD_BITS_SUPPORTED,
            repr(word_bits),
        ))
    key = (bits, word_bits)
    try:
        return _classes_by_width[key]
    except KeyError:
        pass
    if word_bits == limb_routines.WORD_BITS_DEFAULT:
        name = 'FixedWidthInt{}'.format(bits)
    else:
        name = 'FixedWidthInt{}w{}'.format(bits, word_bits)
    width_class = type(name, (FixedWidthInt,), dict(
        __slots__=(),
        __module__=__name__,
        BITS=bits,
        WORD_BITS=word_bits,
        NUM_LIMBS=limb_routines.limb_count(bits, word_bits),
    ))
    logger.debug("New width class %s, %d limbs", name, width_class.NUM_LIMBS)
    return _classes_by_width.setdefault(key, width_class)


def _blank_of_width(bits, word_bits):
    """Unpickling starts here.  __setstate__() fills in the limbs."""
    width_class = fixed_width(bits, word_bits)
    return width_class.__new__(width_class)


def type_name(x):
    """
    Describe (very briefly) what type of object this is.

    THANKS:  http://stackoverflow.com/a/5008854/673991
    """
    return type(x).__name__
assert 'int' == type_name(3)
assert 'str' == type_name('')
