"""
fixint - Fixed-width unsigned integers, stored as machine-word limbs.

Usage example:

    from fixint import fixed_width

    Int256 = fixed_width(256)
    a = Int256(123456789)
    b = Int256('987654321')
    total, carry = a.add(b)
    assert '1111111110' == total.to_string()
    assert carry is False

Usage example:

    import fixint

    Int64 = fixint.fixed_width(64)
    product, overflow = Int64(123456).mul(Int64(7890))
    assert 128 == product.BITS
"""

import logging

from .digits import InvalidBase
from .digits import InvalidDigit
from .integer import FixedWidthInt
from .integer import fixed_width

__all__ = [
    'FixedWidthInt',
    'fixed_width',
    'InvalidBase',
    'InvalidDigit',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import version
__version__ = version.__doc__
