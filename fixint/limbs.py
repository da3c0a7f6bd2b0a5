"""
Limb-level routines for fixed-width unsigned integers.

A magnitude is stored as a fixed-length array of unsigned machine words ("limbs"),
least-significant limb first:

    value == sum(limbs[i] << (i * word_bits) for i in range(len(limbs)))

Every routine here is a plain function.  Inputs are never modified unless the
docstring says "in place".  Outputs go into a caller-owned array whose length is
never changed, so the caller decides the width of every result.

The carry and borrow loops follow grade school arithmetic, one limb at a time.
Python ints are wide enough to hold any intermediate (limb * limb + limb + carry),
so a single mask and shift splits each intermediate into the stored limb and the
carry for the next position.
"""

import array


WORD_BITS_DEFAULT = 64
WORD_BITS_SUPPORTED = (8, 16, 32, 64)

_TYPECODES_BY_PREFERENCE = 'BHILQ'   # array typecodes for unsigned integers, smallest first


def typecode_for(word_bits):
    """
    Find the array typecode whose item is exactly word_bits wide.

    'I' and 'L' vary by platform, so this asks array itself rather than trusting a table.
    """
    for typecode in _TYPECODES_BY_PREFERENCE:
        if array.array(typecode).itemsize * 8 == word_bits:
            return typecode
    raise ValueError("No unsigned array typecode is {} bits wide".format(word_bits))
assert 'B' == typecode_for(8)
assert 'H' == typecode_for(16)


def limb_count(bits, word_bits=WORD_BITS_DEFAULT):
    """Number of limbs needed to hold bits bits, i.e. ceil(bits / word_bits)."""
    return (bits + word_bits - 1) // word_bits
assert 4 == limb_count(256)
assert 2 == limb_count(65)
assert 1 == limb_count(1)


def word_mask(word_bits):
    """All ones in one limb."""
    return (1 << word_bits) - 1
assert 0xFF == word_mask(8)


def new_limbs(num_limbs, word_bits=WORD_BITS_DEFAULT):
    """A zero-filled limb array, num_limbs long."""
    return array.array(typecode_for(word_bits), bytes(num_limbs * word_bits // 8))


def limbs_from_int(value, num_limbs, word_bits=WORD_BITS_DEFAULT):
    """
    Split a nonnegative int into num_limbs limbs, least significant first.

    Bits that do not fit in num_limbs limbs are discarded.
    """
    assert value >= 0
    mask = word_mask(word_bits)
    return_value = new_limbs(num_limbs, word_bits)
    for i in range(num_limbs):
        if value == 0:
            break
        return_value[i] = value & mask
        value >>= word_bits
    return return_value
assert [0xCD, 0xAB, 0x00] == list(limbs_from_int(0xABCD, 3, 8))
assert [0xCD] == list(limbs_from_int(0xABCD, 1, 8))


def int_from_limbs(limbs, word_bits=WORD_BITS_DEFAULT):
    """Reassemble the Python int that limbs represent."""
    return_value = 0
    for limb in reversed(limbs):
        return_value = (return_value << word_bits) | limb
    return return_value
assert 0xABCD == int_from_limbs([0xCD, 0xAB, 0x00], 8)


def significant_length(limbs):
    """Number of limbs up to and including the most significant nonzero one.  Zero for zero."""
    size = len(limbs)
    while size > 0 and limbs[size - 1] == 0:
        size -= 1
    return size
assert 2 == significant_length([1, 2, 0, 0])
assert 0 == significant_length([0, 0])


def mask_top(limbs, bits, word_bits=WORD_BITS_DEFAULT):
    """
    Zero, in place, every bit at or above position bits.

    Returns True if any of those bits were set, i.e. something was thrown away.
    """
    dropped = False
    for i in range(len(limbs)):
        low_bit = i * word_bits
        if low_bit >= bits:
            if limbs[i]:
                dropped = True
                limbs[i] = 0
        elif low_bit + word_bits > bits:
            kept = limbs[i] & word_mask(bits - low_bit)
            if kept != limbs[i]:
                dropped = True
                limbs[i] = kept
    return dropped


def add_n(out, a, b, word_bits=WORD_BITS_DEFAULT):
    """
    out = a + b, limb by limb, returning the carry (0 or 1) out of the top limb of out.

    a and b may have different lengths.  The shorter one is treated as zero-extended.
    out must be at least as long as the longer operand.  Extra limbs of out receive the carry.
    """
    if len(a) < len(b):
        a, b = b, a
    size_a = len(a)
    size_b = len(b)
    size_out = len(out)
    assert size_out >= size_a
    mask = word_mask(word_bits)
    carry = 0
    i = 0
    while i < size_b:
        carry += a[i] + b[i]
        out[i] = carry & mask
        carry >>= word_bits
        i += 1
    while i < size_a:
        carry += a[i]
        out[i] = carry & mask
        carry >>= word_bits
        i += 1
    while i < size_out:
        out[i] = carry
        carry = 0
        i += 1
    return carry


def sub_n(out, a, b, word_bits=WORD_BITS_DEFAULT):
    """
    out = a - b, limb by limb, returning the borrow (0 or 1) out of the top limb of out.

    Either operand may be the longer one.  Both are treated as zero-extended to len(out),
    which must be at least as long as each of them.  On borrow, out holds the
    difference modulo 2**(len(out) * word_bits).
    """
    size_a = len(a)
    size_b = len(b)
    size_out = len(out)
    assert size_out >= size_a and size_out >= size_b
    mask = word_mask(word_bits)
    borrow = 0
    for i in range(size_out):
        difference = (a[i] if i < size_a else 0) - (b[i] if i < size_b else 0) - borrow
        out[i] = difference & mask
        borrow = 1 if difference < 0 else 0
    return borrow


def mul_n(out, a, b, word_bits=WORD_BITS_DEFAULT):
    """
    out = a * b, schoolbook style, returning True if the product did not fit in out.

    out is overwritten.  It would take len(a) + len(b) limbs to hold any product,
    but out may be shorter.  Partial products landing beyond the end of out are
    checked, then discarded.
    """
    size_b = len(b)
    size_out = len(out)
    mask = word_mask(word_bits)
    for k in range(size_out):
        out[k] = 0
    overflow = False
    for i, f in enumerate(a):
        if f == 0:
            continue
        carry = 0
        pz = i
        for j in range(size_b):
            carry += f * b[j]
            if pz < size_out:
                carry += out[pz]
                out[pz] = carry & mask
            elif carry & mask:
                overflow = True
            carry >>= word_bits
            pz += 1
        if carry:
            # NOTE:  Nothing above pz has been written yet in this row, so out[pz] is still zero.
            if pz < size_out:
                out[pz] = carry
            else:
                overflow = True
    return overflow


def mul_add_small(limbs, factor, addend, word_bits=WORD_BITS_DEFAULT):
    """
    limbs = limbs * factor + addend, in place.

    factor and addend should each fit in one limb.
    Returns the carry that did not fit in the top limb (zero if nothing was lost).
    """
    mask = word_mask(word_bits)
    carry = addend
    for i in range(len(limbs)):
        carry += limbs[i] * factor
        limbs[i] = carry & mask
        carry >>= word_bits
    return carry


def divmod_small(limbs, divisor, word_bits=WORD_BITS_DEFAULT, size=None):
    """
    limbs = limbs // divisor, in place, returning limbs % divisor.

    divisor must be in 1 .. 2**word_bits.  Only the low size limbs take part
    (default all of them).  Work proceeds from the most significant limb down,
    carrying each remainder into the next lower limb.
    """
    assert 0 < divisor <= (1 << word_bits)
    if size is None:
        size = len(limbs)
    remainder = 0
    i = size - 1
    while i >= 0:
        remainder = (remainder << word_bits) | limbs[i]
        quotient = remainder // divisor
        limbs[i] = quotient
        remainder -= quotient * divisor
        i -= 1
    return remainder
