#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

'''
Stateless functions over the native unsigned integer types, which are
represented by the numpy unsigned scalar types. Used by the fixed-width
integer classes for conversions and for bit counting on their backing
storage.
'''

NATIVE_UINTS = {
    'u8': np.uint8,
    'u16': np.uint16,
    'u32': np.uint32,
    'u64': np.uint64,
    'usize': np.uintp,
}


def resolve_native(native):
    '''
    Native unsigned scalar type for a numpy scalar type, a dtype, or one of the
    short names in NATIVE_UINTS, e.g. 'u16'.
    '''
    if isinstance(native, str):
        if native not in NATIVE_UINTS:
            raise TypeError(f"Unknown native unsigned type '{native}'")
        return NATIVE_UINTS[native]
    try:
        dtype = np.dtype(native)
    except TypeError:
        raise TypeError(f"{native!r} is not a native unsigned type") from None
    if dtype.kind != 'u':
        raise TypeError(f"{dtype.name} is not a native unsigned type")
    return dtype.type


def calc_native_bits(native):
    return np.iinfo(resolve_native(native)).bits


def calc_native_max(native):
    return int(np.iinfo(resolve_native(native)).max)


def calc_backing_native(num_bits):
    '''
    Smallest native unsigned type that can hold a field of `num_bits` bits,
    e.g. a 16-bit unsigned integer for a 12-bit field.
    '''
    for native in NATIVE_UINTS.values():
        if calc_native_bits(native) >= num_bits:
            return native
    raise ValueError(f"No native unsigned type holds {num_bits:,d} bits")


def is_lossless_into(native, num_bits):
    '''
    Does every value of the native type fit in a field of `num_bits` bits?
    Only then is a conversion from it total.
    '''
    return calc_native_bits(native) <= num_bits


def calc_int(num):
    '''
    Python integer value of a native unsigned scalar or a plain Python int. Signed
    numpy scalars, booleans, floats and anything else are rejected.
    '''
    if isinstance(num, np.unsignedinteger):
        return int(num)
    if isinstance(num, int) and not isinstance(num, bool):
        return num
    raise TypeError(f"Expected a native unsigned integer or int, got {type(num).__name__}")


'''
Bit counts of a value held in a native type, counting every bit of the native
width. The value must fit, numpy raises OverflowError rather than truncate.
'''
def count_ones(num, native):
    return bin(int(resolve_native(native)(num))).count('1')


def count_zeros(num, native):
    return calc_native_bits(native) - count_ones(num, native)


def count_leading_zeros(num, native):
    return calc_native_bits(native) - int(resolve_native(native)(num)).bit_length()


def count_trailing_zeros(num, native):
    value = int(resolve_native(native)(num))
    if value == 0:
        return calc_native_bits(native)
    return (value & -value).bit_length() - 1
