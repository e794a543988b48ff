#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import operator

import numpy as np

import twelve_bit.native as native


class FixedUint:
    '''
    Fixed-width unsigned integers that can never hold an out-of-range value. Over-
    and under-flow is reported (checked), clamped (saturating) or wrapped around
    (wrapping), by explicit choice of the caller. Abstract class that is sub-typed
    with a particular number of bits and, optionally, a native backing type.
    '''

    __slots__ = ('_num',)

    num_bits = None
    backing = None

    def __init_subclass__(cls, **kwargs):
        '''
        Derive the mask and backing storage of a concrete width. The backing type
        defaults to the smallest native unsigned type that holds `num_bits`.
        '''
        super().__init_subclass__(**kwargs)
        if cls.num_bits is None:
            return
        if cls.num_bits < 1:
            raise ValueError(f"Invalid bit width {cls.num_bits} for {cls.__name__}")
        if cls.backing is None:
            cls.backing = native.calc_backing_native(cls.num_bits)
        cls.backing = native.resolve_native(cls.backing)
        backing_bits = native.calc_native_bits(cls.backing)
        if backing_bits < cls.num_bits:
            raise ValueError(f"{cls.backing.__name__} cannot back {cls.num_bits:,d} bits")
        cls.mask = (1 << cls.num_bits) - 1  # 0xFFF... or 0b111...
        cls.num_spare_bits = backing_bits - cls.num_bits

    def __init__(self, num=0):
        '''
        Initialize with an integer value in range for this width. Floats, strings and
        out-of-range values are refused, never truncated.
        :param num: Integer value, anything operator.index() accepts. Defaults to 0.
        '''
        if self.num_bits is None:
            raise TypeError(f"{self.__class__.__name__} has no bit width, use a sub-type")
        if isinstance(num, (bool, np.bool_)):
            raise TypeError(f"Expected an integer, got {type(num).__name__}")
        int_num = operator.index(num)
        if int_num not in range(self.mask + 1):
            raise ValueError(f"Value {int_num} out-of-range for unsigned {self.num_bits:,d} bits")
        self._num = int_num

    @property
    def num(self):
        '''
        Integer value, read-only so that the range is checked once at construction.
        '''
        return self._num

    @classmethod
    def min_value(cls):
        return cls(0)

    @classmethod
    def max_value(cls):
        if cls.num_bits is None:
            raise TypeError(f"{cls.__name__} has no bit width, use a sub-type")
        return cls(cls.mask)

    @classmethod
    def default(cls):
        return cls.min_value()

    @classmethod
    def from_native(cls, num):
        '''
        Lossless construction from a native unsigned scalar narrow enough that every
        one of its values fits, e.g. np.uint8 for a 12-bit integer.
        '''
        if not isinstance(num, np.unsignedinteger):
            raise TypeError(f"Expected a native unsigned integer, got {type(num).__name__}")
        if not native.is_lossless_into(type(num), cls.num_bits):
            raise TypeError(
                f"{type(num).__name__} does not always fit in {cls.__name__}, use failable_from()")
        return cls(int(num))

    @classmethod
    def failable_from(cls, num):
        '''
        Fallible construction from a native unsigned scalar of any width, or a Python
        int. Returns None when the value does not fit.
        '''
        int_num = native.calc_int(num)
        if int_num not in range(cls.mask + 1):
            logging.debug(f"Value {int_num} out-of-range for {cls.__name__}, not converting.")
            return None
        return cls(int_num)

    @classmethod
    def unchecked_from(cls, num):
        '''
        Same as failable_from(), but raises ValueError when the value does not fit.
        Only for call sites where the range is already known.
        '''
        result = cls.failable_from(num)
        if result is None:
            raise ValueError(f"Value {num} out-of-range for {cls.__name__}")
        return result

    def into(self, target):
        '''
        Lossless conversion to a native unsigned type at least as wide as this integer,
        given as a numpy type or a short name like 'u32'.
        '''
        target = native.resolve_native(target)
        if native.calc_native_bits(target) < self.num_bits:
            raise TypeError(f"{self.__class__.__name__} does not always fit in {target.__name__}")
        return target(self.num)

    def __int__(self):
        return self.num

    def __index__(self):
        return self.num

    def __repr__(self):
        return f"u{self.num_bits}({self.num})"

    def __hash__(self):
        return hash(self.num)

    '''
    Bit counts within the field width. The spare high bits of the backing storage
    are always zero and are discounted where a native count would include them.
    '''
    def count_ones(self):
        return native.count_ones(self.num, self.backing)

    def count_zeros(self):
        return native.count_zeros(self.num, self.backing) - self.num_spare_bits

    def leading_zeros(self):
        return native.count_leading_zeros(self.num, self.backing) - self.num_spare_bits

    def trailing_zeros(self):
        # zero has no set bit, bound it by the field width
        return min(native.count_trailing_zeros(self.num, self.backing), self.num_bits)

    def _operand_num(self, o):
        if not self._is_peer(o):
            raise TypeError(f"Expected {self.__class__.__name__} operand, got {type(o).__name__}")
        return o.num

    def _is_peer(self, o):
        return isinstance(o, FixedUint) and o.num_bits == self.num_bits

    def checked_add(self, o):
        '''
        Computes `self + o`, returning None if overflow occurred.
        '''
        result = self.num + self._operand_num(o)
        if result > self.mask:
            return None
        return self.__class__(result)

    def saturating_add(self, o):
        '''
        Computes `self + o`, clamping at the maximum value instead of overflowing.
        '''
        result = self.checked_add(o)
        if result is None:
            return self.max_value()
        return result

    def wrapping_add(self, o):
        '''
        Computes `self + o` modulo 2 ** num_bits.
        '''
        return self.__class__((self.num + self._operand_num(o)) & self.mask)

    def checked_sub(self, o):
        '''
        Computes `self - o`, returning None if underflow occurred.
        '''
        result = self.num - self._operand_num(o)
        if result < 0:
            return None
        return self.__class__(result)

    def saturating_sub(self, o):
        '''
        Computes `self - o`, clamping at zero instead of underflowing.
        '''
        result = self.checked_sub(o)
        if result is None:
            return self.min_value()
        return result

    def wrapping_sub(self, o):
        '''
        Computes `self - o` modulo 2 ** num_bits, e.g. 0 - 5 is 4091 for 12 bits.
        '''
        return self.__class__((self.num - self._operand_num(o)) & self.mask)

    '''
    Operator forms are for call sites where over- and under-flow is already ruled
    out, and raise OverflowError otherwise. Use the checked methods for anything
    that can fail.
    '''
    def __add__(self, o):
        if not self._is_peer(o):
            return NotImplemented
        result = self.checked_add(o)
        if result is None:
            logging.debug(f"Overflow adding {o!r} to {self!r}.")
            raise OverflowError('arithmetic overflow')
        return result

    def __sub__(self, o):
        if not self._is_peer(o):
            return NotImplemented
        result = self.checked_sub(o)
        if result is None:
            logging.debug(f"Underflow subtracting {o!r} from {self!r}.")
            raise OverflowError('arithmetic underflow')
        return result

    '''
    Comparison dunders cannot overflow, so just implement these with the underlying
    Python int() operators.
    '''
    def __eq__(self, o): return self.num == o.num if self._is_peer(o) else NotImplemented
    def __ne__(self, o): return self.num != o.num if self._is_peer(o) else NotImplemented
    def __lt__(self, o): return self.num < o.num if self._is_peer(o) else NotImplemented
    def __le__(self, o): return self.num <= o.num if self._is_peer(o) else NotImplemented
    def __gt__(self, o): return self.num > o.num if self._is_peer(o) else NotImplemented
    def __ge__(self, o): return self.num >= o.num if self._is_peer(o) else NotImplemented
