#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

from twelve_bit.fixedint import FixedUint


class U12(FixedUint):
    """
    Twelve-bit unsigned integer, from 0 to 4095, for hardware registers and packed
    protocol fields. Backed by a 16-bit native unsigned integer whose top 4 bits
    are always zero.
    """

    __slots__ = ()

    num_bits = 12
    backing = np.uint16


NUM_BITS = U12.num_bits
MASK = U12.mask  # 0xFFF

MIN = U12.min_value()
MAX = U12.max_value()
