#!/usr/bin/env python
# -*- coding: utf-8 -*-

import unittest

import numpy as np

import twelve_bit.native as native


class NativeTestCase(unittest.TestCase):

    def test_resolve_native(self):
        self.assertIs(native.resolve_native('u16'), np.uint16)
        self.assertIs(native.resolve_native(np.uint32), np.uint32)
        self.assertIs(native.resolve_native(np.dtype('uint8')), np.uint8)
        for bad in ('i16', np.int16, np.float32, int):
            with self.assertRaises(TypeError):
                native.resolve_native(bad)

    def test_widths(self):
        self.assertEqual(native.calc_native_bits('u8'), 8)
        self.assertEqual(native.calc_native_bits(np.uint64), 64)
        self.assertEqual(native.calc_native_max(np.uint16), 0xFFFF)

    def test_backing(self):
        self.assertIs(native.calc_backing_native(1), np.uint8)
        self.assertIs(native.calc_backing_native(12), np.uint16)
        self.assertIs(native.calc_backing_native(17), np.uint32)
        self.assertIs(native.calc_backing_native(64), np.uint64)
        with self.assertRaises(ValueError):
            native.calc_backing_native(65)

    def test_lossless(self):
        self.assertTrue(native.is_lossless_into(np.uint8, 12))
        self.assertFalse(native.is_lossless_into(np.uint16, 12))
        self.assertFalse(native.is_lossless_into('usize', 12))

    def test_calc_int(self):
        self.assertEqual(native.calc_int(np.uint16(7)), 7)
        self.assertEqual(native.calc_int(-3), -3)
        for bad in (np.int8(1), False, 1.0, '1'):
            with self.assertRaises(TypeError):
                native.calc_int(bad)

    def test_bit_counts(self):
        # counts over the full native width, spare bits included
        self.assertEqual(native.count_ones(0xFFF, np.uint16), 12)
        self.assertEqual(native.count_zeros(0xFFF, np.uint16), 4)
        self.assertEqual(native.count_leading_zeros(0xFFF, np.uint16), 4)
        self.assertEqual(native.count_leading_zeros(0, np.uint16), 16)
        self.assertEqual(native.count_trailing_zeros(0, np.uint16), 16)
        self.assertEqual(native.count_trailing_zeros(0b1000, np.uint16), 3)

    def test_bit_counts_never_truncate(self):
        with self.assertRaises(OverflowError):
            native.count_ones(0x10000, np.uint16)


if __name__ == '__main__':
    unittest.main()
