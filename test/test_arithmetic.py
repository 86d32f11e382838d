# Copyright (C) 2026  RaderFFT Developers
#
# This program is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation; either version 3 of the License, or (at your
# option) any later version.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.
#
# You should have received a copy of the GNU General Public License along
# with this program; if not, write to the Free Software Foundation, Inc.,
# 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
'''
These are the unittests for the element representations in
raderfft.types.
'''

import unittest
import numpy
from numpy import float32, float64, complex64, complex128

from raderfft.types import (cq32, FIXED_FRACBITS, FloatArithmetic,
                            FixedPointArithmetic, get_arithmetic, precision,
                            kind, complex_same_precision_as, to_fixed,
                            from_fixed)


class TestRepresentations(unittest.TestCase):
    def test_precision_and_kind(self):
        self.assertEqual(precision(complex64), 'single')
        self.assertEqual(precision(float64), 'double')
        self.assertEqual(precision(cq32), 'fixed')
        self.assertEqual(kind(float32), 'real')
        self.assertEqual(kind(complex128), 'complex')
        self.assertEqual(kind(cq32), 'fixed')
        with self.assertRaises(TypeError):
            precision(numpy.int8)
        self.assertEqual(complex_same_precision_as(float32),
                         numpy.dtype(complex64))
        self.assertEqual(complex_same_precision_as(float64),
                         numpy.dtype(complex128))

    def test_get_arithmetic(self):
        self.assertIsInstance(get_arithmetic(complex64), FloatArithmetic)
        self.assertIsInstance(get_arithmetic(cq32), FixedPointArithmetic)
        self.assertTrue(get_arithmetic(cq32).fixed)
        with self.assertRaises(TypeError):
            get_arithmetic(float64)


class TestFloatArithmetic(unittest.TestCase):
    def setUp(self):
        self.arith = get_arithmetic(complex64)
        self.a = numpy.array([1 + 2j, -3j, 0.5], dtype=complex64)
        self.b = numpy.array([2, 1 + 1j, -4j], dtype=complex64)

    def test_operations(self):
        numpy.testing.assert_array_equal(self.arith.add(self.a, self.b),
                                         self.a + self.b)
        numpy.testing.assert_array_equal(self.arith.multiply(self.a, self.b),
                                         self.a * self.b)
        numpy.testing.assert_allclose(self.arith.divide(self.a, 2),
                                      self.a / 2)
        self.assertEqual(self.arith.sum(self.a), self.a.sum())

    def test_out_arguments_keep_dtype(self):
        out = self.arith.zeros(3)
        self.arith.multiply(self.a, self.b, out=out)
        self.assertEqual(out.dtype, numpy.dtype(complex64))
        self.arith.divide(out, 3, out=out)
        self.assertEqual(out.dtype, numpy.dtype(complex64))
        self.arith.from_complex(numpy.array([1j, 2, 3]), out=out)
        numpy.testing.assert_array_equal(out, [1j, 2, 3])


class TestFixedPointArithmetic(unittest.TestCase):
    def setUp(self):
        self.arith = get_arithmetic(cq32)
        self.one = 1 << FIXED_FRACBITS

    def test_conversion(self):
        values = numpy.array([0.5 - 0.25j, -1.0, 3.75j, 1e-3 + 1e-3j])
        fixed = to_fixed(values)
        self.assertEqual(fixed.dtype, cq32)
        self.assertEqual(fixed['real'][0], self.one // 2)
        self.assertEqual(fixed['imag'][0], -self.one // 4)
        # each component is rounded to the nearest step
        back = from_fixed(fixed)
        numpy.testing.assert_allclose(back.real, values.real,
                                      rtol=0, atol=0.5 / self.one)
        numpy.testing.assert_allclose(back.imag, values.imag,
                                      rtol=0, atol=0.5 / self.one)

    def test_multiply(self):
        a = to_fixed([0.5 + 0.25j, -1.5])
        b = to_fixed([2 - 1j, 0.5j])
        product = from_fixed(self.arith.multiply(a, b))
        numpy.testing.assert_array_equal(product, [1.25, -0.75j])

    def test_multiply_rounds(self):
        # 1/65536 * 1/2 rounds up to 1/65536
        a = numpy.zeros(1, dtype=cq32)
        a['real'] = 1
        b = to_fixed([0.5])
        self.assertEqual(self.arith.multiply(a, b)['real'][0], 1)

    def test_add_and_saturate(self):
        a = to_fixed([1 + 1j, 30000])
        b = to_fixed([2 - 3j, 30000])
        total = self.arith.add(a, b)
        numpy.testing.assert_array_equal(from_fixed(total)[:1], [3 - 2j])
        self.assertEqual(total['real'][1], numpy.iinfo(numpy.int32).max)

    def test_divide_rounds_half_up(self):
        a = numpy.zeros(3, dtype=cq32)
        a['real'] = [3, -3, 10]
        a['imag'] = [5, -5, 0]
        out = self.arith.divide(a, 2)
        numpy.testing.assert_array_equal(out['real'], [2, -1, 5])
        numpy.testing.assert_array_equal(out['imag'], [3, -2, 0])

    def test_sum_is_scalar(self):
        a = to_fixed([1 + 1j, 2 - 3j, 0.25])
        total = self.arith.sum(a)
        self.assertEqual(total['real'], int(3.25 * self.one))
        self.assertEqual(total['imag'], -2 * self.one)
        out = self.arith.zeros(2)
        out[0] = total
        self.assertEqual(out['real'][0], int(3.25 * self.one))

    def test_add_scalar_element(self):
        a = to_fixed([1, 2j])
        shifted = self.arith.add(a, a[0])
        numpy.testing.assert_array_equal(from_fixed(shifted), [2, 1 + 2j])

    def test_in_place(self):
        a = to_fixed([0.5, 1j])
        self.arith.multiply(a, to_fixed([2, 2]), out=a)
        numpy.testing.assert_array_equal(from_fixed(a), [1, 2j])


if __name__ == '__main__':
    unittest.main()
