import unittest
from fractions import Fraction

import numpy as np
import scipy.special
from numpy.testing import assert_allclose

from specfun import bernoulli, tangent_numbers, secant_numbers

__author__ = 'Robbert Harms'
__date__ = '2024-02-20'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


class test_Bernoulli(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_exact(self):
        numbers = bernoulli(12, exact=True)
        self.assertEqual(len(numbers), 13)
        self.assertEqual(numbers[0], 1)
        self.assertEqual(numbers[1], Fraction(-1, 2))
        self.assertEqual(numbers[2], Fraction(1, 6))
        self.assertEqual(numbers[4], Fraction(-1, 30))
        self.assertEqual(numbers[6], Fraction(1, 42))
        self.assertEqual(numbers[12], Fraction(-691, 2730))
        self.assertTrue(all(b == 0 for b in numbers[3::2]))

    def test_floating_point(self):
        numbers = bernoulli(30)
        self.assertEqual(numbers.dtype, np.float64)
        assert_allclose(numbers, [float(b) for b in bernoulli(30, exact=True)], rtol=0)
        assert_allclose(numbers, scipy.special.bernoulli(30), rtol=1e-10)

    def test_zero(self):
        self.assertEqual(list(bernoulli(0)), [1.0])

    def test_invalid(self):
        self.assertRaises(ValueError, bernoulli, -1)
        self.assertRaises(ValueError, bernoulli, 2.5)


class test_TangentSecant(unittest.TestCase):

    def test_tangent(self):
        self.assertEqual(tangent_numbers(5), [1, 2, 16, 272, 7936])
        self.assertEqual(tangent_numbers(10)[-1], 29088885112832)

    def test_secant(self):
        self.assertEqual(secant_numbers(6), [1, 1, 5, 61, 1385, 50521])
        self.assertEqual(secant_numbers(8)[-1], 199360981)

    def test_tangent_bernoulli_relation(self):
        tangents = tangent_numbers(10)
        bernoullis = bernoulli(20, exact=True)
        for k in range(1, 11):
            expected = abs(bernoullis[2 * k]) * 2 ** (2 * k) * (2 ** (2 * k) - 1) / (2 * k)
            self.assertEqual(tangents[k - 1], expected)

    def test_empty(self):
        self.assertEqual(tangent_numbers(0), [])
        self.assertEqual(secant_numbers(0), [])

    def test_invalid(self):
        self.assertRaises(ValueError, tangent_numbers, -1)
        self.assertRaises(ValueError, secant_numbers, -2)
