import math
import unittest
from functools import reduce

import numpy as np

from specfun import factorial, factorial2, factorialk, checked_factorial, checked_factorial2, checked_factorialk

__author__ = 'Robbert Harms'
__date__ = '2024-02-20'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


def _multifactorial(n, k):
    return reduce(lambda a, b: a * b, range(n, 0, -k), 1)


class test_Factorial(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_small_values(self):
        self.assertEqual([factorial(n) for n in range(8)], [1, 1, 2, 6, 24, 120, 720, 5040])

    def test_against_math(self):
        for n in range(0, 300, 7):
            self.assertEqual(factorial(n), math.factorial(n))

    def test_negative(self):
        self.assertEqual(factorial(-1), 0)
        self.assertEqual(factorial(-100), 0)

    def test_numpy_integer_input(self):
        self.assertEqual(factorial(np.int32(10)), 3628800)

    def test_checked(self):
        self.assertEqual(checked_factorial(20), 2432902008176640000)
        self.assertIsInstance(checked_factorial(20), np.int64)
        self.assertIsNone(checked_factorial(21))
        self.assertEqual(checked_factorial(12, dtype=np.int32), 479001600)
        self.assertIsNone(checked_factorial(13, dtype=np.int32))
        self.assertEqual(checked_factorial(-3), 0)


class test_DoubleFactorial(unittest.TestCase):

    def test_values(self):
        self.assertEqual([factorial2(n) for n in range(9)], [1, 1, 2, 3, 8, 15, 48, 105, 384])
        for n in range(0, 120):
            self.assertEqual(factorial2(n), _multifactorial(n, 2))

    def test_negative(self):
        self.assertEqual(factorial2(-1), 0)
        self.assertEqual(factorial2(-2), 0)

    def test_checked(self):
        self.assertEqual(checked_factorial2(33), 6332659870762850625)
        self.assertIsNone(checked_factorial2(34))
        self.assertIsNone(checked_factorial2(34, dtype=np.uint64))
        self.assertEqual(checked_factorial2(33, dtype=np.uint64), 6332659870762850625)


class test_MultiFactorial(unittest.TestCase):

    def test_values(self):
        self.assertEqual(factorialk(10, 3), 280)
        self.assertEqual(factorialk(5, 10), 5)
        self.assertEqual(factorialk(0, 4), 1)
        for k in range(1, 6):
            for n in range(0, 200, 3):
                self.assertEqual(factorialk(n, k), _multifactorial(n, k))

    def test_consistent_with_specialisations(self):
        for n in range(60):
            self.assertEqual(factorialk(n, 1), factorial(n))
            self.assertEqual(factorialk(n, 2), factorial2(n))

    def test_negative(self):
        self.assertEqual(factorialk(-5, 3), 0)

    def test_invalid_step(self):
        self.assertRaises(ValueError, factorialk, 5, 0)
        self.assertRaises(ValueError, factorialk, 5, -1)
        self.assertRaises(ValueError, checked_factorialk, 5, 0)

    def test_checked(self):
        self.assertEqual(checked_factorialk(10, 3), 280)
        self.assertIsNone(checked_factorialk(60, 3))
