import unittest
import numpy as np
import scipy.special
from numpy.testing import assert_allclose

from specfun import Float64, Float32, Complex128
from specfun.library_functions.polynomials import polevl, ratevl
from specfun.library_functions.lanczos import lanczos_sum_expg_scaled, lanczos_gamma, lanczos_ln_gamma, \
    LANCZOS_G

__author__ = 'Robbert Harms'
__date__ = '2024-02-19'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


class test_Polynomials(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_polevl(self):
        coefficients = np.array([2.0, -3.0, 0.5, 4.0])
        for x in np.linspace(-3, 3, 13):
            assert_allclose(polevl(Float64.cast(x), coefficients, Float64), np.polyval(coefficients, x),
                            rtol=1e-14, atol=1e-14)

    def test_polevl_complex(self):
        coefficients = np.array([1.0, 0.0, 1.0])
        self.assertEqual(polevl(Complex128.cast(1j), coefficients, Complex128), 0)

    def test_polevl_keeps_precision(self):
        self.assertIsInstance(polevl(Float32.cast(0.5), np.array([1.0, 2.0]), Float32), np.float32)

    def test_ratevl(self):
        numerator = np.array([1.0, 2.0, 3.0])
        denominator = np.array([4.0, 0.5, 1.0, 2.0])
        for x in np.concatenate([np.linspace(-0.9, 0.9, 7), np.linspace(1.5, 1e4, 7), -np.geomspace(1.5, 1e100, 7)]):
            expected = np.polyval(numerator, x) / np.polyval(denominator, x)
            assert_allclose(ratevl(Float64.cast(x), numerator, denominator, Float64), expected, rtol=1e-13)


class test_Lanczos(unittest.TestCase):

    def test_gamma(self):
        for x in np.linspace(0.5, 50, 100):
            assert_allclose(lanczos_gamma(Float64.cast(x), Float64), scipy.special.gamma(x), rtol=1e-13)

    def test_ln_gamma(self):
        for x in np.geomspace(0.5, 1e10, 100):
            assert_allclose(lanczos_ln_gamma(Float64.cast(x), Float64), scipy.special.gammaln(x),
                            rtol=1e-13, atol=1e-15)

    def test_sum_definition(self):
        x = 3.7
        expected = scipy.special.gamma(x) / ((x + LANCZOS_G - 0.5) / np.e) ** (x - 0.5)
        assert_allclose(lanczos_sum_expg_scaled(Float64.cast(x), Float64), expected, rtol=1e-13)

    def test_complex_matches_real(self):
        for x in np.linspace(0.5, 30, 20):
            complex_result = lanczos_gamma(Complex128.cast(x), Complex128)
            assert_allclose(complex_result.real, lanczos_gamma(Float64.cast(x), Float64), rtol=1e-13)
