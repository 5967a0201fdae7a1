import unittest
import numpy as np
from numpy.testing import assert_allclose

from specfun import Float64, Float32, Complex128
from specfun.library_functions.trigonometric import sin_pi, cos_pi, sin_pi_complex, log_sin_pi_complex

__author__ = 'Robbert Harms'
__date__ = '2024-02-19'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


class test_SinPi(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_against_numpy(self):
        for x in np.linspace(-5, 5, 203):
            assert_allclose(sin_pi(Float64.cast(x), Float64), np.sin(np.pi * x), atol=1e-14)
            assert_allclose(cos_pi(Float64.cast(x), Float64), np.cos(np.pi * x), atol=1e-14)

    def test_exact_zeros(self):
        for n in range(-20, 21):
            self.assertEqual(sin_pi(Float64.cast(n), Float64), 0)
            self.assertEqual(cos_pi(Float64.cast(n + 0.5), Float64), 0)
        self.assertEqual(sin_pi(Float64.cast(2.0 ** 60), Float64), 0)

    def test_exact_extrema(self):
        self.assertEqual(sin_pi(Float64.cast(0.5), Float64), 1)
        self.assertEqual(sin_pi(Float64.cast(-0.5), Float64), -1)
        self.assertEqual(sin_pi(Float64.cast(1000.5), Float64), 1)
        self.assertEqual(cos_pi(Float64.cast(3.0), Float64), -1)

    def test_large_arguments(self):
        x = 1e6 + 0.25
        assert_allclose(sin_pi(Float64.cast(x), Float64), np.sqrt(0.5), rtol=1e-15)

    def test_signed_zero(self):
        self.assertTrue(np.signbit(sin_pi(Float64.cast(-0.0), Float64)))

    def test_non_finite(self):
        self.assertTrue(np.isnan(sin_pi(Float64.inf, Float64)))
        self.assertTrue(np.isnan(cos_pi(Float64.nan, Float64)))

    def test_single_precision(self):
        self.assertIsInstance(sin_pi(Float32.cast(0.3), Float32), np.float32)
        self.assertEqual(sin_pi(Float32.cast(3), Float32), 0)


class test_ComplexSinPi(unittest.TestCase):

    def test_against_numpy(self):
        for a in np.linspace(-3, 3, 13):
            for b in np.linspace(-3, 3, 7):
                z = complex(a, b)
                assert_allclose(sin_pi_complex(Complex128.cast(z), Complex128), np.sin(np.pi * z),
                                rtol=1e-13, atol=1e-13)

    def test_log_against_numpy(self):
        for a in np.linspace(-3.1, 3.1, 13):
            for b in np.concatenate([np.linspace(-20, -0.5, 8), np.linspace(0.5, 20, 8)]):
                z = complex(a, b)
                assert_allclose(log_sin_pi_complex(Complex128.cast(z), Complex128), np.log(np.sin(np.pi * z)),
                                rtol=1e-12, atol=1e-12)

    def test_log_large_imaginary(self):
        result = log_sin_pi_complex(Complex128.cast(complex(0.25, 400)), Complex128)
        assert_allclose(result.real, np.pi * 400 - np.log(2), rtol=1e-15)
        assert_allclose(result.imag, np.pi / 2 - np.pi * 0.25, rtol=1e-15)
