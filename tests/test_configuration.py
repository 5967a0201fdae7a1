import threading
import unittest
import numpy as np

from specfun import gamma, gamma_complex, erf
from specfun.configuration import config_context, RuntimeConfigurationAction, VoidConfigurationAction, \
    use_double_precision, set_use_double_precision, get_default_numeric_type, get_default_complex_type
from specfun.lib.numeric_types import Float32, Float64, Complex64, Complex128

__author__ = 'Robbert Harms'
__date__ = '2024-02-20'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


class test_Configuration(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_defaults(self):
        self.assertTrue(use_double_precision())
        self.assertIs(get_default_numeric_type(), Float64)
        self.assertIs(get_default_complex_type(), Complex128)

    def test_config_context(self):
        with config_context(RuntimeConfigurationAction(double_precision=False)):
            self.assertFalse(use_double_precision())
            self.assertIs(get_default_numeric_type(), Float32)
            self.assertIs(get_default_complex_type(), Complex64)
            self.assertIsInstance(gamma(3.5), np.float32)
            self.assertIsInstance(erf(0.5), np.float32)
            self.assertIsInstance(gamma_complex(1 + 1j), np.complex64)
        self.assertTrue(use_double_precision())
        self.assertIsInstance(gamma(3.5), np.float64)

    def test_numpy_input_ignores_configuration(self):
        with config_context(RuntimeConfigurationAction(double_precision=False)):
            self.assertIsInstance(gamma(np.float64(3.5)), np.float64)
        self.assertIsInstance(gamma(np.float32(3.5)), np.float32)

    def test_context_restores_on_error(self):
        try:
            with config_context(RuntimeConfigurationAction(double_precision=False)):
                raise RuntimeError()
        except RuntimeError:
            pass
        self.assertTrue(use_double_precision())

    def test_nested_contexts(self):
        with config_context(RuntimeConfigurationAction(double_precision=False)):
            with config_context(RuntimeConfigurationAction(double_precision=True)):
                self.assertTrue(use_double_precision())
            self.assertFalse(use_double_precision())
        self.assertTrue(use_double_precision())

    def test_unset_option_is_kept(self):
        with config_context(RuntimeConfigurationAction(double_precision=False)):
            with config_context(RuntimeConfigurationAction()):
                self.assertFalse(use_double_precision())

    def test_void_action(self):
        with config_context(VoidConfigurationAction()):
            self.assertTrue(use_double_precision())

    def test_persistent_change(self):
        try:
            set_use_double_precision(False)
            self.assertFalse(use_double_precision())
        finally:
            set_use_double_precision(True)
        self.assertTrue(use_double_precision())

    def test_context_is_local_to_thread(self):
        entered = threading.Event()
        release = threading.Event()
        results = {}

        def single_precision_worker():
            with config_context(RuntimeConfigurationAction(double_precision=False)):
                results['worker'] = gamma(4.5)
                entered.set()
                release.wait(10)

        worker = threading.Thread(target=single_precision_worker)
        worker.start()
        try:
            self.assertTrue(entered.wait(10))
            self.assertTrue(use_double_precision())
            results['main'] = gamma(4.5)
        finally:
            release.set()
            worker.join()

        self.assertIsInstance(results['worker'], np.float32)
        self.assertIsInstance(results['main'], np.float64)
        self.assertEqual(results['main'], gamma(4.5))

    def test_shared_action_across_threads(self):
        action = RuntimeConfigurationAction(double_precision=False)
        barrier = threading.Barrier(2)
        results = []

        def worker():
            with config_context(action):
                barrier.wait(10)
                results.append(use_double_precision())
            results.append(use_double_precision())

        threads = [threading.Thread(target=worker) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(sorted(results), [False, False, True, True])
