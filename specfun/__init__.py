import logging
from logging import NullHandler
from .__version__ import VERSION, VERSION_STATUS, __version__
from specfun.lib.numeric_types import Float32, Float64, Complex64, Complex128, get_numeric_type, \
    get_numeric_type_by_name
from specfun.library_functions import gamma, ln_gamma, gamma_sign, rgamma, poch, gamma_complex, \
    ln_gamma_complex, erf, erfc, factorial, factorial2, factorialk, checked_factorial, checked_factorial2, \
    checked_factorialk, comb, comb_rep, perm, checked_comb, checked_comb_rep, checked_perm, bernoulli, \
    tangent_numbers, secant_numbers, GammaDomain, classify_gamma_argument

__author__ = 'Robbert Harms'
__date__ = '2024-02-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


logging.getLogger(__name__).addHandler(NullHandler())
