from specfun.library_functions.gamma import gamma, ln_gamma, gamma_sign, rgamma, poch, GammaDomain, \
    classify_gamma_argument
from specfun.library_functions.complex_gamma import gamma_complex, ln_gamma_complex
from specfun.library_functions.error_functions import erf, erfc
from specfun.library_functions.factorial import factorial, factorial2, factorialk, checked_factorial, \
    checked_factorial2, checked_factorialk
from specfun.library_functions.combinatorics import comb, comb_rep, perm, checked_comb, checked_comb_rep, \
    checked_perm
from specfun.library_functions.number_sequences import bernoulli, tangent_numbers, secant_numbers

__author__ = 'Robbert Harms'
__date__ = '2024-02-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'
