# **** Optimization Utilities ****
#
# This module contains the return codes of `lbfgs_optimize` and their
# standard status messages.
from enum import IntEnum

__all__ = ['Status', 'status_message']


class Status(IntEnum):
    """Return codes of :func:`lbfgslite.lbfgs_optimize`.

    Non-negative codes are successful (or benign) stops; negative codes are
    errors. The integer values are stable.
    """
    CONVERGENCE = 0
    STOP = 1
    ALREADY_MINIMIZED = 2

    UNKNOWNERROR = -1024
    LOGICERROR = -1023
    CANCELED = -1022
    INVALID_N = -1021
    INVALID_MEMSIZE = -1020
    INVALID_GEPSILON = -1019
    INVALID_TESTPERIOD = -1018
    INVALID_DELTA = -1017
    INVALID_MINSTEP = -1016
    INVALID_MAXSTEP = -1015
    INVALID_FDECCOEFF = -1014
    INVALID_SCURVCOEFF = -1013
    INVALID_XTOL = -1012
    INVALID_MAXLINESEARCH = -1011
    OUTOFINTERVAL = -1010
    INCORRECT_TMINMAX = -1009
    ROUNDING_ERROR = -1008
    MINIMUMSTEP = -1007
    MAXIMUMSTEP = -1006
    MAXIMUMLINESEARCH = -1005
    MAXIMUMITERATION = -1004
    WIDTHTOOSMALL = -1003
    INVALIDPARAMETERS = -1002
    INCREASEGRADIENT = -1001


# standard status messages of the optimizer
_status_message = {
    Status.CONVERGENCE:
        'Success: reached convergence (g_epsilon).',
    Status.STOP:
        'Success: met stopping criteria (past f decrease less than delta).',
    Status.ALREADY_MINIMIZED:
        'The initial variables already minimize the objective function.',
    Status.UNKNOWNERROR:
        'Unknown error.',
    Status.LOGICERROR:
        'Logic error.',
    Status.CANCELED:
        'The minimization process has been canceled.',
    Status.INVALID_N:
        'Invalid number of variables specified.',
    Status.INVALID_MEMSIZE:
        'Invalid parameter lbfgs_parameter_t::mem_size specified.',
    Status.INVALID_GEPSILON:
        'Invalid parameter lbfgs_parameter_t::g_epsilon specified.',
    Status.INVALID_TESTPERIOD:
        'Invalid parameter lbfgs_parameter_t::past specified.',
    Status.INVALID_DELTA:
        'Invalid parameter lbfgs_parameter_t::delta specified.',
    Status.INVALID_MINSTEP:
        'Invalid parameter lbfgs_parameter_t::min_step specified.',
    Status.INVALID_MAXSTEP:
        'Invalid parameter lbfgs_parameter_t::max_step specified.',
    Status.INVALID_FDECCOEFF:
        'Invalid parameter lbfgs_parameter_t::f_dec_coeff specified.',
    Status.INVALID_SCURVCOEFF:
        'Invalid parameter lbfgs_parameter_t::s_curv_coeff specified.',
    Status.INVALID_XTOL:
        'Invalid parameter lbfgs_parameter_t::xtol specified.',
    Status.INVALID_MAXLINESEARCH:
        'Invalid parameter lbfgs_parameter_t::max_linesearch specified.',
    Status.OUTOFINTERVAL:
        'The line-search step went out of the interval of uncertainty.',
    Status.INCORRECT_TMINMAX:
        'A logic error occurred; alternatively, the interval of uncertainty'
        ' became too small.',
    Status.ROUNDING_ERROR:
        'A rounding error occurred; alternatively, no line-search step'
        ' satisfies the sufficient decrease and curvature conditions.',
    Status.MINIMUMSTEP:
        'The line-search step became smaller than lbfgs_parameter_t::min_step.',
    Status.MAXIMUMSTEP:
        'The line-search step became larger than lbfgs_parameter_t::max_step.',
    Status.MAXIMUMLINESEARCH:
        'The line-search routine reaches the maximum number of evaluations.',
    Status.MAXIMUMITERATION:
        'The algorithm routine reaches the maximum number of iterations.',
    Status.WIDTHTOOSMALL:
        'Relative width of the interval of uncertainty is at most'
        ' lbfgs_parameter_t::xtol.',
    Status.INVALIDPARAMETERS:
        'A logic error (negative line-search step) occurred.',
    Status.INCREASEGRADIENT:
        'The current search direction increases the objective function value.',
}


def status_message(status):
    """Get the string description of an `lbfgs_optimize` return code.

    Unrecognized values map to ``'(unknown)'``.
    """
    try:
        return _status_message[Status(status)]
    except (ValueError, TypeError):
        return '(unknown)'
