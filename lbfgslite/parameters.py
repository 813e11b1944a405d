from collections import namedtuple

from ._optimize import Status

__all__ = ['LBFGSParameter', 'default_parameters', 'check_parameters']


_fields = ['mem_size', 'g_epsilon', 'past', 'delta', 'max_iterations',
           'max_linesearch', 'min_step', 'max_step', 'f_dec_coeff',
           's_curv_coeff', 'xtol']

_defaults = (8, 1e-5, 0, 1e-5, 0, 40, 1e-20, 1e20, 1e-4, 0.9, 1e-16)


# L-BFGS optimization parameters
LBFGSParameter = namedtuple('LBFGSParameter', _fields, defaults=_defaults)
LBFGSParameter.__doc__ = """\
Parameters of the L-BFGS optimizer.

Fields
------
mem_size : int
    Number of correction pairs kept to approximate the inverse hessian.
    Values below 3 are not recommended; large values cost time.
g_epsilon : float
    Convergence tolerance. Minimization stops when
    ``||g|| < g_epsilon * max(1, ||x||)``.
past : int
    Distance (in iterations) for the delta-based stopping test. Zero
    disables the test.
delta : float
    Minimization stops when ``|f' - f| / f < delta`` where f' is the
    objective value `past` iterations ago.
max_iterations : int
    Maximum number of iterations. Zero means iterate until convergence
    or error.
max_linesearch : int
    Maximum number of trials per line search.
min_step : float
    Minimum step of the line search.
max_step : float
    Maximum step of the line search.
f_dec_coeff : float
    Sufficient decrease (Armijo) coefficient of the line search.
s_curv_coeff : float
    Curvature coefficient. Must satisfy ``f_dec_coeff < s_curv_coeff < 1``;
    it is validated but the backtracking search does not test curvature.
xtol : float
    Machine-precision tolerance on the interval of uncertainty. Validated
    but unused by the backtracking search.
"""


def default_parameters():
    """Return the default L-BFGS parameters."""
    return LBFGSParameter()


def check_parameters(n, param):
    """Check the problem size and the parameters for errors.

    Returns 0 when everything is valid, otherwise the (negative)
    :class:`Status` code of the first violation found.
    """
    if n <= 0:
        return Status.INVALID_N
    if param.mem_size <= 0:
        return Status.INVALID_MEMSIZE
    if param.g_epsilon < 0.:
        return Status.INVALID_GEPSILON
    if param.past < 0:
        return Status.INVALID_TESTPERIOD
    if param.delta < 0.:
        return Status.INVALID_DELTA
    if param.min_step < 0.:
        return Status.INVALID_MINSTEP
    if param.max_step < param.min_step:
        return Status.INVALID_MAXSTEP
    if param.f_dec_coeff < 0.:
        return Status.INVALID_FDECCOEFF
    if param.s_curv_coeff <= param.f_dec_coeff or 1. <= param.s_curv_coeff:
        return Status.INVALID_SCURVCOEFF
    if param.xtol < 0.:
        return Status.INVALID_XTOL
    if param.max_linesearch <= 0:
        return Status.INVALID_MAXLINESEARCH
    return 0
