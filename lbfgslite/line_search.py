from collections import namedtuple

from ._optimize import Status
from .vecops import vecdot, veccpy, vecadd

__all__ = ['ls_value', 'backtracking']


# line search result
ls_value = namedtuple('ls_value', ['f', 't', 'nevals', 'status'])


def backtracking(evaluate, x, g, f, t, d, xp, gp, tmin, tmax, param):
    """Backtracking line search with the Armijo condition.

    Starting from step `t`, tries x = xp + t * d and halves t until

        f(x) <= f(xp) + f_dec_coeff * t * gp^T d

    `x` and `g` are overwritten with the last trial point and its gradient.
    Expects `evaluate` to take arguments {x, g}, fill g with f'(x) and
    return f(x).

    Returns
    -------
    result : ls_value
        The objective value at `x`, the final step, the number of function
        evaluations and a status that is 0 on success or a negative
        :class:`Status` code.
    """
    dec = 0.5
    count = 0

    if t <= 0.:
        return ls_value(f, t, count, Status.INVALIDPARAMETERS)

    # initial gradient in the search direction
    dginit = vecdot(gp, d)

    # make sure that d points to a descent direction
    if dginit >= 0.:
        return ls_value(f, t, count, Status.INCREASEGRADIENT)

    finit = f
    dgtest = param.f_dec_coeff * dginit

    while True:
        veccpy(x, xp)
        vecadd(x, d, t)
        f = float(evaluate(x, g))
        count += 1

        if f <= finit + t * dgtest:
            return ls_value(f, t, count, 0)
        if t < tmin:
            return ls_value(f, t, count, Status.MINIMUMSTEP)
        if t > tmax:
            return ls_value(f, t, count, Status.MAXIMUMSTEP)
        if param.max_linesearch <= count:
            return ls_value(f, t, count, Status.MAXIMUMLINESEARCH)

        t *= dec
