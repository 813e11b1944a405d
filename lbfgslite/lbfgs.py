import numpy as np
import torch
from scipy.optimize import OptimizeResult

from ._optimize import Status, status_message
from .function import Callbacks
from .history import CorrectionHistory
from .line_search import backtracking
from .parameters import default_parameters, check_parameters
from .vecops import vec2norm, vec2norminv, veccpy, vecncpy
from .workspace import Workspace

__all__ = ['lbfgs_optimize']


def _as_flat_tensor(x):
    if isinstance(x, np.ndarray):
        # shares memory so that the caller's array is updated in place
        x = torch.from_numpy(x)
    elif not isinstance(x, torch.Tensor):
        raise ValueError('x must be a Tensor or a numpy array, got {}.'
                         .format(type(x).__name__))
    if not x.is_floating_point():
        raise ValueError('x must have a floating point dtype.')
    if not x.is_contiguous():
        raise ValueError('x must be contiguous to be updated in place.')
    return x.view(-1)


def _make_parameters(param, options):
    if param is None:
        param = default_parameters()
    unknown = set(options) - set(param._fields)
    if unknown:
        raise ValueError('invalid option(s) {}.'.format(sorted(unknown)))
    return param._replace(**options)


def _lbfgs_loop(x, g, cb, param, ws, disp):
    """Run the L-BFGS iterations on the flat vector `x` (in place).

    Returns the final status, objective value and iteration count.
    """
    n = x.numel()
    past = param.past

    xp = ws.vector(n)
    gp = ws.vector(n)
    d = ws.vector(n)
    lm = CorrectionHistory(n, param.mem_size, ws)
    pf = ws.scalars(past) if past > 0 else None

    # compute initial f(x) and f'(x)
    fx = cb.evaluate(x, g)
    if pf is not None:
        pf[0] = fx
    if disp > 1:
        print('initial fval: %0.4f' % fx)

    # initial direction, assuming the identity as initial inverse hessian
    vecncpy(d, g)

    # make sure that the initial variables are not a minimizer
    xnorm = max(vec2norm(x), 1.)
    gnorm = vec2norm(g)
    if gnorm / xnorm <= param.g_epsilon:
        return Status.ALREADY_MINIMIZED, fx, 0

    # initial step: 1 / ||d||
    step = vec2norminv(d)
    k = 1

    while True:
        # step bounds, possibly tightened by the user
        step_min = param.min_step
        step_max = cb.stepbound(x, d, param.max_step)
        if step >= step_max:
            step = step_max / 2.

        # store the current position and gradient
        veccpy(xp, x)
        veccpy(gp, g)

        ls = backtracking(cb.evaluate, x, g, fx, step, d, xp, gp,
                          step_min, step_max, param)
        if ls.status < 0:
            # revert to the previous point
            veccpy(x, xp)
            veccpy(g, gp)
            return ls.status, fx, k - 1
        fx, step = ls.f, ls.t

        xnorm = vec2norm(x)
        gnorm = vec2norm(g)
        if disp > 1:
            print('iter %3d - fval: %0.4f' % (k, fx))

        if cb.progress(x, g, fx, xnorm, gnorm, step, n, k, ls.nevals):
            return Status.CANCELED, fx, k

        # convergence by 1st-order optimality: |g| / max(1, |x|) <= g_epsilon
        if gnorm / max(xnorm, 1.) <= param.g_epsilon:
            return Status.CONVERGENCE, fx, k

        # stopping criterion: |f(past_x) - f(x)| / f(x) < delta
        if pf is not None:
            # not tested while k < past
            if past <= k and fx != 0.:
                rate = (pf[k % past] - fx) / fx
                if abs(rate) < param.delta:
                    return Status.STOP, fx, k
            pf[k % past] = fx

        if param.max_iterations != 0 and param.max_iterations < k + 1:
            return Status.MAXIMUMITERATION, fx, k

        # update the limited memory with s = x - xp, y = g - gp
        lm.push(x, xp, g, gp)
        k += 1

        # new direction d = -H g; try step = 1 first
        lm.solve(g, d)
        step = 1.


@torch.no_grad()
def lbfgs_optimize(x, evaluate, stepbound=None, progress=None, param=None,
                   disp=0, **options):
    """Minimize a function with L-BFGS and a backtracking line search.

    The variables `x` are updated in place; on return they hold the best
    point found. Expected failures (invalid parameters, line search
    failures, cancellation, iteration limit) are reported through the
    `status` of the result and never raised.

    Parameters
    ----------
    x : Tensor or ndarray
        Initial point, overwritten with the final point. Must be a
        contiguous floating point array of any shape; it is seen as a
        vector of ``n = x.numel()`` variables.
    evaluate : callable
        ``evaluate(x, g) -> f``. Fills `g` with the gradient at `x` and
        returns the objective value. Both are 1-D tensors of length n.
    stepbound : callable, optional
        ``stepbound(xp, d) -> float``. Called before each line search with
        the current point and search direction; returns an upper bound on
        the step length. The bound never exceeds ``param.max_step``.
    progress : callable, optional
        ``progress(x, g, fx, xnorm, gnorm, step, n, k, ls) -> int``.
        Called after each iteration. A truthy return value cancels the
        minimization.
    param : LBFGSParameter, optional
        Optimization parameters. Defaults to :func:`default_parameters`.
    disp : int or bool
        Display (verbosity) level. Set to >0 to print status messages.
    **options
        Overrides of individual fields of `param`.

    Returns
    -------
    result : OptimizeResult
        Result of the optimization routine. ``status`` is a :class:`Status`
        and ``success`` is true for non-negative codes.
    """
    disp = int(disp)
    param = _make_parameters(param, options)
    x_flat = _as_flat_tensor(x)
    n = x_flat.numel()

    status = check_parameters(n, param)
    if status != 0:
        if disp:
            print(status_message(status))
        return OptimizeResult(fun=None, x=x, grad=None, status=status,
                              success=False, message=status_message(status),
                              nit=0, nfev=0)

    cb = Callbacks(evaluate, stepbound, progress)
    g = torch.zeros_like(x_flat)
    with Workspace(x_flat) as ws:
        status, fx, nit = _lbfgs_loop(x_flat, g, cb, param, ws, disp)

    msg = status_message(status)
    if disp:
        print(msg)
        print("         Current function value: %f" % fx)
        print("         Iterations: %d" % nit)
        print("         Function evaluations: %d" % cb.nfev)

    return OptimizeResult(fun=fx, x=x, grad=g.view(tuple(x.shape)),
                          status=status, success=(status >= 0), message=msg,
                          nit=nit, nfev=cb.nfev)
