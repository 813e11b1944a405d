import torch

__all__ = ['Callbacks']


class Callbacks(object):
    """User callbacks of an L-BFGS run.

    Wraps the required evaluator and the optional step-bound and progress
    functions behind a single interface. Missing optional callbacks behave
    as no-ops: the step bound defaults to the caller's maximum step and the
    progress report never cancels.

    Parameters
    ----------
    evaluate : callable
        ``evaluate(x, g) -> f``. Must fill `g` with the gradient at `x`
        and return the objective value.
    stepbound : callable, optional
        ``stepbound(xp, d) -> float``. Upper bound on the step along `d`
        from `xp`.
    progress : callable, optional
        ``progress(x, g, fx, xnorm, gnorm, step, n, k, ls) -> int``.
        A truthy return value cancels the minimization.
    """
    def __init__(self, evaluate, stepbound=None, progress=None):
        if not callable(evaluate):
            raise ValueError('evaluate must be callable.')
        self._evaluate = evaluate
        self._stepbound = stepbound
        self._progress = progress
        self.nfev = 0

    def evaluate(self, x, g):
        f = self._evaluate(x, g)
        if isinstance(f, torch.Tensor):
            if f.numel() != 1:
                raise RuntimeError('Callbacks was supplied an evaluator '
                                   'that does not return scalar outputs.')
            f = f.item()
        self.nfev += 1

        return float(f)

    def stepbound(self, xp, d, max_step):
        if self._stepbound is None:
            return max_step
        bound = float(self._stepbound(xp, d))
        # a NaN bound falls back to max_step
        return bound if bound < max_step else max_step

    def progress(self, x, g, fx, xnorm, gnorm, step, n, k, ls):
        if self._progress is None:
            return 0
        return self._progress(x, g, fx, xnorm, gnorm, step, n, k, ls)
