from functools import reduce
import torch
from torch.optim import Optimizer

from ..parameters import LBFGSParameter


class Minimizer(Optimizer):
    """A PyTorch optimizer that runs a full L-BFGS minimization per step.

    .. warning::
        This optimizer doesn't support per-parameter options and parameter
        groups (there can be only one).

    .. warning::
        All parameters must share a single device and dtype.

    Parameters
    ----------
    params : iterable
        An iterable of :class:`torch.Tensor` s. Specifies what Tensors
        should be optimized.
    disp : int or bool
        Display (verbosity) level passed to
        :func:`lbfgslite.lbfgs_optimize()`.
    **lbfgs_kwargs : dict
        Fields of :class:`lbfgslite.LBFGSParameter` overriding the defaults.

    """
    def __init__(self, params, disp=0, **lbfgs_kwargs):
        unknown = set(lbfgs_kwargs) - set(LBFGSParameter._fields)
        if unknown:
            raise ValueError('Unknown option(s) {}'.format(sorted(unknown)))

        defaults = dict(disp=disp, **lbfgs_kwargs)
        super().__init__(params, defaults)

        if len(self.param_groups) != 1:
            raise ValueError("Minimizer doesn't support per-parameter options")

        self._nfev = [0]
        self._params = self.param_groups[0]['params']
        self._numel_cache = None
        self._closure = None
        self._result = None

    @property
    def nfev(self):
        return self._nfev[0]

    @property
    def result(self):
        """The :class:`OptimizeResult` of the last call to :meth:`step`."""
        return self._result

    def _numel(self):
        if self._numel_cache is None:
            self._numel_cache = reduce(lambda total, p: total + p.numel(), self._params, 0)
        return self._numel_cache

    def _gather_flat_param(self):
        return torch.cat([p.data.view(-1) for p in self._params])

    def _gather_flat_grad(self):
        grads = []
        for p in self._params:
            if p.grad is None:
                g = p.new_zeros(p.numel())
            elif p.grad.is_sparse:
                g = p.grad.to_dense().view(-1)
            else:
                g = p.grad.view(-1)
            grads.append(g)
        return torch.cat(grads)

    def _set_flat_param(self, value):
        offset = 0
        for p in self._params:
            numel = p.numel()
            p.copy_(value[offset:offset+numel].view_as(p))
            offset += numel
        assert offset == self._numel()

    def evaluate(self, x, g):
        """Evaluator callback: set the parameters to `x`, store the gradient
        of the closure's loss into `g` and return the loss."""
        assert self._closure is not None
        self._set_flat_param(x)
        self.zero_grad()
        with torch.enable_grad():
            f = self._closure()
            f.backward()
        g.copy_(self._gather_flat_grad())
        return float(f)

    @torch.no_grad()
    def step(self, closure):
        """Minimize the loss returned by `closure` over the parameters.

        The function "closure" should have a slightly different
        form vs. the PyTorch standard: namely, it should not include any
        `backward()` calls. Backward steps will be performed internally
        by the optimizer.

        >>> def closure():
        >>>    output = model(input)
        >>>    loss = loss_fn(output, target)
        >>>    # loss.backward() <-- skip this step!
        >>>    return loss

        Parameters
        ----------
        closure : callable
            A function that re-evaluates the model and returns the loss.

        """
        from lbfgslite.lbfgs import lbfgs_optimize

        # sanity check
        assert len(self.param_groups) == 1

        # overwrite closure
        closure_ = closure
        def closure():
            self._nfev[0] += 1
            return closure_()
        self._closure = closure

        # get initial value
        x0 = self._gather_flat_param()

        # perform parameter update
        kwargs = {k: v for k, v in self.param_groups[0].items() if k != 'params'}
        self._result = lbfgs_optimize(x0, self.evaluate, **kwargs)

        # set final value
        self._set_flat_param(x0)

        return self._result.fun
