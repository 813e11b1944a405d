import argparse
import torch

from lbfgslite import lbfgs_optimize, status_message
from lbfgslite.benchmarks import rosen_evaluate


def progress(x, g, fx, xnorm, gnorm, step, n, k, ls):
    print('Iteration {}:'.format(k))
    print('  fx = {:.6f}, x[0] = {:.6f}, x[1] = {:.6f}'.format(fx, x[0], x[1]))
    print('  xnorm = {:.6f}, gnorm = {:.6f}, step = {:.6f}, ls = {}'
          .format(xnorm, gnorm, step, ls))
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--n', type=int, default=10,
                        help='number of variables')
    parser.add_argument('--mem_size', type=int, default=8,
                        help='number of correction pairs')
    parser.add_argument('--max_step', type=float, default=None,
                        help='bound on the step along each search direction')
    parser.add_argument('--quiet', action='store_true',
                        help='whether to run in quiet mode (no progress printing)')
    args = parser.parse_args()

    # classic starting point (-1.2, 1, -1.2, 1, ...)
    x = torch.ones(args.n, dtype=torch.float64)
    x[::2] = -1.2

    stepbound = None
    if args.max_step is not None:
        stepbound = lambda xp, d: args.max_step / float(d.norm())

    result = lbfgs_optimize(x, rosen_evaluate, stepbound=stepbound,
                            progress=None if args.quiet else progress,
                            mem_size=args.mem_size, past=3, delta=1e-8)

    print('L-BFGS optimization terminated with status code = {}'
          .format(int(result.status)))
    print('  {}'.format(status_message(result.status)))
    print('  fx = {:.6f}, x[0] = {:.6f}, x[1] = {:.6f}'
          .format(result.fun, x[0], x[1]))
