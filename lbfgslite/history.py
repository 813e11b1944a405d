import numpy as np

from .vecops import vecdot, vecadd, vecdiff, vecncpy, vecscale

__all__ = ['CorrectionPair', 'CorrectionHistory']


class CorrectionPair(object):
    """One (s, y) correction of the limited-memory matrix.

    s = x_{k+1} - x_k, y = g_{k+1} - g_k and ys = y^T s = 1 / rho.
    `alpha` is scratch space of the two-loop recursion.
    """
    __slots__ = ('s', 'y', 'ys', 'alpha')

    def __init__(self, s, y):
        self.s = s
        self.y = y
        self.ys = 0.
        self.alpha = 0.


class CorrectionHistory(object):
    """Fixed-capacity ring buffer of correction pairs.

    The pairs implicitly represent the L-BFGS approximation of the inverse
    hessian. Once `mem_size` pairs have been pushed, each new pair
    overwrites the oldest one.

    Parameters
    ----------
    n : int
        Number of variables.
    mem_size : int
        Capacity of the history.
    workspace : Workspace
        Storage that owns the 2 * mem_size vectors of the pairs.
    """
    def __init__(self, n, mem_size, workspace):
        self.mem_size = mem_size
        self.pairs = [CorrectionPair(workspace.vector(n), workspace.vector(n))
                      for _ in range(mem_size)]
        self.end = 0
        self.bound = 0
        self.yy = 1.

    def __len__(self):
        return self.bound

    def push(self, x, xp, g, gp):
        """Store the correction of the step xp -> x.

        Returns the scalars ys = y^T s and yy = y^T y of the new pair.
        """
        it = self.pairs[self.end]
        vecdiff(it.s, x, xp)
        vecdiff(it.y, g, gp)
        it.ys = vecdot(it.y, it.s)
        self.yy = vecdot(it.y, it.y)
        self.end = (self.end + 1) % self.mem_size
        self.bound = min(self.bound + 1, self.mem_size)
        return it.ys, self.yy

    def newest(self):
        return self.pairs[(self.end - 1) % self.mem_size]

    def newest_to_oldest(self):
        for i in range(1, self.bound + 1):
            yield self.pairs[(self.end - i) % self.mem_size]

    def oldest_to_newest(self):
        for i in range(self.bound, 0, -1):
            yield self.pairs[(self.end - i) % self.mem_size]

    def solve(self, g, d):
        """Two-loop recursion: store d = -H g into `d` and return it.

        Described on page 779 of: Jorge Nocedal, Updating Quasi-Newton
        Matrices with Limited Storage, Mathematics of Computation, Vol. 35,
        No. 151, pp. 773--782, 1980.
        """
        vecncpy(d, g)
        if self.bound == 0:
            return d
        # degenerate curvature (ys = 0 or yy = 0) propagates inf/nan
        with np.errstate(divide='ignore', invalid='ignore'):
            for it in self.newest_to_oldest():
                # alpha_j = rho_j s_j^T q_{j+1}
                it.alpha = float(np.divide(vecdot(it.s, d), it.ys))
                # q_j = q_{j+1} - alpha_j y_j
                vecadd(d, it.y, -it.alpha)
            # initial hessian H_0 = (y^T s / y^T y) I
            vecscale(d, float(np.divide(self.newest().ys, self.yy)))
            for it in self.oldest_to_newest():
                beta = float(np.divide(vecdot(it.y, d), it.ys))
                vecadd(d, it.s, it.alpha - beta)
        return d
