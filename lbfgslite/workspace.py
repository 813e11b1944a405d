import torch

__all__ = ['Workspace']


class Workspace(object):
    """Working storage owned by a single optimization run.

    Buffers are handed out by :meth:`vector` and :meth:`scalars` and are
    all released together by :meth:`close`, which runs when the ``with``
    block exits whatever the exit path. ``nalloc`` and ``nfree`` count the
    allocations and releases of the run.
    """
    def __init__(self, like):
        self.dtype = like.dtype
        self.device = like.device
        self._buffers = []
        self.nalloc = 0
        self.nfree = 0
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False

    def _alloc(self, buf):
        if self.closed:
            raise RuntimeError('workspace has already been released.')
        self._buffers.append(buf)
        self.nalloc += 1
        return buf

    def _free(self, buf):
        self.nfree += 1

    def vector(self, n):
        """Allocate a zero-filled vector of length n."""
        return self._alloc(torch.zeros(n, dtype=self.dtype, device=self.device))

    def scalars(self, n):
        """Allocate a zero-filled list of n python floats."""
        return self._alloc([0.] * n)

    def close(self):
        if self.closed:
            return
        while self._buffers:
            self._free(self._buffers.pop())
        self.closed = True
