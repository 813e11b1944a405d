"""Dense vector primitives used by the L-BFGS routines.

All vectors are 1-D tensors of equal length. Functions ending in a verb
write into their first argument and return it.
"""
import torch

__all__ = ['vecdot', 'vec2norm', 'vec2norminv', 'vecscale', 'vecadd',
           'veccpy', 'vecncpy', 'vecdiff']


def vecdot(x, y):
    return float(torch.dot(x, y))


def vec2norm(x):
    return float(x.norm())


def vec2norminv(x):
    return 1. / vec2norm(x)


def vecscale(y, c):
    """y *= c"""
    return y.mul_(c)


def vecadd(y, x, c):
    """y += c * x"""
    return y.add_(x, alpha=c)


def veccpy(y, x):
    """y = x"""
    return y.copy_(x)


def vecncpy(y, x):
    """y = -x"""
    return torch.neg(x, out=y)


def vecdiff(z, x, y):
    """z = x - y"""
    return torch.sub(x, y, out=z)
