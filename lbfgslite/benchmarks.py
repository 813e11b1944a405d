import torch

__all__ = ['rosen', 'rosen_der', 'rosen_evaluate', 'sphere', 'sphere_evaluate']


# =============================
#     Rosenbrock function
# =============================


def rosen(x):
    return torch.sum(100. * (x[1:] - x[:-1]**2)**2 + (1 - x[:-1])**2)


def rosen_der(x):
    xm = x[1:-1]
    xm_m1 = x[:-2]
    xm_p1 = x[2:]
    der = torch.zeros_like(x)
    der[1:-1] = (200 * (xm - xm_m1**2) -
                 400 * (xm_p1 - xm**2) * xm - 2 * (1 - xm))
    der[0] = -400 * x[0] * (x[1] - x[0]**2) - 2 * (1 - x[0])
    der[-1] = 200 * (x[-1] - x[-2]**2)
    return der


def rosen_evaluate(x, g):
    """Evaluator form of the Rosenbrock function: fills g, returns f."""
    g.copy_(rosen_der(x))
    return float(rosen(x))


# =============================
#       Sphere function
# =============================


def sphere(x):
    return x.dot(x)


def sphere_evaluate(x, g):
    """Evaluator form of f(x) = sum(x_i^2)."""
    torch.mul(x, 2., out=g)
    return float(sphere(x))
