import torch

from lbfgslite import Status, default_parameters
from lbfgslite.benchmarks import sphere_evaluate
from lbfgslite.line_search import backtracking


def _setup(xp_values):
    xp = torch.tensor(xp_values, dtype=torch.float64)
    gp = torch.empty_like(xp)
    fp = sphere_evaluate(xp, gp)
    x = torch.full_like(xp, 7.)
    g = torch.full_like(xp, 7.)
    return x, g, xp, gp, fp


def test_accepts_full_step():
    x, g, xp, gp, fp = _setup([1., -1.])
    d = -0.5 * gp  # exact minimizer at t=1
    ls = backtracking(sphere_evaluate, x, g, fp, 1., d, xp, gp,
                      1e-20, 1e20, default_parameters())
    assert ls.status == 0
    assert ls.nevals == 1
    assert ls.t == 1.
    assert ls.f == 0.
    torch.testing.assert_close(x, torch.zeros(2, dtype=torch.float64))
    torch.testing.assert_close(g, torch.zeros(2, dtype=torch.float64))


def test_backtracks_until_armijo():
    x, g, xp, gp, fp = _setup([1., 2.])
    d = -gp
    param = default_parameters()
    # t = 4 overshoots badly; halving reaches t = 0.5, the exact minimizer
    ls = backtracking(sphere_evaluate, x, g, fp, 4., d, xp, gp,
                      1e-20, 1e20, param)
    assert ls.status == 0
    assert ls.nevals == 4
    assert ls.t == 0.5
    assert ls.f <= fp + param.f_dec_coeff * ls.t * gp.dot(d)
    torch.testing.assert_close(x, xp + ls.t * d)


def test_invalid_step():
    x, g, xp, gp, fp = _setup([1., 2.])
    calls = []
    def evaluate(x, g):
        calls.append(1)
        return sphere_evaluate(x, g)
    for t in [0., -1.]:
        ls = backtracking(evaluate, x, g, fp, t, -gp, xp, gp,
                          1e-20, 1e20, default_parameters())
        assert ls.status == Status.INVALIDPARAMETERS
        assert ls.nevals == 0
    assert not calls


def test_ascent_direction_leaves_point_untouched():
    x, g, xp, gp, fp = _setup([1., 2.])
    ls = backtracking(sphere_evaluate, x, g, fp, 1., gp.clone(), xp, gp,
                      1e-20, 1e20, default_parameters())
    assert ls.status == Status.INCREASEGRADIENT
    assert ls.nevals == 0
    torch.testing.assert_close(x, torch.full_like(x, 7.))
    torch.testing.assert_close(g, torch.full_like(g, 7.))

    # orthogonal directions are rejected too
    d = torch.tensor([2., -1.], dtype=torch.float64)
    ls = backtracking(sphere_evaluate, x, g, fp, 1., d, xp, gp,
                      1e-20, 1e20, default_parameters())
    assert ls.status == Status.INCREASEGRADIENT


def _never_decreasing(x, g):
    g.copy_(x)
    return 1e3


def test_maximum_linesearch():
    x, g, xp, gp, fp = _setup([1., 2.])
    param = default_parameters()._replace(max_linesearch=3)
    ls = backtracking(_never_decreasing, x, g, fp, 1., -gp, xp, gp,
                      1e-20, 1e20, param)
    assert ls.status == Status.MAXIMUMLINESEARCH
    assert ls.nevals == 3


def test_minimum_step():
    x, g, xp, gp, fp = _setup([1., 2.])
    # trials at 1, 0.5, 0.25, 0.125, 0.0625 < 0.1
    ls = backtracking(_never_decreasing, x, g, fp, 1., -gp, xp, gp,
                      0.1, 1e20, default_parameters())
    assert ls.status == Status.MINIMUMSTEP
    assert ls.nevals == 5


def test_maximum_step():
    x, g, xp, gp, fp = _setup([1., 2.])
    ls = backtracking(_never_decreasing, x, g, fp, 2., -gp, xp, gp,
                      1e-20, 1., default_parameters())
    assert ls.status == Status.MAXIMUMSTEP
    assert ls.nevals == 1
