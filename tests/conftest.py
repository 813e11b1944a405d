"""Shared pytest fixtures for lbfgslite tests."""
import pytest
import torch

from lbfgslite.benchmarks import rosen_evaluate, sphere_evaluate


@pytest.fixture
def random_seed():
    """Set random seed for reproducibility."""
    torch.manual_seed(42)
    yield 42


# =============================================================================
# Objective Function Fixtures
# =============================================================================
# To add a new test problem, create a fixture that returns a dict with:
#   - 'evaluate': callable, evaluate(x, g) -> f filling g in place
#   - 'x0': Tensor, initial point
#   - 'solution': Tensor, known optimal solution
#   - 'name': str, descriptive name for the problem


@pytest.fixture
def sphere_problem():
    """f(x) = sum(x_i^2), minimized at the origin."""
    return {
        'evaluate': sphere_evaluate,
        'x0': torch.tensor([3., -4., 1.5, 0.5], dtype=torch.float64),
        'solution': torch.zeros(4, dtype=torch.float64),
        'name': 'sphere',
    }


@pytest.fixture
def least_squares_problem():
    """
    Linear least squares: min ||A x - b||^2 with A of full column rank.
    """
    torch.manual_seed(42)
    N, D = 50, 6
    A = torch.randn(N, D, dtype=torch.float64)
    b = torch.randn(N, dtype=torch.float64)

    def evaluate(x, g):
        r = A @ x - b
        g.copy_(2 * A.T @ r)
        return float(r.dot(r))

    return {
        'evaluate': evaluate,
        'x0': torch.zeros(D, dtype=torch.float64),
        'solution': torch.linalg.lstsq(A, b.unsqueeze(1)).solution.squeeze(1),
        'name': 'least_squares',
    }


@pytest.fixture
def rosenbrock_problem():
    """Rosenbrock function (banana function)."""
    D = 10
    return {
        'evaluate': rosen_evaluate,
        'x0': torch.zeros(D, dtype=torch.float64),
        'solution': torch.ones(D, dtype=torch.float64),
        'name': 'rosenbrock',
    }
