from ._optimize import Status, status_message
from .parameters import LBFGSParameter, default_parameters, check_parameters
from .lbfgs import lbfgs_optimize
from .optim import Minimizer

__all__ = ['lbfgs_optimize', 'Status', 'status_message', 'LBFGSParameter',
           'default_parameters', 'check_parameters', 'Minimizer']

__version__ = "0.0.1"
