from .minimizer import Minimizer

__all__ = ['Minimizer']
