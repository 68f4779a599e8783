"""C-means iteration implementations."""

from .cmeans import HardCMeans, HardCMeansObjective
from .fuzzy_cmeans import FuzzyCMeans, FuzzyCMeansObjective
from .builder import create_cmeans, run_hard_iteration, run_fuzzy_iteration
from .session import CMeansSession, IterationError

__all__ = [
    'HardCMeans',
    'HardCMeansObjective',
    'FuzzyCMeans',
    'FuzzyCMeansObjective',
    'create_cmeans',
    'run_hard_iteration',
    'run_fuzzy_iteration',
    'CMeansSession',
    'IterationError'
]
