"""
cmeans: step-by-step hard and fuzzy c-means on 2-D points.

This package computes single iterations of the c-means family:
- Hard (crisp) c-means
- Fuzzy c-means

The caller owns the points and centroids and decides whether to keep the
candidate centroids each iteration returns.

Example usage:
    >>> from cmeans import run_hard_iteration
    >>>
    >>> points = [(0, 0), (2, 0), (10, 0), (12, 0)]
    >>> centroids = [(0, 0), (10, 0)]
    >>>
    >>> result = run_hard_iteration(points, centroids)
    >>> result.candidate_centroids
    [Point(x=1.0, y=0.0), Point(x=11.0, y=0.0)]
"""

__version__ = '0.1.0'

# Entry points
from .algorithms.builder import create_cmeans, run_hard_iteration, run_fuzzy_iteration

# Iteration classes
from .algorithms.cmeans import HardCMeans
from .algorithms.fuzzy_cmeans import FuzzyCMeans
from .algorithms.session import CMeansSession, IterationError

# Convenience imports
from .base import (
    Point,
    IterationResult
)
from .initialization import generate_random_points

__all__ = [
    # Entry points
    'run_hard_iteration',
    'run_fuzzy_iteration',
    'create_cmeans',

    # Iterations
    'HardCMeans',
    'FuzzyCMeans',
    'CMeansSession',
    'IterationError',

    # Core data structures
    'Point',
    'IterationResult',
    'generate_random_points',

    # Version
    '__version__'
]
