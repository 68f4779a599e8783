"""
Entry points for running c-means iterations.

Provides a factory for the two iteration variants and the two
one-call functions an external caller (a UI, a notebook, a script)
uses to advance its own points and centroids by one iteration.
"""

from typing import Dict, Type

from ..base.clustering_base import BaseCMeans
from ..base.data_structures import IterationResult
from ..utils.validation import PointsLike
from .cmeans import HardCMeans
from .fuzzy_cmeans import FuzzyCMeans


ALGORITHMS: Dict[str, Type[BaseCMeans]] = {
    'hard': HardCMeans,
    'crisp': HardCMeans,
    'fuzzy': FuzzyCMeans,
}


def create_cmeans(algorithm: str = 'hard', **kwargs) -> BaseCMeans:
    """Create a c-means iteration by name.

    Parameters
    ----------
    algorithm : {'hard', 'crisp', 'fuzzy'}
        Which variant to build; 'crisp' is an alias of 'hard'
    **kwargs : dict
        Constructor parameters of the chosen class (e.g. ``m`` for fuzzy)

    Returns
    -------
    step : BaseCMeans
        Configured iteration object
    """
    try:
        cls = ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(f"Unknown algorithm {algorithm!r}; "
                         f"expected one of {sorted(ALGORITHMS)}") from None
    return cls(**kwargs)


def run_hard_iteration(points: PointsLike, centroids: PointsLike) -> IterationResult:
    """Run one hard c-means iteration.

    Parameters
    ----------
    points : sequence of (x, y), array or tensor of shape (n, 2)
    centroids : sequence of (x, y), array or tensor of shape (K, 2)

    Returns
    -------
    result : IterationResult
        distance_matrix, membership_matrix, candidate_centroids,
        cost_values and cost_function
    """
    return HardCMeans().step(points, centroids)


def run_fuzzy_iteration(points: PointsLike, centroids: PointsLike,
                        fuzzifier: float = 2.0) -> IterationResult:
    """Run one fuzzy c-means iteration.

    Parameters
    ----------
    points : sequence of (x, y), array or tensor of shape (n, 2)
    centroids : sequence of (x, y), array or tensor of shape (K, 2)
    fuzzifier : float, default=2.0
        Fuzziness exponent m > 1

    Returns
    -------
    result : IterationResult
        distance_matrix, membership_matrix, candidate_centroids,
        cost_values and cost_function
    """
    return FuzzyCMeans(m=fuzzifier).step(points, centroids)
