"""
Caller-side state for interactive c-means.

The iteration classes are stateless. A session holds the current points
and centroids for a caller that advances them one iteration at a time,
committing candidate centroids only when they are usable.
"""

from typing import Optional, Tuple, List
import warnings

from ..base.clustering_base import BaseCMeans
from ..base.data_structures import Point, IterationResult
from ..initialization.random import RandomPoints
from ..utils.validation import check_fuzzifier, check_in_bounds, check_range
from .builder import create_cmeans


class IterationError(RuntimeError):
    """Raised when a session cannot commit an iteration."""


class CMeansSession:
    """Points, centroids and iteration history for one interactive run.

    Parameters
    ----------
    algorithm : {'hard', 'fuzzy'}, default='fuzzy'
        Iteration variant; may be switched at any time
    m : float, default=2.0
        Fuzziness exponent used by the fuzzy variant
    bounds : (float, float), default=(-1000, 1000)
        Allowed range of manually entered coordinates
    random_range : (float, float), default=(-100, 100)
        Box used by the random point helpers
    min_cost : float, optional
        If set, an iteration whose cost function is <= min_cost is treated
        as converged and not committed
    random_state : int, optional
        Seed for the random point helpers
    verbose : int, default=0
        Verbosity level

    Attributes
    ----------
    history_ : list of IterationResult
        Results whose candidate centroids were committed
    n_iter_ : int
        Number of committed iterations
    """

    def __init__(self,
                 algorithm: str = 'fuzzy',
                 m: float = 2.0,
                 bounds: Tuple[float, float] = (-1000, 1000),
                 random_range: Tuple[float, float] = (-100, 100),
                 min_cost: Optional[float] = None,
                 random_state: Optional[int] = None,
                 verbose: int = 0):
        self._m = m
        self.bounds = check_range(bounds, 'bounds')
        self.min_cost = min_cost
        self.verbose = verbose
        self._random_points = RandomPoints(random_range, random_range,
                                           integer=True, random_state=random_state)

        self._points: Tuple[Point, ...] = ()
        self._centroids: Tuple[Point, ...] = ()
        self._result: Optional[IterationResult] = None

        self.history_: List[IterationResult] = []
        self.algorithm = algorithm

    @property
    def algorithm(self) -> str:
        """Current iteration variant."""
        return self._algorithm

    @algorithm.setter
    def algorithm(self, value: str) -> None:
        self._step = self._build_step(value, self._m)
        self._algorithm = value
        self._result = None

    @property
    def m(self) -> float:
        """Fuzziness exponent of the fuzzy variant."""
        return self._m

    @m.setter
    def m(self, value: float) -> None:
        if self._algorithm == 'fuzzy':
            self._step = self._build_step(self._algorithm, value)
            self._result = None
        else:
            check_fuzzifier(value)
        self._m = value

    @staticmethod
    def _build_step(algorithm: str, m: float) -> BaseCMeans:
        if algorithm == 'fuzzy':
            return create_cmeans('fuzzy', m=m)
        return create_cmeans(algorithm)

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @points.setter
    def points(self, value) -> None:
        self._points = tuple(Point(float(x), float(y)) for x, y in value)
        self._result = None

    @property
    def centroids(self) -> Tuple[Point, ...]:
        return self._centroids

    @centroids.setter
    def centroids(self, value) -> None:
        self._centroids = tuple(Point(float(x), float(y)) for x, y in value)
        self._result = None

    @property
    def n_iter_(self) -> int:
        return len(self.history_)

    def add_point(self, x: float, y: float) -> Point:
        """Append a manually entered point."""
        check_in_bounds(x, y, self.bounds)
        point = Point(float(x), float(y))
        self.points = self._points + (point,)
        return point

    def add_centroid(self, x: float, y: float) -> Point:
        """Append a manually entered centroid."""
        check_in_bounds(x, y, self.bounds)
        centroid = Point(float(x), float(y))
        self.centroids = self._centroids + (centroid,)
        return centroid

    def add_random_point(self) -> Point:
        """Append a random point from the random range."""
        point = self._random_points.generate(1)[0]
        self.points = self._points + (point,)
        return point

    def add_random_centroid(self) -> Point:
        """Append a random centroid from the random range."""
        centroid = self._random_points.generate(1)[0]
        self.centroids = self._centroids + (centroid,)
        return centroid

    @property
    def result(self) -> IterationResult:
        """Iteration result for the current points and centroids."""
        if self._result is None:
            self._result = self._step.step(list(self._points), list(self._centroids))
        return self._result

    def iterate(self) -> bool:
        """Commit the candidate centroids of the current result.

        Returns:
            True if the centroids were replaced, False if the cost is
            already at or below ``min_cost``

        Raises:
            IterationError: If there are no candidates or a candidate is NaN
        """
        result = self.result

        if not result.candidate_centroids:
            raise IterationError("There are not enough points or centroids to start "
                                 "an iteration of the algorithm")
        if result.is_degenerate:
            raise IterationError("Iteration produced undefined (NaN) centroids")

        if self.min_cost is not None and result.cost_function <= self.min_cost:
            if self.verbose:
                print(f"Cost {result.cost_function:.6f} <= {self.min_cost}; centroids kept")
            return False

        if len(result.candidate_centroids) < result.n_centroids:
            warnings.warn(f"{result.n_centroids - len(result.candidate_centroids)} empty "
                          f"cluster(s) dropped from the centroid set")

        self.history_.append(result)
        self.centroids = result.candidate_centroids

        if self.verbose:
            print(f"Iteration {self.n_iter_:3d}: cost = {result.cost_function:.6f}")

        return True

    def reset(self) -> None:
        """Clear points, centroids and history."""
        self._points = ()
        self._centroids = ()
        self._result = None
        self.history_ = []

    def __repr__(self) -> str:
        return (f"CMeansSession(algorithm={self.algorithm!r}, points={len(self._points)}, "
                f"centroids={len(self._centroids)}, n_iter={self.n_iter_})")
