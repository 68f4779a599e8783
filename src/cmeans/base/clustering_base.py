"""
Base class for c-means iterations.

Provides the common skeleton of one iteration: distance computation,
membership assignment, centroid update and cost evaluation.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any
import torch
from torch import Tensor
import time

from .interfaces import (
    DistanceMetric, AssignmentStrategy, CentroidUpdater, ClusteringObjective
)
from .data_structures import IterationResult, points_from_tensor
from ..utils.validation import validate_points, PointsLike


class BaseCMeans:
    """Base class implementing a single c-means iteration.

    Subclasses need to specify:
    - Distance metric
    - Assignment strategy
    - Centroid update strategy
    - Objective function

    The estimator holds configuration only. Points and centroids are passed
    into every call and never retained, so the caller owns all state and
    decides whether to commit the candidate centroids it gets back.
    """

    algorithm: str = ''

    def __init__(self,
                 verbose: int = 0,
                 dtype: torch.dtype = torch.float64,
                 device: Optional[torch.device] = None):
        """
        Args:
            verbose: Verbosity level (0=silent, 1=summary, 2=detailed)
            dtype: Floating point type of all matrices
            device: Torch device (None for CPU)
        """
        self.verbose = verbose
        self.dtype = dtype
        self.device = device if device is not None else torch.device('cpu')

        # These will be set by subclasses
        self.distance_metric: Optional[DistanceMetric] = None
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[CentroidUpdater] = None
        self.objective: Optional[ClusteringObjective] = None

        self._create_components()

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.distance_metric
        - self.assignment_strategy
        - self.update_strategy
        - self.objective
        """
        pass

    def step(self, points: PointsLike, centroids: PointsLike) -> IterationResult:
        """Run one iteration.

        Args:
            points: (n, 2) points in caller-defined order
            centroids: (K, 2) current centroids

        Returns:
            IterationResult with the distance and membership matrices,
            candidate centroids, cost vector and cost function
        """
        start_time = time.time()

        X = validate_points(points, dtype=self.dtype, device=self.device, name='points')
        C = validate_points(centroids, dtype=self.dtype, device=self.device, name='centroids')

        distances = self.distance_metric.compute(X, C)
        memberships = self.assignment_strategy.compute_assignments(distances)
        new_centroids = self.update_strategy.update(X, memberships)
        cost_values = self.objective.compute(memberships, distances)
        cost_function = self.objective.total(cost_values)

        result = IterationResult(
            distance_matrix=distances,
            membership_matrix=memberships,
            candidate_centroids=points_from_tensor(new_centroids),
            cost_values=cost_values,
            cost_function=cost_function,
            algorithm=self.algorithm
        )

        if self.verbose >= 1:
            elapsed = time.time() - start_time
            print(f"{self.algorithm} c-means step: {X.shape[0]} points, {C.shape[0]} centroids, "
                  f"cost = {cost_function:.6f} ({elapsed:.4f}s)")
        if self.verbose >= 2:
            print(f"  distances {tuple(distances.shape)}, memberships {tuple(memberships.shape)}, "
                  f"{len(result.candidate_centroids)} candidate centroids")

        return result

    def __call__(self, points: PointsLike, centroids: PointsLike) -> IterationResult:
        return self.step(points, centroids)

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'verbose': self.verbose,
            'dtype': self.dtype,
            'device': self.device
        }

    def set_params(self, **params) -> 'BaseCMeans':
        """Set parameters and rebuild components (sklearn compatibility)."""
        valid = self.get_params()
        for key in params:
            if key not in valid:
                raise ValueError(f"Invalid parameter {key!r} for {self.__class__.__name__}")

        for key, value in params.items():
            setattr(self, key, value)
        try:
            self._create_components()
        except (ValueError, TypeError):
            # Restore the previous configuration
            for key in params:
                setattr(self, key, valid[key])
            self._create_components()
            raise
        return self

    def __repr__(self) -> str:
        params = ', '.join(f"{k}={v!r}" for k, v in self.get_params().items()
                           if k not in ('dtype', 'device'))
        return f"{self.__class__.__name__}({params})"
