"""
Core interfaces for the c-means iteration engine.

This module defines the abstract base classes that every pipeline stage
implements, so hard and fuzzy c-means can be assembled from the same parts.

All matrices follow one layout: row i is centroid i, column j is point j.
"""

from abc import ABC, abstractmethod
from typing import Optional
import torch
from torch import Tensor


class DistanceMetric(ABC):
    """Abstract base class for centroid-to-point distance computations."""

    @abstractmethod
    def compute(self, points: Tensor, centroids: Tensor, **kwargs) -> Tensor:
        """Compute the distance matrix.

        Args:
            points: (n, 2) tensor of points
            centroids: (K, 2) tensor of centroids
            **kwargs: Metric-specific parameters

        Returns:
            (K, n) tensor of distances, or an empty (0, 0) tensor when
            either input is empty
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-centroid membership strategies."""

    @abstractmethod
    def compute_assignments(self, distances: Tensor, **kwargs) -> Tensor:
        """Compute the membership matrix from a distance matrix.

        Args:
            distances: (K, n) distance matrix
            **kwargs: Strategy-specific parameters

        Returns:
            (K, n) membership matrix
        """
        pass

    @property
    @abstractmethod
    def is_soft(self) -> bool:
        """Whether this strategy produces graded (fuzzy) memberships."""
        return False


class CentroidUpdater(ABC):
    """Abstract base class for centroid recomputation strategies."""

    @abstractmethod
    def update(self, points: Tensor, memberships: Tensor, **kwargs) -> Tensor:
        """Compute candidate centroids from memberships.

        Args:
            points: (n, 2) tensor of points
            memberships: (K, n) membership matrix
            **kwargs: Update-specific parameters

        Returns:
            (K', 2) tensor of candidate centroids, K' <= K
        """
        pass


class ClusteringObjective(ABC):
    """Abstract base class for per-centroid cost functions."""

    @abstractmethod
    def compute(self, memberships: Tensor, distances: Tensor) -> Tensor:
        """Compute the cost contributed by each centroid.

        Args:
            memberships: (K, n) membership matrix
            distances: (K, n) distance matrix

        Returns:
            (K,) cost vector, empty when either matrix is empty
        """
        pass

    def total(self, cost_values: Optional[Tensor]) -> float:
        """Aggregate cost function; 0.0 for an empty cost vector."""
        if cost_values is None or cost_values.numel() == 0:
            return 0.0
        return float(torch.sum(cost_values).item())

    @property
    def minimize(self) -> bool:
        """Whether the objective is minimized (True for all c-means costs)."""
        return True
