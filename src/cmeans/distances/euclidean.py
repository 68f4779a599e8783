"""
Euclidean distance metric for c-means.

Builds the full centroid-by-point distance matrix that every later stage
of an iteration reads from.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class EuclideanDistance(DistanceMetric):
    """Euclidean distance between every centroid and every point.

    Computes sqrt((cx - px)² + (cy - py)²) for each (centroid, point) pair.
    """

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False (default), return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, points: Tensor, centroids: Tensor, **kwargs) -> Tensor:
        """Compute the distance matrix.

        Args:
            points: (n, 2) tensor of points
            centroids: (K, 2) tensor of centroids

        Returns:
            (K, n) tensor where entry (i, j) is the distance from centroid i
            to point j; an empty (0, 0) tensor if either set is empty
        """
        if points.shape[0] == 0 or centroids.shape[0] == 0:
            return torch.zeros((0, 0), dtype=points.dtype, device=points.device)

        # (K, 1, 2) - (1, n, 2) -> (K, n, 2)
        diff = centroids.unsqueeze(1) - points.unsqueeze(0)
        squared_distances = torch.sum(diff * diff, dim=2)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

    def __repr__(self) -> str:
        return f"EuclideanDistance(squared={self.squared})"
