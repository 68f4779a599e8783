"""
Mean update strategies for c-means centroids.
"""

import torch
from torch import Tensor
import warnings

from ..base.interfaces import CentroidUpdater
from ..utils.validation import check_alignment, check_fuzzifier


class MeanUpdater(CentroidUpdater):
    """New centroid = mean of the points assigned to it.

    Centroids with no assigned points are dropped, so the candidate list
    can be shorter than the centroid list that produced the memberships.
    """

    def update(self, points: Tensor, memberships: Tensor, **kwargs) -> Tensor:
        """Recompute centroids from a hard membership matrix.

        Args:
            points: (n, 2) tensor of points
            memberships: (K, n) 0/1 membership matrix
            **kwargs: Ignored

        Returns:
            (K', 2) tensor of candidate centroids, one per non-empty cluster
        """
        if memberships.shape[0] == 0:
            return torch.zeros((0, 2), dtype=points.dtype, device=points.device)

        check_alignment(points, memberships)
        if points.shape[0] == 0:
            return torch.zeros((0, 2), dtype=points.dtype, device=points.device)

        centroids = []
        for k in range(memberships.shape[0]):
            assigned = memberships[k] == 1
            if assigned.any():
                centroids.append(points[assigned].mean(dim=0))

        if not centroids:
            return torch.zeros((0, 2), dtype=points.dtype, device=points.device)
        return torch.stack(centroids)


class FuzzyMeanUpdater(CentroidUpdater):
    """New centroid = membership^m weighted mean of all points.

    No centroid is dropped. A row with zero total weight yields NaN
    coordinates, which are returned as-is so the caller can reject the
    iteration.
    """

    def __init__(self, m: float = 2.0):
        """
        Args:
            m: Fuzziness exponent (m > 1) used to weight memberships
        """
        self.m = check_fuzzifier(m)

    def update(self, points: Tensor, memberships: Tensor, **kwargs) -> Tensor:
        """Recompute centroids from a fuzzy membership matrix.

        Args:
            points: (n, 2) tensor of points
            memberships: (K, n) membership matrix
            **kwargs: Ignored

        Returns:
            (K, 2) tensor of candidate centroids
        """
        if memberships.shape[0] == 0:
            return torch.zeros((0, 2), dtype=points.dtype, device=points.device)

        check_alignment(points, memberships)
        if points.shape[0] == 0:
            return torch.zeros((0, 2), dtype=points.dtype, device=points.device)

        weights = memberships ** self.m                      # (K, n)
        total_weight = weights.sum(dim=1, keepdim=True)      # (K, 1)
        weighted_sum = torch.matmul(weights, points)         # (K, 2)

        # 0 / 0 -> NaN on purpose
        centroids = weighted_sum / total_weight

        if torch.isnan(centroids).any():
            empty = torch.where(torch.isnan(centroids).any(dim=1))[0].tolist()
            warnings.warn(f"Centroids {empty} have zero total membership weight; "
                          f"their coordinates are undefined (NaN)", RuntimeWarning)

        return centroids

    def __repr__(self) -> str:
        return f"FuzzyMeanUpdater(m={self.m})"
