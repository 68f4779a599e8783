"""
Hard assignment strategy for crisp c-means.

Assigns each point to its nearest centroid.
"""

import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy


class HardAssignment(AssignmentStrategy):
    """Hard (crisp) assignment to the nearest centroid.

    Each column of the resulting membership matrix holds exactly one 1.
    Rows are scanned in ascending order and the running minimum is only
    replaced on a strictly smaller distance, so the first centroid wins ties.
    """

    @property
    def is_soft(self) -> bool:
        """Hard assignments are not soft."""
        return False

    def nearest_centroids(self, distances: Tensor) -> Tensor:
        """Index of the nearest centroid for every point.

        Args:
            distances: (K, n) distance matrix, K >= 1

        Returns:
            (n,) long tensor of row indices
        """
        n_centroids, n_points = distances.shape

        best = distances[0].clone()
        best_idx = torch.zeros(n_points, dtype=torch.long, device=distances.device)

        for i in range(1, n_centroids):
            closer = distances[i] < best
            best = torch.where(closer, distances[i], best)
            best_idx[closer] = i

        return best_idx

    def compute_assignments(self, distances: Tensor, **kwargs) -> Tensor:
        """Assign each point to its nearest centroid.

        Args:
            distances: (K, n) distance matrix
            **kwargs: Ignored

        Returns:
            (K, n) 0/1 membership matrix; empty for an empty distance matrix
        """
        if distances.numel() == 0:
            return torch.zeros_like(distances)

        best_idx = self.nearest_centroids(distances)

        memberships = torch.zeros_like(distances)
        memberships.scatter_(0, best_idx.unsqueeze(0), 1.0)

        return memberships

    def __repr__(self) -> str:
        return "HardAssignment()"
