"""
Hard (crisp) c-means.

The classic c-means iteration implemented using the modular framework.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.clustering_base import BaseCMeans
from ..base.interfaces import ClusteringObjective
from ..assignments.hard import HardAssignment
from ..distances.euclidean import EuclideanDistance
from ..updates.mean import MeanUpdater
from ..utils.validation import check_same_shape


class HardCMeansObjective(ClusteringObjective):
    """Hard c-means cost: sum of distances from each centroid to its points.

    cost_i = Σ_j d_ij over the points j with u_ij = 1

    Distances are not squared, so this is not the quantity the mean update
    minimises. Committing the candidate centroids can raise the cost, e.g.
    points (0, 0), (0, 0), (10, 0), (100, 0) with centroids (0, 0), (100, 0)
    go from 10 to 13.33.
    """

    def compute(self, memberships: Tensor, distances: Tensor) -> Tensor:
        """Compute the per-centroid cost vector."""
        if memberships.numel() == 0 or distances.numel() == 0:
            return torch.zeros(0, dtype=distances.dtype, device=distances.device)

        check_same_shape(memberships, distances)

        assigned = memberships == 1
        return torch.where(assigned, distances, torch.zeros_like(distances)).sum(dim=1)


class HardCMeans(BaseCMeans):
    """Hard c-means iteration.

    Every point goes to its nearest centroid, every non-empty cluster's
    centroid moves to the mean of its points, and empty clusters are dropped
    from the candidate centroids.

    Parameters
    ----------
    verbose : int, default=0
        Verbosity level
    dtype : torch.dtype, default=torch.float64
        Floating point type of the matrices
    device : torch.device, optional
        Device for computation (CPU by default)

    Examples
    --------
    >>> from cmeans.algorithms import HardCMeans
    >>>
    >>> step = HardCMeans()
    >>> result = step([(0, 0), (2, 0), (10, 0), (12, 0)], [(0, 0), (10, 0)])
    >>> result.candidate_centroids
    [Point(x=1.0, y=0.0), Point(x=11.0, y=0.0)]
    """

    algorithm = 'hard'

    def __init__(self,
                 verbose: int = 0,
                 dtype: torch.dtype = torch.float64,
                 device: Optional[torch.device] = None):
        """Initialize hard c-means."""
        super().__init__(verbose=verbose, dtype=dtype, device=device)

    def _create_components(self) -> None:
        """Create hard c-means components."""
        self.distance_metric = EuclideanDistance()
        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater()
        self.objective = HardCMeansObjective()
