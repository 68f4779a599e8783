"""
Fuzzy c-means.

Soft clustering iteration where each point has fractional membership
in all clusters. The fuzziness is controlled by parameter m.
"""

from typing import Optional, Dict, Any
import torch
from torch import Tensor

from ..base.clustering_base import BaseCMeans
from ..base.interfaces import ClusteringObjective
from ..assignments.fuzzy import FuzzyAssignment
from ..distances.euclidean import EuclideanDistance
from ..updates.mean import FuzzyMeanUpdater
from ..utils.validation import check_fuzzifier, check_same_shape


class FuzzyCMeansObjective(ClusteringObjective):
    """Fuzzy c-means objective function.

    cost_i = Σ_j u_ij^m * d_ij^2
    where u_ij is membership and d_ij is distance.
    """

    def __init__(self, m: float = 2.0):
        """
        Args:
            m: Fuzziness exponent
        """
        self.m = check_fuzzifier(m)

    def compute(self, memberships: Tensor, distances: Tensor) -> Tensor:
        """Compute the per-centroid cost vector."""
        if memberships.numel() == 0 or distances.numel() == 0:
            return torch.zeros(0, dtype=distances.dtype, device=distances.device)

        check_same_shape(memberships, distances)

        return torch.sum((memberships ** self.m) * (distances ** 2), dim=1)


class FuzzyCMeans(BaseCMeans):
    """Fuzzy c-means (FCM) iteration.

    FCM lets each point belong to every centroid with a degree of
    membership. One iteration computes the memberships for the current
    centroids and the membership-weighted candidate centroids.

    Parameters
    ----------
    m : float, default=2.0
        Fuzziness exponent. Must be > 1.
        - m→1: Approaches hard c-means
        - m=2: Standard FCM (recommended)
        - m→∞: All points have equal membership in all clusters
    zero_distance : {'exclusive', 'skip'}, default='exclusive'
        How a point lying exactly on a centroid is handled, see
        :class:`~cmeans.assignments.fuzzy.FuzzyAssignment`
    verbose : int, default=0
        Verbosity level
    dtype : torch.dtype, default=torch.float64
        Floating point type of the matrices
    device : torch.device, optional
        Computation device

    Examples
    --------
    >>> from cmeans.algorithms import FuzzyCMeans
    >>>
    >>> step = FuzzyCMeans(m=2.0)
    >>> result = step([(0, 0), (4, 0), (10, 0)], [(1, 0), (9, 0)])
    >>> result.membership_matrix.shape
    torch.Size([2, 3])
    """

    algorithm = 'fuzzy'

    def __init__(self,
                 m: float = 2.0,
                 zero_distance: str = 'exclusive',
                 verbose: int = 0,
                 dtype: torch.dtype = torch.float64,
                 device: Optional[torch.device] = None):
        """Initialize fuzzy c-means."""
        self.m = check_fuzzifier(m)
        self.zero_distance = zero_distance
        super().__init__(verbose=verbose, dtype=dtype, device=device)

    def _create_components(self) -> None:
        """Create FCM specific components."""
        self.m = check_fuzzifier(self.m)
        self.distance_metric = EuclideanDistance()
        self.assignment_strategy = FuzzyAssignment(m=self.m, zero_distance=self.zero_distance)
        self.update_strategy = FuzzyMeanUpdater(m=self.m)
        self.objective = FuzzyCMeansObjective(m=self.m)

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        params = super().get_params(deep)
        params.update({
            'm': self.m,
            'zero_distance': self.zero_distance
        })
        return params
