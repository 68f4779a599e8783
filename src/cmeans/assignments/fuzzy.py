"""
Fuzzy assignment strategy for fuzzy c-means.

Implements the fuzzy membership calculation where each point has
fractional membership in all centroids.
"""

import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy
from ..utils.validation import check_fuzzifier


ZERO_DISTANCE_POLICIES = ('exclusive', 'skip')


class FuzzyAssignment(AssignmentStrategy):
    """Fuzzy assignment for fuzzy c-means.

    Uses the standard FCM membership formula

        u_ij = 1 / Σ_k (d_ij / d_kj)^(2/(m-1))

    where the sum only runs over centroids k with d_kj != 0. A zero-distance
    term is excluded instead of contributing infinity, and a cell whose sum
    is 0 (the point sits exactly on centroid i) gets membership 1.

    With ``zero_distance='exclusive'`` a point that coincides with one or
    more centroids belongs fully to them and has membership 0 everywhere
    else in its column. ``zero_distance='skip'`` keeps the bare exclusion
    rule, where the other centroids of such a column keep 1 / Σ over the
    remaining non-zero terms.
    """

    def __init__(self, m: float = 2.0, zero_distance: str = 'exclusive'):
        """
        Args:
            m: Fuzziness exponent (m > 1). Higher values make memberships fuzzier,
               m → 1 approaches hard assignment.
            zero_distance: 'exclusive' or 'skip', see class docstring
        """
        super().__init__()
        self.m = check_fuzzifier(m)
        if zero_distance not in ZERO_DISTANCE_POLICIES:
            raise ValueError(f"zero_distance must be one of {ZERO_DISTANCE_POLICIES}, "
                             f"got {zero_distance!r}")
        self.zero_distance = zero_distance

    @property
    def is_soft(self) -> bool:
        """Fuzzy assignments are soft."""
        return True

    @property
    def power(self) -> float:
        """Exponent 2/(m-1) applied to distance ratios."""
        return 2.0 / (self.m - 1.0)

    def compute_assignments(self, distances: Tensor, **kwargs) -> Tensor:
        """Compute fuzzy memberships.

        Args:
            distances: (K, n) distance matrix
            **kwargs: Ignored

        Returns:
            (K, n) membership matrix with entries in [0, 1]
        """
        if distances.numel() == 0:
            return torch.zeros_like(distances)

        # ratios[i, k, j] = d_ij / d_kj
        ratios = distances.unsqueeze(1) / distances.unsqueeze(0)

        # Only centroids k with d_kj != 0 contribute to the sum
        contributes = (distances != 0).unsqueeze(0)
        terms = torch.where(contributes, ratios ** self.power, torch.zeros_like(ratios))
        sums = terms.sum(dim=1)

        # Σ == 0 only when d_ij == 0: the point coincides with centroid i
        memberships = torch.where(sums != 0, 1.0 / sums, torch.ones_like(sums))

        if self.zero_distance == 'exclusive':
            coincident = distances == 0
            has_coincident = coincident.any(dim=0, keepdim=True)
            memberships = torch.where(has_coincident, coincident.to(memberships.dtype), memberships)

        return memberships

    def __repr__(self) -> str:
        return f"FuzzyAssignment(m={self.m}, zero_distance={self.zero_distance!r})"
