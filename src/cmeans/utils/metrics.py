"""
Membership-matrix metrics.

Summaries of a (K, n) membership matrix: crisp labels, per-cluster weight
and the classic fuzzy partition validity indices.
"""

import torch
from torch import Tensor


def hard_labels(memberships: Tensor) -> Tensor:
    """Index of the strongest membership for every point.

    Ties go to the first centroid, matching hard assignment.

    Args:
        memberships: (K, n) membership matrix

    Returns:
        (n,) long tensor of centroid indices
    """
    if memberships.numel() == 0:
        return torch.zeros(0, dtype=torch.long, device=memberships.device)
    return torch.argmax(memberships, dim=0)


def cluster_sizes(memberships: Tensor) -> Tensor:
    """Total membership per centroid (point counts for a hard matrix)."""
    if memberships.numel() == 0:
        return torch.zeros(memberships.shape[0], dtype=memberships.dtype,
                           device=memberships.device)
    return memberships.sum(dim=1)


def partition_coefficient(memberships: Tensor) -> float:
    """Compute fuzzy partition coefficient.

    FPC measures the amount of overlap between clusters.
    Values close to 1 indicate well-separated clusters.

    Args:
        memberships: (K, n) membership matrix

    Returns:
        FPC in [1/K, 1], or 0.0 for an empty matrix
    """
    if memberships.numel() == 0:
        return 0.0
    n_points = memberships.shape[1]
    fpc = torch.sum(memberships ** 2) / n_points
    return fpc.item()


def partition_entropy(memberships: Tensor, eps: float = 1e-10) -> float:
    """Compute fuzzy partition entropy.

    Lower values indicate a crisper partition; 0 for a hard matrix.

    Args:
        memberships: (K, n) membership matrix
        eps: Floor applied inside the logarithm

    Returns:
        Partition entropy, or 0.0 for an empty matrix
    """
    if memberships.numel() == 0:
        return 0.0
    n_points = memberships.shape[1]
    # Avoid log(0)
    safe = memberships.clamp(min=eps)
    fpe = -torch.sum(memberships * torch.log(safe)) / n_points
    return fpe.item()
