"""
Core data structures for the c-means iteration engine.

Points are immutable values; an iteration produces a fresh result bundle
and never touches the caller's point or centroid sets.
"""

from typing import List, NamedTuple, Dict, Any
import math
import torch
from torch import Tensor
from dataclasses import dataclass, field

from ..utils.metrics import hard_labels


class Point(NamedTuple):
    """A 2-D point. Equality is coordinate equality."""

    x: float
    y: float


def points_from_tensor(tensor: Tensor) -> List[Point]:
    """Convert a (n, 2) tensor into a list of Points."""
    return [Point(float(x), float(y)) for x, y in tensor.tolist()]


def points_to_tensor(points: List[Point],
                     dtype: torch.dtype = torch.float64,
                     device: torch.device = torch.device('cpu')) -> Tensor:
    """Convert a list of Points into a (n, 2) tensor."""
    if len(points) == 0:
        return torch.zeros((0, 2), dtype=dtype, device=device)
    return torch.tensor([[p[0], p[1]] for p in points], dtype=dtype, device=device)


@dataclass
class IterationResult:
    """Everything one c-means iteration produces.

    The caller decides whether to commit ``candidate_centroids`` as its new
    centroid set.
    """

    distance_matrix: Tensor       # (K, n)
    membership_matrix: Tensor     # (K, n)
    candidate_centroids: List[Point]
    cost_values: Tensor           # (K,)
    cost_function: float
    algorithm: str = 'hard'

    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_centroids(self) -> int:
        """Number of centroid rows in the matrices."""
        return self.distance_matrix.shape[0]

    @property
    def n_points(self) -> int:
        """Number of point columns in the matrices."""
        return self.distance_matrix.shape[1]

    @property
    def is_degenerate(self) -> bool:
        """True if there is nothing to commit or a candidate is undefined."""
        if not self.candidate_centroids:
            return True
        return any(math.isnan(c.x) or math.isnan(c.y) for c in self.candidate_centroids)

    def candidate_tensor(self) -> Tensor:
        """Candidate centroids as a (K', 2) tensor."""
        return points_to_tensor(
            self.candidate_centroids,
            dtype=self.distance_matrix.dtype,
            device=self.distance_matrix.device
        )

    def labels(self) -> Tensor:
        """Index of the strongest membership for every point (first row wins ties)."""
        return hard_labels(self.membership_matrix)

    def to_dict(self) -> Dict[str, Any]:
        """Plain Python representation, convenient for rendering tables."""
        return {
            'algorithm': self.algorithm,
            'distance_matrix': self.distance_matrix.tolist() if self.distance_matrix.numel() else [],
            'membership_matrix': self.membership_matrix.tolist() if self.membership_matrix.numel() else [],
            'candidate_centroids': [tuple(c) for c in self.candidate_centroids],
            'cost_values': self.cost_values.tolist(),
            'cost_function': self.cost_function,
        }
