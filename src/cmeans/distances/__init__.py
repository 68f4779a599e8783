"""Distance metrics for c-means."""

from .euclidean import EuclideanDistance

__all__ = [
    'EuclideanDistance'
]
