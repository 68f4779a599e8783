"""Base classes and interfaces for the c-means engine."""

from .interfaces import (
    DistanceMetric,
    AssignmentStrategy,
    CentroidUpdater,
    ClusteringObjective
)

from .data_structures import (
    Point,
    IterationResult,
    points_from_tensor,
    points_to_tensor
)

from .clustering_base import BaseCMeans

__all__ = [
    # Interfaces
    'DistanceMetric',
    'AssignmentStrategy',
    'CentroidUpdater',
    'ClusteringObjective',

    # Data structures
    'Point',
    'IterationResult',
    'points_from_tensor',
    'points_to_tensor',

    # Base algorithm
    'BaseCMeans'
]
