"""Utility functions for the c-means engine."""

from .metrics import (
    hard_labels,
    cluster_sizes,
    partition_coefficient,
    partition_entropy
)

from .validation import (
    validate_points,
    check_fuzzifier,
    check_alignment,
    check_same_shape,
    check_in_bounds,
    check_range,
    check_random_state
)

__all__ = [
    # Metrics
    'hard_labels',
    'cluster_sizes',
    'partition_coefficient',
    'partition_entropy',

    # Validation
    'validate_points',
    'check_fuzzifier',
    'check_alignment',
    'check_same_shape',
    'check_in_bounds',
    'check_range',
    'check_random_state'
]
