"""Centroid update strategies for c-means."""

from .mean import MeanUpdater, FuzzyMeanUpdater

__all__ = [
    'MeanUpdater',
    'FuzzyMeanUpdater'
]
