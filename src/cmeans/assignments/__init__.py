"""Assignment strategies for c-means."""

from .hard import HardAssignment
from .fuzzy import FuzzyAssignment

__all__ = [
    'HardAssignment',
    'FuzzyAssignment'
]
