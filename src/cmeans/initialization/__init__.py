"""Point generation for seeding c-means runs."""

from .random import RandomPoints, generate_random_points

__all__ = [
    'RandomPoints',
    'generate_random_points'
]
