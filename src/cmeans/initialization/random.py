"""
Random point generation.

Draws points uniformly inside a bounding box, for seeding a point set or a
centroid set before the first iteration.
"""

from typing import List, Optional, Tuple, Union
import math
import torch

from ..base.data_structures import Point, points_from_tensor
from ..utils.validation import check_random_state, check_range


def _integer_bounds(value_range: Tuple[float, float], name: str = 'range') -> Tuple[int, int]:
    """Smallest and largest integers inside a closed interval."""
    low, high = math.ceil(value_range[0]), math.floor(value_range[1])
    if low > high:
        raise ValueError(f"{name} {tuple(value_range)} contains no integer")
    return low, high


class RandomPoints:
    """Uniform random points in a bounding box.

    In integer mode coordinates are drawn from the inclusive integer grid
    [low, high]; otherwise from the half-open interval [low, high).
    """

    def __init__(self,
                 x_range: Tuple[float, float] = (-100, 100),
                 y_range: Tuple[float, float] = (-100, 100),
                 integer: bool = True,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            x_range: (low, high) bounds of the x coordinate
            y_range: (low, high) bounds of the y coordinate
            integer: Draw whole-number coordinates
            random_state: Seed or generator for reproducibility
        """
        self.x_range = check_range(x_range, 'x_range')
        self.y_range = check_range(y_range, 'y_range')
        self.integer = integer
        self.generator = check_random_state(random_state)

        if self.integer:
            _integer_bounds(self.x_range, 'x_range')
            _integer_bounds(self.y_range, 'y_range')

    def _draw(self, n: int, value_range: Tuple[float, float]) -> torch.Tensor:
        low, high = value_range
        if self.integer:
            low, high = _integer_bounds(value_range)
            return torch.randint(low, high + 1, (n,), generator=self.generator).to(torch.float64)
        return torch.rand(n, generator=self.generator, dtype=torch.float64) * (high - low) + low

    def generate(self, n: int) -> List[Point]:
        """Generate n random points.

        Args:
            n: Number of points (>= 0)

        Returns:
            List of n Points
        """
        if n < 0:
            raise ValueError(f"Number of points must be non-negative, got {n}")
        if n == 0:
            return []

        xs = self._draw(n, self.x_range)
        ys = self._draw(n, self.y_range)
        return points_from_tensor(torch.stack([xs, ys], dim=1))


def generate_random_points(n: int,
                           x_range: Tuple[float, float] = (-100, 100),
                           y_range: Tuple[float, float] = (-100, 100),
                           integer: bool = True,
                           random_state: Optional[Union[int, torch.Generator]] = None) -> List[Point]:
    """Generate n uniform random points; see :class:`RandomPoints`."""
    return RandomPoints(x_range, y_range, integer=integer, random_state=random_state).generate(n)
