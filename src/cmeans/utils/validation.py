"""
Input validation utilities.

Converts caller-supplied point sets into tensors and checks the contracts
between pipeline stages. Violations are programming errors and raise
immediately.
"""

from typing import Optional, Union, Sequence, Tuple
import numbers
import torch
from torch import Tensor
import numpy as np
import warnings


PointsLike = Union[Tensor, np.ndarray, Sequence[Sequence[float]]]


def validate_points(X: PointsLike,
                    dtype: torch.dtype = torch.float64,
                    device: Optional[torch.device] = None,
                    ensure_finite: bool = False,
                    name: str = 'points') -> Tensor:
    """Validate and convert a 2-D point set to a (n, 2) tensor.

    Args:
        X: Tensor, numpy array, or sequence of (x, y) pairs / Points
        dtype: Target data type
        device: Target device
        ensure_finite: Raise on NaN/inf instead of warning
        name: Name used in error messages

    Returns:
        (n, 2) tensor; an empty input becomes a (0, 2) tensor

    Raises:
        TypeError: If X cannot be converted
        ValueError: If X does not describe 2-D points
    """
    device = device if device is not None else torch.device('cpu')

    # Convert to tensor
    if isinstance(X, Tensor):
        X = X.to(dtype=dtype, device=device)
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(np.asarray(X, dtype=np.float64)).to(dtype=dtype, device=device)
    elif isinstance(X, (list, tuple)):
        if len(X) == 0:
            return torch.zeros((0, 2), dtype=dtype, device=device)
        try:
            X = torch.tensor([[float(c) for c in p] for p in X], dtype=dtype, device=device)
        except (TypeError, ValueError) as e:
            raise TypeError(f"Cannot convert {name} to a tensor of 2-D points: {e}")
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.numel() == 0:
        return torch.zeros((0, 2), dtype=dtype, device=device)

    if X.dim() != 2 or X.shape[1] != 2:
        raise ValueError(f"Expected {name} of shape (n, 2), got {tuple(X.shape)}")

    if not torch.isfinite(X).all():
        if ensure_finite:
            raise ValueError(f"{name} contain NaN or infinite values")
        warnings.warn(f"{name} contain NaN or infinite values; they will propagate")

    return X


def check_fuzzifier(m: float) -> float:
    """Validate the fuzzy exponent m (> 1)."""
    if isinstance(m, bool) or not isinstance(m, numbers.Real):
        raise TypeError(f"Fuzziness exponent m must be a real number, got {type(m)}")
    m = float(m)
    if not m > 1:
        raise ValueError(f"Fuzziness exponent m must be > 1, got {m}")
    return m


def check_alignment(points: Tensor, memberships: Tensor) -> None:
    """Check that every membership column refers to a point.

    Raises:
        ValueError: If the membership matrix and point set disagree
    """
    if memberships.dim() != 2:
        raise ValueError(f"Membership matrix must be 2D, got {memberships.dim()}D")
    if memberships.shape[1] != points.shape[0]:
        raise ValueError(f"Membership matrix has {memberships.shape[1]} columns "
                         f"but there are {points.shape[0]} points")


def check_same_shape(memberships: Tensor, distances: Tensor) -> None:
    """Check that membership and distance matrices line up cell for cell."""
    if memberships.shape != distances.shape:
        raise ValueError(f"Membership matrix shape {tuple(memberships.shape)} does not "
                         f"match distance matrix shape {tuple(distances.shape)}")


def check_in_bounds(x: float, y: float, bounds: Tuple[float, float]) -> None:
    """Check a manually entered coordinate pair against (low, high) bounds."""
    low, high = bounds
    for axis, value in (('x', x), ('y', y)):
        if not low <= value <= high:
            raise ValueError(f"{axis}={value} is outside the allowed range [{low}, {high}]")


def check_range(value_range: Tuple[float, float], name: str = 'range') -> Tuple[float, float]:
    """Validate a (low, high) interval."""
    if len(value_range) != 2:
        raise ValueError(f"{name} must be a (low, high) pair, got {value_range}")
    low, high = value_range
    if low > high:
        raise ValueError(f"{name} lower bound {low} exceeds upper bound {high}")
    return low, high


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator or None
    """
    if random_state is None:
        return None
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, int):
        generator = torch.Generator()
        generator.manual_seed(random_state)
        return generator
    else:
        raise TypeError(f"random_state must be int or torch.Generator, got {type(random_state)}")
