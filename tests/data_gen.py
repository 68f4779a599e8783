# tests/data_gen.py
"""
Tiny synthetic-data generators reused across the c-means test suite.

    >>> X, y, C = make_blobs_2d()
    >>> X.shape, y.shape, C.shape
    ((90, 2), (90,), (3, 2))
"""

from __future__ import annotations

from typing import Tuple, Optional
import numpy as np

NDArray = np.ndarray

DEFAULT_CENTERS = ((-50.0, -50.0), (0.0, 60.0), (70.0, -20.0))


def make_blobs_2d(
    n_per: int = 30,
    centers: Tuple[Tuple[float, float], ...] = DEFAULT_CENTERS,
    noise: float = 3.0,
    seed: Optional[int] = None,
) -> Tuple[NDArray, NDArray, NDArray]:
    """
    Well separated isotropic Gaussian blobs in the plane.

    Parameters
    ----------
    n_per : int, default=30
        Number of points per blob.
    centers : tuple of (x, y), default=DEFAULT_CENTERS
        Blob centers.
    noise : float, default=3.0
        Standard deviation of each blob.
    seed : int or None, default=None
        RNG seed for reproducibility.

    Returns
    -------
    X : (K*n_per, 2) ndarray, float64
        Points, blob by blob.
    y : (K*n_per,) ndarray, int64
        Blob index of every point.
    C : (K, 2) ndarray, float64
        The blob centers.
    """
    rng = np.random.default_rng(seed)
    C = np.asarray(centers, dtype=np.float64)
    X = np.vstack([c + noise * rng.normal(size=(n_per, 2)) for c in C])
    y = np.repeat(np.arange(len(C)), n_per).astype(np.int64)
    return X, y, C


def perturbed_centers(C: NDArray, shift: float = 15.0, seed: Optional[int] = None) -> NDArray:
    """Blob centers moved by a random offset of the given magnitude."""
    rng = np.random.default_rng(seed)
    angles = rng.uniform(0.0, 2.0 * np.pi, size=len(C))
    offsets = shift * np.stack([np.cos(angles), np.sin(angles)], axis=1)
    return C + offsets
