# tests/utils.py
"""
Small, reusable helpers used across the c-means test suite.

Functions:
- to_numpy(x): tensor / list → numpy array.
- column_sums(M): per-point total membership of a (K, n) matrix.
- perm_invariant_accuracy(y_pred, y_true, K): best label accuracy over permutations.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
"""

from __future__ import annotations

import itertools
import json
import time
from contextlib import contextmanager
from typing import Any, Dict

import numpy as np
import torch


def to_numpy(x: Any) -> np.ndarray:
    """Convert a tensor or nested list to a numpy array."""
    if isinstance(x, torch.Tensor):
        return x.detach().cpu().numpy()
    return np.asarray(x)


def column_sums(memberships: Any) -> np.ndarray:
    """Total membership of each point (column) of a (K, n) matrix."""
    return to_numpy(memberships).sum(axis=0)


def perm_invariant_accuracy(y_pred: Any, y_true: Any, K: int) -> float:
    """
    Best accuracy of y_pred against y_true over all relabelings of K clusters.
    """
    y_pred = to_numpy(y_pred)
    y_true = to_numpy(y_true)
    best = 0.0
    for perm in itertools.permutations(range(K)):
        mapping = np.array(perm)
        best = max(best, float(np.mean(mapping[y_pred] == y_true)))
    return best


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] run {"n":90,"K":3} 0.012s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        meta_str = " " + json.dumps(meta, separators=(",", ":")) if meta else ""
        print(f"[timing] {label}{meta_str} {dt:.3f}s")
