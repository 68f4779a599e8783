"""
Global pytest fixtures for the c-means tests.

- Provides deterministic seeding across Python, NumPy, and PyTorch.
- Forces single-threaded torch so reductions are reproducible.
- Standardizes on CPU for all tests.
"""

from __future__ import annotations

import os
import random
import sys
from typing import Generator
from pathlib import Path

import numpy as np
import pytest
import torch

# Add the project's src directory to the Python path so tests can import the code
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))
# Shared helpers (utils.py, data_gen.py) for the integration directory
sys.path.insert(0, str(Path(__file__).resolve().parent))


def _get_seed() -> int:
    """Resolve the test seed from env or default."""
    env = os.getenv("TEST_RANDOM_SEED", "1337")
    try:
        return int(env)
    except ValueError:
        return 1337


@pytest.fixture(scope="session", autouse=True)
def seed_all() -> int:
    """
    Seed Python, NumPy, and PyTorch RNGs once per session.

    Seed value comes from TEST_RANDOM_SEED (default 1337).
    """
    seed = _get_seed()
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
    return seed


@pytest.fixture(scope="session", autouse=True)
def set_torch_threads() -> None:
    """
    Reduce PyTorch to a single thread for stability.
    """
    torch.set_num_threads(1)


@pytest.fixture(scope="function")
def rng(seed_all: int) -> Generator[np.random.Generator, None, None]:
    """
    Per-test NumPy Generator seeded from the session seed.
    """
    gen = np.random.default_rng(seed_all)
    yield gen


@pytest.fixture(scope="session")
def torch_device() -> torch.device:
    """
    Standard device for tests. Pinned to CPU.
    """
    return torch.device("cpu")


@pytest.fixture
def line_points():
    """Two tight pairs on the x-axis with one centroid at each left end."""
    points = [(0.0, 0.0), (2.0, 0.0), (10.0, 0.0), (12.0, 0.0)]
    centroids = [(0.0, 0.0), (10.0, 0.0)]
    return points, centroids
