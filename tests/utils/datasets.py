from __future__ import annotations

import numpy as np


def uniform_floats(size: int, *, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.uniform(-500_000.0, 500_000.0, size=size)


def duplicated_integers(size: int, *, distinct: int, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.integers(0, distinct, size=size).astype(np.int64)


def inverse_sorted(size: int) -> np.ndarray:
    return np.arange(size, 0, -1, dtype=np.float64)


def distinct_sorted(values) -> list:
    """Ascending distinct values, computed without the library under test."""

    return sorted(set(np.asarray(values).tolist()))
