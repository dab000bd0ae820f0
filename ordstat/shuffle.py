"""Locality-preserving shuffle built on `rank_permutation`."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from ordstat import config as os_config
from ordstat.api import rank_permutation
from ordstat.core.buffer import OrderedBuffer
from ordstat.exceptions import InvalidArgumentError
from ordstat.logging import get_logger

LOGGER = get_logger("shuffle")


def perturb(seq: Any, closeness: float, *, seed: int | None = None) -> None:
    """Shuffle `seq` in place while keeping elements near their positions.

    `closeness` is clamped into [0, 1]: 0 keeps the current order, 1 gives a
    fully random one. Values are never altered, only reordered. `seed`
    defaults to ``ORDSTAT_SEED``.
    """

    try:
        weight = float(closeness)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"`closeness` must be a number, got {closeness!r}.") from exc
    if not math.isfinite(weight):
        raise InvalidArgumentError(f"`closeness` must be finite, got {closeness!r}.")

    buffer = OrderedBuffer.from_sequence(seq, mutable=True)
    n = buffer.size
    if n <= 1:
        return

    if seed is None:
        seed = os_config.runtime_config().seed
    weight = min(max(0.0, weight), 1.0)
    rng = np.random.default_rng(seed)
    draws = n * rng.random(n)
    blended = weight * draws + (1.0 - weight) * np.arange(n, dtype=np.float64)
    LOGGER.debug("perturb: %d values, closeness %.3f, seed %s.", n, weight, seed)
    buffer.with_index(rank_permutation(blended)).permute()


__all__ = ["perturb"]
