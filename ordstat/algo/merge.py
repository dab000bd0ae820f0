"""Stable merge ranking for full permutations."""

from __future__ import annotations

import numpy as np

from ordstat.algo._numba import kernel


@kernel
def merge_runs(keys: np.ndarray, source: np.ndarray, target: np.ndarray, start: int, mid: int, end: int) -> None:
    """Merge the ranked runs `source[start:mid]` and `source[mid:end]` into `target`.

    Ties take the left run first, so equal keys keep their input order.
    """

    icrs = start
    jcrs = mid
    pos = start
    while icrs < mid and jcrs < end:
        if keys[source[jcrs]] < keys[source[icrs]]:
            target[pos] = source[jcrs]
            jcrs += 1
        else:
            target[pos] = source[icrs]
            icrs += 1
        pos += 1
    while icrs < mid:
        target[pos] = source[icrs]
        icrs += 1
        pos += 1
    while jcrs < end:
        target[pos] = source[jcrs]
        jcrs += 1
        pos += 1


@kernel
def merge_rank_kernel(keys: np.ndarray, out: np.ndarray) -> None:
    """Write the stable ascending permutation of `keys` into `out[:n]`.

    Bottom-up merge sort on an index array: O(N log N) time, O(N) extra.
    """

    n = keys.shape[0]
    order = np.arange(n)
    work = np.empty_like(order)
    width = 1
    while width < n:
        for start in range(0, n, 2 * width):
            mid = min(start + width, n)
            end = min(start + 2 * width, n)
            merge_runs(keys, order, work, start, mid, end)
        order, work = work, order
        width *= 2
    out[:n] = order


__all__ = ["merge_runs", "merge_rank_kernel"]
