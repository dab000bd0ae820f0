"""Insertion-sort kernels.

Every kernel works in place on 1-D numpy arrays and is shared by the
quickselect variants for their finishing passes.
"""

from __future__ import annotations

import numpy as np

from ordstat.algo._numba import kernel


@kernel
def insert_sorted(window: np.ndarray, value, top: int, lo: int) -> int:
    """Insert `value` into the ascending run `window[lo:top]`.

    Slot `top` must be free. Entries greater than `value` move up one slot;
    the walk stops at `lo` even if `value` belongs lower. Returns the slot
    that received `value`.
    """

    idcr = top - 1
    while idcr >= lo and value < window[idcr]:
        window[idcr + 1] = window[idcr]
        idcr -= 1
    window[idcr + 1] = value
    return idcr + 1


@kernel
def rank_window(keys: np.ndarray, index: np.ndarray, count: int) -> None:
    """Order `index[:count]` so the referenced keys ascend."""

    for icrs in range(1, count):
        iwrk = index[icrs]
        xwrk = keys[iwrk]
        idcr = icrs - 1
        while idcr >= 0 and xwrk < keys[index[idcr]]:
            index[idcr + 1] = index[idcr]
            idcr -= 1
        index[idcr + 1] = iwrk


@kernel
def sort_full_kernel(values: np.ndarray) -> None:
    n = values.shape[0]
    if n <= 1:
        return

    # Bring the minimum to slot 0 so the insertion walk needs no bound check.
    if values[0] < values[n - 1]:
        xmin = values[0]
    else:
        xmin = values[n - 1]
        values[n - 1] = values[0]
    for idcr in range(n - 2, 0, -1):
        xwrk = values[idcr]
        if xwrk < xmin:
            values[idcr] = xmin
            xmin = xwrk
    values[0] = xmin

    for icrs in range(2, n):
        xwrk = values[icrs]
        idcr = icrs - 1
        if xwrk < values[idcr]:
            values[icrs] = values[idcr]
            idcr -= 1
            while xwrk < values[idcr]:
                values[idcr + 1] = values[idcr]
                idcr -= 1
            values[idcr + 1] = xwrk


@kernel
def partial_sort_kernel(values: np.ndarray, k: int) -> None:
    """Bring the `k` lowest values, ascending, to the front of `values`.

    Requires 1 <= k <= len(values).
    """

    n = values.shape[0]
    for icrs in range(1, k):
        insert_sorted(values, values[icrs], icrs, 0)

    xmax = values[k - 1]
    for icrs in range(k, n):
        if values[icrs] < xmax:
            xwrk = values[icrs]
            values[icrs] = xmax
            insert_sorted(values, xwrk, k - 1, 0)
            xmax = values[k - 1]


__all__ = [
    "insert_sorted",
    "rank_window",
    "sort_full_kernel",
    "partial_sort_kernel",
]
