from __future__ import annotations

import numpy as np

from ordstat.algo._numba import kernel
from ordstat.algo.insertion import insert_sorted


@kernel
def select_kth_kernel(values: np.ndarray, k: int):
    """Return the value of 1-based rank `k` using a sorted window of `k` slots.

    Requires 1 <= k <= len(values). `values` is left untouched.
    """

    n = values.shape[0]
    window = values[:k].copy()
    for icrs in range(1, k):
        insert_sorted(window, window[icrs], icrs, 0)

    xmax = window[k - 1]
    for icrs in range(k, n):
        if values[icrs] < xmax:
            # With n - icrs - 1 values still to come, slots below `lo` can no
            # longer be shifted up to rank k.
            lo = k - n + icrs - 1
            if lo < 0:
                lo = 0
            insert_sorted(window, values[icrs], k - 1, lo)
            xmax = window[k - 1]
    return xmax


__all__ = ["select_kth_kernel"]
