from __future__ import annotations

import numpy as np

from ordstat.algo._numba import kernel
from ordstat.algo.insertion import rank_window


@kernel
def order_three(keys: np.ndarray, index: np.ndarray, deb: int, mil: int, fin: int) -> None:
    """Reorder slots `deb`, `mil`, `fin` of `index` so their keys ascend.

    Afterwards `index[mil]` references the median of the three samples.
    """

    if keys[index[mil]] < keys[index[deb]]:
        iwrk = index[deb]
        index[deb] = index[mil]
        index[mil] = iwrk
    if keys[index[mil]] > keys[index[fin]]:
        iwrk = index[fin]
        index[fin] = index[mil]
        index[mil] = iwrk
        if keys[index[mil]] < keys[index[deb]]:
            iwrk = index[deb]
            index[deb] = index[mil]
            index[mil] = iwrk


@kernel
def partition_range(keys: np.ndarray, index: np.ndarray, deb: int, fin: int, pivot) -> int:
    """Two-pointer partition of `index[deb+1:fin+1]` around `pivot`.

    Slot `deb` must already reference a key <= pivot. Returns the first slot
    of the upper part: everything before it is <= pivot, everything from it
    to `fin` is >= pivot.
    """

    icrs = deb
    idcr = fin
    while True:
        icrs += 1
        while icrs < idcr and keys[index[icrs]] <= pivot:
            icrs += 1
        if icrs >= idcr:
            break
        while icrs < idcr and keys[index[idcr]] > pivot:
            idcr -= 1
        if icrs >= idcr:
            break
        iwrk = index[idcr]
        index[idcr] = index[icrs]
        index[icrs] = iwrk
    return icrs


@kernel
def partial_rank_kernel(keys: np.ndarray, k: int, out: np.ndarray) -> None:
    """Write the indices of the `k` lowest keys, ascending, into `out[:k]`.

    Requires 1 <= k <= len(keys).
    """

    n = keys.shape[0]
    work = np.arange(n)
    deb = 0
    fin = n - 1
    while deb < fin:
        mil = (deb + fin) // 2
        order_three(keys, work, deb, mil, fin)
        if fin - deb < 3:
            break
        icrs = partition_range(keys, work, deb, fin, keys[work[mil]])
        if icrs < k:
            deb = icrs
        else:
            fin = icrs - 1

    rank_window(keys, work, k)
    out[:k] = work[:k]


__all__ = ["order_three", "partition_range", "partial_rank_kernel"]
