"""Partial ranking restricted to distinct values.

The kernel keeps two index sets over `keys`:

* ``low``  - candidate members of the result, pairwise distinct in value;
* ``high`` - unclassified candidates, every one of them greater than every
  member of ``low`` (duplicates among themselves are allowed).

Between them they always hold the wanted values, or, when too few distinct
values exist, every distinct value of the input. Pivots are drawn from the
set that has to shrink and skewed toward the requested count, so ``low``
reaches exactly ``k`` members after a few passes; the target ``k`` itself only
ever moves down, when ``low`` and ``high`` together cannot supply it.
"""

from __future__ import annotations

import numpy as np

from ordstat.algo._numba import kernel
from ordstat.algo.insertion import rank_window
from ordstat.algo.quickselect import order_three

# Overshoot tolerated before `low` is partitioned again instead of being
# finished by insertion.
SMALL_OVERSHOOT = 5


@kernel
def new_history() -> np.ndarray:
    """Size history for the oscillation guard: nothing recorded yet."""

    return np.full(4, -1, dtype=np.int64)


@kernel
def is_oscillating(history: np.ndarray, nlow: int, nhigh: int) -> bool:
    """True when (|low|, |high|) repeats the sizes seen two iterations ago."""

    return history[0] == nlow and history[1] == nhigh


@kernel
def record_sizes(history: np.ndarray, nlow: int, nhigh: int) -> None:
    history[0] = history[2]
    history[1] = history[3]
    history[2] = nlow
    history[3] = nhigh


@kernel
def pick_pivot(lo, mid, hi, ratio: float, interpolate: bool):
    """Pivot in ``[lo, hi)`` placed `ratio` of the way from `lo` to `hi`.

    Without interpolation the median sample `mid` is used. A pivot that falls
    outside the range (overflow, infinities) collapses to `lo`.
    """

    if interpolate:
        pivot = lo + ratio * (hi - lo)
        if pivot >= lo and pivot < hi:
            return pivot
        return lo
    return mid


@kernel
def admit(keys: np.ndarray, low: np.ndarray, nlow: int, start: int, idx: int) -> int:
    """Append `idx` to `low` unless its key already occurs in `low[start:nlow]`."""

    xwrk = keys[idx]
    for ilow in range(start, nlow):
        if keys[low[ilow]] == xwrk:
            return nlow
    low[nlow] = idx
    return nlow + 1


@kernel
def insert_seed(keys: np.ndarray, seeds: np.ndarray, nseed: int, idx: int) -> int:
    """Insert `idx` into the ascending, duplicate-free `seeds[:nseed]`."""

    xwrk = keys[idx]
    pos = nseed
    for iseed in range(nseed):
        xseed = keys[seeds[iseed]]
        if xwrk == xseed:
            return nseed
        if xwrk < xseed:
            pos = iseed
            break
    for iseed in range(nseed, pos, -1):
        seeds[iseed] = seeds[iseed - 1]
    seeds[pos] = idx
    return nseed + 1


@kernel
def argmin_slot(keys: np.ndarray, index: np.ndarray, count: int) -> int:
    best = 0
    for icrs in range(1, count):
        if keys[index[icrs]] < keys[index[best]]:
            best = icrs
    return best


@kernel
def promote_high_min(keys: np.ndarray, low: np.ndarray, nlow: int, high: np.ndarray, nhigh: int):
    """Move the lowest value of `high` into `low`, dropping its duplicates."""

    best = argmin_slot(keys, high, nhigh)
    xmin = keys[high[best]]
    low[nlow] = high[best]
    nlow += 1
    keep = 0
    for icrs in range(nhigh):
        if keys[high[icrs]] != xmin:
            high[keep] = high[icrs]
            keep += 1
    return nlow, keep


@kernel
def demote_low_max(keys: np.ndarray, low: np.ndarray, nlow: int, start: int, high: np.ndarray, nhigh: int):
    """Move the highest value of `low[start:nlow]` into `high`."""

    best = start
    for icrs in range(start + 1, nlow):
        if keys[low[icrs]] > keys[low[best]]:
            best = icrs
    high[nhigh] = low[best]
    low[best] = low[nlow - 1]
    return nlow - 1, nhigh + 1


@kernel
def append_small_high(keys: np.ndarray, low: np.ndarray, nlow: int, high: np.ndarray, nhigh: int, k: int) -> int:
    """Append the distinct values of a short `high`, lowest first, up to `k`."""

    rank_window(keys, high, nhigh)
    start = nlow
    for icrs in range(nhigh):
        if nlow >= k:
            break
        idx = high[icrs]
        if nlow > start and keys[idx] == keys[low[nlow - 1]]:
            continue
        low[nlow] = idx
        nlow += 1
    return nlow


@kernel
def rank_distinct(keys: np.ndarray, low: np.ndarray, nlow: int, k: int, out: np.ndarray) -> None:
    """Rank the `k` lowest entries of `low[:nlow]` into `out`, skipping repeats."""

    out[:k] = low[:k]
    rank_window(keys, out, k)
    xmax = keys[out[k - 1]]
    for icrs in range(k, nlow):
        idx = low[icrs]
        xwrk = keys[idx]
        if xwrk < xmax:
            pos = 0
            while pos < k - 1 and keys[out[pos]] < xwrk:
                pos += 1
            if keys[out[pos]] == xwrk:
                continue
            for idcr in range(k - 1, pos, -1):
                out[idcr] = out[idcr - 1]
            out[pos] = idx
            xmax = keys[out[k - 1]]


@kernel
def partial_rank_unique_kernel(keys: np.ndarray, k: int, interpolate: bool, out: np.ndarray) -> int:
    """Write indices of the lowest distinct keys into `out`; return their count.

    At most `k` indices are written, ascending by key. `interpolate` enables
    arithmetic pivots and requires keys that support ``+``, ``-`` and ``*``.
    """

    n = keys.shape[0]
    if n == 0 or k <= 0:
        return 0
    if k > n:
        k = n
    if n == 1:
        out[0] = 0
        return 1

    first = 1
    while first < n and keys[first] == keys[0]:
        first += 1
    if first == n:
        out[0] = 0
        return 1

    # Up to four distinct seeds: the first differing pair, the element after
    # it and the last element.
    seeds = np.empty(4, dtype=np.int64)
    if keys[first] < keys[0]:
        seeds[0] = first
        seeds[1] = 0
    else:
        seeds[0] = 0
        seeds[1] = first
    nseed = 2
    if first + 1 < n:
        nseed = insert_seed(keys, seeds, nseed, first + 1)
    if n - 1 <= first + 1:
        count = min(k, nseed)
        out[:count] = seeds[:count]
        return count
    nseed = insert_seed(keys, seeds, nseed, n - 1)

    low = np.empty(n, dtype=np.int64)
    high = np.empty(n, dtype=np.int64)
    low[0] = seeds[0]
    nlow = 1
    nhigh = nseed - 1
    high[:nhigh] = seeds[1:nseed]

    # Aim the first pivot at where the k-th distinct value should fall,
    # backing off toward the lowest high seed until the seeds stay above it.
    xmin = keys[seeds[0]]
    ratio = 2.0 * k / (n + k)
    pivot = pick_pivot(xmin, xmin, keys[high[0]], ratio, interpolate)
    for ihig in range(nhigh - 1, 0, -1):
        candidate = pick_pivot(xmin, xmin, keys[high[ihig]], ratio, interpolate)
        if candidate < keys[high[0]]:
            pivot = candidate
            break

    for icrs in range(first + 2, n - 1):
        if keys[icrs] <= pivot:
            nlow = admit(keys, low, nlow, 0, icrs)
        elif nlow < k:
            high[nhigh] = icrs
            nhigh += 1

    history = new_history()
    jdeb = 0
    while nlow != k:
        if is_oscillating(history, nlow, nhigh):
            if nlow < k:
                if nhigh > 0:
                    nlow, nhigh = promote_high_min(keys, low, nlow, high, nhigh)
            else:
                nlow, nhigh = demote_low_max(keys, low, nlow, jdeb, high, nhigh)
        record_sizes(history, nlow, nhigh)

        if nlow + nhigh < k:
            k = nlow + nhigh
        gap = k - nlow

        if gap == 0:
            break
        if gap >= 2:
            if nhigh <= 3:
                nlow = append_small_high(keys, low, nlow, high, nhigh, k)
                k = nlow
                break
            # low[:jdeb] lies below every high value, so only newcomers can
            # collide with one another.
            jdeb = nlow
            fin = nhigh - 1
            order_three(keys, high, 0, 1, fin)
            ratio = gap / (k + gap)
            pivot = pick_pivot(keys[high[0]], keys[high[1]], keys[high[fin]], ratio, interpolate)
            count = nhigh
            nhigh = 0
            for icrs in range(count):
                idx = high[icrs]
                if keys[idx] <= pivot:
                    nlow = admit(keys, low, nlow, jdeb, idx)
                elif nlow < k:
                    high[nhigh] = idx
                    nhigh += 1
        elif gap == 1:
            best = argmin_slot(keys, high, nhigh)
            low[nlow] = high[best]
            nlow += 1
            break
        elif gap >= -SMALL_OVERSHOOT:
            rank_distinct(keys, low, nlow, k, out)
            return k
        else:
            deb = jdeb
            fin = nlow - 1
            mil = (deb + fin) // 2
            order_three(keys, low, deb, mil, fin)
            ratio = k / (nlow + k)
            pivot = pick_pivot(keys[low[deb]], keys[low[mil]], keys[low[fin]], ratio, interpolate)
            count = nlow
            nlow = jdeb
            nhigh = 0
            for icrs in range(jdeb, count):
                idx = low[icrs]
                if keys[idx] <= pivot:
                    low[nlow] = idx
                    nlow += 1
                else:
                    high[nhigh] = idx
                    nhigh += 1

    out[:k] = low[:k]
    rank_window(keys, out, k)
    return k


__all__ = [
    "SMALL_OVERSHOOT",
    "new_history",
    "is_oscillating",
    "record_sizes",
    "pick_pivot",
    "admit",
    "promote_high_min",
    "demote_low_max",
    "append_small_high",
    "rank_distinct",
    "partial_rank_unique_kernel",
]
