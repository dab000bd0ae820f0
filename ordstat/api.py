"""Validated entry points for the ranking and selection kernels.

Every operation checks its arguments before touching the caller's data, then
hands a 1-D numpy view to the kernel picked by `select_kernel`.

Mutating operations (`sort_full`, `partial_sort`) reorder the caller's array
or list in place. Ranking operations (`partial_rank`, `partial_rank_unique`,
`rank_permutation`, `select_kth`, `median_value`) leave it untouched.
Indices are 0-based.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from ordstat.algo._numba import select_kernel
from ordstat.algo.insertion import partial_sort_kernel, sort_full_kernel
from ordstat.algo.merge import merge_rank_kernel
from ordstat.algo.quickselect import partial_rank_kernel
from ordstat.algo.select import select_kth_kernel
from ordstat.algo.unique import partial_rank_unique_kernel
from ordstat.core.buffer import OrderedBuffer, UniqueRankResult
from ordstat.exceptions import InvalidArgumentError
from ordstat.logging import get_logger

LOGGER = get_logger("api")

KeyFunc = Callable[[Any], Any]


def _check_count(k: Any, *, name: str = "k") -> int:
    if isinstance(k, (bool, np.bool_)) or not isinstance(k, (int, np.integer)):
        raise InvalidArgumentError(f"`{name}` must be an integer, got {type(k).__name__}.")
    k = int(k)
    if k < 0:
        raise InvalidArgumentError(f"`{name}` must be non-negative, got {k}.")
    return k


def _output_buffer(out: np.ndarray | None, length: int) -> np.ndarray:
    if out is None:
        return np.empty(length, dtype=np.int64)
    if not isinstance(out, np.ndarray) or out.ndim != 1:
        raise InvalidArgumentError("`out` must be a one-dimensional numpy array.")
    if out.dtype.kind not in "iu":
        raise InvalidArgumentError(f"`out` must have an integer dtype, got {out.dtype}.")
    if out.shape[0] < length:
        raise InvalidArgumentError(
            f"`out` holds {out.shape[0]} slots but {length} indices are needed."
        )
    return out


def _log_dispatch(operation: str, buffer: OrderedBuffer, kernel: Callable) -> None:
    LOGGER.debug(
        "%s: %d values of dtype %s (numeric=%s) via %s.",
        operation,
        buffer.size,
        buffer.values.dtype,
        buffer.is_numeric,
        "numba" if hasattr(kernel, "py_func") else "python",
    )


def _rank_all(buffer: OrderedBuffer) -> np.ndarray:
    order = np.empty(buffer.size, dtype=np.int64)
    if buffer.size == 0:
        return order
    kernel = select_kernel(merge_rank_kernel, buffer.values)
    _log_dispatch("rank_permutation", buffer, kernel)
    kernel(buffer.values, order)
    return order


def sort_full(seq: Any, *, key: KeyFunc | None = None) -> None:
    """Sort `seq` ascending in place (insertion sort behind a minimum sentinel).

    With `key`, elements are ordered by ``key(element)`` through a stable
    merge ranking, so elements with equal keys keep their relative order.
    """

    buffer = OrderedBuffer.from_sequence(seq, key=key, mutable=True)
    if buffer.size <= 1:
        return
    if key is not None:
        buffer.with_index(_rank_all(buffer)).permute()
        return
    kernel = select_kernel(sort_full_kernel, buffer.values)
    _log_dispatch("sort_full", buffer, kernel)
    kernel(buffer.values)
    buffer.write_back()


def partial_sort(seq: Any, k: int) -> None:
    """Bring the `k` smallest values of `seq`, ascending, to its front in place.

    The order of the remaining values is unspecified. ``k >= len(seq)`` sorts
    the whole sequence.
    """

    k = _check_count(k)
    buffer = OrderedBuffer.from_sequence(seq, mutable=True)
    n = buffer.size
    if k == 0 or n <= 1:
        return
    if k >= n:
        kernel = select_kernel(sort_full_kernel, buffer.values)
        _log_dispatch("partial_sort", buffer, kernel)
        kernel(buffer.values)
    else:
        kernel = select_kernel(partial_sort_kernel, buffer.values)
        _log_dispatch("partial_sort", buffer, kernel)
        kernel(buffer.values, k)
    buffer.write_back()


def select_kth(seq: Any, k: int) -> Any:
    """Return the value of 1-based rank `k` in ascending order.

    Requires ``1 <= k <= len(seq)``.
    """

    k = _check_count(k)
    buffer = OrderedBuffer.from_sequence(seq)
    n = buffer.size
    if k == 0 or k > n:
        raise InvalidArgumentError(f"`k` must lie in [1, {n}], got {k}.")
    kernel = select_kernel(select_kth_kernel, buffer.values)
    _log_dispatch("select_kth", buffer, kernel)
    return kernel(buffer.values, k)


def median_value(seq: Any) -> Any:
    """Return the middle value of `seq`; the upper middle one when its length is even."""

    buffer = OrderedBuffer.from_sequence(seq)
    if buffer.size == 0:
        raise InvalidArgumentError("The median of an empty sequence is undefined.")
    return select_kth(buffer.values, buffer.size // 2 + 1)


def partial_rank(
    seq: Any,
    k: int,
    *,
    key: KeyFunc | None = None,
    out: np.ndarray | None = None,
) -> np.ndarray:
    """Return indices of the `k` smallest values of `seq`, ascending by value.

    Equal values may appear in any order. When `out` is supplied the indices
    are written to ``out[:k]`` and that view is returned.
    """

    k = _check_count(k)
    buffer = OrderedBuffer.from_sequence(seq, key=key)
    n = buffer.size
    if k > n:
        raise InvalidArgumentError(f"`k` must not exceed the sequence length {n}, got {k}.")
    target = _output_buffer(out, k)
    if k == 0:
        return target[:0]
    kernel = select_kernel(partial_rank_kernel, buffer.values)
    _log_dispatch("partial_rank", buffer, kernel)
    kernel(buffer.values, k, target)
    return target[:k]


def rank_permutation(keys: Any, *, key: KeyFunc | None = None) -> np.ndarray:
    """Return the stable permutation that orders `keys` ascending.

    Same contract as ``partial_rank(keys, len(keys))`` but ranked by merging,
    in O(N log N) instead of the quadratic insertion finish.
    """

    return _rank_all(OrderedBuffer.from_sequence(keys, key=key))


def partial_rank_unique(
    seq: Any,
    k: int,
    *,
    key: KeyFunc | None = None,
    out: np.ndarray | None = None,
) -> UniqueRankResult:
    """Return indices of the `k` smallest distinct values of `seq`.

    When `seq` holds fewer than `k` distinct values the result carries all of
    them and ``k_actual`` reports how many; this is not an error. `out` must
    offer at least ``min(k, len(seq))`` slots.
    """

    k = _check_count(k)
    buffer = OrderedBuffer.from_sequence(seq, key=key)
    limit = min(k, buffer.size)
    target = _output_buffer(out, limit)
    keys, interpolate = buffer.ranking_keys()
    # Compiled pivots are float64; other numeric keys keep exact comparisons
    # in the interpreter.
    kernel = select_kernel(
        partial_rank_unique_kernel, keys, allow=keys.dtype == np.float64
    )
    _log_dispatch("partial_rank_unique", buffer, kernel)
    count = int(kernel(keys, limit, interpolate, target))
    if count < k:
        LOGGER.debug(
            "partial_rank_unique: %d distinct values requested, %d available.", k, count
        )
    return UniqueRankResult(indices=target[:count], k_actual=count, k_requested=k)


__all__ = [
    "sort_full",
    "partial_sort",
    "select_kth",
    "median_value",
    "partial_rank",
    "rank_permutation",
    "partial_rank_unique",
]
