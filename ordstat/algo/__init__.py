"""Kernels for insertion sorting, selection, quickselect and merge ranking."""

from .insertion import (
    insert_sorted,
    partial_sort_kernel,
    rank_window,
    sort_full_kernel,
)
from .merge import merge_rank_kernel
from .quickselect import order_three, partial_rank_kernel, partition_range
from .select import select_kth_kernel
from .unique import partial_rank_unique_kernel

__all__ = [
    "insert_sorted",
    "rank_window",
    "sort_full_kernel",
    "partial_sort_kernel",
    "select_kth_kernel",
    "order_three",
    "partition_range",
    "partial_rank_kernel",
    "merge_rank_kernel",
    "partial_rank_unique_kernel",
]
