"""ordstat: in-memory order statistics without a full sort.

Quick Start
-----------
>>> import numpy as np
>>> from ordstat import partial_rank, partial_rank_unique, select_kth
>>>
>>> values = np.array([10, 5, 7, 1, 4, 5, 6, 8, 9, 10, 1])
>>> values[partial_rank(values, 3)]           # three smallest, ascending
>>> partial_rank_unique(values, 5).indices    # five smallest distinct values
>>> select_kth(values, 4)                     # fourth smallest value

Functions
---------
sort_full, partial_sort : In-place full and bounded insertion sorts.
select_kth, median_value : Single order statistics.
partial_rank, rank_permutation : Quickselect partial ranking.
partial_rank_unique : Partial ranking over distinct values.
perturb : Locality-preserving shuffle.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("ordstat")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.1.0"

from .api import (
    median_value,
    partial_rank,
    partial_rank_unique,
    partial_sort,
    rank_permutation,
    select_kth,
    sort_full,
)
from .core import OrderedBuffer, UniqueRankResult
from .exceptions import InvalidArgumentError, OrderStatError
from .shuffle import perturb

__all__ = [
    "__version__",
    "sort_full",
    "partial_sort",
    "select_kth",
    "median_value",
    "partial_rank",
    "rank_permutation",
    "partial_rank_unique",
    "perturb",
    "OrderedBuffer",
    "UniqueRankResult",
    "InvalidArgumentError",
    "OrderStatError",
]
