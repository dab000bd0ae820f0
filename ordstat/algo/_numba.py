from __future__ import annotations

from functools import lru_cache
from typing import Callable

import numpy as np
from numba import njit
from numba.extending import register_jitable

from ordstat import config as os_config
from ordstat.logging import get_logger

LOGGER = get_logger("algo.numba")

NUMERIC_KINDS = frozenset("iuf")

# Kernels stay plain Python functions; registering them lets compiled kernels
# call one another while the interpreter can still run them on any dtype.
kernel = register_jitable


@lru_cache(maxsize=None)
def _compiled(func: Callable) -> Callable:
    LOGGER.debug("Compiling kernel %s with numba.", func.__name__)
    return njit(cache=True)(func)


def is_numeric(array: np.ndarray) -> bool:
    return array.dtype.kind in NUMERIC_KINDS


def select_kernel(func: Callable, *arrays: np.ndarray, allow: bool = True) -> Callable:
    """Return the numba build of `func` when enabled and every array is numeric.

    `allow=False` forces the interpreted kernel regardless of the runtime flag.
    """

    runtime = os_config.runtime_config()
    if allow and runtime.enable_numba and all(is_numeric(array) for array in arrays):
        return _compiled(func)
    return func


__all__ = ["NUMERIC_KINDS", "kernel", "is_numeric", "select_kernel"]
