from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Tuple

import numpy as np

from ordstat.exceptions import InvalidArgumentError

_NATIVE_KINDS = frozenset("biufUSmM")
_EXACT_FLOAT_LIMIT = 2**53


def _object_array(items: Sequence[Any]) -> np.ndarray:
    array = np.empty(len(items), dtype=object)
    for position, item in enumerate(items):
        array[position] = item
    return array


def as_values(items: Sequence[Any]) -> np.ndarray:
    """Build a 1-D array for `items`, keeping numeric and text dtypes native.

    A native dtype is used only when every item has the same type and numpy
    stores it without promotion; mixed ``int``/``float`` lists stay objects so
    large integers keep their exact value and type.
    """

    item_types = {type(item) for item in items}
    if len(item_types) > 1:
        return _object_array(items)
    try:
        array = np.asarray(items)
    except (OverflowError, ValueError):
        return _object_array(items)
    if array.ndim != 1 or array.dtype.kind not in _NATIVE_KINDS:
        return _object_array(items)
    if item_types == {int} and array.dtype.kind not in "iu":
        return _object_array(items)
    return array


@dataclass(frozen=True)
class OrderedBuffer:
    """A 1-D value array, the caller's object behind it and an optional index.

    `values` aliases `source` when the caller passed a 1-D ndarray, so kernels
    that mutate `values` sort the caller's array directly. For Python
    sequences `values` is a copy and `write_back` publishes the result.
    """

    values: np.ndarray
    source: Any
    index: Optional[np.ndarray] = None

    @classmethod
    def from_sequence(
        cls,
        seq: Any,
        *,
        key: Callable[[Any], Any] | None = None,
        mutable: bool = False,
    ) -> "OrderedBuffer":
        if isinstance(seq, np.ndarray):
            if seq.ndim != 1:
                raise InvalidArgumentError(
                    f"Expected a one-dimensional sequence, got shape {seq.shape}."
                )
            if mutable and not seq.flags.writeable:
                raise InvalidArgumentError("Cannot reorder a read-only array in place.")
        elif isinstance(seq, (str, bytes)) or not isinstance(seq, Sequence):
            raise InvalidArgumentError(
                f"Expected a numpy array or a sequence, got {type(seq).__name__}."
            )
        elif mutable and not isinstance(seq, MutableSequence):
            raise InvalidArgumentError(
                f"Cannot reorder an immutable {type(seq).__name__} in place."
            )

        if key is not None:
            return cls(values=as_values([key(item) for item in seq]), source=seq)
        if isinstance(seq, np.ndarray):
            return cls(values=seq, source=seq)
        return cls(values=as_values(list(seq)), source=seq)

    @property
    def size(self) -> int:
        return int(self.values.shape[0])

    @property
    def is_numeric(self) -> bool:
        return self.values.dtype.kind in "iuf"

    def ranking_keys(self) -> Tuple[np.ndarray, bool]:
        """Return keys for value-interpolating kernels and whether they allow it.

        Values that convert to float64 without loss are returned as float64;
        anything else comes back unchanged with interpolation disabled.
        """

        values = self.values
        kind = values.dtype.kind
        if kind == "f" and values.dtype.itemsize <= 8:
            return values.astype(np.float64, copy=False), True
        if kind in "iu":
            if values.dtype.itemsize <= 4:
                return values.astype(np.float64), True
            if values.size == 0 or (
                int(values.min()) >= -_EXACT_FLOAT_LIMIT
                and int(values.max()) <= _EXACT_FLOAT_LIMIT
            ):
                return values.astype(np.float64), True
        return values, False

    def with_index(self, index: np.ndarray) -> "OrderedBuffer":
        return replace(self, index=index)

    def write_back(self) -> None:
        """Copy `values` into a Python sequence source after an in-place sort."""

        if self.source is self.values:
            return
        self.source[:] = self.values.tolist()

    def permute(self) -> None:
        """Reorder the source so position i receives the element at `index[i]`."""

        if self.index is None:
            raise InvalidArgumentError("No index attached to reorder by.")
        order = self.index
        if isinstance(self.source, np.ndarray):
            self.source[:] = self.source[order]
        else:
            items = list(self.source)
            self.source[:] = [items[int(position)] for position in order]


@dataclass(frozen=True)
class UniqueRankResult:
    """Indices of the lowest distinct values and how many could be produced."""

    indices: np.ndarray
    k_actual: int
    k_requested: int

    @property
    def clamped(self) -> bool:
        return self.k_actual < self.k_requested

    def __len__(self) -> int:
        return self.k_actual


__all__ = ["OrderedBuffer", "UniqueRankResult", "as_values"]
