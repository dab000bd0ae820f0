"""Core data structures shared by the ranking operations."""

from .buffer import OrderedBuffer, UniqueRankResult, as_values

__all__ = [
    "OrderedBuffer",
    "UniqueRankResult",
    "as_values",
]
