"""Shared test utilities for ordstat."""

from .datasets import (
    distinct_sorted,
    duplicated_integers,
    inverse_sorted,
    uniform_floats,
)

__all__ = ["uniform_floats", "duplicated_integers", "inverse_sorted", "distinct_sorted"]
