"""Exception types raised by the public operations."""

from __future__ import annotations


class OrderStatError(Exception):
    """Base class for errors raised by ordstat."""


class InvalidArgumentError(OrderStatError, ValueError):
    """A precondition on `k`, the sequence, or an output buffer does not hold.

    Raised before any mutation takes place.
    """


__all__ = ["OrderStatError", "InvalidArgumentError"]
