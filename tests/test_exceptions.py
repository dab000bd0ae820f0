from __future__ import annotations

import pytest

from ordstat import InvalidArgumentError, OrderStatError, partial_rank, select_kth


def test_invalid_argument_is_a_value_error():
    assert issubclass(InvalidArgumentError, OrderStatError)
    assert issubclass(InvalidArgumentError, ValueError)


def test_callers_can_catch_the_base_error():
    with pytest.raises(OrderStatError):
        select_kth([1, 2, 3], 4)
    with pytest.raises(ValueError, match="must be an integer"):
        partial_rank([1, 2, 3], 1.5)
