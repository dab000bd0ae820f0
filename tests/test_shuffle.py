from __future__ import annotations

import numpy as np
import pytest

from ordstat import InvalidArgumentError, perturb


def test_zero_closeness_keeps_order():
    values = np.arange(50, dtype=np.float64)
    perturb(values, 0.0, seed=3)
    np.testing.assert_array_equal(values, np.arange(50))


@pytest.mark.parametrize("closeness", [0.1, 0.5, 1.0, 7.0])
def test_perturb_is_a_permutation(closeness: float):
    values = np.arange(200)
    perturb(values, closeness, seed=11)
    assert sorted(values.tolist()) == list(range(200))


def test_full_closeness_moves_values():
    values = np.arange(200)
    perturb(values, 1.0, seed=5)
    assert not np.array_equal(values, np.arange(200))


def test_small_closeness_stays_local():
    values = np.arange(300)
    perturb(values, 0.01, seed=2)
    # Each draw moves a key by less than 0.01 * n = 3 positions.
    assert np.max(np.abs(values - np.arange(300))) <= 6


def test_negative_closeness_clamps_to_identity():
    values = [3, 1, 2]
    perturb(values, -4.0, seed=1)
    assert values == [3, 1, 2]


def test_perturb_is_deterministic_with_seed():
    first = np.arange(64)
    second = np.arange(64)
    perturb(first, 0.7, seed=42)
    perturb(second, 0.7, seed=42)
    np.testing.assert_array_equal(first, second)


def test_seed_falls_back_to_runtime(monkeypatch: pytest.MonkeyPatch):
    from ordstat import config as os_config

    monkeypatch.setenv("ORDSTAT_SEED", "9")
    os_config.reset_runtime_config_cache()
    first = list(range(40))
    second = list(range(40))
    perturb(first, 0.8)
    perturb(second, 0.8, seed=9)
    assert first == second


def test_perturb_lists_and_objects():
    words = ["a", "b", "c", "d", "e", "f"]
    perturb(words, 1.0, seed=0)
    assert sorted(words) == ["a", "b", "c", "d", "e", "f"]

    short = [1]
    perturb(short, 1.0, seed=0)
    assert short == [1]


@pytest.mark.parametrize("closeness", [float("nan"), float("inf"), "close", None])
def test_invalid_closeness(closeness):
    with pytest.raises(InvalidArgumentError):
        perturb([1, 2, 3], closeness)


def test_immutable_input_rejected():
    with pytest.raises(InvalidArgumentError):
        perturb((1, 2, 3), 0.5)
