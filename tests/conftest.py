from __future__ import annotations

import pytest

from ordstat import config as os_config


@pytest.fixture(autouse=True)
def _fresh_runtime(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("ORDSTAT_ENABLE_NUMBA", raising=False)
    monkeypatch.delenv("ORDSTAT_SEED", raising=False)
    os_config.reset_runtime_config_cache()
    yield
    os_config.reset_runtime_config_cache()


@pytest.fixture(params=["python", "numba"])
def kernel_mode(request, monkeypatch: pytest.MonkeyPatch) -> str:
    """Run a test once with interpreted kernels and once with compiled ones."""

    if request.param == "numba":
        pytest.importorskip("numba")
        monkeypatch.setenv("ORDSTAT_ENABLE_NUMBA", "1")
    else:
        monkeypatch.setenv("ORDSTAT_ENABLE_NUMBA", "0")
    os_config.reset_runtime_config_cache()
    return request.param
