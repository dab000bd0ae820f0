import pytest

from ordstat import config as os_config


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in [
        "ORDSTAT_ENABLE_NUMBA",
        "ORDSTAT_LOG_LEVEL",
        "ORDSTAT_SEED",
    ]:
        monkeypatch.delenv(key, raising=False)


def test_runtime_config_defaults(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    os_config.reset_runtime_config_cache()

    runtime = os_config.runtime_config()

    assert runtime.enable_numba is False
    assert runtime.log_level == "INFO"
    assert runtime.seed is None


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("true", True), ("ON", True), ("0", False), ("no", False), ("maybe", False)],
)
def test_enable_numba_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool):
    _clear_env(monkeypatch)
    monkeypatch.setenv("ORDSTAT_ENABLE_NUMBA", raw)
    os_config.reset_runtime_config_cache()

    assert os_config.runtime_config().enable_numba is expected


def test_seed_parsing(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("ORDSTAT_SEED", "123")
    os_config.reset_runtime_config_cache()

    runtime = os_config.runtime_config()
    assert runtime.seed == 123


def test_invalid_seed(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("ORDSTAT_SEED", "not-a-number")
    os_config.reset_runtime_config_cache()

    with pytest.raises(ValueError):
        os_config.runtime_config()


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("ORDSTAT_LOG_LEVEL", "chatty")
    os_config.reset_runtime_config_cache()

    with pytest.raises(ValueError):
        os_config.runtime_config()


def test_runtime_config_is_cached(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    os_config.reset_runtime_config_cache()

    first = os_config.runtime_config()
    monkeypatch.setenv("ORDSTAT_SEED", "9")
    assert os_config.runtime_config() is first

    os_config.reset_runtime_config_cache()
    assert os_config.runtime_config().seed == 9
