import pytest
from pydantic import ValidationError

from dspstats.config import StatsConfig, get_config, get_default_dtype, load_config


def test_defaults():
    config = load_config({})
    assert config.log_level == "INFO"
    assert config.default_dtype == "float64"


def test_reads_environment():
    config = load_config({"DSPSTATS_LOG_LEVEL": "debug", "DSPSTATS_DTYPE": "float32"})
    assert config.log_level == "DEBUG"
    assert config.default_dtype == "float32"


def test_ignores_unrelated_variables():
    config = load_config({"PATH": "/usr/bin", "DSPSTATS_OTHER": "x"})
    assert config == StatsConfig()


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        load_config({"DSPSTATS_LOG_LEVEL": "LOUD"})


def test_rejects_non_floating_dtype():
    with pytest.raises(ValidationError):
        load_config({"DSPSTATS_DTYPE": "int32"})


def test_rejects_unknown_dtype():
    with pytest.raises(ValidationError):
        load_config({"DSPSTATS_DTYPE": "not-a-dtype"})


def test_forbids_extra_fields():
    with pytest.raises(ValidationError):
        StatsConfig(colour="blue")


def test_get_config_is_cached(monkeypatch):
    first = get_config()
    monkeypatch.setenv("DSPSTATS_DTYPE", "float32")
    assert get_config() is first
    get_config.cache_clear()
    assert get_config().default_dtype == "float32"


def test_default_dtype_ignores_log_level(monkeypatch):
    monkeypatch.setenv("DSPSTATS_LOG_LEVEL", "LOUD")
    monkeypatch.setenv("DSPSTATS_DTYPE", "float32")
    assert get_default_dtype() == "float32"


def test_default_dtype_without_environment(monkeypatch):
    monkeypatch.delenv("DSPSTATS_DTYPE", raising=False)
    assert get_default_dtype() == "float64"


def test_default_dtype_rejects_integers(monkeypatch):
    monkeypatch.setenv("DSPSTATS_DTYPE", "int64")
    with pytest.raises(ValidationError):
        get_default_dtype()
