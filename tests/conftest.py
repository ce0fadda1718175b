import pytest

from dspstats.config import get_config, get_default_dtype


class FakeSignal:
    """Minimal signal: stored samples exposed through begin()/end()."""

    def __init__(self, samples, dtype=None, first=0, last=None):
        self._samples = list(samples)
        self._first = first
        self._last = len(self._samples) if last is None else last
        if dtype is not None:
            self.dtype = dtype

    def begin(self):
        return self._first

    def end(self):
        return self._last

    def __iter__(self):
        return iter(self._samples)


@pytest.fixture
def make_signal():
    return FakeSignal


@pytest.fixture(autouse=True)
def fresh_config():
    get_config.cache_clear()
    get_default_dtype.cache_clear()
    yield
    get_config.cache_clear()
    get_default_dtype.cache_clear()
