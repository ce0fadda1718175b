"""Mean, variance and standard deviation over sample ranges.

Every statistic comes in two flavours:

* ``*_range(container, first, last)`` walks positions ``[first, last)`` of any
  iterable container once, front to back.
* ``mean(x)`` / ``var(x)`` / ``std(x)`` take a whole sequence or a signal and
  forward to the range form.

Accumulation happens in the sample dtype. Empty ranges and single-sample
``Weight.SAMPLE`` variances are not guarded: they produce NaN (or -0.0) the
way IEEE-754 division does.
"""
from __future__ import annotations

import logging
from enum import Enum
from itertools import islice
from typing import Any, Iterable, Iterator, Protocol, Sequence, runtime_checkable

import numpy as np

from dspstats.config import get_default_dtype

__all__: list[str] = [
    "Weight",
    "SignalLike",
    "mean_range",
    "var_range",
    "std_range",
    "mean",
    "var",
    "std",
]

logger = logging.getLogger(__name__)


class Weight(str, Enum):
    """Denominator used by var/std: N-1 for a sample, N for the population."""

    SAMPLE = "sample"
    POPULATION = "population"


@runtime_checkable
class SignalLike(Protocol):
    """Container that exposes its stored samples as a begin/end range."""

    def begin(self) -> int: ...

    def end(self) -> int: ...

    def __iter__(self) -> Iterator[Any]: ...


def _resolve_dtype(container: Any, dtype: Any) -> np.dtype:
    if dtype is not None:
        return np.dtype(dtype)
    own = getattr(container, "dtype", None)
    if own is not None and np.issubdtype(own, np.floating):
        return np.dtype(own)
    return np.dtype(get_default_dtype())


def _read_range(container: Iterable[Any], first: int, last: int, dtype: np.dtype) -> np.ndarray:
    count = max(last - first, 0)
    if isinstance(container, np.ndarray):
        window = container[first:last].astype(dtype, copy=False)
        if window.shape[0] != count:
            raise ValueError(f"range [{first}, {last}) exceeds {container.shape[0]} samples")
        return window
    # single forward pass; a short container raises from numpy
    return np.fromiter(islice(container, first, last), dtype=dtype, count=count)


def _mean_of(samples: np.ndarray, n: int, dtype: np.dtype) -> np.floating:
    with np.errstate(divide="ignore", invalid="ignore"):
        return samples.sum(dtype=dtype) / dtype.type(n)


def _extent(x: Any) -> tuple[int, int]:
    if isinstance(x, SignalLike):
        return x.begin(), x.end()
    return 0, len(x)


def mean_range(container: Iterable[Any], first: int, last: int, *, dtype: Any = None) -> np.floating:
    """Arithmetic mean of ``container[first:last]``.

    An empty range returns NaN.
    """
    t = _resolve_dtype(container, dtype)
    samples = _read_range(container, first, last, t)
    return _mean_of(samples, last - first, t)


def var_range(
    container: Iterable[Any],
    first: int,
    last: int,
    weight: Weight | str = Weight.SAMPLE,
    *,
    dtype: Any = None,
) -> np.floating:
    """Variance of ``container[first:last]``.

    ``Weight.SAMPLE`` divides the squared deviations by N-1,
    ``Weight.POPULATION`` by N. A single sample with ``Weight.SAMPLE``
    gives 0/0, i.e. NaN.
    """
    w = Weight(weight)
    t = _resolve_dtype(container, dtype)
    samples = _read_range(container, first, last, t)
    n = last - first
    logger.debug("var over %d samples (weight=%s, dtype=%s)", n, w.value, t.name)

    mu = _mean_of(samples, n, t)
    with np.errstate(divide="ignore", invalid="ignore"):
        deviations = samples - mu
        sum_sq = np.sum(deviations * deviations, dtype=t)
        if w is Weight.SAMPLE:
            return sum_sq / t.type(n - 1)
        return sum_sq / t.type(n)


def std_range(
    container: Iterable[Any],
    first: int,
    last: int,
    weight: Weight | str = Weight.SAMPLE,
    *,
    dtype: Any = None,
) -> np.floating:
    """Standard deviation of ``container[first:last]``: ``sqrt(var_range(...))``."""
    variance = var_range(container, first, last, weight, dtype=dtype)
    with np.errstate(invalid="ignore"):
        return np.sqrt(variance)


def mean(x: Sequence[Any] | SignalLike, *, dtype: Any = None) -> np.floating:
    """Mean of a whole sequence or signal."""
    first, last = _extent(x)
    return mean_range(x, first, last, dtype=dtype)


def var(x: Sequence[Any] | SignalLike, weight: Weight | str = Weight.SAMPLE, *, dtype: Any = None) -> np.floating:
    """Variance of a whole sequence or signal."""
    first, last = _extent(x)
    return var_range(x, first, last, weight, dtype=dtype)


def std(x: Sequence[Any] | SignalLike, weight: Weight | str = Weight.SAMPLE, *, dtype: Any = None) -> np.floating:
    """Standard deviation of a whole sequence or signal."""
    first, last = _extent(x)
    return std_range(x, first, last, weight, dtype=dtype)
