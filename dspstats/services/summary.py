"""Descriptive summary built on the range statistics."""
from __future__ import annotations

from typing import Any, Sequence

from dspstats.schemas import DescriptiveSummary
from dspstats.services.descriptive import SignalLike, Weight, mean, std, var

__all__: list[str] = [
    "descriptive_summary",
    "describe",
]


def descriptive_summary(
    values: Sequence[Any] | SignalLike,
    weight: Weight | str = Weight.SAMPLE,
    *,
    dtype: Any = None,
) -> dict[str, float]:
    """
    Compute count, mean, variance and stddev for a sequence or signal.
    Degenerate inputs are not rejected: an empty input gives NaN statistics.
    """
    w = Weight(weight)
    if isinstance(values, SignalLike):
        count = values.end() - values.begin()
    else:
        count = len(values)
    return {
        "count": count,
        "mean": float(mean(values, dtype=dtype)),
        "var": float(var(values, w, dtype=dtype)),
        "std": float(std(values, w, dtype=dtype)),
    }


def describe(
    values: Sequence[Any] | SignalLike,
    weight: Weight | str = Weight.SAMPLE,
    *,
    dtype: Any = None,
) -> DescriptiveSummary:
    w = Weight(weight)
    return DescriptiveSummary(weight=w, **descriptive_summary(values, w, dtype=dtype))
