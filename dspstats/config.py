"""Environment-driven settings for the statistics package."""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Mapping, Optional

import numpy as np
from pydantic import BaseModel, field_validator

# Environment variable -> StatsConfig field
ENV_VARS = {
    "DSPSTATS_LOG_LEVEL": "log_level",
    "DSPSTATS_DTYPE": "default_dtype",
}


class StatsConfig(BaseModel):
    log_level: str = "INFO"  # Root logger level used by setup_logging
    default_dtype: str = "float64"  # Sample dtype when the input carries none

    @field_validator("log_level")
    def check_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @field_validator("default_dtype")
    def check_floating_dtype(cls, v):
        try:
            dt = np.dtype(v)
        except TypeError as exc:
            raise ValueError(f"unknown dtype: {v!r}") from exc
        if not np.issubdtype(dt, np.floating):
            raise ValueError(f"default_dtype must be a floating dtype, got {dt.name}")
        return dt.name

    model_config = {"extra": "forbid"}


def load_config(environ: Optional[Mapping[str, str]] = None) -> StatsConfig:
    """Build a StatsConfig from ``DSPSTATS_*`` environment variables."""
    env = os.environ if environ is None else environ
    values = {field: env[key] for key, field in ENV_VARS.items() if key in env}
    return StatsConfig(**values)


@lru_cache(maxsize=1)
def get_config() -> StatsConfig:
    return load_config()


@lru_cache(maxsize=1)
def get_default_dtype() -> str:
    """Sample dtype from ``DSPSTATS_DTYPE`` alone; logging settings are not read."""
    value = os.environ.get("DSPSTATS_DTYPE")
    if value is None:
        return StatsConfig.model_fields["default_dtype"].default
    return StatsConfig(default_dtype=value).default_dtype
