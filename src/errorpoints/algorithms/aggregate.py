"""
Stock aggregation functions.

Each takes the observations at one x and returns (central, low, high),
where low and high are non-negative distances below and above central.
That is the form the error-bar markers store in ErrorPoints.y_errors.

Std-based reducers use the sample std (ddof=1); a single observation gives
zero-width bars.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from errorpoints.errors import ConfigurationError

# Two-sided 95% normal quantile.
Z_95 = 1.96


def _as_series(values: Sequence[float], name: str) -> pd.Series:
    s = pd.Series(np.asarray(values, dtype=float))
    if s.empty:
        raise ConfigurationError(f"{name}: at least one observation is required")
    return s


def mean_and_std_err(values: Sequence[float]) -> tuple[float, float, float]:
    """Mean with +/- one standard error of the mean."""
    s = _as_series(values, "mean_and_std_err")
    mean_ = float(s.mean())
    sem_ = 0.0 if len(s) < 2 else float(s.sem(ddof=1))
    return mean_, sem_, sem_


def mean_and_conf95(values: Sequence[float]) -> tuple[float, float, float]:
    """Mean with a normal-approximation 95% confidence interval."""
    mean_, sem_, _ = mean_and_std_err(values)
    half = Z_95 * sem_
    return mean_, half, half


def mean_and_min_max(values: Sequence[float]) -> tuple[float, float, float]:
    """Mean with bars reaching the smallest and largest observation."""
    s = _as_series(values, "mean_and_min_max")
    mean_ = float(s.mean())
    return mean_, mean_ - float(s.min()), float(s.max()) - mean_


def median_and_min_max(values: Sequence[float]) -> tuple[float, float, float]:
    """Median with bars reaching the smallest and largest observation."""
    s = _as_series(values, "median_and_min_max")
    median_ = float(s.median())
    return median_, median_ - float(s.min()), float(s.max()) - median_
