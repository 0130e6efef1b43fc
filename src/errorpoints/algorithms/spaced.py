"""
Evenly spaced line points and staggered error bars — pure numpy.

For a generator g(x) -> observations and an aggregate f(observations) ->
(central, low, high), two point sets are produced over a global x range:

  1. Line: num_points evenly spaced x values from min to max (inclusive).
     x values outside the series' valid sub-range are skipped, so the line
     may hold fewer than num_points rows. y is the central estimate.

  2. Error bars: base slots every (max - min) / num_error_bars from min up
     to one spacing past max. Each series shifts its markers right by

         offset = spacing / 4 + series_index * (spacing / 2) / total_series

     so markers of overlaid series do not collide. A slot is skipped when
     either its base or its shifted position falls outside the sub-range.
     At most num_error_bars markers are kept.

Any NaN/inf x, observation, central value or error bound raises
NonFiniteValueError and nothing is returned for the whole call.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from errorpoints.config import SpacingConfig
from errorpoints.errors import ConfigurationError
from errorpoints.types import (
    AggregateFunc,
    ErrorPoints,
    FloatRange,
    GeneratorFunc,
    PointGenerator,
    PointsAndErrorPoints,
)
from errorpoints.utils.logging import get_logger
from errorpoints.validation import check_floats

logger = get_logger(__name__)


def error_bar_offset(spacing: float, series_index: int, total_series: int) -> float:
    """Rightward shift of error-bar markers for one series within a spacing slot."""
    return spacing / 4.0 + series_index * (spacing / 2.0) / total_series


def _check_counts(num_points: int, num_error_bars: int) -> None:
    if num_points < 2:
        raise ConfigurationError(
            f"only 2 or more points can be used, got num_points={num_points}"
        )
    if num_error_bars < 0:
        raise ConfigurationError(
            f"num_error_bars must be >= 0, got {num_error_bars}"
        )


def _check_series(series_index: int, total_series: int) -> None:
    if total_series < 1 or not 0 <= series_index < total_series:
        raise ConfigurationError(
            f"series_index {series_index} is not valid for total_series={total_series}"
        )


# -----------------------------------------------------------------------------
# Step 1: the line of evenly spaced aggregate points
# -----------------------------------------------------------------------------


def _line_points(
    aggregate: AggregateFunc,
    num_points: int,
    data_range: FloatRange,
    generator: GeneratorFunc,
    valid_range: FloatRange,
) -> np.ndarray:
    points = np.zeros((num_points, 2), dtype=float)
    n = 0
    # linspace pins the last candidate to max exactly, so no slack step is needed
    for x in np.linspace(data_range.min, data_range.max, num_points):
        x = float(x)
        if not valid_range.contains(x):
            continue
        check_floats(x)
        ys = generator(x)
        check_floats(*ys)
        y, _, _ = aggregate(ys)
        check_floats(y)
        points[n] = (x, y)
        n += 1
    return points[:n].copy()


# -----------------------------------------------------------------------------
# Step 2: the staggered error-bar markers
# -----------------------------------------------------------------------------


def _error_points(
    aggregate: AggregateFunc,
    num_error_bars: int,
    data_range: FloatRange,
    generator: GeneratorFunc,
    valid_range: FloatRange,
    series_index: int,
    total_series: int,
) -> ErrorPoints:
    if num_error_bars == 0:
        return ErrorPoints.empty(0)

    spacing = data_range.span / num_error_bars
    offset = error_bar_offset(spacing, series_index, total_series)
    logger.debug(
        "series %d/%d: error-bar spacing=%g offset=%g",
        series_index, total_series, spacing, offset,
    )

    errs = ErrorPoints.empty(num_error_bars)
    n = 0
    # base slots min, min + spacing, ..., max, max + spacing
    for i in range(num_error_bars + 2):
        if n >= num_error_bars:
            break
        base = data_range.min + i * spacing
        x = base + offset
        if not (valid_range.contains(base) and valid_range.contains(x)):
            continue
        check_floats(x)
        ys = generator(x)
        check_floats(*ys)
        y, low, high = aggregate(ys)
        check_floats(y, low, high)
        errs.xys[n] = (x, y)
        errs.x_errors[n] = (0.0, 0.0)
        errs.y_errors[n] = (low, high)
        n += 1
    return errs.truncate(n)


def spaced_series(
    aggregate: AggregateFunc,
    num_points: int,
    num_error_bars: int,
    data_range: FloatRange,
    generator: GeneratorFunc,
    valid_range: FloatRange,
    series_index: int = 0,
    total_series: int = 1,
) -> PointsAndErrorPoints:
    """
    Generate the line and error-bar markers for one series.

    Shared by new_error_points_spaced and new_error_points_x_spaced.

    Args:
        aggregate: f(observations) -> (central, low, high).
        num_points: Evenly spaced line points across data_range (>= 2).
        num_error_bars: Error-bar slots across data_range (>= 0).
        data_range: Global x range shared by all series.
        generator: g(x) -> observations.
        valid_range: Sub-range where generator is defined; x outside is skipped.
        series_index: Position of this series among total_series (for offset).
        total_series: Number of series plotted together.

    Raises:
        ConfigurationError: bad counts, series index, or a data_range with an
            infinite bound.
        NonFiniteValueError: any generated value is NaN or infinite.
    """
    _check_counts(num_points, num_error_bars)
    _check_series(series_index, total_series)
    if not (np.isfinite(data_range.min) and np.isfinite(data_range.max)):
        raise ConfigurationError(
            f"data_range bounds must be finite, got ({data_range.min}, {data_range.max})"
        )

    points = _line_points(aggregate, num_points, data_range, generator, valid_range)
    errs = _error_points(
        aggregate, num_error_bars, data_range, generator, valid_range,
        series_index, total_series,
    )
    logger.debug(
        "series %d/%d: kept %d/%d points, %d/%d error bars",
        series_index, total_series, len(points), num_points, len(errs), num_error_bars,
    )
    return PointsAndErrorPoints(points=points, error_points=errs)


# -----------------------------------------------------------------------------
# Public entry points
# -----------------------------------------------------------------------------


def new_error_points_spaced(
    aggregate: AggregateFunc,
    series_index: int,
    total_series: int,
    num_points: int,
    num_error_bars: int,
    min_x: float,
    max_x: float,
    generator: GeneratorFunc,
    min_range: float,
    max_range: float,
) -> tuple[np.ndarray, ErrorPoints]:
    """
    Generate one series as the series_index-th of total_series overlaid series.

    Returns:
        (points, error_points): an (n, 2) array of (x, y) and the markers.
    """
    result = spaced_series(
        aggregate,
        num_points,
        num_error_bars,
        FloatRange(min_x, max_x),
        generator,
        FloatRange(min_range, max_range),
        series_index=series_index,
        total_series=total_series,
    )
    return result.points, result.error_points


def new_error_points_x_spaced(
    aggregate: AggregateFunc,
    num_points: int,
    num_error_bars: int,
    data_range: FloatRange,
    generators: Sequence[PointGenerator],
) -> list[PointsAndErrorPoints]:
    """
    Generate every generator's series over a shared data_range.

    Each generator is clipped to its own point_range and offset by its
    position in generators. The first failure aborts the whole batch.

    Returns:
        One PointsAndErrorPoints per generator, in input order.
    """
    _check_counts(num_points, num_error_bars)
    total = len(generators)
    return [
        spaced_series(
            aggregate,
            num_points,
            num_error_bars,
            data_range,
            pg.generator,
            pg.point_range,
            series_index=i,
            total_series=total,
        )
        for i, pg in enumerate(generators)
    ]


def generate_from_config(
    config: SpacingConfig,
    aggregate: AggregateFunc,
    data_range: FloatRange,
    generators: Sequence[PointGenerator],
) -> list[PointsAndErrorPoints]:
    """new_error_points_x_spaced with counts taken from a SpacingConfig."""
    config.validate()
    return new_error_points_x_spaced(
        aggregate,
        config.num_points,
        config.num_error_bars,
        data_range,
        generators,
    )
