"""
errorpoints: sample points and error bars for aggregate-statistics plots.

This package provides:
- new_error_points_spaced / new_error_points_x_spaced: evenly spaced line
  points plus staggered error-bar markers for one or many generators
- step_function / linear_interpolation_function: build generators from
  sparse keyed samples
- stock aggregation functions (mean +/- sem, 95% CI, min/max)
- Logging utilities for library and script use

For log output in standalone scripts:
    ```python
    from errorpoints.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from errorpoints.algorithms import (
    generate_from_config,
    linear_interpolation_function,
    mean_and_conf95,
    mean_and_min_max,
    mean_and_std_err,
    median_and_min_max,
    new_error_points_spaced,
    new_error_points_x_spaced,
    new_padded_error_points,
    step_function,
)
from errorpoints.config import SpacingConfig
from errorpoints.errors import (
    ConfigurationError,
    ErrorPointsError,
    NonFiniteValueError,
    OutOfDomainError,
)
from errorpoints.types import ErrorPoints, FloatRange, PointGenerator, PointsAndErrorPoints
from errorpoints.utils.logging import configure_logging, get_logger
from errorpoints.validation import check_floats

# Keep errorpoints records off the root logger until an application or
# configure_logging() installs a real handler.
_logger = logging.getLogger("errorpoints")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "ErrorPoints",
    "ErrorPointsError",
    "FloatRange",
    "NonFiniteValueError",
    "OutOfDomainError",
    "PointGenerator",
    "PointsAndErrorPoints",
    "SpacingConfig",
    "check_floats",
    "configure_logging",
    "generate_from_config",
    "get_logger",
    "linear_interpolation_function",
    "mean_and_conf95",
    "mean_and_min_max",
    "mean_and_std_err",
    "median_and_min_max",
    "new_error_points_spaced",
    "new_error_points_x_spaced",
    "new_padded_error_points",
    "step_function",
]

__version__ = "0.1.0"
