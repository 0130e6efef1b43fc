"""Point generation algorithms — pure numpy/pandas.

Spaced line/error-bar generation, the two interpolation builders, stock
aggregation functions and placeholder error-bar containers.
"""

from errorpoints.algorithms.aggregate import (
    mean_and_conf95,
    mean_and_min_max,
    mean_and_std_err,
    median_and_min_max,
)
from errorpoints.algorithms.interpolation import linear_interpolation_function, step_function
from errorpoints.algorithms.padded import new_padded_error_points
from errorpoints.algorithms.spaced import (
    error_bar_offset,
    generate_from_config,
    new_error_points_spaced,
    new_error_points_x_spaced,
    spaced_series,
)

__all__ = [
    "error_bar_offset",
    "generate_from_config",
    "linear_interpolation_function",
    "mean_and_conf95",
    "mean_and_min_max",
    "mean_and_std_err",
    "median_and_min_max",
    "new_error_points_spaced",
    "new_error_points_x_spaced",
    "new_padded_error_points",
    "spaced_series",
    "step_function",
]
