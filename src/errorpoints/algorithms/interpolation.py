"""
Interpolation builders over sparse keyed samples.

Both builders take a mapping x-key -> observation vector and return a
function f(x) -> observation vector. Keys are sorted once when the function
is built; the returned function only reads that sorted index.

  - step_function: returns the vector stored at the first key strictly
    greater than x, clamped to the last key. x below the first key is
    undefined.
  - linear_interpolation_function: returns the element-wise midpoint of the
    vectors at the last key <= x and the first key > x. The blend is always
    50/50; it does not weight by distance to either key. x below the first
    key or at/above the last key is undefined.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Callable, Mapping, Sequence

import numpy as np

from errorpoints.errors import ConfigurationError, OutOfDomainError
from errorpoints.utils.logging import get_logger

logger = get_logger(__name__)


def _sorted_keys(data: Mapping[float, Sequence[float]], name: str) -> tuple[float, ...]:
    if not data:
        raise ConfigurationError(f"{name}: at least one key is required")
    return tuple(sorted(data))


def step_function(data: Mapping[float, Sequence[float]]) -> Callable[[float], list[float]]:
    """
    Build a step-hold function over data.

    Args:
        data: Map x-key -> observation vector.

    Returns:
        f(x) returning the vector at the first key > x (the last key if x is
        at or beyond it). The stored vector is returned as a new list.

    Raises:
        ConfigurationError: data is empty.
        OutOfDomainError: (from f) x is below the first key.
    """
    keys = _sorted_keys(data, "step_function")
    snapshot = {k: list(data[k]) for k in keys}

    def f(x: float) -> list[float]:
        idx = bisect_right(keys, x)
        if idx >= len(keys):
            idx = len(keys) - 1
        if idx == 0 and keys[0] > x:
            msg = (
                f"values at x={x} are undefined, earliest point in step function "
                f"defined at x={keys[0]}"
            )
            logger.warning(msg)
            raise OutOfDomainError(x, keys[0], keys[-1], msg)
        return list(snapshot[keys[idx]])

    return f


def linear_interpolation_function(
    data: Mapping[float, Sequence[float]],
) -> Callable[[float], list[float]]:
    """
    Build a pairwise midpoint function over data.

    Element n of every vector is blended with element n of its neighbour,
    so every vector must have the same length.

    Raises:
        ConfigurationError: data is empty or vector lengths differ.
        OutOfDomainError: (from f) x is below the first key, or at or
            above the last key.
    """
    keys = _sorted_keys(data, "linear_interpolation_function")
    sizes = {len(v) for v in data.values()}
    if len(sizes) != 1:
        raise ConfigurationError(
            "linear_interpolation_function: mismatched vector sizes "
            f"{sorted(sizes)}, they must all be equal to interpolate"
        )
    table = np.array([data[k] for k in keys], dtype=float).reshape(len(keys), -1)

    def f(x: float) -> list[float]:
        point2 = bisect_right(keys, x)
        if point2 >= len(keys) or point2 == 0:
            msg = f"value x={x} exceeds defined range x={keys[0]} -> x={keys[-1]}"
            logger.warning(msg)
            raise OutOfDomainError(x, keys[0], keys[-1], msg)
        point1 = point2 - 1
        return ((table[point1] + table[point2]) / 2.0).tolist()

    return f
