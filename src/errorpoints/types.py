"""Data shapes produced by the spaced point generators.

A point series is a float array of shape (n, 2) holding (x, y) rows.
ErrorPoints holds the error-bar markers: positions plus (low, high)
deviations in x and y, all as parallel (n, 2) arrays.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

import numpy as np
import pandas as pd

from errorpoints.errors import ConfigurationError

# f(observations) -> (central, low, high)
AggregateFunc = Callable[[Sequence[float]], "tuple[float, float, float]"]

# g(x) -> observations at x
GeneratorFunc = Callable[[float], Sequence[float]]

POINT_COLUMNS = ["x", "y"]
ERROR_POINT_COLUMNS = ["x", "y", "x_low", "x_high", "y_low", "y_high"]


@dataclass(frozen=True)
class FloatRange:
    """Closed x interval [min, max] a generator is defined over."""
    min: float
    max: float

    def __post_init__(self) -> None:
        if np.isnan(self.min) or np.isnan(self.max):
            raise ConfigurationError(f"FloatRange bounds must not be NaN, got ({self.min}, {self.max})")
        if self.min > self.max:
            raise ConfigurationError(f"FloatRange min {self.min} is greater than max {self.max}")

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def to_dict(self) -> dict[str, float]:
        return {"min": self.min, "max": self.max}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FloatRange":
        return cls(min=float(data["min"]), max=float(data["max"]))


@dataclass(frozen=True)
class PointGenerator:
    """A generator function paired with the x range it is valid over."""
    generator: GeneratorFunc
    point_range: FloatRange


def _empty_pairs(n: int) -> np.ndarray:
    return np.zeros((n, 2), dtype=float)


@dataclass
class ErrorPoints:
    """Error-bar markers: positions with x and y (low, high) deviations.

    All three arrays have shape (n, 2). x_errors is always zero for the
    spaced generators since only vertical error bars are produced.
    """
    xys: np.ndarray = field(default_factory=lambda: _empty_pairs(0))
    x_errors: np.ndarray = field(default_factory=lambda: _empty_pairs(0))
    y_errors: np.ndarray = field(default_factory=lambda: _empty_pairs(0))

    def __post_init__(self) -> None:
        if not (len(self.xys) == len(self.x_errors) == len(self.y_errors)):
            raise ConfigurationError(
                "ErrorPoints arrays must have equal length, got "
                f"{len(self.xys)}, {len(self.x_errors)}, {len(self.y_errors)}"
            )

    @classmethod
    def empty(cls, n: int) -> "ErrorPoints":
        """Allocate n zero-valued entries."""
        return cls(xys=_empty_pairs(n), x_errors=_empty_pairs(n), y_errors=_empty_pairs(n))

    def __len__(self) -> int:
        return len(self.xys)

    def truncate(self, n: int) -> "ErrorPoints":
        """Return a copy holding only the first n entries."""
        return ErrorPoints(
            xys=self.xys[:n].copy(),
            x_errors=self.x_errors[:n].copy(),
            y_errors=self.y_errors[:n].copy(),
        )

    def to_dataframe(self) -> pd.DataFrame:
        """One row per marker with columns ERROR_POINT_COLUMNS."""
        data = np.hstack([self.xys, self.x_errors, self.y_errors])
        return pd.DataFrame(data, columns=ERROR_POINT_COLUMNS)


def points_to_dataframe(points: np.ndarray) -> pd.DataFrame:
    """Convert an (n, 2) point series to a DataFrame with columns x, y."""
    return pd.DataFrame(np.asarray(points, dtype=float).reshape(-1, 2), columns=POINT_COLUMNS)


@dataclass(frozen=True)
class PointsAndErrorPoints:
    """The line and error-bar markers generated for one series."""
    points: np.ndarray
    error_points: ErrorPoints

    def points_dataframe(self) -> pd.DataFrame:
        return points_to_dataframe(self.points)

    def error_points_dataframe(self) -> pd.DataFrame:
        return self.error_points.to_dataframe()
