"""Spacing configuration for the spaced point generators.

SpacingConfig is a JSON-friendly dataclass so callers can persist the
line/error-bar counts alongside their own plot settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from errorpoints.errors import ConfigurationError
from errorpoints.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_NUM_POINTS: int = 100
DEFAULT_NUM_ERROR_BARS: int = 10


@dataclass
class SpacingConfig:
    """How many line points and error bars to spread across the x range."""
    num_points: int = DEFAULT_NUM_POINTS          # evenly spaced line points, >= 2
    num_error_bars: int = DEFAULT_NUM_ERROR_BARS  # error-bar slots, >= 0

    def validate(self) -> None:
        """Raise ConfigurationError if the counts cannot be generated."""
        if self.num_points < 2:
            raise ConfigurationError(
                f"only 2 or more points can be used, got num_points={self.num_points}"
            )
        if self.num_error_bars < 0:
            raise ConfigurationError(
                f"num_error_bars must be >= 0, got {self.num_error_bars}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num_points": self.num_points,
            "num_error_bars": self.num_error_bars,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpacingConfig":
        """
        Tolerant loader:
        - ignores unknown keys (with a warning)
        - missing keys fall back to defaults
        """
        known = {"num_points", "num_error_bars"}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("SpacingConfig: ignoring unknown keys %s", unknown)
        return cls(
            num_points=int(data.get("num_points", DEFAULT_NUM_POINTS)),
            num_error_bars=int(data.get("num_error_bars", DEFAULT_NUM_ERROR_BARS)),
        )
