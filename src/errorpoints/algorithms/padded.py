"""Placeholder error-bar containers, one per input series."""

from __future__ import annotations

from typing import Optional, Sequence

from errorpoints.types import AggregateFunc, ErrorPoints

# Entries allocated per placeholder container.
DEFAULT_NUM_ERROR_BARS = 4


def new_padded_error_points(
    aggregate: Optional[AggregateFunc],
    *lines: Sequence,
) -> list[ErrorPoints]:
    """
    Allocate one zero-valued ErrorPoints of DEFAULT_NUM_ERROR_BARS entries per line.

    Nothing is read from the lines and aggregate is never called; the
    containers only reserve room for markers filled in later.
    """
    return [ErrorPoints.empty(DEFAULT_NUM_ERROR_BARS) for _ in lines]
