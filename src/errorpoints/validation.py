"""Float validation for generated coordinates and observations."""

from __future__ import annotations

import numpy as np

from errorpoints.errors import NonFiniteValueError


def check_floats(*values: float) -> None:
    """Raise NonFiniteValueError on the first NaN or infinite value.

    Accepts scalars, so a whole observation vector is checked with
    ``check_floats(*ys)``.
    """
    if not values:
        return
    arr = np.asarray(values, dtype=float)
    bad = np.flatnonzero(~np.isfinite(arr))
    if bad.size:
        raise NonFiniteValueError(float(arr[bad[0]]))
