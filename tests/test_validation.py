"""Unit tests for check_floats."""

from __future__ import annotations

import numpy as np
import pytest

from errorpoints.errors import NonFiniteValueError
from errorpoints.validation import check_floats


def test_finite_values_pass() -> None:
    check_floats()
    check_floats(0.0, -1.5, 1e300)
    check_floats(*np.linspace(0.0, 1.0, 5))


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
def test_non_finite_values_fail(bad: float) -> None:
    with pytest.raises(NonFiniteValueError):
        check_floats(1.0, bad, 2.0)


def test_reports_first_bad_value() -> None:
    with pytest.raises(NonFiniteValueError) as exc_info:
        check_floats(1.0, float("inf"), float("nan"))
    assert exc_info.value.value == float("inf")
    assert "inf" in str(exc_info.value)
