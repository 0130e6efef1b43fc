"""Unit tests for step_function and linear_interpolation_function."""

from __future__ import annotations

import logging

import pytest

from errorpoints.algorithms.interpolation import linear_interpolation_function, step_function
from errorpoints.errors import ConfigurationError, OutOfDomainError


# -----------------------------------------------------------------------------
# step_function
# -----------------------------------------------------------------------------


@pytest.fixture
def step():
    return step_function({5.0: [50.0], 1.0: [10.0], 3.0: [30.0]})


def test_step_selects_first_key_greater_than_x(step) -> None:
    assert step(2.0) == [30.0]
    assert step(4.99) == [50.0]


def test_step_at_key_moves_to_next_key(step) -> None:
    assert step(1.0) == [30.0]
    assert step(3.0) == [50.0]


def test_step_clamps_to_last_key(step) -> None:
    assert step(5.0) == [50.0]
    assert step(1e9) == [50.0]


def test_step_below_first_key_is_out_of_domain(step) -> None:
    with pytest.raises(OutOfDomainError) as exc_info:
        step(0.5)
    assert exc_info.value.x == 0.5
    assert exc_info.value.lower == 1.0
    assert exc_info.value.upper == 5.0
    assert "0.5" in str(exc_info.value)


def test_step_out_of_domain_logs_warning(step, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="errorpoints"):
        with pytest.raises(OutOfDomainError):
            step(-1.0)
    assert any("undefined" in r.getMessage() for r in caplog.records)


def test_step_single_key() -> None:
    f = step_function({2.0: [1.0, 2.0]})
    assert f(2.0) == [1.0, 2.0]
    assert f(10.0) == [1.0, 2.0]
    with pytest.raises(OutOfDomainError):
        f(1.0)


def test_step_does_not_share_vectors_with_caller() -> None:
    data = {1.0: [10.0], 2.0: [20.0]}
    f = step_function(data)
    out = f(1.5)
    out.append(99.0)
    data[2.0].append(77.0)
    assert f(1.5) == [20.0]


def test_step_empty_map_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        step_function({})


def test_out_of_domain_is_a_value_error(step) -> None:
    with pytest.raises(ValueError):
        step(0.0)


# -----------------------------------------------------------------------------
# linear_interpolation_function
# -----------------------------------------------------------------------------


@pytest.fixture
def linear():
    return linear_interpolation_function({3.0: [10.0, 20.0], 1.0: [0.0, 0.0]})


def test_linear_midpoint(linear) -> None:
    assert linear(2.0) == pytest.approx([5.0, 10.0])


def test_linear_returns_unweighted_midpoint(linear) -> None:
    # The blend is always 50/50 and does not depend on where x falls between
    # the two keys. A distance-weighted interpolation would give [1, 2] here.
    assert linear(1.2) == pytest.approx([5.0, 10.0])
    assert linear(2.9) == pytest.approx([5.0, 10.0])


def test_linear_at_first_key_uses_first_interval(linear) -> None:
    assert linear(1.0) == pytest.approx([5.0, 10.0])


@pytest.mark.parametrize("x", [0.5, 3.0, 4.0])
def test_linear_outside_interior_is_out_of_domain(linear, x: float) -> None:
    with pytest.raises(OutOfDomainError) as exc_info:
        linear(x)
    assert exc_info.value.lower == 1.0
    assert exc_info.value.upper == 3.0


def test_linear_picks_bracketing_pair() -> None:
    f = linear_interpolation_function({0.0: [0.0], 1.0: [2.0], 2.0: [4.0], 3.0: [8.0]})
    assert f(0.5) == pytest.approx([1.0])
    assert f(1.5) == pytest.approx([3.0])
    assert f(2.5) == pytest.approx([6.0])


def test_linear_mismatched_lengths_fail_at_build_time() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        linear_interpolation_function({1.0: [1.0, 2.0], 2.0: [3.0]})
    assert "mismatched" in str(exc_info.value)


def test_linear_empty_map_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        linear_interpolation_function({})


def test_linear_single_key_has_no_interior() -> None:
    f = linear_interpolation_function({1.0: [1.0]})
    with pytest.raises(OutOfDomainError):
        f(1.0)
