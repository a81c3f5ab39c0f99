import math

import numpy as np
import pytest

from validation import InvalidParameter, conditional_sd, validate_parameters


@pytest.mark.parametrize("rho", [1.0, -1.0, 1.5, -2.0, math.nan, math.inf])
def test_rejects_bad_correlation(rho):
    with pytest.raises(InvalidParameter):
        validate_parameters(10, rho)


@pytest.mark.parametrize("n", [0, -5, 2.5, "10", True])
def test_rejects_bad_sample_count(n):
    with pytest.raises(InvalidParameter):
        validate_parameters(n, 0.5)


@pytest.mark.parametrize("burn_in", [-1, 1.5])
def test_rejects_bad_burn_in(burn_in):
    with pytest.raises(InvalidParameter):
        validate_parameters(10, 0.5, burn_in)


def test_accepts_numpy_scalars():
    n, rho = validate_parameters(np.int64(3), np.float64(-0.25))
    assert (n, rho) == (3, -0.25)
    assert type(n) is int and type(rho) is float


def test_invalid_parameter_is_a_value_error():
    assert issubclass(InvalidParameter, ValueError)


def test_conditional_sd():
    assert conditional_sd(0.6) == pytest.approx(0.8)
    assert conditional_sd(0.0) == 1.0
