import math
import numbers
from typing import Tuple


class InvalidParameter(ValueError):
    """Raised when a sample count or correlation cannot define a chain."""


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_parameters(n, rho, burn_in: int = 0) -> Tuple[int, float]:
    """
    Checks sampler inputs once, before any draw is made.

    Args:
        n: number of samples, integer >= 1
        rho: correlation, real with |rho| < 1
        burn_in: discarded transitions, integer >= 0
    Returns:
        (n, rho) as plain int and float
    """
    if not _is_integer(n):
        raise InvalidParameter(f"Sample count must be an integer, got {n!r}")
    if n < 1:
        raise InvalidParameter(f"Sample count must be at least 1, got {n}")

    if isinstance(rho, bool) or not isinstance(rho, numbers.Real):
        raise InvalidParameter(f"Correlation must be a real number, got {rho!r}")
    if not math.isfinite(rho) or abs(rho) >= 1:
        raise InvalidParameter(f"Correlation must lie strictly between -1 and 1, got {rho}")

    if not _is_integer(burn_in) or burn_in < 0:
        raise InvalidParameter(f"Burn-in must be a non-negative integer, got {burn_in!r}")

    return int(n), float(rho)


def conditional_sd(rho: float) -> float:
    # sd of X | Y (and Y | X) under unit marginal variances
    return math.sqrt(1.0 - rho * rho)
