import math
from math import erf, sqrt

import numpy as np

from .core import PutSpec, DomainError

_SQRT2 = sqrt(2.0)


def normal_cdf(x: float) -> float:
    """Standard-normal CDF via erf. Saturates to 0/1 for large |x|."""
    return 0.5 * (1.0 + erf(x / _SQRT2))


def bsm_put(r: float, S: float, sigma: float, K: float, t: float) -> float:
    """Black-Scholes-Merton European put value.

    Returns ``nan`` when any of sigma, t, S, K is ``<= 0``. Callers must
    test the result with ``is_domain_error`` (or ``math.isnan``).
    """
    if sigma <= 0 or t <= 0 or S <= 0 or K <= 0:
        return math.nan

    # float64 + errstate: underflow/overflow give IEEE inf/nan where the
    # math module would raise
    r, S, sigma, K, t = (np.float64(x) for x in (r, S, sigma, K, t))
    with np.errstate(all="ignore"):
        sig_sqrt_t = sigma * np.sqrt(t)
        d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * t) / sig_sqrt_t
        d2 = d1 - sig_sqrt_t
        put = K * np.exp(-r * t) * normal_cdf(-d2) - S * normal_cdf(-d1)

    return float(put)


def price(spec: PutSpec) -> float:
    return bsm_put(*spec.as_args())


def bsm_put_strict(r: float, S: float, sigma: float, K: float, t: float) -> float:
    """Like ``bsm_put`` but raises ``DomainError`` instead of returning nan."""
    spec = PutSpec(r, S, sigma, K, t)
    bad = spec.invalid_params()
    if bad:
        raise DomainError(bad)
    return price(spec)


def is_domain_error(value: float) -> bool:
    return math.isnan(value)
