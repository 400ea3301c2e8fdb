# black_scholes_vec.py
# Vectorised normal CDF and Black-Scholes-Merton put.
# All public functions accept scalars *or* NumPy arrays and broadcast.

from __future__ import annotations
import numpy as np
from scipy.special import erf

_SQRT2 = np.sqrt(2.0)


def normal_cdf_vec(x) -> np.ndarray:
    """Vectorised standard-normal CDF, ``0.5 * (1 + erf(x / sqrt(2)))``."""
    x = np.asarray(x, dtype=float)
    return 0.5 * (1.0 + erf(x / _SQRT2))


def domain_mask(S, sigma, K, t) -> np.ndarray:
    """Boolean mask: True where sigma, t, S and K are all > 0.

    NaN entries compare False against ``<= 0`` in the scalar guard, so they
    are kept here too and propagate through the formula.
    """
    S, sigma, K, t = (np.asarray(x, dtype=float) for x in (S, sigma, K, t))
    return ~((sigma <= 0) | (t <= 0) | (S <= 0) | (K <= 0))


# ---------------------------------------------------------------------------
# Vectorised put
# ---------------------------------------------------------------------------
def bsm_put_vec(r, S, sigma, K, t) -> np.ndarray:
    """Vectorised Black-Scholes-Merton put.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.

    Returns
    -------
    np.ndarray
        Put values, same shape as the broadcasted inputs.  Entries whose
        parameters fail the domain guard are ``NaN``.
    """
    r, S, sigma, K, t = np.broadcast_arrays(
        *(np.asarray(x, dtype=float) for x in (r, S, sigma, K, t))
    )
    ok = domain_mask(S, sigma, K, t)

    # Dummy positive values in masked-out slots keep log/div quiet
    S_ = np.where(ok, S, 1.0)
    K_ = np.where(ok, K, 1.0)
    sig_ = np.where(ok, sigma, 1.0)
    t_ = np.where(ok, t, 1.0)

    sig_sqrt_t = sig_ * np.sqrt(t_)
    d1 = (np.log(S_ / K_) + (r + 0.5 * sig_ * sig_) * t_) / sig_sqrt_t
    d2 = d1 - sig_sqrt_t
    put_px = K_ * np.exp(-r * t_) * normal_cdf_vec(-d2) - S_ * normal_cdf_vec(-d1)

    return np.where(ok, put_px, np.nan)
