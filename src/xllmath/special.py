"""Gamma function with C ``tgamma`` semantics.

``math.gamma`` raises at poles and on overflow; a worksheet function has to
return an IEEE value instead, so this goes through ``scipy.special.gamma``:
``inf``/``nan`` at zero and the negative integers, ``inf`` on overflow.
"""

from __future__ import annotations

import numpy as np
from scipy.special import gamma as _gamma

__all__ = ["tgamma", "tgamma_vec"]


def tgamma(x: float) -> float:
    """Gamma(x). ``tgamma(n + 1) == n!`` for natural n."""
    return float(_gamma(float(x)))


def tgamma_vec(x) -> np.ndarray:
    return _gamma(np.asarray(x, dtype=float))
