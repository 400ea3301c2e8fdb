from __future__ import annotations
from dataclasses import dataclass, astuple


PARAMS = ("r", "S", "sigma", "K", "t")


class DomainError(ValueError):
    """Raised by the strict pricing API when a parameter is out of domain.

    Parameters
    ----------
    names : tuple of str
        The offending parameter names, in guard order (sigma, t, S, K).
    """

    def __init__(self, names: tuple[str, ...]):
        self.names = tuple(names)
        super().__init__(
            f"{', '.join(self.names)} must be positive"
        )


# ---------------------------------------------------------------------------
# Put contract + market snapshot
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PutSpec:
    """European put inputs, in ``bsm_put`` argument order.

    Construction never raises; use ``in_domain()`` or the strict pricer
    to check the parameters.
    """
    r: float          # continuous risk-free, annualised
    S: float          # spot
    sigma: float      # annualised vol
    K: float          # strike
    t: float          # years to expiry

    def in_domain(self) -> bool:
        return not self.invalid_params()

    def invalid_params(self) -> tuple[str, ...]:
        """Names of the guarded parameters that are ``<= 0``."""
        bad = []
        for name in ("sigma", "t", "S", "K"):
            if getattr(self, name) <= 0:
                bad.append(name)
        return tuple(bad)

    def as_args(self) -> tuple[float, ...]:
        return astuple(self)
