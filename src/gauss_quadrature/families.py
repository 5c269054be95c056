"""Classical weight functions and their Gauss rules.

=========================  ==============  ========================
Family                     Interval        Weight function
=========================  ==============  ========================
Legendre                   (-1, 1)         1
Chebyshev, kind 1          (-1, 1)         1 / sqrt(1 - x^2)
Chebyshev, kind 2          (-1, 1)         sqrt(1 - x^2)
Jacobi                     (-1, 1)         (1 - x)^alpha (1 + x)^beta
Laguerre                   (0, inf)        x^alpha exp(-x)
Hermite                    (-inf, inf)     exp(-x^2)
LogWeight                  (0, 1)          x^rho log(1/x)
=========================  ==============  ========================

Each family is a small frozen dataclass; :func:`rule` and
:func:`coefficients` accept any of them.  The lower-case functions are
shortcuts that build the family and call :func:`rule`.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import ClassVar, FrozenSet, Tuple, Union

import numpy as np
from numpy.typing import DTypeLike

from .errors import InvalidDomain
from .golub_welsch import EndPt, QuadratureRule, RuleOptions, assemble_rule
from .moments import logweight_coefs, logweight_coefs_real
from .orthopoly import (
    chebyshev_coefs,
    hermite_coefs,
    jacobi_coefs,
    laguerre_coefs,
    legendre_coefs,
)

__all__ = [
    "Legendre",
    "Chebyshev",
    "Jacobi",
    "Laguerre",
    "Hermite",
    "LogWeight",
    "WeightFamily",
    "coefficients",
    "rule",
    "legendre",
    "lobatto",
    "chebyshev",
    "jacobi",
    "laguerre",
    "hermite",
    "logweight",
]

_ALL_ENDPOINTS = frozenset(EndPt)


@dataclass(frozen=True)
class Legendre:
    lo: ClassVar[float] = -1.0
    hi: ClassVar[float] = 1.0
    endpoints: ClassVar[FrozenSet[EndPt]] = _ALL_ENDPOINTS

    def coefficients(self, n: int, dtype: DTypeLike = np.float64):
        return legendre_coefs(n, dtype)


@dataclass(frozen=True)
class Chebyshev:
    kind: int = 1

    lo: ClassVar[float] = -1.0
    hi: ClassVar[float] = 1.0
    endpoints: ClassVar[FrozenSet[EndPt]] = _ALL_ENDPOINTS

    def __post_init__(self):
        if self.kind not in (1, 2):
            raise InvalidDomain(f"Unsupported value for kind: {self.kind}")

    def coefficients(self, n: int, dtype: DTypeLike = np.float64):
        return chebyshev_coefs(n, self.kind, dtype)


@dataclass(frozen=True)
class Jacobi:
    alpha: float
    beta: float

    lo: ClassVar[float] = -1.0
    hi: ClassVar[float] = 1.0
    endpoints: ClassVar[FrozenSet[EndPt]] = _ALL_ENDPOINTS

    def __post_init__(self):
        if not (self.alpha > -1 and self.beta > -1):
            raise InvalidDomain(
                f"Jacobi rule needs alpha > -1 and beta > -1, got {self.alpha}, {self.beta}"
            )

    def coefficients(self, n: int, dtype: DTypeLike = np.float64):
        return jacobi_coefs(n, self.alpha, self.beta, dtype)


@dataclass(frozen=True)
class Laguerre:
    alpha: float = 0.0

    lo: ClassVar[float] = 0.0
    hi: ClassVar[float] = np.inf
    endpoints: ClassVar[FrozenSet[EndPt]] = frozenset({EndPt.NEITHER, EndPt.LEFT})

    def __post_init__(self):
        if not self.alpha > -1:
            raise InvalidDomain(f"Laguerre rule needs alpha > -1, got {self.alpha}")

    def coefficients(self, n: int, dtype: DTypeLike = np.float64):
        return laguerre_coefs(n, self.alpha, dtype)


@dataclass(frozen=True)
class Hermite:
    lo: ClassVar[float] = -np.inf
    hi: ClassVar[float] = np.inf
    endpoints: ClassVar[FrozenSet[EndPt]] = frozenset({EndPt.NEITHER})

    def coefficients(self, n: int, dtype: DTypeLike = np.float64):
        return hermite_coefs(n, dtype)


@dataclass(frozen=True)
class LogWeight:
    """``x^rho log(1/x)``; an integral ``rho`` selects the exact integer recursion."""

    rho: float = 0

    lo: ClassVar[float] = 0.0
    hi: ClassVar[float] = 1.0
    endpoints: ClassVar[FrozenSet[EndPt]] = _ALL_ENDPOINTS

    def __post_init__(self):
        if self.integral:
            if self.rho < 0:
                raise InvalidDomain(f"r must be non-negative, got {self.rho}")
        elif not self.rho > -1:
            raise InvalidDomain(f"rho must exceed -1, got {self.rho}")

    @property
    def integral(self) -> bool:
        return isinstance(self.rho, numbers.Integral) and not isinstance(self.rho, bool)

    def coefficients(self, n: int, dtype: DTypeLike = np.float64):
        if self.integral:
            return logweight_coefs(n, int(self.rho), dtype)
        return logweight_coefs_real(n, float(self.rho), dtype)


WeightFamily = Union[Legendre, Chebyshev, Jacobi, Laguerre, Hermite, LogWeight]


def coefficients(family: WeightFamily, n: int, dtype: DTypeLike = np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """Recurrence coefficients ``(a, b)`` of ``family`` for ``n`` nodes."""
    if n < 1:
        raise InvalidDomain(f"n must be positive, got {n}")
    return family.coefficients(n, dtype)


def rule(
    family: WeightFamily,
    n: int,
    endpt: EndPt = EndPt.NEITHER,
    dtype: DTypeLike = np.float64,
    *,
    options: RuleOptions | None = None,
) -> QuadratureRule:
    """
    ``n``-point Gauss (``NEITHER``), Radau (``LEFT``/``RIGHT``) or Lobatto
    (``BOTH``) rule for the weight function of ``family``.
    """
    if endpt not in family.endpoints:
        raise InvalidDomain(f"{type(family).__name__} rules do not support endpt={endpt!r}")
    if endpt is EndPt.BOTH and n == 1:
        raise InvalidDomain("Must have at least two points for both ends.")
    a, b = coefficients(family, n, dtype)
    return assemble_rule(family.lo, family.hi, a, b, endpt, options=options)


def legendre(n: int, endpt: EndPt = EndPt.NEITHER, dtype: DTypeLike = np.float64) -> QuadratureRule:
    return rule(Legendre(), n, endpt, dtype)


def lobatto(n: int, dtype: DTypeLike = np.float64) -> QuadratureRule:
    """Gauss--Lobatto--Legendre rule, both end points of ``(-1, 1)`` included."""
    return rule(Legendre(), n, EndPt.BOTH, dtype)


def chebyshev(n: int, kind: int = 1, endpt: EndPt = EndPt.NEITHER, dtype: DTypeLike = np.float64) -> QuadratureRule:
    return rule(Chebyshev(kind), n, endpt, dtype)


def jacobi(n: int, alpha: float, beta: float, endpt: EndPt = EndPt.NEITHER, dtype: DTypeLike = np.float64) -> QuadratureRule:
    return rule(Jacobi(alpha, beta), n, endpt, dtype)


def laguerre(n: int, alpha: float = 0.0, endpt: EndPt = EndPt.NEITHER, dtype: DTypeLike = np.float64) -> QuadratureRule:
    return rule(Laguerre(alpha), n, endpt, dtype)


def hermite(n: int, dtype: DTypeLike = np.float64) -> QuadratureRule:
    return rule(Hermite(), n, EndPt.NEITHER, dtype)


def logweight(n: int, rho: float = 0, endpt: EndPt = EndPt.NEITHER, dtype: DTypeLike = np.float64) -> QuadratureRule:
    """Rule for ``x^rho log(1/x)`` on ``(0, 1)``.

    Pass an ``int`` for the exact integer recursion, a ``float`` for the
    general one.
    """
    return rule(LogWeight(rho), n, endpt, dtype)
