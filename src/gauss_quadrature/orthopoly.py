"""Three-term recurrence coefficients of the classical weight functions.

Every generator returns a pair ``(a, b)`` with ``len(a) == n`` and
``len(b) == n + 1`` such that the monic orthogonal polynomials satisfy

    p_k(x) = (x - a[k-1]) p_{k-1}(x) - b[k-1]**2 p_{k-2}(x),   k >= 1,

with ``p_0 = 1``, ``p_{-1} = 0`` and ``b[0]**2`` equal to the integral of
the weight function over its interval.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike, DTypeLike
from scipy.special import gamma, gammaln

from .errors import InvalidDomain

__all__ = [
    "float_type",
    "legendre_coefs",
    "chebyshev_coefs",
    "jacobi_coefs",
    "laguerre_coefs",
    "hermite_coefs",
    "shifted_legendre_coefs",
    "orthonormal_poly",
]


def float_type(dtype: DTypeLike) -> type:
    """Return the NumPy scalar type for ``dtype``, which must be floating."""
    kind = np.dtype(dtype)
    if not np.issubdtype(kind, np.floating):
        raise InvalidDomain(f"dtype must be a floating type, got {kind}")
    return kind.type


def _pi(T: type):
    # pi correctly rounded in the working precision, also for longdouble
    return np.arccos(T(-1))


def _check_degree(n: int) -> None:
    if n < 1:
        raise InvalidDomain(f"n must be positive, got {n}")


def legendre_coefs(n: int, dtype: DTypeLike = np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """Weight ``1`` on ``(-1, 1)``."""
    _check_degree(n)
    T = float_type(dtype)
    a = np.zeros(n, dtype=T)
    b = np.empty(n + 1, dtype=T)
    b[0] = np.sqrt(T(2))
    k = np.arange(2, n + 2, dtype=T)
    b[1:] = (k - 1) / np.sqrt((2 * k - 1) * (2 * k - 3))
    return a, b


def chebyshev_coefs(n: int, kind: int = 1, dtype: DTypeLike = np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """Weight ``1/sqrt(1-x^2)`` (``kind=1``) or ``sqrt(1-x^2)`` (``kind=2``)."""
    _check_degree(n)
    T = float_type(dtype)
    half = T(1) / 2
    a = np.zeros(n, dtype=T)
    b = np.full(n + 1, half, dtype=T)
    if kind == 1:
        b[0] = np.sqrt(_pi(T))
        b[1] = np.sqrt(half)
    elif kind == 2:
        b[0] = np.sqrt(half * _pi(T))
    else:
        raise InvalidDomain(f"Unsupported value for kind: {kind}")
    return a, b


def jacobi_coefs(n: int, alpha: float, beta: float, dtype: DTypeLike = np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """Weight ``(1-x)^alpha (1+x)^beta`` on ``(-1, 1)``, ``alpha, beta > -1``.

    ``b[0]`` comes from log-gamma values evaluated in double precision, so
    it is only accurate to double precision for wider dtypes.
    """
    _check_degree(n)
    if not (alpha > -1 and beta > -1):
        raise InvalidDomain(f"Jacobi rule needs alpha > -1 and beta > -1, got {alpha}, {beta}")
    T = float_type(dtype)
    al, be = T(alpha), T(beta)
    ab = al + be
    a = np.zeros(n, dtype=T)
    b = np.zeros(n + 1, dtype=T)
    # log-gamma keeps b[0] finite for large alpha, beta
    lg = (gammaln(alpha + 1) + gammaln(beta + 1) - gammaln(alpha + beta + 2)) / 2
    b[0] = T(2) ** ((ab + 1) / 2) * T(np.exp(lg))
    abi = ab + 2
    a[0] = (be - al) / abi
    b[1] = np.sqrt(4 * (al + 1) * (be + 1) / ((ab + 3) * abi * abi))
    if n >= 2:
        i = np.arange(2, n + 1, dtype=T)
        abi = ab + 2 * i
        a[1:] = (be * be - al * al) / ((abi - 2) * abi)
        b[2:] = np.sqrt(4 * i * (al + i) * (be + i) * (ab + i) / ((abi * abi - 1) * abi * abi))
    return a, b


def laguerre_coefs(n: int, alpha: float = 0.0, dtype: DTypeLike = np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """Weight ``x^alpha exp(-x)`` on ``(0, inf)``, ``alpha > -1``.

    ``b[0] = sqrt(gamma(alpha + 1))`` is evaluated in double precision.
    """
    _check_degree(n)
    if not alpha > -1:
        raise InvalidDomain(f"Laguerre rule needs alpha > -1, got {alpha}")
    T = float_type(dtype)
    al = T(alpha)
    i = np.arange(1, n + 1, dtype=T)
    a = 2 * i - 1 + al
    b = np.empty(n + 1, dtype=T)
    b[0] = np.sqrt(T(gamma(alpha + 1)))
    b[1:] = np.sqrt(i * (al + i))
    return a, b


def hermite_coefs(n: int, dtype: DTypeLike = np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """Weight ``exp(-x^2)`` on the real line."""
    _check_degree(n)
    T = float_type(dtype)
    i = np.arange(1, n + 1, dtype=T)
    a = np.zeros(n, dtype=T)
    b = np.empty(n + 1, dtype=T)
    b[0] = np.sqrt(np.sqrt(_pi(T)))
    b[1:] = np.sqrt(i / 2)
    return a, b


def shifted_legendre_coefs(n: int, dtype: DTypeLike = np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """Weight ``1`` on ``(0, 1)``; reference basis for the modified moments."""
    _check_degree(n)
    T = float_type(dtype)
    a = np.full(n, T(1) / 2, dtype=T)
    b = np.empty(n + 1, dtype=T)
    b[0] = T(1)
    k = np.arange(2, n + 2, dtype=T)
    b[1:] = (k - 1) / (2 * np.sqrt((2 * k - 1) * (2 * k - 3)))
    return a, b


def orthonormal_poly(x: ArrayLike, a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """
    Evaluate the orthonormal polynomials generated by ``(a, b)``.

    Parameters
    ----------
    x : array_like
        Evaluation points, shape ``(m,)``.
    a, b : array_like
        Recurrence coefficients with ``len(b) == len(a) + 1``.

    Returns
    -------
    p : ndarray
        Array of shape ``(m, n + 1)`` with ``p[i, j]`` the orthonormal
        polynomial of degree ``j`` evaluated at ``x[i]``.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    n = a.size
    if b.size < n + 1:
        raise InvalidDomain("b must have one more entry than a")
    if np.any(b[: n + 1] == 0):
        raise InvalidDomain("recurrence coefficients b must be non-zero")
    x = np.asarray(x)
    dt = np.result_type(a, b, x, np.float16)
    x = x.astype(dt).ravel()
    p = np.empty((x.size, n + 1), dtype=dt)
    p[:, 0] = 1 / b[0]
    if n == 0:
        return p
    p[:, 1] = (x - a[0]) * p[:, 0] / b[1]
    for j in range(1, n):
        p[:, j + 1] = ((x - a[j]) * p[:, j] - b[j] * p[:, j - 1]) / b[j + 1]
    return p
