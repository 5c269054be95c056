"""Recurrence coefficients for the logarithmic weight ``x^rho log(1/x)``.

The weight has no closed-form recurrence, so its coefficients are
obtained from modified moments

    nu[k] = int_0^1 x^rho log(1/x) q_k(x) dx,    k = 0, ..., 2n-1,

taken against the orthonormal shifted Legendre polynomials ``q_k`` on
``(0, 1)``, followed by the modified Chebyshev algorithm.  Both moment
recursions avoid the cancellation of the naive power-sum formula by
carrying a running product ``B`` and a running sum ``S`` of reciprocals.

The modified Chebyshev algorithm is well conditioned for this weight and
basis, but the entries of ``sigma`` lose relative accuracy as ``n`` grows;
no re-stabilisation is attempted.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from .errors import AlgorithmBreakdown, InvalidDomain
from .orthopoly import float_type, shifted_legendre_coefs

__all__ = [
    "modified_moments",
    "modified_moments_real",
    "modified_chebyshev",
    "logweight_coefs",
    "logweight_coefs_real",
]


def modified_moments(n: int, r: int = 0, dtype: DTypeLike = np.float64) -> np.ndarray:
    """Exact modified moments of ``x^r log(1/x)`` for an integer ``r >= 0``.

    Returns an array of length ``2 * n``.
    """
    if r < 0:
        raise InvalidDomain(f"r must be non-negative, got {r}")
    if n < 0:
        raise InvalidDomain(f"n must be non-negative, got {n}")
    T = float_type(dtype)
    nu = np.zeros(2 * n, dtype=T)
    if n == 0:
        return nu
    m = min(2 * n, r + 1)
    rrp1 = 1 / T(r + 1)
    B = T(1)
    S = rrp1
    nu[0] = rrp1 * S
    for k in range(1, m):
        rmk = T(r + 1 - k)
        B *= rmk / T(r + 1 + k)
        S += 1 / T(r + 1 + k) - 1 / rmk
        nu[k] = rrp1 * B * S * np.sqrt(T(2 * k + 1))
    if 2 * n > r + 1:
        # q_{r+1} is the first basis element orthogonal to x^r
        p = T(1)
        for j in range(1, r + 1):
            p *= j / T(2 * (2 * j + 1))
        nu[r + 1] = -np.sqrt(T(2 * r + 3)) * p / (2 * (r + 1))
        for k in range(r + 2, 2 * n):
            kk = T(k)
            nu[k] = -nu[k - 1] * ((kk - r - 1) / (kk + r + 1)) * np.sqrt((2 * kk + 1) / (2 * kk - 1))
    return nu


def modified_moments_real(n: int, rho: float, dtype: DTypeLike = np.float64) -> np.ndarray:
    """Modified moments of ``x^rho log(1/x)`` for real ``rho > -1``.

    The recursion skips the factor belonging to index ``r + 1``, where
    ``r = round(rho)`` (ties to even, ``r = 0`` for negative ``rho``); that
    factor ``(rho - r) / (rho + r + 2)`` is folded into the closed form
    ``X`` instead, so ``rho`` close to an integer does not divide by a
    near-zero ``rho - r``.  At half-integers both neighbouring choices of
    ``r`` are equally well conditioned.
    """
    if not rho > -1:
        raise InvalidDomain(f"rho must exceed -1, got {rho}")
    if n < 0:
        raise InvalidDomain(f"n must be non-negative, got {n}")
    T = float_type(dtype)
    rho = T(rho)
    nu = np.zeros(2 * n, dtype=T)
    if n == 0:
        return nu
    r = 0 if rho < 0 else int(round(float(rho)))
    m = min(2 * n, r + 1)
    rp1 = rho + 1
    S = 1 / rp1
    B = T(1)
    nu[0] = S / rp1
    for k in range(1, m):
        B *= (rp1 - k) / (rp1 + k)
        S += 1 / (rp1 + k) - 1 / (rp1 - k)
        nu[k] = (B / rp1) * S * np.sqrt(T(2 * k + 1))
    if 2 * n > r + 1:
        f = (rho - r) / (rho + r + 2)
        X = (f - 1) / (rho + r + 2)
        nu[r + 1] = (B / rp1) * (X + f * S) * np.sqrt(T(2 * r + 3))
        for k in range(r + 2, 2 * n):
            B *= (rp1 - k) / (rp1 + k)
            S += 1 / (rp1 + k) - 1 / (rp1 - k)
            nu[k] = (B / rp1) * (X + f * S) * np.sqrt(T(2 * k + 1))
    return nu


def modified_chebyshev(
    a: ArrayLike,
    b: ArrayLike,
    nu: ArrayLike,
    *,
    verbose: bool = False,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Modified Chebyshev algorithm (Wheeler's form).

    Parameters
    ----------
    a, b : array_like
        Recurrence coefficients of the reference basis, with
        ``len(a) >= 2n - 1`` and ``len(b) >= 2n``.
    nu : array_like
        Modified moments of the target weight against the orthonormal
        reference polynomials; even length ``2n >= 2``.
    verbose : bool, optional
        Print the radicand computed for each order.

    Returns
    -------
    alpha, beta : ndarray
        Target recurrence coefficients, lengths ``n`` and ``n + 1``.
        ``beta[n]`` needs the moment of index ``2n`` and is left at zero;
        pass ``2n + 2`` moments and drop the last entries for a complete
        set of ``n``-point coefficients.
    sigma : ndarray
        Mixed moments, shape ``(2n, n)``.

    Raises
    ------
    AlgorithmBreakdown
        If a radicand is negative, i.e. the moments do not come from a
        positive-definite measure at working precision.
    """
    nu = np.asarray(nu)
    nu = nu.astype(np.result_type(nu, np.float16))
    a = np.asarray(a, dtype=nu.dtype)
    b = np.asarray(b, dtype=nu.dtype)
    m = nu.size
    if m % 2 != 0 or m < 2:
        raise InvalidDomain(f"need an even number (>= 2) of moments, got {m}")
    n = m // 2
    if a.size < 2 * n - 1 or b.size < 2 * n:
        raise InvalidDomain(
            f"reference coefficients too short for {m} moments: len(a)={a.size}, len(b)={b.size}"
        )
    if not nu[0] > 0:
        raise AlgorithmBreakdown(f"zeroth moment must be positive, got {nu[0]}")

    alpha = np.zeros(n, dtype=nu.dtype)
    beta = np.zeros(n + 1, dtype=nu.dtype)
    sigma = np.zeros((2 * n, n), dtype=nu.dtype)
    beta[0] = np.sqrt(nu[0])
    sigma[:, 0] = nu / beta[0]
    alpha[0] = a[0] + b[1] * (sigma[1, 0] / sigma[0, 0])

    prev = np.zeros(2 * n, dtype=nu.dtype)  # sigma[:, -1] == 0
    for k in range(n - 1):
        cur = sigma[:, k]
        t = (
            1
            + (b[k + 2] / b[k + 1]) * (cur[k + 2] / cur[k])
            + ((a[k + 1] - alpha[k]) / b[k + 1]) * (cur[k + 1] / cur[k])
            - (beta[k] / b[k + 1]) * (prev[k + 1] / cur[k])
        )
        if verbose:
            print(f"modified_chebyshev: k={k + 1:4d} | t={t: .6e}")
        if not t >= 0:
            raise AlgorithmBreakdown(f"modified Chebyshev algorithm failed at k = {k + 1}")
        beta[k + 1] = b[k + 1] * np.sqrt(t)
        s = slice(k + 1, 2 * n - k - 1)
        sigma[s, k + 1] = (
            b[k + 2 : 2 * n - k] * cur[k + 2 : 2 * n - k]
            + (a[s] - alpha[k]) * cur[s]
            + b[s] * cur[k : 2 * n - k - 2]
            - beta[k] * prev[s]
        ) / beta[k + 1]
        nxt = sigma[:, k + 1]
        alpha[k + 1] = (
            a[k + 1]
            + b[k + 2] * (nxt[k + 2] / nxt[k + 1])
            - beta[k + 1] * (cur[k + 1] / nxt[k + 1])
        )
        prev = cur
    return alpha, beta, sigma


def logweight_coefs(n: int, r: int = 0, dtype: DTypeLike = np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """Recurrence coefficients of ``x^r log(1/x)`` on ``(0, 1)``, integer ``r``."""
    if n < 1:
        raise InvalidDomain(f"n must be positive, got {n}")
    a, b = shifted_legendre_coefs(2 * n + 2, dtype)
    alpha, beta, _ = modified_chebyshev(a, b, modified_moments(n + 1, r, dtype))
    return alpha[:n], beta[: n + 1]


def logweight_coefs_real(n: int, rho: float, dtype: DTypeLike = np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """Recurrence coefficients of ``x^rho log(1/x)`` on ``(0, 1)``, real ``rho``."""
    if n < 1:
        raise InvalidDomain(f"n must be positive, got {n}")
    a, b = shifted_legendre_coefs(2 * n + 2, dtype)
    alpha, beta, _ = modified_chebyshev(a, b, modified_moments_real(n + 1, rho, dtype))
    return alpha[:n], beta[: n + 1]
