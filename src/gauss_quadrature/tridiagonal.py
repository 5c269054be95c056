"""Eigenvalues and first eigenvector components of a Jacobi matrix.

Implicit QL iteration following Martin & Wilkinson, Numer. Math. 12
(1968) 377-383, with Dubrulle's modification (Numer. Math. 15 (1970)
450); a variant of the EISPACK routine ``imtql2`` that rotates only the
first row of the eigenvector matrix.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import numba as nb

from .errors import ConvergenceFailure, InvalidDomain
from .orthopoly import float_type

__all__ = ["default_max_iterations", "tridiagonal_eigen"]


def default_max_iterations(dtype) -> int:
    """QL sweep cap per eigenvalue: 30, or 40 beyond double precision."""
    if np.finfo(float_type(dtype)).eps < np.finfo(np.float64).eps:
        return 40
    return 30


def _imtql_py(
    d: np.ndarray,
    e: np.ndarray,
    z: np.ndarray,
    maxits: int,
    eps: float,
    sweeps: np.ndarray,
) -> int:
    # e[i] couples d[i-1] and d[i]; e[0] is never read.
    # Returns -1 on success, otherwise the index that failed to converge.
    n = d.shape[0]
    z[0] = 1.0
    for i in range(1, n):
        z[i] = 0.0
    e[n] = 0.0
    if n == 1:
        return -1
    for l in range(n):
        its = 0
        while True:
            # look for a small off-diagonal element
            m = n - 1
            for i in range(l, n - 1):
                if abs(e[i + 1]) <= eps * (abs(d[i]) + abs(d[i + 1])):
                    m = i
                    break
            if m == l:
                break
            if its == maxits:
                sweeps[l] = its
                return l
            its += 1
            # form shift
            p = d[l]
            g = (d[l + 1] - p) / (2.0 * e[l + 1])
            r = np.hypot(g, 1.0)
            g = d[m] - p + e[l + 1] / (g + np.copysign(r, g))
            s = 1.0
            c = 1.0
            p = 0.0
            for i in range(m - 1, l - 1, -1):
                f = s * e[i + 1]
                bb = c * e[i + 1]
                if abs(f) < abs(g):
                    s = f / g
                    r = np.hypot(s, 1.0)
                    e[i + 2] = g * r
                    c = 1.0 / r
                    s *= c
                else:
                    c = g / f
                    r = np.hypot(c, 1.0)
                    e[i + 2] = f * r
                    s = 1.0 / r
                    c *= s
                g = d[i + 1] - p
                r = (d[i] - g) * s + 2.0 * c * bb
                p = s * r
                d[i + 1] = g + p
                g = c * r - bb
                # first component of the eigenvector
                f = z[i + 1]
                z[i + 1] = s * z[i] + c * f
                z[i] = c * z[i] - s * f
            d[l] -= p
            e[l + 1] = g
            e[m + 1] = 0.0
        sweeps[l] = its
    return -1


_imtql_nb = nb.njit(cache=True)(_imtql_py)


def tridiagonal_eigen(
    d: np.ndarray,
    e: np.ndarray,
    max_iterations: int | None = None,
    *,
    eps: float | None = None,
    compiled: bool = True,
    return_sweeps: bool = False,
) -> Tuple[np.ndarray, np.ndarray] | Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Diagonalise the symmetric tridiagonal matrix with diagonal ``d`` and
    off-diagonal ``e[1:n]``.

    The buffers are taken over by this call: ``d`` is overwritten by the
    eigenvalues and ``e`` is destroyed.

    Parameters
    ----------
    d : ndarray
        Diagonal, length ``n``.
    e : ndarray
        Length ``n + 1``; ``e[i]`` is the ``(i, i-1)`` entry for
        ``i = 1, ..., n-1``.  ``e[0]`` is ignored, so the ``b`` array of a
        recurrence can be passed directly.
    max_iterations : int, optional
        QL sweeps allowed per eigenvalue; defaults to
        :func:`default_max_iterations` for the dtype of ``d``.
    eps : float, optional
        Relative size below which an off-diagonal entry counts as zero.
        Defaults to the machine epsilon of ``d``.
    compiled : bool, optional
        Use the numba kernel (float64 only).
    return_sweeps : bool, optional
        Also return the number of sweeps spent on each eigenvalue.

    Returns
    -------
    d : ndarray
        Eigenvalues, in no particular order.
    z : ndarray
        First components of the normalised eigenvectors.
    sweeps : ndarray, optional
        QL sweeps per eigenvalue index.

    Raises
    ------
    ConvergenceFailure
        If some eigenvalue is not isolated within ``max_iterations`` sweeps.
    """
    n = d.shape[0]
    if n < 1 or e.shape[0] != n + 1:
        raise InvalidDomain(f"need len(e) == len(d) + 1 >= 2, got {n} and {e.shape[0]}")
    T = float_type(d.dtype)
    if e.dtype != d.dtype:
        e = e.astype(d.dtype)
    if max_iterations is None:
        max_iterations = default_max_iterations(d.dtype)
    tol = np.finfo(T).eps if eps is None else T(eps)
    z = np.empty_like(d)
    sweeps = np.zeros(n, dtype=np.int64)
    if compiled and d.dtype == np.float64:
        failed = _imtql_nb(d, e, z, int(max_iterations), float(tol), sweeps)
    else:
        failed = _imtql_py(d, e, z, int(max_iterations), tol, sweeps)
    if failed >= 0:
        raise ConvergenceFailure(int(failed), int(sweeps[failed]))
    if return_sweeps:
        return d, z, sweeps
    return d, z
