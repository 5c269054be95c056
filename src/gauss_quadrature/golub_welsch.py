"""Gauss, Radau and Lobatto rules from recurrence coefficients.

Golub & Welsch, Calculation of Gaussian quadrature rules, Math. Comp. 23
(1969) 221-230: the nodes are the eigenvalues of the Jacobi matrix built
from ``(a, b)`` and the weights are ``b[0]**2`` times the squared first
components of the normalised eigenvectors.  Fixing one or both end points
as nodes modifies the last row of the matrix, see Golub, Some modified
matrix eigenvalue problems, SIAM Review 15 (1973) 318-334, section 7.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, NamedTuple, Tuple

import numpy as np
from numpy.typing import ArrayLike

from .errors import AlgorithmBreakdown, InvalidDomain
from .tridiagonal import default_max_iterations, tridiagonal_eigen

__all__ = [
    "EndPt",
    "RuleOptions",
    "QuadratureRule",
    "solve",
    "apply_endpoint",
    "assemble_rule",
]


class EndPt(Enum):
    """Which end points of the interval are forced to be nodes."""

    NEITHER = "N"
    LEFT = "L"
    RIGHT = "R"
    BOTH = "B"


@dataclass(frozen=True)
class RuleOptions:
    """Configuration for the eigenvalue stage of rule construction."""

    max_iterations: int | None = None
    eps: float | None = None
    compiled: bool = True
    verbose: bool = False


class QuadratureRule(NamedTuple):
    """Nodes in increasing order and their weights."""

    nodes: np.ndarray
    weights: np.ndarray

    def integrate(self, f: Callable[[np.ndarray], ArrayLike]):
        """Return ``sum_j w_j f(x_j)``."""
        return np.sum(self.weights * np.asarray(f(self.nodes)))


def solve(n: int, shift, a: np.ndarray, b: np.ndarray):
    """
    Last component of the solution of ``(J_{n-1} - shift I) delta = e_{n-1}``.

    ``J_{n-1}`` is the leading ``(n-1) x (n-1)`` block of the Jacobi matrix
    with diagonal ``a`` and off-diagonal ``b[1:]``.  Unpivoted elimination
    of the tridiagonal system leaves the reciprocal of the final pivot.
    A pivot at round-off level relative to the terms it is formed from
    means ``shift`` is numerically an eigenvalue of the leading block.
    """
    tol = n * np.finfo(np.result_type(a, b, np.float16)).eps
    t = a[0] - shift
    scale = abs(a[0]) + abs(shift)
    for i in range(1, n - 1):
        if not abs(t) > tol * scale:
            raise AlgorithmBreakdown(f"zero pivot at row {i} for shift {shift}")
        c = b[i] ** 2 / t
        scale = abs(a[i]) + abs(shift) + abs(c)
        t = a[i] - shift - c
    if not abs(t) > tol * scale:
        raise AlgorithmBreakdown(f"shift {shift} is an eigenvalue of the leading block")
    g = 1 / t
    if not np.isfinite(g):
        raise AlgorithmBreakdown(f"shift {shift} is an eigenvalue of the leading block")
    return g


def apply_endpoint(lo, hi, a: np.ndarray, b: np.ndarray, endpt: EndPt) -> Tuple[np.ndarray, np.ndarray]:
    """Modify ``a[n-1]`` (and ``b[n-1]`` for Lobatto) so the end points are nodes.

    Takes ownership of ``a`` and ``b`` and returns them.
    """
    n = a.shape[0]
    if endpt is EndPt.NEITHER:
        return a, b
    if endpt in (EndPt.LEFT, EndPt.BOTH) and not np.isfinite(lo):
        raise InvalidDomain(f"left end point {lo} cannot be a node")
    if endpt in (EndPt.RIGHT, EndPt.BOTH) and not np.isfinite(hi):
        raise InvalidDomain(f"right end point {hi} cannot be a node")
    if endpt is EndPt.BOTH:
        if n == 1:
            raise InvalidDomain("Must have at least two points for both ends.")
        g = solve(n, lo, a, b)
        den = g - solve(n, hi, a, b)
        if den == 0:
            raise AlgorithmBreakdown("degenerate Lobatto modification")
        t1 = (hi - lo) / den
        if not t1 > 0:
            raise AlgorithmBreakdown(f"Lobatto modification gives b[n]**2 = {t1}")
        b[n - 1] = np.sqrt(t1)
        a[n - 1] = lo + g * t1
        return a, b
    x = lo if endpt is EndPt.LEFT else hi
    if n == 1:
        a[0] = x
    else:
        a[n - 1] = solve(n, x, a, b) * b[n - 1] ** 2 + x
    return a, b


def _check_end_node(node, end, tol) -> None:
    if not abs(node - end) <= tol:
        raise AlgorithmBreakdown(f"end point {end} is not a node of the modified matrix (got {node})")


def assemble_rule(
    lo,
    hi,
    a: ArrayLike,
    b: ArrayLike,
    endpt: EndPt = EndPt.NEITHER,
    max_iterations: int | None = None,
    *,
    options: RuleOptions | None = None,
) -> QuadratureRule:
    """
    Gauss rule for the weight function whose monic orthogonal polynomials
    satisfy ``p_k(x) = (x - a[k-1]) p_{k-1}(x) - b[k-1]**2 p_{k-2}(x)``.

    Parameters
    ----------
    lo, hi : float
        Interval of integration, possibly infinite.
    a, b : array_like
        Recurrence coefficients, ``len(b) == len(a) + 1`` and ``b[0]**2``
        the integral of the weight.  The caller's arrays are not modified.
    endpt : EndPt, optional
        ``LEFT``/``RIGHT`` for Radau, ``BOTH`` for Lobatto rules.
    max_iterations : int, optional
        QL sweeps per eigenvalue; overrides ``options.max_iterations``.
    options : RuleOptions, optional
        Tolerance, compilation and verbosity settings.

    Returns
    -------
    QuadratureRule
        ``(nodes, weights)``, both read-only, nodes increasing.
    """
    opt = options or RuleOptions()
    a = np.array(a, copy=True)
    a = a.astype(np.result_type(a, np.float16), copy=False)
    b = np.array(b, dtype=a.dtype, copy=True)
    n = a.shape[0]
    if n < 1:
        raise InvalidDomain(f"n must be positive, got {n}")
    if b.shape[0] != n + 1:
        raise InvalidDomain(f"len(b) must be len(a) + 1, got {b.shape[0]} and {n}")
    if not isinstance(endpt, EndPt):
        raise InvalidDomain(f"endpt must be an EndPt, got {endpt!r}")
    T = a.dtype.type
    lo, hi = T(lo), T(hi)
    if max_iterations is None:
        max_iterations = opt.max_iterations
    if max_iterations is None:
        max_iterations = default_max_iterations(a.dtype)

    a, b = apply_endpoint(lo, hi, a, b, endpt)
    mu0 = b[0]
    x, z, sweeps = tridiagonal_eigen(
        a, b, max_iterations, eps=opt.eps, compiled=opt.compiled, return_sweeps=True
    )
    w = (mu0 * z) ** 2
    idx = np.argsort(x)
    x = x[idx]
    w = w[idx]
    # snap end points, the modified matrix only reproduces them to round-off
    tol = np.sqrt(np.finfo(a.dtype).eps) * (1 + np.max(np.abs(x)))
    if endpt in (EndPt.LEFT, EndPt.BOTH):
        _check_end_node(x[0], lo, tol)
        x[0] = lo
    if endpt in (EndPt.RIGHT, EndPt.BOTH):
        _check_end_node(x[-1], hi, tol)
        x[-1] = hi
    if opt.verbose:
        print(
            f"assemble_rule: n={n} endpt={endpt.name} dtype={a.dtype} "
            f"sweeps={int(sweeps.sum())} (max {int(sweeps.max())}/{max_iterations})"
        )
    x.setflags(write=False)
    w.setflags(write=False)
    return QuadratureRule(x, w)
