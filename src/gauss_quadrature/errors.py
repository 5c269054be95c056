"""Exceptions raised while constructing Gauss quadrature rules."""

from __future__ import annotations

__all__ = [
    "QuadratureError",
    "InvalidDomain",
    "AlgorithmBreakdown",
    "ConvergenceFailure",
]


class QuadratureError(Exception):
    """Base class for all rule-construction failures."""


class InvalidDomain(QuadratureError, ValueError):
    """Parameters outside the range where the weight function is defined."""


class AlgorithmBreakdown(QuadratureError, ArithmeticError):
    """Moment data or endpoint shift not realisable at working precision."""


class ConvergenceFailure(QuadratureError, RuntimeError):
    """The QL iteration ran out of sweeps for some eigenvalue."""

    def __init__(self, index: int, iterations: int):
        self.index = index
        self.iterations = iterations
        super().__init__(
            f"No convergence for eigenvalue {index} after {iterations} "
            "iterations (try increasing max_iterations)"
        )
