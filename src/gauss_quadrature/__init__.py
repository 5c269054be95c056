"""Gauss quadrature rules by the Golub--Welsch algorithm."""

from .errors import (
    QuadratureError,
    InvalidDomain,
    AlgorithmBreakdown,
    ConvergenceFailure,
)
from .orthopoly import (
    legendre_coefs,
    chebyshev_coefs,
    jacobi_coefs,
    laguerre_coefs,
    hermite_coefs,
    shifted_legendre_coefs,
    orthonormal_poly,
)
from .moments import (
    modified_moments,
    modified_moments_real,
    modified_chebyshev,
    logweight_coefs,
    logweight_coefs_real,
)
from .tridiagonal import default_max_iterations, tridiagonal_eigen
from .golub_welsch import (
    EndPt,
    RuleOptions,
    QuadratureRule,
    apply_endpoint,
    assemble_rule,
)
from .families import (
    Legendre,
    Chebyshev,
    Jacobi,
    Laguerre,
    Hermite,
    LogWeight,
    WeightFamily,
    coefficients,
    rule,
    legendre,
    lobatto,
    chebyshev,
    jacobi,
    laguerre,
    hermite,
    logweight,
)

__all__ = [
    "QuadratureError",
    "InvalidDomain",
    "AlgorithmBreakdown",
    "ConvergenceFailure",
    "legendre_coefs",
    "chebyshev_coefs",
    "jacobi_coefs",
    "laguerre_coefs",
    "hermite_coefs",
    "shifted_legendre_coefs",
    "orthonormal_poly",
    "modified_moments",
    "modified_moments_real",
    "modified_chebyshev",
    "logweight_coefs",
    "logweight_coefs_real",
    "default_max_iterations",
    "tridiagonal_eigen",
    "EndPt",
    "RuleOptions",
    "QuadratureRule",
    "apply_endpoint",
    "assemble_rule",
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
