import unittest
import numpy as np
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'src'))
from gauss_quadrature import (
    Chebyshev,
    Hermite,
    InvalidDomain,
    Jacobi,
    Laguerre,
    Legendre,
    LogWeight,
    assemble_rule,
    coefficients,
)
from gauss_quadrature.orthopoly import (
    chebyshev_coefs,
    hermite_coefs,
    jacobi_coefs,
    laguerre_coefs,
    legendre_coefs,
    orthonormal_poly,
    shifted_legendre_coefs,
)
from numpy.polynomial import legendre as npleg
from scipy.special import gamma


class TestCoefficients(unittest.TestCase):
    def test_lengths(self):
        for gen in (
            lambda n: legendre_coefs(n),
            lambda n: chebyshev_coefs(n, 1),
            lambda n: chebyshev_coefs(n, 2),
            lambda n: jacobi_coefs(n, 0.5, -0.3),
            lambda n: laguerre_coefs(n, 1.5),
            lambda n: hermite_coefs(n),
            lambda n: shifted_legendre_coefs(n),
        ):
            for n in (1, 2, 7):
                a, b = gen(n)
                self.assertEqual(a.shape, (n,))
                self.assertEqual(b.shape, (n + 1,))
                self.assertTrue(np.all(b > 0))

    def test_legendre_values(self):
        a, b = legendre_coefs(4)
        self.assertTrue(np.allclose(a, 0.0))
        self.assertAlmostEqual(b[0], np.sqrt(2.0), places=15)
        self.assertAlmostEqual(b[1], 1 / np.sqrt(3.0), places=15)
        self.assertAlmostEqual(b[2], 2 / np.sqrt(15.0), places=15)

    def test_jacobi_reduces_to_legendre_and_chebyshev(self):
        a, b = jacobi_coefs(6, 0.0, 0.0)
        al, bl = legendre_coefs(6)
        self.assertTrue(np.allclose(a, al, atol=1e-15))
        self.assertTrue(np.allclose(b, bl, atol=1e-15))
        a, b = jacobi_coefs(6, -0.5, -0.5)
        ac, bc = chebyshev_coefs(6, 1)
        self.assertTrue(np.allclose(a, ac, atol=1e-15))
        self.assertTrue(np.allclose(b, bc, atol=1e-14))
        a, b = jacobi_coefs(6, 0.5, 0.5)
        ac, bc = chebyshev_coefs(6, 2)
        self.assertTrue(np.allclose(b, bc, atol=1e-14))

    def test_zeroth_moments(self):
        self.assertAlmostEqual(laguerre_coefs(3, 2.5)[1][0] ** 2, gamma(3.5), places=12)
        self.assertAlmostEqual(hermite_coefs(3)[1][0] ** 2, np.sqrt(np.pi), places=14)
        self.assertAlmostEqual(chebyshev_coefs(3, 1)[1][0] ** 2, np.pi, places=14)
        self.assertAlmostEqual(chebyshev_coefs(3, 2)[1][0] ** 2, np.pi / 2, places=14)
        al, be = 1.5, 0.25
        expected = 2 ** (al + be + 1) * gamma(al + 1) * gamma(be + 1) / gamma(al + be + 2)
        self.assertAlmostEqual(jacobi_coefs(3, al, be)[1][0] ** 2, expected, places=12)

    def test_shifted_legendre_is_mapped_legendre(self):
        a, b = shifted_legendre_coefs(5)
        al, bl = legendre_coefs(5)
        self.assertTrue(np.allclose(a, 0.5))
        self.assertEqual(b[0], 1.0)
        self.assertTrue(np.allclose(b[1:], bl[1:] / 2, atol=1e-15))

    def test_dtype_is_respected(self):
        for dtype in (np.float32, np.float64, np.longdouble):
            a, b = legendre_coefs(3, dtype)
            self.assertEqual(a.dtype, np.dtype(dtype))
            self.assertEqual(b.dtype, np.dtype(dtype))
        a, b = hermite_coefs(3, np.longdouble)
        self.assertEqual(b.dtype, np.dtype(np.longdouble))

    def test_invalid_parameters(self):
        with self.assertRaises(InvalidDomain):
            jacobi_coefs(3, -1.0, 0.0)
        with self.assertRaises(InvalidDomain):
            jacobi_coefs(3, 0.0, -1.0)
        with self.assertRaises(InvalidDomain):
            laguerre_coefs(3, -1.0)
        with self.assertRaises(InvalidDomain):
            chebyshev_coefs(3, 3)
        with self.assertRaises(InvalidDomain):
            legendre_coefs(0)
        with self.assertRaises(InvalidDomain):
            legendre_coefs(3, np.int64)


class TestOrthonormalPoly(unittest.TestCase):
    def test_legendre_matches_numpy(self):
        x = np.linspace(-1.0, 1.0, 7)
        a, b = legendre_coefs(5)
        p = orthonormal_poly(x, a, b)
        self.assertEqual(p.shape, (7, 6))
        for k in range(6):
            expected = np.sqrt((2 * k + 1) / 2) * npleg.Legendre.basis(k)(x)
            self.assertTrue(np.allclose(p[:, k], expected, atol=1e-13))

    def test_orthonormal_under_gauss_rule(self):
        for family in (
            Legendre(),
            Chebyshev(1),
            Chebyshev(2),
            Jacobi(0.5, -0.3),
            Laguerre(1.0),
            Hermite(),
            LogWeight(0),
            LogWeight(3),
            LogWeight(0.7),
            LogWeight(-0.5),
        ):
            a, b = coefficients(family, 6)
            x, w = assemble_rule(family.lo, family.hi, a, b)
            p = orthonormal_poly(x, a, b)
            self.assertTrue(np.all(np.isfinite(p)), family)
            gram = p[:, :6].T @ (w[:, None] * p[:, :6])
            self.assertTrue(np.allclose(gram, np.eye(6), atol=1e-11), family)

    def test_last_polynomial_vanishes_at_nodes(self):
        # the degree-n orthonormal polynomial has the Gauss nodes as zeros
        for family in (Legendre(), Laguerre(0.0), LogWeight(0), LogWeight(0.7)):
            a, b = coefficients(family, 5)
            x, _ = assemble_rule(family.lo, family.hi, a, b)
            p = orthonormal_poly(x, a, b)
            self.assertTrue(np.allclose(p[:, 5], 0.0, atol=1e-9), family)

    def test_degree_one_chebyshev(self):
        a, b = chebyshev_coefs(1, 1)
        x = np.array([0.3, -0.7])
        p = orthonormal_poly(x, a, b)
        self.assertTrue(np.allclose(p[:, 1], np.sqrt(2 / np.pi) * x))

    def test_empty_recurrence(self):
        p = orthonormal_poly([0.1, 0.2, 0.3], [], [2.0])
        self.assertTrue(np.allclose(p, 0.5))
        self.assertEqual(p.shape, (3, 1))

    def test_inputs_not_modified(self):
        a, b = jacobi_coefs(4, 0.2, 0.7)
        a0, b0 = a.copy(), b.copy()
        orthonormal_poly(np.linspace(-1, 1, 3), a, b)
        self.assertTrue(np.array_equal(a, a0))
        self.assertTrue(np.array_equal(b, b0))

    def test_zero_b_rejected(self):
        with self.assertRaises(InvalidDomain):
            orthonormal_poly([0.0], [0.0, 0.0], [1.0, 0.0, 1.0])


if __name__ == '__main__':
    unittest.main()
