import unittest
from itertools import product
import numpy as np

from orthobasis import OrthoBasis
from utils import backends, dtypes, rand_data, locked_basis, copy

class TestPartialOrthogonalization(unittest.TestCase):

    def setUp(self):
        self.orthobasis = [OrthoBasis(backend) for backend in backends]
        self.sizes = [(50, 8), (30, 30), (120, 12)]

    def mixed_basis(self, xp, m: int, n: int, skip: int, dtype: str):
        """Orthonormal basis, whose trailing columns are contaminated with the leading ones."""
        q, _ = xp.linalg.qr(rand_data(xp, m, n, dtype=dtype), mode='reduced')
        coeffs = rand_data(xp, skip, n - skip, dtype=dtype)
        basis = copy(xp, q)
        basis[:, skip:] = q[:, skip:] + q[:, :skip] @ coeffs
        return basis, q

    def test_orthonormal(self):
        for ob, (m, n), dtype in product(self.orthobasis, self.sizes, dtypes):
            xp = ob.namespace
            for skip in (1, n // 2, n - 1):
                basis, q = self.mixed_basis(xp, m, n, skip, dtype)
                ref = copy(xp, basis)
                ob.partial(basis, skip)

                self.assertTrue(bool(xp.all(basis[:, :skip] == ref[:, :skip])))
                self.assertLess(ob.orthogonality_error(basis), 1e-12)
                self.assertLess(float(xp.max(xp.abs(basis[:, skip:] - q[:, skip:]))), 1e-12)

    def test_prefix_only(self):
        for ob, (m, n), dtype in product(self.orthobasis, self.sizes, dtypes):
            xp = ob.namespace
            skip = n // 2
            basis = locked_basis(xp, m, n, skip, dtype=dtype)
            ref = copy(xp, basis)
            ob.partial(basis, skip)

            self.assertTrue(bool(xp.all(basis[:, :skip] == ref[:, :skip])))
            self.assertLess(ob.prefix_error(basis, skip), 1e-12)
            norms = xp.linalg.vector_norm(basis[:, skip:], axis=0)
            self.assertLess(float(xp.max(xp.abs(norms - 1.0))), 1e-12)

    def test_skip_zero(self):
        for ob, (m, n) in product(self.orthobasis, self.sizes):
            xp = ob.namespace
            basis = rand_data(xp, m, n)
            ref = copy(xp, basis)
            ob.partial(basis, 0)
            self.assertTrue(bool(xp.all(basis == ref)))

    def test_dependent_column(self):
        for ob in self.orthobasis:
            xp = ob.namespace
            basis = copy(xp, xp.eye(4, 3))
            basis[:, 1] = basis[:, 0]
            with np.errstate(divide='ignore', invalid='ignore'):
                ob.partial(basis, 1)
            self.assertFalse(bool(xp.all(xp.isfinite(basis[:, 1]))))
            self.assertTrue(bool(xp.all(xp.isfinite(basis[:, 2]))))

    def test_idempotent(self):
        for ob, (m, n), dtype in product(self.orthobasis, self.sizes, dtypes):
            xp = ob.namespace
            skip = n // 2
            basis, _ = self.mixed_basis(xp, m, n, skip, dtype)
            ob.partial(basis, skip)
            first = copy(xp, basis)
            ob.partial(basis, skip)
            self.assertLess(float(xp.max(xp.abs(basis - first))), 1e-12)

    def test_strategy(self):
        for ob in self.orthobasis:
            xp = ob.namespace
            basis, _ = self.mixed_basis(xp, 40, 6, 2, "float64")
            ref = copy(xp, basis)
            ob.partial_orthogonalization()(basis, 2)
            ob.partial(ref, 2)
            self.assertTrue(bool(xp.all(basis == ref)))

if __name__ == '__main__':
    unittest.main()
