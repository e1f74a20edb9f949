import unittest
from itertools import product

from orthobasis import OrthoBasis
from utils import backends, dtypes, rand_data, locked_basis, triangular, lauchli, copy

class TestGramSchmidt(unittest.TestCase):

    def setUp(self):
        self.orthobasis = [OrthoBasis(backend) for backend in backends]
        self.sizes = [(50, 8), (30, 30), (120, 12)]

    def test_orthonormal(self):
        for ob, (m, n), dtype in product(self.orthobasis, self.sizes, dtypes):
            xp = ob.namespace
            for skip in (0, 1, n // 2, n - 1):
                basis = locked_basis(xp, m, n, skip, dtype=dtype)
                ref = copy(xp, basis)
                ob.gs(basis, skip)

                # a single classical pass loses orthogonality with the square of the condition
                self.assertLess(ob.orthogonality_error(basis, skip), 1e-6)
                self.assertLess(ob.prefix_error(basis, skip), 1e-6)
                self.assertLess(ob.span_residual(ref, basis), 1e-10)
                self.assertTrue(bool(xp.all(basis[:, :skip] == ref[:, :skip])))

    def test_twice_orthonormal(self):
        for ob, (m, n), dtype in product(self.orthobasis, self.sizes, dtypes):
            xp = ob.namespace
            for skip in (0, 1, n // 2, n - 1):
                basis = locked_basis(xp, m, n, skip, dtype=dtype)
                ref = copy(xp, basis)
                ob.twice_is_enough(basis, skip)

                self.assertLess(ob.orthogonality_error(basis, skip), 1e-12)
                self.assertLess(ob.prefix_error(basis, skip), 1e-12)
                self.assertLess(ob.span_residual(ref, basis), 1e-10)
                self.assertTrue(bool(xp.all(basis[:, :skip] == ref[:, :skip])))

    def test_triad(self):
        for ob in self.orthobasis:
            xp = ob.namespace
            for op in (ob.gs, ob.twice_is_enough):
                basis = triangular(xp)
                op(basis, 1)
                self.assertLess(float(xp.max(xp.abs(xp.abs(basis) - xp.eye(3)))), 1e-14)

    def test_twice_is_two_passes(self):
        for ob in self.orthobasis:
            xp = ob.namespace
            basis = locked_basis(xp, 40, 10, 3)
            ref = copy(xp, basis)
            ob.twice_is_enough(basis, 3)
            ob.gs(ref, 3)
            ob.gs(ref, 3)
            self.assertTrue(bool(xp.all(basis == ref)))

    def test_twice_vs_once(self):
        for ob in self.orthobasis:
            xp = ob.namespace
            once, twice = lauchli(xp), lauchli(xp)
            ob.gs(once)
            ob.twice_is_enough(twice)

            self.assertGreater(ob.orthogonality_error(once), 0.1)
            self.assertLess(ob.orthogonality_error(twice), 1e-10)
            self.assertLess(ob.orthogonality_error(twice), ob.orthogonality_error(once))

    def test_idempotent(self):
        for ob, (m, n), dtype in product(self.orthobasis, self.sizes, dtypes):
            xp = ob.namespace
            basis = rand_data(xp, m, n, dtype=dtype)
            ob.twice_is_enough(basis)
            first = copy(xp, basis)
            ob.gs(basis)
            self.assertLess(float(xp.max(xp.abs(basis - first))), 1e-10)

    def test_twice_idempotent(self):
        for ob, (m, n), dtype in product(self.orthobasis, self.sizes, dtypes):
            xp = ob.namespace
            for skip in (0, n // 2):
                basis = locked_basis(xp, m, n, skip, dtype=dtype)
                ob.twice_is_enough(basis, skip)
                first = copy(xp, basis)
                ob.twice_is_enough(basis, skip)
                self.assertLess(float(xp.max(xp.abs(basis - first))), 1e-12)

    def test_strategy(self):
        for ob in self.orthobasis:
            xp = ob.namespace
            for strategy, func in ((ob.gram_schmidt(), ob.gs),
                                   (ob.twice_is_enough_gram_schmidt(), ob.twice_is_enough)):
                basis = locked_basis(xp, 40, 6, 2)
                ref = copy(xp, basis)
                strategy(basis, 2)
                func(ref, 2)
                self.assertTrue(bool(xp.all(basis == ref)))

if __name__ == '__main__':
    unittest.main()
