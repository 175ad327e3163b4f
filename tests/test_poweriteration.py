import unittest
from math import sqrt
import numpy as np

from powermethod import PowerMethod, power_iteration
from powermethod.typing import PowerIteration, CallableOperator, InvalidArgumentError, NumericalDegeneracyError
from utils import backends, rand_data, spd_matrix, to_numpy

PHI2 = ((1.0 + sqrt(5.0)) / 2.0)**2

class TestPowerIteration(unittest.TestCase):

    def setUp(self):
        self.powermethod = [PowerMethod(backend) for backend in backends]

    def test_golden_ratio(self):
        for pm in self.powermethod:
            op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
            guess = pm.asarray([1.0, 1.0])

            res = pm.solve(op, guess)
            self.assertEqual(res.iterations, 100)
            self.assertLess(abs(float(res.value) - PHI2), 1e-5)
            vec = to_numpy(res.array)
            vec *= np.sign(vec[0])
            self.assertTrue(np.allclose(vec, [0.850651, 0.525731], atol=1e-5))

    def test_function(self):
        for pm in self.powermethod:
            op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
            vec, value = power_iteration(op, pm.asarray([1.0, 1.0]))
            self.assertLess(abs(float(value) - PHI2), 1e-5)
            self.assertLess(abs(np.linalg.norm(to_numpy(vec)) - 1.0), 1e-12)

    def test_unit_norm(self):
        for pm in self.powermethod:
            ops = [pm.dense(rand_data(7, 7)),
                   pm.tridiagonal(rand_data(7), rand_data(6, seed=1)),
                   pm.averaging()]
            guess = pm.asarray(rand_data(7, seed=2) + 0.1)
            for op in ops:
                res = pm.solve(op, guess, iterations=25)
                self.assertLess(abs(np.linalg.norm(to_numpy(res.array)) - 1.0), 1e-12)

    def test_dominant_eigenvalue(self):
        for pm in self.powermethod:
            eigvals = [10.0, 5.0, 3.0, 2.0, 1.0, 0.5]
            op = pm.dense(spd_matrix(eigvals))
            res = pm.solve(op, pm.asarray(rand_data(6)), iterations=200)
            self.assertLess(abs(float(res.value) - 10.0), 1e-10)

            mat = spd_matrix(eigvals)
            _, vecs = np.linalg.eigh(mat)
            overlap = abs(float(np.dot(vecs[:, -1], to_numpy(res.array))))
            self.assertLess(abs(overlap - 1.0), 1e-10)

    def test_tridiagonal(self):
        for pm in self.powermethod:
            n = 8
            op = pm.tridiagonal(np.full(n, 2.0), np.full(n-1, -1.0))
            exact = float(np.max(np.abs(np.linalg.eigvalsh(to_numpy(op.to_dense())))))
            res = pm.solve(op, pm.asarray(rand_data(n)), iterations=500)
            self.assertLess(abs(float(res.value) - exact), 1e-8)

    def test_averaging(self):
        for pm in self.powermethod:
            res = pm.solve(pm.averaging(), pm.asarray(rand_data(10) + 1.0), iterations=500)
            self.assertLess(abs(float(res.value) - 1.0), 1e-8)

    def test_restart(self):
        for pm in self.powermethod:
            op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
            res = pm.solve(op, pm.asarray([1.0, 1.0]))
            res2 = pm.solve(op, res.array, iterations=5)
            self.assertLess(abs(float(res2.value) - float(res.value)), 1e-10)

    def test_zero_iterations(self):
        for pm in self.powermethod:
            op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
            guess = pm.asarray([3.0, 4.0])
            res = pm.solve(op, guess, iterations=0)
            self.assertEqual(res.iterations, 0)
            self.assertEqual(res.values, [])
            self.assertTrue(np.allclose(to_numpy(res.array), [0.6, 0.8], atol=1e-14))
            expected = np.linalg.norm(np.asarray([[2.0, 1.0], [1.0, 1.0]]) @ [0.6, 0.8])
            self.assertLess(abs(float(res.value) - expected), 1e-12)

    def test_zero_vector(self):
        for pm in self.powermethod:
            op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
            guess = pm.asarray([0.0, 0.0])
            self.assertRaises(InvalidArgumentError, pm.solve, op, guess)
            self.assertRaises(InvalidArgumentError, pm.solve, op, guess, 0)
            self.assertRaises(ValueError, power_iteration, op, guess)

    def test_invalid_input(self):
        for pm in self.powermethod:
            xp = pm.namespace
            op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
            self.assertRaises(InvalidArgumentError, pm.solve, op, pm.asarray([1.0, 1.0, 1.0]))
            self.assertRaises(InvalidArgumentError, pm.solve, op, pm.asarray([[1.0, 1.0]]))
            self.assertRaises(InvalidArgumentError, pm.solve, op, pm.asarray([]))
            self.assertRaises(InvalidArgumentError, pm.solve, op, xp.asarray([1, 1]))
            self.assertRaises(InvalidArgumentError, pm.solve, op, pm.asarray([float("nan"), 1.0]))

            shrink = CallableOperator(lambda v: v[:-1])
            self.assertRaises(InvalidArgumentError, pm.solve, shrink, pm.asarray([1.0, 1.0]))
            self.assertRaises(TypeError, pm.solve, lambda v: v, pm.asarray([1.0, 1.0]))

    def test_degenerate(self):
        for pm in self.powermethod:
            op = pm.dense([[0.0, 1.0], [0.0, 0.0]])
            self.assertRaises(NumericalDegeneracyError, pm.solve, op, pm.asarray([1.0, 0.0]))

            op = pm.dense([[1e300, 1e300], [1e300, 1e300]])
            self.assertRaises(NumericalDegeneracyError, pm.solve, op, pm.asarray([1e10, 1e10]))

    def test_iterations(self):
        self.assertRaises(InvalidArgumentError, PowerIteration, -1)
        self.assertRaises(InvalidArgumentError, PowerIteration, 1.5)
        self.assertRaises(InvalidArgumentError, PowerIteration, True)
        self.assertRaises(InvalidArgumentError, PowerIteration, 10, -1e-3)
        self.assertRaises(InvalidArgumentError, PowerIteration, 10, "x")
        self.assertRaises(InvalidArgumentError, PowerIteration, 10, None)
        self.assertRaises(InvalidArgumentError, PowerIteration, 10, False)
        solver = PowerIteration()
        self.assertEqual(solver.iterations, 100)
        with self.assertRaises(InvalidArgumentError):
            solver.iterations = -5

    def test_eps(self):
        for pm in self.powermethod:
            op = pm.dense(spd_matrix([4.0, 1.0, 0.5]))
            solver = pm.power_iteration(iterations=1000, eps=1e-12)
            res = solver(op, pm.asarray(rand_data(3)))
            self.assertLess(res.iterations, 1000)
            self.assertLess(abs(res.values[-1] - res.values[-2]), 1e-12)
            self.assertLess(abs(float(res.value) - 4.0), 1e-10)

    def test_callback(self):
        for pm in self.powermethod:
            op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
            calls = []
            def call(i, value):
                calls.append((i, value))
                return i == 4
            res = pm.solve(op, pm.asarray([1.0, 1.0]), callback=call)
            self.assertEqual(res.iterations, 5)
            self.assertEqual([i for i, _ in calls], list(range(5)))
            self.assertEqual([v for _, v in calls], res.values)

    def test_values(self):
        for pm in self.powermethod:
            op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
            res = pm.solve(op, pm.asarray([1.0, 1.0]), iterations=50)
            self.assertEqual(len(res.values), 50)
            # first estimate is the growth of the unnormalized start vector
            self.assertLess(abs(res.values[0] - sqrt(13.0) / sqrt(2.0)), 1e-12)
            self.assertLess(abs(res.values[-1] - PHI2), 1e-10)
            self.assertGreaterEqual(res.time, 0.0)

    def test_precision(self):
        for pm in self.powermethod:
            xp = pm.namespace
            with pm.precision(dtype=xp.float32):
                op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
                guess = pm.asarray([1.0, 1.0])
            res = pm.solve(op, guess)
            self.assertEqual(res.array.dtype, xp.float32)
            self.assertEqual(res.value.dtype, xp.float32)
            self.assertLess(abs(float(res.value) - PHI2), 1e-5)

    def test_dtype_mismatch(self):
        for pm in self.powermethod:
            xp = pm.namespace
            op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
            guess = xp.asarray([1.0, 1.0], dtype=xp.float32)
            self.assertRaises(InvalidArgumentError, pm.solve, op, guess)
            self.assertRaises(InvalidArgumentError, PowerIteration().estimate, op, guess)

    def test_applications(self):
        for pm in self.powermethod:
            calls = []
            def scale(block):
                calls.append(block.shape)
                return 2.0 * block
            def apply(vec):
                if hasattr(vec, "map_blocks"):
                    return vec.map_blocks(scale, dtype=vec.dtype, meta=np.empty((0,), dtype=vec.dtype))
                return scale(vec)
            res = pm.solve(CallableOperator(apply), pm.asarray([3.0, 4.0]), iterations=10)
            self.assertLess(abs(float(res.value) - 2.0), 1e-12)
            # one application per iteration and one for the final estimate
            self.assertEqual(len(calls), 11)

    def test_small_magnitude(self):
        for pm in self.powermethod:
            xp = pm.namespace
            with pm.precision(dtype=xp.float32):
                op = pm.dense([[2.0, 1.0], [1.0, 1.0]])
                guess = pm.asarray([1e-30, 1e-30])
            res = pm.solve(op, guess, iterations=50)
            self.assertEqual(res.array.dtype, xp.float32)
            self.assertLess(abs(float(res.value) - PHI2), 1e-4)
            self.assertLess(abs(res.values[0] - sqrt(13.0) / sqrt(2.0)), 1e-4)

            with pm.precision(dtype=xp.float32):
                tiny = pm.asarray([1e-44, 0.0])
            res = pm.solve(pm.averaging(), tiny, iterations=0)
            self.assertLess(abs(np.linalg.norm(to_numpy(res.array)) - 1.0), 1e-6)

    def test_complex(self):
        for pm in self.powermethod:
            xp = pm.namespace
            with pm.precision(dtype=xp.complex128):
                op = pm.dense([[3j, 0.0], [0.0, 1.0]])
                guess = pm.asarray([1.0, 1.0])
            res = pm.solve(op, guess, iterations=60)
            self.assertEqual(res.array.dtype, xp.complex128)
            self.assertLess(abs(complex(res.value) - 3.0), 1e-12)
            self.assertLess(abs(np.linalg.norm(to_numpy(res.array)) - 1.0), 1e-12)

if __name__ == '__main__':
    unittest.main()
