# tests/test_solver.py
import numpy as np
import pytest

from dcsim_core import SingularMatrixError, SolverConfig, gaussian_elimination
from dcsim_core.simulation.config import ConfigParsingError, parse_solver_config


class TestGaussianElimination:

    def test_row_swap_for_zero_pivot(self):
        x = gaussian_elimination([[0.0, 1.0], [1.0, 1.0]], [2.0, 3.0])
        np.testing.assert_allclose(x, [1.0, 2.0], atol=1e-12)

    def test_identity(self):
        x = gaussian_elimination(np.eye(3), [1.0, -2.0, 3.5])
        np.testing.assert_allclose(x, [1.0, -2.0, 3.5])

    def test_known_3x3(self):
        A = [[2.0, 1.0, -1.0], [-3.0, -1.0, 2.0], [-2.0, 1.0, 2.0]]
        B = [8.0, -11.0, -3.0]
        np.testing.assert_allclose(gaussian_elimination(A, B), [2.0, 3.0, -1.0], atol=1e-12)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    @pytest.mark.parametrize("n", [1, 2, 5, 12])
    def test_residual_for_well_conditioned_systems(self, seed, n):
        rng = np.random.default_rng(seed)
        # Diagonally dominant, hence well conditioned and non-singular.
        A = rng.uniform(-1.0, 1.0, size=(n, n)) + n * np.eye(n)
        B = rng.uniform(-10.0, 10.0, size=n)
        x = gaussian_elimination(A, B)
        residual = np.linalg.norm(A @ x - B) / max(np.linalg.norm(B), 1e-300)
        assert residual < 1e-6
        np.testing.assert_allclose(x, np.linalg.solve(A, B), rtol=1e-9, atol=1e-12)

    def test_inputs_not_modified(self):
        A = np.array([[0.0, 1.0], [1.0, 1.0]])
        B = np.array([2.0, 3.0])
        A_before, B_before = A.copy(), B.copy()
        gaussian_elimination(A, B)
        np.testing.assert_array_equal(A, A_before)
        np.testing.assert_array_equal(B, B_before)

    def test_singular_matrix(self):
        with pytest.raises(SingularMatrixError) as excinfo:
            gaussian_elimination([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0])
        assert excinfo.value.pivot_index == 1

    def test_zero_column_reports_pivot(self):
        with pytest.raises(SingularMatrixError) as excinfo:
            gaussian_elimination([[0.0, 1.0], [0.0, 2.0]], [1.0, 2.0])
        assert excinfo.value.pivot_index == 0
        assert excinfo.value.pivot_value == 0.0

    def test_singular_error_is_linalg_error(self):
        with pytest.raises(np.linalg.LinAlgError):
            gaussian_elimination([[0.0]], [1.0])

    def test_epsilon_is_configurable(self):
        A = [[1e-10, 0.0], [0.0, 1.0]]
        B = [1e-10, 1.0]
        with pytest.raises(SingularMatrixError):
            gaussian_elimination(A, B)
        x = gaussian_elimination(A, B, SolverConfig(epsilon=1e-12))
        np.testing.assert_allclose(x, [1.0, 1.0])

    def test_nan_entries_reported_as_singular(self):
        with pytest.raises(SingularMatrixError):
            gaussian_elimination([[np.nan, 0.0], [0.0, 1.0]], [1.0, 1.0])

    def test_empty_system(self):
        assert gaussian_elimination(np.zeros((0, 0)), np.zeros(0)).shape == (0,)

    @pytest.mark.parametrize("A, B", [
        ([[1.0, 2.0, 3.0]], [1.0]),
        ([[1.0, 0.0], [0.0, 1.0]], [1.0, 2.0, 3.0]),
        ([1.0, 2.0], [1.0, 2.0]),
    ])
    def test_shape_mismatch(self, A, B):
        with pytest.raises(ValueError):
            gaussian_elimination(A, B)


class TestSolverConfig:

    def test_defaults(self):
        assert SolverConfig().epsilon == 1e-9
        assert parse_solver_config(None) == SolverConfig()
        assert parse_solver_config({}) == SolverConfig()

    def test_parse(self):
        assert parse_solver_config({"epsilon": "1e-12"}).epsilon == 1e-12

    @pytest.mark.parametrize("raw", [{"epsilon": 0}, {"epsilon": -1.0}, {"epsilon": "abc"}, {"tolerance": 1e-3}])
    def test_invalid(self, raw):
        with pytest.raises(ConfigParsingError):
            parse_solver_config(raw)
