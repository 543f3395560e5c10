"""Tests for diffik.utils.jacobian_check"""

import numpy as np
import pytest

from diffik.kinematics import DiffMap
from diffik.linalg import Vector, vector2
from diffik.utils.jacobian_check import check_jacobian, numerical_jacobian


def _polar_map(jacobian_fn=None) -> DiffMap:
    """(r, t) -> (r cos t, r sin t)"""

    def value_fn(x: np.ndarray) -> np.ndarray:
        return np.array([x[0] * np.cos(x[1]), x[0] * np.sin(x[1])])

    def exact(x: np.ndarray) -> np.ndarray:
        return np.array(
            [
                [np.cos(x[1]), -x[0] * np.sin(x[1])],
                [np.sin(x[1]), x[0] * np.cos(x[1])],
            ]
        )

    return DiffMap.from_functions(2, 2, value_fn, jacobian_fn or exact)


class TestNumericalJacobian:
    def test_matches_exact(self) -> None:
        f = _polar_map()
        x = vector2(2.0, 0.7)
        numeric = numerical_jacobian(f, x)
        np.testing.assert_allclose(numeric.data, f.jacobian(x).data, atol=1e-6)

    def test_does_not_modify_input(self) -> None:
        x = vector2(2.0, 0.7)
        numerical_jacobian(_polar_map(), x)
        assert x == vector2(2.0, 0.7)

    def test_shape_for_non_square_map(self) -> None:
        f = DiffMap.from_functions(
            3, 1, lambda x: [x[0] * x[1] * x[2]], lambda x: np.zeros((1, 3))
        )
        J = numerical_jacobian(f, Vector([1.0, 2.0, 3.0]))
        assert J.shape == (1, 3)
        np.testing.assert_allclose(J.data, [[6.0, 3.0, 2.0]], atol=1e-6)

    def test_rejects_non_positive_eps(self) -> None:
        with pytest.raises(ValueError):
            numerical_jacobian(_polar_map(), vector2(1.0, 0.0), eps=0.0)


class TestCheckJacobian:
    def test_consistent(self) -> None:
        assert check_jacobian(_polar_map(), vector2(1.5, -0.4))

    def test_inconsistent(self) -> None:
        f = _polar_map(lambda x: np.eye(2))
        assert not check_jacobian(f, vector2(1.5, -0.4))

    def test_float32_configuration(self) -> None:
        """Perturbations are applied in double precision"""
        seen_dtypes = []

        def value_fn(x: np.ndarray) -> np.ndarray:
            seen_dtypes.append(x.dtype)
            return np.array([x[0] ** 3])

        f = DiffMap.from_functions(1, 1, value_fn, lambda x: [[3.0 * x[0] ** 2]])
        x = Vector([1.7], dtype=np.float32)
        J = numerical_jacobian(f, x)
        x0 = float(np.float32(1.7))
        assert J[0, 0] == pytest.approx(3.0 * x0**2, rel=1e-6)
        assert all(dtype == np.float64 for dtype in seen_dtypes)
        assert x.data.dtype == np.float32
        assert x[0] == x0
        assert check_jacobian(f, x)
