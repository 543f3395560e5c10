"""Finite-difference checks for analytic Jacobians."""

import numpy as np

from diffik.kinematics.diff_map import DifferentiableMap
from diffik.linalg import Matrix, Vector


def numerical_jacobian(
    func: DifferentiableMap, x: Vector, eps: float = 1e-6
) -> Matrix:
    """
    Estimate the Jacobian of func at x with central differences.

    Input:
        func: Map whose evaluate() is differentiated
        x: Point of evaluation, dimension func.input_dim
        eps: Perturbation applied to each component
    Output:
        Matrix, shape (func.output_dim, func.input_dim)
    """
    if eps <= 0:
        raise ValueError("eps must be > 0")

    J = Matrix.zeros(func.output_dim, func.input_dim)
    shifted = Vector(x.data, dtype=np.float64)
    for j in range(x.dim):
        shifted[j] = x[j] + eps
        f_plus = func.evaluate(shifted).data.copy()
        shifted[j] = x[j] - eps
        f_minus = func.evaluate(shifted).data
        shifted[j] = x[j]
        J.data[:, j] = (f_plus - f_minus) / (2.0 * eps)
    return J


def check_jacobian(
    func: DifferentiableMap, x: Vector, eps: float = 1e-6, atol: float = 1e-4
) -> bool:
    """Whether func.jacobian(x) matches the finite-difference estimate."""
    analytic = func.jacobian(x)
    numeric = numerical_jacobian(func, x, eps)
    if analytic.shape != numeric.shape:
        return False
    return bool(np.allclose(analytic.data, numeric.data, atol=atol))
