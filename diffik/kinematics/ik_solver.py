"""
Iterative inverse kinematics solver.

Drives a configuration vector toward a root of a differentiable map using
damped least squares (Levenberg-Marquardt style) Newton steps, with the
step bounded by its largest component.
"""

import logging

import numpy as np
import scipy.linalg

from diffik.config.ik_config import IKConfig
from diffik.kinematics.diff_map import DifferentiableMap
from diffik.linalg import Matrix, Vector, comp_clamp_scale, sub
from diffik.types import IKResult, IKStatus

logger = logging.getLogger(__name__)


def ik_solve(
    current: Vector,
    func: DifferentiableMap,
    config: IKConfig | None = None,
) -> IKResult:
    """
    Move current in place toward a configuration where func evaluates to zero.

    Each iteration evaluates the residual e and Jacobian J at current,
    solves J dx ~= e by damped least squares, clamps dx so that no component
    exceeds config.max_step, and applies current <- current - dx.

    Running out of iterations is not an error: current holds the last
    iterate and the result reports MAX_ITERATIONS.

    Input:
        current: Configuration vector of dimension func.input_dim (mutated)
        func: Residual map with its Jacobian
        config: IK solver configuration (uses defaults if None)
    Output:
        IKResult describing how the solve ended
    """
    if config is None:
        config = IKConfig()

    if current.dim != func.input_dim:
        raise ValueError(
            f"Configuration has dimension {current.dim}, "
            f"map expects {func.input_dim}"
        )

    step = Vector.zeros(current.dim, dtype=current.data.dtype)

    for iteration in range(config.max_iterations):
        error = _evaluate(func, current)

        if not np.all(np.isfinite(error.data)):
            logger.warning("Non-finite residual at iteration %d", iteration)
            return _result(IKStatus.FAILED, current, float("nan"), iteration)

        residual = _residual_norm(error)
        if residual <= config.tolerance:
            logger.debug("Converged after %d iterations", iteration)
            return _result(IKStatus.SUCCESS, current, residual, iteration)

        J = func.jacobian(current)
        if J.shape != (func.output_dim, func.input_dim):
            raise ValueError(
                f"Jacobian must be shape ({func.output_dim}, {func.input_dim}), "
                f"got {J.shape}"
            )

        dx = _damped_least_squares(J, error, config.damping)
        if dx is None or not np.all(np.isfinite(dx)):
            logger.warning("Singular Jacobian at iteration %d", iteration)
            return _result(IKStatus.SINGULAR, current, residual, iteration)

        step.data[:] = dx
        comp_clamp_scale(step, step, config.max_step)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "iteration %d: |e|=%.3e max|dx|=%.3e",
                iteration,
                residual,
                float(np.max(np.abs(step.data))) if step.dim else 0.0,
            )

        sub(current, current, step)

    # The last update may have reached the root
    error = _evaluate(func, current)
    residual = _residual_norm(error)
    if residual <= config.tolerance:
        return _result(IKStatus.SUCCESS, current, residual, config.max_iterations)

    logger.warning(
        "No convergence within %d iterations (|e|=%.3e)",
        config.max_iterations,
        residual,
    )
    return _result(IKStatus.MAX_ITERATIONS, current, residual, config.max_iterations)


def is_converged(func: DifferentiableMap, x: Vector, tolerance: float) -> bool:
    """Whether |func(x)| <= tolerance."""
    return _residual_norm(_evaluate(func, x)) <= tolerance


# --- Internal helper functions ---


def _residual_norm(error: Vector) -> float:
    """Euclidean norm of the residual; finite for any finite components."""
    if not np.all(np.isfinite(error.data)):
        return float("nan")
    return float(scipy.linalg.norm(error.data)) if error.dim else 0.0


def _evaluate(func: DifferentiableMap, x: Vector) -> Vector:
    error = func.evaluate(x)
    if error.dim != func.output_dim:
        raise ValueError(
            f"Residual must have dimension {func.output_dim}, got {error.dim}"
        )
    return error


def _damped_least_squares(
    J: Matrix, error: Vector, damping: float
) -> np.ndarray | None:
    """
    Solve J dx ~= e in the damped least squares sense.

    Uses dx = J^T (J J^T + λ²I)^{-1} e for wide or square Jacobians and the
    equivalent (J^T J + λ²I)^{-1} J^T e for tall ones, so the linear system
    is always the smaller of the two. Falls back to the minimum-norm
    pseudo-inverse solution when the damped system is singular.
    """
    A = J.data
    e = error.data
    rows, cols = A.shape
    damping_sq = damping**2

    try:
        if rows <= cols:
            beta = scipy.linalg.solve(
                A @ A.T + damping_sq * np.eye(rows), e, assume_a="pos"
            )
            return A.T @ beta
        return scipy.linalg.solve(
            A.T @ A + damping_sq * np.eye(cols), A.T @ e, assume_a="pos"
        )
    except (scipy.linalg.LinAlgError, ValueError):
        logger.debug("Damped system not positive definite, using pseudo-inverse")

    try:
        dx, _, _, _ = scipy.linalg.lstsq(A, e)
    except (scipy.linalg.LinAlgError, ValueError):
        return None
    return dx


def _result(
    status: IKStatus, current: Vector, residual: float, iterations: int
) -> IKResult:
    return IKResult(
        status=status,
        configuration=current.copy(),
        final_error=residual,
        iterations=iterations,
    )
