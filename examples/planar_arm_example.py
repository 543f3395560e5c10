"""Planar two-link arm IK example, no visualization.

The residual is the end-effector position minus the target, so the solver
drives the joint angles until the tip reaches the target.

    python examples/planar_arm_example.py --target_x=1.2 --target_y=0.8
"""

import numpy as np
from fire import Fire

from diffik.config.ik_config import IKConfig
from diffik.kinematics import DiffMap, ik_solve
from diffik.linalg import Matrix, Vector, vector2
from diffik.utils.jacobian_check import check_jacobian


def make_planar_arm(l1: float, l2: float, target: Vector) -> DiffMap:
    """Residual map q -> fk(q) - target for a two-link planar arm."""

    def value(out: Vector, q: Vector) -> None:
        a, b = q[0], q[1]
        out.x = l1 * np.cos(a) + l2 * np.cos(a + b) - target.x
        out.y = l1 * np.sin(a) + l2 * np.sin(a + b) - target.y

    def deriv(out: Matrix, q: Vector) -> None:
        a, b = q[0], q[1]
        out[0, 0] = -l1 * np.sin(a) - l2 * np.sin(a + b)
        out[0, 1] = -l2 * np.sin(a + b)
        out[1, 0] = l1 * np.cos(a) + l2 * np.cos(a + b)
        out[1, 1] = l2 * np.cos(a + b)

    return DiffMap(input_dim=2, output_dim=2, value=value, deriv=deriv)


def main(
    target_x=1.2,
    target_y=0.8,
    l1=1.0,
    l2=1.0,
    max_step=0.2,
    max_iterations=200,
):
    # --- IKConfig (all fields shown) ---
    config = IKConfig(
        max_iterations=max_iterations,
        tolerance=1e-6,  # residual magnitude
        damping=1e-3,  # damped least squares lambda
        max_step=max_step,  # radians per iteration, largest joint
    )

    target = vector2(target_x, target_y)
    arm = make_planar_arm(l1, l2, target)

    # Elbow slightly bent to stay away from the straight-arm singularity
    q = vector2(0.3, 0.3)
    print(f"Jacobian consistent at seed: {check_jacobian(arm, q)}")

    result = ik_solve(q, arm, config)
    print(f"IK status: {result.status.value}")
    print(f"  iterations:     {result.iterations}")
    print(f"  residual error: {result.final_error:.3e}")
    print(f"  joint angles:   {q}")

    if not result.success:
        print("  IK did not converge; configuration holds the last iterate.")


if __name__ == "__main__":
    Fire(main)
