import math
from dataclasses import dataclass


@dataclass
class IKConfig:
    """Configuration parameters for the iterative IK solver."""

    max_iterations: int = 200
    tolerance: float = 1e-4  # Residual magnitude counted as converged
    damping: float = 1e-6  # Damped least squares regularization
    max_step: float = 1.0  # Bound on the largest step component

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")
        if not self.tolerance > 0:
            raise ValueError("tolerance must be > 0")
        if not self.damping >= 0 or math.isinf(self.damping):
            raise ValueError("damping must be a finite value >= 0")
        if not self.max_step > 0:
            raise ValueError("max_step must be > 0")
