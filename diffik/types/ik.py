from dataclasses import dataclass
from enum import Enum

from diffik.linalg import Vector


class IKStatus(Enum):
    """Status of IK solution attempt."""

    SUCCESS = "success"
    MAX_ITERATIONS = "max_iterations"
    SINGULAR = "singular"
    FAILED = "failed"


@dataclass
class IKResult:
    """Result of an IK solution attempt."""

    status: IKStatus
    configuration: Vector  # Copy of the configuration when the solver stopped
    final_error: float  # Residual magnitude at that configuration
    iterations: int  # Number of updates applied

    @property
    def success(self) -> bool:
        return self.status == IKStatus.SUCCESS
