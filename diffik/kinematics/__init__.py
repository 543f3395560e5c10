from .diff_map import DiffMap, DifferentiableMap
from .ik_solver import ik_solve, is_converged

__all__ = [
    "DifferentiableMap",
    "DiffMap",
    "ik_solve",
    "is_converged",
]
