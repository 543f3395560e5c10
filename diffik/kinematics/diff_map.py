"""
Differentiable map abstraction consumed by the IK solver.

A map f: R^N -> R^M exposes its value and its M x N Jacobian. Callers bind
their own forward kinematics (or any other residual) behind this interface;
the solver only ever calls evaluate() and jacobian().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

import numpy as np

from diffik.linalg import Matrix, Vector


@runtime_checkable
class DifferentiableMap(Protocol):
    """Protocol for residual functions with a Jacobian."""

    @property
    def input_dim(self) -> int:
        ...

    @property
    def output_dim(self) -> int:
        ...

    def evaluate(self, x: Vector) -> Vector:
        ...

    def jacobian(self, x: Vector) -> Matrix:
        ...


ValueCallback = Callable[[Vector, Vector], None]
DerivCallback = Callable[[Matrix, Vector], None]


@dataclass(frozen=True)
class DiffMap:
    """
    Differentiable map built from a pair of out-parameter callbacks.

    value(out, x) must write all output_dim components of f(x) into out.
    deriv(out, x) must write the output_dim x input_dim Jacobian of f at x
    into out, consistently with value.
    """

    input_dim: int
    output_dim: int
    value: ValueCallback
    deriv: DerivCallback

    def __post_init__(self):
        if self.input_dim < 0:
            raise ValueError("input_dim must be >= 0")
        if self.output_dim < 0:
            raise ValueError("output_dim must be >= 0")

    @classmethod
    def from_functions(
        cls,
        input_dim: int,
        output_dim: int,
        value_fn: Callable[[np.ndarray], np.ndarray],
        jacobian_fn: Callable[[np.ndarray], np.ndarray],
    ) -> "DiffMap":
        """
        Create a DiffMap from functions that return arrays.

        Input:
            input_dim: Configuration dimension N
            output_dim: Residual dimension M
            value_fn: Maps an (N,) array to an (M,) array-like
            jacobian_fn: Maps an (N,) array to an (M, N) array-like
        Output:
            DiffMap forwarding to the given functions
        """

        def value(out: Vector, x: Vector) -> None:
            out.data[:] = np.asarray(value_fn(x.data.copy()), dtype=out.data.dtype)

        def deriv(out: Matrix, x: Vector) -> None:
            out.data[:, :] = np.asarray(
                jacobian_fn(x.data.copy()), dtype=out.data.dtype
            )

        return cls(input_dim, output_dim, value, deriv)

    def evaluate(self, x: Vector) -> Vector:
        out = Vector.zeros(self.output_dim, dtype=x.data.dtype)
        self.value(out, x)
        return out

    def jacobian(self, x: Vector) -> Matrix:
        out = Matrix.zeros(self.output_dim, self.input_dim, dtype=x.data.dtype)
        self.deriv(out, x)
        return out
