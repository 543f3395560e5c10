"""Dense fixed-size matrices, used to hold Jacobians."""

from __future__ import annotations

import numpy as np

from diffik.linalg.vector import DEFAULT_DTYPE, Vector


class Matrix:
    """Dense M x N row-major matrix backed by a 2-D numpy array."""

    __slots__ = ("_data",)

    def __init__(self, values, dtype=DEFAULT_DTYPE) -> None:
        data = np.array(values, dtype=dtype)
        if data.ndim != 2:
            raise ValueError(f"Matrix data must be 2-D, got shape {data.shape}")
        self._data = data

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype=DEFAULT_DTYPE) -> "Matrix":
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix shape must be non-negative, got ({rows}, {cols})")
        return cls(np.zeros((rows, cols), dtype=dtype))

    @classmethod
    def identity(cls, n: int, dtype=DEFAULT_DTYPE) -> "Matrix":
        return cls(np.eye(n, dtype=dtype))

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = _element_index(index)
        return self._data[i, j].item()

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = _element_index(index)
        self._data[i, j] = value

    def row(self, i: int) -> Vector:
        return Vector(self._data[i, :], dtype=self._data.dtype)

    def col(self, j: int) -> Vector:
        return Vector(self._data[:, j], dtype=self._data.dtype)

    def set_col(self, j: int, v: Vector) -> None:
        if v.dim != self.rows:
            raise ValueError(f"Column must have dimension {self.rows}, got {v.dim}")
        self._data[:, j] = v.data

    def transpose(self) -> "Matrix":
        return Matrix(self._data.T, dtype=self._data.dtype)

    def copy(self) -> "Matrix":
        return Matrix(self._data, dtype=self._data.dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()})"

    def __str__(self) -> str:
        return "\n".join(
            "(" + ", ".join("%f" % c for c in row) + ")" for row in self._data.tolist()
        )


def _element_index(index) -> tuple[int, int]:
    if not isinstance(index, tuple) or len(index) != 2:
        raise TypeError(
            f"Matrix indices must be a (row, col) pair, got {index!r}; "
            "use row(i) or col(j) for a whole row or column"
        )
    return index


def mat_vec_mul(dest: Vector, m: Matrix, v: Vector) -> None:
    """
    dest = m . v

    Input:
        dest: Output vector of dimension m.rows (must not alias v)
        m: Matrix, shape (M, N)
        v: Vector of dimension N
    """
    if v.dim != m.cols or dest.dim != m.rows:
        raise ValueError(
            f"Cannot multiply {m.rows}x{m.cols} matrix by {v.dim}-vector "
            f"into {dest.dim}-vector"
        )
    dest.data[:] = m.data @ v.data
