"""
Fixed-dimension numeric vectors.

A Vector wraps a single 1-D numpy array. For dimensions 2, 3 and 4 the
components are also reachable through the named fields x, y, z, w, which
read and write the same storage as indexed access.

Operations are free functions that write into a destination vector, so a
caller can reuse storage across solver iterations.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

DEFAULT_DTYPE = np.float64

# Squared magnitude below which normalize() leaves the vector as-is
NORMALIZE_EPS = 1e-5

_FIELD_NAMES = ("x", "y", "z", "w")


def _named_field(index: int) -> property:
    name = _FIELD_NAMES[index]

    def _check(self: "Vector") -> None:
        if not 2 <= self.dim <= 4 or index >= self.dim:
            raise AttributeError(
                f"Vector of dimension {self.dim} has no field '{name}'"
            )

    def fget(self: "Vector") -> float:
        _check(self)
        return self.data[index].item()

    def fset(self: "Vector", value: float) -> None:
        _check(self)
        self.data[index] = value

    return property(fget, fset, doc=f"Component {index} ({name}).")


class Vector:
    """Fixed-size numeric vector backed by one numpy array."""

    __slots__ = ("_data",)

    def __init__(self, values=(), dtype=DEFAULT_DTYPE) -> None:
        data = np.array(values, dtype=dtype)
        if data.ndim != 1:
            raise ValueError(f"Vector data must be 1-D, got shape {data.shape}")
        self._data = data

    @classmethod
    def zeros(cls, dim: int, dtype=DEFAULT_DTYPE) -> "Vector":
        if dim < 0:
            raise ValueError(f"dim must be >= 0, got {dim}")
        return cls(np.zeros(dim, dtype=dtype))

    @classmethod
    def view(cls, array: np.ndarray) -> "Vector":
        """
        Wrap an existing 1-D array without copying.

        Input:
            array: numpy array, shape (N,)
        Output:
            Vector sharing storage with array
        """
        if not isinstance(array, np.ndarray) or array.ndim != 1:
            raise ValueError("Vector.view requires a 1-D numpy array")
        vec = cls.__new__(cls)
        vec._data = array
        return vec

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def dim(self) -> int:
        return self._data.shape[0]

    x = _named_field(0)
    y = _named_field(1)
    z = _named_field(2)
    w = _named_field(3)

    def __len__(self) -> int:
        return self.dim

    def __getitem__(self, index: int) -> float:
        if not -self.dim <= index < self.dim:
            raise IndexError(f"index {index} out of range for dimension {self.dim}")
        return self._data[index].item()

    def __setitem__(self, index: int, value: float) -> None:
        if not -self.dim <= index < self.dim:
            raise IndexError(f"index {index} out of range for dimension {self.dim}")
        self._data[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dim == other.dim and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "Vector":
        return Vector(self._data, dtype=self._data.dtype)

    def assign(self, other: "Vector") -> None:
        """Copy the components of other into this vector's storage."""
        _check_same_dim(self, other)
        self._data[:] = other._data

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()})"

    def __str__(self) -> str:
        return "(" + ", ".join("%f" % c for c in self._data.tolist()) + ")"


def vector2(x: float, y: float) -> Vector:
    return Vector((x, y))


def vector3(x: float, y: float, z: float) -> Vector:
    return Vector((x, y, z))


def vector4(x: float, y: float, z: float, w: float) -> Vector:
    return Vector((x, y, z, w))


def _check_same_dim(*vectors: Vector) -> None:
    dim = vectors[0].dim
    for v in vectors[1:]:
        if v.dim != dim:
            raise ValueError(f"Dimension mismatch: {dim} vs {v.dim}")


def add(dest: Vector, a: Vector, b: Vector) -> None:
    """dest = a + b. dest may alias a or b."""
    _check_same_dim(dest, a, b)
    np.add(a.data, b.data, out=dest.data)


def sub(dest: Vector, a: Vector, b: Vector) -> None:
    """dest = a - b. dest may alias a or b."""
    _check_same_dim(dest, a, b)
    np.subtract(a.data, b.data, out=dest.data)


def mul(dest: Vector, v: Vector, s: float) -> None:
    """dest = v * s."""
    _check_same_dim(dest, v)
    np.multiply(v.data, s, out=dest.data)


def dot(a: Vector, b: Vector) -> float:
    _check_same_dim(a, b)
    return float(np.dot(a.data, b.data))


def square_mag(v: Vector) -> float:
    return float(np.dot(v.data, v.data))


def square_dist(a: Vector, b: Vector) -> float:
    _check_same_dim(a, b)
    diff = a.data - b.data
    return float(np.dot(diff, diff))


def normalize(dest: Vector, v: Vector) -> None:
    """
    Write the unit vector along v into dest.

    Near-zero vectors (squared magnitude <= NORMALIZE_EPS) are copied
    unchanged instead of being divided by their magnitude.
    """
    _check_same_dim(dest, v)
    smag = square_mag(v)
    if smag <= NORMALIZE_EPS:
        dest.data[:] = v.data
    else:
        mul(dest, v, 1.0 / np.sqrt(smag))


def cross(dest: Vector, a: Vector, b: Vector) -> None:
    """
    3-D cross product dest = a x b.

    dest must not share storage with a or b.
    """
    if dest.dim != 3 or a.dim != 3 or b.dim != 3:
        raise ValueError("cross is only defined for 3-vectors")
    if np.shares_memory(dest.data, a.data) or np.shares_memory(dest.data, b.data):
        raise ValueError("cross destination must not alias an operand")

    dest.x = a.y * b.z - a.z * b.y
    dest.y = a.z * b.x - a.x * b.z
    dest.z = a.x * b.y - a.y * b.x


def comp_clamp_scale(dest: Vector, v: Vector, clamp: float) -> None:
    """
    Bound the largest absolute component of v to clamp, keeping direction.

    When max|v_i| <= clamp, dest is left untouched (callers usually pass
    dest=v). Otherwise dest_i = v_i * clamp / max|v_i|.

    Input:
        dest: Output vector, same dimension as v
        v: Vector to clamp
        clamp: Bound on the largest component magnitude
    """
    _check_same_dim(dest, v)
    if v.dim == 0:
        return
    maxc = float(np.max(np.abs(v.data)))
    if maxc <= clamp:
        return
    np.multiply(v.data, clamp / maxc, out=dest.data)


def subvec(v: Vector, start: int, m: int) -> Vector:
    """
    View m contiguous components of v starting at start.

    The result shares storage with v: writes through either are visible
    in both, and the view is only meaningful while v is in use.

    Input:
        v: Backing vector of dimension N
        start: First component index
        m: Dimension of the view
    Output:
        Vector of dimension m aliasing v.data[start:start + m]
    """
    if m < 0 or start < 0 or start + m > v.dim:
        raise ValueError(
            f"subvec range [{start}, {start + m}) outside dimension {v.dim}"
        )
    return Vector.view(v.data[start : start + m])
