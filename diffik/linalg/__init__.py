from .matrix import Matrix, mat_vec_mul
from .vector import (
    DEFAULT_DTYPE,
    NORMALIZE_EPS,
    Vector,
    add,
    comp_clamp_scale,
    cross,
    dot,
    mul,
    normalize,
    square_dist,
    square_mag,
    sub,
    subvec,
    vector2,
    vector3,
    vector4,
)

__all__ = [
    # Vector
    "DEFAULT_DTYPE",
    "NORMALIZE_EPS",
    "Vector",
    "vector2",
    "vector3",
    "vector4",
    "add",
    "sub",
    "mul",
    "dot",
    "square_mag",
    "square_dist",
    "normalize",
    "cross",
    "comp_clamp_scale",
    "subvec",
    # Matrix
    "Matrix",
    "mat_vec_mul",
]
