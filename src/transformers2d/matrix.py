from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from .errors import SingularMatrixError
from .geometry import (
    apply_matrix,
    coerce_number,
    determinant,
    format_number,
    invert_matrix,
    matrices_close,
    multiply_matrices,
)
from .grammar import apply_transform_string
from .models import IDENTITY, Matrix, MatrixLike, Point

_FIELDS = ("a", "b", "c", "d", "e", "f")


def to_matrix(value: MatrixLike) -> Matrix:
    """Normalize a matrix-like value to a coefficient record.

    Accepts a ``Matrix``, a ``Transformers``, a mapping with keys ``a`` to ``f``
    or a flat sequence ``[a, b, c, d, e, f]``. Missing or non-numeric
    coefficients become NaN.
    """
    if isinstance(value, Transformers):
        return value.matrix
    if isinstance(value, Matrix):
        return Matrix(*(coerce_number(v) for v in value))
    if isinstance(value, Mapping):
        return Matrix(*(coerce_number(value.get(name)) for name in _FIELDS))
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        items = list(value[:6])
        items.extend([None] * (6 - len(items)))
        return Matrix(*(coerce_number(v) for v in items))
    raise TypeError(f"Not a matrix-like value: {type(value).__name__}")


class Transformers:
    """Mutable 2D affine transform built by chaining operations.

    Each operation multiplies the current matrix on the right by an operation
    matrix, so ``Transformers().translate(10, 0).scale(2)`` maps a point by
    scaling it first and translating it afterwards. Instances are not
    synchronized; use ``copy()`` to hand one to another thread.
    """

    __slots__ = ("matrix",)

    def __init__(self, value: MatrixLike | str | None = None, *, strict: bool = False) -> None:
        self.matrix: Matrix = IDENTITY
        if isinstance(value, str):
            self.parse(value, strict=strict)
        elif value is not None:
            self.multiply(value)

    def multiply(self, other: MatrixLike) -> Transformers:
        self.matrix = multiply_matrices(self.matrix, to_matrix(other))
        return self

    def parse(self, raw: str, *, strict: bool = False) -> Transformers:
        """Apply a transform list such as ``"translate(10,15) rotate(30)"``."""
        return apply_transform_string(self, raw, strict=strict)

    def translate(self, x: float = 0.0, y: float = 0.0) -> Transformers:
        return self.multiply(Matrix(1.0, 0.0, 0.0, 1.0, coerce_number(x), coerce_number(y)))

    def rotate(self, angle: float = 0.0, x: float | None = None, y: float | None = None) -> Transformers:
        """Rotate by ``angle`` degrees, about ``(x, y)`` when both are given."""
        radians = coerce_number(angle) * math.pi / 180
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        rotation = Matrix(cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)

        if x is None or y is None:
            return self.multiply(rotation)
        self.translate(x, y)
        self.multiply(rotation)
        return self.translate(-coerce_number(x), -coerce_number(y))

    def scale(self, x: float = 1.0, y: float | None = None) -> Transformers:
        if y is None:
            y = x
        return self.multiply(Matrix(coerce_number(x), 0.0, 0.0, coerce_number(y), 0.0, 0.0))

    def shear(self, x: float = 0.0, y: float = 0.0) -> Transformers:
        return self.multiply(Matrix(1.0, coerce_number(y), coerce_number(x), 1.0, 0.0, 0.0))

    def skew(self, x: float = 0.0, y: float = 0.0) -> Transformers:
        """Skew by ``x`` and ``y`` given in radians, unlike ``rotate``."""
        return self.multiply(
            Matrix(1.0, math.tan(coerce_number(y)), math.tan(coerce_number(x)), 1.0, 0.0, 0.0)
        )

    def inverse(self, *, strict: bool = False) -> Transformers:
        """Replace the matrix with its inverse.

        A singular matrix yields infinite or NaN coefficients, unless ``strict``
        is set, in which case ``SingularMatrixError`` is raised and the matrix
        is left untouched.
        """
        if strict and determinant(self.matrix) == 0:
            raise SingularMatrixError(f"Matrix is not invertible: {self.render()}")
        self.matrix = invert_matrix(self.matrix)
        return self

    def point_to(self, x: float = 0.0, y: float = 0.0) -> Point:
        return apply_matrix(self.matrix, coerce_number(x), coerce_number(y))

    def render(self) -> str:
        return "matrix(" + ",".join(format_number(v) for v in self.matrix) + ")"

    @property
    def determinant(self) -> float:
        return determinant(self.matrix)

    def copy(self) -> Transformers:
        clone = Transformers()
        clone.matrix = self.matrix
        return clone

    def to_list(self) -> list[float]:
        return self.matrix.to_list()

    def is_identity(self, tolerance: float = 0.0) -> bool:
        return matrices_close(self.matrix, IDENTITY, abs_tol=tolerance)

    def isclose(self, other: MatrixLike, abs_tol: float = 1e-9) -> bool:
        return matrices_close(self.matrix, to_matrix(other), abs_tol=abs_tol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transformers):
            return NotImplemented
        return self.matrix == other.matrix

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Transformers({self.render()!r})"


def transformers(value: MatrixLike | str | None = None, *, strict: bool = False) -> Transformers:
    """Create a transform from nothing, coefficients, another transform or a transform string."""
    return Transformers(value, strict=strict)
