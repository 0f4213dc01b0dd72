from __future__ import annotations


class TransformersError(Exception):
    """Base error of the project."""


class SingularMatrixError(TransformersError, ArithmeticError):
    """Inversion of a matrix whose determinant is zero."""


class TransformSyntaxError(TransformersError, ValueError):
    """Unrecognized call in a transform string."""
