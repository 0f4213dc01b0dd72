from __future__ import annotations

import math
import re
from decimal import Decimal

from .models import Matrix, Point

NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def coerce_number(value: object) -> float:
    """Convert to float, turning anything non-numeric into NaN instead of raising."""
    if value is None:
        return math.nan
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan


def divide(numerator: float, denominator: float) -> float:
    """IEEE 754 division: a zero denominator gives a signed infinity or NaN."""
    if denominator != 0 or math.isnan(denominator):
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def format_number(value: float) -> str:
    """Render a float the way JavaScript's Number#toString does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, raw_digits, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in raw_digits)
    # value == 0.<digits> * 10**point
    point = len(digits) + exponent
    digits = digits.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        body = digits + "0" * (point - k)
    elif 0 < point <= 21:
        body = digits[:point] + "." + digits[point:]
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{point - 1:+d}"
    return sign + body


def multiply_matrices(m1: Matrix, m2: Matrix) -> Matrix:
    a1, b1, c1, d1, e1, f1 = m1
    a2, b2, c2, d2, e2, f2 = m2
    return Matrix(
        a1 * a2 + c1 * b2,
        b1 * a2 + d1 * b2,
        a1 * c2 + c1 * d2,
        b1 * c2 + d1 * d2,
        a1 * e2 + c1 * f2 + e1,
        b1 * e2 + d1 * f2 + f1,
    )


def determinant(matrix: Matrix) -> float:
    return matrix.a * matrix.d - matrix.b * matrix.c


def invert_matrix(matrix: Matrix) -> Matrix:
    a, b, c, d, e, f = matrix
    den = determinant(matrix)
    return Matrix(
        divide(d, den),
        divide(-b, den),
        divide(-c, den),
        divide(a, den),
        divide(d * e - c * f, -den),
        divide(b * e - a * f, den),
    )


def apply_matrix(matrix: Matrix, x: float, y: float) -> Point:
    a, b, c, d, e, f = matrix
    return Point(a * x + c * y + e, b * x + d * y + f)


def matrices_close(m1: Matrix, m2: Matrix, abs_tol: float = 1e-9) -> bool:
    return all(math.isclose(v1, v2, abs_tol=abs_tol) for v1, v2 in zip(m1, m2))
