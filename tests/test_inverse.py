import math

import pytest

from transformers2d.errors import SingularMatrixError
from transformers2d.matrix import transformers
from transformers2d.models import IDENTITY, Matrix


def test_inverse_of_translation() -> None:
    assert transformers("translate(10, 10)").inverse().matrix == Matrix(1, 0, 0, 1, -10, -10)


def test_inverse_round_trip() -> None:
    mat = transformers("translate(10,15) rotate(30) scale(2,3) shear(0.5,0.25)")
    inv = mat.copy().inverse()

    assert mat.copy().multiply(inv).isclose(IDENTITY)
    assert inv.copy().multiply(mat).isclose(IDENTITY)


def test_inverse_maps_points_back() -> None:
    mat = transformers("rotate(90, 10, 10) translate(3, -4)")
    inv = mat.copy().inverse()
    mapped = mat.point_to(7, 2)
    back = inv.point_to(mapped.x, mapped.y)
    assert abs(back.x - 7.0) < 1e-9
    assert abs(back.y - 2.0) < 1e-9


def test_inverse_negates_off_diagonal_terms() -> None:
    # b and c must be negated; an older variant divided them by +den
    inv = transformers().shear(2, 3).inverse().matrix
    assert math.isclose(inv.a, -0.2)
    assert math.isclose(inv.b, 0.6)
    assert math.isclose(inv.c, 0.4)
    assert math.isclose(inv.d, -0.2)


def test_singular_inverse_degrades_to_inf_and_nan() -> None:
    inv = transformers([1, 1, 1, 1, 0, 0]).inverse().matrix
    assert inv.a == math.inf
    assert inv.b == -math.inf

    collapsed = transformers().scale(0).inverse().matrix
    assert all(math.isnan(v) for v in collapsed)


def test_singular_inverse_strict() -> None:
    mat = transformers().scale(0, 1)
    with pytest.raises(SingularMatrixError):
        mat.inverse(strict=True)
    assert mat.matrix == Matrix(0, 0, 0, 1, 0, 0)
