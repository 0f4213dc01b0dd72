from __future__ import annotations

import logging
from pathlib import Path

import ezdxf
from ezdxf.math import Matrix44
from ezdxf.math.transformtools import NonUniformScalingError

from .matrix import Transformers, to_matrix
from .models import Matrix, MatrixLike

logger = logging.getLogger(__name__)


def to_matrix44(matrix: MatrixLike) -> Matrix44:
    """Embed a 2D affine transform in the XY plane of an ezdxf ``Matrix44``.

    ezdxf multiplies row vectors from the left, so the translation goes to the
    last row.
    """
    a, b, c, d, e, f = to_matrix(matrix)
    return Matrix44([
        a, b, 0.0, 0.0,
        c, d, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        e, f, 0.0, 1.0,
    ])


def from_matrix44(m44: Matrix44) -> Matrix:
    """Take the XY part of a ``Matrix44``; Z components are dropped."""
    return Matrix(m44[0, 0], m44[0, 1], m44[1, 0], m44[1, 1], m44[3, 0], m44[3, 1])


def transform_dxf(
    input_dxf: str | Path,
    output_dxf: str | Path,
    transform: MatrixLike | str,
) -> int:
    if isinstance(transform, str):
        transform = Transformers(transform)
    m44 = to_matrix44(transform)

    doc = ezdxf.readfile(str(input_dxf))
    msp = doc.modelspace()

    count = 0
    for entity in msp:
        try:
            entity.transform(m44)
        except (NotImplementedError, NonUniformScalingError) as exc:
            logger.warning("Cannot transform %s entity %s: %s", entity.dxftype(), entity.dxf.handle, exc)
            continue
        count += 1

    doc.saveas(str(output_dxf))
    logger.info("Transformed %d entities from %s into %s", count, input_dxf, output_dxf)
    return count
