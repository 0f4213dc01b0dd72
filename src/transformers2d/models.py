from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING, TypeAlias, Union

if TYPE_CHECKING:
    from .matrix import Transformers


@dataclass(frozen=True, slots=True)
class Matrix:
    """Affine coefficients laid out as ``| a c e |`` over ``| b d f |``."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def to_list(self) -> list[float]:
        return list(astuple(self))


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


IDENTITY = Matrix()

MatrixLike: TypeAlias = Union[Matrix, Mapping[str, float], Sequence[float], "Transformers"]
