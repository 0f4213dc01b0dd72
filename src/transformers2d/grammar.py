from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import TransformSyntaxError
from .geometry import NUMBER_RE, format_number
from .models import IDENTITY, Matrix

if TYPE_CHECKING:
    from .matrix import Transformers

logger = logging.getLogger(__name__)

_TRANSFORM_RE = re.compile(r"([a-zA-Z]+)\s*\(([^)]*)\)")

TRANSFORM_NAMES = ("translate", "rotate", "scale", "shear", "skew", "matrix")


@dataclass(frozen=True, slots=True)
class TransformCall:
    name: str
    args: tuple[float, ...]

    def __str__(self) -> str:
        return f"{self.name}({','.join(format_number(v) for v in self.args)})"


def parse_transform_calls(raw: str | None) -> list[TransformCall]:
    """Split a transform list such as ``"translate(10,15) rotate(30)"`` into calls.

    Names are kept as written; filtering unknown names is left to the caller.
    """
    if not raw:
        return []
    return [
        TransformCall(name, tuple(float(v) for v in NUMBER_RE.findall(args_raw)))
        for name, args_raw in _TRANSFORM_RE.findall(raw)
    ]


def _arg(args: tuple[float, ...], index: int, default: float) -> float:
    return args[index] if len(args) > index else default


def supported_calls(calls: list[TransformCall], *, strict: bool = False) -> list[TransformCall]:
    """Drop calls with unknown names; with ``strict`` the first one raises instead."""
    kept = []
    for call in calls:
        if call.name in TRANSFORM_NAMES:
            kept.append(call)
        elif strict:
            raise TransformSyntaxError(f"Unsupported transform: {call.name!r}")
        else:
            logger.debug("Skipping unsupported transform %r", call.name)
    return kept


def apply_call(target: Transformers, call: TransformCall) -> Transformers:
    args = call.args
    name = call.name

    if name == "translate":
        return target.translate(_arg(args, 0, 0.0), _arg(args, 1, 0.0))
    if name == "rotate":
        angle = _arg(args, 0, 0.0)
        if len(args) >= 3:
            return target.rotate(angle, args[1], args[2])
        return target.rotate(angle)
    if name == "scale":
        sx = _arg(args, 0, 1.0)
        return target.scale(sx, _arg(args, 1, sx))
    if name == "shear":
        return target.shear(_arg(args, 0, 0.0), _arg(args, 1, 0.0))
    if name == "skew":
        return target.skew(_arg(args, 0, 0.0), _arg(args, 1, 0.0))
    if name == "matrix":
        fallback = IDENTITY.to_list()
        return target.multiply(Matrix(*(_arg(args, i, fallback[i]) for i in range(6))))

    raise TransformSyntaxError(f"Unsupported transform: {name!r}")


def apply_transform_string(target: Transformers, raw: str | None, *, strict: bool = False) -> Transformers:
    # every name is checked before the first call is applied
    for call in supported_calls(parse_transform_calls(raw), strict=strict):
        apply_call(target, call)
    return target
