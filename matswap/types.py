# matswap/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, TypeAlias

Scalar: TypeAlias = float

ColorBytes = Tuple[int, int, int, int]  # a, r, g, b


@dataclass(frozen=True, slots=True)
class Vector3:
    """UV coordinate; `z` is unused by two-component encodings."""

    x: Scalar
    y: Scalar
    z: Scalar

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3


@dataclass(frozen=True, slots=True)
class Vector4:
    """Tangent-space vector; `w` carries the bitangent sign."""

    x: Scalar
    y: Scalar
    z: Scalar
    w: Scalar

    @staticmethod
    def zero() -> Vector4:
        return Vector4(0.0, 0.0, 0.0, 0.0)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __len__(self) -> int:
        return 4


@dataclass(frozen=True, slots=True)
class VertexColor:
    """
    Per-vertex color in the container's ARGB channel order.
    Channels are stored as floats in [0, 1].
    """

    a: Scalar
    r: Scalar
    g: Scalar
    b: Scalar

    @staticmethod
    def from_bytes(a: int, r: int, g: int, b: int) -> VertexColor:
        for channel in (a, r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel}")
        return VertexColor(a / 255.0, r / 255.0, g / 255.0, b / 255.0)

    def to_bytes(self) -> ColorBytes:
        return (
            round(self.a * 255),
            round(self.r * 255),
            round(self.g * 255),
            round(self.b * 255),
        )

    def __iter__(self) -> Iterator[Scalar]:
        yield self.a
        yield self.r
        yield self.g
        yield self.b
