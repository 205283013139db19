# matswap/settings.py
from __future__ import annotations

from dataclasses import dataclass, field

from matswap.layout.formats import FLVER2_FORMATS, LayoutFormatTable
from matswap.types import Vector3, Vector4, VertexColor

# Opaque full red. Implausible on purpose so padded colors stand out in
# game as "needs real data" rather than passing for authored values.
MISSING_VERTEX_COLOR = VertexColor.from_bytes(255, 255, 0, 0)

# Used only when a vertex has no value of its own to repeat.
MISSING_TANGENT = Vector4.zero()
MISSING_UV = Vector3.zero()

TARGET_VERSION = 0x2001A
LATE_REVISION_VERSION = 0x20021


@dataclass(frozen=True, slots=True)
class PaddingPolicy:
    """Fill values for attribute slots a vertex does not carry."""

    missing_color: VertexColor = MISSING_VERTEX_COLOR
    missing_tangent: Vector4 = MISSING_TANGENT
    missing_uv: Vector3 = MISSING_UV


@dataclass(frozen=True, slots=True)
class ConversionSettings:
    """Configuration for one conversion session."""

    formats: LayoutFormatTable = FLVER2_FORMATS
    padding: PaddingPolicy = field(default_factory=PaddingPolicy)
    target_version: int = TARGET_VERSION
    late_revision_version: int = LATE_REVISION_VERSION
    late_revision_unk68: int = 4
