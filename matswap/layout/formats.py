# matswap/layout/formats.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Mapping, Tuple

import numpy as np

from matswap.layout.types import LayoutType

# base numpy type, element count
Encoding = Tuple[str, int]


@dataclass(frozen=True, slots=True)
class LayoutFormatTable:
    """
    Versioned encoding table for one revision of the container format.

    Everything format-specific the engine needs lives here: byte sizes,
    numpy dtypes for each packed encoding, which UV encodings pack two
    logical UV sets into one member, and the bone-index width rules.
    """

    version: str
    encodings: Mapping[LayoutType, Encoding]
    double_packed_uv_types: FrozenSet[LayoutType]
    bone_index_limit: int
    wide_bone_index_type: LayoutType

    def dtype_of(self, layout_type: LayoutType) -> np.dtype:
        try:
            base, count = self.encodings[layout_type]
        except KeyError:
            raise KeyError(
                f"{self.version}: no encoding for layout type {layout_type!r}"
            ) from None
        if count == 1:
            return np.dtype(base)
        return np.dtype((base, (count,)))

    def size_of(self, layout_type: LayoutType) -> int:
        return self.dtype_of(layout_type).itemsize

    def uv_slots(self, layout_type: LayoutType) -> int:
        """Logical UV sets stored by one UV member of this encoding."""
        return 2 if layout_type in self.double_packed_uv_types else 1


_FLVER2_ENCODINGS: Dict[LayoutType, Encoding] = {
    LayoutType.FLOAT2: ("<f4", 2),
    LayoutType.FLOAT3: ("<f4", 3),
    LayoutType.FLOAT4: ("<f4", 4),
    LayoutType.BYTE4: ("u1", 4),
    LayoutType.UBYTE4: ("u1", 4),
    LayoutType.SHORT2_TO_FLOAT2: ("u1", 4),
    LayoutType.UBYTE4_NORM: ("u1", 4),
    LayoutType.SHORT2: ("<i2", 2),
    LayoutType.SHORT4: ("<i2", 4),
    LayoutType.USHORT4: ("<u2", 4),
    LayoutType.SHORT4_TO_FLOAT4A: ("<i2", 4),
    LayoutType.HALF2: ("<f2", 2),
    LayoutType.SHORT4_TO_FLOAT4B: ("<i2", 4),
    LayoutType.BYTE4_NORM: ("i1", 4),
    LayoutType.HALF4: ("<f2", 4),
    LayoutType.EDGE_COMPRESSED: ("u1", 1),
}

FLVER2_FORMATS = LayoutFormatTable(
    version="flver2",
    encodings=_FLVER2_ENCODINGS,
    double_packed_uv_types=frozenset(
        {
            LayoutType.FLOAT4,
            LayoutType.SHORT4,
            LayoutType.HALF2,
            LayoutType.UBYTE4_NORM,
        }
    ),
    bone_index_limit=255,
    wide_bone_index_type=LayoutType.USHORT4,
)
