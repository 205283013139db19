# matswap/layout/types.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import TYPE_CHECKING, Iterable, Iterator, List, overload

import numpy as np

if TYPE_CHECKING:
    from matswap.layout.formats import LayoutFormatTable


class LayoutType(IntEnum):
    """Packed numeric encodings a layout member can use."""

    FLOAT2 = 0x01
    FLOAT3 = 0x02
    FLOAT4 = 0x03
    BYTE4 = 0x10
    UBYTE4 = 0x11
    SHORT2_TO_FLOAT2 = 0x12
    UBYTE4_NORM = 0x13
    SHORT2 = 0x15
    SHORT4 = 0x16
    USHORT4 = 0x18
    SHORT4_TO_FLOAT4A = 0x1A
    HALF2 = 0x2D
    SHORT4_TO_FLOAT4B = 0x2E
    BYTE4_NORM = 0x2F
    HALF4 = 0x31
    EDGE_COMPRESSED = 0xF0


class LayoutSemantic(IntEnum):
    POSITION = 0
    BONE_WEIGHTS = 1
    BONE_INDICES = 2
    NORMAL = 3
    UV = 5
    TANGENT = 6
    BITANGENT = 7
    VERTEX_COLOR = 10


@dataclass(frozen=True, slots=True)
class LayoutMember:
    """One typed, semantically-tagged field of a buffer layout."""

    stream: int
    type: LayoutType
    semantic: LayoutSemantic
    index: int
    size: int

    @staticmethod
    def of(
        type: LayoutType,
        semantic: LayoutSemantic,
        index: int = 0,
        stream: int = 0,
        formats: LayoutFormatTable | None = None,
    ) -> LayoutMember:
        """Build a member whose size comes from the format table."""
        if formats is None:
            from matswap.layout.formats import FLVER2_FORMATS

            formats = FLVER2_FORMATS
        return LayoutMember(
            stream=stream,
            type=type,
            semantic=semantic,
            index=index,
            size=formats.size_of(type),
        )

    def retyped(
        self, type: LayoutType, formats: LayoutFormatTable
    ) -> LayoutMember:
        return replace(self, type=type, size=formats.size_of(type))


class BufferLayout:
    """
    Ordered member list describing one vertex buffer.

    Equality is structural over the whole ordered member sequence.
    Layouts are mutable (members may be swapped for re-typed copies),
    so they are deliberately unhashable.
    """

    __slots__ = ("_members",)

    def __init__(self, members: Iterable[LayoutMember] = ()) -> None:
        self._members: List[LayoutMember] = list(members)

    def __iter__(self) -> Iterator[LayoutMember]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    @overload
    def __getitem__(self, index: int) -> LayoutMember: ...
    @overload
    def __getitem__(self, index: slice) -> List[LayoutMember]: ...

    def __getitem__(self, index):
        return self._members[index]

    def __setitem__(self, index: int, member: LayoutMember) -> None:
        self._members[index] = member

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BufferLayout):
            return NotImplemented
        return self._members == other._members

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BufferLayout({self._members!r})"

    def append(self, member: LayoutMember) -> None:
        self._members.append(member)

    @property
    def size(self) -> int:
        """Vertex stride in bytes."""
        return sum(member.size for member in self._members)

    def to_dtype(self, formats: LayoutFormatTable) -> np.dtype:
        """
        Structured numpy dtype mirroring the on-disk field order.
        Field names are `<semantic>_<index>`, suffixed with the member
        position when a name repeats.
        """
        fields = []
        seen = set()
        for position, m in enumerate(self._members):
            name = f"{m.semantic.name.lower()}_{m.index}"
            if name in seen:
                name = f"{name}_{position}"
            seen.add(name)
            fields.append((name, formats.dtype_of(m.type)))
        return np.dtype(fields)


# All buffers one vertex declaration is split across, in stream order.
LayoutSet = List[BufferLayout]
