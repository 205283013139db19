# matswap/mesh/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import List, Optional, Tuple

from matswap.layout.registry import LayoutTable
from matswap.types import Vector3, Vector4, VertexColor


@dataclass(slots=True)
class Vertex:
    """
    One vertex as loaded from the container.
    Tangents, UVs and colors are variable length; their counts follow the
    buffer layouts the owning mesh references.
    """

    position: Vector3 = field(default_factory=Vector3.zero)
    normal: Vector3 = field(default_factory=Vector3.zero)
    bone_indices: Tuple[int, int, int, int] = (0, 0, 0, 0)
    bone_weights: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    tangents: List[Vector4] = field(default_factory=list)
    uvs: List[Vector3] = field(default_factory=list)
    colors: List[VertexColor] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class VertexBuffer:
    layout_index: int


@dataclass(slots=True)
class Mesh:
    material_index: int
    vertices: List[Vertex] = field(default_factory=list)
    vertex_buffers: List[VertexBuffer] = field(default_factory=list)


class NodeFlags(IntFlag):
    NONE = 0
    DISABLED = 1
    DUMMY = 2
    MESH = 8


@dataclass(slots=True)
class Node:
    """Skeleton node. Disabled nodes never receive bone weights."""

    name: str
    flags: NodeFlags = NodeFlags.NONE


@dataclass(frozen=True, slots=True)
class Texture:
    param_name: str
    path: str = ""


@dataclass(frozen=True, slots=True)
class GXItem:
    id: str
    unk04: int
    data: bytes = b""


GXList = List[GXItem]


@dataclass(slots=True)
class Material:
    name: str
    mtd: str
    textures: List[Texture] = field(default_factory=list)
    gx_index: int = -1
    index: int = 0


@dataclass(slots=True)
class SkeletonSet:
    base_skeleton: List[int] = field(default_factory=list)
    all_skeletons: List[int] = field(default_factory=list)


@dataclass(slots=True)
class Header:
    version: int = 0x2001A
    unk68: int = 0


@dataclass(slots=True)
class MeshContainer:
    """In-memory mesh file: layouts, skeleton, meshes and materials."""

    header: Header = field(default_factory=Header)
    buffer_layouts: LayoutTable = field(default_factory=LayoutTable)
    nodes: List[Node] = field(default_factory=list)
    meshes: List[Mesh] = field(default_factory=list)
    materials: List[Material] = field(default_factory=list)
    gx_lists: List[GXList] = field(default_factory=list)
    skeletons: Optional[SkeletonSet] = None

    def meshes_using(self, material_index: int) -> List[Mesh]:
        return [m for m in self.meshes if m.material_index == material_index]
