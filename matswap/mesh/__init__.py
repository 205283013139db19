# matswap/mesh/__init__.py
from matswap.mesh.bones import highest_enabled_node_index, promote_bone_indices
from matswap.mesh.padding import pad_mesh, pad_vertex, required_attribute_counts
from matswap.mesh.types import (
    GXItem,
    GXList,
    Header,
    Material,
    Mesh,
    MeshContainer,
    Node,
    NodeFlags,
    SkeletonSet,
    Texture,
    Vertex,
    VertexBuffer,
)

__all__ = [
    "GXItem",
    "GXList",
    "Header",
    "Material",
    "Mesh",
    "MeshContainer",
    "Node",
    "NodeFlags",
    "SkeletonSet",
    "Texture",
    "Vertex",
    "VertexBuffer",
    "highest_enabled_node_index",
    "pad_mesh",
    "pad_vertex",
    "promote_bone_indices",
    "required_attribute_counts",
]
