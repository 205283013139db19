import pytest

from matswap.layout.types import (
    BufferLayout,
    LayoutMember,
    LayoutSemantic,
    LayoutType,
)
from matswap.materials.bank import BufferDeclaration, MaterialDef
from matswap.mesh.types import (
    Material,
    Mesh,
    MeshContainer,
    Node,
    NodeFlags,
    Vertex,
)
from matswap.types import Vector3, Vector4


def member(
    type: LayoutType, semantic: LayoutSemantic, index: int = 0, stream: int = 0
) -> LayoutMember:
    return LayoutMember.of(type, semantic, index=index, stream=stream)


def position_layout() -> BufferLayout:
    return BufferLayout(
        [
            member(LayoutType.FLOAT3, LayoutSemantic.POSITION),
            member(LayoutType.BYTE4, LayoutSemantic.BONE_INDICES),
            member(LayoutType.UBYTE4_NORM, LayoutSemantic.BONE_WEIGHTS),
        ]
    )


def surface_layout(
    tangents: int = 1, uv_type: LayoutType = LayoutType.FLOAT2
) -> BufferLayout:
    members = [member(LayoutType.BYTE4_NORM, LayoutSemantic.NORMAL)]
    members += [
        member(LayoutType.BYTE4_NORM, LayoutSemantic.TANGENT, index=i)
        for i in range(tangents)
    ]
    members.append(member(uv_type, LayoutSemantic.UV))
    return BufferLayout(members)


def make_vertex(tangents: int = 1, uvs: int = 1) -> Vertex:
    return Vertex(
        tangents=[
            Vector4(1.0, 0.0, 0.0, float(i + 1)) for i in range(tangents)
        ],
        uvs=[Vector3(0.25, 0.5 + i, 0.0) for i in range(uvs)],
    )


def make_nodes(enabled: int, disabled_tail: int = 0) -> list[Node]:
    nodes = [Node(name=f"bone_{i:03d}") for i in range(enabled)]
    nodes += [
        Node(name=f"unused_{i:03d}", flags=NodeFlags.DISABLED)
        for i in range(disabled_tail)
    ]
    return nodes


@pytest.fixture
def container():
    """Container with two materials, each owning one small mesh."""
    return MeshContainer(
        nodes=make_nodes(4),
        materials=[
            Material(name="body", mtd="N:\\Shaders\\C[AMSN].mtd"),
            Material(name="cloth", mtd="N:\\Shaders\\c[amsn]_e.mtd"),
        ],
        meshes=[
            Mesh(0, vertices=[make_vertex(1, 1) for _ in range(3)]),
            Mesh(1, vertices=[make_vertex(2, 1) for _ in range(2)]),
        ],
    )


@pytest.fixture
def material_def():
    """Definition offering a one-tangent and a two-tangent declaration."""
    return MaterialDef(
        mtd="c[amsn]_er.matxml",
        shader="C[AMSN]",
        texture_channels={
            "albedo": "C_AMSN__snp_Texture2D_2_AlbedoMap_0",
            "normal": "C_AMSN__snp_Texture2D_7_NormalMap_4",
        },
        acceptable_vertex_buffer_declarations=[
            BufferDeclaration([position_layout(), surface_layout(tangents=1)]),
            BufferDeclaration([position_layout(), surface_layout(tangents=2)]),
        ],
    )
