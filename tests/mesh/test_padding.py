import copy

from matswap.layout.types import BufferLayout, LayoutSemantic, LayoutType
from matswap.mesh.padding import pad_mesh, pad_vertex, required_attribute_counts
from matswap.mesh.types import Mesh, Vertex
from matswap.settings import MISSING_VERTEX_COLOR, PaddingPolicy
from matswap.types import Vector3, Vector4, VertexColor
from tests.conftest import make_vertex, member, position_layout, surface_layout


def colored_layout(colors: int) -> BufferLayout:
    return BufferLayout(
        [
            member(LayoutType.UBYTE4_NORM, LayoutSemantic.VERTEX_COLOR, index=i)
            for i in range(colors)
        ]
    )


def test_required_counts_sum_across_layouts():
    layout_set = [
        surface_layout(tangents=2, uv_type=LayoutType.FLOAT2),
        surface_layout(tangents=1, uv_type=LayoutType.FLOAT2),
        colored_layout(1),
    ]
    counts = required_attribute_counts(layout_set)

    assert counts[LayoutSemantic.TANGENT] == 3
    assert counts[LayoutSemantic.UV] == 2
    assert counts[LayoutSemantic.VERTEX_COLOR] == 1


def test_double_packed_uv_counts_twice():
    counts = required_attribute_counts(
        [
            surface_layout(tangents=0, uv_type=LayoutType.FLOAT4),
            surface_layout(tangents=0, uv_type=LayoutType.SHORT2),
        ]
    )
    assert counts[LayoutSemantic.UV] == 3


def test_other_semantics_are_ignored():
    counts = required_attribute_counts([position_layout()])
    assert sum(counts.values()) == 0
    assert LayoutSemantic.BONE_INDICES not in counts


def test_pad_duplicates_first_tangent_and_zero_fills_uvs():
    vertex = make_vertex(tangents=1, uvs=0)
    original_tangent = vertex.tangents[0]
    layout_set = [
        BufferLayout(
            [
                member(LayoutType.BYTE4_NORM, LayoutSemantic.TANGENT, index=0),
                member(LayoutType.BYTE4_NORM, LayoutSemantic.TANGENT, index=1),
                member(LayoutType.HALF2, LayoutSemantic.UV),
            ]
        )
    ]

    changed = pad_vertex(vertex, layout_set)

    assert changed
    assert vertex.tangents == [original_tangent, original_tangent]
    assert vertex.uvs == [Vector3.zero(), Vector3.zero()]
    assert vertex.colors == []


def test_pad_repeats_first_uv():
    vertex = make_vertex(tangents=0, uvs=2)
    first, second = vertex.uvs

    packed = surface_layout(tangents=0, uv_type=LayoutType.FLOAT4)
    pad_vertex(vertex, [packed, packed])

    assert vertex.uvs == [first, second, first, first]


def test_pad_without_tangents_uses_zero_vector():
    vertex = Vertex()
    pad_vertex(vertex, [surface_layout(tangents=2)])
    assert vertex.tangents == [Vector4.zero(), Vector4.zero()]


def test_missing_colors_get_marker_color():
    vertex = Vertex(colors=[VertexColor(1.0, 0.5, 0.5, 0.5)])

    pad_vertex(vertex, [colored_layout(3)])

    assert len(vertex.colors) == 3
    assert vertex.colors[0] == VertexColor(1.0, 0.5, 0.5, 0.5)
    assert vertex.colors[1] == MISSING_VERTEX_COLOR
    assert vertex.colors[2].to_bytes() == (255, 255, 0, 0)


def test_sufficient_vertex_is_left_unchanged():
    vertex = make_vertex(tangents=3, uvs=4)
    vertex.colors.append(VertexColor(1.0, 0.0, 1.0, 0.0))
    before = copy.deepcopy(vertex)

    changed = pad_vertex(
        vertex, [surface_layout(tangents=2), colored_layout(1)]
    )

    assert not changed
    assert vertex == before


def test_padding_never_alters_existing_values():
    vertex = make_vertex(tangents=2, uvs=1)
    before = copy.deepcopy(vertex)
    layout_set = [
        surface_layout(tangents=4, uv_type=LayoutType.UBYTE4_NORM),
        colored_layout(2),
    ]

    pad_vertex(vertex, layout_set)

    counts = required_attribute_counts(layout_set)
    assert len(vertex.tangents) >= counts[LayoutSemantic.TANGENT]
    assert len(vertex.uvs) >= counts[LayoutSemantic.UV]
    assert len(vertex.colors) >= counts[LayoutSemantic.VERTEX_COLOR]
    assert vertex.tangents[:2] == before.tangents
    assert vertex.uvs[:1] == before.uvs


def test_custom_policy():
    policy = PaddingPolicy(missing_color=VertexColor(1.0, 1.0, 1.0, 1.0))
    vertex = Vertex()

    pad_vertex(vertex, [colored_layout(1)], policy=policy)

    assert vertex.colors == [VertexColor(1.0, 1.0, 1.0, 1.0)]


def test_pad_mesh_counts_changed_vertices():
    mesh = Mesh(
        material_index=0,
        vertices=[make_vertex(2, 1), make_vertex(1, 1), make_vertex(0, 1)],
    )

    changed = pad_mesh(mesh, [surface_layout(tangents=2)])

    assert changed == 2
    assert all(len(v.tangents) == 2 for v in mesh.vertices)
