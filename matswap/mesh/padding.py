# matswap/mesh/padding.py
import logging
from collections import Counter
from typing import Iterable, List, TypeVar

from matswap.layout.formats import FLVER2_FORMATS, LayoutFormatTable
from matswap.layout.types import BufferLayout, LayoutSemantic
from matswap.mesh.types import Mesh, Vertex
from matswap.settings import PaddingPolicy

logger = logging.getLogger(__name__)

PADDED_SEMANTICS = (
    LayoutSemantic.TANGENT,
    LayoutSemantic.UV,
    LayoutSemantic.VERTEX_COLOR,
)

T = TypeVar("T")


def required_attribute_counts(
    layout_set: Iterable[BufferLayout],
    formats: LayoutFormatTable = FLVER2_FORMATS,
) -> Counter:
    """
    Count the tangent, UV and color values a vertex needs to fill every
    member of `layout_set`. Double-packed UV members count twice.
    """
    counts: Counter = Counter()
    for layout in layout_set:
        for member in layout:
            if member.semantic not in PADDED_SEMANTICS:
                continue
            if member.semantic == LayoutSemantic.UV:
                counts[member.semantic] += formats.uv_slots(member.type)
            else:
                counts[member.semantic] += 1
    return counts


def _pad(values: List[T], required: int, fill: T) -> int:
    missing = required - len(values)
    if missing <= 0:
        return 0
    values.extend([fill] * missing)
    return missing


def pad_vertex(
    vertex: Vertex,
    layout_set: Iterable[BufferLayout],
    formats: LayoutFormatTable = FLVER2_FORMATS,
    policy: PaddingPolicy = PaddingPolicy(),
) -> bool:
    """
    Grow the vertex's tangent, UV and color lists to what `layout_set`
    requires. Existing values are never touched.

    Missing tangents and UVs repeat the vertex's first value (or fall back
    to the policy's zero vector); missing colors get the policy's marker
    color. Returns True if anything was appended.
    """
    counts = required_attribute_counts(layout_set, formats)

    tangent_fill = (
        vertex.tangents[0] if vertex.tangents else policy.missing_tangent
    )
    uv_fill = vertex.uvs[0] if vertex.uvs else policy.missing_uv

    added = _pad(vertex.tangents, counts[LayoutSemantic.TANGENT], tangent_fill)
    added += _pad(vertex.uvs, counts[LayoutSemantic.UV], uv_fill)
    added += _pad(
        vertex.colors, counts[LayoutSemantic.VERTEX_COLOR], policy.missing_color
    )
    return added > 0


def pad_mesh(
    mesh: Mesh,
    layout_set: Iterable[BufferLayout],
    formats: LayoutFormatTable = FLVER2_FORMATS,
    policy: PaddingPolicy = PaddingPolicy(),
) -> int:
    """Pad every vertex of `mesh`. Returns the number of vertices changed."""
    layout_set = list(layout_set)
    changed = sum(
        pad_vertex(v, layout_set, formats, policy) for v in mesh.vertices
    )
    if changed:
        logger.debug(
            "Padded %d/%d vertices of mesh (material #%d)",
            changed,
            len(mesh.vertices),
            mesh.material_index,
        )
    return changed
