# matswap/mesh/bones.py
import logging
from typing import Iterable, Sequence

import numpy as np

from matswap.layout.formats import FLVER2_FORMATS, LayoutFormatTable
from matswap.layout.types import BufferLayout, LayoutSemantic
from matswap.mesh.types import Node, NodeFlags

logger = logging.getLogger(__name__)


def highest_enabled_node_index(nodes: Sequence[Node]) -> int:
    """Index of the last node not flagged as disabled, or -1 if none."""
    if not nodes:
        return -1
    flags = np.fromiter(
        (int(n.flags) for n in nodes), dtype=np.int64, count=len(nodes)
    )
    enabled = np.flatnonzero((flags & int(NodeFlags.DISABLED)) == 0)
    if enabled.size == 0:
        return -1
    return int(enabled[-1])


def promote_bone_indices(
    nodes: Sequence[Node],
    layout_set: Iterable[BufferLayout],
    formats: LayoutFormatTable = FLVER2_FORMATS,
) -> bool:
    """
    Widen every BoneIndices member of `layout_set` when enabled nodes can
    be referenced past the byte range.

    Members are replaced in place within the given layout objects. A table
    entry sees the change only if it is one of those objects, i.e. it was
    appended by `resolve`. An entry that merely compared equal to a target
    is a different object and keeps its narrow encoding. Returns True if
    the skeleton needed the wider encoding.
    """
    highest = highest_enabled_node_index(nodes)
    if highest <= formats.bone_index_limit:
        return False

    wide = formats.wide_bone_index_type
    widened = 0
    for layout in layout_set:
        for i, member in enumerate(layout):
            if member.semantic != LayoutSemantic.BONE_INDICES:
                continue
            if member.type != wide:
                layout[i] = member.retyped(wide, formats)
                widened += 1

    if widened:
        logger.info(
            "Highest enabled node is #%d, widened %d bone index member(s) "
            "to %s",
            highest,
            widened,
            wide.name,
        )
    return True
