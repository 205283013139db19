# matswap/convert.py
"""
Material re-targeting workflow.

Per material: pick one of the definition's acceptable buffer declarations,
resolve its layouts against the container's layout table, point every mesh
of the material at the resolved indices, pad every vertex to the counts the
layouts require, then widen bone indices if the skeleton needs it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PureWindowsPath
from typing import List, Mapping, Sequence

from matswap.errors import (
    MissingMeshesError,
    NoLayoutCandidatesError,
    UnmappedMaterialError,
)
from matswap.layout.formats import FLVER2_FORMATS, LayoutFormatTable
from matswap.layout.registry import LayoutTable
from matswap.layout.types import BufferLayout, LayoutSemantic
from matswap.materials.bank import BufferDeclaration, MaterialBank, MaterialDef
from matswap.mesh.bones import promote_bone_indices
from matswap.mesh.padding import pad_mesh, required_attribute_counts
from matswap.mesh.types import (
    Mesh,
    MeshContainer,
    SkeletonSet,
    Texture,
    VertexBuffer,
)
from matswap.settings import ConversionSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RetargetResult:
    layout_set: List[BufferLayout]
    layout_indices: List[int]
    padded_vertices: int
    bones_promoted: bool


def material_key(mtd_path: str) -> str:
    """Lower-cased file stem of an MTD path."""
    return PureWindowsPath(mtd_path).stem.lower()


def meshes_for_material(
    container: MeshContainer, material_index: int
) -> List[Mesh]:
    meshes = container.meshes_using(material_index)
    if not meshes:
        raise MissingMeshesError(material_index)
    return meshes


def select_layout_set(
    declarations: Sequence[BufferDeclaration],
    tangent_count: int,
    formats: LayoutFormatTable = FLVER2_FORMATS,
    mtd: str = "",
) -> List[BufferLayout]:
    """
    Pick the buffer layouts to convert to.

    With several declarations on offer, the first one declaring at least
    `tangent_count` tangents wins; when none does, the first declaration
    is used.
    """
    if not declarations:
        raise NoLayoutCandidatesError(mtd)

    if len(declarations) > 1:
        for declaration in declarations:
            counts = required_attribute_counts(declaration.buffers, formats)
            if counts[LayoutSemantic.TANGENT] >= tangent_count:
                return declaration.buffers
        logger.debug(
            "No declaration for %s fits %d tangents, using the first",
            mtd or "material",
            tangent_count,
        )

    return declarations[0].buffers


def _select_for(
    meshes: Sequence[Mesh],
    material_def: MaterialDef,
    settings: ConversionSettings,
) -> List[BufferLayout]:
    # The first vertex of the first mesh stands in for the whole material.
    first_mesh = meshes[0]
    tangent_count = (
        len(first_mesh.vertices[0].tangents) if first_mesh.vertices else 0
    )
    return select_layout_set(
        material_def.acceptable_vertex_buffer_declarations,
        tangent_count,
        settings.formats,
        material_def.mtd,
    )


def retarget_material(
    container: MeshContainer,
    material_index: int,
    material_def: MaterialDef,
    settings: ConversionSettings = ConversionSettings(),
) -> RetargetResult:
    """Re-target the meshes of one material to `material_def`'s layouts."""
    meshes = meshes_for_material(container, material_index)
    layout_set = _select_for(meshes, material_def, settings)
    return _apply_layouts(container, meshes, layout_set, settings)


def _apply_layouts(
    container: MeshContainer,
    meshes: Sequence[Mesh],
    layout_set: List[BufferLayout],
    settings: ConversionSettings,
) -> RetargetResult:
    indices = container.buffer_layouts.resolve(layout_set)

    padded = 0
    for mesh in meshes:
        mesh.vertex_buffers = [VertexBuffer(i) for i in indices]
        padded += pad_mesh(
            mesh, layout_set, settings.formats, settings.padding
        )

    promoted = promote_bone_indices(
        container.nodes, layout_set, settings.formats
    )
    return RetargetResult(
        layout_set=layout_set,
        layout_indices=indices,
        padded_vertices=padded,
        bones_promoted=promoted,
    )


def swap_material(
    container: MeshContainer,
    material_index: int,
    material_def: MaterialDef,
    bank: MaterialBank,
    settings: ConversionSettings = ConversionSettings(),
) -> RetargetResult:
    """
    Replace a material's shader with `material_def` and re-target its meshes.

    The material gets a fresh GX list from the bank's defaults and one empty
    texture slot per texture channel. Meshes and layouts are checked before
    the material is touched, so a failure leaves the container unchanged.
    """
    material = container.materials[material_index]
    meshes = meshes_for_material(container, material_index)
    layout_set = _select_for(meshes, material_def, settings)

    container.gx_lists.append(bank.default_gx_items(material_def.mtd))
    material.mtd = material_def.mtd
    material.gx_index = len(container.gx_lists) - 1
    material.textures = [
        Texture(param_name=name)
        for name in material_def.texture_channels.values()
    ]

    result = _apply_layouts(container, meshes, layout_set, settings)
    logger.info(
        "Material #%d (%s) -> %s: layouts %s, %d vertices padded",
        material_index,
        material.name,
        material_def.mtd,
        result.layout_indices,
        result.padded_vertices,
    )
    return result


def prepare_container(
    container: MeshContainer,
    settings: ConversionSettings = ConversionSettings(),
) -> bool:
    """
    Bring a container from another game revision up to the target header.
    Returns True if the file predates the target version.
    """
    version = container.header.version
    is_older = version < settings.target_version
    is_late_revision = version == settings.late_revision_version

    container.header.version = settings.target_version
    if is_older:
        logger.info(
            "File version 0x%X predates target, adding a skeleton set", version
        )
        container.skeletons = SkeletonSet()
    if is_late_revision:
        logger.info("File version 0x%X, adjusting header values", version)
        container.header.unk68 = settings.late_revision_unk68

    container.buffer_layouts = LayoutTable()
    container.gx_lists = []
    return is_older


def convert_container(
    container: MeshContainer,
    mapping: Mapping[str, MaterialDef],
    bank: MaterialBank,
    settings: ConversionSettings = ConversionSettings(),
) -> List[RetargetResult]:
    """
    Convert every material of a container from another game.

    `mapping` is keyed by `material_key` of each material's current MTD.
    The layout table and GX lists are rebuilt from scratch, so every
    material is validated before anything is modified.
    """
    plan = []
    for material_index, material in enumerate(container.materials):
        key = material_key(material.mtd)
        if key not in mapping:
            raise UnmappedMaterialError(key)
        material_def = mapping[key]
        meshes = meshes_for_material(container, material_index)
        _select_for(meshes, material_def, settings)
        plan.append((material_index, material, material_def))

    is_older = prepare_container(container, settings)

    results = []
    for material_index, material, material_def in plan:
        if is_older:
            material.index = material_index
        results.append(
            swap_material(
                container, material_index, material_def, bank, settings
            )
        )

    logger.info(
        "Converted %d materials, %d buffer layouts",
        len(results),
        len(container.buffer_layouts),
    )
    return results
