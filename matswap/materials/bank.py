# matswap/materials/bank.py
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from matswap.layout.types import BufferLayout
from matswap.mesh.types import GXItem


@dataclass(slots=True)
class BufferDeclaration:
    """One acceptable split of a vertex declaration into buffers."""

    buffers: List[BufferLayout] = field(default_factory=list)


@dataclass(slots=True)
class MaterialDef:
    """Shader contract a material can be re-targeted to."""

    mtd: str
    shader: str = ""
    # texture slot key -> shader parameter name
    texture_channels: Dict[str, str] = field(default_factory=dict)
    acceptable_vertex_buffer_declarations: List[BufferDeclaration] = field(
        default_factory=list
    )

    def __str__(self) -> str:
        return f"{self.mtd} ({self.shader})" if self.shader else self.mtd


class MaterialBank:
    """
    In-memory material definition bank, keyed by MTD name.
    Loading a bank from disk happens outside this package.
    """

    def __init__(
        self,
        material_defs: Iterable[MaterialDef] = (),
        gx_items: Optional[Mapping[str, List[GXItem]]] = None,
    ) -> None:
        self.material_defs: Dict[str, MaterialDef] = {}
        self._gx_items: Dict[str, List[GXItem]] = dict(gx_items or {})
        for material_def in material_defs:
            self.add(material_def)

    def add(
        self, material_def: MaterialDef, gx_items: Iterable[GXItem] = ()
    ) -> None:
        self.material_defs[material_def.mtd] = material_def
        gx_items = list(gx_items)
        if gx_items:
            self._gx_items[material_def.mtd] = gx_items

    def get(self, mtd: str) -> MaterialDef:
        return self.material_defs[mtd]

    def __contains__(self, mtd: str) -> bool:
        return mtd in self.material_defs

    def __len__(self) -> int:
        return len(self.material_defs)

    def default_gx_items(self, mtd: str) -> List[GXItem]:
        """GX items a new material with this MTD starts with (a copy)."""
        return list(self._gx_items.get(mtd, ()))
