# matswap/materials/__init__.py
from matswap.materials.bank import BufferDeclaration, MaterialBank, MaterialDef

__all__ = [
    "BufferDeclaration",
    "MaterialBank",
    "MaterialDef",
]
