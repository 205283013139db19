# matswap/__init__.py
from matswap.convert import (
    RetargetResult,
    convert_container,
    material_key,
    retarget_material,
    select_layout_set,
    swap_material,
)
from matswap.errors import (
    ConversionError,
    MissingMeshesError,
    NoLayoutCandidatesError,
    UnmappedMaterialError,
)
from matswap.settings import ConversionSettings, PaddingPolicy

__all__ = [
    "ConversionError",
    "ConversionSettings",
    "MissingMeshesError",
    "NoLayoutCandidatesError",
    "PaddingPolicy",
    "RetargetResult",
    "UnmappedMaterialError",
    "convert_container",
    "material_key",
    "retarget_material",
    "select_layout_set",
    "swap_material",
]
