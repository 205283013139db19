# matswap/layout/__init__.py
from matswap.layout.formats import FLVER2_FORMATS, LayoutFormatTable
from matswap.layout.registry import LayoutTable, resolve_layout_indices
from matswap.layout.types import (
    BufferLayout,
    LayoutMember,
    LayoutSemantic,
    LayoutSet,
    LayoutType,
)

__all__ = [
    "BufferLayout",
    "FLVER2_FORMATS",
    "LayoutFormatTable",
    "LayoutMember",
    "LayoutSemantic",
    "LayoutSet",
    "LayoutTable",
    "LayoutType",
    "resolve_layout_indices",
]
