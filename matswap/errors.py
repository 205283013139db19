# matswap/errors.py
class ConversionError(Exception):
    """Base class for failures while re-targeting a material."""

    pass


class MissingMeshesError(ConversionError):
    def __init__(self, material_index: int) -> None:
        super().__init__(f"Material #{material_index} has no meshes")
        self.material_index = material_index


class NoLayoutCandidatesError(ConversionError):
    def __init__(self, mtd: str) -> None:
        super().__init__(f"No buffer declarations offered for {mtd}")
        self.mtd = mtd


class UnmappedMaterialError(ConversionError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(f"No material mapping for {key!r}")
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])
