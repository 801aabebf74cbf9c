"""Models describing located build artifacts."""

from pathlib import Path

from pydantic import ConfigDict, Field

from mapscope.models.base import MapscopeBaseModel


class Candidate(MapscopeBaseModel):
    """One binary/map pairing found in a build folder."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, str_strip_whitespace=False
    )

    display_label: str = Field(
        alias="displayLabel", description="Binary file name without its extension"
    )
    relative_folder: str = Field(
        alias="relativeFolder",
        description="Folder holding the pair, relative to the workspace root",
    )
    binary_path: Path = Field(alias="binaryPath")
    map_path: Path = Field(alias="mapPath")

    def __str__(self) -> str:
        return f"{self.display_label} ({self.relative_folder})"


class ResolvedPaths(MapscopeBaseModel):
    """Result of a resolution: the selected binary, its map and a toolchain."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, str_strip_whitespace=False
    )

    map_path: Path = Field(alias="mapPath")
    binary_path: Path = Field(alias="binaryPath")
    toolchain_path: Path | None = Field(default=None, alias="toolchainPath")


class CollectionResult(MapscopeBaseModel):
    """Folders and candidates gathered by one collection pass."""

    model_config = ConfigDict(frozen=True)

    folders: list[Path] = Field(default_factory=list)
    candidates: list[Candidate] = Field(default_factory=list)
