"""Build artifact resolver configuration models."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from mapscope.models.base import MapscopeBaseModel


DEFAULT_SEARCH_FOLDERS = ["build", "Build", "Release", "Debug", "out", "output"]


class CaseSensitivity(str, Enum):
    """How directory identities are compared while walking."""

    AUTO = "auto"
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"


class ResolverConfig(MapscopeBaseModel):
    """Settings consumed by the build artifact resolver.

    The explicit override paths are kept as given (only ``~`` is expanded) so
    that a valid override pair is returned verbatim.
    """

    map_file_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("map_file_path", "mapFilePath"),
        description="Explicit map file override",
    )
    binary_file_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "binary_file_path", "binaryFilePath", "elfFilePath"
        ),
        description="Explicit binary file override",
    )
    toolchain_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("toolchain_path", "toolchainPath"),
        description="Toolchain installation directory, validated independently",
    )
    debug: bool = Field(
        default=False, description="Verbose diagnostic logging for the resolver"
    )
    binary_extension: str = Field(
        default=".elf",
        validation_alias=AliasChoices("binary_extension", "binaryExtension"),
        description="Extension of the binary artifact",
    )
    map_extension: str = Field(
        default=".map",
        validation_alias=AliasChoices("map_extension", "mapExtension"),
        description="Extension of the linker map artifact",
    )
    search_folders: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SEARCH_FOLDERS),
        validation_alias=AliasChoices("search_folders", "searchFolders"),
        description="Workspace sub folders searched first, in priority order",
    )
    case_sensitivity: CaseSensitivity = Field(
        default=CaseSensitivity.AUTO,
        validation_alias=AliasChoices("case_sensitivity", "caseSensitivity"),
        description="Directory identity comparison: auto, sensitive or insensitive",
    )

    @field_validator("map_file_path", "binary_file_path", "toolchain_path", mode="before")
    @classmethod
    def expand_user_path(cls, v: Any) -> Any:
        """Expand ``~`` and treat empty strings as unset."""
        if v is None:
            return None
        if isinstance(v, str):
            if not v.strip():
                return None
            return Path(v.strip()).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v

    @field_validator("binary_extension", "map_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Extensions must look like ``.ext``."""
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Extension must start with '.', got '{v}'")
        return v

    @field_validator("search_folders", mode="before")
    @classmethod
    def decode_search_folders(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [folder.strip() for folder in v.split(",") if folder.strip()]
        return v

    @model_validator(mode="after")
    def validate_distinct_extensions(self) -> "ResolverConfig":
        binary, map_ext = self.binary_extension, self.map_extension
        if binary.endswith(map_ext) or map_ext.endswith(binary):
            raise ValueError(
                "binary_extension and map_extension must differ "
                "and neither may end with the other"
            )
        return self

    def with_overrides(self, **overrides: Any) -> "ResolverConfig":
        """Return a validated copy with the non-None ``overrides`` applied."""
        data = self.model_dump()
        data.update(
            {key: value for key, value in overrides.items() if value is not None}
        )
        return ResolverConfig.model_validate(data)
