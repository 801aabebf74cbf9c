"""Base model for all Mapscope Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all Mapscope models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class MapscopeBaseModel(BaseModel):
    """Base model class for all Mapscope Pydantic models.

    This class enforces consistent serialization behavior:
    - by_alias=True: Use field aliases for serialization
    - mode="json": Use JSON-compatible serialization (e.g., Path -> str)
    """

    model_config = ConfigDict(
        # Strip whitespace from string fields
        str_strip_whitespace=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Accept both field names and aliases on input
        populate_by_name=True,
        # Validate assignment after model creation
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def to_dict_full(self) -> dict[str, Any]:
        """Convert model to dictionary including all fields (even unset ones)."""
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")
