"""
Base models and utilities for Pydantic v2.
"""
from typing import Any, TypeVar

from pydantic import BaseModel as PydanticBaseModel, ConfigDict

# Type variable for generic model type
ModelType = TypeVar("ModelType", bound="BaseModel")


class BaseModel(PydanticBaseModel):
    """Base model with common configuration and methods."""

    # Pydantic v2 config
    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        extra="ignore"
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump the model to JSON-compatible primitives."""
        return self.model_dump(mode="json")
