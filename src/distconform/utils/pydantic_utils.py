"""
Shared pydantic model configuration for reports and check results.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["StandardBaseModel"]


class StandardBaseModel(BaseModel):
    """
    Base for distconform's result models: unknown fields are ignored on
    validation and models can be built from attribute-bearing objects.
    """

    model_config = ConfigDict(
        extra="ignore",
        use_enum_values=True,
        from_attributes=True,
    )
