"""Base model configuration for all Pydantic models."""

from pydantic import BaseModel, ConfigDict


class StevedoreBaseModel(BaseModel):
    """Base model with common configuration.

    Conventions:
    - Field names are lowercase snake_case
    - Enum fields store their values
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )


class FrozenModel(StevedoreBaseModel):
    """Immutable value object."""

    model_config = ConfigDict(frozen=True)
