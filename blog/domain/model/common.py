"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; changes produce a new instance via
    ``model_copy(update=...)`` which the owning repository then saves.
    """

    model_config = ConfigDict(frozen=True)
