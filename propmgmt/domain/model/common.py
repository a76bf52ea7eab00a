"""Base models for all domain entities."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
    )


class Entity(DomainModel):
    """Domain record with a store-assigned identifier.

    ``id`` is None until the record is first persisted. Subclasses narrow it
    to their own identifier type.
    """

    entity_name: ClassVar[str]

    id: int | None = None

    @property
    def is_new(self) -> bool:
        """Whether the entity has not been persisted yet."""
        return self.id is None
