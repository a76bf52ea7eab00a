"""Generic repository interface shared by all entity repositories."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from propmgmt.domain.model.common import Entity

E = TypeVar("E", bound=Entity)
ID = TypeVar("ID", bound=int)


class EntityRepository(ABC, Generic[E, ID]):
    """Repository contract for a single entity type.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def save(self, entity: E) -> E:
        """Save an entity (create or replace).

        An entity without an ID is inserted and gets a store-assigned ID.
        An entity with an ID replaces the stored record with that ID as a
        whole, or is inserted under that ID if no record exists.

        Args:
            entity: Entity to save

        Returns:
            The saved entity, carrying its ID

        Raises:
            AgreementReferenceError: If the entity names an agreement that
                doesn't exist or is already linked to another entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: ID) -> E | None:
        """Find an entity by ID.

        Args:
            entity_id: Entity identifier

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[E]:
        """Find all entities.

        Returns:
            Every stored entity, in the store's default order
        """
        pass

    @abstractmethod
    async def delete_by_id(self, entity_id: ID) -> None:
        """Delete an entity by ID.

        Deleting a missing ID is a no-op.

        Args:
            entity_id: Entity identifier
        """
        pass
