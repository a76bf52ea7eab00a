"""In-memory base repository for testing and local runs."""

from collections import defaultdict
from copy import deepcopy
from typing import ClassVar

from propmgmt.domain.error import AgreementReferenceError
from propmgmt.domain.model.common import Entity
from propmgmt.domain.repository.base import ID, E, EntityRepository


class InMemoryStore:
    """Tables shared by the in-memory repositories of one container.

    Mirrors the database constraints the repositories rely on: identity
    counters per table, and the unique ``agreement_id`` references that are
    cleared when their agreement is deleted.
    """

    # Tables whose rows reference agreements (unique, ON DELETE SET NULL)
    AGREEMENT_REFERRERS = ("apartments", "deposits")

    def __init__(self) -> None:
        self.tables: dict[str, dict[int, Entity]] = defaultdict(dict)
        self.next_ids: dict[str, int] = defaultdict(lambda: 1)


class InMemoryEntityRepository(EntityRepository[E, ID]):
    """In-memory implementation of EntityRepository.

    IDs are assigned from a counter starting at 1, like an identity column.
    Repositories built on the same store see each other's rows.
    """

    table_name: ClassVar[str]

    def __init__(self, store: InMemoryStore | None = None) -> None:
        """Initialize repository.

        Args:
            store: Shared tables; a private store is created when omitted
        """
        self.store = store or InMemoryStore()

    @property
    def _entities(self) -> dict[int, E]:
        return self.store.tables[self.table_name]

    async def save(self, entity: E) -> E:
        """Save an entity (insert or whole-record replace)."""
        self._check_references(entity)

        next_id = self.store.next_ids[self.table_name]
        if entity.id is None:
            entity = entity.model_copy(update={"id": next_id})
            self.store.next_ids[self.table_name] = next_id + 1
        else:
            # Keep the counter ahead of IDs chosen by the caller
            self.store.next_ids[self.table_name] = max(next_id, entity.id + 1)

        self._entities[entity.id] = deepcopy(entity)
        return deepcopy(entity)

    async def find_by_id(self, entity_id: ID) -> E | None:
        """Find entity by ID."""
        entity = self._entities.get(entity_id)
        return deepcopy(entity) if entity else None

    async def find_all(self) -> list[E]:
        """Find all entities, ordered by ID."""
        return [deepcopy(self._entities[key]) for key in sorted(self._entities)]

    async def delete_by_id(self, entity_id: ID) -> None:
        """Delete entity by ID (no-op when missing)."""
        self._entities.pop(entity_id, None)

    def _check_references(self, entity: E) -> None:
        pass


class InMemoryAgreementReferrer(InMemoryEntityRepository[E, ID]):
    """Repository whose entities carry a unique, nullable ``agreement_id``."""

    def _check_references(self, entity: E) -> None:
        agreement_id = entity.agreement_id
        if agreement_id is None:
            return

        if agreement_id not in self.store.tables["agreements"]:
            raise AgreementReferenceError.not_found(entity.entity_name, agreement_id)

        for other in self._entities.values():
            if other.agreement_id == agreement_id and other.id != entity.id:
                raise AgreementReferenceError.in_use(entity.entity_name, agreement_id)
