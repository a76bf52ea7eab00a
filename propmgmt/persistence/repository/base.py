"""PostgreSQL base repository shared by the entity repositories."""

from abc import abstractmethod
from typing import Any, ClassVar, Dict

from sqlalchemy import Table, delete, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from propmgmt.domain.error import AgreementReferenceError
from propmgmt.domain.repository.base import ID, E, EntityRepository
from propmgmt.persistence.tables import agreements_table


class PostgresEntityRepository(EntityRepository[E, ID]):
    """PostgreSQL implementation of EntityRepository.

    Subclasses set ``table`` and provide the row/model mappers.
    """

    table: ClassVar[Table]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    @abstractmethod
    def _to_entity(self, row: Dict[str, Any]) -> E:
        """Map a database row to the domain model."""

    @abstractmethod
    def _to_dict(self, entity: E) -> Dict[str, Any]:
        """Map the domain model to column values, without the ID."""

    async def save(self, entity: E) -> E:
        """Save an entity (insert or whole-record replace)."""
        await self._check_references(entity)
        values = self._to_dict(entity)

        if entity.id is None:
            # Store assigns the ID
            stmt = insert(self.table).values(**values).returning(self.table.c.id)
            result = await self.session.execute(stmt)
            new_id = result.scalar_one()
            await self.session.flush()
            return entity.model_copy(update={"id": new_id})

        existing = await self.find_by_id(entity.id)

        if existing:
            stmt = (
                update(self.table)
                .where(self.table.c.id == entity.id)
                .values(**values)
            )
            await self.session.execute(stmt)
        else:
            # Insert under the caller's ID, then move the identity past it
            stmt = insert(self.table).values(id=entity.id, **values)
            await self.session.execute(stmt)
            await self._sync_identity()

        await self.session.flush()
        return entity

    async def find_by_id(self, entity_id: ID) -> E | None:
        """Find entity by ID."""
        stmt = select(self.table).where(self.table.c.id == entity_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return self._to_entity(row._asdict()) if row else None

    async def find_all(self) -> list[E]:
        """Find all entities."""
        stmt = select(self.table).order_by(self.table.c.id)
        result = await self.session.execute(stmt)
        return [self._to_entity(row._asdict()) for row in result.fetchall()]

    async def delete_by_id(self, entity_id: ID) -> None:
        """Delete entity by ID (no-op when missing)."""
        stmt = delete(self.table).where(self.table.c.id == entity_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def _sync_identity(self) -> None:
        name = self.table.name
        await self.session.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{name}', 'id'), "
                f"(SELECT MAX(id) FROM {name}))"
            )
        )

    async def _check_references(self, entity: E) -> None:
        pass


class PostgresAgreementReferrer(PostgresEntityRepository[E, ID]):
    """Repository whose table has a unique ``agreement_id`` foreign key.

    References are checked before writing. The constraints cover writers
    racing past the check.
    """

    async def _check_references(self, entity: E) -> None:
        agreement_id = entity.agreement_id
        if agreement_id is None:
            return

        stmt = select(agreements_table.c.id).where(
            agreements_table.c.id == agreement_id
        )
        if (await self.session.execute(stmt)).first() is None:
            raise AgreementReferenceError.not_found(entity.entity_name, agreement_id)

        stmt = select(self.table.c.id).where(self.table.c.agreement_id == agreement_id)
        if entity.id is not None:
            stmt = stmt.where(self.table.c.id != entity.id)
        if (await self.session.execute(stmt)).first() is not None:
            raise AgreementReferenceError.in_use(entity.entity_name, agreement_id)
