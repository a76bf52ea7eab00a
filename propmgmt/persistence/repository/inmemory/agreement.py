"""In-memory implementation of Agreement repository for testing."""

from propmgmt.domain.model.agreement import Agreement
from propmgmt.domain.repository.agreement import AgreementRepository
from propmgmt.domain.value import AgreementId

from .base import InMemoryEntityRepository, InMemoryStore


class InMemoryAgreementRepository(
    InMemoryEntityRepository[Agreement, AgreementId], AgreementRepository
):
    """In-memory implementation of AgreementRepository for testing."""

    table_name = "agreements"

    async def delete_by_id(self, entity_id: AgreementId) -> None:
        """Delete agreement by ID and unlink the entities that referenced it."""
        await super().delete_by_id(entity_id)

        for table_name in InMemoryStore.AGREEMENT_REFERRERS:
            rows = self.store.tables[table_name]
            for key, row in rows.items():
                if row.agreement_id == entity_id:
                    rows[key] = row.model_copy(update={"agreement_id": None})
