"""PostgreSQL implementation of Agreement repository."""

from typing import Any, Dict

from propmgmt.domain.model.agreement import Agreement
from propmgmt.domain.repository.agreement import AgreementRepository
from propmgmt.domain.value import AgreementId
from propmgmt.persistence.mappers import agreement_to_dict, row_to_agreement
from propmgmt.persistence.repository.base import PostgresEntityRepository
from propmgmt.persistence.tables import agreements_table


class PostgresAgreementRepository(
    PostgresEntityRepository[Agreement, AgreementId], AgreementRepository
):
    """PostgreSQL implementation of AgreementRepository.

    Deleting an agreement unlinks its apartment and deposit through the
    ON DELETE SET NULL foreign keys.
    """

    table = agreements_table

    def _to_entity(self, row: Dict[str, Any]) -> Agreement:
        return row_to_agreement(row)

    def _to_dict(self, entity: Agreement) -> Dict[str, Any]:
        return agreement_to_dict(entity)
