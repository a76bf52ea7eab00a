"""PostgreSQL implementation of Deposit repository."""

from typing import Any, Dict

from propmgmt.domain.model.deposit import Deposit
from propmgmt.domain.repository.deposit import DepositRepository
from propmgmt.domain.value import DepositId
from propmgmt.persistence.mappers import deposit_to_dict, row_to_deposit
from propmgmt.persistence.repository.base import PostgresAgreementReferrer
from propmgmt.persistence.tables import deposits_table


class PostgresDepositRepository(
    PostgresAgreementReferrer[Deposit, DepositId], DepositRepository
):
    """PostgreSQL implementation of DepositRepository."""

    table = deposits_table

    def _to_entity(self, row: Dict[str, Any]) -> Deposit:
        return row_to_deposit(row)

    def _to_dict(self, entity: Deposit) -> Dict[str, Any]:
        return deposit_to_dict(entity)
