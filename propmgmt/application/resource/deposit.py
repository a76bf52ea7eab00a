"""Deposit resource handler."""

from propmgmt.application.resource.base import ResourceHandler
from propmgmt.domain.model.deposit import Deposit
from propmgmt.domain.value import DepositId, RelationFilter


def is_unassigned(deposit: Deposit) -> bool:
    return deposit.agreement_id is None


class DepositResource(ResourceHandler[Deposit, DepositId]):
    """Resource handler for deposits.

    ``agreement-is-null`` lists deposits not yet tied to an agreement.
    """

    entity_type = Deposit
    resource_name = "deposits"
    filters = {RelationFilter.AGREEMENT_IS_NULL: is_unassigned}
