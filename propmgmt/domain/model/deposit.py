"""Deposit entity."""

from datetime import date
from decimal import Decimal

from pydantic import Field

from propmgmt.domain.model.common import Entity
from propmgmt.domain.value import AgreementId, DepositId


class Deposit(Entity):
    """Security deposit paid by a tenant."""

    entity_name = "deposit"

    id: DepositId | None = None
    amount: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    paid_on: date | None = None
    refunded: bool = False
    agreement_id: AgreementId | None = None
