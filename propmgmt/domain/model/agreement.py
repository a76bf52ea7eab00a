"""Rental agreement entity."""

from datetime import date
from decimal import Decimal

from pydantic import Field, model_validator

from propmgmt.domain.model.common import Entity
from propmgmt.domain.value import AgreementId


class Agreement(Entity):
    """Rental agreement between the owner and a tenant.

    Apartments and deposits point at the agreement they belong to; the
    agreement itself holds no references back.
    """

    entity_name = "agreement"

    id: AgreementId | None = None
    tenant_name: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date | None = None
    monthly_rent: Decimal = Field(ge=0, max_digits=12, decimal_places=2)

    @model_validator(mode="after")
    def check_period(self) -> "Agreement":
        """Ensure the agreement doesn't end before it starts."""
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
