"""Apartment entity."""

from pydantic import Field

from propmgmt.domain.model.common import Entity
from propmgmt.domain.value import AgreementId, ApartmentId


class Apartment(Entity):
    """A rentable apartment.

    An apartment is let under at most one agreement at a time.
    ``agreement_id`` is None while the apartment is vacant.
    """

    entity_name = "apartment"

    id: ApartmentId | None = None
    name: str = Field(min_length=1, max_length=100)
    address: str | None = Field(default=None, max_length=255)
    rooms: int | None = Field(default=None, ge=0)
    area: float | None = Field(default=None, ge=0)  # Square metres
    agreement_id: AgreementId | None = None
