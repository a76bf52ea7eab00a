"""PostgreSQL implementation of Apartment repository."""

from typing import Any, Dict

from propmgmt.domain.model.apartment import Apartment
from propmgmt.domain.repository.apartment import ApartmentRepository
from propmgmt.domain.value import ApartmentId
from propmgmt.persistence.mappers import apartment_to_dict, row_to_apartment
from propmgmt.persistence.repository.base import PostgresAgreementReferrer
from propmgmt.persistence.tables import apartments_table


class PostgresApartmentRepository(
    PostgresAgreementReferrer[Apartment, ApartmentId], ApartmentRepository
):
    """PostgreSQL implementation of ApartmentRepository."""

    table = apartments_table

    def _to_entity(self, row: Dict[str, Any]) -> Apartment:
        return row_to_apartment(row)

    def _to_dict(self, entity: Apartment) -> Dict[str, Any]:
        return apartment_to_dict(entity)
