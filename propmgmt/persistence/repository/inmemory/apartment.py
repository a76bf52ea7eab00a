"""In-memory implementation of Apartment repository for testing."""

from propmgmt.domain.model.apartment import Apartment
from propmgmt.domain.repository.apartment import ApartmentRepository
from propmgmt.domain.value import ApartmentId

from .base import InMemoryAgreementReferrer


class InMemoryApartmentRepository(
    InMemoryAgreementReferrer[Apartment, ApartmentId], ApartmentRepository
):
    """In-memory implementation of ApartmentRepository for testing."""

    table_name = "apartments"
