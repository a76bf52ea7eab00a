"""Apartment repository interface."""

from propmgmt.domain.model.apartment import Apartment
from propmgmt.domain.repository.base import EntityRepository
from propmgmt.domain.value import ApartmentId


class ApartmentRepository(EntityRepository[Apartment, ApartmentId]):
    """Repository interface for Apartment entity."""

    pass
