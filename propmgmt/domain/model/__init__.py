"""Domain model entities for property management."""

from propmgmt.domain.model.agreement import Agreement
from propmgmt.domain.model.apartment import Apartment
from propmgmt.domain.model.common import DomainModel, Entity
from propmgmt.domain.model.deposit import Deposit

__all__ = [
    "DomainModel",
    "Entity",
    "Apartment",
    "Deposit",
    "Agreement",
]
