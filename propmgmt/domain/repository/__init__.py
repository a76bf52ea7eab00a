"""Repository interfaces for the property management domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from propmgmt.domain.repository.agreement import AgreementRepository
from propmgmt.domain.repository.apartment import ApartmentRepository
from propmgmt.domain.repository.base import EntityRepository
from propmgmt.domain.repository.deposit import DepositRepository

__all__ = [
    "EntityRepository",
    "ApartmentRepository",
    "DepositRepository",
    "AgreementRepository",
]
