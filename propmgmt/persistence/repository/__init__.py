"""PostgreSQL repository implementations."""

from propmgmt.persistence.repository.agreement import PostgresAgreementRepository
from propmgmt.persistence.repository.apartment import PostgresApartmentRepository
from propmgmt.persistence.repository.deposit import PostgresDepositRepository

__all__ = [
    "PostgresApartmentRepository",
    "PostgresDepositRepository",
    "PostgresAgreementRepository",
]
