"""Domain value objects for property management."""

from propmgmt.domain.value.identifiers import AgreementId, ApartmentId, DepositId
from propmgmt.domain.value.types import RelationFilter

__all__ = [
    # Identifiers
    "ApartmentId",
    "DepositId",
    "AgreementId",
    # Types
    "RelationFilter",
]
