"""In-memory repository implementations for testing."""

from .agreement import InMemoryAgreementRepository
from .apartment import InMemoryApartmentRepository
from .base import InMemoryStore
from .deposit import InMemoryDepositRepository

__all__ = [
    "InMemoryStore",
    "InMemoryAgreementRepository",
    "InMemoryApartmentRepository",
    "InMemoryDepositRepository",
]
