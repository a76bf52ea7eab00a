"""Entity resource handlers."""

from .agreement import AgreementResource
from .apartment import ApartmentResource
from .base import ResourceHandler, ResourceResult
from .deposit import DepositResource

__all__ = [
    "ResourceHandler",
    "ResourceResult",
    "ApartmentResource",
    "DepositResource",
    "AgreementResource",
]
