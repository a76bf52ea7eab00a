"""In-memory implementation of Deposit repository for testing."""

from propmgmt.domain.model.deposit import Deposit
from propmgmt.domain.repository.deposit import DepositRepository
from propmgmt.domain.value import DepositId

from .base import InMemoryAgreementReferrer


class InMemoryDepositRepository(
    InMemoryAgreementReferrer[Deposit, DepositId], DepositRepository
):
    """In-memory implementation of DepositRepository for testing."""

    table_name = "deposits"
