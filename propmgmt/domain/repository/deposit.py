"""Deposit repository interface."""

from propmgmt.domain.model.deposit import Deposit
from propmgmt.domain.repository.base import EntityRepository
from propmgmt.domain.value import DepositId


class DepositRepository(EntityRepository[Deposit, DepositId]):
    """Repository interface for Deposit entity."""

    pass
