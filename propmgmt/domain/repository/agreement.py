"""Agreement repository interface."""

from propmgmt.domain.model.agreement import Agreement
from propmgmt.domain.repository.base import EntityRepository
from propmgmt.domain.value import AgreementId


class AgreementRepository(EntityRepository[Agreement, AgreementId]):
    """Repository interface for Agreement entity."""

    pass
