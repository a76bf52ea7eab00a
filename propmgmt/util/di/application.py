"""Application layer DI providers."""

import logfire
from dishka import Provider, Scope, provide

from propmgmt.application.resource import (
    AgreementResource,
    ApartmentResource,
    DepositResource,
)
from propmgmt.config import APISettings
from propmgmt.domain.repository import (
    AgreementRepository,
    ApartmentRepository,
    DepositRepository,
)


class ApplicationProvider(Provider):
    """Resource handler provider.

    Handlers are REQUEST-scoped to share the request's repositories. Each
    one gets its own logger tagged with the entity it serves.
    """

    scope = Scope.REQUEST

    @provide
    def get_apartment_resource(
        self, apartment_repository: ApartmentRepository, api_settings: APISettings
    ) -> ApartmentResource:
        """Provide apartment resource handler."""
        return ApartmentResource(
            repository=apartment_repository,
            logger=logfire.with_tags("apartment"),
            api_settings=api_settings,
        )

    @provide
    def get_deposit_resource(
        self, deposit_repository: DepositRepository, api_settings: APISettings
    ) -> DepositResource:
        """Provide deposit resource handler."""
        return DepositResource(
            repository=deposit_repository,
            logger=logfire.with_tags("deposit"),
            api_settings=api_settings,
        )

    @provide
    def get_agreement_resource(
        self, agreement_repository: AgreementRepository, api_settings: APISettings
    ) -> AgreementResource:
        """Provide agreement resource handler."""
        return AgreementResource(
            repository=agreement_repository,
            logger=logfire.with_tags("agreement"),
            api_settings=api_settings,
        )
