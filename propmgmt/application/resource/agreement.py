"""Agreement resource handler."""

from propmgmt.application.resource.base import ResourceHandler
from propmgmt.domain.model.agreement import Agreement
from propmgmt.domain.value import AgreementId


class AgreementResource(ResourceHandler[Agreement, AgreementId]):
    """Resource handler for rental agreements."""

    entity_type = Agreement
    resource_name = "agreements"
