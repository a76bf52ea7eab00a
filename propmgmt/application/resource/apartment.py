"""Apartment resource handler."""

from propmgmt.application.resource.base import ResourceHandler
from propmgmt.domain.model.apartment import Apartment
from propmgmt.domain.value import ApartmentId, RelationFilter


def is_vacant(apartment: Apartment) -> bool:
    return apartment.agreement_id is None


class ApartmentResource(ResourceHandler[Apartment, ApartmentId]):
    """Resource handler for apartments.

    ``agreement-is-null`` lists the apartments that are not let.
    """

    entity_type = Apartment
    resource_name = "apartments"
    filters = {RelationFilter.AGREEMENT_IS_NULL: is_vacant}
