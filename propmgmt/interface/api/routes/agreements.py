"""Agreement routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from propmgmt.application.resource import AgreementResource
from propmgmt.domain.model import Agreement
from propmgmt.domain.value import AgreementId

router = APIRouter(prefix="/agreements", tags=["agreements"], route_class=DishkaRoute)


@router.post("", response_model=Agreement, status_code=status.HTTP_201_CREATED)
async def create_agreement(
    agreement: Agreement,
    resource: FromDishka[AgreementResource],
    response: Response,
) -> Agreement:
    """Create a new agreement."""
    result = await resource.create(agreement)
    response.headers.update(result.headers)
    return result.body


@router.put("", response_model=Agreement)
async def update_agreement(
    agreement: Agreement,
    resource: FromDishka[AgreementResource],
    response: Response,
) -> Agreement:
    """Replace an existing agreement."""
    result = await resource.update(agreement)
    response.headers.update(result.headers)
    return result.body


@router.get("", response_model=list[Agreement])
async def get_all_agreements(
    resource: FromDishka[AgreementResource],
    filter: str | None = None,
) -> list[Agreement]:
    """List agreements."""
    return await resource.list_all(filter)


@router.get(
    "/{agreement_id}",
    response_model=Agreement,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Agreement not found"}},
)
async def get_agreement(
    agreement_id: int,
    resource: FromDishka[AgreementResource],
) -> Agreement | Response:
    """Get an agreement by ID.

    Apartments and deposits reference agreements by ID; clients load the
    agreement itself through this endpoint.
    """
    result = await resource.get(AgreementId(agreement_id))
    if result.body is None:
        return Response(status_code=result.status)
    return result.body


@router.delete("/{agreement_id}")
async def delete_agreement(
    agreement_id: int,
    resource: FromDishka[AgreementResource],
) -> Response:
    """Delete an agreement by ID.

    Apartments and deposits that pointed at it lose the reference.
    """
    result = await resource.delete(AgreementId(agreement_id))
    return Response(status_code=result.status, headers=result.headers)
