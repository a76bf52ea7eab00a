"""Apartment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from propmgmt.application.resource import ApartmentResource
from propmgmt.domain.model import Apartment
from propmgmt.domain.value import ApartmentId

router = APIRouter(prefix="/apartments", tags=["apartments"], route_class=DishkaRoute)


@router.post("", response_model=Apartment, status_code=status.HTTP_201_CREATED)
async def create_apartment(
    apartment: Apartment,
    resource: FromDishka[ApartmentResource],
    response: Response,
) -> Apartment:
    """Create a new apartment.

    Returns 400 (idexists) if the apartment already has an ID.
    """
    result = await resource.create(apartment)
    response.headers.update(result.headers)
    return result.body


@router.put("", response_model=Apartment)
async def update_apartment(
    apartment: Apartment,
    resource: FromDishka[ApartmentResource],
    response: Response,
) -> Apartment:
    """Replace an existing apartment.

    Returns 400 (idnull) if the apartment has no ID.
    """
    result = await resource.update(apartment)
    response.headers.update(result.headers)
    return result.body


@router.get("", response_model=list[Apartment])
async def get_all_apartments(
    resource: FromDishka[ApartmentResource],
    filter: str | None = None,
) -> list[Apartment]:
    """List apartments.

    Example:
        GET /api/apartments?filter=agreement-is-null
    """
    return await resource.list_all(filter)


@router.get(
    "/{apartment_id}",
    response_model=Apartment,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Apartment not found"}},
)
async def get_apartment(
    apartment_id: int,
    resource: FromDishka[ApartmentResource],
) -> Apartment | Response:
    """Get an apartment by ID, or 404 with an empty body."""
    result = await resource.get(ApartmentId(apartment_id))
    if result.body is None:
        return Response(status_code=result.status)
    return result.body


@router.delete("/{apartment_id}")
async def delete_apartment(
    apartment_id: int,
    resource: FromDishka[ApartmentResource],
) -> Response:
    """Delete an apartment by ID."""
    result = await resource.delete(ApartmentId(apartment_id))
    return Response(status_code=result.status, headers=result.headers)
