"""Deposit routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from propmgmt.application.resource import DepositResource
from propmgmt.domain.model import Deposit
from propmgmt.domain.value import DepositId

router = APIRouter(prefix="/deposits", tags=["deposits"], route_class=DishkaRoute)


@router.post("", response_model=Deposit, status_code=status.HTTP_201_CREATED)
async def create_deposit(
    deposit: Deposit,
    resource: FromDishka[DepositResource],
    response: Response,
) -> Deposit:
    """Create a new deposit."""
    result = await resource.create(deposit)
    response.headers.update(result.headers)
    return result.body


@router.put("", response_model=Deposit)
async def update_deposit(
    deposit: Deposit,
    resource: FromDishka[DepositResource],
    response: Response,
) -> Deposit:
    """Replace an existing deposit."""
    result = await resource.update(deposit)
    response.headers.update(result.headers)
    return result.body


@router.get("", response_model=list[Deposit])
async def get_all_deposits(
    resource: FromDishka[DepositResource],
    filter: str | None = None,
) -> list[Deposit]:
    """List deposits, optionally only those without an agreement."""
    return await resource.list_all(filter)


@router.get(
    "/{deposit_id}",
    response_model=Deposit,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Deposit not found"}},
)
async def get_deposit(
    deposit_id: int,
    resource: FromDishka[DepositResource],
) -> Deposit | Response:
    """Get a deposit by ID."""
    result = await resource.get(DepositId(deposit_id))
    if result.body is None:
        return Response(status_code=result.status)
    return result.body


@router.delete("/{deposit_id}")
async def delete_deposit(
    deposit_id: int,
    resource: FromDishka[DepositResource],
) -> Response:
    """Delete a deposit by ID."""
    result = await resource.delete(DepositId(deposit_id))
    return Response(status_code=result.status, headers=result.headers)
