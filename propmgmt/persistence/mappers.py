"""Mappers between database rows and domain models."""

from typing import Any, Dict

from propmgmt.domain.model import Agreement, Apartment, Deposit
from propmgmt.domain.value import AgreementId, ApartmentId, DepositId


def _agreement_ref(value: Any) -> AgreementId | None:
    return AgreementId(value) if value is not None else None


def row_to_apartment(row: Dict[str, Any]) -> Apartment:
    """Convert database row to Apartment domain model."""
    return Apartment(
        id=ApartmentId(row["id"]),
        name=row["name"],
        address=row["address"],
        rooms=row["rooms"],
        area=row["area"],
        agreement_id=_agreement_ref(row["agreement_id"]),
    )


def apartment_to_dict(apartment: Apartment) -> Dict[str, Any]:
    """Convert Apartment domain model to column values (without ID)."""
    return {
        "name": apartment.name,
        "address": apartment.address,
        "rooms": apartment.rooms,
        "area": apartment.area,
        "agreement_id": apartment.agreement_id,
    }


def row_to_deposit(row: Dict[str, Any]) -> Deposit:
    """Convert database row to Deposit domain model."""
    return Deposit(
        id=DepositId(row["id"]),
        amount=row["amount"],
        paid_on=row["paid_on"],
        refunded=row["refunded"],
        agreement_id=_agreement_ref(row["agreement_id"]),
    )


def deposit_to_dict(deposit: Deposit) -> Dict[str, Any]:
    """Convert Deposit domain model to column values (without ID)."""
    return {
        "amount": deposit.amount,
        "paid_on": deposit.paid_on,
        "refunded": deposit.refunded,
        "agreement_id": deposit.agreement_id,
    }


def row_to_agreement(row: Dict[str, Any]) -> Agreement:
    """Convert database row to Agreement domain model."""
    return Agreement(
        id=AgreementId(row["id"]),
        tenant_name=row["tenant_name"],
        start_date=row["start_date"],
        end_date=row["end_date"],
        monthly_rent=row["monthly_rent"],
    )


def agreement_to_dict(agreement: Agreement) -> Dict[str, Any]:
    """Convert Agreement domain model to column values (without ID)."""
    return {
        "tenant_name": agreement.tenant_name,
        "start_date": agreement.start_date,
        "end_date": agreement.end_date,
        "monthly_rent": agreement.monthly_rent,
    }
