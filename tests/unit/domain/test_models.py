"""Unit tests for domain entities."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from propmgmt.domain.model import Agreement, Apartment, Deposit
from tests.factories import make_agreement, make_apartment, make_deposit


class TestAgreement:
    """Tests for Agreement validation."""

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            make_agreement(start_date=date(2024, 6, 1), end_date=date(2024, 5, 31))

    def test_open_ended_agreement_allowed(self):
        agreement = make_agreement(end_date=None)

        assert agreement.end_date is None

    def test_same_day_period_allowed(self):
        agreement = make_agreement(
            start_date=date(2024, 6, 1), end_date=date(2024, 6, 1)
        )

        assert agreement.start_date == agreement.end_date


class TestApartment:
    """Tests for Apartment validation."""

    def test_new_apartment_has_no_id(self):
        apartment = make_apartment()

        assert apartment.id is None
        assert apartment.is_new

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Apartment(name="")

    def test_negative_rooms_rejected(self):
        with pytest.raises(ValidationError):
            make_apartment(rooms=-1)

    def test_entities_are_immutable(self):
        apartment = make_apartment()

        with pytest.raises(ValidationError):
            apartment.name = "Other"


class TestDeposit:
    """Tests for Deposit validation."""

    def test_defaults(self):
        deposit = Deposit(amount=Decimal("10.00"))

        assert deposit.refunded is False
        assert deposit.agreement_id is None

    def test_amount_precision_limited(self):
        with pytest.raises(ValidationError):
            make_deposit("10.005")

    def test_entity_names(self):
        assert Apartment.entity_name == "apartment"
        assert Deposit.entity_name == "deposit"
        assert Agreement.entity_name == "agreement"
