"""Unit tests for DepositResource and AgreementResource."""

from decimal import Decimal
from http import HTTPStatus

import pytest

from propmgmt.application.resource import AgreementResource, DepositResource
from propmgmt.domain.error import BadRequestAlertError
from propmgmt.domain.value import AgreementId, DepositId
from tests.factories import make_agreement, make_deposit
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDepositResource:
    """Tests for DepositResource."""

    @pytest.mark.asyncio
    async def test_create_and_get_deposit(self, unit_env):
        resource = await unit_env.get(DepositResource)

        created = await resource.create(make_deposit("1500.00"))
        fetched = await resource.get(created.body.id)

        assert created.headers["Location"] == "/api/deposits/1"
        assert fetched.body.amount == Decimal("1500.00")
        assert fetched.body.refunded is False

    @pytest.mark.asyncio
    async def test_create_with_id_uses_deposit_entity_name(self, unit_env):
        resource = await unit_env.get(DepositResource)

        with pytest.raises(BadRequestAlertError) as exc_info:
            await resource.create(make_deposit(id=DepositId(3)))

        assert exc_info.value.entity_name == "deposit"
        assert exc_info.value.error_key == "idexists"

    @pytest.mark.asyncio
    async def test_agreement_is_null_filter(self, unit_env):
        """Only deposits not yet tied to an agreement are listed."""
        resource = await unit_env.get(DepositResource)
        agreements = await unit_env.get(AgreementResource)
        agreement = (await agreements.create(make_agreement())).body
        await resource.create(make_deposit("100.00"))
        await resource.create(make_deposit("200.00", agreement_id=agreement.id))

        unassigned = await resource.list_all("agreement-is-null")

        assert [d.amount for d in unassigned] == [Decimal("100.00")]


class TestAgreementResource:
    """Tests for AgreementResource."""

    @pytest.mark.asyncio
    async def test_update_agreement(self, unit_env):
        resource = await unit_env.get(AgreementResource)
        created = (await resource.create(make_agreement())).body

        result = await resource.update(
            make_agreement(id=created.id, monthly_rent=Decimal("1000.00"))
        )

        assert result.status == HTTPStatus.OK
        assert result.headers["X-propMgmntApp-params"] == str(created.id)
        fetched = (await resource.get(created.id)).body
        assert fetched.monthly_rent == Decimal("1000.00")

    @pytest.mark.asyncio
    async def test_filters_are_ignored_for_agreements(self, unit_env):
        """Agreements have no related reference to filter on."""
        resource = await unit_env.get(AgreementResource)
        await resource.create(make_agreement("Jane Doe"))
        await resource.create(make_agreement("John Roe"))

        agreements = await resource.list_all("agreement-is-null")

        assert len(agreements) == 2

    @pytest.mark.asyncio
    async def test_get_unknown_agreement(self, unit_env):
        resource = await unit_env.get(AgreementResource)

        result = await resource.get(AgreementId(1))

        assert result.status == HTTPStatus.NOT_FOUND
