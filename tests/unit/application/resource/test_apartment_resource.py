"""Unit tests for ApartmentResource."""

from http import HTTPStatus

import pytest

from propmgmt.application.resource import AgreementResource, ApartmentResource
from propmgmt.domain.error import AgreementReferenceError, BadRequestAlertError
from propmgmt.domain.repository import ApartmentRepository
from propmgmt.domain.value import AgreementId, ApartmentId
from tests.factories import make_agreement, make_apartment
from tests.harness import create_env_fixture

# Unit test fixture - in-memory persistence, no database needed
unit_env = create_env_fixture()


async def create_agreement(env) -> AgreementId:
    """Store an agreement for apartments to link to."""
    agreements = await env.get(AgreementResource)
    return (await agreements.create(make_agreement())).body.id


class TestCreateApartment:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, unit_env):
        """A new apartment gets a store-assigned ID."""
        resource = await unit_env.get(ApartmentResource)

        result = await resource.create(make_apartment())

        assert result.status == HTTPStatus.CREATED
        assert result.body.id == 1
        assert result.body.name == "Flat 1"

    @pytest.mark.asyncio
    async def test_create_sets_location_and_alert_headers(self, unit_env):
        """Created result points at the new resource and carries an alert."""
        resource = await unit_env.get(ApartmentResource)

        result = await resource.create(make_apartment())

        assert result.headers["Location"] == "/api/apartments/1"
        assert (
            result.headers["X-propMgmntApp-alert"] == "propMgmntApp.apartment.created"
        )
        assert result.headers["X-propMgmntApp-params"] == "1"

    @pytest.mark.asyncio
    async def test_create_with_id_raises_idexists(self, unit_env):
        """An apartment that already has an ID can't be created."""
        resource = await unit_env.get(ApartmentResource)
        repo = await unit_env.get(ApartmentRepository)

        with pytest.raises(BadRequestAlertError) as exc_info:
            await resource.create(make_apartment(id=ApartmentId(5)))

        assert exc_info.value.error_key == "idexists"
        assert exc_info.value.entity_name == "apartment"
        assert exc_info.value.message == "A new apartment cannot already have an ID"
        # Rejected before touching the store
        assert await repo.find_all() == []


class TestUpdateApartment:
    """Tests for update."""

    @pytest.mark.asyncio
    async def test_update_without_id_raises_idnull(self, unit_env):
        """An apartment without an ID can't be updated."""
        resource = await unit_env.get(ApartmentResource)
        repo = await unit_env.get(ApartmentRepository)

        with pytest.raises(BadRequestAlertError) as exc_info:
            await resource.update(make_apartment())

        assert exc_info.value.error_key == "idnull"
        assert exc_info.value.message == "Invalid id"
        assert await repo.find_all() == []

    @pytest.mark.asyncio
    async def test_update_replaces_whole_record(self, unit_env):
        """Fields missing from the update are cleared, not merged."""
        resource = await unit_env.get(ApartmentResource)
        created = (await resource.create(make_apartment())).body

        result = await resource.update(
            make_apartment(
                id=created.id, name="Flat 1 renamed", address=None, rooms=None
            )
        )

        assert result.status == HTTPStatus.OK
        assert result.body.name == "Flat 1 renamed"
        assert (
            result.headers["X-propMgmntApp-alert"] == "propMgmntApp.apartment.updated"
        )

        stored = (await resource.get(created.id)).body
        assert stored.name == "Flat 1 renamed"
        assert stored.address is None
        assert stored.rooms is None


class TestGetApartment:
    """Tests for get."""

    @pytest.mark.asyncio
    async def test_get_after_create_returns_same_entity(self, unit_env):
        """Get returns exactly what create stored."""
        resource = await unit_env.get(ApartmentResource)
        created = (await resource.create(make_apartment())).body

        result = await resource.get(created.id)

        assert result.status == HTTPStatus.OK
        assert result.body == created

    @pytest.mark.asyncio
    async def test_get_unknown_id_returns_not_found(self, unit_env):
        """A missing apartment is a 404 result, not an error."""
        resource = await unit_env.get(ApartmentResource)

        result = await resource.get(ApartmentId(404))

        assert result.status == HTTPStatus.NOT_FOUND
        assert result.body is None


class TestDeleteApartment:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_then_get_returns_not_found(self, unit_env):
        """Deleted apartments can no longer be fetched."""
        resource = await unit_env.get(ApartmentResource)
        created = (await resource.create(make_apartment())).body

        result = await resource.delete(created.id)

        assert result.status == HTTPStatus.OK
        assert (
            result.headers["X-propMgmntApp-alert"] == "propMgmntApp.apartment.deleted"
        )
        assert (await resource.get(created.id)).status == HTTPStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_unknown_id_succeeds(self, unit_env):
        """Deleting a missing apartment is still a success."""
        resource = await unit_env.get(ApartmentResource)

        result = await resource.delete(ApartmentId(99))

        assert result.status == HTTPStatus.OK
        assert result.headers["X-propMgmntApp-params"] == "99"
        assert (await resource.get(ApartmentId(99))).status == HTTPStatus.NOT_FOUND


class TestListApartments:
    """Tests for list_all."""

    @pytest.mark.asyncio
    async def test_list_returns_all(self, unit_env):
        """Without a filter every apartment is listed."""
        resource = await unit_env.get(ApartmentResource)
        agreement_id = await create_agreement(unit_env)
        await resource.create(make_apartment("Flat 1"))
        await resource.create(make_apartment("Flat 2", agreement_id=agreement_id))

        apartments = await resource.list_all()

        assert [a.name for a in apartments] == ["Flat 1", "Flat 2"]

    @pytest.mark.asyncio
    async def test_agreement_is_null_filter_returns_vacant_subset(self, unit_env):
        """The filter keeps exactly the apartments without an agreement."""
        resource = await unit_env.get(ApartmentResource)
        agreement_id = await create_agreement(unit_env)
        await resource.create(make_apartment("Vacant A"))
        await resource.create(make_apartment("Let", agreement_id=agreement_id))
        await resource.create(make_apartment("Vacant B"))

        everything = await resource.list_all()
        vacant = await resource.list_all("agreement-is-null")

        assert vacant == [a for a in everything if a.agreement_id is None]
        assert [a.name for a in vacant] == ["Vacant A", "Vacant B"]

    @pytest.mark.asyncio
    async def test_unknown_filter_returns_all(self, unit_env):
        """Unrecognised filter tokens are ignored."""
        resource = await unit_env.get(ApartmentResource)
        agreement_id = await create_agreement(unit_env)
        await resource.create(make_apartment("Flat 1"))
        await resource.create(make_apartment("Flat 2", agreement_id=agreement_id))

        apartments = await resource.list_all("deposit-is-null")

        assert len(apartments) == 2

    @pytest.mark.asyncio
    async def test_list_empty_store(self, unit_env):
        """An empty store lists nothing."""
        resource = await unit_env.get(ApartmentResource)

        assert await resource.list_all() == []
        assert await resource.list_all("agreement-is-null") == []


class TestApartmentAgreementLink:
    """Apartments linking to agreements."""

    @pytest.mark.asyncio
    async def test_unknown_agreement_rejected(self, unit_env):
        resource = await unit_env.get(ApartmentResource)

        with pytest.raises(AgreementReferenceError) as exc_info:
            await resource.create(make_apartment(agreement_id=AgreementId(999)))

        assert exc_info.value.error_key == "agreementnotfound"
        assert await resource.list_all() == []

    @pytest.mark.asyncio
    async def test_agreement_lets_one_apartment(self, unit_env):
        resource = await unit_env.get(ApartmentResource)
        agreement_id = await create_agreement(unit_env)
        await resource.create(make_apartment("Let", agreement_id=agreement_id))

        with pytest.raises(AgreementReferenceError) as exc_info:
            await resource.create(make_apartment("Other", agreement_id=agreement_id))

        assert exc_info.value.error_key == "agreementinuse"
        assert exc_info.value.entity_name == "apartment"

    @pytest.mark.asyncio
    async def test_deleting_agreement_vacates_apartment(self, unit_env):
        # Arrange
        resource = await unit_env.get(ApartmentResource)
        agreements = await unit_env.get(AgreementResource)
        agreement_id = await create_agreement(unit_env)
        let = (
            await resource.create(make_apartment("Let", agreement_id=agreement_id))
        ).body

        # Act
        await agreements.delete(agreement_id)

        # Assert
        assert (await resource.get(let.id)).body.agreement_id is None
        vacant = await resource.list_all("agreement-is-null")
        assert [a.id for a in vacant] == [let.id]
