"""Unit tests for ResourceService."""

import json
from decimal import Decimal

import httpx
import pytest

from propmgmt.adapter.error import ResourceClientError
from propmgmt.adapter.service import apartment_service, deposit_service
from propmgmt.domain.value import ApartmentId
from tests.factories import make_apartment, make_deposit


def client_for(handler) -> httpx.AsyncClient:
    """Build a client whose requests are answered by handler."""
    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://test"
    )


class TestResourceService:
    """Tests for ResourceService."""

    @pytest.mark.asyncio
    async def test_create_posts_to_collection(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            body = json.loads(request.content)
            return httpx.Response(201, json={**body, "id": 7})

        async with client_for(handler) as client:
            saved = await apartment_service(client).create(make_apartment())

        assert requests[0].method == "POST"
        assert requests[0].url.path == "/api/apartments"
        assert saved.id == 7
        assert saved.name == "Flat 1"

    @pytest.mark.asyncio
    async def test_update_puts_to_collection(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "PUT"
            assert request.url.path == "/api/deposits"
            return httpx.Response(200, content=request.content)

        async with client_for(handler) as client:
            saved = await deposit_service(client).update(make_deposit("99.50", id=3))

        assert saved.id == 3
        assert saved.amount == Decimal("99.50")

    @pytest.mark.asyncio
    async def test_find_returns_none_on_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        async with client_for(handler) as client:
            found = await apartment_service(client).find(ApartmentId(1))

        assert found is None

    @pytest.mark.asyncio
    async def test_query_sends_filter(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["filter"] == "agreement-is-null"
            return httpx.Response(200, json=[{"id": 1, "name": "Flat 1"}])

        async with client_for(handler) as client:
            apartments = await apartment_service(client).query("agreement-is-null")

        assert [a.id for a in apartments] == [1]

    @pytest.mark.asyncio
    async def test_query_without_filter_sends_no_params(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert "filter" not in request.url.params
            return httpx.Response(200, json=[])

        async with client_for(handler) as client:
            assert await apartment_service(client).query() == []

    @pytest.mark.asyncio
    async def test_problem_body_becomes_client_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400,
                json={
                    "title": "A new apartment cannot already have an ID",
                    "status": 400,
                    "entityName": "apartment",
                    "errorKey": "idexists",
                },
            )

        async with client_for(handler) as client:
            with pytest.raises(ResourceClientError) as exc_info:
                await apartment_service(client).create(make_apartment(id=5))

        assert exc_info.value.status_code == 400
        assert exc_info.value.entity_name == "apartment"
        assert exc_info.value.error_key == "idexists"

    @pytest.mark.asyncio
    async def test_error_without_problem_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        async with client_for(handler) as client:
            with pytest.raises(ResourceClientError) as exc_info:
                await apartment_service(client).delete(ApartmentId(1))

        assert exc_info.value.status_code == 500
        assert exc_info.value.error_key is None
