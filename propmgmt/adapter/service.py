"""HTTP client for entity resources.

Speaks the same contract as the API routers: POST/PUT on the collection,
GET/DELETE on ``/{id}`` and ``?filter=`` on listings.
"""

from typing import Generic, TypeVar

import httpx
import logfire

from propmgmt.adapter.error import ResourceClientError
from propmgmt.domain.model import Agreement, Apartment, Deposit, Entity

E = TypeVar("E", bound=Entity)


class ResourceService(Generic[E]):
    """Client-side service for one entity resource."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        entity_type: type[E],
        resource_url: str,
    ) -> None:
        """Initialize resource service.

        Args:
            client: Shared HTTP client (base_url points at the API server)
            entity_type: Entity model used to parse responses
            resource_url: Collection path, e.g. "/api/apartments"
        """
        self.client = client
        self.entity_type = entity_type
        self.resource_url = resource_url.rstrip("/")

    async def create(self, entity: E) -> E:
        """POST a new entity and return it with its assigned ID."""
        response = await self.client.post(
            self.resource_url, json=entity.model_dump(mode="json")
        )
        self._raise_for_status(response)
        return self.entity_type.model_validate(response.json())

    async def update(self, entity: E) -> E:
        """PUT an existing entity and return the saved version."""
        response = await self.client.put(
            self.resource_url, json=entity.model_dump(mode="json")
        )
        self._raise_for_status(response)
        return self.entity_type.model_validate(response.json())

    async def find(self, entity_id: int) -> E | None:
        """GET one entity, or None if the server answers 404."""
        response = await self.client.get(f"{self.resource_url}/{entity_id}")
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        self._raise_for_status(response)
        return self.entity_type.model_validate(response.json())

    async def query(self, filter: str | None = None) -> list[E]:
        """GET the collection, optionally with a filter token."""
        params = {"filter": filter} if filter else None
        response = await self.client.get(self.resource_url, params=params)
        self._raise_for_status(response)
        return [self.entity_type.model_validate(item) for item in response.json()]

    async def delete(self, entity_id: int) -> None:
        """DELETE one entity."""
        response = await self.client.delete(f"{self.resource_url}/{entity_id}")
        self._raise_for_status(response)

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return

        entity_name = error_key = None
        message = response.reason_phrase
        try:
            problem = response.json()
        except ValueError:
            problem = None
        if isinstance(problem, dict):
            entity_name = problem.get("entityName")
            error_key = problem.get("errorKey")
            message = problem.get("title") or message

        logfire.warn(
            "Resource request failed",
            url=str(response.request.url),
            status_code=response.status_code,
            error_key=error_key,
        )
        raise ResourceClientError(
            response.status_code,
            message,
            entity_name=entity_name,
            error_key=error_key,
        )


def apartment_service(client: httpx.AsyncClient) -> ResourceService[Apartment]:
    return ResourceService(client, Apartment, "/api/apartments")


def deposit_service(client: httpx.AsyncClient) -> ResourceService[Deposit]:
    return ResourceService(client, Deposit, "/api/deposits")


def agreement_service(client: httpx.AsyncClient) -> ResourceService[Agreement]:
    return ResourceService(client, Agreement, "/api/agreements")
