"""Generic CRUD resource handler."""

from http import HTTPStatus
from typing import Callable, ClassVar, Generic, TypeVar

import logfire
from pydantic import BaseModel

from propmgmt.application.resource.alerts import HeaderAlerts
from propmgmt.config import APISettings
from propmgmt.domain.error import BadRequestAlertError
from propmgmt.domain.model.common import Entity
from propmgmt.domain.repository.base import ID, E, EntityRepository
from propmgmt.domain.value import RelationFilter

T = TypeVar("T")


class ResourceResult(BaseModel, Generic[T]):
    """Outcome of a resource operation, ready to be written as a response."""

    status: int
    body: T | None = None
    headers: dict[str, str] = {}


class ResourceHandler(Generic[E, ID]):
    """Maps create/update/list/get/delete onto a single entity repository.

    Subclasses bind the entity type, the collection name used in URLs and the
    filter tokens their listing understands.
    """

    entity_type: ClassVar[type[Entity]]
    resource_name: ClassVar[str]
    filters: ClassVar[dict[RelationFilter, Callable[[Entity], bool]]] = {}

    def __init__(
        self,
        repository: EntityRepository[E, ID],
        logger: logfire.Logfire,
        api_settings: APISettings,
    ) -> None:
        """Initialize resource handler.

        Args:
            repository: Repository for the handled entity
            logger: Logger tagged for this resource
            api_settings: API settings (base path and alert app name)
        """
        self.repository = repository
        self.logger = logger
        self.alerts = HeaderAlerts(api_settings.app_name)
        self.base_path = f"{api_settings.base_path}/{self.resource_name}"

    @property
    def entity_name(self) -> str:
        return self.entity_type.entity_name

    async def create(self, entity: E) -> ResourceResult[E]:
        """Create a new entity.

        Args:
            entity: Entity to create, without an ID

        Returns:
            201 result with the saved entity and its Location

        Raises:
            BadRequestAlertError: If the entity already has an ID (idexists)
        """
        self.logger.debug(
            "REST request to save {entity_name}",
            entity_name=self.entity_name,
            entity=entity.model_dump(mode="json"),
        )
        if entity.id is not None:
            raise BadRequestAlertError(
                f"A new {self.entity_name} cannot already have an ID",
                self.entity_name,
                "idexists",
            )

        with self.logger.span("resource.create", entity_name=self.entity_name):
            result = await self.repository.save(entity)

        return ResourceResult(
            status=HTTPStatus.CREATED,
            body=result,
            headers={
                "Location": f"{self.base_path}/{result.id}",
                **self.alerts.entity_created(self.entity_name, str(result.id)),
            },
        )

    async def update(self, entity: E) -> ResourceResult[E]:
        """Replace an existing entity as a whole.

        Args:
            entity: Entity to save, with its ID

        Returns:
            200 result with the saved entity

        Raises:
            BadRequestAlertError: If the entity has no ID (idnull)
        """
        self.logger.debug(
            "REST request to update {entity_name}",
            entity_name=self.entity_name,
            entity=entity.model_dump(mode="json"),
        )
        if entity.id is None:
            raise BadRequestAlertError("Invalid id", self.entity_name, "idnull")

        with self.logger.span(
            "resource.update", entity_name=self.entity_name, entity_id=entity.id
        ):
            result = await self.repository.save(entity)

        return ResourceResult(
            status=HTTPStatus.OK,
            body=result,
            headers=self.alerts.entity_updated(self.entity_name, str(entity.id)),
        )

    async def list_all(self, filter: str | None = None) -> list[E]:
        """List all entities, optionally narrowed by a filter token.

        Filtering happens in process over the full collection. Unknown
        tokens are ignored.

        Args:
            filter: Filter token such as "agreement-is-null"

        Returns:
            Matching entities
        """
        predicate = self._resolve_filter(filter)
        if predicate is None:
            self.logger.debug(
                "REST request to get all {entity_name}s", entity_name=self.entity_name
            )
            return await self.repository.find_all()

        self.logger.debug(
            "REST request to get all {entity_name}s where {filter}",
            entity_name=self.entity_name,
            filter=filter,
        )
        entities = await self.repository.find_all()
        return [entity for entity in entities if predicate(entity)]

    async def get(self, entity_id: ID) -> ResourceResult[E]:
        """Get an entity by ID.

        Args:
            entity_id: Entity identifier

        Returns:
            200 result with the entity, or a 404 result with no body
        """
        self.logger.debug(
            "REST request to get {entity_name} : {entity_id}",
            entity_name=self.entity_name,
            entity_id=entity_id,
        )
        entity = await self.repository.find_by_id(entity_id)

        if entity is None:
            self.logger.warn(
                "{entity_name} not found",
                entity_name=self.entity_name,
                entity_id=entity_id,
            )
            return ResourceResult(status=HTTPStatus.NOT_FOUND)

        return ResourceResult(status=HTTPStatus.OK, body=entity)

    async def delete(self, entity_id: ID) -> ResourceResult[None]:
        """Delete an entity by ID.

        Succeeds whether or not the entity existed.

        Args:
            entity_id: Entity identifier

        Returns:
            200 result with a deletion alert
        """
        self.logger.debug(
            "REST request to delete {entity_name} : {entity_id}",
            entity_name=self.entity_name,
            entity_id=entity_id,
        )
        with self.logger.span(
            "resource.delete", entity_name=self.entity_name, entity_id=entity_id
        ):
            await self.repository.delete_by_id(entity_id)

        return ResourceResult(
            status=HTTPStatus.OK,
            headers=self.alerts.entity_deleted(self.entity_name, str(entity_id)),
        )

    def _resolve_filter(self, token: str | None) -> Callable[[Entity], bool] | None:
        if not token:
            return None
        try:
            return self.filters.get(RelationFilter(token))
        except ValueError:
            return None
