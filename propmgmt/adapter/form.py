"""Update form for editing a single entity."""

from typing import Callable, Generic, TypeVar

import logfire

from propmgmt.adapter.error import ResourceClientError
from propmgmt.adapter.service import ResourceService
from propmgmt.domain.model import Entity

E = TypeVar("E", bound=Entity)


class UpdateForm(Generic[E]):
    """Holds a draft entity and saves it through a resource service.

    Whether saving creates or updates is decided only by the draft's ID.
    ``is_saving`` tracks an in-flight save; it does not guard against a
    second ``save()`` issued before the first completes.
    """

    def __init__(
        self,
        service: ResourceService[E],
        draft: E,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        """Initialize update form.

        Args:
            service: Resource service for the edited entity
            draft: Entity being edited (no ID for a new one)
            on_close: Called when the form closes after a successful save
        """
        self.service = service
        self.draft = draft
        self.on_close = on_close
        self.is_saving = False

    async def save(self) -> E:
        """Create or update the draft.

        Returns:
            The saved entity

        Raises:
            ResourceClientError: If the API rejects the request
            httpx.HTTPError: If the API can't be reached
        """
        self.is_saving = True
        try:
            if self.draft.id is not None:
                saved = await self.service.update(self.draft)
            else:
                saved = await self.service.create(self.draft)
        except ResourceClientError as e:
            logfire.warn(
                "Save failed",
                entity_name=self.draft.entity_name,
                error_key=e.error_key,
            )
            raise
        finally:
            self.is_saving = False

        self.draft = saved
        self.previous_state()
        return saved

    def previous_state(self) -> None:
        """Close the form."""
        if self.on_close is not None:
            self.on_close()
