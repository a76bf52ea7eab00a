"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ResourceClientError(AdapterError):
    """The API answered a resource call with an error status.

    ``entity_name`` and ``error_key`` come from the problem body when the
    server sent one (e.g. "apartment" / "idexists").
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        entity_name: str | None = None,
        error_key: str | None = None,
    ):
        self.status_code = status_code
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(f"{status_code}: {message}")
