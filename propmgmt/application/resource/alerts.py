"""Alert headers telling the frontend which notification to show."""


class HeaderAlerts:
    """Builds ``X-{app}-alert`` / ``X-{app}-error`` response headers."""

    def __init__(self, app_name: str) -> None:
        self.app_name = app_name

    def alert(self, message: str, param: str) -> dict[str, str]:
        return {
            f"X-{self.app_name}-alert": message,
            f"X-{self.app_name}-params": param,
        }

    def entity_created(self, entity_name: str, entity_id: str) -> dict[str, str]:
        return self.alert(f"{self.app_name}.{entity_name}.created", entity_id)

    def entity_updated(self, entity_name: str, entity_id: str) -> dict[str, str]:
        return self.alert(f"{self.app_name}.{entity_name}.updated", entity_id)

    def entity_deleted(self, entity_name: str, entity_id: str) -> dict[str, str]:
        return self.alert(f"{self.app_name}.{entity_name}.deleted", entity_id)

    def failure(self, entity_name: str, error_key: str) -> dict[str, str]:
        return {
            f"X-{self.app_name}-error": f"error.{error_key}",
            f"X-{self.app_name}-params": entity_name,
        }
