"""Core DI providers."""

from dishka import Provider, Scope, provide

from propmgmt.config import APISettings, Settings


class ConfigProvider(Provider):
    """Config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_api_settings(self, settings: Settings) -> APISettings:
        """Provide API settings."""
        return settings.api
