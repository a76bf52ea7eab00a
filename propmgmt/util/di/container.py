"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from propmgmt.util.di.application import ApplicationProvider
from propmgmt.util.di.core import ConfigProvider
from propmgmt.util.di.persistence import PersistenceProvider


def create_container(persistence: Provider | None = None) -> AsyncContainer:
    """Build the DI container.

    Settings are loaded from environment variables automatically.

    Args:
        persistence: Provider for the repositories; PostgreSQL when omitted

    Returns:
        Configured DI container
    """
    return make_async_container(
        ConfigProvider(),
        ApplicationProvider(),
        persistence or PersistenceProvider(),
        FastapiProvider(),
    )
