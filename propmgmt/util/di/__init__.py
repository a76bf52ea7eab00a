"""Dependency injection module."""

from propmgmt.util.di.application import ApplicationProvider
from propmgmt.util.di.container import create_container
from propmgmt.util.di.core import ConfigProvider
from propmgmt.util.di.persistence import PersistenceProvider

__all__ = [
    "ApplicationProvider",
    "ConfigProvider",
    "PersistenceProvider",
    "create_container",
]
