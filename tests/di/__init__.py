"""Test DI providers and container."""

from .persistence import InMemoryPersistenceProvider
from .container import build_test_container

__all__ = [
    "InMemoryPersistenceProvider",
    "build_test_container",
]
