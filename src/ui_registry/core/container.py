"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ui_registry.clients.registry import RegistryFetcher
from ui_registry.registry.api import Registry

from .config import Settings, get_settings
from .logging_config import configure_logging


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings singleton."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_fetcher(self, settings: Settings) -> RegistryFetcher:
        """Provide registry fetcher configured from settings."""
        return RegistryFetcher.from_settings(settings)

    @singleton
    @provider
    def provide_registry(self, fetcher: RegistryFetcher) -> Registry:
        """Provide registry facade over the shared fetcher."""
        return Registry(fetcher)


def create_container(settings: Settings | None = None) -> Injector:
    """
    Create configured injector and apply the logging settings.

    The shared fetcher holds an open HTTP client. Close it with
    ``await close_container(container)`` or by using the registry as an
    async context manager.
    """
    container = Injector([CoreModule(settings)])
    resolved = container.get(Settings)
    configure_logging(resolved.log_level, resolved.json_logs)
    return container


async def close_container(container: Injector) -> None:
    """Close the shared registry fetcher."""
    await container.get(RegistryFetcher).aclose()
