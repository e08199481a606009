"""Dependency injection container."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from discuss.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the DI container.

    Settings are loaded from environment variables automatically.

    Args:
        mocked: Components served by their registered mock providers instead
            of the production ones (tests only)

    Returns:
        Configured DI container
    """
    provider_instances = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    # FastapiProvider exposes the incoming Request to request-scoped factories
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve the app's dishka routes from the given container."""
    setup_dishka(container, app)
