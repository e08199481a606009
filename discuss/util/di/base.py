"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable (mock) implementation
Component = Literal["persistence"]


class DependencyInjectionError(Exception):
    """Raised when no provider implementation matches a request."""

    pass


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with subclasses is a component: one subclass is its
    production implementation, the others are mocks registered by tests.

    Attributes:
        __mock_component__: Component name (None for concrete providers)
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
