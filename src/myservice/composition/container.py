"""Dependency-injection container: service registrations and their resolver.

A :class:`ServiceCollection` gathers static registration rules mapping a
capability (usually a Protocol class) to an implementation class, a factory,
or a pre-built instance. :meth:`ServiceCollection.build` snapshots those
rules into a :class:`ServiceProvider` that resolves and caches instances.

Contents:
    * :class:`ServiceDescriptor` - One immutable registration.
    * :class:`ServiceCollection` - Mutable registration builder.
    * :class:`ServiceProvider` - Resolver with singleton caching and disposal.

System Role:
    Lives in the composition layer. The host builder and the test fixture
    create one provider each; providers never share cached instances.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from types import TracebackType
from typing import Any, TypeVar, cast

from ..domain.enums import Lifetime
from ..domain.errors import ContainerDisposedError, RegistrationError, ResolutionError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ServiceFactory = Callable[["ServiceProvider"], object]
"""Factory signature: receives the provider so it can resolve dependencies."""


def _name(capability: object) -> str:
    return str(getattr(capability, "__qualname__", repr(capability)))


@dataclass(frozen=True, slots=True)
class ServiceDescriptor:
    """A single registration held by a collection or provider.

    Exactly one of ``implementation``, ``factory`` or ``instance`` is set.

    Attributes:
        capability: Type used as the lookup key.
        lifetime: Whether resolutions share one instance or get fresh ones.
        implementation: Class instantiated without arguments.
        factory: Callable receiving the provider and returning the instance.
        instance: Pre-built object returned as-is (never closed by the provider).
    """

    capability: type[Any]
    lifetime: Lifetime
    implementation: type[Any] | None = None
    factory: ServiceFactory | None = None
    instance: object | None = None

    @property
    def implementation_name(self) -> str:
        """Human-readable name of whatever produces the service."""
        if self.instance is not None:
            return _name(type(self.instance))
        if self.factory is not None:
            return _name(self.factory)
        return _name(self.implementation)

    def create(self, provider: ServiceProvider) -> object:
        """Build a new instance from the factory or implementation class."""
        if self.factory is not None:
            return self.factory(provider)
        implementation = cast("type[Any]", self.implementation)
        return implementation()


class ServiceCollection:
    """Mutable set of registrations, turned into a provider by :meth:`build`.

    A later registration for the same capability replaces the earlier one.

    Example:
        >>> from myservice.adapters.services import HelloWorldService
        >>> from myservice.application.ports import MyService
        >>> services = ServiceCollection().add_singleton(MyService, HelloWorldService)
        >>> MyService in services
        True
        >>> provider = services.build()
        >>> provider.resolve(MyService).get_data()
        'Hello, World!'
        >>> provider.resolve(MyService) is provider.resolve(MyService)
        True
    """

    def __init__(self) -> None:
        self._descriptors: dict[type[Any], ServiceDescriptor] = {}

    def add_singleton(
        self,
        capability: type[Any],
        implementation: type[Any] | None = None,
        *,
        factory: ServiceFactory | None = None,
        instance: object | None = None,
    ) -> ServiceCollection:
        """Register ``capability`` with one instance per provider.

        Args:
            capability: Type used as the lookup key.
            implementation: Class to instantiate. Defaults to ``capability``
                itself when no factory or instance is given.
            factory: Callable receiving the provider, called once.
            instance: Pre-built object shared by every resolution.

        Returns:
            This collection, for chaining.

        Raises:
            RegistrationError: If more than one source is given, or the
                capability or implementation is not a class.
        """
        return self._add(capability, Lifetime.SINGLETON, implementation, factory, instance)

    def add_transient(
        self,
        capability: type[Any],
        implementation: type[Any] | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> ServiceCollection:
        """Register ``capability`` with a fresh instance for every resolution.

        Raises:
            RegistrationError: If both sources are given, or the capability
                or implementation is not a class.
        """
        return self._add(capability, Lifetime.TRANSIENT, implementation, factory, None)

    def _add(
        self,
        capability: type[Any],
        lifetime: Lifetime,
        implementation: type[Any] | None,
        factory: ServiceFactory | None,
        instance: object | None,
    ) -> ServiceCollection:
        if not inspect.isclass(capability):
            raise RegistrationError(f"Capability must be a class, got {capability!r}")
        sources = [source for source in (implementation, factory, instance) if source is not None]
        if len(sources) > 1:
            raise RegistrationError(
                f"Registration for {_name(capability)} must name only one of implementation, factory or instance"
            )
        if not sources:
            implementation = capability
        if implementation is not None and not inspect.isclass(implementation):
            raise RegistrationError(f"Implementation for {_name(capability)} must be a class, got {implementation!r}")
        if factory is not None and not callable(factory):
            raise RegistrationError(f"Factory for {_name(capability)} must be callable, got {factory!r}")

        descriptor = ServiceDescriptor(
            capability=capability,
            lifetime=lifetime,
            implementation=implementation,
            factory=factory,
            instance=instance,
        )
        if capability in self._descriptors:
            logger.debug("Replacing registration for %s", _name(capability))
        self._descriptors[capability] = descriptor
        logger.debug(
            "Registered %s -> %s (%s)",
            _name(capability),
            descriptor.implementation_name,
            lifetime.value,
        )
        return self

    def __contains__(self, capability: object) -> bool:
        return capability in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(tuple(self._descriptors.values()))

    def build(self) -> ServiceProvider:
        """Snapshot the current registrations into a new provider."""
        logger.debug("Building service provider with %d registration(s)", len(self._descriptors))
        return ServiceProvider(self._descriptors.values())


class ServiceProvider:
    """Resolve registered capabilities, caching singletons.

    Disposal closes singletons this provider created (in reverse creation
    order) when they define ``close()``. Objects returned earlier stay
    usable; further resolutions raise :class:`ContainerDisposedError`.
    """

    def __init__(self, descriptors: Iterable[ServiceDescriptor]) -> None:
        self._descriptors: dict[type[Any], ServiceDescriptor] = {d.capability: d for d in descriptors}
        self._singletons: dict[type[Any], object] = {}
        self._created: list[object] = []
        self._resolving: set[type[Any]] = set()
        self._disposed = False

    @property
    def registrations(self) -> tuple[ServiceDescriptor, ...]:
        """Registrations known to this provider, in registration order."""
        return tuple(self._descriptors.values())

    @property
    def disposed(self) -> bool:
        return self._disposed

    def is_registered(self, capability: object) -> bool:
        return capability in self._descriptors

    def resolve(self, capability: type[T]) -> T:
        """Return the instance bound to ``capability``.

        Raises:
            ResolutionError: If the capability is not registered or its
                implementation failed to construct.
            ContainerDisposedError: If the provider was disposed.
        """
        self._ensure_active()
        descriptor = self._descriptors.get(capability)
        if descriptor is None:
            raise ResolutionError(capability, f"No service registered for {_name(capability)}")

        if descriptor.instance is not None:
            return cast(T, descriptor.instance)
        if descriptor.lifetime is Lifetime.TRANSIENT:
            return cast(T, self._create(descriptor))

        if capability not in self._singletons:
            instance = self._create(descriptor)
            self._singletons[capability] = instance
            self._created.append(instance)
        return cast(T, self._singletons[capability])

    def get(self, capability: type[T], default: T | None = None) -> T | None:
        """Return the instance bound to ``capability``, or ``default`` if unregistered.

        Construction failures still raise :class:`ResolutionError`.
        """
        self._ensure_active()
        if capability not in self._descriptors:
            return default
        return self.resolve(capability)

    def _create(self, descriptor: ServiceDescriptor) -> object:
        capability = descriptor.capability
        if capability in self._resolving:
            raise ResolutionError(capability, f"Circular dependency while resolving {_name(capability)}")
        self._resolving.add(capability)
        try:
            instance = descriptor.create(self)
        except ResolutionError:
            raise
        except Exception as exc:
            raise ResolutionError(capability, f"Failed to construct {_name(capability)}: {exc}") from exc
        finally:
            self._resolving.discard(capability)
        logger.debug("Created %s for %s", _name(type(instance)), _name(capability))
        return instance

    def _ensure_active(self) -> None:
        if self._disposed:
            raise ContainerDisposedError("Service provider has been disposed")

    def dispose(self) -> None:
        """Release created singletons. Safe to call more than once.

        Every ``close()`` is attempted; the first failure is re-raised after
        the remaining instances were closed.
        """
        if self._disposed:
            return
        self._disposed = True
        created = list(reversed(self._created))
        self._created.clear()
        self._singletons.clear()

        failures: list[Exception] = []
        for instance in created:
            close = getattr(instance, "close", None)
            if not callable(close):
                continue
            logger.debug("Closing %s", _name(type(instance)))
            try:
                close()
            except Exception as exc:
                logger.error("Closing %s failed", _name(type(instance)), exc_info=True)
                failures.append(exc)
        if failures:
            raise failures[0]

    def __enter__(self) -> ServiceProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()


__all__ = [
    "ServiceCollection",
    "ServiceDescriptor",
    "ServiceFactory",
    "ServiceProvider",
]
